from maybe_baby import Maybe
from maybe_baby.logger import setup_logger

logger = setup_logger(name="maybe_baby.example", level="INFO")

if __name__ == "__main__":
    # Data object
    person = {
        "first_name": "John",
        "last_name": None,
        "emails": ["john@example.com"],
    }

    m_person = Maybe.of(person)

    # Access properties
    first_name = m_person.prop("first_name")
    last_name = m_person.prop("last_name")
    address = m_person.prop("address")

    logger.info(f"first_name: just={first_name.is_just()} value={first_name.join()}")
    logger.info(f"last_name: just={last_name.is_just()} value={last_name.join()}")
    logger.info(f"address: just={address.is_just()} value={address.join()}")

    # Deep access
    logger.info(f"primary email: {m_person.path('emails.0').join()}")
    logger.info(f"city: {m_person.path('address.city').or_else('unknown').join()}")
    logger.info(f"unsafe accessor: {Maybe.of(lambda: person['address']['city'])}")
