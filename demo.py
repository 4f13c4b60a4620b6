from __future__ import annotations
import logging

from bookledger import LibraryManager, LibraryError, seed_demo_data, settings

logger = logging.getLogger("bookledger.demo")


def demo_flow() -> None:
    lib = LibraryManager()
    readers = seed_demo_data(lib)

    # Availability
    logger.info("[demo] available Dune copy: %s", lib.get_available_book("Dune"))
    logger.info("[demo] available Clean Code copy: %s", lib.get_available_book("Clean Code"))

    # Paul already holds a Dune copy, so a second rental is refused
    try:
        lib.start_rental(lib.get_available_book("Dune"), readers["Paul"], "21-01-2024")
    except LibraryError as e:
        logger.info("[demo] second rental for Paul DENIED: %s", e)

    # History and ongoing rentals
    for book_id in sorted(lib.get_books(), key=int):
        history = lib.get_rentals(book_id)
        if history:
            logger.info("[demo] rentals of %s: %s", book_id, history)
    logger.info("[demo] ongoing: %s", lib.get_ongoing_rentals())

    # Archive maintenance and stats
    before = lib.rental_counts()
    removed = lib.remove_books()
    logger.info("[demo] removed never-rented copies: %s", removed)
    logger.info("[demo] titles after pruning: %s", lib.get_titles())
    logger.info("[demo] rental counts: %s (before pruning: %s)", lib.rental_counts(), before)
    logger.info("[demo] book worm: %s", lib.get_reader_name(lib.find_book_worm()))


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    demo_flow()
