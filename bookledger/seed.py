from __future__ import annotations
import logging
from typing import Dict

from .api import LibraryManager

logger = logging.getLogger(__name__)


def seed_demo_data(lib: LibraryManager) -> Dict[str, str]:
    """Populate an archive with a few titles, readers and rentals.

    Returns the ids of the seeded readers keyed by first name.
    """
    # books
    for _ in range(2):
        lib.add_book("Dune")
    lib.add_book("Clean Code")
    lib.receive_donation("Foundation,Foundation,The Hobbit")

    # readers
    readers = {
        "Paul": lib.add_reader("Paul", "Atreides"),
        "Hari": lib.add_reader("Hari", "Seldon"),
        "Bilbo": lib.add_reader("Bilbo", "Baggins"),
    }

    # rentals: one closed, two ongoing
    dune = lib.get_available_book("Dune")
    lib.start_rental(dune, readers["Paul"], "01-01-2024")
    lib.end_rental(dune, readers["Paul"], "15-01-2024")
    lib.start_rental(dune, readers["Paul"], "20-01-2024")

    foundation = lib.get_available_book("Foundation")
    lib.start_rental(foundation, readers["Hari"], "03-02-2024")

    logger.info("[seed] titles: %s", lib.get_titles())
    logger.info("[seed] readers: %s", [lib.get_reader_name(r) for r in readers.values()])
    return readers
