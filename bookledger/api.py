from __future__ import annotations
import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Set

from .config import Settings, settings as default_settings
from .domain import IdSequence, IdSpace
from .errors import LibraryError
from .repositories import CopyRepo, ReaderRepo, RentalRepo
from .services import (
    ArchiveService,
    CatalogService,
    ReaderService,
    RentalService,
    StatsService,
)

logger = logging.getLogger(__name__)


class LibraryManager:
    """
    A facade that wires repos + services and offers the archive API.

    Every public call runs under one re-entrant lock, so each operation is
    applied to catalog, registries and ledger as a single unit.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings
        self._lock = threading.RLock()

        # id spaces
        self.book_ids = IdSequence(IdSpace.BOOK, self.settings.first_id)
        self.reader_ids = IdSequence(IdSpace.READER, self.settings.first_id)

        # repos
        self.copies = CopyRepo()
        self.readers = ReaderRepo()
        self.rentals = RentalRepo()

        # services
        self.catalog = CatalogService(self.copies, self.rentals, self.book_ids, self.settings)
        self.reader_service = ReaderService(self.readers, self.reader_ids)
        self.circulation = RentalService(self.catalog, self.reader_service, self.rentals, self.settings)
        self.archive = ArchiveService(self.copies, self.rentals)
        self.stats = StatsService(self.copies, self.rentals, self.circulation.dates)

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        with self._lock:
            try:
                yield
            except LibraryError as e:
                logger.warning("[%s] rejected: %s", name, e)
                raise

    # ---- books / catalog
    def add_book(self, title: str) -> str:
        with self._operation("add_book"):
            return self.catalog.add_book(title)

    def get_titles(self) -> Dict[str, int]:
        with self._operation("get_titles"):
            return self.catalog.titles()

    def get_books(self) -> Set[str]:
        with self._operation("get_books"):
            return self.catalog.book_ids()

    # ---- readers
    def add_reader(self, first_name: str, last_name: str) -> str:
        with self._operation("add_reader"):
            return self.reader_service.register_reader(first_name, last_name)

    def get_reader_name(self, reader_id: str) -> str:
        with self._operation("get_reader_name"):
            return self.reader_service.get(reader_id).full_name

    # ---- rentals
    def get_available_book(self, title: str) -> str:
        with self._operation("get_available_book"):
            return self.circulation.available_copy(title)

    def start_rental(self, book_id: str, reader_id: str, starting_date: str) -> None:
        with self._operation("start_rental"):
            self.circulation.start_rental(book_id, reader_id, starting_date)

    def end_rental(self, book_id: str, reader_id: str, ending_date: str) -> None:
        with self._operation("end_rental"):
            self.circulation.end_rental(book_id, reader_id, ending_date)

    def get_rentals(self, book_id: str) -> Dict[str, str]:
        with self._operation("get_rentals"):
            return self.circulation.rentals_of(book_id)

    # ---- donations
    def receive_donation(self, donated_titles: str) -> List[str]:
        with self._operation("receive_donation"):
            return self.catalog.receive_donation(donated_titles)

    # ---- archive management
    def get_ongoing_rentals(self) -> Dict[str, str]:
        with self._operation("get_ongoing_rentals"):
            return self.stats.ongoing_rentals()

    def remove_books(self) -> List[str]:
        with self._operation("remove_books"):
            return self.archive.remove_never_rented()

    # ---- stats
    def find_book_worm(self) -> str:
        with self._operation("find_book_worm"):
            return self.stats.book_worm()

    def rental_counts(self) -> Dict[str, int]:
        with self._operation("rental_counts"):
            return self.stats.rental_counts()
