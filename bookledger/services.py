from __future__ import annotations
import logging
from collections import Counter
from typing import Dict, List, Optional, Set

from .config import Settings, settings as default_settings
from .domain import Copy, IdSequence, Person, Rental
from .errors import (
    AlreadyRentedError,
    AlreadyRentingError,
    BookNotFoundError,
    NotRentedError,
    ReaderNotFoundError,
)
from .repositories import CopyRepo, ReaderRepo, RentalRepo
from .validators import DateValidator, TitleValidator

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(
        self,
        copies: CopyRepo,
        rentals: RentalRepo,
        ids: IdSequence,
        settings: Optional[Settings] = None,
    ) -> None:
        self.copies = copies
        self.rentals = rentals
        self.ids = ids
        self.settings = settings or default_settings

    def add_book(self, title: str) -> str:
        c = Copy(copy_id=self.ids.next_id(), title=title)
        self.copies.add_copy(c)
        self.rentals.open_entry(c.copy_id)
        logger.debug("Added copy %s of '%s'", c.copy_id, title)
        return c.copy_id

    def receive_donation(self, donated_titles: str) -> List[str]:
        titles = TitleValidator.split_donation(donated_titles, self.settings.donation_separator)
        added = [self.add_book(t) for t in titles]
        logger.info("Donation received: %d copies across %d titles", len(added), len(set(titles)))
        return added

    def titles(self) -> Dict[str, int]:
        return {t: self.copies.count_for_title(t) for t in self.copies.list_titles()}

    def book_ids(self) -> Set[str]:
        return set(self.copies.list_copy_ids())

    def copies_of(self, title: str) -> List[Copy]:
        if not self.copies.has_title(title):
            raise BookNotFoundError(f"Book '{title}' not present")
        return self.copies.list_copies_for_title(title)


class ReaderService:
    def __init__(self, readers: ReaderRepo, ids: IdSequence) -> None:
        self.readers = readers
        self.ids = ids

    def register_reader(self, first_name: str, last_name: str) -> str:
        p = Person(reader_id=self.ids.next_id(), first_name=first_name, last_name=last_name)
        self.readers.add(p)
        logger.debug("Registered reader %s", p.reader_id)
        return p.reader_id

    def get(self, reader_id: str) -> Person:
        reader = self.readers.get(reader_id)
        if reader is None:
            raise ReaderNotFoundError(f"Reader {reader_id} not present")
        return reader


class RentalService:
    """
    The copy/reader state machine. Every check runs before the first mutation,
    so a rejected call leaves flags and ledger untouched.
    """

    def __init__(
        self,
        catalog: CatalogService,
        readers: ReaderService,
        rentals: RentalRepo,
        settings: Optional[Settings] = None,
    ) -> None:
        self.catalog = catalog
        self.readers = readers
        self.rentals = rentals
        self.settings = settings or default_settings
        self.dates = DateValidator(self.settings.date_format)

    def _get_copy(self, copy_id: str) -> Copy:
        copy = self.catalog.copies.get_copy(copy_id)
        if copy is None:
            raise BookNotFoundError(f"Book {copy_id} not present")
        return copy

    def available_copy(self, title: str) -> str:
        for c in self.catalog.copies_of(title):
            if not c.rented:
                return c.copy_id
        return self.settings.not_available

    def start_rental(self, copy_id: str, reader_id: str, starting_date: str) -> Rental:
        copy = self._get_copy(copy_id)
        reader = self.readers.get(reader_id)
        if copy.rented:
            raise AlreadyRentedError(f"Book {copy_id} is already rented")
        if reader.rents:
            raise AlreadyRentingError(f"Reader {reader_id} is already renting a book")
        start = self.dates.parse(starting_date)

        rental = Rental(copy_id=copy_id, reader_id=reader_id, title=copy.title, start_date=start)
        self.rentals.add(rental)
        copy.rented = True
        reader.rents = True
        logger.debug("Rental opened: copy=%s reader=%s", copy_id, reader_id)
        return rental

    def end_rental(self, copy_id: str, reader_id: str, ending_date: str) -> Rental:
        copy = self._get_copy(copy_id)
        reader = self.readers.get(reader_id)
        rental = self.rentals.get_open_for_copy(copy_id)
        if rental is None:
            raise NotRentedError(f"Book {copy_id} is not rented")
        if rental.reader_id != reader_id:
            raise NotRentedError(
                f"Book {copy_id} is rented by reader {rental.reader_id}, not {reader_id}"
            )
        end = self.dates.parse(ending_date)

        rental.close(end)
        copy.rented = False
        reader.rents = False
        logger.debug("Rental closed: copy=%s reader=%s", copy_id, reader_id)
        return rental

    def describe(self, rental: Rental) -> str:
        start = self.dates.format(rental.start_date)
        end = (
            self.dates.format(rental.end_date)
            if rental.end_date is not None
            else self.settings.ongoing_marker
        )
        return f"{start} {end}"

    def rentals_of(self, copy_id: str) -> Dict[str, str]:
        history = self.rentals.history(copy_id)
        if history is None:
            raise BookNotFoundError(f"No such book {copy_id}")
        info: Dict[str, str] = {}
        # later rentals by the same reader overwrite earlier ones
        for r in history:
            info[r.reader_id] = self.describe(r)
        return {k: info[k] for k in sorted(info, key=int)}


class ArchiveService:
    def __init__(self, copies: CopyRepo, rentals: RentalRepo) -> None:
        self.copies = copies
        self.rentals = rentals

    def remove_never_rented(self) -> List[str]:
        removed: List[str] = []
        for copy_id in self.copies.list_copy_ids():
            if self.rentals.history(copy_id):
                continue
            self.copies.remove_copy(copy_id)
            self.rentals.drop_entry(copy_id)
            removed.append(copy_id)
        logger.info("Archive pruned: %d never-rented copies removed", len(removed))
        return removed


class StatsService:
    def __init__(self, copies: CopyRepo, rentals: RentalRepo, dates: DateValidator) -> None:
        self.copies = copies
        self.rentals = rentals
        self.dates = dates

    def ongoing_rentals(self) -> Dict[str, str]:
        return {
            r.reader_id: f"{r.copy_id} {self.dates.format(r.start_date)}"
            for r in self.rentals.list_open()
        }

    def book_worm(self) -> str:
        counts = Counter(r.reader_id for r in self.rentals.list_all())
        if not counts:
            raise ReaderNotFoundError("No rentals recorded yet")
        # highest count, then lowest numeric id
        return min(counts, key=lambda rid: (-counts[rid], int(rid)))

    def rental_counts(self) -> Dict[str, int]:
        by_title = Counter(r.title for r in self.rentals.list_all())
        return {t: by_title.get(t, 0) for t in self.copies.list_titles()}
