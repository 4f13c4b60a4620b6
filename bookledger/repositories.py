from __future__ import annotations
from typing import Dict, List, Optional

from .domain import Copy, Person, Rental


class CopyRepo:
    """Catalog (title -> copy ids) and copy registry (copy id -> Copy)."""

    def __init__(self) -> None:
        self._catalog: Dict[str, List[str]] = {}
        self._copies: Dict[str, Copy] = {}

    # catalog
    def has_title(self, title: str) -> bool:
        return title in self._catalog

    def list_titles(self) -> List[str]:
        return sorted(self._catalog)

    def count_for_title(self, title: str) -> int:
        return len(self._catalog.get(title, []))

    def list_copies_for_title(self, title: str) -> List[Copy]:
        return [self._copies[cid] for cid in self._catalog.get(title, [])]

    # copies
    def add_copy(self, copy: Copy) -> None:
        self._catalog.setdefault(copy.title, []).append(copy.copy_id)
        self._copies[copy.copy_id] = copy

    def get_copy(self, copy_id: str) -> Optional[Copy]:
        return self._copies.get(copy_id)

    def list_copy_ids(self) -> List[str]:
        return list(self._copies)

    def remove_copy(self, copy_id: str) -> Optional[Copy]:
        copy = self._copies.pop(copy_id, None)
        if copy is None:
            return None
        bucket = self._catalog.get(copy.title, [])
        if copy_id in bucket:
            bucket.remove(copy_id)
        # titles without copies are not listed
        if not bucket:
            self._catalog.pop(copy.title, None)
        return copy


class ReaderRepo:
    def __init__(self) -> None:
        self._readers: Dict[str, Person] = {}

    def add(self, reader: Person) -> None:
        self._readers[reader.reader_id] = reader

    def get(self, reader_id: str) -> Optional[Person]:
        return self._readers.get(reader_id)

    def list_all(self) -> List[Person]:
        return list(self._readers.values())


class RentalRepo:
    """The ledger: per-copy rental history, oldest first."""

    def __init__(self) -> None:
        self._ledger: Dict[str, List[Rental]] = {}

    def open_entry(self, copy_id: str) -> None:
        self._ledger.setdefault(copy_id, [])

    def has_entry(self, copy_id: str) -> bool:
        return copy_id in self._ledger

    def drop_entry(self, copy_id: str) -> None:
        self._ledger.pop(copy_id, None)

    def history(self, copy_id: str) -> Optional[List[Rental]]:
        items = self._ledger.get(copy_id)
        return list(items) if items is not None else None

    def add(self, rental: Rental) -> None:
        self._ledger[rental.copy_id].append(rental)

    def get_open_for_copy(self, copy_id: str) -> Optional[Rental]:
        return next((r for r in self._ledger.get(copy_id, []) if r.is_open), None)

    def list_all(self) -> List[Rental]:
        return [r for items in self._ledger.values() for r in items]

    def list_open(self) -> List[Rental]:
        return [r for r in self.list_all() if r.is_open]

    def list_by_reader(self, reader_id: str) -> List[Rental]:
        return [r for r in self.list_all() if r.reader_id == reader_id]
