from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum, auto
from typing import Optional

logger = logging.getLogger(__name__)


class IdSpace(Enum):
    BOOK = auto()
    READER = auto()


class IdSequence:
    """Monotonic textual ids for one id space. Ids are never handed out twice."""

    def __init__(self, space: IdSpace, start: int = 1000) -> None:
        self.space = space
        self._next = start

    def next_id(self) -> str:
        value = self._next
        self._next += 1
        logger.debug("Issued %s id %d", self.space.name.lower(), value)
        return str(value)

    def __repr__(self) -> str:
        return f"IdSequence(space={self.space.name}, next={self._next})"


@dataclass
class Copy:
    copy_id: str
    title: str
    rented: bool = False


@dataclass
class Person:
    reader_id: str
    first_name: str
    last_name: str
    rents: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class Rental:
    copy_id: str
    reader_id: str
    title: str
    start_date: date
    end_date: Optional[date] = None

    @property
    def is_open(self) -> bool:
        return self.end_date is None

    def close(self, when: date) -> None:
        self.end_date = when
