from __future__ import annotations

import re
from datetime import date, datetime
from typing import List, Optional

from .config import settings
from .errors import DateFormatError

_DIRECTIVES = {"%d": "[0-9]{2}", "%m": "[0-9]{2}", "%Y": "[0-9]{4}"}


class DateValidator:
    """Parses and renders archive dates.

    strptime alone accepts single-digit days and months ("1-1-2024"), so the
    text is matched against a fixed-width pattern built from the format first.
    """

    def __init__(self, date_format: Optional[str] = None) -> None:
        self.date_format = date_format or settings.date_format
        parts = re.split(r"(%[dmY])", self.date_format)
        self._pattern = re.compile("".join(_DIRECTIVES.get(p, re.escape(p)) for p in parts))

    def parse(self, text: Optional[str]) -> date:
        if text is None:
            raise DateFormatError("Date is missing.")
        if not self._pattern.fullmatch(text):
            raise DateFormatError(f"Date '{text}' does not match format {self.date_format}.")
        try:
            return datetime.strptime(text, self.date_format).date()
        except ValueError as e:
            # well-formed but impossible, e.g. 31-02-2024
            raise DateFormatError(f"Date '{text}' is not a valid calendar date.") from e

    def format(self, value: date) -> str:
        return value.strftime(self.date_format)


class TitleValidator:
    @staticmethod
    def split_donation(text: Optional[str], separator: Optional[str] = None) -> List[str]:
        """Split donated titles, dropping blank segments."""
        if not text:
            return []
        sep = separator or settings.donation_separator
        return [seg.strip() for seg in text.split(sep) if seg.strip()]
