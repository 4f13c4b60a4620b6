class LibraryError(Exception):
    """Base exception for archive errors."""


class NotFoundError(LibraryError, LookupError):
    """An identifier or title is not present in the archive."""


class BookNotFoundError(NotFoundError):
    """Unknown copy id or title."""


class ReaderNotFoundError(NotFoundError):
    """Unknown reader id."""


class RentalConflictError(LibraryError):
    """start/end rental violates the rental state machine."""


class AlreadyRentedError(RentalConflictError):
    """The copy is already out on loan."""


class AlreadyRentingError(RentalConflictError):
    """The reader already holds a copy."""


class NotRentedError(RentalConflictError):
    """No matching open rental exists for the copy."""


class InvalidInputError(LibraryError, ValueError):
    """Malformed input text."""


class DateFormatError(InvalidInputError):
    """Date text does not match DD-MM-YYYY."""
