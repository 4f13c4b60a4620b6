"""
bookledger package.

Exports key modules for convenient imports.
"""

from .domain import (
    IdSpace,
    IdSequence,
    Copy,
    Person,
    Rental,
)

from .errors import (
    LibraryError,
    NotFoundError,
    BookNotFoundError,
    ReaderNotFoundError,
    RentalConflictError,
    AlreadyRentedError,
    AlreadyRentingError,
    NotRentedError,
    InvalidInputError,
    DateFormatError,
)

from .repositories import (
    CopyRepo,
    ReaderRepo,
    RentalRepo,
)

from .services import (
    CatalogService,
    ReaderService,
    RentalService,
    ArchiveService,
    StatsService,
)

from .config import Settings, settings
from .api import LibraryManager
from .seed import seed_demo_data

__all__ = [
    # domain
    "IdSpace",
    "IdSequence",
    "Copy",
    "Person",
    "Rental",
    # errors
    "LibraryError",
    "NotFoundError",
    "BookNotFoundError",
    "ReaderNotFoundError",
    "RentalConflictError",
    "AlreadyRentedError",
    "AlreadyRentingError",
    "NotRentedError",
    "InvalidInputError",
    "DateFormatError",
    # repos
    "CopyRepo",
    "ReaderRepo",
    "RentalRepo",
    # services
    "CatalogService",
    "ReaderService",
    "RentalService",
    "ArchiveService",
    "StatsService",
    # config
    "Settings",
    "settings",
    # api
    "LibraryManager",
    # seed
    "seed_demo_data",
]
