from collections import Counter

import pytest

from bookledger import LibraryManager, Settings


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def lib(settings):
    # Fresh archive per test; ids start at 1000
    return LibraryManager(settings=settings)


@pytest.fixture
def dune_archive(lib):
    """Two Dune copies (1000, 1001) and one reader, Paul (1000)."""
    lib.add_book("Dune")
    lib.add_book("Dune")
    lib.add_reader("Paul", "Atreides")
    return lib


def _check_invariants(lib: LibraryManager) -> None:
    # every copy in exactly one bucket and in the registry
    bucketed = [c.copy_id for t in lib.copies.list_titles() for c in lib.copies.list_copies_for_title(t)]
    assert sorted(bucketed) == sorted(lib.copies.list_copy_ids())
    assert len(bucketed) == len(set(bucketed))

    for copy_id in lib.copies.list_copy_ids():
        history = lib.rentals.history(copy_id)
        assert history is not None
        open_count = sum(1 for r in history if r.is_open)
        assert open_count <= 1
        assert lib.copies.get_copy(copy_id).rented == (open_count == 1)

    open_by_reader = Counter(r.reader_id for r in lib.rentals.list_open())
    for reader in lib.readers.list_all():
        assert open_by_reader.get(reader.reader_id, 0) <= 1
        assert reader.rents == (open_by_reader.get(reader.reader_id, 0) == 1)


@pytest.fixture
def check_invariants():
    return _check_invariants
