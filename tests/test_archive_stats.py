import pytest

from bookledger import ReaderNotFoundError


@pytest.fixture
def busy_archive(lib):
    """
    Dune 1000-1002, Emma 1003, Ulysses 1004; readers 1000-1002.
    Dune 1000 rented twice, Dune 1001 once and still out, Emma and Ulysses never.
    """
    lib.receive_donation("Dune,Dune,Dune,Emma,Ulysses")
    for first, last in [("Paul", "Atreides"), ("Jessica", "Atreides"), ("Leto", "Atreides")]:
        lib.add_reader(first, last)
    lib.start_rental("1000", "1000", "01-01-2024")
    lib.end_rental("1000", "1000", "15-01-2024")
    lib.start_rental("1000", "1001", "16-01-2024")
    lib.end_rental("1000", "1001", "20-01-2024")
    lib.start_rental("1001", "1000", "21-01-2024")
    return lib


def test_ongoing_rentals(busy_archive):
    assert busy_archive.get_ongoing_rentals() == {"1000": "1001 21-01-2024"}


def test_ongoing_rentals_empty(lib):
    assert lib.get_ongoing_rentals() == {}


def test_ongoing_rentals_after_rerent(dune_archive):
    lib = dune_archive
    lib.start_rental("1000", "1000", "01-01-2024")
    lib.end_rental("1000", "1000", "15-01-2024")
    lib.start_rental("1000", "1000", "20-01-2024")
    assert lib.get_ongoing_rentals() == {"1000": "1000 20-01-2024"}
    assert lib.rental_counts() == {"Dune": 2}


def test_remove_books_drops_never_rented(busy_archive, check_invariants):
    lib = busy_archive
    removed = lib.remove_books()
    assert removed == ["1002", "1003", "1004"]
    assert lib.get_books() == {"1000", "1001"}
    # emptied titles disappear from the catalog
    assert lib.get_titles() == {"Dune": 2}
    assert not lib.rentals.has_entry("1003")
    with pytest.raises(LookupError):
        lib.get_rentals("1003")
    check_invariants(lib)


def test_remove_books_keeps_returned_copies(busy_archive):
    lib = busy_archive
    lib.end_rental("1001", "1000", "25-01-2024")
    lib.remove_books()
    assert lib.get_books() == {"1000", "1001"}
    assert lib.get_available_book("Dune") in {"1000", "1001"}


def test_remove_books_is_idempotent(busy_archive):
    lib = busy_archive
    lib.remove_books()
    snapshot = (lib.get_titles(), lib.get_books(), lib.rental_counts())
    assert lib.remove_books() == []
    assert (lib.get_titles(), lib.get_books(), lib.rental_counts()) == snapshot


def test_ids_not_reused_after_removal(busy_archive):
    lib = busy_archive
    lib.remove_books()
    assert lib.add_book("Emma") == "1005"


def test_removed_title_unavailable(busy_archive):
    lib = busy_archive
    lib.remove_books()
    with pytest.raises(LookupError):
        lib.get_available_book("Emma")


def test_rental_counts_includes_zero_titles(busy_archive):
    assert busy_archive.rental_counts() == {"Dune": 3, "Emma": 0, "Ulysses": 0}


def test_rental_counts_survive_pruning(busy_archive):
    lib = busy_archive
    before = lib.rental_counts()
    lib.remove_books()
    after = lib.rental_counts()
    assert after["Dune"] == before["Dune"] == 3
    assert {t: n for t, n in before.items() if n} == after


def test_find_book_worm(busy_archive):
    # Paul: two rentals (one open), Jessica: one
    assert busy_archive.find_book_worm() == "1000"


def test_find_book_worm_tie_picks_lowest_id(lib):
    copy_id = lib.add_book("Dune")
    for first in ["Paul", "Jessica", "Leto"]:
        lib.add_reader(first, "Atreides")
    lib.start_rental(copy_id, "1002", "01-01-2024")
    lib.end_rental(copy_id, "1002", "02-01-2024")
    lib.start_rental(copy_id, "1001", "03-01-2024")
    lib.end_rental(copy_id, "1001", "04-01-2024")
    assert lib.find_book_worm() == "1001"


def test_find_book_worm_without_rentals(dune_archive):
    with pytest.raises(ReaderNotFoundError, match="No rentals recorded yet"):
        dune_archive.find_book_worm()
