import pytest

from labkit.library import Book, Library, LibraryError, Member, run_program


@pytest.fixture
def library():
    lib = Library()
    lib.add_book(Book("T", "A", "i1", 2, 2))
    lib.register_member(Member("m1", "Bob", 1))
    return lib


def test_book_defaults():
    book = Book()
    assert (book.title, book.author, book.isbn) == ("UnknownTitle", "UnknownAuthor", "ISBN")
    assert (book.copies_available, book.total_copies) == (0, 5)


def test_copy_as_changes_only_isbn():
    book = Book("T", "A", "i1", 2, 4)
    copy = book.copy_as("i2")
    assert copy.isbn == "i2"
    assert (copy.title, copy.author, copy.copies_available, copy.total_copies) == ("T", "A", 2, 4)
    assert book.isbn == "i1"


def test_update_copies_moves_both_counts():
    book = Book("T", "A", "i1", 2, 4)
    book.update_copies(-2)
    assert (book.copies_available, book.total_copies) == (0, 2)


def test_update_copies_rejects_negative():
    book = Book("T", "A", "i1", 1, 4)
    with pytest.raises(LibraryError, match="Count becomes negative"):
        book.update_copies(-2)
    assert book.copies_available == 1


def test_book_borrow_and_return_bounds():
    book = Book("T", "A", "i1", 1, 1)
    with pytest.raises(LibraryError, match="exceeds total copies"):
        book.give_back()
    book.borrow()
    with pytest.raises(LibraryError, match="not available"):
        book.borrow()
    book.give_back()
    assert book.copies_available == book.total_copies


def test_member_limit_and_details():
    member = Member("m1", "Bob", 2)
    member.borrow("b")
    member.borrow("a")
    assert member.details() == ["m1 Bob a 1", "m1 Bob b 1"]
    with pytest.raises(LibraryError, match="Borrow limit exceeded"):
        member.borrow("c")
    member.give_back("a")
    assert member.details() == ["m1 Bob b 1"]
    assert member.borrow_limit == 1


def test_member_return_unborrowed():
    with pytest.raises(LibraryError, match="Book not borrowed"):
        Member("m1", "Bob").give_back("x")


def test_duplicates_rejected(library):
    with pytest.raises(LibraryError, match="same isbn"):
        library.add_book(Book("X", "Y", "i1", 1, 1))
    with pytest.raises(LibraryError, match="same id"):
        library.register_member(Member("m1", "Ann"))


def test_borrow_and_return_round_trip(library):
    library.borrow_book("m1", "i1")
    assert library.find_book("i1").copies_available == 1
    library.return_book("m1", "i1")
    assert library.find_book("i1").copies_available == 2
    assert library.find_member("m1").borrow_limit == 1


def test_borrow_errors(library):
    with pytest.raises(LibraryError, match="Book not found"):
        library.borrow_book("m1", "zz")
    with pytest.raises(LibraryError, match="No such member exists"):
        library.borrow_book("zz", "i1")


def test_return_errors(library):
    with pytest.raises(LibraryError, match="Member is not registered"):
        library.return_book("zz", "i1")
    with pytest.raises(LibraryError, match="exceeds total copies"):
        library.return_book("m1", "i1")
    library.register_member(Member("m2", "Ann"))
    library.borrow_book("m2", "i1")
    with pytest.raises(LibraryError, match="Book not borrowed"):
        library.return_book("m1", "i1")


def test_find_missing_returns_none(library):
    assert library.find_book("zz") is None
    assert library.find_member("zz") is None


def test_summary(library):
    assert library.summary() == ["T A 2", "m1 Bob"]


def test_run_program_scenario():
    text = (
        "Book T A i1 2 2 Member m1 Bob 1 Borrow m1 i1 Borrow m1 i1 "
        "PrintMember m1 PrintLibrary Done"
    )
    assert run_program(text) == (
        "Invalid request! Borrow limit exceeded\nm1 Bob i1 1\nT A 1\nm1 Bob\n"
    )


def test_run_program_failed_lookup_repeats_command():
    text = "Book T A i1 1 1 PrintBook nope i1 Done"
    assert run_program(text) == (
        "Invalid request! Book with given ISBN does not exist\nT A\n"
    )


def test_run_program_existing_book_and_defaults():
    text = (
        "Book T A i1 1 1 Book ExistingBook i1 i2 Book None "
        "Member NoBorrowLimit m1 Bob PrintLibrary Done"
    )
    assert run_program(text) == "T A 1\nT A 1\nUnknownTitle UnknownAuthor 0\nm1 Bob\n"


def test_run_program_stops_at_done():
    assert run_program("Done PrintLibrary Book T A i1 1 1") == ""