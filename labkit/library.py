"""A small lending library: books, members, borrowing and returning."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Iterator


class LibraryError(Exception):
    """A request the library refuses."""


@dataclass
class Book:
    """A title with a count of copies on the shelf and in total."""

    title: str = "UnknownTitle"
    author: str = "UnknownAuthor"
    isbn: str = "ISBN"
    copies_available: int = 0
    total_copies: int = 5

    def copy_as(self, isbn: str) -> Book:
        """The same book catalogued under another ISBN."""
        return replace(self, isbn=isbn)

    def update_copies(self, count: int) -> None:
        """Add (or with a negative count, remove) copies of the book."""
        if self.copies_available + count < 0:
            raise LibraryError("Invalid request! Count becomes negative")
        self.copies_available += count
        self.total_copies += count

    def borrow(self) -> None:
        if self.copies_available == 0:
            raise LibraryError("Invalid request! Copy of book not available")
        self.copies_available -= 1

    def give_back(self) -> None:
        if self.copies_available == self.total_copies:
            raise LibraryError("Invalid request! Copy of book exceeds total copies")
        self.copies_available += 1

    def details(self) -> str:
        return f"{self.title} {self.author}"


@dataclass
class Member:
    """A library member; ``borrow_limit`` is how many more books they may take."""

    member_id: str
    name: str
    borrow_limit: int = 3
    borrowed: Counter = field(default_factory=Counter)

    def borrow(self, isbn: str) -> None:
        if self.borrow_limit == 0:
            raise LibraryError("Invalid request! Borrow limit exceeded")
        self.borrowed[isbn] += 1
        self.borrow_limit -= 1

    def give_back(self, isbn: str) -> None:
        if self.borrowed[isbn] == 0:
            raise LibraryError("Invalid request! Book not borrowed")
        self.borrowed[isbn] -= 1
        self.borrow_limit += 1

    def details(self) -> list[str]:
        """One line per book currently held, ordered by ISBN."""
        return [
            f"{self.member_id} {self.name} {isbn} {count}"
            for isbn, count in sorted(self.borrowed.items())
            if count
        ]


class Library:
    """Books and members, kept in the order they were added."""

    def __init__(self) -> None:
        self.books: dict[str, Book] = {}
        self.members: dict[str, Member] = {}

    def add_book(self, book: Book) -> None:
        if book.isbn in self.books:
            raise LibraryError("Invalid request! Book with same isbn already exists")
        self.books[book.isbn] = book

    def register_member(self, member: Member) -> None:
        if member.member_id in self.members:
            raise LibraryError("Invalid request! Member with same id already exists")
        self.members[member.member_id] = member

    def borrow_book(self, member_id: str, isbn: str) -> None:
        book = self.books.get(isbn)
        if book is None:
            raise LibraryError("Invalid request! Book not found")
        if not book.copies_available:
            raise LibraryError("Invalid request! Copy of book not available")
        member = self.members.get(member_id)
        if member is None:
            raise LibraryError("Invalid request! No such member exists")
        member.borrow(isbn)
        book.borrow()

    def return_book(self, member_id: str, isbn: str) -> None:
        book = self.books.get(isbn)
        if book is None:
            raise LibraryError("Invalid request! Book not found")
        member = self.members.get(member_id)
        if member is None:
            raise LibraryError("Invalid request! Member is not registered")
        if book.copies_available == book.total_copies:
            book.give_back()  # raises: every copy is already on the shelf
        member.give_back(isbn)
        book.give_back()

    def find_book(self, isbn: str) -> Book | None:
        return self.books.get(isbn)

    def find_member(self, member_id: str) -> Member | None:
        return self.members.get(member_id)

    def summary(self) -> list[str]:
        """Every book with its available copies, then every member."""
        return [
            f"{b.title} {b.author} {b.copies_available}" for b in self.books.values()
        ] + [f"{m.member_id} {m.name}" for m in self.members.values()]


class _EndOfInput(Exception):
    pass


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise _EndOfInput from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def _handle(command: str, tokens: Iterator[str], library: Library, out: list[str]) -> bool:
    """Carry out one command; True when the same command is to be read again."""
    if command == "Book":
        title = _take(tokens)
        if title == "ExistingBook":
            current, new = _take(tokens), _take(tokens)
            old = library.find_book(current)
            if old is None:
                out.append("Invald request! Book with given ISBN does not exist")
                return True
            library.add_book(old.copy_as(new))
        elif title == "None":
            library.add_book(Book())
        else:
            author, isbn = _take(tokens), _take(tokens)
            available, total = _take_int(tokens), _take_int(tokens)
            library.add_book(Book(title, author, isbn, available, total))
    elif command == "UpdateCopiesCount":
        isbn, count = _take(tokens), _take_int(tokens)
        book = library.find_book(isbn)
        if book is None:
            out.append("Invalid request! No such Book exists")
            return True
        book.update_copies(count)
    elif command == "Member":
        first = _take(tokens)
        if first == "NoBorrowLimit":
            member_id, name = _take(tokens), _take(tokens)
            library.register_member(Member(member_id, name))
        else:
            name, limit = _take(tokens), _take_int(tokens)
            library.register_member(Member(first, name, limit))
    elif command == "Borrow":
        member_id, isbn = _take(tokens), _take(tokens)
        library.borrow_book(member_id, isbn)
    elif command == "Return":
        member_id, isbn = _take(tokens), _take(tokens)
        library.return_book(member_id, isbn)
    elif command == "PrintBook":
        book = library.find_book(_take(tokens))
        if book is None:
            out.append("Invalid request! Book with given ISBN does not exist")
            return True
        out.append(book.details())
    elif command == "PrintMember":
        member = library.find_member(_take(tokens))
        if member is None:
            out.append("Invallid request! No such member is registered")
            return True
        out.extend(member.details())
    elif command == "PrintLibrary":
        out.extend(library.summary())
    return False


def run_program(text: str) -> str:
    """Run library commands from text until ``Done``; return what they print.

    After a failed lookup the same command is read again from the tokens
    that follow.
    """
    tokens = iter(text.split())
    library = Library()
    out: list[str] = []
    command = next(tokens, None)
    while command is not None and command != "Done":
        try:
            repeat = _handle(command, tokens, library, out)
        except LibraryError as error:
            out.append(str(error))
            repeat = False
        except _EndOfInput:
            break
        if not repeat:
            command = next(tokens, None)
    return "".join(line + "\n" for line in out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run library commands read from stdin.")
    parser.parse_args(argv)
    sys.stdout.write(run_program(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())