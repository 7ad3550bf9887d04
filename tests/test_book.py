import pytest

from book import Book, AlreadyCheckedOut


def test_new_book_is_available():
    book = Book("Ulysses", "James Joyce", "Fiction")
    assert book.available is True

def test_fields_are_stripped():
    book = Book("  Ulysses ", " James Joyce", "Fiction  ")
    assert book.title == "Ulysses"
    assert book.author == "James Joyce"
    assert book.genre == "Fiction"

def test_fields_are_read_only():
    book = Book("Ulysses", "James Joyce", "Fiction")
    with pytest.raises(AttributeError):
        book.title = "Dubliners"
    with pytest.raises(AttributeError):
        book.available = False

def test_checkout_twice_fails_without_double_mutation():
    book = Book("How to code", "Kai Johnson", "Fiction")
    book.checkout()
    assert book.available is False

    with pytest.raises(AlreadyCheckedOut, match='The book "How to code" is already checked out.') as exc:
        book.checkout()
    assert exc.value.title == "How to code"
    assert book.available is False

def test_checkout_return_round_trip():
    book = Book("Musicals", "Alex Hamilton", "Non-Fiction")
    book.checkout()
    book.return_book()
    assert book.available is True

    book.checkout()
    assert book.available is False

def test_return_available_book_is_noop():
    book = Book("Musicals", "Alex Hamilton", "Non-Fiction")
    book.return_book()
    assert book.available is True

def test_force_checkout_ignores_availability():
    book = Book("Video Game", "Dylan Noriega", "Sci-Fi")
    book.force_checkout()
    assert book.available is False
    # Already out: the override still succeeds
    book.force_checkout()
    assert book.available is False

def test_describe():
    book = Book("Rats Rats Rats", "Ezry Roukema", "Fantasy")
    assert book.describe() == '"Rats Rats Rats" by Ezry Roukema (Fantasy) [Available]'
    book.checkout()
    assert book.describe() == '"Rats Rats Rats" by Ezry Roukema (Fantasy) [Checked Out]'
    assert str(book) == book.describe()

def test_to_dict():
    book = Book("Rats Rats Rats", "Ezry Roukema", "Fantasy")
    assert book.to_dict() == {
        "title": "Rats Rats Rats",
        "author": "Ezry Roukema",
        "genre": "Fantasy",
        "available": True,
    }
