"""Unit tests for bookstore.service_layer.book_catalog.BookCatalog."""

from decimal import Decimal
from unittest import mock

import pytest

from bookstore.domain.models import Book
from bookstore.service_layer import BookCatalog

# pylint: disable=magic-value-comparison


class TestAddBook:
    """Tests for BookCatalog.add_book."""

    @staticmethod
    def test_add_new_book(catalog, make_book):
        """Adding a book that is not listed succeeds."""
        book = make_book()
        assert catalog.add_book(book)
        assert catalog.books == (book,)

    @staticmethod
    def test_add_same_book_twice(catalog, make_book):
        """Adding the same book again is rejected."""
        book = make_book()
        catalog.add_book(book)
        assert not catalog.add_book(book)
        assert len(catalog) == 1

    @staticmethod
    def test_add_equal_copy_is_rejected(catalog, make_book):
        """Duplicates are detected structurally, not by identity."""
        catalog.add_book(make_book())
        assert not catalog.add_book(make_book())

    @staticmethod
    def test_add_none_is_a_successful_no_op(catalog):
        """None is reported as success but nothing is stored."""
        assert catalog.add_book(None)
        assert len(catalog) == 0

    @staticmethod
    def test_insertion_order_is_preserved(catalog, make_book):
        """Books are kept in the order they were added."""
        books = [make_book(title=f"Title{i}") for i in range(5)]
        for book in books:
            catalog.add_book(book)
        assert list(catalog.books) == books

    @staticmethod
    def test_supplied_list_is_used_as_backing_store(make_book):
        """A list passed to the constructor is shared, not copied."""
        backing: list[Book] = []
        catalog = BookCatalog(backing)
        book = make_book()
        catalog.add_book(book)
        assert backing == [book]


class TestRemoveBook:
    """Tests for BookCatalog.remove_book."""

    @staticmethod
    def test_remove_listed_book(catalog, make_book):
        """Removing a listed book succeeds."""
        book = make_book()
        catalog.add_book(book)
        assert catalog.remove_book(book)
        assert book not in catalog

    @staticmethod
    def test_remove_unlisted_book(catalog, make_book):
        """Removing a book that was never added fails."""
        catalog.add_book(make_book(title="Other"))
        assert not catalog.remove_book(make_book())
        assert len(catalog) == 1

    @staticmethod
    def test_remove_none(catalog):
        """Removing None fails."""
        assert not catalog.remove_book(None)

    @staticmethod
    def test_remove_from_empty_catalog(catalog, make_book):
        """Nothing can be removed from an empty catalog."""
        assert not catalog.remove_book(make_book())

    @staticmethod
    def test_remove_by_equal_copy(catalog, make_book):
        """An equal copy is enough to remove the listed book."""
        catalog.add_book(make_book())
        assert catalog.remove_book(make_book())
        assert len(catalog) == 0

    @staticmethod
    def test_remove_drops_only_first_duplicate(make_book):
        """With duplicates already injected, only the first equal entry goes."""
        first = make_book()
        second = make_book()
        backing = [first, second]
        catalog = BookCatalog(backing)
        assert catalog.remove_book(make_book())
        assert len(catalog) == 1
        assert backing[0] is second

    @staticmethod
    def test_book_can_be_added_again_after_removal(catalog, make_book):
        """Once removed, a book is no longer a duplicate."""
        book = make_book()
        catalog.add_book(book)
        catalog.remove_book(book)
        assert catalog.add_book(book)


class TestSearchBook:
    """Tests for BookCatalog.search_book."""

    @staticmethod
    def test_matches_title_or_author(catalog, make_book):
        """Books match on either the title or the author."""
        book1 = make_book(title="Title1", author="Author1")
        book2 = make_book(title="KeywordTitle", author="Author2")
        book3 = make_book(title="Title3", author="KeywordAuthor")
        for book in (book1, book2, book3):
            catalog.add_book(book)

        assert catalog.search_book("Keyword") == [book2, book3]

    @staticmethod
    def test_no_match(catalog, make_book):
        """A keyword found nowhere returns an empty list."""
        catalog.add_book(make_book())
        assert catalog.search_book("NonExistentKeyword") == []

    @staticmethod
    def test_empty_keyword_returns_everything(catalog, make_book):
        """Every string contains the empty string."""
        books = [make_book(title="Title1"), make_book(title="Title2")]
        for book in books:
            catalog.add_book(book)
        assert catalog.search_book("") == books

    @staticmethod
    def test_special_characters(catalog, make_book):
        """Keywords are plain substrings, not patterns."""
        book = make_book(title="Title@!")
        catalog.add_book(book)
        catalog.add_book(make_book(title="Title.*"))
        assert catalog.search_book("@!") == [book]

    @staticmethod
    def test_search_is_case_sensitive(catalog):
        """Case must match exactly."""
        dune = Book("Dune", "Herbert", "Sci-Fi", Decimal("9.99"))
        foundation = Book("Foundation", "Asimov", "Sci-Fi", Decimal("8.99"))
        catalog.add_book(dune)
        catalog.add_book(foundation)

        assert catalog.search_book("a") == [foundation]
        assert catalog.search_book("dune") == []
        assert catalog.search_book("Dune") == [dune]

    @staticmethod
    def test_search_on_empty_catalog(catalog):
        """An empty catalog yields no results."""
        assert catalog.search_book("") == []

    @staticmethod
    def test_result_is_a_new_list(catalog, make_book):
        """Mutating the result does not touch the catalog."""
        catalog.add_book(make_book())
        catalog.search_book("").clear()
        assert len(catalog) == 1


class TestPurchaseBook:
    """Tests for BookCatalog.purchase_book."""

    @staticmethod
    def test_purchase_listed_book(catalog, make_book, make_user):
        """Purchasing a listed book records it on the user."""
        user = make_user()
        book = make_book()
        catalog.add_book(book)

        assert catalog.purchase_book(user, book)
        assert user.purchased_books == [book]

    @staticmethod
    def test_purchase_unlisted_book(catalog, make_book, make_user):
        """A book that is not in the catalog cannot be purchased."""
        user = make_user()
        assert not catalog.purchase_book(user, make_book())
        assert not user.purchased_books

    @staticmethod
    def test_purchase_none(catalog, make_user):
        """Purchasing None fails."""
        user = make_user()
        assert not catalog.purchase_book(user, None)
        assert not user.purchased_books

    @staticmethod
    def test_purchase_does_not_need_a_registered_user(catalog, make_book):
        """The catalog works on whatever user object it is given."""
        user = mock.Mock(purchased_books=[], username="ghost")
        book = make_book()
        catalog.add_book(book)
        assert catalog.purchase_book(user, book)
        assert user.purchased_books == [book]

    @staticmethod
    def test_repeat_purchases_are_recorded(catalog, make_book, make_user):
        """Each purchase is appended, even of the same book."""
        user = make_user()
        book = make_book()
        catalog.add_book(book)
        catalog.purchase_book(user, book)
        catalog.purchase_book(user, book)
        assert user.purchased_books == [book, book]


class TestAddBookReview:
    """Tests for BookCatalog.add_book_review."""

    @staticmethod
    def test_review_purchased_book(catalog, make_book, make_user):
        """A user can review a book they bought."""
        user = make_user()
        book = make_book()
        user.purchased_books.append(book)

        assert catalog.add_book_review(user, book, "Great book!")
        assert book.reviews == ["Great book!"]

    @staticmethod
    def test_review_appends_to_the_reviews_list(catalog, make_user):
        """The review goes through the book's reviews list."""
        user = make_user()
        book = mock.Mock(spec=Book, title="Title1", reviews=mock.Mock(spec=list))
        user.purchased_books.append(book)

        assert catalog.add_book_review(user, book, "Great book!")
        book.reviews.append.assert_called_once_with("Great book!")

    @staticmethod
    def test_review_not_purchased(catalog, make_book, make_user):
        """A user cannot review a book they did not buy."""
        user = make_user()
        book = make_book()
        catalog.add_book(book)

        assert not catalog.add_book_review(user, book, "Great book!")
        assert not book.reviews

    @staticmethod
    def test_none_review_is_appended(catalog, make_book, make_user):
        """Review text is not validated; None is stored like any other value."""
        user = make_user()
        book = make_book()
        user.purchased_books.append(book)

        assert catalog.add_book_review(user, book, None)
        assert book.reviews == [None]

    @staticmethod
    def test_review_after_purchase(catalog, make_book, make_user):
        """Purchasing through the catalog unlocks reviewing."""
        user = make_user()
        book = make_book()
        catalog.add_book(book)
        catalog.purchase_book(user, book)

        assert catalog.add_book_review(user, book, "Loved it")
        assert catalog.books[0].reviews == ["Loved it"]

    @staticmethod
    @pytest.mark.parametrize("reviews", [["a"], ["a", "b", "c"]])
    def test_reviews_keep_order(catalog, make_book, make_user, reviews):
        """Reviews are appended in the order they are posted."""
        user = make_user()
        book = make_book()
        user.purchased_books.append(book)
        for review in reviews:
            catalog.add_book_review(user, book, review)
        assert book.reviews == reviews
