from __future__ import annotations

import logging

from book import Book
from checkout import CheckoutPolicy, PremiumPolicy

logger = logging.getLogger(__name__)


class Patron:
    """A library user whose checkouts go through a fixed policy."""

    def __init__(self, name: str, policy: CheckoutPolicy) -> None:
        self._name = name.strip()
        self._policy = policy

    @property
    def name(self) -> str:
        return self._name

    @property
    def policy(self) -> CheckoutPolicy:
        return self._policy

    @property
    def is_premium(self) -> bool:
        return isinstance(self._policy, PremiumPolicy)

    def borrow(self, book: Book) -> None:
        """Check the book out through this patron's policy.

        Propagates AlreadyCheckedOut when the book is not available.
        """
        self._policy.evaluate(book)
        logger.info("%s borrowed %r (%s)", self._name, book.title, self._policy.name)

    def return_book(self, book: Book) -> None:
        # Returns skip the policy and are never rejected.
        book.return_book()
        logger.info("%s returned %r", self._name, book.title)
