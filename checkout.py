"""Checkout policies.

A policy decides whether a patron's checkout attempt succeeds. Both tiers
currently run the same availability check; new tiers (hold queues, loan
limits, fee waivers) plug in by subclassing CheckoutPolicy.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from book import Book

logger = logging.getLogger(__name__)


class CheckoutPolicy(ABC):
    name: str = ""

    @abstractmethod
    def evaluate(self, book: Book) -> None:
        """Check the book out or raise AlreadyCheckedOut."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class StandardPolicy(CheckoutPolicy):
    name = "standard"

    def evaluate(self, book: Book) -> None:
        book.checkout()


class PremiumPolicy(CheckoutPolicy):
    name = "premium"

    def evaluate(self, book: Book) -> None:
        book.checkout()


def is_premium_answer(answer: str) -> bool:
    return (answer or "").strip().lower() == "yes"


def policy_for(premium: bool) -> CheckoutPolicy:
    policy: CheckoutPolicy = PremiumPolicy() if premium else StandardPolicy()
    logger.debug("Selected %s checkout policy", policy.name)
    return policy
