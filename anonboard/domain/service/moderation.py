"""Moderation gate for user-submitted text."""

from abc import ABC, abstractmethod
from typing import Sequence

import logfire

from anonboard.domain.error import ContentRejectedError


class ContentPolicy(ABC):
    """Decides whether a piece of text may be published."""

    @abstractmethod
    def is_allowed(self, text: str) -> bool:
        """Return True if the text may be published."""
        pass

    def ensure_allowed(self, text: str, subject: str) -> None:
        """Reject text that the policy does not allow.

        Args:
            text: Text to check
            subject: What is being submitted ("post", "comment"), used in the message

        Raises:
            ContentRejectedError: If the text is not allowed
        """
        if not self.is_allowed(text):
            logfire.warn("Content rejected by moderation", subject=subject)
            raise ContentRejectedError(
                f"Your {subject} contains inappropriate language. Please revise."
            )


class DenylistContentPolicy(ContentPolicy):
    """Rejects text containing any denylisted term, ignoring case.

    Matching is by substring, so a term also matches inside longer words.
    """

    def __init__(self, denylist: Sequence[str]) -> None:
        self.denylist = tuple(
            term.strip().lower() for term in denylist if term and term.strip()
        )

    def contains_prohibited(self, text: str) -> bool:
        lowered = text.lower()
        return any(term in lowered for term in self.denylist)

    def is_allowed(self, text: str) -> bool:
        return not self.contains_prohibited(text)
