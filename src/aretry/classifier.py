r"""Exception classification for deciding whether a failure is
retryable.

This module provides the ExceptionClassifier class that combines an
allow-list of exception types, a deny-list of exception types and
arbitrary predicates into a single retry decision.
"""

from __future__ import annotations

__all__ = ["ExceptionClassifier"]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExceptionClassifier:
    """Decides whether a failure is eligible for retry.

    A failure matches when it is an instance of one of ``includes`` (or
    ``includes`` is empty), is not an instance of any of ``excludes``, and
    satisfies every predicate. Subclasses match their parent types.

    The classifier holds no mutable state and can be shared between
    concurrent executions.

    Attributes:
        includes: Exception types eligible for retry. Empty means all.
        excludes: Exception types never retried.
        predicates: Additional checks that must all return True.

    Example:
        ```pycon
        >>> from aretry.classifier import ExceptionClassifier
        >>> classifier = ExceptionClassifier(includes=(OSError,), excludes=(FileNotFoundError,))
        >>> classifier.matches(ConnectionError())
        True
        >>> classifier.matches(FileNotFoundError())
        False
        >>> classifier.matches(ValueError())
        False

        ```
    """

    includes: tuple[type[BaseException], ...] = ()
    excludes: tuple[type[BaseException], ...] = ()
    predicates: tuple[Callable[[BaseException], bool], ...] = ()

    def matches(self, exc: BaseException) -> bool:
        """Return whether ``exc`` should be retried.

        Args:
            exc: The failure to classify.

        Returns:
            True if the failure is eligible for retry, otherwise False.
        """
        if self.includes and not isinstance(exc, self.includes):
            logger.debug(f"{type(exc).__name__} is not in the included exception types")
            return False
        if self.excludes and isinstance(exc, self.excludes):
            logger.debug(f"{type(exc).__name__} is in the excluded exception types")
            return False
        for predicate in self.predicates:
            if not predicate(exc):
                logger.debug(f"{type(exc).__name__} rejected by predicate {predicate!r}")
                return False
        return True

    __call__ = matches

    def combine(self, other: ExceptionClassifier) -> ExceptionClassifier:
        """Return a classifier applying the rules of both classifiers.

        Includes and excludes are merged, predicates are concatenated.

        Args:
            other: The classifier to combine with.

        Returns:
            A new classifier.
        """
        return ExceptionClassifier(
            includes=(*self.includes, *other.includes),
            excludes=(*self.excludes, *other.excludes),
            predicates=(*self.predicates, *other.predicates),
        )
