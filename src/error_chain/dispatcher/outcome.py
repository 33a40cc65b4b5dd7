"""
Outcome of a single handler unit.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resolved:
    """The error is fully handled. No further handlers run."""


@dataclass(frozen=True)
class Propagate:
    """Pass an error, possibly a different one, to the next handler.

    Attributes:
        error: The error the next handler receives
    """

    error: BaseException


Outcome = Resolved | Propagate

RESOLVED = Resolved()


def resolve() -> Resolved:
    """Stop the chain."""
    return RESOLVED


def propagate(error: BaseException) -> Propagate:
    """Continue the chain with the given error."""
    return Propagate(error)
