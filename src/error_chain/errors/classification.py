"""Error classification: narrow an arbitrary exception to a known error shape.

Every function here is total. An exception from an unrelated source is the
common case and yields None (or ErrorShape.UNKNOWN) rather than raising.
"""

from __future__ import annotations

from enum import Enum

from error_chain.errors.base import CodedError, ErrorWithMetadata, GitError


class ErrorShape(str, Enum):
    """Structural shapes an error may satisfy."""

    CODED = "coded"
    """Carries a stable string code."""

    METADATA = "metadata"
    """Wraps another error together with contextual flags."""

    GIT = "git"
    """Wraps the structured result of a git invocation."""

    UNKNOWN = "unknown"
    """Satisfies none of the known shapes."""


def as_error_with_code(error: object) -> CodedError | None:
    """Narrow the error to a CodedError if it carries a code.

    Args:
        error: Any error value

    Returns:
        The error if it has a non-empty string code, None otherwise
    """
    if isinstance(error, CodedError) and isinstance(error.code, str) and error.code:
        return error
    return None


def as_error_with_metadata(error: object) -> ErrorWithMetadata | None:
    """Narrow the error to an ErrorWithMetadata if possible. Otherwise None."""
    if isinstance(error, ErrorWithMetadata):
        return error
    return None


def as_git_error(error: object) -> GitError | None:
    """Narrow the error to a GitError if possible. Otherwise None."""
    if isinstance(error, GitError):
        return error
    return None


def classify(error: object) -> frozenset[ErrorShape]:
    """Get every shape an error satisfies.

    Shapes are not mutually exclusive. An error matching none of them is
    reported as {ErrorShape.UNKNOWN}.

    Args:
        error: Any error value

    Returns:
        Non-empty set of shapes
    """
    shapes: set[ErrorShape] = set()
    if as_error_with_code(error) is not None:
        shapes.add(ErrorShape.CODED)
    if as_error_with_metadata(error) is not None:
        shapes.add(ErrorShape.METADATA)
    if as_git_error(error) is not None:
        shapes.add(ErrorShape.GIT)
    return frozenset(shapes or {ErrorShape.UNKNOWN})
