"""
Error handler policies.

Each policy detects one class of error, optionally performs a side effect,
and either resolves the error or propagates it to the next handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from error_chain.dispatcher.chain import HandlerUnit
from error_chain.dispatcher.outcome import propagate, resolve
from error_chain.errors import (
    REPOSITORY_DOES_NOT_EXIST_ERROR_CODE,
    GitErrorCode,
    as_error_with_code,
    as_error_with_metadata,
    as_git_error,
    is_authentication_error,
)
from error_chain.state.models import SelectionType
from error_chain.telemetry.logger import get_logger

if TYPE_CHECKING:
    from error_chain.dispatcher.context import DispatchContext
    from error_chain.dispatcher.outcome import Outcome
    from error_chain.state.store import AppStore

logger = get_logger("error_chain.dispatcher.handlers")

# Selections that carry a repository whose missing state is tracked.
_REPOSITORY_SELECTIONS = frozenset(
    {SelectionType.REPOSITORY, SelectionType.MISSING_REPOSITORY}
)


async def default_error_handler(
    error: BaseException, context: DispatchContext
) -> Outcome:
    """Handle errors by presenting them."""
    await context.present_error(error)
    return resolve()


@dataclass(frozen=True)
class MissingRepositoryHandler:
    """Flags the selected repository as missing when an error shows it is gone.

    Errors raised while the selected repository is already known to be
    missing are explained by that condition and suppressed.

    Attributes:
        store: Store to read the current selection from
    """

    store: AppStore

    async def __call__(
        self, error: BaseException, context: DispatchContext
    ) -> Outcome:
        selected = self.store.get_state().selected_state
        if selected is None:
            return propagate(error)

        if selected.type not in _REPOSITORY_SELECTIONS:
            return propagate(error)

        repository = selected.repository
        if repository is None:
            return propagate(error)

        if repository.missing:
            return resolve()

        if not self._is_missing_repository_error(error):
            return propagate(error)

        logger.info(
            "Marking repository as missing",
            repository=repository.name,
            path=repository.path,
        )
        await context.update_repository_missing(repository, True)
        return resolve()

    @staticmethod
    def _is_missing_repository_error(error: BaseException) -> bool:
        git_error = as_git_error(error)
        if (
            git_error is not None
            and git_error.result.git_error == GitErrorCode.NOT_A_GIT_REPOSITORY
        ):
            return True

        coded = as_error_with_code(error)
        return coded is not None and coded.code == REPOSITORY_DOES_NOT_EXIST_ERROR_CODE


async def background_task_handler(
    error: BaseException, context: DispatchContext  # noqa: ARG001
) -> Outcome:
    """Suppress errors from work the user did not start.

    Errors from foreground work are unwrapped, so later handlers see the
    original error rather than its metadata.
    """
    wrapped = as_error_with_metadata(error)
    if wrapped is None:
        return propagate(error)

    if wrapped.metadata.background_task:
        logger.debug(
            "Suppressing background task error",
            error_type=type(wrapped.underlying_error).__name__,
            repository=(
                wrapped.metadata.repository.name
                if wrapped.metadata.repository is not None
                else None
            ),
            git_context=wrapped.metadata.git_context,
        )
        return resolve()

    return propagate(wrapped.underlying_error)


async def git_authentication_error_handler(
    error: BaseException, context: DispatchContext  # noqa: ARG001
) -> Outcome:
    """Observe git authentication errors.

    The error is only logged and always continues to the next handler.
    """
    git_error = as_git_error(error)
    if git_error is None:
        return propagate(error)

    code = git_error.result.git_error
    if code is None:
        return propagate(error)

    if not is_authentication_error(code):
        return propagate(error)

    logger.warning(
        "Git authentication failed",
        git_error=code.value,
        git_args=git_error.git_args,
        exit_code=git_error.result.exit_code,
    )
    return propagate(error)


def create_default_handler() -> HandlerUnit:
    """Create the terminal unit presenting every error it receives."""
    return HandlerUnit("default", default_error_handler, terminal=True)


def create_missing_repository_handler(store: AppStore) -> HandlerUnit:
    """Create a missing repository handler unit bound to the given store."""
    return HandlerUnit("missing_repository", MissingRepositoryHandler(store))


def create_background_task_handler() -> HandlerUnit:
    """Create the background task suppression unit."""
    return HandlerUnit("background_task", background_task_handler)


def create_git_authentication_handler() -> HandlerUnit:
    """Create the git authentication observer unit."""
    return HandlerUnit("git_authentication", git_authentication_error_handler)
