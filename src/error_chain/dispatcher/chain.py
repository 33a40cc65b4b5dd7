"""
Ordered, short-circuiting chain of error handlers.

Each handler unit either resolves an error or propagates it, possibly
rewritten, to the next unit. The last unit is always terminal, so every
error that is not suppressed on the way is presented exactly once.
"""

from __future__ import annotations

import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from error_chain.dispatcher.context import DispatchContext
from error_chain.dispatcher.outcome import Outcome, Propagate, Resolved
from error_chain.errors import (
    ChainConfigurationError,
    ErrorContext,
    HandlerError,
    UnhandledError,
    classify,
)
from error_chain.telemetry.logger import (
    LogContext,
    get_log_context,
    get_logger,
    set_log_context,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

ErrorHandler = Callable[[BaseException, DispatchContext], Awaitable[Outcome]]

logger = get_logger("error_chain.dispatcher")


@dataclass(frozen=True)
class HandlerUnit:
    """A policy step in the chain.

    Attributes:
        name: Identifier used in logs and results
        policy: Async callable deciding the outcome for an error
        terminal: Whether the unit always resolves
    """

    name: str
    policy: ErrorHandler
    terminal: bool = False

    async def __call__(
        self, error: BaseException, context: DispatchContext
    ) -> Outcome:
        """Run the policy."""
        return await self.policy(error, context)


@dataclass
class ChainResult:
    """Result of running an error through a chain.

    Attributes:
        handled_by: Name of the unit that resolved the error
        handlers_tried: Names of the units that ran, in order
        final_error: Error the resolving unit received
        presented: Whether the terminal unit resolved it
    """

    handled_by: str
    final_error: BaseException
    handlers_tried: list[str] = field(default_factory=list)
    presented: bool = False


class ErrorHandlerChain:
    """Immutable sequence of handler units ending in a terminal unit.

    Example:
        >>> chain = ErrorHandlerChain([background_unit, default_unit])
        >>> result = await chain.run(error, dispatcher)
        >>> result.handled_by
        'default'
    """

    def __init__(self, units: Iterable[HandlerUnit]) -> None:
        """Initialize chain.

        Args:
            units: Handler units in evaluation order

        Raises:
            ChainConfigurationError: If the chain is empty or the terminal
                unit is missing or not last
        """
        self._units: tuple[HandlerUnit, ...] = tuple(units)
        self._validate()

    def _validate(self) -> None:
        names = [u.name for u in self._units]
        if not names:
            raise ChainConfigurationError(
                "Handler chain is empty",
                ErrorContext(
                    source="config",
                    hint="End the chain with the default presentation handler",
                ),
            )
        terminals = [u.name for u in self._units if u.terminal]
        if len(terminals) != 1 or not self._units[-1].terminal:
            raise ChainConfigurationError(
                "Handler chain must end with exactly one terminal handler",
                ErrorContext(
                    source="config",
                    details={"handlers": names, "terminal": terminals},
                ),
            )

    @property
    def units(self) -> tuple[HandlerUnit, ...]:
        """Get the handler units in order."""
        return self._units

    @property
    def handler_names(self) -> list[str]:
        """Get the handler names in order."""
        return [u.name for u in self._units]

    def __len__(self) -> int:
        return len(self._units)

    async def run(
        self, error: BaseException, context: DispatchContext
    ) -> ChainResult:
        """Run an error through the chain.

        Units run strictly in order and each is awaited before the next
        starts. The first unit to resolve ends the run.

        Args:
            error: The raised error
            context: Capabilities shared with every unit

        Returns:
            ChainResult describing which unit resolved the error

        Raises:
            HandlerError: If a unit raises or returns something other than
                an outcome
            UnhandledError: If no unit resolves the error
        """
        previous_context = get_log_context()
        run_context = previous_context
        if run_context.dispatch_id is None:
            run_context = replace(run_context, dispatch_id=uuid.uuid4().hex[:12])
        if run_context.repository is None:
            selection = context.get_selection_state()
            if selection is not None and selection.repository is not None:
                run_context = replace(run_context, repository=selection.repository.name)
        set_log_context(run_context)
        try:
            return await self._run(error, context, run_context)
        finally:
            set_log_context(previous_context)

    async def _run(
        self,
        error: BaseException,
        context: DispatchContext,
        run_context: LogContext,
    ) -> ChainResult:
        logger.debug(
            "Dispatching error",
            error_type=type(error).__name__,
            shapes=sorted(s.value for s in classify(error)),
        )

        tried: list[str] = []
        current = error
        for unit in self._units:
            tried.append(unit.name)
            set_log_context(replace(run_context, handler=unit.name))
            try:
                outcome = await unit(current, context)
            except Exception as exc:
                logger.exception("Error handler failed")
                raise HandlerError(
                    f"Error handler {unit.name!r} raised {type(exc).__name__}",
                    handler=unit.name,
                    error=current,
                    cause=exc,
                ) from exc
            finally:
                set_log_context(run_context)

            if isinstance(outcome, Resolved):
                logger.debug("Error resolved", handler=unit.name)
                return ChainResult(
                    handled_by=unit.name,
                    final_error=current,
                    handlers_tried=tried,
                    presented=unit.terminal,
                )
            if not isinstance(outcome, Propagate):
                raise HandlerError(
                    f"Error handler {unit.name!r} returned {outcome!r} "
                    "instead of an outcome",
                    handler=unit.name,
                    error=current,
                )

            if outcome.error is not current:
                logger.debug(
                    "Error replaced",
                    handler=unit.name,
                    error_type=type(outcome.error).__name__,
                )
            else:
                logger.debug("Error propagated", handler=unit.name)
            current = outcome.error

        raise UnhandledError(current)
