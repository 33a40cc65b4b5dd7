"""
Builder for handler chains.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from error_chain.dispatcher.chain import ErrorHandler, ErrorHandlerChain, HandlerUnit
from error_chain.dispatcher.handlers import (
    create_background_task_handler,
    create_default_handler,
    create_git_authentication_handler,
    create_missing_repository_handler,
)
from error_chain.errors import ChainConfigurationError, ErrorContext

if TYPE_CHECKING:
    from error_chain.state.store import AppStore


class ErrorChainBuilder:
    """Builder for ErrorHandlerChain instances.

    The default presentation handler is always appended last by build().

    Example:
        >>> chain = (
        ...     ErrorChainBuilder()
        ...     .with_store(app_store)
        ...     .with_defaults()
        ...     .use(report_crash, name="crash_reporter")
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        """Initialize the builder."""
        self._store: AppStore | None = None
        self._defaults = False
        self._units: list[HandlerUnit] = []

    def with_store(self, store: AppStore) -> ErrorChainBuilder:
        """Detect missing repositories using the given store.

        The missing repository handler runs before every other handler.

        Args:
            store: Application state store

        Returns:
            Self for chaining
        """
        self._store = store
        return self

    def with_defaults(self) -> ErrorChainBuilder:
        """Include the background task and git authentication handlers.

        Returns:
            Self for chaining
        """
        self._defaults = True
        return self

    def use(
        self,
        handler: HandlerUnit | ErrorHandler,
        name: str | None = None,
    ) -> ErrorChainBuilder:
        """Add a handler after the built-in ones.

        Args:
            handler: Handler unit, or async policy to wrap in one
            name: Unit name when wrapping a policy (default: its __name__)

        Returns:
            Self for chaining

        Raises:
            ChainConfigurationError: If the handler is terminal
        """
        if isinstance(handler, HandlerUnit):
            unit = handler
        else:
            unit = HandlerUnit(name or getattr(handler, "__name__", "handler"), handler)

        if unit.terminal:
            raise ChainConfigurationError(
                f"Handler {unit.name!r} is terminal",
                ErrorContext(
                    source="config",
                    hint="The default presentation handler is added by build()",
                ),
            )
        self._units.append(unit)
        return self

    def build(self) -> ErrorHandlerChain:
        """Build the chain.

        Returns:
            Chain ordered: missing repository, background task, git
            authentication, custom handlers, default presentation
        """
        units: list[HandlerUnit] = []
        if self._store is not None:
            units.append(create_missing_repository_handler(self._store))
        if self._defaults:
            units.append(create_background_task_handler())
            units.append(create_git_authentication_handler())
        units.extend(self._units)
        units.append(create_default_handler())
        return ErrorHandlerChain(units)


def build_default_chain(store: AppStore) -> ErrorHandlerChain:
    """Build the standard application chain.

    Args:
        store: Application state store

    Returns:
        Chain ordered: missing repository, background task, git
        authentication, default presentation
    """
    return ErrorChainBuilder().with_store(store).with_defaults().build()
