"""error-chain-python: ordered, short-circuiting error handling for git clients.

Every error raised by an application operation is routed through a fixed
chain of async handlers that decide whether it is swallowed, rewritten, or
presented to the user.
"""
from __future__ import annotations

from error_chain.config import ChainConfig
from error_chain.dispatcher import (
    ChainResult,
    DispatchContext,
    Dispatcher,
    ErrorChainBuilder,
    ErrorHandlerChain,
    ErrorPresenter,
    HandlerUnit,
    Propagate,
    Resolved,
    build_default_chain,
)
from error_chain.errors import (
    CodedError,
    ErrorChainError,
    ErrorMetadata,
    ErrorWithMetadata,
    GitError,
    GitErrorCode,
    GitResult,
)
from error_chain.state import (
    AppStore,
    InMemoryAppStore,
    Repository,
    SelectionState,
    SelectionType,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "ChainConfig",
    # Dispatcher
    "ChainResult",
    "DispatchContext",
    "Dispatcher",
    "ErrorChainBuilder",
    "ErrorHandlerChain",
    "ErrorPresenter",
    "HandlerUnit",
    "Propagate",
    "Resolved",
    "build_default_chain",
    # Errors
    "CodedError",
    "ErrorChainError",
    "ErrorMetadata",
    "ErrorWithMetadata",
    "GitError",
    "GitErrorCode",
    "GitResult",
    # State
    "AppStore",
    "InMemoryAppStore",
    "Repository",
    "SelectionState",
    "SelectionType",
    # Version
    "__version__",
]
