"""
Error dispatching for error-chain-python.

Provides the handler chain, its built-in policies and the dispatcher that
routes raised errors through it.
"""

from error_chain.dispatcher.builder import ErrorChainBuilder, build_default_chain
from error_chain.dispatcher.chain import (
    ChainResult,
    ErrorHandler,
    ErrorHandlerChain,
    HandlerUnit,
)
from error_chain.dispatcher.context import DispatchContext, ErrorPresenter
from error_chain.dispatcher.dispatcher import Dispatcher
from error_chain.dispatcher.handlers import (
    MissingRepositoryHandler,
    background_task_handler,
    create_background_task_handler,
    create_default_handler,
    create_git_authentication_handler,
    create_missing_repository_handler,
    default_error_handler,
    git_authentication_error_handler,
)
from error_chain.dispatcher.outcome import (
    RESOLVED,
    Outcome,
    Propagate,
    Resolved,
    propagate,
    resolve,
)

__all__ = [
    "RESOLVED",
    "ChainResult",
    "DispatchContext",
    "Dispatcher",
    "ErrorChainBuilder",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ErrorPresenter",
    "HandlerUnit",
    "MissingRepositoryHandler",
    "Outcome",
    "Propagate",
    "Resolved",
    "background_task_handler",
    "build_default_chain",
    "create_background_task_handler",
    "create_default_handler",
    "create_git_authentication_handler",
    "create_missing_repository_handler",
    "default_error_handler",
    "git_authentication_error_handler",
    "propagate",
    "resolve",
]
