"""Error hierarchy for error-chain-python.

Provides the error variants the handler chain classifies, the git error
enumeration, and the errors raised by the chain itself.
"""

from error_chain.errors.base import (
    ChainConfigurationError,
    CodedError,
    ErrorChainError,
    ErrorContext,
    ErrorMetadata,
    ErrorWithMetadata,
    GitError,
    GitResult,
    HandlerError,
    UnhandledError,
)
from error_chain.errors.classification import (
    ErrorShape,
    as_error_with_code,
    as_error_with_metadata,
    as_git_error,
    classify,
)
from error_chain.errors.git_codes import (
    AUTHENTICATION_ERRORS,
    REPOSITORY_DOES_NOT_EXIST_ERROR_CODE,
    GitErrorCode,
    is_authentication_error,
)

__all__ = [
    "AUTHENTICATION_ERRORS",
    "REPOSITORY_DOES_NOT_EXIST_ERROR_CODE",
    # Base errors
    "ChainConfigurationError",
    "CodedError",
    "ErrorChainError",
    "ErrorContext",
    "ErrorMetadata",
    "ErrorWithMetadata",
    "GitError",
    "GitErrorCode",
    "GitResult",
    "HandlerError",
    "UnhandledError",
    # Classification
    "ErrorShape",
    "as_error_with_code",
    "as_error_with_metadata",
    "as_git_error",
    "classify",
    "is_authentication_error",
]
