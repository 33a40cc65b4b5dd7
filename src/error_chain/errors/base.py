"""Base error classes for error-chain-python.

Provides two families of errors:
- Application error variants the handler chain classifies: CodedError,
  ErrorWithMetadata and GitError. Any other exception is "unknown".
- Library errors raised by the chain itself: ChainConfigurationError,
  HandlerError and UnhandledError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from error_chain.errors.git_codes import GitErrorCode

if TYPE_CHECKING:
    from error_chain.state.models import Repository


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'git', 'chain', 'config')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class ErrorChainError(Exception):
    """Base class for all error-chain-python errors.

    Attributes:
        message: Human-readable error message
        context: Optional structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> ErrorChainError:
        """Add a hint to this error."""
        self.context.hint = hint
        self.args = (self._format_message(),)
        return self


class CodedError(ErrorChainError):
    """Error identified by a stable string code.

    Example:
        >>> CodedError("No such repository", code=REPOSITORY_DOES_NOT_EXIST_ERROR_CODE)
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        context: ErrorContext | None = None,
    ) -> None:
        ctx = context or ErrorContext()
        ctx.details["code"] = code
        super().__init__(message, ctx)
        self.code = code


@dataclass
class ErrorMetadata:
    """Contextual flags attached to an error by the operation that raised it.

    Attributes:
        background_task: Raised by work the user did not directly start
        repository: Repository the failing operation targeted
        git_context: Description of the git operation (e.g. {"kind": "fetch"})
    """

    background_task: bool | None = None
    repository: Repository | None = None
    git_context: dict[str, Any] = field(default_factory=dict)


class ErrorWithMetadata(ErrorChainError):
    """Wraps an error together with the metadata of where it came from."""

    def __init__(
        self,
        underlying_error: BaseException,
        metadata: ErrorMetadata | None = None,
    ) -> None:
        super().__init__(str(underlying_error), ErrorContext(source="metadata"))
        self.underlying_error = underlying_error
        self.metadata = metadata or ErrorMetadata()

    def _format_message(self) -> str:
        return self.message


@dataclass(frozen=True)
class GitResult:
    """Structured result of a git invocation.

    Attributes:
        exit_code: Process exit code
        stdout: Captured standard output
        stderr: Captured standard error
        git_error: Recognized git error, if the output matched a known one
        git_error_description: Human-readable description of git_error
    """

    exit_code: int
    stdout: str = ""
    stderr: str = ""
    git_error: GitErrorCode | None = None
    git_error_description: str | None = None

    def __post_init__(self) -> None:
        # The git wrapper may report the code as its raw string value.
        # Unknown values raise ValueError.
        if self.git_error is not None and not isinstance(self.git_error, GitErrorCode):
            object.__setattr__(self, "git_error", GitErrorCode(self.git_error))


class GitError(ErrorChainError):
    """A git invocation that failed.

    Attributes:
        result: The structured result of the failed invocation
        git_args: Arguments git was invoked with
    """

    def __init__(
        self,
        result: GitResult,
        git_args: list[str] | None = None,
    ) -> None:
        ctx = ErrorContext(source="git")
        ctx.details["exit_code"] = result.exit_code
        if result.git_error is not None:
            ctx.details["git_error"] = result.git_error.value
        super().__init__(self._describe(result), ctx)
        self.result = result
        self.git_args = list(git_args or [])

    @staticmethod
    def _describe(result: GitResult) -> str:
        if result.git_error_description:
            return result.git_error_description
        stderr = result.stderr.strip()
        if stderr:
            return stderr
        return f"git failed with exit code {result.exit_code}"


class ChainConfigurationError(ErrorChainError):
    """Raised when a handler chain or its configuration is invalid."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(message, context or ErrorContext(source="config"))


class HandlerError(ErrorChainError):
    """Raised when a handler unit fails instead of returning an outcome.

    Attributes:
        handler: Name of the failing handler unit
        error: The error the handler was given
    """

    def __init__(
        self,
        message: str,
        *,
        handler: str,
        error: BaseException,
        cause: BaseException | None = None,
    ) -> None:
        ctx = ErrorContext(source="chain")
        ctx.details["handler"] = handler
        super().__init__(message, ctx)
        self.handler = handler
        self.error = error
        self.__cause__ = cause


class UnhandledError(ErrorChainError):
    """Raised when a chain runs out of handlers without resolving an error."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(
            f"No handler resolved error: {error!r}",
            ErrorContext(
                source="chain",
                hint="End the chain with the default presentation handler",
            ),
        )
        self.error = error
