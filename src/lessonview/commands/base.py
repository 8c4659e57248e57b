"""
Base classes for the commands layer.

CommandResult provides a consistent return type across all commands.
CommandError and its subclasses carry failures up from the client,
resolver and render pipeline, collecting a context label at each
boundary they cross.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional
from enum import Enum


class ResultStatus(Enum):
    """Command execution status."""
    SUCCESS = "success"
    ERROR = "error"
    NOT_AVAILABLE = "not_available"


@dataclass
class CommandResult:
    """
    Unified result type for all commands.

    Attributes:
        success: Whether the command succeeded
        status: Detailed status enum
        message: Human-readable message
        data: Command-specific result data
        error: Error message if failed
    """
    success: bool
    status: ResultStatus = ResultStatus.SUCCESS
    message: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, message: str = "Success", data: Dict[str, Any] = None) -> 'CommandResult':
        """Create a successful result."""
        return cls(
            success=True,
            status=ResultStatus.SUCCESS,
            message=message,
            data=data or {},
        )

    @classmethod
    def fail(cls, message: str, error: str = None, data: Dict[str, Any] = None) -> 'CommandResult':
        """Create a failed result."""
        return cls(
            success=False,
            status=ResultStatus.ERROR,
            message=message,
            error=error or message,
            data=data or {},
        )

    @classmethod
    def from_error(cls, err: 'CommandError') -> 'CommandResult':
        """Create a failed result from a CommandError, keeping its cause chain."""
        chain = err.chain()
        return cls.fail(
            chain[0],
            error=": ".join(chain),
            data={'chain': chain, 'kind': type(err).__name__},
        )

    @classmethod
    def not_available(cls, message: str, fix_hint: str = "") -> 'CommandResult':
        """Create a not-available result (service/tool missing)."""
        return cls(
            success=False,
            status=ResultStatus.NOT_AVAILABLE,
            message=message,
            error=fix_hint or message,
            data={'fix_hint': fix_hint, 'chain': [message] + ([fix_hint] if fix_hint else [])}
        )


class CommandError(Exception):
    """Exception raised by commands."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: List[str] = []

    def add_context(self, label: str) -> 'CommandError':
        """Record the boundary this error just crossed."""
        self.context.append(label)
        return self

    def chain(self) -> List[str]:
        """
        Human-readable cause chain, outermost label first.

        Context labels come first (most recently added first), then this
        error's own message, then the messages of any chained causes.
        """
        chain = list(reversed(self.context))
        chain.append(self.message)

        cause = self.__cause__
        while cause is not None:
            if isinstance(cause, CommandError):
                chain.extend(cause.chain())
                break
            text = str(cause)
            if text and text not in chain:
                chain.append(text)
            cause = cause.__cause__

        return chain

    def __str__(self) -> str:
        return ": ".join(self.chain())


class FetchError(CommandError):
    """Network failure, non-success HTTP status, or a body that is not JSON."""


class ResponseShapeError(CommandError):
    """Response is missing a required field or has an unexpected shape."""


class OutOfRangeError(CommandError):
    """Requested chapter or lesson number is not in the course."""


class ConverterError(CommandError):
    """The document converter could not be run or exited with an error."""


class ConverterOutputError(CommandError):
    """The document converter produced output that is not valid text."""


class ConfigError(CommandError):
    """Invalid configuration value."""


@contextmanager
def error_context(label: str) -> Iterator[None]:
    """
    Attach a context label to any CommandError raised inside the block.

    Usage:
        with error_context("Failed to get lesson ID"):
            lesson_id = resolver.resolve_lesson_id(slug, 1, 2)
    """
    try:
        yield
    except CommandError as e:
        e.add_context(label)
        raise
