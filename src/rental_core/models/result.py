"""Success and failure values returned by booking operations."""

from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from .errors import ERROR_MESSAGES, ErrorCode

T = TypeVar("T")


class Ok(BaseModel, Generic[T]):
    """Successful outcome carrying the operation's payload."""

    model_config = ConfigDict(frozen=True)

    is_ok: Literal[True] = True
    value: T


class Err(BaseModel):
    """Rejected outcome carrying a code and the user-facing reason."""

    model_config = ConfigDict(strict=True, frozen=True)

    is_ok: Literal[False] = False
    error_code: ErrorCode
    reason: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
        **params: Any,
    ) -> "Err":
        """Create an Err from an error code.

        Args:
            code: The error code
            details: Optional additional context about the rejection
            **params: Values substituted into the reason template

        Returns:
            An Err whose reason is the rendered message for the code.
        """
        return cls(
            error_code=code,
            reason=ERROR_MESSAGES[code].format(**params),
            details=details,
        )
