"""Domain error codes for the pricing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EMPTY_SELECTION = "EMPTY_SELECTION"
    UNKNOWN_ZONE = "UNKNOWN_ZONE"
    UNKNOWN_ENUM_VALUE = "UNKNOWN_ENUM_VALUE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EmptySelectionError(DomainError):
    """Raised when a booking has no seat selections."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_SELECTION,
            message="Seat selection cannot be empty",
        )


class UnknownEnumValueError(DomainError):
    """Raised when a value is outside a closed enumeration."""

    def __init__(
        self,
        kind: str,
        value: object,
        code: ErrorCode = ErrorCode.UNKNOWN_ENUM_VALUE,
    ) -> None:
        super().__init__(code=code, message=f"Unknown {kind}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)


class UnknownZoneError(UnknownEnumValueError):
    """Raised when a seat zone is not in the catalog."""

    def __init__(self, value: object) -> None:
        super().__init__("seat zone", value, code=ErrorCode.UNKNOWN_ZONE)
