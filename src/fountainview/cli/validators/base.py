"""Base validator classes for CLI input."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize validation error.

        Args:
            message: Error message
            field: Optional field name that failed validation
        """
        self.field = field
        super().__init__(message)


class Validator(ABC, Generic[T]):
    """Base class for input validators."""

    @abstractmethod
    def validate(self, value: Any) -> T:
        """Validate input value.

        Args:
            value: Value to validate

        Returns:
            Validated value, possibly transformed

        Raises:
            ValidationError: If validation fails
        """
        pass

    def validate_choice(self, value: Any, choices: list[str], field_name: str) -> str:
        """Validate that a value is one of a fixed set of strings.

        Args:
            value: Value to check
            choices: Allowed values (compared case-insensitively)
            field_name: Name of field for error message

        Returns:
            The lowercased value if valid

        Raises:
            ValidationError: If value is not one of ``choices``
        """
        normalized = str(value).strip().lower()
        if normalized not in choices:
            raise ValidationError(
                f"{field_name} must be one of: {', '.join(choices)}; got {value!r}",
                field_name,
            )
        return normalized
