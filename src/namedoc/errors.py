"""Exception hierarchy for namedoc.

The core phrase and builder functions never raise for well-formed input; the
exceptions defined here belong to the ambient layers (configuration loading and
payload decoding).

Examples
--------
>>> from namedoc.errors import ConfigurationError, ErrorCode
>>> try:
...     raise ConfigurationError("cross_reference_format must contain '{name}'")
... except ConfigurationError as e:
...     assert e.code == ErrorCode.CONFIGURATION_ERROR
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum

__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "NameDocError",
    "SchemaValidationError",
]


class ErrorCode(StrEnum):
    """Stable error codes for namedoc exceptions.

    Attributes
    ----------
    RUNTIME_ERROR
        Unclassified runtime failure.
    CONFIGURATION_ERROR
        Configuration could not be loaded or failed validation.
    SCHEMA_VALIDATION_ERROR
        An input payload did not satisfy its JSON Schema.
    """

    RUNTIME_ERROR = "runtime-error"
    CONFIGURATION_ERROR = "configuration-error"
    SCHEMA_VALIDATION_ERROR = "schema-validation-error"


class NameDocError(Exception):
    """Base exception for all namedoc errors.

    Parameters
    ----------
    message : str
        Human-readable error message.
    code : ErrorCode, optional
        Stable error code. Defaults to ``ErrorCode.RUNTIME_ERROR``.
    cause : Exception | None, optional
        Underlying exception. Defaults to None.
    context : Mapping[str, object] | None, optional
        Additional structured context. Defaults to None.

    Examples
    --------
    >>> error = NameDocError("Operation failed")
    >>> str(error)
    'NameDocError[runtime-error]: Operation failed'
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.RUNTIME_ERROR,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict[str, object] = dict(context) if context else {}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return ``Class[code]: message`` with the cause type when present."""
        base = f"{self.__class__.__name__}[{self.code.value}]: {self.message}"
        if self.__cause__:
            base += f" (caused by: {type(self.__cause__).__name__})"
        return base


class ConfigurationError(NameDocError):
    """Error during configuration loading or validation."""

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(
            message,
            code=ErrorCode.CONFIGURATION_ERROR,
            cause=cause,
            context=context,
        )

    @classmethod
    def with_details(
        cls,
        *,
        field: str,
        issue: str,
        hint: str | None = None,
    ) -> ConfigurationError:
        """Create a ConfigurationError with structured validation details.

        Parameters
        ----------
        field : str
            Name of the configuration field that failed validation.
        issue : str
            Description of the validation issue.
        hint : str | None, optional
            Hint for resolving the issue. Defaults to None.

        Returns
        -------
        ConfigurationError
            New instance with the details captured in ``context``.
        """
        details: dict[str, object] = {"field": field, "issue": issue}
        if hint is not None:
            details["hint"] = hint
        message = f"Configuration validation failed for field '{field}': {issue}"
        return cls(message, context=details)


class SchemaValidationError(NameDocError):
    """Raised when an input payload does not satisfy its JSON Schema.

    Parameters
    ----------
    message : str
        Human-readable error message.
    errors : list[str] | None, optional
        Validation messages with path details, stored under
        ``context["validation_errors"]``.
    cause : Exception | None, optional
        Underlying exception. Defaults to None.
    context : Mapping[str, object] | None, optional
        Additional context. Defaults to None.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        cause: Exception | None = None,
        context: Mapping[str, object] | None = None,
    ) -> None:
        combined_context: dict[str, object] = dict(context or {})
        if errors:
            combined_context.setdefault("validation_errors", list(errors))
        super().__init__(
            message,
            code=ErrorCode.SCHEMA_VALIDATION_ERROR,
            cause=cause,
            context=combined_context,
        )
        self.errors: list[str] = list(errors or [])
