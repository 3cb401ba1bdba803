"""Custom exceptions for robotrules with context support."""

import uuid
from typing import Any


def generate_correlation_id() -> str:
    """
    Generate an 8-character UUID-based correlation ID.

    Returns:
        8-character correlation ID string.
    """
    return str(uuid.uuid4())[:8]


class RobotRulesError(Exception):
    """Root of every error raised while parsing or fetching robots.txt.

    Malformed lines inside a document are never errors; they end up in
    ``ParseResult.unknown``. Errors are raised only for input the parser
    cannot take at all, for unusable settings, and for failed downloads.
    """

    def __init__(
        self,
        message: str,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise with a message, a correlation ID and error details.

        Args:
            message: Human-readable description; the CLI prints it after ``Error:``.
            correlation_id: ID shown in ``str(exc)`` to link a CLI message with
                its log lines. Generated when omitted.
            context: Details such as the offending URL or setting name.
        """
        self.message = message
        self.correlation_id = correlation_id or generate_correlation_id()
        self.context = context or {}
        super().__init__(f"{message} [correlation_id={self.correlation_id}]")


class InvalidInputError(RobotRulesError):
    """Raised when parser or fetcher input is unusable (not text, no host)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise input error with field and value context.

        Args:
            message: Error message.
            field: Optional name of the offending argument.
            value: Optional value that was rejected.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if field is not None:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)
        super().__init__(message, correlation_id=correlation_id, context=context)


class ConfigurationError(RobotRulesError):
    """Raised when settings loading or validation fails."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise configuration error with setting context.

        Args:
            message: Error message.
            setting: Optional name of the setting that failed validation.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if setting is not None:
            context["setting"] = setting
        super().__init__(message, correlation_id=correlation_id, context=context)


class RetrievalError(RobotRulesError):
    """Raised when a robots.txt document cannot be retrieved."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialise retrieval error with request context.

        Args:
            message: Error message.
            url: Optional URL that was requested.
            status_code: Optional HTTP status code of the failed response.
            correlation_id: Optional correlation ID. If None, generates a new one.
            context: Optional context dictionary for debugging.
        """
        if context is None:
            context = {}
        if url is not None:
            context["url"] = url
        if status_code is not None:
            context["status_code"] = status_code
        self.url = url
        self.status_code = status_code
        super().__init__(message, correlation_id=correlation_id, context=context)
