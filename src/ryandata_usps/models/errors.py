"""USPS client error classes.

Every failure the client can produce is raised as a subclass of UspsError,
which mirrors the error object returned by the USPS API (status, code,
title, detail and an optional source pointer).
"""

from __future__ import annotations

from dataclasses import dataclass

# Package identifier for error context
PACKAGE_NAME = "ryandata_usps"


@dataclass(frozen=True)
class ErrorSource:
    """Identifies the request parameter an API error refers to."""

    parameter: str = ""
    example: str = ""


class UspsError(Exception):
    """Base exception for ryandata_usps.

    Attributes:
        status: HTTP status (or status-derived code) reported by the provider.
        code: Provider error code.
        title: Short summary of the error.
        detail: Human-readable explanation.
        source: Optional pointer to the offending request parameter.
        context: Extra context, always including the package name.
    """

    def __init__(
        self,
        title: str = "",
        detail: str = "",
        *,
        status: str = "",
        code: str = "",
        source: ErrorSource | None = None,
        context: dict | None = None,
    ):
        self.status = status
        self.code = code
        self.title = title
        self.detail = detail
        self.source = source
        self.context = {"package": PACKAGE_NAME, **(context or {})}
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.detail:
            return self.detail
        if self.title:
            return self.title
        return "USPS API error"

    @classmethod
    def from_validation_error(
        cls, title: str, error: Exception, context: dict | None = None
    ) -> UspsError:
        """Wrap a pydantic.ValidationError (or any exception) with package context.

        Args:
            title: Summary used as the error title.
            error: The exception to wrap.
            context: Additional context to include in the error.

        Returns:
            Instance of ``cls`` whose detail lists the validation messages.
        """
        from pydantic import ValidationError

        if isinstance(error, ValidationError):
            detail = "; ".join(e.get("msg", str(e)) for e in error.errors())
        else:
            detail = str(error)
        instance = cls(title, f"{title}: {detail}", context=context)
        instance.__cause__ = error
        return instance

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status={self.status!r}, code={self.code!r}, "
            f"title={self.title!r}, detail={self.detail!r})"
        )


class ConfigurationError(UspsError):
    """Client configuration is unusable (e.g. missing credentials)."""


class InputValidationError(UspsError):
    """The address passed to the client is missing required fields."""


class TokenError(UspsError):
    """An OAuth2 access token could not be obtained."""


class UspsApiError(UspsError):
    """The USPS API answered with a structured error body."""


class TransportError(UspsError):
    """The request never produced an HTTP response."""


class UnexpectedResponseError(UspsError):
    """The USPS API answered with a response the client does not understand."""
