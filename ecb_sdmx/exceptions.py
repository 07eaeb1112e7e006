"""
Custom exception hierarchy for ecb-sdmx.

Why a custom hierarchy:
- Callers can tell bad input (ValidationError) apart from a failing
  service (HttpError) and a document with an unexpected shape
  (DataParseError) without inspecting messages.
- None of these are retried by the library. A malformed argument or
  document will not change on retry; HTTP retry policy is left to the
  caller.
"""

from __future__ import annotations


class EcbSdmxError(Exception):
    """Base exception for all ecb-sdmx errors."""


class ValidationError(EcbSdmxError):
    """Raised when a caller supplies a malformed argument.

    Always raised before any network call is made.
    """


class HttpError(EcbSdmxError):
    """Raised when the service answers with a non-success status.

    Attributes:
        status_code: HTTP status, or ``None`` if no response was received
            (connection error, timeout).
        body: Response body text as returned by the service.
        docs_url: Pointer to the service's status code documentation.
    """

    def __init__(
        self,
        status_code: int | None,
        body: str,
        docs_url: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.docs_url = docs_url
        parts = [f"HTTP {status_code}" if status_code is not None else "HTTP request failed"]
        if body:
            parts.append(body.strip())
        if docs_url:
            parts.append(f"See docs at <{docs_url}>")
        super().__init__("\n".join(parts))


class DataParseError(EcbSdmxError):
    """Raised when an SDMX-ML document does not have the expected shape.

    For example a ``Series`` without a ``SeriesKey``, an observation value
    that is not a number, or a period that does not match its frequency.
    The message names the series key or element id involved.
    """


class ConfigError(EcbSdmxError):
    """Raised when a client config file is empty or fails validation."""


class ExportError(EcbSdmxError):
    """Raised when the exporter fails to write an output file."""
