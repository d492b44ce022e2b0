"""
Component Update Helper — Structured error catalog.

Every error has a code, human message, and suggested fix.
Callers treat any of these as "could not process this issue".
"""

from __future__ import annotations

from typing import Any


class ComponentUpdateError(Exception):
    """Base error with structured code + suggestion."""

    def __init__(self, code: str, message: str, suggestion: str = "", detail: Any = None):
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "error_code": self.code,
            "message": self.message,
        }
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["detail"] = self.detail
        return d


class ExtractionError(ComponentUpdateError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(
            code="EXTRACTION_FAILED",
            message=f"Could not guess component-update details from title '{title}'",
            suggestion="Use '[New <package> version] <version>' or '<package>: update to v<version>'.",
        )


class PreconditionError(ComponentUpdateError):
    def __init__(self, issue_number: int):
        self.issue_number = issue_number
        super().__init__(
            code="AMBIGUOUS_UPDATE",
            message=f"Cannot determine release note from issue {issue_number}",
            suggestion="Label the issue with exactly one 'component-update' label.",
        )


class ResolutionError(ComponentUpdateError):
    def __init__(self, issue_number: int):
        self.issue_number = issue_number
        super().__init__(
            code="CHANGELOG_URL_NOT_FOUND",
            message=f"Could not determine URL from issue {issue_number}",
            suggestion="Add a 'See <url> for details' sentence or end a body line with the changelog URL.",
        )


class TransportError(ComponentUpdateError):
    def __init__(
        self,
        status_code: int | None,
        status_message: str,
        *,
        request_method: str | None = None,
        request_path: str | None = None,
        body: str = "",
        json: Any = None,
    ):
        self.status_code = status_code
        self.status_message = status_message
        self.request_method = request_method
        self.request_path = request_path
        self.body = body
        self.json = json
        if status_code is None:
            code = "TRANSPORT_FAILED"
            message = f"Request failed: {status_message}"
        else:
            code = f"HTTP_{status_code}"
            target = " ".join(p for p in (request_method, request_path) if p)
            message = f"{target or 'Request'} returned HTTP {status_code} {status_message}".rstrip()
        super().__init__(
            code=code,
            message=message,
            suggestion="Check the token, the request path and network connectivity.",
            detail=body[:500] if body else None,
        )


class ParseError(ComponentUpdateError):
    def __init__(self, body: str):
        self.body = body
        super().__init__(
            code="INVALID_JSON",
            message=f"Invalid JSON: {body[:200]}",
            suggestion="The server answered with a success status but a non-JSON body.",
        )


class ProbeError(ComponentUpdateError):
    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(
            code="UNEXPECTED_PROBE_STATUS",
            message=f"Unexpected statusCode: {status_code} ({url})",
            suggestion="Only 200 and 404 are meaningful answers for an artifact probe.",
        )


class URLParseError(ComponentUpdateError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(
            code="INVALID_URL",
            message=f"Could not parse URL {url}",
            suggestion="Only https:// URLs can be probed.",
        )
