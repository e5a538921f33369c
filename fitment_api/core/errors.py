"""Error taxonomy for the fitment adapter.

Each error carries the HTTP status and the short ``error`` code rendered in
the JSON body. ``message`` is optional diagnostic text.
"""

from typing import Any


class FitmentError(Exception):
    """Base class for failures reported to the caller as structured JSON."""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.error)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.message:
            body["message"] = self.message
        return body


class MalformedRequestError(FitmentError):
    """Request body is not a JSON object with usable field types."""

    status_code = 400
    error = "Malformed request body"


class MissingFieldsError(FitmentError):
    """year, make or model is absent or empty."""

    status_code = 400
    error = "Missing required vehicle information"

    def __init__(self, missing: list[str]) -> None:
        super().__init__()
        self.missing = missing

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}


class CompletionError(FitmentError):
    """The completion API call failed (network, auth, quota, empty reply)."""

    status_code = 500
    error = "Internal Server Error"


class ResponseParseError(FitmentError):
    """Neither direct nor brace-span parsing produced a JSON object."""

    status_code = 500
    error = "Response Parse Failure"
