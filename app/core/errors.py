from typing import Any, Dict, Optional

from fastapi import HTTPException, status

# Codes for HTTPExceptions raised outside the APIError hierarchy (routing, FastAPI internals).
_CODE_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: "VALIDATION_ERROR",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


class APIError(HTTPException):
    """HTTPException carrying a machine-readable code; subclasses pin status and code."""

    status_code_for_class = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_ERROR"
    default_message = "Internal server error."

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(status_code=self.status_code_for_class, detail=message or self.default_message)
        self.details = details

    @property
    def message(self) -> str:
        return str(self.detail)


class ValidationError(APIError):
    status_code_for_class = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "Request is invalid."


class UnauthorizedError(APIError):
    status_code_for_class = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_message = "Invalid credentials"


class NotFoundError(APIError):
    status_code_for_class = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Not found"


class UpstreamError(APIError):
    """A generative-model provider failed or returned unusable content."""

    code = "UPSTREAM_ERROR"


def code_for_status(status_code: int) -> str:
    if status_code in _CODE_BY_STATUS:
        return _CODE_BY_STATUS[status_code]
    return "CLIENT_ERROR" if 400 <= status_code < 500 else "INTERNAL_ERROR"


def error_content(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"error": message, "code": code, "details": details}


class LLMProviderError(Exception):
    """Raised by provider clients on transport, auth or status failures."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
