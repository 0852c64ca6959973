"""Typed API errors.

Each error renders as ``{"error": code, "detail": message, **context}`` via the
handlers registered in ``buyer_registry.main``.
"""


class ApiError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500
    code = "InternalError"

    def __init__(self, detail: str, **context):
        super().__init__(detail)
        self.detail = detail
        self.context = context

    def to_payload(self) -> dict:
        payload = {"error": self.code, "detail": self.detail}
        payload.update({k: v for k, v in self.context.items() if v is not None})
        return payload


class ValidationError(ApiError):
    """A required field is missing or malformed."""

    status_code = 400
    code = "ValidationError"


class Unauthenticated(ApiError):
    """No identity was supplied with the request."""

    status_code = 401
    code = "Unauthenticated"


class Forbidden(ApiError):
    """Authenticated, but lacking the role, capability or grant."""

    status_code = 403
    code = "Forbidden"

    def __init__(self, detail: str, reason: str | None = None, **context):
        super().__init__(detail, reason=reason, **context)
        self.reason = reason


class NotFound(ApiError):
    """Home, share, wishlist or trend coverage is absent."""

    status_code = 404
    code = "NotFound"


class PayloadTooLarge(ApiError):
    status_code = 413
    code = "PayloadTooLarge"


__all__ = [
    "ApiError",
    "ValidationError",
    "Unauthenticated",
    "Forbidden",
    "NotFound",
    "PayloadTooLarge",
]
