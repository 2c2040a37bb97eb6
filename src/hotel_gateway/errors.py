"""Domain errors raised by the eligibility and hotel services."""


class GatewayError(Exception):
    """Base exception for all gateway errors.

    Each subclass knows the HTTP status it maps to, so the API layer can
    translate it with a single exception handler.
    """

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(GatewayError):
    """A ticket, ticket type or hotel could not be found (HTTP 404)."""

    status_code = 404
    default_message = "No result for this search!"


class PaymentRequiredError(GatewayError):
    """The ticket is unpaid or does not grant hotel access (HTTP 402)."""

    status_code = 402
    default_message = "No payment found for your ticket"


class UnauthorizedError(GatewayError):
    """Missing or invalid credentials, or access to another user's data (HTTP 401)."""

    status_code = 401
    default_message = "You must be signed in to continue"
