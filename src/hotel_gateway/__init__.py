"""Hotel Gateway - decides which event hotels a ticket holder may view."""

__version__ = "0.1.0"
__description__ = "Booking-eligibility gateway for event hotels"

from .errors import GatewayError, NotFoundError, PaymentRequiredError, UnauthorizedError
from .services.hotel_service import HotelService
from .storage.database import DatabaseManager

__all__ = [
    "DatabaseManager",
    "GatewayError",
    "HotelService",
    "NotFoundError",
    "PaymentRequiredError",
    "UnauthorizedError",
]
