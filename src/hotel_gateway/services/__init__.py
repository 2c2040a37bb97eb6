"""Eligibility and lookup services."""

from .hotel_service import HotelService
from .payment_service import PaymentService
from .ticket_service import TicketService

__all__ = ["HotelService", "PaymentService", "TicketService"]
