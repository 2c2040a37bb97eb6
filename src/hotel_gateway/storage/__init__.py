"""Data storage and persistence module."""

from .database import DatabaseManager
from .models import (
    Enrollment,
    Hotel,
    HotelWithRooms,
    Payment,
    Room,
    Session,
    Ticket,
    TicketStatus,
    TicketType,
    User,
)

__all__ = [
    "DatabaseManager",
    "Enrollment",
    "Hotel",
    "HotelWithRooms",
    "Payment",
    "Room",
    "Session",
    "Ticket",
    "TicketStatus",
    "TicketType",
    "User",
]
