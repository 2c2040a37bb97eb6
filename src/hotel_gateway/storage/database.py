"""Database manager for SQLite storage."""

import logging
from pathlib import Path
from typing import Any

from .models import (
    Enrollment,
    Hotel,
    HotelWithRooms,
    Payment,
    Room,
    Session,
    Ticket,
    TicketType,
    User,
)
from .utils.connection import connect
from .utils.hotel_utils import HotelManager
from .utils.payment_utils import PaymentManager
from .utils.ticket_utils import TicketManager
from .utils.user_utils import UserManager

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages SQLite database operations for the hotel gateway."""

    def __init__(self, db_path: str | Path = "hotel_gateway.db"):
        """Initialize database manager.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self._ensure_database_exists()

        self.user_manager = UserManager(self.db_path)
        self.ticket_manager = TicketManager(self.db_path)
        self.payment_manager = PaymentManager(self.db_path)
        self.hotel_manager = HotelManager(self.db_path)

    def _ensure_database_exists(self) -> None:
        """Create database and tables if they don't exist."""
        with connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    email TEXT UNIQUE NOT NULL,
                    password TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS sessions (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL REFERENCES users(id),
                    token TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS enrollments (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER UNIQUE NOT NULL REFERENCES users(id),
                    name TEXT NOT NULL,
                    cpf TEXT UNIQUE NOT NULL,
                    birthday TIMESTAMP,
                    phone TEXT,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS ticket_types (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    price INTEGER NOT NULL,
                    is_remote BOOLEAN NOT NULL DEFAULT FALSE,
                    includes_hotel BOOLEAN NOT NULL DEFAULT FALSE,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS tickets (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    ticket_type_id INTEGER NOT NULL REFERENCES ticket_types(id),
                    enrollment_id INTEGER UNIQUE NOT NULL REFERENCES enrollments(id),
                    status TEXT NOT NULL CHECK (status IN ('RESERVED', 'PAID')),
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS payments (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    ticket_id INTEGER NOT NULL REFERENCES tickets(id),
                    value INTEGER NOT NULL,
                    card_issuer TEXT NOT NULL,
                    card_last_digits TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS hotels (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    image TEXT NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.execute("""
                CREATE TABLE IF NOT EXISTS rooms (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    capacity INTEGER NOT NULL,
                    hotel_id INTEGER NOT NULL REFERENCES hotels(id),
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_sessions_token ON sessions(token)"
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_payments_ticket_id ON payments(ticket_id)"
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_rooms_hotel_id ON rooms(hotel_id)"
            )

            conn.commit()
            logger.info(f"Database initialized at {self.db_path}")

    # Users and sessions

    def save_user(self, user: User) -> int:
        return self.user_manager.save_user(user)

    def get_user_by_id(self, user_id: int) -> User | None:
        return self.user_manager.get_user_by_id(user_id)

    def save_session(self, session: Session) -> int:
        return self.user_manager.save_session(session)

    def get_session_by_token(self, token: str) -> Session | None:
        return self.user_manager.get_session_by_token(token)

    def delete_session(self, token: str) -> bool:
        return self.user_manager.delete_session(token)

    def save_enrollment(self, enrollment: Enrollment) -> int:
        return self.user_manager.save_enrollment(enrollment)

    def get_enrollment_by_user_id(self, user_id: int) -> Enrollment | None:
        return self.user_manager.get_enrollment_by_user_id(user_id)

    def get_enrollment_by_id(self, enrollment_id: int) -> Enrollment | None:
        return self.user_manager.get_enrollment_by_id(enrollment_id)

    # Tickets and payments

    def save_ticket_type(self, ticket_type: TicketType) -> int:
        return self.ticket_manager.save_ticket_type(ticket_type)

    def get_ticket_types(self) -> list[TicketType]:
        return self.ticket_manager.get_ticket_types()

    def save_ticket(self, ticket: Ticket) -> int:
        return self.ticket_manager.save_ticket(ticket)

    def get_ticket_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        return self.ticket_manager.get_ticket_by_enrollment_id(enrollment_id)

    def get_ticket_by_id(self, ticket_id: int) -> Ticket | None:
        return self.ticket_manager.get_ticket_by_id(ticket_id)

    def save_payment(self, payment: Payment) -> int:
        return self.payment_manager.save_payment(payment)

    def get_payment_by_ticket_id(self, ticket_id: int) -> Payment | None:
        return self.payment_manager.get_payment_by_ticket_id(ticket_id)

    # Hotels

    def save_hotel(self, hotel: Hotel) -> int:
        return self.hotel_manager.save_hotel(hotel)

    def save_room(self, room: Room) -> int:
        return self.hotel_manager.save_room(room)

    def find_hotels(self) -> list[Hotel]:
        return self.hotel_manager.find_hotels()

    def find_hotel_by_id(self, hotel_id: int) -> HotelWithRooms | None:
        return self.hotel_manager.find_hotel_by_id(hotel_id)

    def get_database_stats(self) -> dict[str, Any]:
        """Get statistics about the database contents.

        Returns:
            Dictionary with a row count per table
        """
        tables = [
            "users",
            "sessions",
            "enrollments",
            "ticket_types",
            "tickets",
            "payments",
            "hotels",
            "rooms",
        ]
        with connect(self.db_path) as conn:
            stats = {}
            for table in tables:
                cursor = conn.execute(f"SELECT COUNT(*) FROM {table}")
                stats[table] = cursor.fetchone()[0]
            return stats
