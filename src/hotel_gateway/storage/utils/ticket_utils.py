"""Ticket and ticket type database operations."""

import sqlite3
from pathlib import Path

from .connection import connect
from ..models import Ticket, TicketType
from ...utils.data_helpers import format_timestamp
from ...utils.logging_config import get_logger

logger = get_logger(__name__)


class TicketManager:
    """Manages tickets and the ticket type catalog."""

    def __init__(self, db_path: str | Path):
        """Initialize ticket manager.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)

    def save_ticket_type(self, ticket_type: TicketType) -> int:
        """Save a ticket type to the catalog.

        Args:
            ticket_type: TicketType instance to save

        Returns:
            Database ID of the saved record
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO ticket_types (
                    name, price, is_remote, includes_hotel, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)
            """,
                (
                    ticket_type.name,
                    ticket_type.price,
                    ticket_type.is_remote,
                    ticket_type.includes_hotel,
                    format_timestamp(ticket_type.created_at),
                    format_timestamp(ticket_type.updated_at),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid
            if row_id is None:
                raise RuntimeError("Failed to get row ID after insert")
            return row_id

    def get_ticket_types(self) -> list[TicketType]:
        """Get every ticket type in the catalog.

        Returns:
            List of TicketType instances ordered by ID
        """
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            cursor = conn.execute("SELECT * FROM ticket_types ORDER BY id")
            return [TicketType.from_row(row) for row in cursor.fetchall()]

    def save_ticket(self, ticket: Ticket) -> int:
        """Save a ticket.

        Args:
            ticket: Ticket instance to save

        Returns:
            Database ID of the saved record
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO tickets (
                    ticket_type_id, enrollment_id, status, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?)
            """,
                (
                    ticket.ticket_type_id,
                    ticket.enrollment_id,
                    ticket.status.value,
                    format_timestamp(ticket.created_at),
                    format_timestamp(ticket.updated_at),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid
            if row_id is None:
                raise RuntimeError("Failed to get row ID after insert")
            return row_id

    def get_ticket_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        """Get the ticket bought under an enrollment.

        Args:
            enrollment_id: Enrollment ID to query

        Returns:
            Ticket or None if nothing was bought yet
        """
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM tickets WHERE enrollment_id = ?", (enrollment_id,)
            ).fetchone()
            return Ticket.from_row(row) if row else None

    def get_ticket_by_id(self, ticket_id: int) -> Ticket | None:
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM tickets WHERE id = ?", (ticket_id,)
            ).fetchone()
            return Ticket.from_row(row) if row else None
