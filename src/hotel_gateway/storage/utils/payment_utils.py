"""Payment database operations."""

import sqlite3
from pathlib import Path

from .connection import connect
from ..models import Payment
from ...utils.data_helpers import format_timestamp


class PaymentManager:
    """Manages payment records."""

    def __init__(self, db_path: str | Path):
        """Initialize payment manager.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)

    def save_payment(self, payment: Payment) -> int:
        """Save a payment for a ticket.

        Args:
            payment: Payment instance to save

        Returns:
            Database ID of the saved record
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO payments (
                    ticket_id, value, card_issuer, card_last_digits,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)
            """,
                (
                    payment.ticket_id,
                    payment.value,
                    payment.card_issuer,
                    payment.card_last_digits,
                    format_timestamp(payment.created_at),
                    format_timestamp(payment.updated_at),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid
            if row_id is None:
                raise RuntimeError("Failed to get row ID after insert")
            return row_id

    def get_payment_by_ticket_id(self, ticket_id: int) -> Payment | None:
        """Get the most recent payment made for a ticket.

        Args:
            ticket_id: Ticket ID to query

        Returns:
            Payment or None if the ticket was never paid
        """
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                """
                SELECT * FROM payments
                WHERE ticket_id = ?
                ORDER BY created_at DESC, id DESC
                LIMIT 1
            """,
                (ticket_id,),
            ).fetchone()
            return Payment.from_row(row) if row else None
