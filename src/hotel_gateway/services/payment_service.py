"""Service for looking up payments made for a ticket."""

import logging

from ..errors import NotFoundError, UnauthorizedError
from ..storage.database import DatabaseManager
from ..storage.models import Payment

logger = logging.getLogger(__name__)


class PaymentService:
    """Reads payments on behalf of the ticket owner."""

    def __init__(self, db_manager: DatabaseManager):
        """Initialize the service.

        Args:
            db_manager: Database manager instance
        """
        self.db_manager = db_manager

    def get_payment_by_ticket_id(self, user_id: int, ticket_id: int) -> Payment | None:
        """Get the payment for a ticket owned by the user.

        Args:
            user_id: Authenticated user ID
            ticket_id: Ticket to look up

        Returns:
            Payment, or None if the ticket has not been paid

        Raises:
            NotFoundError: The ticket does not exist
            UnauthorizedError: The ticket belongs to another user
        """
        ticket = self.db_manager.get_ticket_by_id(ticket_id)
        if not ticket:
            raise NotFoundError()

        enrollment = self.db_manager.get_enrollment_by_id(ticket.enrollment_id)
        if not enrollment or enrollment.user_id != user_id:
            logger.warning(f"User {user_id} requested payment for ticket {ticket_id} they do not own")
            raise UnauthorizedError()

        return self.db_manager.get_payment_by_ticket_id(ticket_id)
