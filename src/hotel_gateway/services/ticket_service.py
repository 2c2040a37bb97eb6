"""Service for looking up a user's ticket and the ticket type catalog."""

import logging

from ..errors import NotFoundError
from ..storage.database import DatabaseManager
from ..storage.models import Ticket, TicketType

logger = logging.getLogger(__name__)


class TicketService:
    """Resolves tickets through the user's enrollment."""

    def __init__(self, db_manager: DatabaseManager):
        """Initialize the service.

        Args:
            db_manager: Database manager instance
        """
        self.db_manager = db_manager

    def get_ticket_by_user_id(self, user_id: int) -> Ticket:
        """Get the ticket bought by a user.

        Args:
            user_id: Authenticated user ID

        Returns:
            The user's ticket

        Raises:
            NotFoundError: The user has no enrollment or no ticket
        """
        enrollment = self.db_manager.get_enrollment_by_user_id(user_id)
        if not enrollment:
            logger.info(f"User {user_id} has no enrollment")
            raise NotFoundError()

        ticket = self.db_manager.get_ticket_by_enrollment_id(enrollment.id)
        if not ticket:
            logger.info(f"User {user_id} has no ticket for enrollment {enrollment.id}")
            raise NotFoundError()

        return ticket

    def get_ticket_types(self) -> list[TicketType]:
        return self.db_manager.get_ticket_types()
