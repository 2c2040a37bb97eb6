"""Service deciding which hotels a ticket holder may view."""

import logging

from ..errors import NotFoundError, PaymentRequiredError
from ..storage.database import DatabaseManager
from ..storage.models import Hotel, HotelWithRooms, Ticket, TicketType
from .payment_service import PaymentService
from .ticket_service import TicketService

logger = logging.getLogger(__name__)


class HotelService:
    """Checks ticket eligibility and serves hotel listings.

    A user may browse hotels only when they hold a ticket, that ticket is
    paid, and its type is an in-person type that includes lodging. Every
    failed check raises a ``GatewayError`` subclass describing the reason;
    the API layer turns it into the matching HTTP status.
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        ticket_service: TicketService | None = None,
        payment_service: PaymentService | None = None,
    ):
        """Initialize the service.

        Args:
            db_manager: Database manager instance
            ticket_service: Optional ticket service (built from db_manager if omitted)
            payment_service: Optional payment service (built from db_manager if omitted)
        """
        self.db_manager = db_manager
        self.ticket_service = ticket_service or TicketService(db_manager)
        self.payment_service = payment_service or PaymentService(db_manager)

    def verify_payment(self, user_id: int) -> TicketType:
        """Run the eligibility check for a user.

        Args:
            user_id: Authenticated user ID

        Returns:
            The ticket type that grants hotel access

        Raises:
            NotFoundError: No enrollment, no ticket, or unknown ticket type
            PaymentRequiredError: Ticket unpaid, remote, or without hotel
            UnauthorizedError: The ticket belongs to another user
        """
        ticket = self.ticket_service.get_ticket_by_user_id(user_id)

        payment = self.payment_service.get_payment_by_ticket_id(user_id, ticket.id)
        if not payment:
            logger.info(f"Ticket {ticket.id} of user {user_id} has no payment")
            raise PaymentRequiredError()

        if not ticket.is_paid:
            logger.info(f"Ticket {ticket.id} of user {user_id} is {ticket.status.value}")
            raise PaymentRequiredError()

        ticket_type = self._find_ticket_type(ticket)
        if not ticket_type.grants_hotel_access:
            logger.info(
                f"Ticket type {ticket_type.id} does not grant hotel access "
                f"(remote={ticket_type.is_remote}, includes_hotel={ticket_type.includes_hotel})"
            )
            raise PaymentRequiredError("Your ticket type does not include hotel accommodation")

        return ticket_type

    def _find_ticket_type(self, ticket: Ticket) -> TicketType:
        for ticket_type in self.ticket_service.get_ticket_types():
            if ticket_type.id == ticket.ticket_type_id:
                return ticket_type

        logger.warning(f"Ticket {ticket.id} references unknown ticket type {ticket.ticket_type_id}")
        raise NotFoundError()

    def get_hotels(self, user_id: int) -> list[Hotel]:
        """List every hotel for an eligible user."""
        self.verify_payment(user_id)
        return self.db_manager.find_hotels()

    def get_hotel_by_id(self, user_id: int, hotel_id: int) -> HotelWithRooms:
        """Get one hotel with its rooms for an eligible user.

        Raises:
            NotFoundError: No hotel has this ID (after eligibility passed)
        """
        self.verify_payment(user_id)

        hotel = self.db_manager.find_hotel_by_id(hotel_id)
        if not hotel:
            raise NotFoundError()

        return hotel
