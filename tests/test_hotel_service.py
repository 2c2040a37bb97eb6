"""Tests for the eligibility check and hotel lookups."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from hotel_gateway.errors import NotFoundError, PaymentRequiredError, UnauthorizedError
from hotel_gateway.services.hotel_service import HotelService
from hotel_gateway.services.payment_service import PaymentService
from hotel_gateway.services.ticket_service import TicketService
from hotel_gateway.storage.database import DatabaseManager
from hotel_gateway.storage.models import (
    Enrollment,
    Hotel,
    HotelWithRooms,
    Payment,
    Room,
    Ticket,
    TicketStatus,
    TicketType,
)

USER_ID = 7


@pytest.fixture
def mock_db_manager():
    """Create a mock database manager holding one eligible user."""
    db = Mock(spec=DatabaseManager)
    db.get_enrollment_by_user_id.return_value = Enrollment(
        id=3, user_id=USER_ID, name="Adrian", cpf="04805239166"
    )
    db.get_enrollment_by_id.return_value = Enrollment(
        id=3, user_id=USER_ID, name="Adrian", cpf="04805239166"
    )
    ticket = Ticket(id=11, ticket_type_id=2, enrollment_id=3, status=TicketStatus.PAID)
    db.get_ticket_by_enrollment_id.return_value = ticket
    db.get_ticket_by_id.return_value = ticket
    db.get_payment_by_ticket_id.return_value = Payment(
        id=5, ticket_id=11, value=600, card_issuer="VISA", card_last_digits="4242"
    )
    db.get_ticket_types.return_value = [
        TicketType(id=1, name="Online", price=100, is_remote=True, includes_hotel=False),
        TicketType(id=2, name="Hotel", price=600, is_remote=False, includes_hotel=True),
    ]
    return db


@pytest.fixture
def hotel_service(mock_db_manager):
    return HotelService(mock_db_manager)


class TestVerifyPayment:
    """Test each step of the eligibility check."""

    def test_eligible_user_gets_ticket_type(self, hotel_service):
        ticket_type = hotel_service.verify_payment(USER_ID)

        assert ticket_type.id == 2
        assert ticket_type.grants_hotel_access

    def test_no_enrollment(self, hotel_service, mock_db_manager):
        mock_db_manager.get_enrollment_by_user_id.return_value = None

        with pytest.raises(NotFoundError):
            hotel_service.verify_payment(USER_ID)

        mock_db_manager.get_ticket_by_enrollment_id.assert_not_called()

    def test_no_ticket(self, hotel_service, mock_db_manager):
        mock_db_manager.get_ticket_by_enrollment_id.return_value = None

        with pytest.raises(NotFoundError):
            hotel_service.verify_payment(USER_ID)

    def test_no_payment(self, hotel_service, mock_db_manager):
        mock_db_manager.get_payment_by_ticket_id.return_value = None

        with pytest.raises(PaymentRequiredError):
            hotel_service.verify_payment(USER_ID)

        mock_db_manager.get_ticket_types.assert_not_called()

    def test_reserved_ticket(self, hotel_service, mock_db_manager):
        ticket = Ticket(id=11, ticket_type_id=2, enrollment_id=3, status=TicketStatus.RESERVED)
        mock_db_manager.get_ticket_by_enrollment_id.return_value = ticket
        mock_db_manager.get_ticket_by_id.return_value = ticket

        with pytest.raises(PaymentRequiredError):
            hotel_service.verify_payment(USER_ID)

    def test_remote_ticket_type(self, hotel_service, mock_db_manager):
        ticket = Ticket(id=11, ticket_type_id=1, enrollment_id=3, status=TicketStatus.PAID)
        mock_db_manager.get_ticket_by_enrollment_id.return_value = ticket

        with pytest.raises(PaymentRequiredError):
            hotel_service.verify_payment(USER_ID)

    def test_ticket_type_without_hotel(self, hotel_service, mock_db_manager):
        mock_db_manager.get_ticket_types.return_value = [
            TicketType(id=2, name="In person", price=250, is_remote=False, includes_hotel=False),
        ]

        with pytest.raises(PaymentRequiredError):
            hotel_service.verify_payment(USER_ID)

    def test_unknown_ticket_type(self, hotel_service, mock_db_manager):
        mock_db_manager.get_ticket_types.return_value = []

        with pytest.raises(NotFoundError):
            hotel_service.verify_payment(USER_ID)

    def test_foreign_ticket(self, hotel_service, mock_db_manager):
        mock_db_manager.get_enrollment_by_id.return_value = Enrollment(
            id=3, user_id=USER_ID + 1, name="Someone else", cpf="11111111111"
        )

        with pytest.raises(UnauthorizedError):
            hotel_service.verify_payment(USER_ID)

    def test_database_errors_are_not_masked(self, hotel_service, mock_db_manager):
        """Unexpected failures propagate instead of turning into NotFound."""
        mock_db_manager.get_ticket_types.side_effect = RuntimeError("database is locked")

        with pytest.raises(RuntimeError):
            hotel_service.verify_payment(USER_ID)


class TestHotelLookups:
    """Test hotel retrieval after eligibility passes."""

    def test_get_hotels(self, hotel_service, mock_db_manager):
        hotels = [Hotel(id=1, name="Budapeste", image="img.png", created_at=datetime(2023, 2, 5))]
        mock_db_manager.find_hotels.return_value = hotels

        assert hotel_service.get_hotels(USER_ID) == hotels

    def test_get_hotels_checks_eligibility_first(self, hotel_service, mock_db_manager):
        mock_db_manager.get_payment_by_ticket_id.return_value = None

        with pytest.raises(PaymentRequiredError):
            hotel_service.get_hotels(USER_ID)

        mock_db_manager.find_hotels.assert_not_called()

    def test_get_hotel_by_id(self, hotel_service, mock_db_manager):
        hotel = HotelWithRooms(
            id=4,
            name="Budapeste",
            image="img.png",
            rooms=[Room(id=1, name="101", capacity=2, hotel_id=4)],
        )
        mock_db_manager.find_hotel_by_id.return_value = hotel

        result = hotel_service.get_hotel_by_id(USER_ID, 4)

        assert result.rooms[0].name == "101"
        mock_db_manager.find_hotel_by_id.assert_called_once_with(4)

    def test_get_missing_hotel(self, hotel_service, mock_db_manager):
        mock_db_manager.find_hotel_by_id.return_value = None

        with pytest.raises(NotFoundError):
            hotel_service.get_hotel_by_id(USER_ID, 4)

    def test_get_hotel_by_id_remote_ticket(self, hotel_service, mock_db_manager):
        ticket = Ticket(id=11, ticket_type_id=1, enrollment_id=3, status=TicketStatus.PAID)
        mock_db_manager.get_ticket_by_enrollment_id.return_value = ticket

        with pytest.raises(PaymentRequiredError):
            hotel_service.get_hotel_by_id(USER_ID, 4)

        mock_db_manager.find_hotel_by_id.assert_not_called()


class TestCollaboratorServices:
    """Test the ticket and payment services on their own."""

    def test_ticket_service_returns_ticket(self, mock_db_manager):
        ticket = TicketService(mock_db_manager).get_ticket_by_user_id(USER_ID)

        assert ticket.id == 11
        mock_db_manager.get_ticket_by_enrollment_id.assert_called_once_with(3)

    def test_payment_service_missing_ticket(self, mock_db_manager):
        mock_db_manager.get_ticket_by_id.return_value = None

        with pytest.raises(NotFoundError):
            PaymentService(mock_db_manager).get_payment_by_ticket_id(USER_ID, 11)

    def test_payment_service_returns_none_when_unpaid(self, mock_db_manager):
        mock_db_manager.get_payment_by_ticket_id.return_value = None

        assert PaymentService(mock_db_manager).get_payment_by_ticket_id(USER_ID, 11) is None

    def test_injected_collaborators_are_used(self, mock_db_manager):
        ticket_service = Mock(spec=TicketService)
        ticket_service.get_ticket_by_user_id.side_effect = NotFoundError()
        service = HotelService(mock_db_manager, ticket_service=ticket_service)

        with pytest.raises(NotFoundError):
            service.get_hotels(USER_ID)

        ticket_service.get_ticket_by_user_id.assert_called_once_with(USER_ID)
