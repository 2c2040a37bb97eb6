"""Shared fixtures for hotel gateway tests."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from hotel_gateway.api.auth import create_access_token
from hotel_gateway.api.server import create_app
from hotel_gateway.config import Settings
from hotel_gateway.storage.database import DatabaseManager
from hotel_gateway.storage.models import (
    Enrollment,
    Hotel,
    Payment,
    Room,
    Session,
    Ticket,
    TicketStatus,
    TicketType,
    User,
)

JWT_SECRET = "top_secret"


class Factory:
    """Inserts rows into a test database and returns their IDs."""

    def __init__(self, db: DatabaseManager):
        self.db = db
        self._counter = 0

    def _next(self) -> int:
        self._counter += 1
        return self._counter

    def user(self) -> int:
        n = self._next()
        return self.db.save_user(User(email=f"user{n}@example.com", password="12345678"))

    def token(self, user_id: int | None = None) -> str:
        """Create a user (if needed) with a stored session and return its token."""
        if user_id is None:
            user_id = self.user()
        token = create_access_token(user_id, JWT_SECRET)
        self.db.save_session(Session(user_id=user_id, token=token))
        return token

    def enrollment(self, user_id: int) -> int:
        n = self._next()
        return self.db.save_enrollment(
            Enrollment(
                user_id=user_id,
                name="Adrian",
                cpf=f"{n:011d}",
                birthday=datetime(1995, 2, 5),
                phone="67992214009",
            )
        )

    def ticket_type(self, is_remote: bool = False, includes_hotel: bool = True) -> int:
        return self.db.save_ticket_type(
            TicketType(
                name="tipo teste",
                price=20,
                is_remote=is_remote,
                includes_hotel=includes_hotel,
            )
        )

    def ticket(
        self,
        enrollment_id: int,
        ticket_type_id: int,
        status: TicketStatus = TicketStatus.PAID,
    ) -> int:
        return self.db.save_ticket(
            Ticket(ticket_type_id=ticket_type_id, enrollment_id=enrollment_id, status=status)
        )

    def payment(self, ticket_id: int, value: int = 20) -> int:
        return self.db.save_payment(
            Payment(ticket_id=ticket_id, value=value, card_issuer="VISA", card_last_digits="1234")
        )

    def hotel(self, name: str = "Budapeste", room_count: int = 0) -> int:
        hotel_id = self.db.save_hotel(Hotel(name=name, image="https://example.com/hotel.png"))
        for index in range(1, room_count + 1):
            self.db.save_room(Room(name=f"{index:03d}", capacity=index, hotel_id=hotel_id))
        return hotel_id

    def eligible_user(
        self,
        is_remote: bool = False,
        includes_hotel: bool = True,
        status: TicketStatus = TicketStatus.PAID,
        paid: bool = True,
    ) -> str:
        """Create a user with enrollment, ticket and (optionally) payment; return a token."""
        user_id = self.user()
        token = self.token(user_id)
        enrollment_id = self.enrollment(user_id)
        ticket_type_id = self.ticket_type(is_remote=is_remote, includes_hotel=includes_hotel)
        ticket_id = self.ticket(enrollment_id, ticket_type_id, status)
        if paid:
            self.payment(ticket_id)
        return token


@pytest.fixture
def db_manager(tmp_path):
    """Create a database manager on a fresh temporary database."""
    return DatabaseManager(tmp_path / "test_hotel_gateway.db")


@pytest.fixture
def factory(db_manager):
    return Factory(db_manager)


@pytest.fixture
def app(db_manager):
    settings = Settings(database_path=str(db_manager.db_path), jwt_secret=JWT_SECRET)
    application = create_app(settings)
    application.state.db_manager = db_manager
    return application


@pytest.fixture
def client(app):
    return TestClient(app)

