"""Database models for users, tickets, payments and hotels."""

import sqlite3
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..utils.data_helpers import parse_timestamp


class TicketStatus(str, Enum):
    """Lifecycle state of a ticket."""

    RESERVED = "RESERVED"
    PAID = "PAID"


@dataclass
class User:
    """A registered account."""

    email: str
    password: str
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "User":
        return cls(
            id=row["id"],
            email=row["email"],
            password=row["password"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


@dataclass
class Session:
    """A login session; the token is only accepted while this row exists."""

    user_id: int
    token: str
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Session":
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            token=row["token"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


@dataclass
class Enrollment:
    """A user's registration for the event."""

    user_id: int
    name: str
    cpf: str
    birthday: datetime | None = None
    phone: str | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Enrollment":
        return cls(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            cpf=row["cpf"],
            birthday=parse_timestamp(row["birthday"]),
            phone=row["phone"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


@dataclass
class TicketType:
    """Catalog entry describing attendance modality and included perks."""

    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def grants_hotel_access(self) -> bool:
        """In-person tickets that include lodging are the only ones that unlock hotels."""
        return not self.is_remote and self.includes_hotel

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "TicketType":
        return cls(
            id=row["id"],
            name=row["name"],
            price=row["price"],
            is_remote=bool(row["is_remote"]),
            includes_hotel=bool(row["includes_hotel"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


@dataclass
class Ticket:
    """An event ticket owned through an enrollment."""

    ticket_type_id: int
    enrollment_id: int
    status: TicketStatus = TicketStatus.RESERVED
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_paid(self) -> bool:
        return self.status == TicketStatus.PAID

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Ticket":
        return cls(
            id=row["id"],
            ticket_type_id=row["ticket_type_id"],
            enrollment_id=row["enrollment_id"],
            status=TicketStatus(row["status"]),
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


@dataclass
class Payment:
    """A payment made for a ticket."""

    ticket_id: int
    value: int
    card_issuer: str
    card_last_digits: str
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Payment":
        return cls(
            id=row["id"],
            ticket_id=row["ticket_id"],
            value=row["value"],
            card_issuer=row["card_issuer"],
            card_last_digits=row["card_last_digits"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


@dataclass
class Room:
    """A room offered by a hotel."""

    name: str
    capacity: int
    hotel_id: int
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Room":
        return cls(
            id=row["id"],
            name=row["name"],
            capacity=row["capacity"],
            hotel_id=row["hotel_id"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


@dataclass
class Hotel:
    """A partner hotel available to ticket holders."""

    name: str
    image: str
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Hotel":
        return cls(
            id=row["id"],
            name=row["name"],
            image=row["image"],
            created_at=parse_timestamp(row["created_at"]),
            updated_at=parse_timestamp(row["updated_at"]),
        )


@dataclass
class HotelWithRooms(Hotel):
    """A hotel together with all of its rooms."""

    rooms: list[Room] = field(default_factory=list)

    @classmethod
    def from_hotel(cls, hotel: Hotel, rooms: list[Room]) -> "HotelWithRooms":
        return cls(
            id=hotel.id,
            name=hotel.name,
            image=hotel.image,
            created_at=hotel.created_at,
            updated_at=hotel.updated_at,
            rooms=rooms,
        )
