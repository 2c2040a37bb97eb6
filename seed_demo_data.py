#!/usr/bin/env python3
"""
Script to populate a database with demo data for the hotel endpoints.
Creates one eligible user with a session and prints a bearer token for it.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent / 'src'))

from hotel_gateway.api.auth import create_access_token
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
from hotel_gateway.utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

DEMO_HOTELS = {
    "Driven Resort": [("101", 1), ("102", 2), ("103", 3)],
    "Driven Palace": [("201", 2), ("202", 4)],
    "Driven World": [("301", 1), ("302", 2)],
}


def seed(db: DatabaseManager, jwt_secret: str, email: str) -> str:
    """Insert demo rows and return a bearer token for the demo user."""
    user_id = db.save_user(User(email=email, password="demo-password"))
    enrollment_id = db.save_enrollment(
        Enrollment(
            user_id=user_id,
            name="Demo Attendee",
            cpf="00000000000",
            birthday=datetime(1990, 1, 1),
            phone="(21) 99999-9999",
        )
    )

    db.save_ticket_type(TicketType(name="Online", price=100, is_remote=True, includes_hotel=False))
    db.save_ticket_type(TicketType(name="In person", price=250, is_remote=False, includes_hotel=False))
    hotel_type_id = db.save_ticket_type(
        TicketType(name="In person + hotel", price=600, is_remote=False, includes_hotel=True)
    )

    ticket_id = db.save_ticket(
        Ticket(ticket_type_id=hotel_type_id, enrollment_id=enrollment_id, status=TicketStatus.PAID)
    )
    db.save_payment(
        Payment(ticket_id=ticket_id, value=600, card_issuer="VISA", card_last_digits="4242")
    )

    for hotel_name, rooms in DEMO_HOTELS.items():
        slug = hotel_name.lower().replace(" ", "-")
        hotel_id = db.save_hotel(Hotel(name=hotel_name, image=f"https://picsum.photos/seed/{slug}/400"))
        for room_name, capacity in rooms:
            db.save_room(Room(name=room_name, capacity=capacity, hotel_id=hotel_id))
        logger.debug(f"Created {hotel_name} with {len(rooms)} rooms")

    token = create_access_token(user_id, jwt_secret)
    db.save_session(Session(user_id=user_id, token=token))
    return token


def main():
    """Seed the configured database."""
    settings = Settings.from_environment()

    parser = argparse.ArgumentParser(description="Populate the hotel gateway database with demo data")
    parser.add_argument("--db", default=settings.database_path, help="SQLite database path")
    parser.add_argument("--email", default="demo@example.com", help="Email of the demo user")
    args = parser.parse_args()

    setup_logging(settings.log_level)

    try:
        db = DatabaseManager(args.db)
        token = seed(db, settings.jwt_secret, args.email)

        logger.info(f"Seed completed: {db.get_database_stats()}")
        print(f"Demo data written to {args.db}")
        print(f"Authorization: Bearer {token}")
        return 0

    except Exception as e:
        logger.error(f"Failed to seed demo data: {e}")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
