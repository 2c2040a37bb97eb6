"""Hotel and room database operations."""

import sqlite3
from pathlib import Path

from .connection import connect
from ..models import Hotel, HotelWithRooms, Room
from ...utils.data_helpers import format_timestamp
from ...utils.logging_config import get_logger

logger = get_logger(__name__)


class HotelManager:
    """Manages hotel and room database operations."""

    def __init__(self, db_path: str | Path):
        """Initialize hotel manager.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)

    def save_hotel(self, hotel: Hotel) -> int:
        """Save a hotel to database.

        Args:
            hotel: Hotel instance to save

        Returns:
            Database ID of the saved record
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO hotels (name, image, created_at, updated_at)
                VALUES (?, ?, ?, ?)
            """,
                (
                    hotel.name,
                    hotel.image,
                    format_timestamp(hotel.created_at),
                    format_timestamp(hotel.updated_at),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid
            if row_id is None:
                raise RuntimeError("Failed to get row ID after insert")
            return row_id

    def save_room(self, room: Room) -> int:
        """Save a room belonging to a hotel.

        Args:
            room: Room instance to save

        Returns:
            Database ID of the saved record
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO rooms (name, capacity, hotel_id, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
            """,
                (
                    room.name,
                    room.capacity,
                    room.hotel_id,
                    format_timestamp(room.created_at),
                    format_timestamp(room.updated_at),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid
            if row_id is None:
                raise RuntimeError("Failed to get row ID after insert")
            return row_id

    def find_hotels(self) -> list[Hotel]:
        """Get all hotels.

        Returns:
            List of Hotel instances ordered by ID
        """
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            cursor = conn.execute("SELECT * FROM hotels ORDER BY id")
            return [Hotel.from_row(row) for row in cursor.fetchall()]

    def find_hotel_by_id(self, hotel_id: int) -> HotelWithRooms | None:
        """Get a hotel and its rooms.

        Args:
            hotel_id: Hotel ID to query

        Returns:
            HotelWithRooms or None if no hotel has this ID
        """
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM hotels WHERE id = ?", (hotel_id,)
            ).fetchone()
            if not row:
                return None

            cursor = conn.execute(
                "SELECT * FROM rooms WHERE hotel_id = ? ORDER BY id", (hotel_id,)
            )
            rooms = [Room.from_row(room_row) for room_row in cursor.fetchall()]

        logger.debug(f"Loaded hotel {hotel_id} with {len(rooms)} rooms")
        return HotelWithRooms.from_hotel(Hotel.from_row(row), rooms)
