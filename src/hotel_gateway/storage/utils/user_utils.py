"""User, session and enrollment database operations."""

import sqlite3
from pathlib import Path

from .connection import connect
from ..models import Enrollment, Session, User
from ...utils.data_helpers import format_timestamp
from ...utils.logging_config import get_logger

logger = get_logger(__name__)


class UserManager:
    """Manages users, their login sessions and event enrollments."""

    def __init__(self, db_path: str | Path):
        """Initialize user manager.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)

    def save_user(self, user: User) -> int:
        """Save a user to the database.

        Args:
            user: User instance to save

        Returns:
            Database ID of the saved record
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO users (email, password, created_at, updated_at)
                VALUES (?, ?, ?, ?)
            """,
                (
                    user.email,
                    user.password,
                    format_timestamp(user.created_at),
                    format_timestamp(user.updated_at),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid
            if row_id is None:
                raise RuntimeError("Failed to get row ID after insert")
            return row_id

    def get_user_by_id(self, user_id: int) -> User | None:
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM users WHERE id = ?", (user_id,)
            ).fetchone()
            return User.from_row(row) if row else None

    def save_session(self, session: Session) -> int:
        """Store a session token for a user.

        Args:
            session: Session instance to save

        Returns:
            Database ID of the saved record
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO sessions (user_id, token, created_at, updated_at)
                VALUES (?, ?, ?, ?)
            """,
                (
                    session.user_id,
                    session.token,
                    format_timestamp(session.created_at),
                    format_timestamp(session.updated_at),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid
            if row_id is None:
                raise RuntimeError("Failed to get row ID after insert")
            return row_id

    def get_session_by_token(self, token: str) -> Session | None:
        """Look up the active session holding a token.

        Args:
            token: Bearer token presented by the client

        Returns:
            Session or None if the token has no session
        """
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM sessions WHERE token = ?", (token,)
            ).fetchone()
            return Session.from_row(row) if row else None

    def delete_session(self, token: str) -> bool:
        """Revoke a session.

        Returns:
            True if a session was removed
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM sessions WHERE token = ?", (token,))
            conn.commit()
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("Session revoked")
            return deleted

    def save_enrollment(self, enrollment: Enrollment) -> int:
        """Save an enrollment; each user may hold at most one.

        Args:
            enrollment: Enrollment instance to save

        Returns:
            Database ID of the saved record
        """
        with connect(self.db_path) as conn:
            cursor = conn.execute(
                """
                INSERT INTO enrollments (
                    user_id, name, cpf, birthday, phone, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    enrollment.user_id,
                    enrollment.name,
                    enrollment.cpf,
                    enrollment.birthday.isoformat() if enrollment.birthday else None,
                    enrollment.phone,
                    format_timestamp(enrollment.created_at),
                    format_timestamp(enrollment.updated_at),
                ),
            )
            conn.commit()
            row_id = cursor.lastrowid
            if row_id is None:
                raise RuntimeError("Failed to get row ID after insert")
            return row_id

    def get_enrollment_by_user_id(self, user_id: int) -> Enrollment | None:
        """Get the enrollment registered by a user.

        Args:
            user_id: User ID to query

        Returns:
            Enrollment or None if the user never enrolled
        """
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM enrollments WHERE user_id = ?", (user_id,)
            ).fetchone()
            return Enrollment.from_row(row) if row else None

    def get_enrollment_by_id(self, enrollment_id: int) -> Enrollment | None:
        with connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            row = conn.execute(
                "SELECT * FROM enrollments WHERE id = ?", (enrollment_id,)
            ).fetchone()
            return Enrollment.from_row(row) if row else None
