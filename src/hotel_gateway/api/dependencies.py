"""FastAPI dependencies shared by the routers."""

import logging

from fastapi import Depends, Request

from ..config import Settings
from ..services.hotel_service import HotelService
from ..storage.database import DatabaseManager

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db_manager(request: Request) -> DatabaseManager:
    """Return the application's database manager, opening it on first use."""
    state = request.app.state
    if getattr(state, "db_manager", None) is None:
        logger.info(f"Opening database {state.settings.database_path}")
        state.db_manager = DatabaseManager(state.settings.database_path)
    return state.db_manager


def get_hotel_service(
    db_manager: DatabaseManager = Depends(get_db_manager),
) -> HotelService:
    return HotelService(db_manager)
