"""Hotel listing API endpoints."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...errors import GatewayError
from ...services.hotel_service import HotelService
from ..auth import authenticate_token
from ..dependencies import get_hotel_service

logger = logging.getLogger(__name__)


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, from_attributes=True
    )


class HotelResponse(CamelModel):
    """Response model for a hotel."""

    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime


class RoomResponse(CamelModel):
    """Response model for a hotel room."""

    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class HotelWithRoomsResponse(HotelResponse):
    """Response model for a hotel and its rooms."""

    rooms: list[RoomResponse] = Field(alias="Rooms")


router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("", response_model=list[HotelResponse])
async def get_hotels(
    user_id: int = Depends(authenticate_token),
    hotel_service: HotelService = Depends(get_hotel_service),
):
    """List hotels available to the authenticated ticket holder."""
    try:
        hotels = hotel_service.get_hotels(user_id)
        return [HotelResponse.model_validate(hotel) for hotel in hotels]

    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"Error fetching hotels for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{hotel_id}", response_model=HotelWithRoomsResponse)
async def get_hotel_by_id(
    hotel_id: int,
    user_id: int = Depends(authenticate_token),
    hotel_service: HotelService = Depends(get_hotel_service),
):
    """Get a hotel and its rooms for the authenticated ticket holder."""
    try:
        hotel = hotel_service.get_hotel_by_id(user_id, hotel_id)
        return HotelWithRoomsResponse.model_validate(hotel)

    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"Error fetching hotel {hotel_id} for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
