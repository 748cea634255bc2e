"""Room-related FastAPI routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool

from Hotels.hotel import Hotel
from .deps import get_hotel
from .handlers import ERROR_RESPONSES

from .models import MessageResponse, RoomListResponse, RoomPayload, RoomResponse

logger = logging.getLogger(__name__)

# mount api router
room_router = APIRouter(responses=ERROR_RESPONSES)

@room_router.get("/health", response_model=MessageResponse)
async def health_check() -> MessageResponse:
    """Quick liveness probe for the room service."""

    return MessageResponse(status=status.HTTP_200_OK, message="Room service is healthy")

@room_router.post(
    "",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_room(payload: RoomPayload, hotel: Hotel = Depends(get_hotel)) -> RoomResponse:
    """
    Add a room to the hotel.

    Args:
        payload: Single, double or suite room, selected by ``kind``.
        hotel: Hotel injected via dependency.

    Returns:
        RoomResponse wrapping the created room.
    """

    room = await run_in_threadpool(hotel.add_room, payload.root)
    return RoomResponse(status=status.HTTP_201_CREATED, room=room)

@room_router.get(
    "",
    response_model=RoomListResponse,
    status_code=status.HTTP_200_OK,
)
async def get_rooms(hotel: Hotel = Depends(get_hotel)) -> RoomListResponse:
    """List every room of the hotel, available or not."""

    return RoomListResponse(status=status.HTTP_200_OK, rooms=await run_in_threadpool(hotel.list_rooms))

@room_router.get(
    "/available",
    response_model=RoomListResponse,
    status_code=status.HTTP_200_OK,
)
async def get_available_rooms(
    bed_size: Optional[str] = None,
    hotel: Hotel = Depends(get_hotel),
) -> RoomListResponse:
    """
    List the rooms that can be booked right now.

    Args:
        bed_size: When given, only single and double rooms with this exact bed size.
        hotel: Hotel injected via dependency.

    Returns:
        RoomListResponse in insertion order.
    """

    if bed_size is None:
        rooms = await run_in_threadpool(hotel.list_available_rooms)
    else:
        rooms = await run_in_threadpool(hotel.list_available_rooms_by_bed_size, bed_size)
    logger.info("Available rooms listed", extra={"bed_size": bed_size, "count": len(rooms)})
    return RoomListResponse(status=status.HTTP_200_OK, rooms=rooms)

@room_router.get(
    "/{room_number}",
    response_model=RoomResponse,
    status_code=status.HTTP_200_OK,
)
async def get_room(room_number: int, hotel: Hotel = Depends(get_hotel)) -> RoomResponse:
    return RoomResponse(status=status.HTTP_200_OK, room=await run_in_threadpool(hotel.get_room, room_number))

@room_router.delete(
    "/{room_number}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_room(room_number: int, hotel: Hotel = Depends(get_hotel)) -> MessageResponse:
    """
    Remove a room that no active booking references.

    Args:
        room_number: Number of the room to remove.
        hotel: Hotel injected via dependency.

    Returns:
        MessageResponse confirming deletion.
    """

    await run_in_threadpool(hotel.remove_room, room_number)
    return MessageResponse(status=status.HTTP_200_OK, message=f"Room {room_number} deleted")
