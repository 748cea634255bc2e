"""Booking-related FastAPI routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.concurrency import run_in_threadpool

from Hotels.booking import BookingStatus
from Hotels.hotel import Hotel
from .deps import get_hotel
from .handlers import ERROR_RESPONSES

from .models import (
    BookingFields,
    BookingListResponse,
    BookingResponse,
    CheckoutFields,
    MessageResponse,
)

logger = logging.getLogger(__name__)

# mount api router
booking_router = APIRouter(responses=ERROR_RESPONSES)

@booking_router.get("/health", response_model=MessageResponse)
async def health_check() -> MessageResponse:
    """Quick liveness probe for the booking service."""

    return MessageResponse(status=status.HTTP_200_OK, message="Booking service is healthy")

@booking_router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(fields: BookingFields, hotel: Hotel = Depends(get_hotel)) -> BookingResponse:
    """
    Book a room for a customer over [check_in, check_out).

    Args:
        fields: Customer id, room number and stay dates.
        hotel: Hotel injected via dependency.

    Returns:
        BookingResponse wrapping the active booking.
    """

    booking = await run_in_threadpool(
        hotel.book_room,
        fields.customer_id,
        fields.room_number,
        fields.check_in,
        fields.check_out,
    )
    return BookingResponse(status=status.HTTP_201_CREATED, booking=booking)

@booking_router.post(
    "/checkout",
    response_model=BookingResponse,
    status_code=status.HTTP_200_OK,
)
async def checkout(fields: CheckoutFields, hotel: Hotel = Depends(get_hotel)) -> BookingResponse:
    """
    Close a customer's active booking and return its final price.

    Args:
        fields: Customer id and, optionally, the booking to close.
        hotel: Hotel injected via dependency.

    Returns:
        BookingResponse wrapping the closed booking.
    """

    booking = await run_in_threadpool(hotel.checkout, fields.customer_id, fields.booking_id)
    return BookingResponse(status=status.HTTP_200_OK, booking=booking)

@booking_router.get(
    "",
    response_model=BookingListResponse,
    status_code=status.HTTP_200_OK,
)
async def get_bookings(
    booking_status: Optional[BookingStatus] = Query(default=None, alias="status"),
    hotel: Hotel = Depends(get_hotel),
) -> BookingListResponse:
    """List bookings in creation order, optionally filtered by status."""

    if booking_status == "active":
        bookings = await run_in_threadpool(hotel.list_active_bookings)
    elif booking_status == "closed":
        bookings = await run_in_threadpool(hotel.list_closed_bookings)
    else:
        bookings = await run_in_threadpool(hotel.list_all_bookings)
    return BookingListResponse(status=status.HTTP_200_OK, bookings=bookings)

@booking_router.get(
    "/closed",
    response_model=BookingListResponse,
    status_code=status.HTTP_200_OK,
)
async def get_closed_bookings(hotel: Hotel = Depends(get_hotel)) -> BookingListResponse:
    return BookingListResponse(status=status.HTTP_200_OK, bookings=await run_in_threadpool(hotel.list_closed_bookings))

@booking_router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    status_code=status.HTTP_200_OK,
)
async def get_booking(booking_id: int, hotel: Hotel = Depends(get_hotel)) -> BookingResponse:
    return BookingResponse(status=status.HTTP_200_OK, booking=await run_in_threadpool(hotel.get_booking, booking_id))
