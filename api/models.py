"""Shared API request and response models for the hotel booking service."""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, Field, RootModel, StringConstraints

from Customers.customer import Customer
from Hotels.booking import Booking
from Hotels.structure import AnyRoom


class CustomerFields(BaseModel):
    """Payload accepted when registering a customer."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    id: Optional[int] = Field(default=None, gt=0)


class BookingFields(BaseModel):
    """Payload accepted when booking a room."""

    customer_id: int
    room_number: int
    check_in: datetime
    check_out: datetime


class CheckoutFields(BaseModel):
    """Payload accepted when checking a customer out."""

    customer_id: int
    booking_id: Optional[int] = None


class MessageResponse(BaseModel):
    """Envelope for simple string responses."""

    status: int
    message: str


class ErrorResponse(BaseModel):
    """Body returned for booking engine errors."""

    detail: str
    error: str


class RoomResponse(BaseModel):
    """Envelope for responses that include a room resource."""

    status: int
    room: AnyRoom

class RoomListResponse(BaseModel):
    """Envelope for responses that include a list of rooms resource."""

    status: int
    rooms: list[AnyRoom]

class CustomerResponse(BaseModel):
    """Envelope for responses that include a customer resource."""

    status: int
    customer: Customer

class CustomerListResponse(BaseModel):

    status: int
    customers: list[Customer]

class BookingResponse(BaseModel):
    """Envelope for responses that include a booking resource."""

    status: int
    booking: Booking

class BookingListResponse(BaseModel):

    status: int
    bookings: list[Booking]


class RoomPayload(RootModel[AnyRoom]):
    """Room variant accepted on creation, selected by its ``kind``."""
