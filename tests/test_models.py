"""Testing guidance for every Pydantic model.

Each test below exercises both the happy-path construction and the validation
errors for a specific model. When introducing a new Pydantic model, add a new
test that instantiates it with valid data and asserts the validators by feeding
invalid payloads as well.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
import sys

import pytest
from pydantic import TypeAdapter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from Customers.customer import Customer  # noqa: E402
from Hotels.booking import Booking, BookingRequestResponse  # noqa: E402
from Hotels.structure import AnyRoom, DoubleRoom, SingleRoom, Suite  # noqa: E402


def test_customer_name_is_stripped() -> None:
    """Ensure a Customer name loses surrounding whitespace."""
    customer = Customer(id=1, name="  Rhaenyra ")

    assert customer.name == "Rhaenyra"
    assert customer.to_dict() == {"id": 1, "name": "Rhaenyra"}


def test_customer_blank_name_raises_value_error() -> None:
    """Ensure Customer rejects blank names."""
    with pytest.raises(ValueError, match="must not be blank"):
        Customer(id=1, name="   ")


def test_customer_rejects_non_positive_id() -> None:
    with pytest.raises(ValueError):
        Customer(id=0, name="Alicent")


def test_room_rejects_negative_price() -> None:
    """Ensure the Room validator enforces non-negative pricing."""
    with pytest.raises(ValueError, match="non-negative"):
        SingleRoom(number=101, price=Decimal("-1"), bed_size="Twin")


def test_room_accepts_zero_price_and_defaults_to_available() -> None:
    room = DoubleRoom(number=201, price=Decimal("0"), bed_size="King")

    assert room.price == Decimal("0")
    assert room.is_available is True
    assert room.number_of_beds == 2


def test_room_bed_size_capability() -> None:
    """Ensure only single and double rooms advertise a bed size."""
    single = SingleRoom(number=101, price=Decimal("100"), bed_size="Twin")
    double = DoubleRoom(number=201, price=Decimal("200"), bed_size="King")
    suite = Suite(number=301, price=Decimal("400"), living_area_size=40.5)

    assert single.offered_bed_size() == "Twin"
    assert double.offered_bed_size() == "King"
    assert suite.offered_bed_size() is None


def test_room_union_selects_variant_by_kind() -> None:
    """Ensure the discriminated union builds the variant named by ``kind``."""
    adapter = TypeAdapter(AnyRoom)

    room = adapter.validate_python(
        {"kind": "suite", "number": 302, "price": "400", "living_area_size": 40.5, "has_jacuzzi": True}
    )

    assert isinstance(room, Suite)
    assert room.has_jacuzzi is True
    assert room.to_dict()["price"] == "400"


def test_room_union_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        TypeAdapter(AnyRoom).validate_python({"kind": "penthouse", "number": 1, "price": 1})


def test_booking_duration_and_close() -> None:
    """Ensure Booking computes duration and records its final price when closed."""
    check_in = datetime(2024, 5, 1, tzinfo=timezone.utc)
    booking = Booking(
        id=1,
        customer_id=1,
        room_number=101,
        check_in=check_in,
        check_out=check_in + timedelta(days=3),
    )
    prior_last_modified = booking.last_modified_at

    assert booking.duration == 3
    assert booking.is_active
    assert booking.total_price is None

    booking.close(Decimal("300.00"), check_in + timedelta(days=3))

    assert booking.status == "closed"
    assert booking.total_price == Decimal("300.00")
    assert booking.closed_at == check_in + timedelta(days=3)
    assert booking.last_modified_at >= prior_last_modified


def test_booking_reads_naive_dates_as_utc() -> None:
    booking = Booking(
        id=1,
        customer_id=1,
        room_number=101,
        check_in=datetime(2024, 5, 1),
        check_out=datetime(2024, 5, 2),
    )

    assert booking.check_in == datetime(2024, 5, 1, tzinfo=timezone.utc)


def test_booking_validates_dates_and_timestamps() -> None:
    """Ensure Booking enforces both stay range ordering and audit timestamps."""
    check_in = datetime(2024, 5, 1, tzinfo=timezone.utc)
    with pytest.raises(ValueError, match="check_out must be strictly greater"):
        Booking(id=1, customer_id=1, room_number=101, check_in=check_in, check_out=check_in)

    created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
    with pytest.raises(ValueError, match="has invalid timestamps"):
        Booking(
            id=2,
            customer_id=1,
            room_number=101,
            check_in=check_in,
            check_out=check_in + timedelta(days=1),
            created_at=created_at,
            last_modified_at=created_at - timedelta(minutes=1),
        )


def test_booking_request_response_handles_optional_reasoning() -> None:
    """Ensure BookingRequestResponse supports optional denial reasons."""
    denied_response = BookingRequestResponse(
        status="denied",
        error="room_unavailable",
        reason_for_deny="Room 101 is not available for booking.",
    )
    confirmed_response = BookingRequestResponse(booking_id=7, status="confirmed")

    assert denied_response.booking_id is None
    assert denied_response.reason_for_deny == "Room 101 is not available for booking."
    assert confirmed_response.booking_id == 7
    assert confirmed_response.reason_for_deny is None
