"""Endpoint tests for the booking router, with a controllable clock."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
import sys

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from api.booking_routes import booking_router  # noqa: E402
from api.deps import get_hotel  # noqa: E402
from api.handlers import register_error_handlers  # noqa: E402
from Hotels.hotel import Hotel  # noqa: E402
from Hotels.ledger import BookingIdGenerator  # noqa: E402
from Hotels.structure import DoubleRoom, SingleRoom  # noqa: E402

DAY0 = datetime(2024, 5, 1, tzinfo=timezone.utc)


def day(n: int) -> str:
    return (DAY0 + timedelta(days=n)).isoformat()


class FixedClock:
    """Clock whose current time is set by the test."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(DAY0)


@pytest.fixture()
def client_and_hotel(clock: FixedClock) -> tuple[TestClient, Hotel]:
    """Create a TestClient over a small hotel with two rooms and two customers."""

    hotel = Hotel(ids=BookingIdGenerator(), clock=clock)
    hotel.add_room(SingleRoom(number=101, price=Decimal("100"), bed_size="Twin"))
    hotel.add_room(DoubleRoom(number=201, price=Decimal("200"), bed_size="King"))
    hotel.register_customer("Rhaenyra")
    hotel.register_customer("Alicent")
    app = FastAPI()
    app.dependency_overrides[get_hotel] = lambda: hotel
    register_error_handlers(app)
    app.include_router(booking_router, prefix="/bookings")
    return TestClient(app), hotel


def _book(client: TestClient, customer_id: int, room_number: int, check_in: str, check_out: str):
    return client.post(
        "/bookings",
        json={
            "customer_id": customer_id,
            "room_number": room_number,
            "check_in": check_in,
            "check_out": check_out,
        },
    )


def test_create_booking(client_and_hotel: tuple[TestClient, Hotel]) -> None:
    client, hotel = client_and_hotel

    response = _book(client, 1, 101, day(0), day(2))

    assert response.status_code == 201
    booking = response.json()["booking"]
    assert booking["id"] == 1
    assert booking["status"] == "active"
    assert booking["total_price"] is None
    assert booking["duration"] == 2
    assert hotel.get_room(101).is_available is False


@pytest.mark.parametrize(
    ("check_in", "check_out", "status_code", "error"),
    [
        (day(2), day(1), 400, "invalid_range"),
        (day(5), day(6), 409, "room_unavailable"),
    ],
)
def test_create_booking_gate_errors(
    client_and_hotel: tuple[TestClient, Hotel],
    check_in: str,
    check_out: str,
    status_code: int,
    error: str,
) -> None:
    client, _ = client_and_hotel
    _book(client, 1, 101, day(0), day(2))

    response = _book(client, 2, 101, check_in, check_out)

    assert response.status_code == status_code
    assert response.json()["error"] == error


def test_create_booking_overlap_conflict(client_and_hotel: tuple[TestClient, Hotel]) -> None:
    client, hotel = client_and_hotel
    _book(client, 1, 101, day(0), day(2))
    hotel.inventory.get_room(101).is_available = True

    conflict = _book(client, 2, 101, day(1), day(3))
    touching = _book(client, 2, 101, day(2), day(4))

    assert conflict.status_code == 409
    assert conflict.json()["error"] == "overlap_conflict"
    assert touching.status_code == 201


def test_create_booking_unknown_customer(client_and_hotel: tuple[TestClient, Hotel]) -> None:
    client, _ = client_and_hotel

    response = _book(client, 9, 101, day(0), day(1))

    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


def test_checkout_prices_late_stay(client_and_hotel: tuple[TestClient, Hotel], clock: FixedClock) -> None:
    client, hotel = client_and_hotel
    _book(client, 1, 101, day(0), day(1))
    clock.now = DAY0 + timedelta(days=3)

    response = client.post("/bookings/checkout", json={"customer_id": 1})

    assert response.status_code == 200
    booking = response.json()["booking"]
    assert booking["status"] == "closed"
    assert Decimal(booking["total_price"]) == Decimal("400")
    assert hotel.get_room(101).is_available is True


def test_checkout_specific_booking(client_and_hotel: tuple[TestClient, Hotel], clock: FixedClock) -> None:
    client, _ = client_and_hotel
    _book(client, 1, 101, day(0), day(1))
    second = _book(client, 1, 201, day(0), day(1)).json()["booking"]
    clock.now = DAY0 + timedelta(days=1)

    response = client.post("/bookings/checkout", json={"customer_id": 1, "booking_id": second["id"]})

    assert response.json()["booking"]["id"] == second["id"]
    assert Decimal(response.json()["booking"]["total_price"]) == Decimal("200")


def test_checkout_without_active_booking(client_and_hotel: tuple[TestClient, Hotel]) -> None:
    client, _ = client_and_hotel

    response = client.post("/bookings/checkout", json={"customer_id": 2})

    assert response.status_code == 404
    assert response.json()["error"] == "no_active_booking"


def test_list_bookings_by_status(client_and_hotel: tuple[TestClient, Hotel], clock: FixedClock) -> None:
    client, _ = client_and_hotel
    _book(client, 1, 101, day(0), day(1))
    _book(client, 2, 201, day(0), day(1))
    clock.now = DAY0 + timedelta(days=1)
    client.post("/bookings/checkout", json={"customer_id": 2})

    everything = client.get("/bookings")
    active = client.get("/bookings", params={"status": "active"})
    closed = client.get("/bookings/closed")
    filtered_closed = client.get("/bookings", params={"status": "closed"})

    assert [b["id"] for b in everything.json()["bookings"]] == [1, 2]
    assert [b["id"] for b in active.json()["bookings"]] == [1]
    assert [b["id"] for b in closed.json()["bookings"]] == [2]
    assert filtered_closed.json()["bookings"] == closed.json()["bookings"]


def test_get_booking_by_id(client_and_hotel: tuple[TestClient, Hotel]) -> None:
    client, _ = client_and_hotel
    _book(client, 1, 101, day(0), day(1))

    fetched = client.get("/bookings/1")
    missing = client.get("/bookings/99")

    assert fetched.status_code == 200
    assert fetched.json()["booking"]["room_number"] == 101
    assert missing.status_code == 404
