from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Optional

from Customers.customer import Customer
from Hotels.hotel import Hotel
from Hotels.structure import DoubleRoom, SingleRoom, Suite


LOGGER = logging.getLogger(__name__)

SAMPLE_ROOMS = (
    SingleRoom(number=101, price=Decimal("100"), bed_size="Twin", has_balcony=False),
    SingleRoom(number=102, price=Decimal("115"), bed_size="FullDouble", has_balcony=True),
    DoubleRoom(number=201, price=Decimal("200"), bed_size="King", has_mini_bar=True, number_of_beds=2),
    Suite(number=301, price=Decimal("400"), living_area_size=40.5, has_jacuzzi=True, number_of_rooms=3),
    Suite(number=302, price=Decimal("400"), living_area_size=40.5, has_jacuzzi=True, number_of_rooms=3),
    DoubleRoom(number=202, price=Decimal("200"), bed_size="Queen", has_mini_bar=True, number_of_beds=2),
    SingleRoom(number=103, price=Decimal("115"), bed_size="Twin", has_balcony=True),
)

SAMPLE_CUSTOMERS = ("Rhaenyra", "Alicent", "Daemond", "Rhaenys")


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def seed_sample_data(hotel: Hotel, today: Optional[date] = None) -> list[str]:
    """Populate ``hotel`` with the demo rooms, customers and two bookings.

    Args:
        hotel: Hotel to seed; expected to be empty.
        today: Day the sample bookings are anchored on (defaults to the current UTC date).

    Returns:
        The reasons of any sample booking that was denied.
    """

    today = today or datetime.now(timezone.utc).date()
    for room in SAMPLE_ROOMS:
        hotel.add_room(room)
    for customer_id, name in enumerate(SAMPLE_CUSTOMERS, start=1):
        hotel.add_customer(Customer(id=customer_id, name=name))

    yesterday = _midnight(today - timedelta(days=1))
    tomorrow = _midnight(today + timedelta(days=1))
    requests = (
        (1, 101, _midnight(today), tomorrow),
        (2, 102, yesterday, _midnight(today)),
    )
    denied: list[str] = []
    for customer_id, room_number, check_in, check_out in requests:
        response = hotel.request_booking(customer_id, room_number, check_in, check_out)
        if response.status == "denied":
            LOGGER.warning("Sample booking denied: %s", response.reason_for_deny)
            denied.append(response.reason_for_deny or "")
    LOGGER.info(
        "Sample data seeded: %d rooms, %d customers, %d bookings",
        len(hotel.list_rooms()),
        len(hotel.list_customers()),
        len(hotel.list_all_bookings()),
    )
    return denied


def main() -> None:
    """Seed a fresh hotel and print its availability, as a smoke check of the engine."""

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    hotel = Hotel()
    seed_sample_data(hotel)
    for room in hotel.list_available_rooms():
        LOGGER.info("Available: room %s (%s) at %s", room.number, type(room).__name__, room.price)


if __name__ == "__main__":
    main()
