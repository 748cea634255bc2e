'''
Booking ledger: creation of bookings, checkout pricing and ledger queries.
'''
import itertools
import logging
import threading
from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterator, Optional

from Customers.customer import Customer
from Hotels.booking import Booking
from Hotels.errors import (
    InvalidRange,
    NoActiveBooking,
    NotFound,
    OverlapConflict,
    RoomUnavailable,
)
from Hotels.inventory import Inventory
from Hotels.structure import Room
from utils import ensure_utc, overlaps_booking, utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_LATE_FEE_RATE = Decimal("0.5")
ONE_DAY = timedelta(days=1)
CENTS = Decimal("0.01")


class BookingIdGenerator:
    """Issues strictly increasing booking identifiers, starting at ``start``."""

    def __init__(self, start: int = 1) -> None:
        self._counter: Iterator[int] = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)


# shared by every ledger that is not handed its own generator
PROCESS_BOOKING_IDS = BookingIdGenerator()


def compute_total_price(
    booking: Booking,
    nightly_price: Decimal,
    now: datetime,
    late_fee_rate: Decimal = DEFAULT_LATE_FEE_RATE,
) -> Decimal:
    """
    Price a stay checked out at ``now``.

    Nights are the whole days elapsed since check-in. Every whole day past the
    planned check-out adds ``late_fee_rate`` times the nightly price on top.

    Args:
        booking: Active booking being checked out.
        nightly_price: Nightly price of the booked room.
        now: Checkout moment.
        late_fee_rate: Fraction of the nightly price charged per late day.

    Returns:
        The total, rounded to cents.
    """

    nights_stayed = max(0, (now - booking.check_in) // ONE_DAY)
    total = nights_stayed * nightly_price
    if now > booking.check_out:
        late_days = (now - booking.check_out) // ONE_DAY
        total += late_fee_rate * nightly_price * late_days
    return Decimal(total).quantize(CENTS, rounding=ROUND_HALF_UP)


class Ledger:
    """Append-only history of the hotel's bookings, in creation order."""

    def __init__(
        self,
        inventory: Inventory,
        ids: Optional[BookingIdGenerator] = None,
        clock: Clock = utc_now,
        late_fee_rate: Decimal = DEFAULT_LATE_FEE_RATE,
    ) -> None:
        self._inventory = inventory
        self._ids = ids if ids is not None else PROCESS_BOOKING_IDS
        self._clock = clock
        self._late_fee_rate = late_fee_rate
        self._bookings: list[Booking] = []

    # queries

    def all_bookings(self) -> list[Booking]:
        return list(self._bookings)

    def active_bookings(self) -> list[Booking]:
        return [b for b in self._bookings if b.status == 'active']

    def closed_bookings(self) -> list[Booking]:
        return [b for b in self._bookings if b.status == 'closed']

    def find(self, predicate: Callable[[Booking], bool]) -> list[Booking]:
        return [b for b in self._bookings if predicate(b)]

    def bookings_for_customer(self, customer_id: int) -> list[Booking]:
        return self.find(lambda b: b.customer_id == customer_id)

    def bookings_for_room(self, room_number: int) -> list[Booking]:
        return self.find(lambda b: b.room_number == room_number)

    def get(self, booking_id: int) -> Booking:
        for booking in self._bookings:
            if booking.id == booking_id:
                return booking
        raise NotFound(f"Booking {booking_id} not found.")

    # lifecycle

    def create_booking(
        self,
        customer: Customer,
        room: Room,
        check_in: datetime,
        check_out: datetime,
    ) -> Booking:
        """
        Book ``room`` for ``customer`` over the half-open range [check_in, check_out).

        Gates are checked in order and the first failure is raised.

        Raises:
            InvalidRange: If check_out is not strictly after check_in.
            RoomUnavailable: If the room is currently flagged unavailable.
            OverlapConflict: If an active booking of the room intersects the range.
        """

        check_in, check_out = ensure_utc(check_in), ensure_utc(check_out)
        log_context = {"customer_id": customer.id, "room_number": room.number}

        if check_out <= check_in:
            logger.warning("Booking rejected: invalid range", extra=log_context)
            raise InvalidRange("Check-out date must be after the check-in date.")

        if not room.is_available:
            logger.warning("Booking rejected: room unavailable", extra=log_context)
            raise RoomUnavailable(f"Room {room.number} is not available for booking.")

        conflict = next(
            (
                b for b in self._bookings
                if b.room_number == room.number
                and b.status == 'active'
                and overlaps_booking(b, check_in, check_out)
            ),
            None,
        )
        if conflict is not None:
            logger.warning(
                "Booking rejected: overlapping dates",
                extra={**log_context, "conflicting_booking_id": conflict.id},
            )
            raise OverlapConflict(f"Room {room.number} is already booked for overlapping dates.")

        booking = Booking(
            id=self._ids.next_id(),
            customer_id=customer.id,
            room_number=room.number,
            check_in=check_in,
            check_out=check_out,
            status='active',
        )
        room.is_available = False
        self._bookings.append(booking)
        logger.info("Room booked", extra={**log_context, "booking_id": booking.id})
        return booking

    def checkout_booking(self, customer: Customer, booking_id: Optional[int] = None) -> Booking:
        """
        Close the customer's active booking and price the stay.

        Args:
            customer: Customer checking out.
            booking_id: Specific active booking to close; the customer's first
                active booking when omitted.

        Returns:
            The closed booking, with its total price.

        Raises:
            NoActiveBooking: If the customer has no matching active booking.
        """

        booking = next(
            (
                b for b in self._bookings
                if b.customer_id == customer.id
                and b.status == 'active'
                and (booking_id is None or b.id == booking_id)
            ),
            None,
        )
        if booking is None:
            logger.warning(
                "Checkout rejected: no active booking",
                extra={"customer_id": customer.id, "booking_id": booking_id},
            )
            raise NoActiveBooking(f"No active booking found for Customer {customer.name}.")

        room = self._inventory.get_room(booking.room_number)
        now = ensure_utc(self._clock())
        total = compute_total_price(booking, room.price, now, self._late_fee_rate)

        booking.close(total, now)
        room.is_available = True
        logger.info(
            "Room checked out",
            extra={
                "customer_id": customer.id,
                "room_number": room.number,
                "booking_id": booking.id,
                "total_price": str(total),
            },
        )
        return booking
