'''
Hotel facade: composes the inventory and the booking ledger.

Callers address rooms, customers and bookings by identifier. Every operation,
reads included, runs under one re-entrant lock per hotel, which keeps the
availability and overlap invariants intact when the HTTP layer dispatches
requests from a thread pool. Records handed back are copies taken under the
lock; the stored ones change only through the facade.
'''
import threading
from datetime import datetime
from decimal import Decimal
from typing import Optional, TypeVar

from pydantic import BaseModel

from Customers.customer import Customer
from Hotels.booking import Booking, BookingRequestResponse
from Hotels.errors import InvalidRange, OverlapConflict, RoomUnavailable
from Hotels.inventory import Inventory
from Hotels.ledger import DEFAULT_LATE_FEE_RATE, BookingIdGenerator, Clock, Ledger
from Hotels.structure import Room
from utils import utc_now

ModelT = TypeVar("ModelT", bound=BaseModel)


def _snapshot(records: list[ModelT]) -> list[ModelT]:
    return [record.model_copy() for record in records]


class Hotel:

    def __init__(
        self,
        ids: Optional[BookingIdGenerator] = None,
        clock: Clock = utc_now,
        late_fee_rate: Decimal = DEFAULT_LATE_FEE_RATE,
    ) -> None:
        self.inventory = Inventory()
        self.ledger = Ledger(self.inventory, ids=ids, clock=clock, late_fee_rate=late_fee_rate)
        self._lock = threading.RLock()

    # inventory

    def add_room(self, room: Room) -> Room:
        with self._lock:
            # the inventory owns its record; later changes to ``room`` do not leak in
            return self.inventory.add_room(room.model_copy()).model_copy()

    def remove_room(self, room_number: int) -> Room:
        with self._lock:
            return self.inventory.remove_room(room_number, self.ledger.active_bookings())

    def get_room(self, room_number: int) -> Room:
        with self._lock:
            return self.inventory.get_room(room_number).model_copy()

    def add_customer(self, customer: Customer) -> Customer:
        with self._lock:
            return self.inventory.add_customer(customer)

    def register_customer(self, name: str, customer_id: Optional[int] = None) -> Customer:
        '''Add a customer, assigning the next sequential id when none is given.'''
        with self._lock:
            if customer_id is None:
                customer_id = self.inventory.next_customer_id()
            return self.inventory.add_customer(Customer(id=customer_id, name=name))

    def remove_customer(self, customer_id: int) -> Customer:
        with self._lock:
            return self.inventory.remove_customer(customer_id, self.ledger.active_bookings())

    def get_customer(self, customer_id: int) -> Customer:
        with self._lock:
            return self.inventory.get_customer(customer_id)

    # bookings

    def book_room(
        self,
        customer_id: int,
        room_number: int,
        check_in: datetime,
        check_out: datetime,
    ) -> Booking:
        with self._lock:
            customer = self.inventory.get_customer(customer_id)
            room = self.inventory.get_room(room_number)
            return self.ledger.create_booking(customer, room, check_in, check_out).model_copy()

    def request_booking(
        self,
        customer_id: int,
        room_number: int,
        check_in: datetime,
        check_out: datetime,
    ) -> BookingRequestResponse:
        """
        Same as ``book_room`` but reports the booking gates as a typed result.

        Unknown customers or rooms still raise ``NotFound``: they are caller
        mistakes, not booking decisions.
        """

        try:
            booking = self.book_room(customer_id, room_number, check_in, check_out)
        except (InvalidRange, RoomUnavailable, OverlapConflict) as exc:
            return BookingRequestResponse(
                status='denied',
                error=exc.kind.value,
                reason_for_deny=exc.message,
            )
        return BookingRequestResponse(booking_id=booking.id, status='confirmed')

    def checkout(self, customer_id: int, booking_id: Optional[int] = None) -> Booking:
        with self._lock:
            customer = self.inventory.get_customer(customer_id)
            return self.ledger.checkout_booking(customer, booking_id).model_copy()

    def get_booking(self, booking_id: int) -> Booking:
        with self._lock:
            return self.ledger.get(booking_id).model_copy()

    # read-only views

    def list_rooms(self) -> list[Room]:
        with self._lock:
            return _snapshot(self.inventory.rooms())

    def list_customers(self) -> list[Customer]:
        with self._lock:
            return self.inventory.customers()

    def list_available_rooms(self) -> list[Room]:
        with self._lock:
            return _snapshot([r for r in self.inventory.rooms() if r.is_available])

    def list_available_rooms_by_bed_size(self, bed_size: str) -> list[Room]:
        '''Available single and double rooms with a matching bed size; suites never match.'''
        with self._lock:
            return _snapshot([
                r for r in self.inventory.rooms()
                if r.is_available and r.offered_bed_size() == bed_size
            ])

    def list_all_bookings(self) -> list[Booking]:
        with self._lock:
            return _snapshot(self.ledger.all_bookings())

    def list_active_bookings(self) -> list[Booking]:
        with self._lock:
            return _snapshot(self.ledger.active_bookings())

    def list_closed_bookings(self) -> list[Booking]:
        with self._lock:
            return _snapshot(self.ledger.closed_bookings())
