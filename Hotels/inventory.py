'''
Inventory store: the rooms and customers known to the hotel.
'''
import logging
from typing import Iterable

from Customers.customer import Customer
from Hotels.booking import Booking
from Hotels.errors import DuplicateKey, NotFound, ResourceBusy
from Hotels.structure import Room

logger = logging.getLogger(__name__)


class Inventory:
    """Owns every Room and Customer record, keyed by identifier in insertion order."""

    def __init__(self) -> None:
        self._rooms: dict[int, Room] = {}
        self._customers: dict[int, Customer] = {}

    def rooms(self) -> list[Room]:
        return list(self._rooms.values())

    def customers(self) -> list[Customer]:
        return list(self._customers.values())

    def get_room(self, room_number: int) -> Room:
        try:
            return self._rooms[room_number]
        except KeyError as exc:
            raise NotFound(f"Room {room_number} not found in the hotel.") from exc

    def get_customer(self, customer_id: int) -> Customer:
        try:
            return self._customers[customer_id]
        except KeyError as exc:
            raise NotFound(f"Customer with ID {customer_id} not found in the hotel.") from exc

    def next_customer_id(self) -> int:
        '''One past the highest id in use, so ids freed by removals are not handed out again.'''
        return max(self._customers, default=0) + 1

    def add_room(self, room: Room) -> Room:
        """
        Insert a room into the inventory.

        A new room has no bookings, so it is always stored as available,
        whatever flag the caller supplied.

        Args:
            room: Room variant to add.

        Returns:
            The stored room.

        Raises:
            DuplicateKey: If a room with the same number already exists.
        """

        if room.number in self._rooms:
            logger.warning("Duplicate room rejected", extra={"room_number": room.number})
            raise DuplicateKey(f"Room {room.number} already exists in the hotel.")
        room.is_available = True
        self._rooms[room.number] = room
        logger.info("Room added", extra={"room_number": room.number, "room_type": type(room).__name__})
        return room

    def remove_room(self, room_number: int, active_bookings: Iterable[Booking]) -> Room:
        """
        Remove a room unless an active booking still references it.

        Args:
            room_number: Number of the room to remove.
            active_bookings: Currently active bookings of the hotel.

        Returns:
            The removed room.

        Raises:
            NotFound: If no such room exists.
            ResourceBusy: If the room is referenced by an active booking.
        """

        room = self.get_room(room_number)
        if any(b.room_number == room_number for b in active_bookings):
            logger.warning("Room removal blocked by active booking", extra={"room_number": room_number})
            raise ResourceBusy(f"Cannot remove Room {room_number} because it is currently booked.")
        del self._rooms[room_number]
        logger.info("Room removed", extra={"room_number": room_number})
        return room

    def add_customer(self, customer: Customer) -> Customer:
        if customer.id in self._customers:
            logger.warning("Duplicate customer rejected", extra={"customer_id": customer.id})
            raise DuplicateKey(f"Customer with ID {customer.id} already exists.")
        self._customers[customer.id] = customer
        logger.info("Customer added", extra={"customer_id": customer.id})
        return customer

    def remove_customer(self, customer_id: int, active_bookings: Iterable[Booking]) -> Customer:
        customer = self.get_customer(customer_id)
        if any(b.customer_id == customer_id for b in active_bookings):
            logger.warning("Customer removal blocked by active booking", extra={"customer_id": customer_id})
            raise ResourceBusy(
                f"Cannot remove Customer {customer.name} because they have an active booking."
            )
        del self._customers[customer_id]
        logger.info("Customer removed", extra={"customer_id": customer_id})
        return customer
