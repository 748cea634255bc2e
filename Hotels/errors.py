'''
Error kinds raised by the booking engine.

Every failure is a recoverable condition for the caller: each gate check maps
to exactly one subclass, and each subclass carries a stable ``kind`` so
callers (and the HTTP layer) can react to it without string matching.
'''
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_RANGE = "invalid_range"
    ROOM_UNAVAILABLE = "room_unavailable"
    OVERLAP_CONFLICT = "overlap_conflict"
    NOT_FOUND = "not_found"
    RESOURCE_BUSY = "resource_busy"
    NO_ACTIVE_BOOKING = "no_active_booking"
    DUPLICATE_KEY = "duplicate_key"


class HotelError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRange(HotelError):
    kind = ErrorKind.INVALID_RANGE


class RoomUnavailable(HotelError):
    kind = ErrorKind.ROOM_UNAVAILABLE


class OverlapConflict(HotelError):
    kind = ErrorKind.OVERLAP_CONFLICT


class NotFound(HotelError):
    kind = ErrorKind.NOT_FOUND


class ResourceBusy(HotelError):
    kind = ErrorKind.RESOURCE_BUSY


class NoActiveBooking(HotelError):
    kind = ErrorKind.NO_ACTIVE_BOOKING


class DuplicateKey(HotelError):
    kind = ErrorKind.DUPLICATE_KEY
