from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from Hotels.booking import Booking
else:
    Booking = Any

def validate_timestamps(date1: datetime, date2: datetime):
    '''Validate that date2 is greater than date1.'''
    if date2 < date1:
        raise ValueError("date2 must be greater than or equal to date1")

def ensure_utc(moment: datetime) -> datetime:
    '''Attach UTC to naive datetimes, convert aware ones to UTC.'''
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)

def utc_now() -> datetime:
    '''Default clock.'''
    return datetime.now(timezone.utc)

def ranges_overlap(start1: datetime, end1: datetime, start2: datetime, end2: datetime) -> bool:
    '''Check if two half-open ranges [start, end) intersect. Touching endpoints do not.'''
    return start1 < end2 and end1 > start2

def overlaps_booking(booking: Booking, check_in: datetime, check_out: datetime) -> bool:
    '''Check if a requested stay intersects an existing booking.'''
    return ranges_overlap(check_in, check_out, booking.check_in, booking.check_out)
