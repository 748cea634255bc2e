from decimal import Decimal
from typing import Any, Literal, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator, model_validator
from utils import ensure_utc, validate_timestamps

BookingStatus = Literal['active', 'closed']

class Booking(BaseModel):

    id : int = Field(gt=0, frozen=True)
    customer_id : int = Field(frozen=True)
    room_number : int = Field(frozen=True)
    created_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_modified_at : datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status : BookingStatus = 'active'
    check_in : datetime
    check_out : datetime
    duration : int = 0
    total_price : Optional[Decimal] = None
    closed_at : Optional[datetime] = None

    def model_post_init(self, context: Any) -> None:
        self.duration = (self.check_out - self.check_in).days

    @field_validator("check_in", "check_out")
    @classmethod
    def normalize_dates(cls, value: datetime) -> datetime:
        # naive stay dates are read as UTC
        return ensure_utc(value)

    @model_validator(mode="after")
    def validate_dates(self):
        # enforce chronological consistency
        if self.check_out <= self.check_in:
            raise ValueError("check_out must be strictly greater than check_in")
        return self

    @model_validator(mode = "after")
    def validate_booking(self):
        # enforce chronological consistency
        try:
            validate_timestamps(self.created_at, self.last_modified_at)
        except ValueError as e:
            raise ValueError(f"Booking {self.id} has invalid timestamps: {e}")
        return self

    @property
    def is_active(self) -> bool:
        return self.status == 'active'

    def close(self, total_price: Decimal, closed_at: datetime):
        ''' Close the booking with its final price. '''
        self.total_price = total_price
        self.closed_at = closed_at
        self.status = 'closed'
        self.last_modified_at = datetime.now(timezone.utc)

class BookingRequestResponse(BaseModel):

    booking_id : Optional[int] = Field(default=None, description="Booking() identifier when confirmed")
    status : Literal['confirmed', 'denied']
    error : Optional[str] = Field(default=None, description="ErrorKind value when denied")
    reason_for_deny : Optional[str] = None
