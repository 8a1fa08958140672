import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func

from transport_booking.core.db import Base


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    driver_id = Column(Integer, ForeignKey("drivers.id"), index=True, nullable=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), index=True, nullable=True)

    pickup_location = Column(String(255), nullable=False)
    dropoff_location = Column(String(255), nullable=False)
    booking_date = Column(DateTime, index=True, nullable=False)
    passengers = Column(Integer, nullable=False)

    # Plain string: PUT /api/bookings/{id} stores whatever status it is given
    status = Column(String(20), default=BookingStatus.PENDING.value, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
