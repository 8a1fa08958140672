from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from transport_booking.core.db import get_db
from transport_booking.core.errors import store_failure
from transport_booking.models.booking import Booking, BookingStatus
from transport_booking.models.driver import Driver
from transport_booking.models.user import User
from transport_booking.models.vehicle import Vehicle
from transport_booking.schemas.booking import BookingCreate, BookingStatusUpdate
from transport_booking.services.validation import missing, parse_iso_datetime, parse_passengers

router = APIRouter(prefix="/api/bookings", tags=["bookings"])

_CUSTOMER_COLUMNS = (
    User.name.label("customer_name"),
    User.email.label("customer_email"),
    User.phone.label("customer_phone"),
)


def _booking_out(b: Booking, **extra) -> dict:
    return {
        "id": b.id,
        "user_id": b.user_id,
        "driver_id": b.driver_id,
        "vehicle_id": b.vehicle_id,
        "pickup_location": b.pickup_location,
        "dropoff_location": b.dropoff_location,
        "booking_date": b.booking_date,
        "passengers": b.passengers,
        "status": b.status,
        "created_at": b.created_at,
        **extra,
    }


@router.get("")
def list_bookings(db: Session = Depends(get_db)):
    try:
        rows = (
            db.query(Booking, *_CUSTOMER_COLUMNS, Driver.name.label("driver_name"))
            .join(User, Booking.user_id == User.id)
            .outerjoin(Driver, Booking.driver_id == Driver.id)
            .order_by(Booking.booking_date.desc())
            .all()
        )
    except SQLAlchemyError:
        raise store_failure(db, "Failed to fetch bookings")

    return [
        _booking_out(
            row.Booking,
            customer_name=row.customer_name,
            customer_email=row.customer_email,
            customer_phone=row.customer_phone,
            driver_name=row.driver_name,
        )
        for row in rows
    ]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_booking(payload: BookingCreate, db: Session = Depends(get_db)):
    if missing(
        payload.user_id,
        payload.pickup_location,
        payload.dropoff_location,
        payload.booking_date,
        payload.passengers,
    ):
        raise HTTPException(status_code=400, detail="Missing required fields")

    passengers = parse_passengers(payload.passengers)
    if passengers is None:
        raise HTTPException(status_code=400, detail="Passengers must be a positive whole number")

    booking_date = parse_iso_datetime(payload.booking_date)
    if booking_date is None:
        raise HTTPException(status_code=400, detail="booking_date must be an ISO 8601 date/time (e.g. 2026-01-19T12:34)")

    try:
        # Check-then-insert: not atomic with respect to a concurrent user delete
        user = db.query(User.id).filter(User.id == payload.user_id).first()
        if not user:
            raise HTTPException(status_code=404, detail="User not found")

        booking = Booking(
            user_id=user.id,
            pickup_location=payload.pickup_location,
            dropoff_location=payload.dropoff_location,
            booking_date=booking_date,
            passengers=passengers,
            status=BookingStatus.PENDING.value,
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)
    except SQLAlchemyError:
        raise store_failure(db, "Failed to create booking")

    return {"message": "Booking created successfully", "bookingId": booking.id}


# Path ids stay strings: a non-numeric id matches no row instead of failing validation
@router.get("/{booking_id}")
def get_booking(booking_id: str, db: Session = Depends(get_db)):
    try:
        row = (
            db.query(Booking, *_CUSTOMER_COLUMNS, Vehicle.name.label("vehicle_name"))
            .join(User, Booking.user_id == User.id)
            .outerjoin(Vehicle, Booking.vehicle_id == Vehicle.id)
            .filter(Booking.id == booking_id)
            .first()
        )
    except SQLAlchemyError:
        raise store_failure(db, "Failed to fetch booking")

    if not row:
        raise HTTPException(status_code=404, detail="Booking not found")

    return _booking_out(
        row.Booking,
        customer_name=row.customer_name,
        customer_email=row.customer_email,
        customer_phone=row.customer_phone,
        vehicle_name=row.vehicle_name,
    )


@router.put("/{booking_id}")
def update_booking_status(booking_id: str, payload: BookingStatusUpdate, db: Session = Depends(get_db)):
    if missing(payload.status):
        raise HTTPException(status_code=400, detail="Status is required")

    # Any status string is stored; an unknown id updates nothing and still succeeds
    try:
        db.query(Booking).filter(Booking.id == booking_id).update(
            {Booking.status: payload.status}, synchronize_session=False
        )
        db.commit()
    except SQLAlchemyError:
        raise store_failure(db, "Failed to update booking")

    return {"message": "Booking updated successfully"}


@router.delete("/{booking_id}")
def delete_booking(booking_id: str, db: Session = Depends(get_db)):
    try:
        db.query(Booking).filter(Booking.id == booking_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        raise store_failure(db, "Failed to delete booking")

    return {"message": "Booking deleted successfully"}
