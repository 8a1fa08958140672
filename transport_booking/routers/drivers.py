from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from transport_booking.core.db import get_db
from transport_booking.core.errors import store_failure
from transport_booking.models.driver import Driver

router = APIRouter(prefix="/api/drivers", tags=["drivers"])


@router.get("")
def list_drivers(db: Session = Depends(get_db)):
    try:
        drivers = db.query(Driver).order_by(Driver.created_at.desc()).all()
    except SQLAlchemyError:
        raise store_failure(db, "Failed to fetch drivers")
    return [
        {
            "id": d.id,
            "name": d.name,
            "phone": d.phone,
            "license_number": d.license_number,
            "is_available": bool(d.is_available),
            "rating": d.rating,
            "created_at": d.created_at,
        }
        for d in drivers
    ]
