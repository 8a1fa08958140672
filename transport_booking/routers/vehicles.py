from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from transport_booking.core.db import get_db
from transport_booking.core.errors import store_failure
from transport_booking.models.vehicle import Vehicle
from transport_booking.schemas.vehicle import VehicleAvailabilityUpdate, VehicleCreate
from transport_booking.services.validation import missing

router = APIRouter(prefix="/api/vehicles", tags=["vehicles"])


def _vehicle_out(v: Vehicle) -> dict:
    return {
        "id": v.id,
        "name": v.name,
        "vehicle_type": v.vehicle_type,
        "capacity": v.capacity,
        "price_per_km": v.price_per_km,
        "description": v.description,
        "is_available": bool(v.is_available),
        "created_at": v.created_at,
    }


@router.get("")
def list_vehicles(db: Session = Depends(get_db)):
    try:
        vehicles = db.query(Vehicle).all()
    except SQLAlchemyError:
        raise store_failure(db, "Failed to fetch vehicles")
    return [_vehicle_out(v) for v in vehicles]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_vehicle(payload: VehicleCreate, db: Session = Depends(get_db)):
    if missing(payload.name, payload.vehicle_type, payload.capacity, payload.price_per_km):
        raise HTTPException(status_code=400, detail="Missing required fields")

    vehicle = Vehicle(
        name=payload.name,
        vehicle_type=payload.vehicle_type,
        capacity=payload.capacity,
        price_per_km=payload.price_per_km,
        description=payload.description or None,
        is_available=True if payload.is_available is None else payload.is_available,
    )
    try:
        db.add(vehicle)
        db.commit()
        db.refresh(vehicle)
    except SQLAlchemyError:
        raise store_failure(db, "Failed to create vehicle")

    return {"message": "Vehicle created successfully", "vehicleId": vehicle.id}


@router.put("/{vehicle_id}")
def update_vehicle(vehicle_id: str, payload: VehicleAvailabilityUpdate, db: Session = Depends(get_db)):
    # Only availability is editable here; other body fields are ignored
    if payload.is_available is None:
        raise HTTPException(status_code=400, detail="is_available is required")

    try:
        db.query(Vehicle).filter(Vehicle.id == vehicle_id).update(
            {Vehicle.is_available: payload.is_available}, synchronize_session=False
        )
        db.commit()
    except SQLAlchemyError:
        raise store_failure(db, "Failed to update vehicle")

    return {"message": "Vehicle updated successfully"}


@router.delete("/{vehicle_id}")
def delete_vehicle(vehicle_id: str, db: Session = Depends(get_db)):
    try:
        db.query(Vehicle).filter(Vehicle.id == vehicle_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        raise store_failure(db, "Failed to delete vehicle")

    return {"message": "Vehicle deleted successfully"}
