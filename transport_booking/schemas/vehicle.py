from typing import Optional

from pydantic import BaseModel


class VehicleCreate(BaseModel):
    name: Optional[str] = None
    vehicle_type: Optional[str] = None
    capacity: Optional[int] = None
    price_per_km: Optional[float] = None
    description: Optional[str] = None
    is_available: Optional[bool] = None


class VehicleAvailabilityUpdate(BaseModel):
    is_available: Optional[bool] = None
