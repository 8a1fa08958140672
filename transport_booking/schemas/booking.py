from typing import Optional, Union

from pydantic import BaseModel


class BookingCreate(BaseModel):
    user_id: Optional[Union[int, str]] = None
    pickup_location: Optional[str] = None
    dropoff_location: Optional[str] = None
    booking_date: Optional[str] = None
    # form inputs arrive as strings ("2"); parsed in the route
    passengers: Optional[Union[int, float, str]] = None


class BookingStatusUpdate(BaseModel):
    status: Optional[str] = None
