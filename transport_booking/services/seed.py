import logging
from typing import Iterable

from sqlalchemy.orm import Session

from transport_booking.core.config import FallbackAccount
from transport_booking.models.driver import Driver
from transport_booking.models.user import User
from transport_booking.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


def seed_demo_data(db: Session, accounts: Iterable[FallbackAccount]) -> bool:
    # Only seed if no users exist
    if db.query(User).count() > 0:
        return False

    users = [
        User(
            name=a.name,
            email=a.email,
            password_hash=a.password,
            role=a.role,
            is_active=True,
        )
        for a in accounts
    ]

    drivers = [
        Driver(name="Ravi Kumar", phone="+919800000001", license_number="DL-0420110001", rating=4.8),
        Driver(name="Anita Sharma", phone="+919800000002", license_number="DL-0420110002", rating=4.6),
    ]

    vehicles = [
        Vehicle(name="City Sedan", vehicle_type="sedan", capacity=4, price_per_km=12.0,
                description="Air-conditioned sedan for city rides"),
        Vehicle(name="Family SUV", vehicle_type="suv", capacity=7, price_per_km=18.0,
                description="Spacious SUV for groups and luggage"),
        Vehicle(name="Mini Van", vehicle_type="van", capacity=12, price_per_km=25.0,
                description="Van for group transfers"),
    ]

    db.add_all(users + drivers + vehicles)
    db.commit()
    logger.info("Seeded %d users, %d drivers, %d vehicles", len(users), len(drivers), len(vehicles))
    return True
