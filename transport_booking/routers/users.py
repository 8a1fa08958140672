from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from transport_booking.core.db import get_db
from transport_booking.core.errors import store_failure
from transport_booking.models.user import User

router = APIRouter(prefix="/api/users", tags=["users"])


def _user_out(u: User) -> dict:
    # never includes the stored credential
    return {
        "id": u.id,
        "name": u.name,
        "email": u.email,
        "phone": u.phone,
        "role": u.role,
        "is_active": bool(u.is_active),
        "created_at": u.created_at,
    }


@router.get("")
def list_users(db: Session = Depends(get_db)):
    try:
        users = db.query(User).order_by(User.created_at.desc()).all()
    except SQLAlchemyError:
        raise store_failure(db, "Failed to fetch users")
    return [_user_out(u) for u in users]
