from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from transport_booking.core.config import settings
from transport_booking.core.db import ConnectionPool, get_db, get_pool
from transport_booking.core.errors import store_failure
from transport_booking.models.user import User, UserRole
from transport_booking.schemas.auth import LoginRequest, RegisterRequest
from transport_booking.services.auth import Authenticator, InvalidCredentials, RoleMismatch
from transport_booking.services.validation import missing, password_problem

router = APIRouter(prefix="/api", tags=["auth"])


def get_authenticator(pool: ConnectionPool = Depends(get_pool)) -> Authenticator:
    return Authenticator(pool, settings.DEMO_ACCOUNTS, settings.LOGIN_DB_TIMEOUT)


@router.post("/login")
async def login(payload: LoginRequest, auth: Authenticator = Depends(get_authenticator)):
    if missing(payload.email, payload.password, payload.role):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email, password, and role are required")

    try:
        result = await auth.login(payload.email, payload.password, payload.role)
    except RoleMismatch:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid role for this account")
    except InvalidCredentials:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    message = "Login successful (Demo Mode)" if result.demo else "Login successful"
    return {"message": message, "user": result.summary()}


@router.post("/logout")
def logout():
    # Nothing to revoke: the client just drops its stored user record
    return {"message": "Logout successful"}


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    if missing(payload.name, payload.email, payload.password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Name, email, and password are required")

    problem = password_problem(payload.password)
    if problem:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=problem)

    conflict = HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    try:
        existing = db.query(User.id).filter(User.email == payload.email).first()
        if existing:
            raise conflict

        user = User(
            name=payload.name,
            email=payload.email,
            phone=payload.phone or None,
            password_hash=payload.password,
            role=UserRole.USER.value,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError:
        # lost a race with a concurrent registration for the same email
        db.rollback()
        raise conflict
    except SQLAlchemyError:
        raise store_failure(db, "Registration failed. Please try again.")

    return {
        "message": "User registered successfully",
        "user": {"id": user.id, "name": user.name, "email": user.email, "role": user.role},
    }
