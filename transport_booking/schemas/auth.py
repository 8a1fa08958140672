from typing import Optional

from pydantic import BaseModel


# Fields are optional so missing ones reach the handler and get the
# route's own 400 message instead of a generic body error.
class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
