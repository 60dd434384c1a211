from pydantic import BaseModel, EmailStr
from typing import Optional

from app.models.user.user import UserOut

# ---------- Auth Schemas ----------#

class LoginPayload(BaseModel):
    email: EmailStr
    password: str
    admin_pass: Optional[str] = None

class AuthResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    data: UserOut
