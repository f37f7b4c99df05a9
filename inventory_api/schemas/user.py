# inventory_api/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from inventory_api.schemas.product import CamelModel

# Schema for user authentication credentials
class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

# Output schema for user profile details (never includes the password hash)
class UserResponse(CamelModel):
    id: str
    name: str
    email: EmailStr
    role: str
    created_at: Optional[datetime] = None

# Schema for the login response
class LoginResponse(CamelModel):
    message: str
    user: UserResponse
    token: str
    token_type: str = "bearer"

# Schema for profile changes; the password only changes when both are given
class ProfileUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = Field(None, min_length=6)

class ProfileResponse(CamelModel):
    message: str
    user: UserResponse
