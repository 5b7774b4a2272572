from pydantic import BaseModel, EmailStr, Field
from typing import Literal, Optional

Role = Literal["admin", "teacher", "student"]

class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: Role
    name: Optional[str] = None

class LoginRequest(BaseModel):
    email: EmailStr
    password: str
    role: Role

class UserResponse(BaseModel):
    id: str
    email: EmailStr
    name: Optional[str] = None
    role: Role
    class Config:
        from_attributes = True

class LoginResponse(BaseModel):
    token: str
    token_type: str = Field("bearer", alias="tokenType")
    expires_at: str = Field(..., alias="expiresAt")
    user: UserResponse
    class Config:
        populate_by_name = True
