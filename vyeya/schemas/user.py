from typing import Optional
from pydantic import BaseModel, EmailStr, ConfigDict, Field, field_validator
from vyeya.models.user import UserRole


class UserBase(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1)


class UserCreate(UserBase):
    password: str = Field(..., min_length=1)
    role: UserRole = UserRole.buyer

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, value):
        # "Buyer", "BUYER" y "buyer" son el mismo rol
        if isinstance(value, str):
            return value.strip().lower()
        return value


class UserLogin(BaseModel):
    # Sin validar formato: un email inexistente o mal formado es 401
    email: str
    password: str


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    role: str
    bio: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UserEnvelope(BaseModel):
    user: UserResponse


class AuthResponse(BaseModel):
    token: str
    user: UserResponse


class GrowerProfile(BaseModel):
    id: str
    name: str
    role: str
    bio: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class GrowerEnvelope(BaseModel):
    grower: GrowerProfile
