from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class PublicUser(BaseModel):
    id: str
    name: str
    email: str
    coursesCompleted: int = 0
    totalStudyTime: int = 0


class AuthResponse(BaseModel):
    message: str
    token: str
    user: PublicUser


class AuthTokenPayload(BaseModel):
    userId: str
    email: str
    exp: Optional[datetime] = None
