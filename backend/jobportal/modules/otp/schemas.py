from typing import Literal

from pydantic import BaseModel, EmailStr, Field


class SendOtpRequest(BaseModel):
    email: EmailStr
    purpose: Literal["signup", "password_reset"] = "signup"


class SendOtpResponse(BaseModel):
    message: str
    # Только вне production: код возвращается в ответе для отладки
    otp: str | None = None


class VerifyOtpRequest(BaseModel):
    email: EmailStr
    otp: str = Field(..., min_length=1, max_length=12)
    purpose: Literal["signup", "password_reset"] = "signup"


class VerifyOtpResponse(BaseModel):
    message: str
