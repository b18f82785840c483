from pydantic import BaseModel, EmailStr, Field


class ContactMessageRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    subject: str | None = Field(default=None, max_length=300)
    category: str | None = Field(default=None, max_length=100)
    message: str = Field(..., min_length=1, max_length=10000)


class ContactMessageResponse(BaseModel):
    message: str
