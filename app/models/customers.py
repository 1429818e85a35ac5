# app/models/customers.py

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr


class CustomerSeed(BaseModel):
    name: str
    email: EmailStr
    image_url: Optional[str] = None


class CustomerOut(BaseModel):
    id: UUID
    name: str
    email: EmailStr
    image_url: Optional[str] = None

    class Config:
        from_attributes = True
