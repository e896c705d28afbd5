# api/schemas/catalog.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, AliasChoices

from core.sa.repositories.inventory import MAX_SERIAL

class LoginRequest(BaseModel):
    name: str
    # Out of range card numbers are not rejected here; they fail to match a patron
    card_num: int = Field(validation_alias=AliasChoices("cardnum", "cardNum", "card_num"))

class SerialRequest(BaseModel):
    serial: int = Field(ge=0, le=MAX_SERIAL)

class SuccessResponse(BaseModel):
    success: bool

class MessageResponse(BaseModel):
    message: str

class SessionStatus(BaseModel):
    logged_in: bool
    name: str
    card_num: int

    model_config = ConfigDict(from_attributes=True)

class CatalogEntry(BaseModel):
    isbn: str
    title: str
    author: str
    serial: Optional[int] = None
    name: str = ""

class CheckoutEntry(BaseModel):
    title: str
    author: str
    serial: int
