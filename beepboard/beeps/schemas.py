"""Request schemas for beep endpoints."""

from pydantic import BaseModel


class CreateBeepRequest(BaseModel):
    text: str
