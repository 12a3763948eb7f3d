"""
Pydantic schemas for customer endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class CustomerIn(BaseModel):
    # Any client-supplied id is dropped; the database assigns ids.
    name: str
    email: str


class Customer(BaseModel):
    id: int | None = None
    name: str
    email: str
