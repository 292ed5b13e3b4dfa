"""
Data Models

Pydantic models for the small in-memory records the array and
refactoring snippets work on.
"""

from pydantic import BaseModel, Field


class NamedRecord(BaseModel):
    id: int
    name: str


class Person(BaseModel):
    name: str
    age: int = Field(..., ge=0)


class GreetedPerson(Person):
    greeting: str


class CartItem(BaseModel):
    type: str = Field(..., description="Item category, e.g. 'book' or 'electronics'")
    price: float = Field(..., ge=0)
