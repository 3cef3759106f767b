"""Pydantic models used as example payloads.

Modules:
    person: the `Person` record and a fixed sample roster
    variants: closed tagged unions (`Result`, `Shape`) and typed integer IDs
"""
from __future__ import annotations

from .person import Person, sample_people
from .variants import (
    Circle,
    Failure,
    Loading,
    ProductId,
    Rectangle,
    Result,
    Shape,
    Success,
    UserId,
)

__all__ = [
    "Person",
    "sample_people",
    "Result",
    "Success",
    "Failure",
    "Loading",
    "Shape",
    "Circle",
    "Rectangle",
    "UserId",
    "ProductId",
]
