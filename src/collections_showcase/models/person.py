"""The `Person` record used as example payload for grouping and partitioning.

Instances are frozen: equality is field equality, instances are hashable,
and there is no identity beyond the three fields.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """Immutable (name, age, department) triple."""

    model_config = ConfigDict(frozen=True)

    name: str
    age: int = Field(ge=0)
    department: str


def sample_people() -> List[Person]:
    return [
        Person(name="Alice", age=25, department="Engineering"),
        Person(name="Bob", age=30, department="Marketing"),
        Person(name="Charlie", age=35, department="Engineering"),
        Person(name="Diana", age=28, department="Sales"),
    ]
