"""Closed tagged unions and zero-cost typed IDs.

`Result` and `Shape` are discriminated unions: every variant carries a
literal ``kind`` tag, pydantic picks the variant from that tag when parsing
raw data, and the `describe_*` helpers do exhaustive ``match`` over the
closed set with `assert_never` as the fallback so a new variant that is not
handled fails type checking (and raises at runtime if it slips through).

`UserId` and `ProductId` are `NewType` aliases over ``int``: distinct to the
type checker, plain ints at runtime.
"""
from __future__ import annotations

import math
from typing import Annotated, Any, Literal, NewType, Union, assert_never

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

__all__ = [
    "Success",
    "Failure",
    "Loading",
    "Result",
    "parse_result",
    "describe_result",
    "Circle",
    "Rectangle",
    "Shape",
    "parse_shape",
    "describe_shape",
    "UserId",
    "ProductId",
    "process_user",
    "process_product",
]


class _Variant(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------- Result -----------------
class Success(_Variant):
    kind: Literal["success"] = "success"
    value: Any


class Failure(_Variant):
    kind: Literal["failure"] = "failure"
    message: str


class Loading(_Variant):
    kind: Literal["loading"] = "loading"


Result = Annotated[Union[Success, Failure, Loading], Field(discriminator="kind")]

_RESULT_ADAPTER: TypeAdapter[Any] = TypeAdapter(Result)


def parse_result(data: Any) -> Success | Failure | Loading:
    """Validate raw data (e.g. ``{"kind": "failure", "message": "boom"}``) into a variant."""
    return _RESULT_ADAPTER.validate_python(data)


def describe_result(result: Success | Failure | Loading) -> str:
    match result:
        case Success(value=value):
            return f"Success: {value}"
        case Failure(message=message):
            return f"Error: {message}"
        case Loading():
            return "Loading..."
        case _:
            assert_never(result)


# ---------------- Shape -----------------
class Circle(_Variant):
    kind: Literal["circle"] = "circle"
    radius: float = Field(ge=0)

    def area(self) -> float:
        return math.pi * self.radius * self.radius


class Rectangle(_Variant):
    kind: Literal["rectangle"] = "rectangle"
    width: float = Field(ge=0)
    height: float = Field(ge=0)

    def area(self) -> float:
        return self.width * self.height


Shape = Annotated[Union[Circle, Rectangle], Field(discriminator="kind")]

_SHAPE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Shape)


def parse_shape(data: Any) -> Circle | Rectangle:
    return _SHAPE_ADAPTER.validate_python(data)


def describe_shape(shape: Circle | Rectangle) -> list[str]:
    """Two lines: what the shape is, then its area (two decimals)."""
    match shape:
        case Circle(radius=radius):
            header = f"Circle with radius {radius}"
        case Rectangle(width=width, height=height):
            header = f"Rectangle {width}x{height}"
        case _:
            assert_never(shape)
    return [header, f"Area: {shape.area():.2f}"]


# ---------------- Typed IDs -----------------
UserId = NewType("UserId", int)
ProductId = NewType("ProductId", int)


def process_user(user_id: UserId) -> str:
    return f"Processing user with ID: {user_id}"


def process_product(product_id: ProductId) -> str:
    return f"Processing product with ID: {product_id}"
