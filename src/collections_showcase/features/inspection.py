"""Describe a value's shape at runtime through explicit metadata.

Descriptions are built from the schema metadata pydantic models already
carry (`model_fields`, `model_json_schema`) and from dataclass field
metadata, and are returned as pydantic models themselves so they can be
compared in tests or dumped to JSON.
"""
from __future__ import annotations

import dataclasses
import inspect
from typing import Any, Callable, Dict, List, Literal, Optional, get_origin

from pydantic import BaseModel, Field

__all__ = ["TypeDescription", "CallableDescription", "inspect_type", "describe_callable"]


class TypeDescription(BaseModel):
    simple_name: str
    qualified_name: str
    is_data_model: bool
    is_variant: bool = Field(
        description="True for members of a closed tagged union (model with a literal `kind` tag)"
    )
    fields: List[str] = Field(default_factory=list)
    json_schema: Optional[Dict[str, Any]] = None


class CallableDescription(BaseModel):
    name: str
    parameters: List[str]
    return_type: Optional[str] = None


def _is_variant(cls: type) -> bool:
    if not (isinstance(cls, type) and issubclass(cls, BaseModel)):
        return False
    tag = cls.model_fields.get("kind")
    return tag is not None and get_origin(tag.annotation) is Literal


def inspect_type(value: Any) -> TypeDescription:
    cls = type(value)
    fields: List[str] = []
    schema: Optional[Dict[str, Any]] = None
    is_model = isinstance(value, BaseModel)
    if is_model:
        fields = list(cls.model_fields)
        schema = cls.model_json_schema()
    elif dataclasses.is_dataclass(value):
        fields = [f.name for f in dataclasses.fields(value)]
    return TypeDescription(
        simple_name=cls.__name__,
        qualified_name=f"{cls.__module__}.{cls.__qualname__}",
        is_data_model=is_model or dataclasses.is_dataclass(value),
        is_variant=_is_variant(cls),
        fields=fields,
        json_schema=schema,
    )


def describe_callable(fn: Callable[..., Any]) -> CallableDescription:
    signature = inspect.signature(fn)
    ret = signature.return_annotation
    if ret is inspect.Signature.empty:
        return_type = None
    elif isinstance(ret, str):
        return_type = ret
    else:
        return_type = getattr(ret, "__name__", repr(ret))
    return CallableDescription(
        name=getattr(fn, "__name__", type(fn).__name__),
        parameters=list(signature.parameters),
        return_type=return_type,
    )
