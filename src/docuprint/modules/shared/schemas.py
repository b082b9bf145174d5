"""
Shared Schemas

The API speaks camelCase JSON; Python code uses snake_case field names.
Successful responses are wrapped as {"data": ...}.
"""

import re
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# ASCII digits only
MOBILE_PATTERN = re.compile(r"[0-9]{10}")


def normalize_mobile(v: str) -> str:
    """Strip a mobile number and require exactly 10 ASCII digits."""
    v = v.strip()
    if not MOBILE_PATTERN.fullmatch(v):
        raise ValueError("Mobile number must be exactly 10 digits")
    return v


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, populated by either name."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class DataResponse(CamelModel, Generic[T]):
    """Success envelope."""

    data: T
    message: str | None = None
