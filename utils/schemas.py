"""
Pydantic Schemas - Data Validation Models

Defines the record shape returned by the cat-fact API. The upstream payload
uses camelCase and underscore-prefixed names (``_id``, ``__v``, ``type``);
those names live only in the field aliases below, everything else in the
code base uses the Python attribute names.

Validation is strict: unknown keys are rejected, missing keys are rejected
and no type coercion happens (``"1"`` is not an int, ``1`` is not a bool).

Usage:
    from utils.schemas import CatFact

    fact = CatFact.from_json(response.content)
    print(fact.text)
"""

from typing import Any, Union

import orjson
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)

from utils.errors import DecodeError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class FactStatus(BaseModel):
    """Verification status nested inside a fact."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    verified: StrictBool = Field(..., description="Whether the fact was verified")
    sent_count: StrictInt = Field(
        ..., alias="sentCount", ge=INT32_MIN, le=INT32_MAX, description="Times sent"
    )


class CatFact(BaseModel):
    """One fact as served by ``/facts/random``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    used: StrictBool = Field(..., description="Usage flag")
    source: StrictStr = Field(..., description="Source label, e.g. 'user' or 'api'")
    fact_type: StrictStr = Field(..., alias="type", description="Animal category")
    deleted: StrictBool = Field(..., description="Soft-delete flag")
    fact_id: StrictStr = Field(..., alias="_id", description="Upstream identifier")
    revision: StrictInt = Field(
        ..., alias="__v", ge=INT32_MIN, le=INT32_MAX, description="Document revision"
    )
    text: StrictStr = Field(..., description="The fact itself")
    updated_at: StrictStr = Field(..., alias="updatedAt", description="Last update timestamp")
    created_at: StrictStr = Field(..., alias="createdAt", description="Creation timestamp")
    status: FactStatus = Field(..., description="Verification status")
    user: StrictStr = Field(..., description="Owning user id")

    @classmethod
    def from_json(cls, body: Union[bytes, str]) -> "CatFact":
        """Decode a response body into a CatFact.

        Raises:
            DecodeError: If the body is not JSON or does not match the schema
        """
        try:
            payload = orjson.loads(body)
        except orjson.JSONDecodeError as e:
            raise DecodeError(f"Response body is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )

        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Response body does not match CatFact schema: {e}") from e

    def to_wire(self) -> dict[str, Any]:
        """Dump the fact with its upstream field names."""
        return self.model_dump(mode="json", by_alias=True)
