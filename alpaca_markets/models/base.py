"""Base model for wire-format payloads."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from alpaca_markets.core.errors import ParseError

M = TypeVar("M", bound="AlpacaModel")


class AlpacaModel(BaseModel):
    """Immutable model populated from an API response.

    Unknown fields are ignored and null values fall back to the field
    default, so a sparse payload still yields a usable object.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @classmethod
    def from_json(cls: type[M], payload: Any) -> M:
        """Validate a decoded JSON payload.

        Raises:
            ParseError: If the payload does not match the model
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise ParseError(
                f"Received parse error when deserializing {cls.__name__} JSON: "
                f"{e.error_count()} validation error(s)",
                field=".".join(str(p) for p in e.errors()[0]["loc"]) or None,
                value=e.errors()[0].get("input"),
            ) from e


def parse_list(model: type[M], payload: Any) -> list[M]:
    """Validate a JSON array of objects."""
    if not isinstance(payload, list):
        raise ParseError(f"Expected a JSON array of {model.__name__}", value=type(payload).__name__)
    return [model.from_json(item) for item in payload]


def parse_mapping(model: type[M], payload: Any) -> dict[str, M]:
    """Validate a JSON object keyed by symbol; a missing object yields {}."""
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ParseError(f"Expected a JSON object of {model.__name__}", value=type(payload).__name__)
    return {symbol: model.from_json(item) for symbol, item in payload.items()}
