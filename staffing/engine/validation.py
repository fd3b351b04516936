"""Boundary validation for caller input"""
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import InvalidInputError
from ..models import Demand

M = TypeVar("M", bound=BaseModel)


def coerce(model: Type[M], value: Any, label: str) -> M:
    """Return ``value`` as a ``model`` instance, validating plain mappings"""
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid {label}: {e}") from e


def validate_demand(value: Any) -> Demand:
    demand = coerce(Demand, value, "demand")
    # model_construct() skips field validation, so check the ranges again
    if not isinstance(demand.headcount, int) or demand.headcount <= 0:
        raise InvalidInputError(f"headcount must be a positive integer, got {demand.headcount!r}")
    if not isinstance(demand.duration_months, int) or demand.duration_months <= 0:
        raise InvalidInputError(f"duration_months must be a positive integer, got {demand.duration_months!r}")
    if not demand.role:
        raise InvalidInputError("role must not be empty")
    if not demand.destination_country:
        raise InvalidInputError("destination_country must not be empty")
    return demand
