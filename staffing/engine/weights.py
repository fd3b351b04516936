"""Weight normalization and presets"""
import math
from typing import Any, Dict, Optional

from .validation import coerce
from ..exceptions import InvalidInputError
from ..models import NormalizedWeights, WeightInput
from ..utils import config


def normalize_weights(weights: Any) -> NormalizedWeights:
    """
    Turn raw slider values into weights that sum to 1.

    When the raw sliders sum to 0, every criterion gets an equal third.
    Otherwise negative sliders count as 0 and the rest are scaled to sum to 1.

    Args:
        weights: WeightInput or mapping with speed, cost and compliance

    Returns:
        NormalizedWeights
    """
    weights = coerce(WeightInput, weights, "weights")
    raw = [weights.speed, weights.cost, weights.compliance]
    if not all(math.isfinite(value) for value in raw):
        raise InvalidInputError(f"Weights must be finite numbers, got {raw}")

    speed, cost, compliance = (max(0.0, float(value)) for value in raw)
    total = speed + cost + compliance

    # all-negative triples clamp to nothing as well
    if sum(raw) == 0 or total == 0:
        third = 1.0 / 3.0
        return NormalizedWeights(speed=third, cost=third, compliance=third)

    return NormalizedWeights(
        speed=speed / total,
        cost=cost / total,
        compliance=compliance / total,
    )


def resolve_preset(name: str, presets: Optional[Dict[str, Dict[str, float]]] = None) -> WeightInput:
    """Look up a named weight preset (cost, speed, compliance by default)"""
    presets = presets if presets is not None else config.weight_presets
    if name not in presets:
        raise InvalidInputError(f"Unknown weight preset {name!r}; choose from {sorted(presets)}")
    return coerce(WeightInput, presets[name], f"preset {name!r}")
