"""Load reference data snapshots from YAML files"""
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from .snapshot import ReferenceData, parse_route
from ..exceptions import DataUnavailableError
from ..models import Candidate, VisaRule
from ..utils import logger


def build_reference_data(document: Dict[str, Any]) -> ReferenceData:
    """Build a snapshot from a parsed reference document.

    Expected sections (all optional):
        employees: list of candidate records
        visa_rules: {"Origin_Destination": {visa_type, wait_days, notes}}
        flight_costs: {"Origin_Destination": cost}
        carbon_footprint: {"Origin_Destination": kg_co2}
    """
    if not isinstance(document, dict):
        raise DataUnavailableError("Reference document must be a mapping")

    try:
        roster = [Candidate.model_validate(record) for record in document.get("employees") or []]
        visa_rules = {
            parse_route(key): VisaRule.model_validate(rule)
            for key, rule in (document.get("visa_rules") or {}).items()
        }
        flight_costs = {
            parse_route(key): float(cost)
            for key, cost in (document.get("flight_costs") or {}).items()
        }
        carbon_footprint = {
            parse_route(key): float(kg)
            for key, kg in (document.get("carbon_footprint") or {}).items()
        }
    except (ValidationError, ValueError, TypeError) as e:
        raise DataUnavailableError(f"Invalid reference data: {e}") from e

    return ReferenceData(
        roster=roster,
        visa_rules=visa_rules,
        flight_costs=flight_costs,
        carbon_footprint=carbon_footprint,
    )


def load_reference_file(path: Union[str, Path]) -> ReferenceData:
    """Load a snapshot from a YAML reference file"""
    path = Path(path)
    logger.info(f"Loading reference data from {path}")

    try:
        with open(path, "r") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise DataUnavailableError(f"Cannot read reference data {path}: {e}") from e
    except yaml.YAMLError as e:
        raise DataUnavailableError(f"Cannot parse reference data {path}: {e}") from e

    reference = build_reference_data(document or {})
    logger.info(f"Loaded reference snapshot: {reference.summary()}")
    return reference
