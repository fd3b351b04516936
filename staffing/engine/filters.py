"""Candidate filtering"""
from typing import Iterable, List

from ..models import Candidate
from ..utils import logger


def filter_by_role(roster: Iterable[Candidate], role: str) -> List[Candidate]:
    """Return candidates whose role equals ``role`` exactly, in roster order.

    Skills are deliberately not considered here.
    """
    roster = list(roster)
    filtered = [candidate for candidate in roster if candidate.role == role]
    logger.debug(f"Role filter '{role}': {len(roster)} -> {len(filtered)} candidates")
    return filtered
