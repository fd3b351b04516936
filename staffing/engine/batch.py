"""Concurrent matching of independent demands"""
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .matcher import StaffingMatcher
from ..exceptions import StaffingError
from ..models import MatchOutput
from ..utils import config, logger


@dataclass
class BatchItemResult:
    """Outcome of matching a single demand"""
    index: int
    success: bool
    output: Optional[MatchOutput] = None
    error: Optional[str] = None


class BatchMatcher:
    """Match several demands concurrently against one snapshot.

    Demands are independent: a candidate may be selected for more than one
    demand and nothing is allocated across them.
    """

    def __init__(self, matcher: StaffingMatcher, max_workers: Optional[int] = None):
        self.matcher = matcher
        self.max_workers = max_workers or config.batch_max_workers

    def _match_one(self, index: int, demand: Any, weights: Any) -> BatchItemResult:
        try:
            output = self.matcher.match(demand, weights)
        except StaffingError as e:
            logger.error(f"✗ Demand {index}: {e}")
            return BatchItemResult(index=index, success=False, error=str(e))
        return BatchItemResult(index=index, success=True, output=output)

    def match_all(self, demands: Sequence[Any], weights: Any) -> Dict[str, Any]:
        """
        Match every demand with the same weights.

        Returns:
            Summary dict with totals, elapsed time and per-demand results
            in submission order
        """
        logger.info(f"Matching {len(demands)} demands with {self.max_workers} workers")
        start_time = time.perf_counter()

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._match_one, index, demand, weights)
                for index, demand in enumerate(demands)
            ]
            results: List[BatchItemResult] = [future.result() for future in futures]

        total_time = time.perf_counter() - start_time
        successful = [r for r in results if r.success]

        summary = {
            "total_demands": len(demands),
            "successful": len(successful),
            "failed": len(results) - len(successful),
            "total_time_seconds": round(total_time, 4),
            "results": results,
        }

        logger.info(
            f"Batch complete: {summary['successful']}/{summary['total_demands']} matched "
            f"in {total_time:.3f}s"
        )
        return summary
