# Area: Core
"""
gamer_pool.engine — Match engine
================================

Turns a snapshot of the pool into fixed-size groups.

Grouping is a greedy scan, not an exact nearest-neighbour search.
Candidates are visited in ``(skill, latency, name)`` order. For each
seat the first remaining candidate is the initial best fit, and a
later candidate replaces it when both its skill and latency distance
to the *current* best fit are no larger than the smallest distances
seen so far in that scan. The chosen candidate leaves the queue and
the scan repeats until the group is full.

Every recalculation is a full rebuild: the queue and the group list
are replaced together, so readers see either the previous result or
the new one, never a half-built list.
"""

import logging
import math
import threading
from datetime import datetime
from typing import Dict, List, Tuple

from .stats import calculate_group_stats
from .types import GamerRecord, Group, GroupStatistics, utc_now

logger = logging.getLogger("gamer_pool.engine")


def _scan_order(record: GamerRecord) -> Tuple[float, float, str]:
    return (record.skill, record.latency, record.name)


def _best_fit(candidates: List[GamerRecord]) -> int:
    """Return the index of the best-fit candidate in scan order."""
    min_skill_diff = math.inf
    min_latency_diff = math.inf
    fit_index = 0
    fit = candidates[0]

    for index, candidate in enumerate(candidates):
        skill_diff = abs(candidate.skill - fit.skill)
        latency_diff = abs(candidate.latency - fit.latency)
        if skill_diff <= min_skill_diff and latency_diff <= min_latency_diff:
            min_skill_diff = skill_diff
            min_latency_diff = latency_diff
            fit_index, fit = index, candidate

    return fit_index


class MatchEngine:
    """
    Owns the pending queue and the formed groups.

    Attributes:
        group_size: Members per group, fixed for the engine's lifetime
    """

    def __init__(self, group_size: int):
        self.group_size = group_size
        self._queue: Dict[str, GamerRecord] = {}
        self._groups: List[Group] = []
        self._recalc_lock = threading.Lock()
        self._state_lock = threading.Lock()
        if group_size <= 0:
            logger.warning(f"Group size {group_size} is not positive; no groups will form")

    def recalculate(self, snapshot: Dict[str, GamerRecord]) -> List[Group]:
        """
        Rebuild all groups from a pool snapshot.

        Args:
            snapshot: Mapping of name to record; it is copied, not kept

        Returns:
            The newly formed groups
        """
        with self._recalc_lock:
            queue = dict(snapshot)
            formed = self._form_groups(queue)
            groups = [
                Group(number=number, members=members, form_time=form_time)
                for number, (members, form_time) in enumerate(formed)
            ]
            with self._state_lock:
                self._queue = queue
                self._groups = groups

        logger.info(
            f"Recalculated {len(groups)} group(s) from {len(snapshot)} gamer(s), "
            f"{len(queue)} left waiting"
        )
        return list(groups)

    def _form_groups(
        self, queue: Dict[str, GamerRecord]
    ) -> List[Tuple[Dict[str, GamerRecord], datetime]]:
        formed: List[Tuple[Dict[str, GamerRecord], datetime]] = []
        if self.group_size <= 0:
            return formed

        remaining = sorted(queue.values(), key=_scan_order)
        while len(remaining) >= self.group_size:
            members: Dict[str, GamerRecord] = {}
            for _ in range(self.group_size):
                fit = remaining.pop(_best_fit(remaining))
                members[fit.name] = fit
                del queue[fit.name]
            formed.append((members, utc_now()))
        return formed

    def get_groups(self) -> List[Group]:
        with self._state_lock:
            return list(self._groups)

    def get_group_stats(self, index: int) -> GroupStatistics:
        """Statistics for one group; the empty result if index is out of range."""
        with self._state_lock:
            group = self._groups[index] if 0 <= index < len(self._groups) else None
        return calculate_group_stats(group)

    def waiting(self) -> List[str]:
        """Names left ungrouped by the last recalculation."""
        with self._state_lock:
            return sorted(self._queue)
