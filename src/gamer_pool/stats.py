# Area: Core
"""
gamer_pool.stats — Group statistics
===================================

Pure computation of skill, latency and wait-time spread for one
formed group.
"""

from typing import Optional

from .types import Group, GroupStatistics


def calculate_group_stats(group: Optional[Group]) -> GroupStatistics:
    """
    Compute statistics for a group.

    Args:
        group: A formed group, or None for a missing index

    Returns:
        GroupStatistics for the group; the empty result when the group
        is missing or has no members
    """
    if group is None or not group.members:
        return GroupStatistics()

    members = list(group.members.values())
    first = members[0]
    first_wait = group.form_time - first.connect_time

    min_skill = max_skill = sum_skill = first.skill
    min_latency = max_latency = sum_latency = first.latency
    min_wait = max_wait = sum_wait = first_wait
    names = [first.name]

    for gamer in members[1:]:
        wait = group.form_time - gamer.connect_time
        names.append(gamer.name)

        sum_skill += gamer.skill
        min_skill = min(min_skill, gamer.skill)
        max_skill = max(max_skill, gamer.skill)

        sum_latency += gamer.latency
        min_latency = min(min_latency, gamer.latency)
        max_latency = max(max_latency, gamer.latency)

        sum_wait += wait
        min_wait = min(min_wait, wait)
        max_wait = max(max_wait, wait)

    count = len(members)
    return GroupStatistics(
        group_number=group.number,
        min_skill=min_skill,
        max_skill=max_skill,
        avg_skill=sum_skill / count,
        min_latency=min_latency,
        max_latency=max_latency,
        avg_latency=sum_latency / count,
        min_wait=min_wait,
        max_wait=max_wait,
        avg_wait=sum_wait / count,
        player_names=names,
    )
