# Area: Shared
"""
gamer_pool.types — Records, groups and statistics
=================================================

Value types shared by the pool, the match engine and the store.

    from gamer_pool import GamerRecord, Group, GroupStatistics

GamerRecord and GroupStatistics are pydantic models, so they validate
boundary input and serialise to JSON with ``model_dump(mode="json")``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import MalformedGamerError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GamerRecord(BaseModel):
    """One player waiting for a group.

    Fields
    ------
    name : str
        Unique within the pool.
    skill : float
        Matchmaking skill value, caller supplied.
    latency : float
        Measured network latency, caller supplied.
    connect_time : datetime
        Join time, used only to compute the wait before a group forms.
        Times without a zone are taken as UTC.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    skill: float
    latency: float
    connect_time: datetime = Field(default_factory=utc_now)

    @field_validator("connect_time")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_payload(cls, payload: Any) -> "GamerRecord":
        """Build a record from untrusted input.

        The join time is always now; a client-supplied connect_time is
        ignored.

        Raises:
            MalformedGamerError: If the payload is not a valid gamer
        """
        if not isinstance(payload, dict):
            raise MalformedGamerError(payload, [f"Expected object, got {type(payload).__name__}"])
        try:
            fields = {k: v for k, v in payload.items() if k != "connect_time"}
            return cls.model_validate(fields)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(p) for p in err['loc']) or 'gamer'}: {err['msg']}"
                for err in e.errors()
            ]
            raise MalformedGamerError(payload, errors) from e


@dataclass(frozen=True)
class Group:
    """A finalized batch of gamers, keyed by name."""
    number: int
    members: Dict[str, GamerRecord] = field(default_factory=dict)
    form_time: datetime = field(default_factory=utc_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "gamers": {
                name: record.model_dump(mode="json")
                for name, record in self.members.items()
            },
            "form_time": self.form_time.isoformat(),
        }


class GroupStatistics(BaseModel):
    """Derived statistics for one group.

    The all-zero instance with an empty ``player_names`` list is the
    result for a group index that does not exist.
    """
    group_number: int = 0
    min_skill: float = 0.0
    max_skill: float = 0.0
    avg_skill: float = 0.0
    min_latency: float = 0.0
    max_latency: float = 0.0
    avg_latency: float = 0.0
    min_wait: timedelta = timedelta(0)
    max_wait: timedelta = timedelta(0)
    avg_wait: timedelta = timedelta(0)
    player_names: List[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.player_names
