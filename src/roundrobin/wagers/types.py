"""Dataclasses and enums for round robin wagers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class TeamStatus(str, Enum):
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"
    UNSET = "unset"

    @classmethod
    def coerce(cls, value: TeamStatus | str | None) -> TeamStatus:
        """Accept enum members, their values, or None/"" for an unsettled leg."""

        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        return cls(text) if text else cls.UNSET


class CombinationOutcome(str, Enum):
    WIN = "win"
    LOSE = "lose"
    PENDING = "pending"


@dataclass(frozen=True)
class TeamEntry:
    id: int
    name: str = ""
    odds: str = ""
    status: TeamStatus = TeamStatus.UNSET


@dataclass(frozen=True)
class CombinationAnalysis:
    outcome: CombinationOutcome
    draw_count: int
    effective_teams: int


@dataclass(frozen=True)
class Combination:
    teams: tuple[TeamEntry, ...]
    total_odds: float
    outcome: CombinationOutcome
    draw_count: int
    effective_teams: int

    @property
    def is_winner(self) -> bool | None:
        if self.outcome is CombinationOutcome.PENDING:
            return None
        return self.outcome is CombinationOutcome.WIN

    @property
    def team_names(self) -> List[str]:
        return [team.name for team in self.teams]


@dataclass(frozen=True)
class CombinationSize:
    value: int
    count: int


@dataclass(frozen=True)
class RoundRobinSummary:
    total_combinations: int
    winning_combinations: int
    losing_combinations: int
    pending_combinations: int
    per_combination_risk: float
    total_win: float
    total_loss: float

    @property
    def net_result(self) -> float:
        return self.total_win - self.total_loss


@dataclass(frozen=True)
class RoundRobinResult:
    combinations: List[Combination]
    summary: RoundRobinSummary
    results: List[float] = field(default_factory=list)
