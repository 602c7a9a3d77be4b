"""Caller-held team list for a round robin ticket."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from typing import Dict, List

from roundrobin.config import get_settings
from roundrobin.wagers.engine import available_combination_sizes, calculate_round_robin
from roundrobin.wagers.types import CombinationSize, RoundRobinResult, TeamEntry, TeamStatus

logger = logging.getLogger(__name__)

_UNCHANGED = object()


class TeamSheetError(ValueError):
    """Raised when an edit would break the sheet's size limits."""


class TeamSheet:
    """Ordered team entries keyed by id; insertion order drives enumeration order."""

    def __init__(self, teams: List[TeamEntry] | None = None) -> None:
        self.settings = get_settings()
        self._teams: Dict[int, TeamEntry] = {}
        self._next_id = 1
        teams = teams or []
        if len(teams) > self.settings.max_teams:
            raise TeamSheetError(f"A sheet holds at most {self.settings.max_teams} teams.")
        for team in teams:
            if team.id in self._teams:
                raise TeamSheetError(f"Duplicate team id {team.id}.")
            self._teams[team.id] = team
            self._next_id = max(self._next_id, team.id + 1)
        while len(self._teams) < self.settings.min_teams:
            self._append(TeamEntry(id=self._allocate_id()))

    def __len__(self) -> int:
        return len(self._teams)

    def __iter__(self) -> Iterator[TeamEntry]:
        return iter(self._teams.values())

    def __getitem__(self, team_id: int) -> TeamEntry:
        return self._teams[team_id]

    @property
    def teams(self) -> List[TeamEntry]:
        return list(self._teams.values())

    def _allocate_id(self) -> int:
        team_id = self._next_id
        self._next_id += 1
        return team_id

    def _append(self, team: TeamEntry) -> None:
        self._teams[team.id] = team

    def add_team(
        self,
        name: str = "",
        odds: str = "",
        status: TeamStatus | str | None = None,
    ) -> TeamEntry:
        if len(self._teams) >= self.settings.max_teams:
            raise TeamSheetError(f"A sheet holds at most {self.settings.max_teams} teams.")
        team = TeamEntry(
            id=self._allocate_id(), name=name, odds=odds, status=TeamStatus.coerce(status)
        )
        self._append(team)
        logger.debug("Added team %s (%d on sheet)", team.id, len(self._teams))
        return team

    def remove_team(self, team_id: int) -> TeamEntry:
        if team_id not in self._teams:
            raise KeyError(team_id)
        if len(self._teams) <= self.settings.min_teams:
            raise TeamSheetError(f"A sheet needs at least {self.settings.min_teams} teams.")
        return self._teams.pop(team_id)

    def update_team(
        self,
        team_id: int,
        *,
        name: str | None = None,
        odds: str | None = None,
        status: TeamStatus | str | None | object = _UNCHANGED,
    ) -> TeamEntry:
        """Replace fields of an entry.

        ``name`` and ``odds`` left as ``None`` keep their current values. ``status``
        is kept only when omitted; passing ``None`` or ``""`` resets it to unset.
        """

        team = self._teams[team_id]
        changes: Dict[str, object] = {}
        if name is not None:
            changes["name"] = name
        if odds is not None:
            changes["odds"] = odds
        if status is not _UNCHANGED:
            changes["status"] = TeamStatus.coerce(status)  # type: ignore[arg-type]
        updated = replace(team, **changes)
        self._teams[team_id] = updated
        return updated

    def set_status(self, team_id: int, status: TeamStatus | str | None) -> TeamEntry:
        return self.update_team(team_id, status=status)

    def available_sizes(self) -> List[CombinationSize]:
        return available_combination_sizes(len(self._teams), self.settings.min_combination_size)

    def calculate(self, combination_size: int, risk: str | float | int | None) -> RoundRobinResult:
        return calculate_round_robin(self.teams, combination_size, risk)
