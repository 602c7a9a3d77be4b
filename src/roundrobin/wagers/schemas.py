"""Pydantic schemas for round robin payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from roundrobin.wagers.types import RoundRobinResult, TeamEntry, TeamStatus


class TeamPayload(BaseModel):
    id: int
    name: str = ""
    odds: str = ""
    status: TeamStatus = TeamStatus.UNSET

    @field_validator("odds", mode="before")
    @classmethod
    def _odds_as_text(cls, value: object) -> str:
        return "" if value is None else str(value)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> TeamStatus:
        return TeamStatus.coerce(value)  # type: ignore[arg-type]

    def to_entry(self) -> TeamEntry:
        return TeamEntry(id=self.id, name=self.name, odds=self.odds, status=self.status)


class RoundRobinRequest(BaseModel):
    teams: list[TeamPayload]
    combination_size: int = Field(default=2, ge=1)
    risk: float | str = ""

    def to_entries(self) -> list[TeamEntry]:
        return [team.to_entry() for team in self.teams]


class CombinationPayload(BaseModel):
    team_ids: list[int]
    team_names: list[str]
    total_odds: float
    is_winner: bool | None
    draw_count: int
    effective_teams: int
    result: float


class SummaryPayload(BaseModel):
    total_combinations: int
    winning_combinations: int
    losing_combinations: int
    pending_combinations: int
    per_combination_risk: float
    total_win: float
    total_loss: float
    net_result: float


class RoundRobinResponse(BaseModel):
    combinations: list[CombinationPayload]
    summary: SummaryPayload

    @classmethod
    def from_result(cls, result: RoundRobinResult) -> RoundRobinResponse:
        summary = result.summary
        return cls(
            combinations=[
                CombinationPayload(
                    team_ids=[team.id for team in combination.teams],
                    team_names=combination.team_names,
                    total_odds=combination.total_odds,
                    is_winner=combination.is_winner,
                    draw_count=combination.draw_count,
                    effective_teams=combination.effective_teams,
                    result=value,
                )
                for combination, value in zip(result.combinations, result.results)
            ],
            summary=SummaryPayload(
                total_combinations=summary.total_combinations,
                winning_combinations=summary.winning_combinations,
                losing_combinations=summary.losing_combinations,
                pending_combinations=summary.pending_combinations,
                per_combination_risk=summary.per_combination_risk,
                total_win=summary.total_win,
                total_loss=summary.total_loss,
                net_result=summary.net_result,
            ),
        )
