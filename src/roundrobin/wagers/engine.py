"""Round robin enumeration and settlement logic."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import List, TypeVar

from roundrobin.wagers.types import (
    Combination,
    CombinationAnalysis,
    CombinationOutcome,
    CombinationSize,
    RoundRobinResult,
    RoundRobinSummary,
    TeamEntry,
    TeamStatus,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ODDS = 1.0
DEFAULT_RISK = 0.0
MIN_COMBINATION_SIZE = 2


def _to_float(value: str | float | int | None) -> float | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_odds(value: str | float | int | None) -> float:
    """Decimal odds as a number; missing, unparsable or non-positive input counts as 1."""

    number = _to_float(value)
    if number is None or number <= 0:
        return DEFAULT_ODDS
    return number


def parse_risk(value: str | float | int | None) -> float:
    number = _to_float(value)
    if number is None or number < 0:
        return DEFAULT_RISK
    return number


def valid_teams(teams: Iterable[TeamEntry]) -> List[TeamEntry]:
    """Entries with both a name and odds, in their original order."""

    return [team for team in teams if team.name and team.odds]


def generate_combinations(items: Sequence[T], r: int) -> List[List[T]]:
    """All order-preserving ``r``-subsets of ``items``, lexicographic by index."""

    n = len(items)
    if r < 1 or r > n:
        return []
    if r == 1:
        return [[item] for item in items]
    if r == n:
        return [list(items)]

    combinations: List[List[T]] = []
    for i in range(n - r + 1):
        head = items[i]
        for tail in generate_combinations(items[i + 1 :], r - 1):
            combinations.append([head, *tail])
    return combinations


def analyze_combination(teams: Sequence[TeamEntry]) -> CombinationAnalysis:
    """Classify a subset as winning, losing or pending and count its draws.

    Any unsettled leg makes the whole subset pending, in which case no draw
    information is reported. Otherwise legs are scanned in order and the first
    losing leg stops the scan, so draws listed after it are not counted.
    """

    effective_teams = len(teams)
    if any(team.status is TeamStatus.UNSET for team in teams):
        return CombinationAnalysis(CombinationOutcome.PENDING, 0, effective_teams)

    draw_count = 0
    for team in teams:
        if team.status is TeamStatus.DRAW:
            draw_count += 1
            effective_teams -= 1
        elif team.status is TeamStatus.LOSE:
            return CombinationAnalysis(CombinationOutcome.LOSE, draw_count, effective_teams)
    return CombinationAnalysis(CombinationOutcome.WIN, draw_count, effective_teams)


def combine_odds(teams: Iterable[TeamEntry]) -> float:
    decimal = 1.0
    for team in teams:
        if team.status is TeamStatus.DRAW:
            continue
        decimal *= parse_odds(team.odds)
    return decimal


def combination_result(combination: Combination, stake: float) -> float:
    """Signed net result of one combination staked at ``stake``."""

    if combination.outcome is CombinationOutcome.PENDING:
        return 0.0
    # all-draw subsets are a push
    if combination.effective_teams == 0:
        return 0.0
    if combination.outcome is CombinationOutcome.LOSE:
        return -stake
    return stake * combination.total_odds - stake


def build_combinations(teams: Iterable[TeamEntry], combination_size: int) -> List[Combination]:
    candidates = valid_teams(teams)
    if combination_size < 1 or len(candidates) < combination_size:
        logger.debug(
            "Skipping enumeration: %d valid teams for size %d", len(candidates), combination_size
        )
        return []

    combinations: List[Combination] = []
    for subset in generate_combinations(candidates, combination_size):
        analysis = analyze_combination(subset)
        combinations.append(
            Combination(
                teams=tuple(subset),
                total_odds=combine_odds(subset),
                outcome=analysis.outcome,
                draw_count=analysis.draw_count,
                effective_teams=analysis.effective_teams,
            )
        )
    logger.debug(
        "Built %d combinations of size %d from %d teams",
        len(combinations),
        combination_size,
        len(candidates),
    )
    return combinations


def per_combination_risk(total_risk: str | float | int | None, count: int) -> float:
    return parse_risk(total_risk) / (count or 1)


def summarize(
    combinations: Sequence[Combination], total_risk: str | float | int | None
) -> RoundRobinSummary:
    """Fold every combination's settlement into totals for the given risk."""

    stake = per_combination_risk(total_risk, len(combinations))
    total_win = 0.0
    total_loss = 0.0
    for combination in combinations:
        result = combination_result(combination, stake)
        if result > 0:
            total_win += result
        elif result < 0:
            total_loss += -result

    outcomes = [combination.outcome for combination in combinations]
    return RoundRobinSummary(
        total_combinations=len(combinations),
        winning_combinations=outcomes.count(CombinationOutcome.WIN),
        losing_combinations=outcomes.count(CombinationOutcome.LOSE),
        pending_combinations=outcomes.count(CombinationOutcome.PENDING),
        per_combination_risk=stake,
        total_win=total_win,
        total_loss=total_loss,
    )


def calculate_round_robin(
    teams: Iterable[TeamEntry],
    combination_size: int,
    total_risk: str | float | int | None,
) -> RoundRobinResult:
    """Run enumeration, classification and settlement for a team list."""

    combinations = build_combinations(teams, combination_size)
    summary = summarize(combinations, total_risk)
    results = [
        combination_result(combination, summary.per_combination_risk)
        for combination in combinations
    ]
    return RoundRobinResult(combinations=combinations, summary=summary, results=results)


def combination_count(n: int, r: int) -> int:
    if r < 0 or r > n:
        return 0
    return math.comb(n, r)


def available_combination_sizes(
    team_count: int, min_size: int = MIN_COMBINATION_SIZE
) -> List[CombinationSize]:
    """Selectable sizes ``min_size..team_count-1`` with their combination counts."""

    return [
        CombinationSize(value=size, count=combination_count(team_count, size))
        for size in range(min_size, team_count)
    ]
