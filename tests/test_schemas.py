"""Payload schema tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from roundrobin.wagers.engine import calculate_round_robin
from roundrobin.wagers.schemas import RoundRobinRequest, RoundRobinResponse
from roundrobin.wagers.types import TeamStatus


def test_request_coerces_teams() -> None:
    request = RoundRobinRequest.model_validate(
        {
            "teams": [
                {"id": 1, "name": "A", "odds": 2, "status": "win"},
                {"id": 2, "name": "B", "odds": "3", "status": None},
                {"id": 3, "name": "C", "odds": None},
            ],
            "combination_size": 2,
            "risk": "20",
        }
    )
    entries = request.to_entries()
    assert [entry.odds for entry in entries] == ["2", "3", ""]
    assert [entry.status for entry in entries] == [
        TeamStatus.WIN,
        TeamStatus.UNSET,
        TeamStatus.UNSET,
    ]


def test_request_rejects_bad_status_and_size() -> None:
    with pytest.raises(ValidationError):
        RoundRobinRequest.model_validate({"teams": [{"id": 1, "status": "maybe"}]})
    with pytest.raises(ValidationError):
        RoundRobinRequest.model_validate({"teams": [], "combination_size": 0})


def test_response_from_result() -> None:
    request = RoundRobinRequest.model_validate(
        {
            "teams": [
                {"id": 1, "name": "A", "odds": "2", "status": "win"},
                {"id": 2, "name": "B", "odds": "2", "status": "draw"},
                {"id": 3, "name": "C", "odds": "2", "status": "win"},
            ],
            "combination_size": 2,
            "risk": 30,
        }
    )
    result = calculate_round_robin(request.to_entries(), request.combination_size, request.risk)
    response = RoundRobinResponse.from_result(result)
    assert [c.team_ids for c in response.combinations] == [[1, 2], [1, 3], [2, 3]]
    assert [c.result for c in response.combinations] == pytest.approx([10.0, 30.0, 10.0])
    assert response.summary.net_result == pytest.approx(50.0)
    assert response.combinations[0].draw_count == 1
