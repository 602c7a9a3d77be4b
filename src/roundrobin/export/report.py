"""Plain-text round robin report and clipboard export."""

from __future__ import annotations

import logging
from collections.abc import Callable

from roundrobin.config import get_settings
from roundrobin.wagers.engine import combination_result
from roundrobin.wagers.types import Combination, RoundRobinResult

logger = logging.getLogger(__name__)


def _money(amount: float) -> str:
    return f"{get_settings().currency_symbol}{abs(amount):.2f}"


def format_combination_line(index: int, combination: Combination, stake: float) -> str:
    result = combination_result(combination, stake)
    names = ", ".join(combination.team_names)
    if result > 0:
        outcome = f"profit of {_money(result)}"
    elif result < 0:
        outcome = f"loss of {_money(result)}"
    else:
        outcome = "no profit or loss"
    return f"Combination {index}: {names} - {outcome}"


def format_report(result: RoundRobinResult) -> str:
    summary = result.summary
    lines = [
        format_combination_line(idx, combination, summary.per_combination_risk)
        for idx, combination in enumerate(result.combinations, start=1)
    ]
    net = summary.net_result
    if net > 0:
        lines.append(f"Your round robin nets a profit of {_money(net)}.")
    elif net < 0:
        lines.append(f"Your round robin nets a loss of {_money(net)}.")
    else:
        lines.append("Your round robin shows no profit or loss.")
    return "\n".join(lines)


class ClipboardExporter:
    """Hand the formatted report to a clipboard writer."""

    def __init__(self, writer: Callable[[str], None] | None = None) -> None:
        self.writer = writer

    def copy(self, result: RoundRobinResult) -> bool:
        text = format_report(result)
        if self.writer is None:
            logger.info("[Clipboard disabled] %s", text)
            return False
        try:
            self.writer(text)
        except Exception as exc:
            logger.error("Failed to copy round robin report: %s", exc)
            return False
        return True
