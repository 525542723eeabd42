"""Config catalog – the club's webhook event types and router lanes."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SYSTEM_TEST = "system_test"

LIVE_MATCH_EVENTS: tuple[str, ...] = (
    "goal_team",
    "goal_opposition",
    "assist",
    "card_yellow",
    "card_red",
    "card_second_yellow",
    "card_sin_bin",
    "discipline_opposition",
    "motm",
    "substitution",
)

MATCH_STATUS_EVENTS: tuple[str, ...] = (
    "kick_off",
    "half_time",
    "second_half_kickoff",
    "full_time",
    "match_postponed",
)

FIXTURE_BATCH_EVENTS: tuple[str, ...] = tuple(f"fixtures_{n}_league" for n in range(1, 6))
RESULT_BATCH_EVENTS: tuple[str, ...] = tuple(f"results_{n}_league" for n in range(1, 6))

MONTHLY_EVENTS: tuple[str, ...] = (
    "fixtures_this_month",
    "results_this_month",
    "player_stats_summary",
)

WEEKLY_EVENTS: tuple[str, ...] = (
    "weekly_fixtures",
    "weekly_no_match",
    "weekly_quotes",
    "weekly_stats",
    "weekly_opposition_analysis",
    "weekly_throwback",
    "weekly_countdown_2",
    "weekly_countdown_1",
)

SPECIAL_EVENTS: tuple[str, ...] = (
    "player_birthday",
    "gotm_voting_start",
    "gotm_winner_announcement",
)

DEFAULT_EVENT_TYPES: tuple[str, ...] = (
    LIVE_MATCH_EVENTS
    + MATCH_STATUS_EVENTS
    + FIXTURE_BATCH_EVENTS
    + RESULT_BATCH_EVENTS
    + MONTHLY_EVENTS
    + WEEKLY_EVENTS
    + SPECIAL_EVENTS
    + (SYSTEM_TEST,)
)


def _lanes() -> dict[str, str]:
    lanes: dict[str, str] = {}
    for group, lane in (
        (LIVE_MATCH_EVENTS, "live_match"),
        (MATCH_STATUS_EVENTS, "match_status"),
        (FIXTURE_BATCH_EVENTS, "fixtures_batch"),
        (RESULT_BATCH_EVENTS, "results_batch"),
        (MONTHLY_EVENTS, "monthly_summary"),
        (WEEKLY_EVENTS, "weekly_content"),
        (SPECIAL_EVENTS, "special_content"),
        ((SYSTEM_TEST,), "system"),
    ):
        lanes.update(dict.fromkeys(group, lane))
    return lanes


DEFAULT_ROUTER_LANES: Mapping[str, str] = MappingProxyType(_lanes())

HIGH_PRIORITY_EVENTS: frozenset[str] = frozenset(
    {
        "goal_team",
        "goal_opposition",
        "card_red",
        "card_second_yellow",
        "kick_off",
        "full_time",
        "match_postponed",
    }
)

MEDIUM_PRIORITY_EVENTS: frozenset[str] = frozenset(
    {
        "card_yellow",
        "card_sin_bin",
        "discipline_opposition",
        "substitution",
        "motm",
        "assist",
        "half_time",
        "second_half_kickoff",
    }
)

__all__ = [
    "DEFAULT_EVENT_TYPES",
    "DEFAULT_ROUTER_LANES",
    "HIGH_PRIORITY_EVENTS",
    "MEDIUM_PRIORITY_EVENTS",
    "SYSTEM_TEST",
]
