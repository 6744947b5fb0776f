"""Tests for scorecard shaping — player lookup, hints and round/hole mapping."""

from app.core.espn_types import Competitor, RoundLinescore
from app.core.shape_scorecard import (
    available_players,
    find_competitor,
    player_identity,
    shape_rounds,
)


def _field(n: int) -> list[Competitor]:
    return [
        Competitor.model_validate({"id": str(i), "athlete": {"displayName": f"A{i}"}})
        for i in range(n)
    ]


def test_find_competitor_exact_match():
    assert find_competitor(_field(5), "3").athlete.display_name == "A3"


def test_find_competitor_miss_returns_none():
    assert find_competitor(_field(5), "99") is None


def test_find_competitor_is_not_prefix_match():
    assert find_competitor(_field(12), "1").id == "1"
    assert find_competitor(_field(5), "") is None


def test_available_players_capped_at_ten():
    hints = available_players(_field(30))
    assert len(hints) == 10
    assert hints[0] == {"id": "0", "name": "A0"}


def test_available_players_without_athlete_has_null_name():
    hints = available_players([Competitor.model_validate({"id": "7"})])
    assert hints == [{"id": "7", "name": None}]


def test_player_identity_defaults_country():
    identity = player_identity(
        Competitor.model_validate({"id": "7", "displayName": "Fallback", "score": "E"}),
    )
    assert identity == {
        "id": "7", "name": "Fallback", "country": "Unknown", "totalScore": "E",
    }


def test_rounds_numbered_in_order_with_holes():
    rounds = [
        RoundLinescore.model_validate({
            "displayValue": "-2",
            "linescores": [
                {"period": 1, "value": 3.0, "scoreType": {"displayValue": "-1"}},
                {"period": 2, "value": 5.0, "scoreType": {"displayValue": "+1"}},
            ],
        }),
        RoundLinescore.model_validate({"displayValue": "E"}),
    ]
    shaped = shape_rounds(rounds)
    assert [r["round"] for r in shaped] == [1, 2]
    assert shaped[0]["holes"] == [
        {"hole": 1, "strokes": 3.0, "toPar": "-1"},
        {"hole": 2, "strokes": 5.0, "toPar": "+1"},
    ]
    assert shaped[1]["holes"] == []


def test_rounds_missing_returns_empty_list():
    assert shape_rounds(None) == []


def test_hole_without_score_type_has_null_to_par():
    [rnd] = shape_rounds([
        RoundLinescore.model_validate({"linescores": [{"period": 1, "value": 4}]}),
    ])
    assert rnd["holes"] == [{"hole": 1, "strokes": 4, "toPar": None}]
