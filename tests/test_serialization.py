import json

import pytest
from dailyword.engine import Guess, Solution
from dailyword.history import (
    SubmissionHistory, dumps, from_compact, from_records, loads, to_compact, to_records,
)


def _played(*words, solution="rusty"):
    h = SubmissionHistory()
    for w in words:
        h.submit(Guess.parse(w), Solution.parse(solution))
    return h


def test_records_shape():
    h = _played("crane")
    assert to_records(h) == [[
        {"letter": "C", "matches": "-"},
        {"letter": "R", "matches": "?"},
        {"letter": "A", "matches": "-"},
        {"letter": "N", "matches": "-"},
        {"letter": "E", "matches": "-"},
    ]]


def test_json_round_trip_keeps_order_and_state():
    h = _played("crane", "stare", "rusty")
    back = loads(dumps(h))
    assert back == h
    assert [g.word for g in back] == ["CRANE", "STARE", "RUSTY"]
    assert back.is_solved and back.is_completed
    assert json.loads(dumps(h))[2][0] == {"letter": "R", "matches": "+"}


def test_compact_round_trip():
    h = _played("crane", "trace")
    assert to_compact(h) == ["C-,R?,A-,N-,E-", "T?,R?,A-,C-,E-"]
    assert from_compact(to_compact(h)) == h


def test_none_and_empty_load_as_empty_history():
    assert from_records(None).count == 0
    assert loads("[]").count == 0


@pytest.mark.parametrize("text,msg", [
    ("{", "not valid JSON"),
    ('{"a": 1}', "must be a list"),
    ('["R+,U-"]', "guess 1 must be a list"),
    ('[[{"letter": "R"}]]', "exactly 'letter' and 'matches'"),
    ('[[{"letter": "R", "matches": "*"}]]', "must be one of"),
    ('[[{"letter": 1, "matches": "+"}]]', "must be strings"),
    ('[[{"letter": "R", "matches": "+"}]]', "must be 5"),
])
def test_malformed_records_are_rejected(text, msg):
    with pytest.raises(ValueError, match=msg):
        loads(text)


def test_loading_respects_ceiling():
    h = _played("crane", "crane", "crane")
    with pytest.raises(ValueError, match="already exhausted"):
        loads(dumps(h), max_attempts=2)
