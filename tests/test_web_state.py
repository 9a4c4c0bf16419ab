import json

import pytest

from nicehand.web_state import (
    ACTION_NAMES,
    Action,
    ActionKind,
    StrategyResponse,
    WebGameState,
    default_strategy,
    estimate_ev,
)


def _state(**overrides):
    values = dict(
        hole_cards=(0, 1),
        board=(),
        street=0,
        pot=150,
        stacks=(1000, 1000),
        alive_players=(0, 1),
        street_investments=(50, 100),
        to_call=100,
        player_to_act=0,
        hero_position=0,
        betting_history=(),
    )
    values.update(overrides)
    return WebGameState(**values)


def test_action_json_forms():
    assert Action.fold().to_json() == "Fold"
    assert Action.call().to_json() == "Call"
    assert Action.raise_to(300).to_json() == {"Raise": 300}


@pytest.mark.parametrize("action", [Action.fold(), Action.call(), Action.raise_to(75)])
def test_action_round_trip(action):
    assert Action.from_json(action.to_json()) == action


@pytest.mark.parametrize("value", ["Check", {"Raise": "x"}, {"Bet": 5}, 3])
def test_action_from_json_rejects_unknown(value):
    with pytest.raises(ValueError):
        Action.from_json(value)


def test_action_amount_only_for_raise():
    with pytest.raises(ValueError):
        Action(ActionKind.FOLD, 10)
    with pytest.raises(ValueError):
        Action.raise_to(-5)


def test_state_requires_two_hole_cards():
    with pytest.raises(ValueError):
        _state(hole_cards=(1, 2, 3))


def test_state_dict_round_trip_through_json():
    state = _state(
        board=[47, 21, 34],
        street=1,
        betting_history=[[Action.raise_to(100), Action.call()], [Action.fold()]],
    )
    text = json.dumps(state.to_dict())
    restored = WebGameState.from_dict(json.loads(text))
    assert restored == state
    assert restored.betting_history[0][0].amount == 100


def test_state_lists_become_tuples():
    state = _state(stacks=[1, 2], board=[5])
    assert state.stacks == (1, 2)
    assert state.board == (5,)


def test_default_strategy_check_spot():
    response = default_strategy(_state(to_call=0))
    assert set(response.strategy) == {"call", "raise_small", "fold"}
    assert max(response.strategy, key=response.strategy.get) == "call"
    assert response.recommended_action == "call"
    assert response.expected_value == 0.0


def test_default_strategy_large_bet():
    response = default_strategy(_state(pot=100, to_call=60))
    assert set(response.strategy) == {"fold", "call", "raise_large"}
    assert max(response.strategy, key=response.strategy.get) == "fold"


def test_default_strategy_normal_bet():
    response = default_strategy(_state(pot=100, to_call=50))
    assert set(response.strategy) == {"fold", "call", "raise_medium"}
    assert max(response.strategy, key=response.strategy.get) == "call"


@pytest.mark.parametrize("to_call", [0, 10, 50, 51, 1000])
def test_default_strategy_sums_to_one(to_call):
    response = default_strategy(_state(pot=100, to_call=to_call))
    assert sum(response.strategy.values()) == pytest.approx(1.0)
    assert set(response.strategy) <= set(ACTION_NAMES)
    assert response.confidence < 0.5


def test_estimate_ev_pure_fold_loses_call_amount():
    state = _state(pot=200, to_call=80)
    assert estimate_ev(state, {"fold": 1.0}) == pytest.approx(-80.0)


def test_estimate_ev_empty_strategy_is_zero():
    assert estimate_ev(_state(), {}) == 0.0


def test_estimate_ev_negative_entries_ignored():
    state = _state(pot=200, to_call=0)
    assert estimate_ev(state, {"raise_small": -0.5}) == pytest.approx(0.0)


def test_estimate_ev_raise_worth_more_than_call():
    state = _state(pot=300, to_call=100)
    call_ev = estimate_ev(state, {"call": 1.0})
    raise_ev = estimate_ev(state, {"raise_large": 1.0})
    assert call_ev > 0
    assert raise_ev / call_ev == pytest.approx(1.4)


def test_estimate_ev_check_spot_uses_full_odds():
    state = _state(pot=300, to_call=0)
    assert estimate_ev(state, {"call": 1.0}) == pytest.approx(0.5)


def test_strategy_response_defaults_are_independent():
    first = StrategyResponse()
    second = StrategyResponse()
    first.strategy["fold"] = 1.0
    assert second.strategy == {}