import pytest

from nicehand.analysis import (
    AnalysisError,
    AnalysisOptions,
    OpponentModel,
    RiskLevel,
    ValidatedState,
    ValidationError,
    action_strengths,
    positional_advice,
    recommended_action,
    risk_level,
    street_for_board,
    validate_web_state,
)
from nicehand.web_state import WebGameState


def make_state(**overrides):
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
    )
    values.update(overrides)
    return WebGameState(**values)


def test_valid_state_converts():
    result = validate_web_state(make_state())
    assert isinstance(result, ValidatedState)
    assert result.num_players == 2
    assert result.stacks == (1000, 1000)
    assert result.pot == 150
    assert result.to_act == 0
    assert result.street == 0
    assert result.blinds == (10, 20)


def test_hero_gets_own_cards_others_placeholders():
    state = make_state(
        stacks=(500, 600, 700), hero_position=1, hole_cards=(40, 41), player_to_act=2
    )
    result = validate_web_state(state)
    assert result.hole_cards[1] == (40, 41)
    assert result.hole_cards[0] == (0, 1)
    assert result.hole_cards[2] == (4, 5)
    assert result.acting_hole_cards == (4, 5)


@pytest.mark.parametrize("stacks", [(1000,), (100,) * 7, ()])
def test_invalid_player_count(stacks):
    with pytest.raises(ValidationError) as info:
        validate_web_state(make_state(stacks=stacks))
    assert info.value.kind == "invalid_player_count"
    assert info.value.value == len(stacks)


def test_negative_stack_rejected():
    with pytest.raises(ValidationError) as info:
        validate_web_state(make_state(stacks=(1000, -5)))
    assert info.value.kind == "invalid_stack"
    assert str(info.value) == "유효하지 않은 스택 크기: -5"


def test_too_many_board_cards():
    with pytest.raises(ValidationError) as info:
        validate_web_state(make_state(board=(1, 2, 3, 4, 5, 6)))
    assert info.value.kind == "inconsistent_state"
    assert "보드 카드는 최대 5장입니다" in str(info.value)


def test_invalid_card_rejected():
    with pytest.raises(ValidationError) as info:
        validate_web_state(make_state(board=(1, 2, 52)))
    assert info.value.kind == "invalid_card"
    assert info.value.value == 52


def test_invalid_position_rejected():
    with pytest.raises(ValidationError) as info:
        validate_web_state(make_state(player_to_act=2))
    assert info.value.kind == "invalid_position"
    assert str(info.value) == "유효하지 않은 포지션: 2"


def test_board_of_two_cards_is_inconsistent():
    with pytest.raises(ValidationError) as info:
        validate_web_state(make_state(board=(1, 2)))
    assert "유효하지 않은 보드 카드 수" in str(info.value)


@pytest.mark.parametrize("size, street", [(0, 0), (3, 1), (4, 2), (5, 3)])
def test_street_for_board(size, street):
    assert street_for_board(range(size)) == street


@pytest.mark.parametrize("size", [1, 2, 6])
def test_street_for_bad_board(size):
    with pytest.raises(ValidationError):
        street_for_board(range(size))


def test_validated_street_matches_board():
    result = validate_web_state(make_state(board=(47, 21, 34, 10)))
    assert result.street == 2
    assert result.board == (47, 21, 34, 10)


@pytest.mark.parametrize(
    "strength, level",
    [
        (0.95, RiskLevel.LOW),
        (0.8, RiskLevel.MEDIUM),
        (0.7, RiskLevel.MEDIUM),
        (0.6, RiskLevel.HIGH),
        (0.31, RiskLevel.HIGH),
        (0.3, RiskLevel.EXTREME),
        (0.0, RiskLevel.EXTREME),
    ],
)
def test_risk_level(strength, level):
    assert risk_level(strength) is level


@pytest.mark.parametrize(
    "player, prefix",
    [(0, "얼리"), (1, "얼리"), (2, "미들"), (3, "미들"), (4, "레이트"), (5, "레이트")],
)
def test_positional_advice(player, prefix):
    assert positional_advice(player).startswith(prefix)


def test_positional_advice_beyond_table():
    assert positional_advice(6) is None


def test_action_strengths_scale_between_extremes():
    strengths = action_strengths({"Fold": -10.0, "Call": 5.0, "Raise": 20.0})
    assert strengths["Fold"] == 0.0
    assert strengths["Raise"] == 100.0
    assert 0.0 < strengths["Call"] < 100.0
    assert set(strengths) == {"Fold", "Call", "Raise"}


def test_action_strengths_equal_evs_are_fifty():
    assert action_strengths([("Fold", 3.0), ("Call", 3.0)]) == {"Fold": 50.0, "Call": 50.0}


def test_action_strengths_empty():
    assert action_strengths({}) == {}


def test_recommended_action_highest_ev():
    assert recommended_action({"Fold": 0.0, "Call": 12.0, "Raise": 4.0}) == "Call"


def test_recommended_action_tie_prefers_later():
    assert recommended_action([("Call", 5.0), ("Raise", 5.0)]) == "Raise"


def test_recommended_action_empty_is_fold():
    assert recommended_action([]) == "Fold"


def test_analysis_error_messages():
    assert str(AnalysisError.calculation_timeout()) == "계산 시간이 초과되었습니다"
    assert str(AnalysisError.insufficient_data()) == "분석에 필요한 데이터가 부족합니다"
    assert str(AnalysisError.internal_error("boom")) == "내부 오류: boom"
    err = AnalysisError.invalid_game_state("bad")
    assert err.kind == "invalid_game_state"
    assert str(err) == "게임 상태가 유효하지 않습니다: bad"


def test_unknown_error_kind_rejected():
    with pytest.raises(ValueError):
        ValidationError("no_such_kind", 1)
    with pytest.raises(ValueError):
        AnalysisError("no_such_kind")


def test_analysis_options_defaults_and_from_dict():
    defaults = AnalysisOptions()
    assert defaults.depth == "standard"
    assert defaults.include_insights is True
    assert defaults.opponent_modeling is OpponentModel.TIGHT

    parsed = AnalysisOptions.from_dict({"depth": "deep", "opponent_modeling": "Aggressive"})
    assert parsed.depth == "deep"
    assert parsed.opponent_modeling is OpponentModel.AGGRESSIVE
    assert parsed.include_range_analysis is False


def test_analysis_options_rejects_unknown_model():
    with pytest.raises(ValueError):
        AnalysisOptions.from_dict({"opponent_modeling": "Maniac"})