"""Validation of requested game states and the insights drawn from an analysis.

A :class:`~nicehand.web_state.WebGameState` coming from a client is checked
and turned into a :class:`ValidatedState`.  The helpers here grade hand
strength into a risk level, give positional advice and rank the expected
values of the available actions.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from nicehand.web_state import WebGameState

MIN_PLAYERS = 2
MAX_PLAYERS = 6
MAX_BOARD_CARDS = 5
DECK_SIZE = 52
DEFAULT_BLINDS = (10, 20)

_STREET_BY_BOARD_SIZE = {0: 0, 3: 1, 4: 2, 5: 3}

_VALIDATION_MESSAGES = {
    "invalid_player_count": "유효하지 않은 플레이어 수: {}",
    "invalid_stack": "유효하지 않은 스택 크기: {}",
    "invalid_card": "유효하지 않은 카드: {}",
    "invalid_betting_sequence": "유효하지 않은 베팅 시퀀스",
    "inconsistent_state": "일관성 없는 게임 상태: {}",
    "invalid_position": "유효하지 않은 포지션: {}",
    "invalid_pot": "유효하지 않은 팟 크기: {}",
}

_ANALYSIS_MESSAGES = {
    "invalid_game_state": "게임 상태가 유효하지 않습니다: {}",
    "calculation_timeout": "계산 시간이 초과되었습니다",
    "insufficient_data": "분석에 필요한 데이터가 부족합니다",
    "internal_error": "내부 오류: {}",
}


class ValidationError(ValueError):
    """A requested game state that cannot be analysed.

    ``kind`` names the problem (``"invalid_player_count"``, ``"invalid_stack"``,
    ``"invalid_card"``, ``"invalid_betting_sequence"``, ``"inconsistent_state"``,
    ``"invalid_position"`` or ``"invalid_pot"``) and ``value`` holds the
    offending value or a description.
    """

    def __init__(self, kind: str, value: Any = None) -> None:
        try:
            template = _VALIDATION_MESSAGES[kind]
        except KeyError:
            raise ValueError(f"unknown validation error kind: {kind!r}") from None
        super().__init__(template.format(value))
        self.kind = kind
        self.value = value


class AnalysisError(Exception):
    """An analysis that could not be completed.

    ``kind`` is one of ``"invalid_game_state"``, ``"calculation_timeout"``,
    ``"insufficient_data"`` or ``"internal_error"``.
    """

    def __init__(self, kind: str, detail: str | None = None) -> None:
        try:
            template = _ANALYSIS_MESSAGES[kind]
        except KeyError:
            raise ValueError(f"unknown analysis error kind: {kind!r}") from None
        super().__init__(template.format(detail))
        self.kind = kind
        self.detail = detail

    @classmethod
    def invalid_game_state(cls, reason: str) -> AnalysisError:
        return cls("invalid_game_state", reason)

    @classmethod
    def calculation_timeout(cls) -> AnalysisError:
        return cls("calculation_timeout")

    @classmethod
    def insufficient_data(cls) -> AnalysisError:
        return cls("insufficient_data")

    @classmethod
    def internal_error(cls, message: str) -> AnalysisError:
        return cls("internal_error", message)


class RiskLevel(enum.Enum):
    """How risky continuing with a hand is."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    EXTREME = "Extreme"


class OpponentModel(enum.Enum):
    """The kind of opponent an analysis assumes."""

    RANDOM = "Random"
    TIGHT = "Tight"
    AGGRESSIVE = "Aggressive"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class AnalysisOptions:
    """What an analysis should compute and how deeply."""

    depth: str = "standard"
    max_calculation_time_ms: int | None = None
    include_insights: bool = True
    include_range_analysis: bool = False
    include_equity_calculation: bool = False
    opponent_modeling: OpponentModel = OpponentModel.TIGHT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AnalysisOptions:
        """Build options from their JSON dictionary form."""
        defaults = cls()
        model = data.get("opponent_modeling", defaults.opponent_modeling)
        if not isinstance(model, OpponentModel):
            model = OpponentModel(model)
        return cls(
            depth=data.get("depth", defaults.depth),
            max_calculation_time_ms=data.get(
                "max_calculation_time_ms", defaults.max_calculation_time_ms
            ),
            include_insights=data.get("include_insights", defaults.include_insights),
            include_range_analysis=data.get(
                "include_range_analysis", defaults.include_range_analysis
            ),
            include_equity_calculation=data.get(
                "include_equity_calculation", defaults.include_equity_calculation
            ),
            opponent_modeling=model,
        )


@dataclass(frozen=True)
class ValidatedState:
    """A checked game state ready for analysis."""

    num_players: int
    stacks: tuple[int, ...]
    board: tuple[int, ...]
    pot: int
    to_act: int
    street: int
    hole_cards: tuple[tuple[int, int], ...]
    blinds: tuple[int, int] = DEFAULT_BLINDS

    @property
    def acting_hole_cards(self) -> tuple[int, int]:
        """Hole cards of the player to act."""
        return self.hole_cards[self.to_act]


def street_for_board(board: Iterable[int]) -> int:
    """The street (0 preflop to 3 river) implied by the number of board cards."""
    size = len(tuple(board))
    try:
        return _STREET_BY_BOARD_SIZE[size]
    except KeyError:
        raise ValidationError("inconsistent_state", "유효하지 않은 보드 카드 수") from None


def validate_web_state(web_state: WebGameState) -> ValidatedState:
    """Check a requested state and convert it for analysis.

    Raises :class:`ValidationError` on the first problem found.
    """
    stacks = tuple(web_state.stacks)
    player_count = len(stacks)
    if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
        raise ValidationError("invalid_player_count", player_count)

    for stack in stacks:
        if stack < 0:
            raise ValidationError("invalid_stack", stack)

    board = tuple(web_state.board)
    if len(board) > MAX_BOARD_CARDS:
        raise ValidationError("inconsistent_state", "보드 카드는 최대 5장입니다")
    for card in board:
        if not 0 <= card < DECK_SIZE:
            raise ValidationError("invalid_card", card)

    if web_state.player_to_act >= player_count:
        raise ValidationError("invalid_position", web_state.player_to_act)

    # Only the hero's cards are known; the others get placeholder cards.
    hole_cards = tuple(
        tuple(web_state.hole_cards) if seat == web_state.hero_position
        else (seat * 2, seat * 2 + 1)
        for seat in range(player_count)
    )

    return ValidatedState(
        num_players=player_count,
        stacks=stacks,
        board=board,
        pot=web_state.pot,
        to_act=web_state.player_to_act,
        street=street_for_board(board),
        hole_cards=hole_cards,
    )


def risk_level(hand_strength: float) -> RiskLevel:
    """Grade a hand strength in ``0.0..1.0`` into a risk level."""
    if hand_strength > 0.8:
        return RiskLevel.LOW
    if hand_strength > 0.6:
        return RiskLevel.MEDIUM
    if hand_strength > 0.3:
        return RiskLevel.HIGH
    return RiskLevel.EXTREME


def positional_advice(player: int) -> str | None:
    """Advice for a seat index, or ``None`` beyond the six seats."""
    if 0 <= player <= 1:
        return "얼리 포지션: 보수적인 플레이를 권장합니다"
    if 2 <= player <= 3:
        return "미들 포지션: 표준적인 전략을 사용하세요"
    if 4 <= player <= 5:
        return "레이트 포지션: 더 공격적으로 플레이할 수 있습니다"
    return None


ActionEVs = Union[Mapping[str, float], Iterable[tuple[str, float]]]


def _pairs(action_evs: ActionEVs) -> list[tuple[str, float]]:
    if isinstance(action_evs, Mapping):
        return list(action_evs.items())
    return [(name, ev) for name, ev in action_evs]


def action_strengths(action_evs: ActionEVs) -> dict[str, float]:
    """Each action's EV scaled to ``0..100`` between the worst and best action.

    When every action has the same EV, each gets 50.
    """
    pairs = _pairs(action_evs)
    if not pairs:
        return {}
    max_ev = max(ev for _, ev in pairs)
    min_ev = min(ev for _, ev in pairs)
    if max_ev == min_ev:
        return {name: 50.0 for name, _ in pairs}
    spread = max_ev - min_ev
    return {
        name: min(max((ev - min_ev) / spread * 100.0, 0.0), 100.0)
        for name, ev in pairs
    }


def recommended_action(action_evs: ActionEVs) -> str:
    """The action with the highest EV; the later one wins a tie.

    With no actions at all the recommendation is ``"Fold"``.
    """
    best_name: str | None = None
    best_ev = 0.0
    for name, ev in _pairs(action_evs):
        if best_name is None or not ev < best_ev:
            best_name, best_ev = name, ev
    return best_name if best_name is not None else "Fold"