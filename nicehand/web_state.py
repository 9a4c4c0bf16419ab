"""Full table state for strategy requests, plus the fallback rule-based strategy.

A request carries the whole visible state of one decision point.  When no
trained strategy covers the spot, :func:`default_strategy` answers with a
simple rule of thumb, and :func:`estimate_ev` gives a rough value for any
strategy.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

Strategy = dict[str, float]

ACTION_NAMES = (
    "fold",
    "call",
    "raise_small",
    "raise_medium",
    "raise_large",
    "all_in",
)


class ActionKind(enum.Enum):
    """The kinds of betting action recorded in a hand history."""

    FOLD = "Fold"
    CALL = "Call"
    RAISE = "Raise"


@dataclass(frozen=True)
class Action:
    """One betting action; a raise carries the amount raised to."""

    kind: ActionKind
    amount: int = 0

    def __post_init__(self) -> None:
        if self.kind is not ActionKind.RAISE and self.amount != 0:
            raise ValueError(f"{self.kind.value} carries no amount")
        if self.amount < 0:
            raise ValueError(f"negative raise amount: {self.amount}")

    @classmethod
    def fold(cls) -> Action:
        return cls(ActionKind.FOLD)

    @classmethod
    def call(cls) -> Action:
        return cls(ActionKind.CALL)

    @classmethod
    def raise_to(cls, amount: int) -> Action:
        return cls(ActionKind.RAISE, amount)

    def to_json(self) -> str | dict[str, int]:
        """The JSON form: ``"Fold"``, ``"Call"`` or ``{"Raise": amount}``."""
        if self.kind is ActionKind.RAISE:
            return {ActionKind.RAISE.value: self.amount}
        return self.kind.value

    @classmethod
    def from_json(cls, value: Any) -> Action:
        """Parse the JSON form produced by :meth:`to_json`."""
        if isinstance(value, str):
            if value == ActionKind.FOLD.value:
                return cls.fold()
            if value == ActionKind.CALL.value:
                return cls.call()
            raise ValueError(f"unknown action: {value!r}")
        if isinstance(value, Mapping) and len(value) == 1:
            (tag, amount), = value.items()
            if tag == ActionKind.RAISE.value and isinstance(amount, int):
                return cls.raise_to(amount)
        raise ValueError(f"unknown action: {value!r}")


@dataclass
class WebGameState:
    """Everything the requesting player can see at one decision point."""

    hole_cards: tuple[int, int]
    board: tuple[int, ...] = ()
    street: int = 0
    pot: int = 0
    stacks: tuple[int, ...] = ()
    alive_players: tuple[int, ...] = ()
    street_investments: tuple[int, ...] = ()
    to_call: int = 0
    player_to_act: int = 0
    hero_position: int = 0
    betting_history: tuple[tuple[Action, ...], ...] = ()

    def __post_init__(self) -> None:
        self.hole_cards = tuple(self.hole_cards)
        if len(self.hole_cards) != 2:
            raise ValueError("exactly two hole cards are required")
        self.board = tuple(self.board)
        self.stacks = tuple(self.stacks)
        self.alive_players = tuple(self.alive_players)
        self.street_investments = tuple(self.street_investments)
        self.betting_history = tuple(tuple(street) for street in self.betting_history)

    def to_dict(self) -> dict[str, Any]:
        """A JSON-ready dictionary of the state."""
        return {
            "hole_cards": list(self.hole_cards),
            "board": list(self.board),
            "street": self.street,
            "pot": self.pot,
            "stacks": list(self.stacks),
            "alive_players": list(self.alive_players),
            "street_investments": list(self.street_investments),
            "to_call": self.to_call,
            "player_to_act": self.player_to_act,
            "hero_position": self.hero_position,
            "betting_history": [
                [action.to_json() for action in street] for street in self.betting_history
            ],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WebGameState:
        """Build a state from the dictionary form of :meth:`to_dict`."""
        history: Iterable[Iterable[Any]] = data.get("betting_history", ())
        return cls(
            hole_cards=tuple(data["hole_cards"]),
            board=tuple(data.get("board", ())),
            street=data.get("street", 0),
            pot=data.get("pot", 0),
            stacks=tuple(data.get("stacks", ())),
            alive_players=tuple(data.get("alive_players", ())),
            street_investments=tuple(data.get("street_investments", ())),
            to_call=data.get("to_call", 0),
            player_to_act=data.get("player_to_act", 0),
            hero_position=data.get("hero_position", 0),
            betting_history=tuple(
                tuple(Action.from_json(action) for action in street) for street in history
            ),
        )


@dataclass
class StrategyResponse:
    """Action probabilities with an estimated value and a recommendation."""

    strategy: Strategy = field(default_factory=dict)
    expected_value: float = 0.0
    recommended_action: str = ""
    confidence: float = 0.0


def default_strategy(state: WebGameState) -> StrategyResponse:
    """Rule-of-thumb strategy for spots no trained strategy covers."""
    if state.to_call == 0:
        strategy = {"call": 0.7, "raise_small": 0.2, "fold": 0.1}
    elif state.to_call > state.pot // 2:
        strategy = {"fold": 0.7, "call": 0.2, "raise_large": 0.1}
    else:
        strategy = {"fold": 0.3, "call": 0.5, "raise_medium": 0.2}
    return StrategyResponse(
        strategy=strategy,
        expected_value=0.0,
        recommended_action="call",
        confidence=0.3,
    )


def estimate_ev(state: WebGameState, strategy: Mapping[str, float]) -> float:
    """Rough expected value of playing ``strategy`` in ``state``."""
    fold_prob = strategy.get("fold", 0.0)
    call_prob = strategy.get("call", 0.0)
    raise_prob = sum(p for p in strategy.values() if p > 0.0) - fold_prob - call_prob

    if state.to_call > 0:
        odds = state.pot / (state.pot + state.to_call)
    else:
        odds = 1.0

    return call_prob * odds * 0.5 + raise_prob * odds * 0.7 - fold_prob * state.to_call