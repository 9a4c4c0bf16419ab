"""Stateless, heuristic strategy advice for heads-up hold'em spots.

No training is needed: every request is answered from hand strength,
pot odds and stack depth alone.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from nicehand.hand_strength import hand_strength

Strategy = dict[str, float]


@dataclass
class WebGameState:
    """One decision point as seen by the hero."""

    hole_cards: tuple[int, int]
    board: tuple[int, ...] = ()
    street: int = 0
    pot: int = 0
    to_call: int = 0
    my_stack: int = 0
    opponent_stack: int = 0

    def __post_init__(self) -> None:
        self.hole_cards = tuple(self.hole_cards)
        if len(self.hole_cards) != 2:
            raise ValueError("exactly two hole cards are required")
        self.board = tuple(self.board)

    @property
    def effective_stack(self) -> int:
        """The smaller of the two stacks."""
        return min(self.my_stack, self.opponent_stack)


@dataclass
class StrategyResponse:
    """Action probabilities plus the analysis behind them."""

    strategy: Strategy = field(default_factory=dict)
    recommended_action: str = ""
    expected_value: float = 0.0
    confidence: float = 0.0
    hand_strength: float = 0.0
    pot_odds: float = 0.0
    reasoning: str = ""


def pot_odds(state: WebGameState) -> float:
    """Share of the final pot already in it; 1.0 when nothing is to call."""
    if state.to_call == 0:
        return 1.0
    return state.pot / (state.pot + state.to_call)


def _ratio(numerator: float, denominator: float) -> float:
    """Divide the way IEEE floats do, without raising on a zero divisor."""
    if denominator:
        return numerator / denominator
    if numerator > 0:
        return math.inf
    if numerator < 0:
        return -math.inf
    return math.nan


def _check_bet_strategy(strength: float, spr: float) -> Strategy:
    if strength > 0.85:
        return {"check": 0.15, "bet_small": 0.3, "bet_large": 0.55}
    if strength > 0.7:
        return {"check": 0.4, "bet_small": 0.45, "bet_large": 0.15}
    if strength > 0.55:
        return {"check": 0.7, "bet_small": 0.25, "bet_large": 0.05}
    if strength > 0.3:
        bluff = 0.15 if spr > 8.0 else 0.25
        return {"check": 1.0 - bluff, "bet_small": bluff * 0.8, "bet_large": bluff * 0.2}
    return {"check": 0.9, "bet_small": 0.08, "bet_large": 0.02}


def _call_fold_strategy(strength: float, odds: float, state: WebGameState) -> Strategy:
    call_requirement = odds + 0.05
    raise_threshold = 0.7
    facing_large_bet = state.to_call > state.pot // 2
    stack_commitment = _ratio(state.to_call, state.my_stack)

    if strength > 0.9:
        return {"fold": 0.02, "call": 0.23, "raise": 0.75}
    if strength > raise_threshold:
        raise_freq = 0.4 if facing_large_bet else 0.6
        return {"fold": 0.05, "call": 0.95 - raise_freq, "raise": raise_freq}
    if strength > call_requirement:
        if facing_large_bet and stack_commitment > 0.3:
            return {"fold": 0.4, "call": 0.55, "raise": 0.05}
        return {"fold": 0.2, "call": 0.75, "raise": 0.05}
    if strength > 0.2 and not facing_large_bet:
        bluff = 0.1
        return {"fold": 0.9 - bluff, "call": 0.05, "raise": bluff}
    return {"fold": 0.95, "call": 0.05}


def _normalized(strategy: Strategy) -> Strategy:
    total = sum(strategy.values())
    if total > 0.0:
        return {action: prob / total for action, prob in strategy.items()}
    return strategy


def _action_ev(action: str, state: WebGameState, win_rate: float) -> float:
    if action == "fold":
        return -(state.to_call * 0.1) if state.to_call > 0 else 0.0
    if action == "check":
        return (win_rate - 0.5) * state.pot * 0.3
    if action == "call":
        return win_rate * state.pot - (1.0 - win_rate) * state.to_call
    if action == "bet_small":
        bet_size = max(state.pot * 0.5, 50.0)
        return bet_size * 0.4 if win_rate > 0.6 else bet_size * -0.2
    if action in ("bet_large", "raise"):
        bet_size = max(float(state.pot), 100.0)
        return bet_size * 0.6 if win_rate > 0.7 else bet_size * -0.4
    return 0.0


_ACTION_REASONS = {
    "fold": "Folding to minimize losses.",
    "check": "Checking to control pot size.",
    "call": "Calling to see next card.",
    "bet_small": "Betting for value/protection.",
    "raise": "Betting for value/protection.",
    "bet_large": "Large bet for maximum value.",
}


class QuickPokerAPI:
    """Heuristic strategy engine answering each request independently."""

    def get_optimal_strategy(self, state: WebGameState) -> StrategyResponse:
        """Full analysis of one decision point."""
        strength = self.evaluate_hand_strength(state)
        odds = pot_odds(state)
        strategy = self._advanced_strategy(state, strength, odds)
        recommended = self._best_action(strategy)
        return StrategyResponse(
            strategy=strategy,
            recommended_action=recommended,
            expected_value=self._expected_value(state, strategy, strength),
            confidence=self._confidence(state, strength, odds),
            hand_strength=strength,
            pot_odds=odds,
            reasoning=self._reasoning(state, strength, odds, recommended),
        )

    def get_strategies_batch(self, states: Iterable[WebGameState]) -> list[StrategyResponse]:
        """Analyse several independent decision points."""
        return [self.get_optimal_strategy(state) for state in states]

    def get_quick_recommendation(self, state: WebGameState) -> str:
        """A single action name without the full analysis."""
        strength = self.evaluate_hand_strength(state)
        if state.to_call == 0:
            return "bet" if strength > 0.7 else "check"
        return "call" if strength > pot_odds(state) + 0.1 else "fold"

    def evaluate_hand_strength(self, state: WebGameState) -> float:
        """Strength of the hero's hand in ``0.0..1.0``."""
        return hand_strength(state.hole_cards, state.board)

    def _advanced_strategy(
        self, state: WebGameState, strength: float, odds: float
    ) -> Strategy:
        effective = float(state.effective_stack)
        spr = effective / state.pot if state.pot > 0 else effective / 100.0
        if state.to_call == 0:
            strategy = _check_bet_strategy(strength, spr)
        else:
            strategy = _call_fold_strategy(strength, odds, state)
        return _normalized(strategy)

    @staticmethod
    def _best_action(strategy: Strategy) -> str:
        if not strategy:
            return "check"
        return max(strategy.items(), key=lambda item: item[1])[0]

    @staticmethod
    def _reasoning(
        state: WebGameState, strength: float, odds: float, action: str
    ) -> str:
        parts: list[str] = []
        if strength > 0.8:
            parts.append("프리미엄 핸드 스트렝스. ")
        elif strength > 0.6:
            parts.append("좋은 핸드 스트렝스. ")
        elif strength > 0.4:
            parts.append("한계적 핸드 스트렝스. ")
        else:
            parts.append("약한 핸드 스트렝스. ")

        if state.to_call > 0:
            if strength > odds + 0.1:
                parts.append("Favorable pot odds support calling/raising. ")
            elif strength > odds - 0.05:
                parts.append("Marginal pot odds situation. ")
            else:
                parts.append("Poor pot odds suggest folding. ")

        spr = _ratio(state.effective_stack, state.pot)
        if spr > 10.0:
            parts.append("Deep stacks allow for post-flop play. ")
        elif spr < 3.0:
            parts.append("Short stacks favor aggressive play. ")

        parts.append(_ACTION_REASONS.get(action, "Standard play."))
        return "".join(parts)

    @staticmethod
    def _expected_value(
        state: WebGameState, strategy: Strategy, strength: float
    ) -> float:
        return sum(
            prob * _action_ev(action, state, strength)
            for action, prob in strategy.items()
        )

    @staticmethod
    def _confidence(state: WebGameState, strength: float, odds: float) -> float:
        confidence = 0.7
        if strength > 0.85 or strength < 0.25:
            confidence += 0.15
        if abs(strength - odds) > 0.2:
            confidence += 0.1
        if state.street == 0:
            confidence += 0.05
        if state.effective_stack < state.pot * 3:
            confidence += 0.08
        return min(confidence, 0.95)


def batch(states: Sequence[WebGameState]) -> list[StrategyResponse]:
    """Convenience wrapper analysing states with a fresh engine."""
    return QuickPokerAPI().get_strategies_batch(states)