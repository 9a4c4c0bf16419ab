"""Tournament strategy heuristics driven by ICM pressure and stack depth.

ICM equities are supplied by the caller; this module turns them into
action frequencies, preflop ranges per position, stage-dependent
adjustments and a simple model of blinds rising as a tournament goes on.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

POSITIONS = 6

_ICM_BASE_AGGRESSION = {0: 0.15, 1: 0.20, 2: 0.30}
_ICM_DEFAULT_AGGRESSION = 0.18
_CHIP_EV_BASE_AGGRESSION = {0: 0.18, 1: 0.23, 2: 0.32}
_CHIP_EV_DEFAULT_AGGRESSION = 0.20

_STREET_ADJUSTMENTS = {0: 1.0, 1: 0.85, 2: 0.75, 3: 0.65}
_DEFAULT_POSITION_RANGE = 0.15

_STAGES = {
    "Early stage": (1.0, 0.8, 0.1),
    "Middle stage": (1.1, 0.9, 0.3),
    "Late stage": (1.2, 1.1, 0.6),
    "Bubble": (0.7, 1.5, 1.0),
    "Final table": (1.0, 1.3, 0.9),
}
_DEFAULT_STAGE = (1.0, 1.0, 0.5)

_PLAYERS_LEFT_AT_LEVEL = {3: 5, 6: 4, 8: 4, 10: 3}
_MIN_STACK = 1000


@dataclass(frozen=True)
class BlindLevel:
    """Blinds and ante in force at one tournament level."""

    level: int
    small_blind: int
    big_blind: int
    ante: int = 0


@dataclass(frozen=True)
class TournamentStrategy:
    """Action frequencies for one spot."""

    fold_frequency: float
    call_frequency: float
    raise_frequency: float
    allin_frequency: float

    @property
    def action_frequency(self) -> float:
        """How often the hand is played at all."""
        return self.call_frequency + self.raise_frequency + self.allin_frequency


@dataclass(frozen=True)
class DetailedStrategy:
    """Preflop ranges per position and per-street tightening factors."""

    position_ranges: tuple[float, ...]
    street_adjustments: dict[int, float] = field(
        default_factory=lambda: dict(_STREET_ADJUSTMENTS)
    )

    def position_range(self, position: int) -> float:
        """Share of hands played from ``position``; 0.15 for unknown positions."""
        if 0 <= position < len(self.position_ranges):
            return self.position_ranges[position]
        return _DEFAULT_POSITION_RANGE


@dataclass(frozen=True)
class StageStrategy:
    """How a tournament stage shapes play."""

    aggression: float
    tightness: float
    icm_weight: float
    stage_name: str

    def player_adjustment(self, relative_stack: float) -> float:
        """Tightness multiplier for a player holding ``relative_stack`` of all chips."""
        if relative_stack > 0.3:
            base = 0.9
        elif relative_stack < 0.1:
            base = 1.2
        else:
            base = 1.0
        return base * self.tightness


def chip_ev(stack: int, total_chips: int, prize_pool: float) -> float:
    """The prize share a stack would be worth if chips converted linearly."""
    return stack / total_chips * prize_pool


def icm_pressure(icm_equity: float, chip_ev_value: float) -> float:
    """Relative gap between ICM equity and chip EV."""
    return (icm_equity - chip_ev_value) / chip_ev_value


def position_strategy(
    stack: int,
    big_blind: int,
    position: int,
    icm_equity: float,
    chip_ev_value: float,
) -> TournamentStrategy:
    """ICM-adjusted frequencies for a stack acting from ``position``."""
    bb_count = stack // big_blind
    pressure = icm_pressure(icm_equity, chip_ev_value)
    base = _ICM_BASE_AGGRESSION.get(position, _ICM_DEFAULT_AGGRESSION)

    if pressure > 0.0:
        adjustment = 1.0 - min(pressure * 0.5, 0.4)
    else:
        adjustment = 1.0 + min(-pressure * 0.3, 0.2)

    if bb_count < 10:
        stack_adjustment = 1.3
    elif bb_count > 30:
        stack_adjustment = 0.8
    else:
        stack_adjustment = 1.0

    aggression = min(base * adjustment * stack_adjustment, 0.5)
    return TournamentStrategy(
        fold_frequency=1.0 - aggression,
        call_frequency=aggression * 0.4,
        raise_frequency=aggression * 0.5,
        allin_frequency=aggression * 0.1 if bb_count < 15 else 0.0,
    )


def analyze_player_strategy(
    stack: int, big_blind: int, icm_equity: float, chip_ev_value: float
) -> DetailedStrategy:
    """Preflop ranges for every position at the table."""
    ranges = tuple(
        position_strategy(stack, big_blind, position, icm_equity, chip_ev_value).action_frequency
        for position in range(POSITIONS)
    )
    return DetailedStrategy(position_ranges=ranges)


def chip_ev_strategy(position: int) -> TournamentStrategy:
    """Frequencies that ignore ICM entirely."""
    base = _CHIP_EV_BASE_AGGRESSION.get(position, _CHIP_EV_DEFAULT_AGGRESSION)
    return TournamentStrategy(
        fold_frequency=1.0 - base,
        call_frequency=base * 0.45,
        raise_frequency=base * 0.50,
        allin_frequency=base * 0.05,
    )


def icm_adjustment(
    icm_strategy: TournamentStrategy, chip_strategy: TournamentStrategy
) -> float:
    """How much more often the ICM strategy folds than the chip-EV one."""
    return icm_strategy.fold_frequency - chip_strategy.fold_frequency


def risk_tolerance(pressure: float) -> str:
    """Describe the risk a player can afford under the given ICM pressure."""
    if pressure > 0.2:
        return "Very Low - significant downside protection"
    if pressure > 0.1:
        return "Low - moderate downside protection"
    if pressure > -0.1:
        return "Medium - balanced risk/reward"
    if pressure > -0.2:
        return "High - upside focused"
    return "Very High - must take risks to improve position"


def stage_strategy(stage_name: str) -> StageStrategy:
    """Aggression, tightness and ICM weight for a named stage."""
    aggression, tightness, icm_weight = _STAGES.get(stage_name, _DEFAULT_STAGE)
    return StageStrategy(
        aggression=aggression,
        tightness=tightness,
        icm_weight=icm_weight,
        stage_name=stage_name,
    )


def update_tournament_stage(
    stacks: Sequence[int], blind_level: BlindLevel, level: int
) -> tuple[list[int], BlindLevel]:
    """Advance to ``level``: raise the blinds, drop players and shift stacks.

    Returns the new stacks and blind level; the inputs are left unchanged.
    Stack changes are deterministic, depending only on seat order.
    """
    small_blind = 25 * (1 << (level // 2))
    new_level = replace(
        blind_level,
        level=level,
        small_blind=small_blind,
        big_blind=small_blind * 2,
        ante=small_blind // 4 if level > 3 else 0,
    )

    remaining = list(stacks)
    keep = _PLAYERS_LEFT_AT_LEVEL.get(level)
    if keep is not None:
        remaining = remaining[:keep]

    if remaining:
        average = sum(remaining) // len(remaining)
        variance = int(average * 0.3)
        remaining = [
            max(stack + (seat * 17) % (variance * 2) - variance, _MIN_STACK)
            for seat, stack in enumerate(remaining)
        ]
    return remaining, new_level