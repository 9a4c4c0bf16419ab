"""Heuristic hand-strength evaluation for Texas hold'em.

Cards are integers in ``0..51``: the rank is ``card % 13`` (0 is a deuce,
12 is an ace) and the suit is ``card // 13``.  Strengths are floats in
``0.0..1.0``.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

RankingKey = tuple[int, int, bool]

_PAIR_STRENGTHS = {
    12: 0.95, 11: 0.92, 10: 0.88, 9: 0.84, 8: 0.78, 7: 0.72, 6: 0.65,
    5: 0.58, 4: 0.50, 3: 0.42, 2: 0.35, 1: 0.30, 0: 0.25,
}

_PREMIUM_SUITED = {
    (12, 11): 0.90, (12, 10): 0.85, (11, 10): 0.80, (12, 9): 0.75,
    (12, 8): 0.70, (11, 9): 0.72, (10, 9): 0.68,
}

_PREMIUM_OFFSUIT = {
    (12, 11): 0.82, (12, 10): 0.76, (11, 10): 0.71, (12, 9): 0.65,
}

_PAIR_RANK_BASE = {12: 0.68, 11: 0.65, 10: 0.62, 9: 0.58, 8: 0.55}


def build_preflop_rankings() -> dict[RankingKey, float]:
    """Build the preflop lookup table keyed by ``(high_rank, low_rank, suited)``.

    The generated broadway entries are applied last and replace any
    premium entry with the same key.
    """
    rankings: dict[RankingKey, float] = {
        (rank, rank, False): value for rank, value in _PAIR_STRENGTHS.items()
    }
    rankings.update(
        {(high, low, True): value for (high, low), value in _PREMIUM_SUITED.items()}
    )
    rankings.update(
        {(high, low, False): value for (high, low), value in _PREMIUM_OFFSUIT.items()}
    )

    for high in range(5, 12):
        for low in range(high):
            if high == 12:
                strength = 0.55 + low * 0.02
                rankings[(high, low, True)] = strength
                rankings[(high, low, False)] = strength - 0.08
            elif high >= 10:
                strength = 0.50 + (high + low) * 0.01
                rankings[(high, low, True)] = strength
                rankings[(high, low, False)] = strength - 0.06
    return rankings


_PREFLOP_RANKINGS = build_preflop_rankings()


def _check_cards(cards: Iterable[int]) -> None:
    for card in cards:
        if not 0 <= card < 52:
            raise ValueError(f"invalid card: {card}")


def preflop_hand_strength(hole: Sequence[int]) -> float:
    """Strength of two hole cards before the flop."""
    first, second = hole
    rank1, rank2 = first % 13, second % 13
    suited = first // 13 == second // 13
    high, low = max(rank1, rank2), min(rank1, rank2)

    ranked = _PREFLOP_RANKINGS.get((high, low, suited))
    if ranked is not None:
        return ranked

    if rank1 == rank2:
        return 0.45 + high * 0.04
    if high >= 11:
        gap_penalty = 0.08 if low < high - 4 else 0.0
        base = 0.55 if suited else 0.45
        return base + low * 0.02 - gap_penalty
    if suited and high - low <= 4:
        connector_bonus = 0.05 if high - low <= 1 else 0.0
        return 0.35 + high * 0.015 + connector_bonus
    return 0.20 + (high + low) * 0.008


def has_straight(ranks: Iterable[int]) -> bool:
    """Whether the ranks hold five consecutive values, the wheel included."""
    unique = sorted(set(ranks))
    if {12, 0, 1, 2, 3} <= set(unique):
        return True
    return any(
        upper - lower == 4 for lower, upper in zip(unique, unique[4:])
    )


def evaluate_flush_strength(ranks: Sequence[int], suits: Sequence[int]) -> float:
    """Strength of a flush, graded by the top card of the flush suit."""
    by_suit: defaultdict[int, list[int]] = defaultdict(list)
    for rank, suit in zip(ranks, suits):
        by_suit[suit].append(rank)

    for suit in sorted(by_suit):
        suit_ranks = by_suit[suit]
        if len(suit_ranks) >= 5:
            top = max(suit_ranks)
            if top >= 12:
                return 0.88
            if top >= 10:
                return 0.85
            return 0.82
    return 0.82


def evaluate_straight_strength(ranks: Sequence[int]) -> float:
    """Strength of a straight, graded by the highest rank present."""
    top = max(ranks, default=0)
    if top >= 12:
        return 0.80
    if top >= 10:
        return 0.78
    return 0.76


def evaluate_pair_strength(
    hole_ranks: Sequence[int],
    board_ranks: Sequence[int],
    all_ranks: Sequence[int],
) -> float:
    """Strength of a single pair, by its rank and how it was made."""
    counts = Counter(all_ranks)
    paired = next((rank for rank in range(13) if counts[rank] >= 2), 0)

    pocket_pair = hole_ranks[0] == hole_ranks[1]
    made_with_hole = paired in hole_ranks and paired in board_ranks
    base = _PAIR_RANK_BASE.get(paired, 0.50)

    if pocket_pair:
        return base + 0.05
    if made_with_hole:
        return base
    return base - 0.08


def evaluate_high_card_strength(
    hole_ranks: Sequence[int], all_ranks: Sequence[int]
) -> float:
    """Strength of an unpaired hand."""
    max_hole = max(hole_ranks, default=0)
    max_all = max(all_ranks, default=0)

    if max_all in hole_ranks:
        return {12: 0.45, 11: 0.40, 10: 0.35}.get(max_all, 0.30)
    return {12: 0.35, 11: 0.30}.get(max_hole, 0.25)


def postflop_hand_strength(hole: Sequence[int], board: Sequence[int]) -> float:
    """Strength of the hole cards combined with a non-empty board."""
    _check_cards(hole)
    _check_cards(board)

    hole_ranks = [card % 13 for card in hole]
    board_ranks = [card % 13 for card in board]
    all_ranks = hole_ranks + board_ranks
    all_suits = [card // 13 for card in (*hole, *board)]

    rank_counts = Counter(all_ranks).values()
    pairs = sum(1 for count in rank_counts if count >= 2)
    trips = sum(1 for count in rank_counts if count >= 3)
    quads = sum(1 for count in rank_counts if count >= 4)
    flush_possible = any(count >= 5 for count in Counter(all_suits).values())

    if quads:
        return 0.95
    if trips and pairs > 1:
        return 0.90
    if flush_possible:
        return evaluate_flush_strength(all_ranks, all_suits)
    if has_straight(all_ranks):
        return evaluate_straight_strength(all_ranks)
    if trips:
        return 0.75
    if pairs >= 2:
        return 0.65
    if pairs == 1:
        return evaluate_pair_strength(hole_ranks, board_ranks, all_ranks)
    return evaluate_high_card_strength(hole_ranks, all_ranks)


def hand_strength(hole: Sequence[int], board: Sequence[int]) -> float:
    """Strength of a hand: preflop table with no board, else postflop heuristics."""
    if not board:
        return preflop_hand_strength(hole)
    return postflop_hand_strength(hole, board)