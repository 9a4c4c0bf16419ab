# nicehand

Heuristic Texas Hold'em strategy advice. It needs no training, and it answers each request on its own without keeping state between requests. The package also includes:

- validation of game states sent by a client,
- a cache for analysis results,
- heuristics for tournament (ICM) strategy.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cards

Cards are integers from 0 to 51:

- The rank is `card % 13`. A rank of 0 is a deuce and 12 is an ace.
- The suit is `card // 13`.

## Quick strategy advice (`nicehand.quick_api`)

```python
from nicehand.quick_api import QuickPokerAPI, WebGameState

api = QuickPokerAPI()
state = WebGameState(
    hole_cards=(12, 25),   # pocket aces
    board=(),
    street=0,
    pot=150,
    to_call=50,
    my_stack=1000,
    opponent_stack=1000,
)
response = api.get_optimal_strategy(state)
print(response.recommended_action, response.strategy, response.expected_value)
```

The result is a `StrategyResponse` with these fields:

- `strategy`: normalised action probabilities.
- `recommended_action`: the action with the highest probability.
- `expected_value`: a rough EV estimate.
- `confidence`: capped at 0.95.
- `hand_strength`
- `pot_odds`
- `reasoning`: a short text explanation.

If the hero can check, the actions are `check`, `bet_small` and `bet_large`. Otherwise they are `fold`, `call` and `raise`.

Other entry points:

- `QuickPokerAPI.get_strategies_batch(states)` analyses several states at once.
- `QuickPokerAPI.get_quick_recommendation(state)` returns one action name: `bet`, `check`, `call` or `fold`.
- `pot_odds(state)` returns the share of the final pot that is already in it. It returns 1.0 when nothing is to call.

## Hand strength (`nicehand.hand_strength`)

```python
from nicehand.hand_strength import hand_strength

hand_strength((12, 25), ())          # preflop lookup table
hand_strength((12, 7), (25, 1, 14))  # postflop heuristics
```

Strengths are floats from 0.0 to 1.0.

- `preflop_hand_strength` uses the table from `build_preflop_rankings()`. For hands not in the table it uses a formula.
- `postflop_hand_strength` grades the made hand: quads, full house, flush, straight, trips, two pair, one pair, then high card. It raises `ValueError` for a card outside 0–51.

Each grading step is also available on its own:

- `has_straight`
- `evaluate_flush_strength`
- `evaluate_straight_strength`
- `evaluate_pair_strength`
- `evaluate_high_card_strength`

## Full table state (`nicehand.web_state`)

`WebGameState` holds the following:

- the hero's hole cards and the board,
- street, pot and stacks,
- the seats still alive,
- the amount each seat has put in on this street,
- the amount to call,
- the seat to act and the hero's seat,
- the betting history as `Action` values.

`to_dict()` and `from_dict()` convert a state to and from JSON-ready dictionaries. An `Action` is written as `"Fold"`, `"Call"` or `{"Raise": amount}`.

- `default_strategy(state)` returns a rule-of-thumb `StrategyResponse` over `fold`, `call` and one raise size.
- `estimate_ev(state, strategy)` returns a rough EV for any strategy mapping.

## Validation and insights (`nicehand.analysis`)

`validate_web_state(web_state)` checks a `nicehand.web_state.WebGameState` and returns a `ValidatedState`. It requires:

- 2 to 6 players,
- no negative stacks,
- at most 5 board cards,
- board cards in 0–51,
- a valid seat to act,
- a board of 0, 3, 4 or 5 cards.

The first problem found raises `ValidationError`, a `ValueError` subclass with a `kind` attribute. Only the hero's hole cards are known, so the other seats get placeholder cards.

Helpers:

- `street_for_board(board)` maps a board size to a street number.
- `risk_level(hand_strength)` returns a `RiskLevel`.
- `positional_advice(seat)` returns advice text for seats 0–5.
- `action_strengths(action_evs)` scales EVs to 0–100.
- `recommended_action(action_evs)` returns the action with the highest EV.

`AnalysisOptions`, `OpponentModel` and `AnalysisError` describe analysis requests and their failures.

## Caching (`nicehand.cache`)

`CachedAnalysisService(analyzer, config=None)` wraps any callable that takes a request. The request must have a `game_state` attribute holding a `WebGameState`.

- Results are keyed by a `StateSignature` of the state.
- Entries expire after `CacheConfig.max_age` seconds.
- When the cache reaches `CacheConfig.max_size`, the least recently used entry is evicted.
- `get_stats()` returns a `CacheStats`.
- `clear()` empties the cache.
- Errors raised by the analyzer propagate, and nothing is cached for that request.

## Tournament strategy (`nicehand.icm_strategy`)

```python
from nicehand.icm_strategy import chip_ev, position_strategy, risk_tolerance, icm_pressure

ev = chip_ev(stack=5000, total_chips=14000, prize_pool=12000.0)
strategy = position_strategy(5000, 200, position=2, icm_equity=4000.0, chip_ev_value=ev)
print(strategy.fold_frequency, risk_tolerance(icm_pressure(4000.0, ev)))
```

Functions:

- `position_strategy` and `analyze_player_strategy` produce ICM-adjusted frequencies and per-position ranges.
- `chip_ev_strategy` gives the same frequencies with ICM ignored.
- `icm_adjustment` compares an ICM strategy with a chip-EV strategy.
- `stage_strategy(name)` returns the settings for one of these stages: "Early stage", "Middle stage", "Late stage", "Bubble" or "Final table".
- `update_tournament_stage(stacks, blind_level, level)` returns new stacks and a new `BlindLevel`. It does not modify its inputs.

## Demo

```
nicehand-demo
```

The demo sends three example requests to the quick API. It then times 100 repeated requests and prints the results.

## What the package does not do

- It does not compute ICM equities. The tournament helpers take the equities as arguments.
- It has no trained-strategy lookup and no solver. All advice comes from heuristics.
- It has no EV calculator behind `nicehand.analysis`. The module validates states and turns action EVs supplied by the caller into insights.
- `CachedAnalysisService` has no analyzer of its own. You pass one in.
- It has no HTTP server. The "web" state classes are plain data objects for use in your own server.