# holdem

A Texas Hold'em hand played in the terminal, plus a hand evaluator that
scores the best category among up to seven cards. The game's text is in
Spanish.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
holdem
```

The game loads its deck from `data/cartas_poker.csv`, relative to the
current directory: a CSV file with a header line and the columns id, rank
and suit (ranks `2`–`10`, `J`, `Q`, `K`, `A`; suits `corazones`,
`diamantes`, `tréboles`, `picas`). If the file cannot be opened, the menu
prints an error and returns.

The main menu offers:

1. Start a game. You give your name and how many bots (1–9) sit at the
   table. The bots come first in the seating order and you sit last.
2. Quit.
3. Toggle the bots' randomness setting. This setting is stored but has no
   effect on play.

Each player starts with 100 chips. The first seat is the button, the next
two post the small blind (5) and the big blind (10). A player short of the
blind puts in what they have. The deck is then shuffled, two cards are dealt
to each seat, and a betting round is played before the flop, after the flop,
after the turn and after the river.

On each turn the program shows the board, the pot, the player's cards and
the current bets, and offers:

- **check / call**: match the highest bet at the table, or go all-in if the
  player does not have enough chips;
- **raise**: put more chips in (capped at the player's stack), which reopens
  the round for everyone else still in the hand;
- **fold**: give up the hand.

Once a player has called or raised in a round, they may only check/call or
fold until that round ends. If everyone but one player folds, that player
takes the pot.

## What it does not do

- Bots do not decide for themselves: every seat, bots included, is asked for
  its choice at the keyboard.
- There is no showdown. When the river betting ends with more than one
  player left, the game prints `TERMINO` and the pot is not awarded.
- A game is a single hand; the blinds and button do not move on to another.

## Using the library

The pieces of the game can also be used on their own:

- `holdem.cards`: `Card` (`value()`, `describe()`), `Deck`
  (`Deck.standard()`, `Deck.from_csv(path)`, `shuffle(rng)`), `card_value`,
  `suit_index`, `suit_symbol`.
- `holdem.hands`: `evaluate_hand(cards)` returns an `EvaluatedHand` with its
  `hand_type` (a `HandType`), the deciding `values` and a comparable `score`.
  `find_flush`, `find_straight` and `count_ranks` are the helpers it uses.
- `holdem.game`: `Player`, `Table`, `Game` and `setup_game`. Input and
  output are passed in as functions, so a hand can be scripted; `Game` also
  offers the single steps (`post_blinds`, `deal`, `flop`, `turn`, `river`,
  `check_or_call`, `raise_bet`, `fold`, `betting_round`, `award_pot`,
  `eliminate_broke_players`).
- `holdem.ring`: `Ring`, a circular list with a movable cursor, used for the
  seating order.
- `holdem.priority`: `MaxHeap`, a priority queue that returns the item with
  the highest priority first.
- `holdem.console`: CSV line parsing (`parse_csv_line`, `read_csv`),
  `split_string`, `clear_screen` and `wait_for_key`.

```python
from holdem.cards import Card
from holdem.hands import evaluate_hand, HandType

hand = evaluate_hand([
    Card(1, "A", "picas"), Card(2, "K", "picas"), Card(3, "Q", "picas"),
    Card(4, "J", "picas"), Card(5, "10", "picas"),
])
assert hand.hand_type is HandType.ESCALERA_REAL
assert hand.score == 9_000_000
```