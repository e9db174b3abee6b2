import random
from unittest import mock

import pytest

from holdem.cards import Card, Deck
from holdem.game import (
    BIG_BLIND,
    SMALL_BLIND,
    STARTING_CHIPS,
    Game,
    Player,
    Status,
    Table,
    main,
    setup_game,
)


def scripted(*answers):
    pending = list(answers)

    def read():
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


def make_game(count=3, answers=(), deck=None):
    players = [Player(f"P{i}", False) for i in range(count)]
    out = []
    game = Game(
        players,
        deck if deck is not None else Deck.standard(),
        scripted(*answers),
        out.append,
        random.Random(0),
    )
    game.clear_fn = lambda: None
    return game, players, out


def total_chips(game):
    return sum(p.chips for p in game.players) + game.table.pot


def test_player_defaults_and_activity():
    player = Player("Ana", False)
    assert player.chips == STARTING_CHIPS
    assert player.status is Status.PLAYING
    assert player.is_active()
    player.chips = 0
    assert not player.is_active()
    player.chips = 5
    player.status = Status.FOLDED
    assert not player.is_active()


def test_roles_three_players():
    game, players, _ = make_game(3)
    assert game.button is players[0]
    assert game.small_blind is players[1]
    assert game.big_blind is players[2]
    assert game.next_to_bet is players[0]


def test_roles_two_players_wrap():
    game, players, _ = make_game(2)
    assert game.button is players[0]
    assert game.small_blind is players[1]
    assert game.big_blind is players[0]
    assert game.next_to_bet is players[1]


def test_game_needs_two_players_and_enough_cards():
    with pytest.raises(ValueError):
        Game([Player("solo")], Deck.standard())
    with pytest.raises(ValueError):
        Game([Player("a"), Player("b")], Deck(Deck.standard()[:5]))


def test_table_stages_and_limit():
    table = Table()
    assert table.stage_name() is None
    cards = Deck.standard()[:6]
    for card in cards[:3]:
        table.add(card)
    assert table.stage_name() == "FLOP"
    table.add(cards[3])
    assert table.stage_name() == "TURN"
    table.add(cards[4])
    assert table.stage_name() == "RIVER"
    with pytest.raises(ValueError):
        table.add(cards[5])


def test_table_render():
    table = Table([Card(1, "A", "picas")], pot=15)
    text = table.render()
    assert text.splitlines()[0] == "MESA ACTUAL:"
    assert "BOTE: 15" in text
    assert "Carta [1]: A picas ♠️" in text


def test_deal_and_board_positions():
    deck = Deck.standard()
    game, players, _ = make_game(3, deck=deck)
    game.deal()
    for seat, player in enumerate(players):
        assert player.hand == deck[2 * seat : 2 * seat + 2]
    game.flop()
    assert game.table.cards == deck[6:9]
    game.turn()
    assert game.table.cards[3] == deck[9]
    game.river()
    assert game.table.cards == deck[6:11]


def test_post_blinds():
    game, players, _ = make_game(3)
    game.post_blinds()
    assert players[2].bet == BIG_BLIND
    assert players[2].chips == STARTING_CHIPS - BIG_BLIND
    assert players[1].bet == SMALL_BLIND
    assert game.table.pot == BIG_BLIND + SMALL_BLIND
    assert game.max_bet() == BIG_BLIND


def test_check_or_call_variants():
    game, players, out = make_game(3)
    game.pending = 3
    paid = game.check_or_call(players[0], BIG_BLIND)
    assert paid == BIG_BLIND
    assert players[0].bet == BIG_BLIND
    assert players[0].acted and players[0].committed
    assert game.pending == 2
    assert out[-1] == "P0 iguala la apuesta."

    assert game.check_or_call(players[0], BIG_BLIND) == 0
    assert out[-1] == "P0 pasa."

    players[1].chips = 4
    assert game.check_or_call(players[1], BIG_BLIND) == 4
    assert players[1].chips == 0
    assert out[-1] == "P1 va all-in."
    assert total_chips(game) == 3 * STARTING_CHIPS - 96


def test_raise_reopens_round():
    game, players, _ = make_game(3)
    for p in players:
        p.acted = True
    paid = game.raise_bet(players[0], STARTING_CHIPS * 2)
    assert paid == STARTING_CHIPS
    assert players[0].chips == 0
    assert game.current_bet == players[0].bet
    assert not players[1].acted and not players[2].acted
    assert game.pending == 2


def test_negative_raise_rejected():
    game, players, _ = make_game(2)
    with pytest.raises(ValueError):
        game.raise_bet(players[0], -1)


def test_fold_until_one_left_and_award():
    game, players, _ = make_game(3)
    game.post_blinds()
    game.pending = 3
    game.fold(players[0])
    assert players[0].status is Status.FOLDED
    assert game.winner is None
    game.fold(players[1])
    assert game.winner is players[2]
    assert game.round_over
    before = total_chips(game)
    winner = game.award_pot()
    assert winner is players[2]
    assert game.table.pot == 0
    assert total_chips(game) == before


def test_award_without_winner_fails():
    game, _, _ = make_game(3)
    with pytest.raises(RuntimeError):
        game.award_pot()


def test_betting_round_call_and_check():
    game, players, _ = make_game(2, answers=["1", "1"])
    game.post_blinds()
    game.deal()
    game.betting_round()
    assert players[0].chips == STARTING_CHIPS - BIG_BLIND
    assert players[1].chips == STARTING_CHIPS - BIG_BLIND
    assert game.table.pot == 2 * BIG_BLIND
    assert all(p.bet == 0 and not p.committed for p in players)


def test_betting_round_raise_then_call():
    game, players, _ = make_game(2, answers=["2", "20", "1"])
    game.post_blinds()
    game.deal()
    game.betting_round()
    assert players[0].chips == players[1].chips
    assert total_chips(game) == 2 * STARTING_CHIPS
    assert game.table.pot == 2 * (STARTING_CHIPS - players[0].chips)


def test_invalid_options_are_asked_again():
    game, players, out = make_game(2, answers=["x", "9", "1", "1"])
    game.post_blinds()
    game.deal()
    game.betting_round()
    assert out.count("Elige una opción: ") == 4
    assert game.table.pot == 2 * BIG_BLIND


def test_play_hand_fold_preflop():
    game, players, _ = make_game(2, answers=["3"])
    winner = game.play_hand()
    assert winner is players[0]
    assert players[1].status is Status.FOLDED
    assert game.table.pot == 0
    assert total_chips(game) == 2 * STARTING_CHIPS
    assert players[0].chips == STARTING_CHIPS + SMALL_BLIND


def test_play_hand_to_river():
    game, players, out = make_game(2, answers=["1"] * 8)
    assert game.play_hand() is None
    assert out[-1] == "TERMINO\n"
    assert len(game.table.cards) == 5
    assert total_chips(game) == 2 * STARTING_CHIPS
    assert game.table.pot == 2 * BIG_BLIND


def test_eliminate_broke_players():
    game, players, _ = make_game(3)
    players[1].chips = 0
    gone = game.eliminate_broke_players()
    assert gone == [players[1]]
    assert players[1].status is Status.ELIMINATED
    assert players[0].status is Status.PLAYING


def test_setup_game_seats_bots_then_human():
    out = []
    game = setup_game(scripted("Ana", "0", "abc", "2"), out.append, random.Random(1), Deck.standard())
    names = [p.name for p in game.players]
    assert names == ["Bot 1", "Bot 2", "Ana"]
    assert [p.is_bot for p in game.players] == [True, True, False]
    assert "JUGADOR = Bot 1 es BOTON" in out
    assert "JUGADOR = Bot 2 es CIEGA MENOR" in out
    assert "JUGADOR = Ana es CIEGA MAYOR" in out


@mock.patch("holdem.console.subprocess.run")
def test_main_exits_on_eof(run):
    with mock.patch("builtins.input", side_effect=EOFError):
        assert main() == 0