"""Table state, betting rounds and the interactive game loop."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from holdem.cards import Card, Deck, suit_symbol
from holdem.console import clear_screen, wait_for_key
from holdem.ring import Ring

STARTING_CHIPS = 100
BIG_BLIND = 10
SMALL_BLIND = 5
BOARD_SIZE = 5
MAX_BOTS = 9
NAME_LENGTH = 49

_STAGES = {3: "FLOP", 4: "TURN", 5: "RIVER"}


class Status(str, Enum):
    """Where a player stands in the game."""

    PLAYING = "Jugando"
    FOLDED = "Retirado"
    ELIMINATED = "Eliminado"


class Action(Enum):
    """What a player may do on their turn."""

    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    RAISE = "raise"


@dataclass(eq=False)
class Player:
    """A seat at the table. Players are compared by identity."""

    name: str
    is_bot: bool = False
    chips: int = STARTING_CHIPS
    hand: list[Card] = field(default_factory=list)
    status: Status = Status.PLAYING
    bet: int = 0
    acted: bool = False
    committed: bool = False

    def is_active(self) -> bool:
        """Still in the hand and holding chips."""
        return self.status is Status.PLAYING and self.chips > 0


@dataclass
class Table:
    """The community cards and the pot."""

    cards: list[Card] = field(default_factory=list)
    pot: int = 0

    def add(self, card: Card) -> None:
        if len(self.cards) >= BOARD_SIZE:
            raise ValueError(f"the board holds at most {BOARD_SIZE} cards")
        self.cards.append(card)

    def stage_name(self) -> str | None:
        """FLOP, TURN or RIVER depending on the cards showing, else ``None``."""
        return _STAGES.get(len(self.cards))

    def render(self) -> str:
        lines = ["MESA ACTUAL:", f"BOTE: {self.pot}", ""]
        stage = self.stage_name()
        if stage:
            lines.append(stage)
        lines.extend(
            f"Carta [{number}]: {card.rank} {card.suit} {suit_symbol(card.suit)}"
            for number, card in enumerate(self.cards, start=1)
        )
        return "\n".join(lines)


class Game:
    """One table of players with its deck, blinds and betting state."""

    def __init__(
        self,
        players: Iterable[Player],
        deck: Deck | None = None,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], object] = print,
        rng: random.Random | None = None,
    ) -> None:
        self.players: Ring[Player] = Ring(players)
        if len(self.players) < 2:
            raise ValueError("a game needs at least two players")
        self.deck = deck if deck is not None else Deck.standard()
        needed = 2 * len(self.players) + BOARD_SIZE
        if len(self.deck) < needed:
            raise ValueError(f"the deck needs at least {needed} cards")
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.rng = rng if rng is not None else random.Random()
        self.clear_fn: Callable[[], object] = clear_screen
        self.table = Table()
        self.button = self.players.first()
        self.small_blind = self.players.next()
        self.big_blind = self.players.next()
        self.next_to_bet = self.players.next()
        self.winner: Player | None = None
        self.current_bet = 0
        self.pending = 0
        self.round_over = False

    # dealing

    def deal(self) -> None:
        """Give each player two cards from the top of the deck, in seat order."""
        for seat, player in enumerate(self.players):
            player.hand = self.deck[2 * seat : 2 * seat + 2]

    def _board_start(self) -> int:
        return 2 * len(self.players)

    def flop(self) -> None:
        start = self._board_start()
        self.table.cards = self.deck[start : start + 3]

    def turn(self) -> None:
        start = self._board_start()
        self.table.cards = self.deck[start : start + 4]

    def river(self) -> None:
        start = self._board_start()
        self.table.cards = self.deck[start : start + 5]

    # counting

    def count_active(self) -> int:
        return sum(player.is_active() for player in self.players)

    def count_pending(self) -> int:
        return sum(player.is_active() and not player.acted for player in self.players)

    def max_bet(self) -> int:
        return max((player.bet for player in self.players), default=0)

    def _sole_active(self) -> Player | None:
        active = [player for player in self.players if player.is_active()]
        return active[0] if len(active) == 1 else None

    # actions

    def _pay(self, player: Player, amount: int) -> None:
        player.chips -= amount
        player.bet += amount
        self.table.pot += amount

    def check_or_call(self, player: Player, current_bet: int) -> int:
        """Check, call or go all-in; return the chips put in."""
        if player.bet == current_bet:
            paid = 0
            self.output_fn(f"{player.name} pasa.")
        else:
            difference = current_bet - player.bet
            if player.chips >= difference:
                paid = difference
                self._pay(player, paid)
                self.output_fn(f"{player.name} iguala la apuesta.")
            else:
                paid = player.chips
                self._pay(player, paid)
                self.output_fn(f"{player.name} va all-in.")
        player.acted = True
        player.committed = True
        self.pending -= 1
        return paid

    def raise_bet(self, player: Player, amount: int) -> int:
        """Put ``amount`` more chips in (capped at the stack) and reopen the round."""
        if amount < 0:
            raise ValueError("a raise cannot be negative")
        amount = min(amount, player.chips)
        self._pay(player, amount)
        self.current_bet = player.bet
        player.committed = True
        self.output_fn(f"{player.name} sube la apuesta a {player.bet}.")
        for other in self.players:
            if other is not player and other.is_active():
                other.acted = False
        player.acted = True
        self.pending = self.count_pending()
        return amount

    def fold(self, player: Player) -> None:
        player.status = Status.FOLDED
        self.output_fn(f"{player.name} se retira.")
        player.acted = True
        self.pending -= 1
        if self.count_active() == 1:
            self.winner = self._sole_active()
            self.round_over = True

    def award_pot(self) -> Player:
        """Give the pot to the only player left in the hand."""
        winner = self._sole_active() or self.winner
        if winner is None:
            raise RuntimeError("no single winner to award the pot to")
        self.winner = winner
        self.output_fn(f"EL JUGADOR {winner.name} ha ganado {self.table.pot} fichas")
        winner.chips += self.table.pot
        self.table.pot = 0
        return winner

    def post_blinds(self) -> None:
        """Empty the board and take the blinds into a fresh pot."""
        self.table.pot = 0
        self.table.cards = []
        big = min(BIG_BLIND, self.big_blind.chips)
        self._pay(self.big_blind, big)
        small = min(SMALL_BLIND, self.small_blind.chips)
        self._pay(self.small_blind, small)

    # interaction

    def _ask_int(self, prompt: str) -> int | None:
        self.output_fn(prompt)
        try:
            return int(self.input_fn().strip())
        except ValueError:
            return None

    def _ask_option(self, highest: int) -> int:
        while True:
            choice = self._ask_int("Elige una opción: ")
            if choice is not None and 1 <= choice <= highest:
                return choice

    def _ask_raise(self, player: Player) -> int:
        minimum = self.current_bet - player.bet + 1
        while True:
            amount = self._ask_int(f"¿Cuánto quieres subir? (mínimo {minimum}): ")
            if amount is not None and amount >= 0:
                return amount

    def _take_turn(self, player: Player) -> Action:
        self.output_fn(self.table.render())
        self.output_fn(f"\nTurno de {player.name}")
        if player is self.button:
            self.output_fn("BOTÓN\n")
        if player is self.small_blind:
            self.output_fn("CIEGA MENOR\n")
        if player is self.big_blind:
            self.output_fn("CIEGA MAYOR\n")
        self.output_fn("Tus cartas:")
        for card in player.hand:
            self.output_fn(card.describe())
        self.output_fn(
            f"\nFichas: {player.chips} | Apuesta actual: {player.bet} "
            f"| Apuesta máxima: {self.current_bet}"
        )
        matched = player.bet == self.current_bet
        stay = Action.CHECK if matched else Action.CALL
        stay_label = "[1] Pasar (check)" if matched else "[1] Igualar (call)"
        if player.committed:
            self.output_fn(f"Opciones: {stay_label} [2] Retirarse (fold)")
            choices = {1: stay, 2: Action.FOLD}
        else:
            self.output_fn(
                f"Opciones: {stay_label} [2] Subir (raise) [3] Retirarse (fold)"
            )
            choices = {1: stay, 2: Action.RAISE, 3: Action.FOLD}
        action = choices[self._ask_option(len(choices))]
        if action is Action.FOLD:
            self.fold(player)
        elif action is Action.RAISE:
            self.raise_bet(player, self._ask_raise(player))
        else:
            self.check_or_call(player, self.current_bet)
        return action

    def betting_round(self) -> None:
        """Run one round of betting until everyone has acted or one player is left."""
        self.current_bet = self.max_bet()
        self.pending = self.count_active()
        self.round_over = False
        for player in self.players:
            player.acted = False

        current = self.players.first()
        while current is not self.next_to_bet:
            current = self.players.next()
        start = current

        while self.pending > 0 and not self.round_over:
            self.output_fn(f"JUGADORES PENDIENTES = {self.pending}")
            if current.is_active():
                self._take_turn(current)
            while True:
                current = self.players.next()
                waiting = (
                    current.status is Status.FOLDED or current.chips == 0 or current.acted
                )
                if not waiting or current is start:
                    break
            self.clear_fn()

        for player in self.players:
            player.bet = 0
            player.committed = False

    def play_hand(self) -> Player | None:
        """Play one hand; return the winner if everyone else folded."""
        self.post_blinds()
        self.deck.shuffle(self.rng)
        self.deal()
        for street in (None, self.flop, self.turn, self.river):
            if street is not None:
                street()
            self.betting_round()
            if self.count_active() == 1:
                return self.award_pot()
        self.output_fn("TERMINO\n")
        return None

    def eliminate_broke_players(self) -> list[Player]:
        """Mark every player without chips as eliminated and return them."""
        broke = [player for player in self.players if player.chips == 0]
        for player in broke:
            player.status = Status.ELIMINATED
        return broke


def setup_game(
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], object] = print,
    rng: random.Random | None = None,
    deck: Deck | None = None,
) -> Game:
    """Ask for the player's name and the number of bots, then seat everyone."""
    output_fn("Tu nombre:")
    name = input_fn().rstrip("\r\n")[:NAME_LENGTH]
    while True:
        output_fn(f"Cuántos jugadores bots van a jugar? (1-{MAX_BOTS})")
        try:
            bots = int(input_fn().strip())
        except ValueError:
            continue
        if 1 <= bots <= MAX_BOTS:
            break

    players = [Player(f"Bot {number}", True) for number in range(1, bots + 1)]
    players.append(Player(name, False))
    if deck is None:
        deck = Deck.from_csv()
    game = Game(players, deck, input_fn, output_fn, rng)

    seats = list(game.players)
    first = seats.index(game.next_to_bet)
    for player in seats[first:] + seats[:first]:
        if player is game.button:
            role = "BOTON"
        elif player is game.big_blind:
            role = "CIEGA MAYOR"
        elif player is game.small_blind:
            role = "CIEGA MENOR"
        elif player is game.next_to_bet:
            role = "EMPIEZA"
        else:
            role = "NORMAL"
        output_fn(f"JUGADOR = {player.name} es {role}")
    return game


def main(argv: list[str] | None = None) -> int:
    """Run the menu loop."""
    clear_screen()
    bots_random = False
    while True:
        print("========================================")
        print("           ♠️  ♥️  Poker  ♦️  ♣️")
        print("========================================")
        print("1) Iniciar Partida")
        print("2) Salir")
        print("3) Activar IArand")
        try:
            choice = input("Ingrese su opción: ").strip()[:1]
        except EOFError:
            return 0
        if choice == "1":
            try:
                game = setup_game()
                clear_screen()
                game.play_hand()
            except OSError as exc:
                print(f"Error al abrir el archivo: {exc}")
            except EOFError:
                return 0
        elif choice == "2":
            return 0
        elif choice == "3":
            bots_random = not bots_random
        else:
            print("Opción no válida")
        wait_for_key()
        clear_screen()


if __name__ == "__main__":
    raise SystemExit(main())