"""
players.py - Move providers and the game loop

A move provider is anything callable as ``provider(game) -> Move``. The
loop in ``run_game`` asks the provider of the owner to move for a move,
plays it and repeats until the game is over.
"""

import sys
from typing import Callable, Dict, Optional, Protocol, TextIO

import numpy as np

from fourinarow.debug import debug
from fourinarow.game.rules import FourInARowGame
from fourinarow.utils import COLS, IllegalMoveError, Move, Owner, QuitGame

QUIT_WORDS = {"q", "quit", "exit"}


class MoveProvider(Protocol):
    def __call__(self, game: FourInARowGame) -> Move:
        ...


class HumanPlayer:
    """Prompt a human for a column until a usable move is entered."""

    name = "Human"

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None,
                 output: Optional[TextIO] = None):
        self.input_fn = input_fn
        self.output = output

    def _print(self, text: str) -> None:
        print(text, file=self.output or sys.stdout)

    def __call__(self, game: FourInARowGame) -> Move:
        player = game.current_player()
        choices = " ".join(str(move) for move in game.legal_moves())
        self._print(f"Available columns: {choices}")

        while True:
            try:
                raw = (self.input_fn or input)(f"[{player}] >> ")
            except EOFError:
                raise QuitGame("Input closed")

            text = raw.strip().lower()
            if not text:
                continue
            if text in QUIT_WORDS:
                raise QuitGame("Player quit")

            try:
                column = int(text) - 1
            except ValueError:
                self._print("error: invalid input")
                continue

            move = Move.create(player, column)
            if move is None:
                self._print(f"error: column must be between 1 and {COLS}")
                continue
            if move not in game.legal_moves():
                self._print(f"error: column {move} is full")
                continue
            return move


class RandomPlayer:
    """Pick uniformly among the legal moves."""

    name = "Random"

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def __call__(self, game: FourInARowGame) -> Move:
        moves = game.legal_moves()
        if not moves:
            raise IllegalMoveError("No legal moves left")
        return moves[int(self.rng.integers(len(moves)))]


def run_game(game: FourInARowGame, providers: Dict[Owner, MoveProvider],
             max_retries: int = 3,
             on_move: Optional[Callable[[FourInARowGame, Move], None]] = None) -> Optional[Owner]:
    """
    Play a game to completion.

    Args:
        game: Game to drive, mutated in place
        providers: Move provider for each owner
        max_retries: Times a provider is asked again after a rejected move
        on_move: Optional callback invoked after every accepted move

    Returns:
        The winner, or None for a draw

    Raises:
        IllegalMoveError: If a provider is still rejected after ``max_retries`` retries
    """
    while not game.is_over():
        player = game.current_player()
        provider = providers[player]
        rejected = 0

        while True:
            move = provider(game)
            if game.play(move):
                break
            rejected += 1
            debug.warning(f"{player.name} move {move} rejected (retry {rejected}/{max_retries})",
                          "players")
            if rejected > max_retries:
                raise IllegalMoveError(
                    f"{player.name} submitted {rejected} rejected moves in a row")

        if on_move is not None:
            on_move(game, move)

    winner = game.winner()
    debug.info(f"Game finished, winner: {winner.name if winner else 'none (draw)'}", "players")
    return winner
