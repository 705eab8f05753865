"""
cli.py - Command-line interface for the four-in-a-row engine

This module provides a CLI for playing interactive games, inspecting
board positions and benchmarking the engine.
"""

import argparse
import sys
from typing import List, Optional

from fourinarow.debug import debug, DebugLevel
from fourinarow.game.board import Board
from fourinarow.game.rules import FourInARowGame
from fourinarow.interfaces.players import HumanPlayer, RandomPlayer, run_game
from fourinarow.utils import ROWS, IllegalMoveError, Move, Owner, QuitGame


class SimpleCLI:
    """Simple command-line interface for the four-in-a-row engine."""

    def __init__(self, argv: Optional[List[str]] = None):
        self.argv = argv
        self.args = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='fourinarow', description='Four-in-a-row CLI')
        parser.add_argument('--debug', action='store_true', help='Enable debug logging')
        parser.add_argument('--log-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', help='Also write logs to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--opponent', choices=['human', 'random'], default='random',
                                 help='Who plays against you')
        play_parser.add_argument('--first', choices=['human', 'random'], default='human',
                                 help='Who plays black and moves first')
        play_parser.add_argument('--seed', type=int, help='Seed for the random opponent')
        play_parser.add_argument('--max-retries', type=int, default=3,
                                 help='Times a rejected move is retried per turn')

        inspect_parser = subparsers.add_parser('inspect', help='Analyse a board position')
        inspect_parser.add_argument('--rows', nargs=ROWS, required=True, metavar='ROW',
                                    help="Board rows, top first ('X', 'O', '.')")

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--seed', type=int, help='Random seed')

        return parser

    def parse_args(self) -> None:
        self.args = self.build_parser().parse_args(self.argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.log_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self) -> int:
        """Run the selected command and return the process exit status."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            return self.play_game()
        if self.args.command == 'inspect':
            return self.inspect_position()
        if self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play a game against a human or the random opponent."""
        human = HumanPlayer()
        opponent = HumanPlayer() if self.args.opponent == 'human' else RandomPlayer(self.args.seed)

        if self.args.first == 'human':
            providers = {Owner.BLACK: human, Owner.WHITE: opponent}
        else:
            providers = {Owner.BLACK: opponent, Owner.WHITE: human}

        game = FourInARowGame()
        print(game.render())

        def show(game: FourInARowGame, move: Move) -> None:
            print(f"\n{move.owner} plays column {move}")
            print(game.render())

        try:
            winner = run_game(game, providers, max_retries=self.args.max_retries, on_move=show)
        except QuitGame:
            print("Quitting game.")
            return 0
        except IllegalMoveError as e:
            debug.error(str(e), "cli")
            print(f"error: {e}")
            return 1

        if winner is None:
            print("It's a draw!")
        else:
            print(f"{winner} ({winner.name.title()}) wins!")
        return 0

    def inspect_position(self) -> int:
        """Load a position and report its status."""
        try:
            board = Board.from_rows(self.args.rows)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print(board.render())
        winner = board.winner()
        if winner is None:
            print("No winner")
        else:
            print(f"Winner: {winner} ({winner.name.title()})")
            print(f"Winning line: {board.winning_line()}")
        print(f"Game over: {board.is_over()}")
        columns = [str(move) for move in board.legal_moves(Owner.BLACK)]
        print(f"Legal columns: {' '.join(columns) if columns else 'none'}")
        return 0

    def benchmark(self) -> int:
        """Time random self-play and win detection."""
        iterations = self.args.iterations
        print(f"Running benchmark with {iterations} games...")

        players = {Owner.BLACK: RandomPlayer(self.args.seed),
                   Owner.WHITE: RandomPlayer(None if self.args.seed is None else self.args.seed + 1)}
        boards = []
        total_moves = 0
        results = {Owner.BLACK: 0, Owner.WHITE: 0, None: 0}

        debug.start_timer("self_play")
        for _ in range(iterations):
            game = FourInARowGame()
            results[run_game(game, players)] += 1
            total_moves += game.board.move_count()
            boards.append(game.board)
        play_time = debug.end_timer("self_play", "cli") or 0.0

        debug.start_timer("win_check")
        for board in boards:
            board.winner()
        check_time = debug.end_timer("win_check", "cli") or 0.0

        print(f"Played {iterations} games with {total_moves} moves: {play_time:.4f} seconds, "
              f"{play_time / max(total_moves, 1) * 1000:.4f} ms per move")
        print(f"Win detection: {check_time / max(iterations, 1) * 1000:.4f} ms per board")
        print(f"Black wins: {results[Owner.BLACK]}, White wins: {results[Owner.WHITE]}, "
              f"Draws: {results[None]}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
