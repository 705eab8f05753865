"""
rules.py - Turn management and Gymnasium environment

This module provides:
1. FourInARowGame, the turn gate that owns a Board and the owner to move
2. FourInARowEnv, a gymnasium-compatible environment driving a game
"""

from typing import Any, Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from fourinarow.debug import debug
from fourinarow.game.board import Board
from fourinarow.utils import ROWS, COLS, Move, Owner


class FourInARowGame:
    """
    A game in progress: one board plus whose turn it is.

    The current owner only changes through ``play``.
    """

    def __init__(self, first: Owner = Owner.BLACK):
        debug.debug("Initializing FourInARowGame", "game")
        self._board = Board()
        self._current = first

    @property
    def board(self) -> Board:
        return self._board

    def current_player(self) -> Owner:
        return self._current

    def legal_moves(self) -> List[Move]:
        """Legal moves for the owner to move, in column order."""
        return self._board.legal_moves(self._current)

    def play(self, move: Move) -> bool:
        """
        Play a move for the owner to move.

        Args:
            move: The move to play

        Returns:
            True if the move was applied, False if it belongs to the wrong
            owner or targets a full column (the turn is kept in both cases)
        """
        if move.owner != self._current:
            debug.debug(f"Rejected {move.owner.name} move, {self._current.name} to play", "game")
            return False

        if not self._board.apply(move):
            return False

        debug.debug(f"{move.owner.name} played column {move}", "game")
        self._current = self._current.opponent()

        winner = self._board.winner()
        if winner is not None:
            debug.info(f"{winner.name} wins with {self._board.winning_line()}", "game")
        elif self._board.is_full():
            debug.info("Game ends in a draw", "game")

        return True

    apply_turn = play

    def is_over(self) -> bool:
        return self._board.is_over()

    def winner(self) -> Optional[Owner]:
        """
        Get the winner of the game.

        Returns:
            The winning owner, or None if the game is ongoing or drawn
        """
        return self._board.winner()

    def render(self) -> str:
        return self._board.render()

    def __str__(self) -> str:
        return self.render()


class FourInARowEnv(gym.Env):
    """
    Four-in-a-row environment following the Gymnasium interface.

    Each step plays the action for whichever owner is to move; rewards are
    given from the perspective of the owner that just moved.
    """

    metadata = {'render_modes': ['ansi', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 reward_win: float = 1.0,
                 reward_draw: float = 0.0,
                 reward_step: float = 0.0,
                 reward_invalid_move: float = -1.0):
        """
        Initialize the environment.

        Args:
            render_mode: None, 'ansi' or 'human'
            reward_win: Reward when the move wins the game
            reward_draw: Reward when the move fills the board without a winner
            reward_step: Reward for any other legal move
            reward_invalid_move: Reward for dropping into a full column
        """
        debug.debug("Initializing FourInARowEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(low=0, high=2, shape=(ROWS, COLS), dtype=np.int8)

        self.render_mode = render_mode
        self.reward_win = reward_win
        self.reward_draw = reward_draw
        self.reward_step = reward_step
        self.reward_invalid_move = reward_invalid_move

        self.game = FourInARowGame()

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a fresh game.

        Returns:
            Initial observation and info dictionary
        """
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")
        self.game = FourInARowGame()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Drop a piece for the owner to move.

        Args:
            action: Column index

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if self.game.is_over():
            raise RuntimeError("step() called on a finished game; call reset() first")

        mover = self.game.current_player()
        move = Move.create(mover, int(action))

        if move is None or not self.game.play(move):
            debug.warning(f"Invalid action {action} for {mover.name}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False
        if self.game.winner() is not None:
            reward = self.reward_win
            terminated = True
        elif self.game.is_over():
            reward = self.reward_draw
            terminated = True

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ansi":
            return self.game.render()
        if self.render_mode == "human":
            print(self.game.render())
        return None

    def action_masks(self) -> np.ndarray:
        """Boolean mask of columns that still accept a piece."""
        mask = np.zeros(COLS, dtype=bool)
        for move in self.game.legal_moves():
            mask[move.column] = True
        return mask

    def _get_observation(self) -> np.ndarray:
        return self.game.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        board = self.game.board
        winner = self.game.winner()
        return {
            'valid_moves': [move.column for move in self.game.legal_moves()],
            'current_player': self.game.current_player().value,
            'winner': winner.value if winner else None,
            'winning_line': board.winning_line(),
            'moves_made': board.move_count(),
        }
