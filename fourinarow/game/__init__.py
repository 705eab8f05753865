"""
fourinarow.game - Core game mechanics

This package contains the board representation, line-based win
detection, the turn gate and the Gymnasium environment.
"""

from fourinarow.game.board import Board
from fourinarow.game.lines import board_lines
from fourinarow.game.rules import FourInARowGame, FourInARowEnv

__all__ = ['Board', 'FourInARowGame', 'FourInARowEnv', 'board_lines']
