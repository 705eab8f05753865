"""
fourinarow - Rules engine for a two-player vertical four-in-a-row game

This package provides the board and win detection, a turn-gated game
wrapper, interchangeable move providers, a Gymnasium environment and a
command-line interface.
"""

# Version number
__version__ = '0.1.0'
