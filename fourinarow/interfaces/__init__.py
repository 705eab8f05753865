"""
fourinarow.interfaces - Ways to drive a game

This package contains the move providers, the game loop and the
command-line interface.
"""

# Don't import anything here to avoid circular imports
__all__ = []
