"""Losing-chess move generation, simple computer players, a move-count checker and a generic matrix type."""

__version__ = "0.1.0"
__all__ = ["board", "game", "matrix", "pieces", "verify"]