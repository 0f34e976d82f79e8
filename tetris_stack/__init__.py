"""
Tetris Stack
A circular queue of upcoming pieces for a block-stacking puzzle game.
"""

from .config import Config, config
from .errors import QueueEmptyError, QueueError, QueueFullError
from .game import TetrisStack
from .piece_queue import CircularPieceQueue
from .supplier import PieceSupplier
from .types import PIECE_TYPES, Piece, PieceType, TurnResult

__all__ = [
    "Config",
    "config",
    "QueueError",
    "QueueFullError",
    "QueueEmptyError",
    "TetrisStack",
    "CircularPieceQueue",
    "PieceSupplier",
    "PIECE_TYPES",
    "Piece",
    "PieceType",
    "TurnResult",
]
