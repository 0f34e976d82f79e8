from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np
from loguru import logger

from .types import PIECE_TYPES, Piece, PieceType

Chooser = Callable[[], "PieceType | str"]


@dataclass(slots=True)
class PieceSupplier:
    """Produces pieces with sequential ids and uniformly random types.

    The id counter belongs to the supplier instance and starts at
    ``start_id``. Tests can pass ``chooser`` to pick types deterministically;
    otherwise a type is drawn from ``rng`` on every call.
    """

    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    chooser: Optional[Chooser] = None
    start_id: int = 1
    _next_id: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.start_id < 1:
            raise ValueError("start_id must be a positive integer")
        self._next_id = self.start_id

    @classmethod
    def seeded(cls, seed: Optional[int] = None) -> "PieceSupplier":
        return cls(rng=np.random.default_rng(seed))

    @property
    def issued(self) -> int:
        return self._next_id - self.start_id

    def _choose_type(self) -> PieceType:
        if self.chooser is not None:
            return PieceType.parse(self.chooser())
        return PIECE_TYPES[int(self.rng.integers(len(PIECE_TYPES)))]

    def next_piece(self) -> Piece:
        piece = Piece(id=self._next_id, type=self._choose_type())
        self._next_id += 1
        logger.debug(f"Supplied piece {piece}")
        return piece
