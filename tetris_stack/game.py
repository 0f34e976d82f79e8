from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .config import config
from .errors import QueueEmptyError
from .piece_queue import CircularPieceQueue
from .supplier import PieceSupplier
from .types import Piece, TurnResult


@dataclass(slots=True)
class TetrisStack:
    queue: CircularPieceQueue
    supplier: PieceSupplier
    turns: int = field(default=0, init=False)

    @classmethod
    def create(
        cls, capacity: Optional[int] = None, seed: Optional[int] = None
    ) -> "TetrisStack":
        capacity = config.QUEUE_CAPACITY if capacity is None else capacity
        seed = config.SEED if seed is None else seed
        return cls(
            queue=CircularPieceQueue(capacity), supplier=PieceSupplier.seeded(seed)
        )

    def start(self) -> List[Piece]:
        added = self.queue.fill_to_capacity(self.supplier)
        logger.info(
            f"Initial queue filled with {len(added)} piece(s) "
            f"({self.queue.count}/{self.queue.capacity})"
        )
        return added

    def play_turn(self) -> TurnResult:
        """Play the front piece and replace it with a freshly supplied one.

        The replacement is supplied before anything is dequeued, so a failing
        supplier leaves the queue untouched. An empty queue fails before the
        supplier is consumed. Under normal play the queue is full between
        turns, so the enqueue that follows always has room.
        """
        if self.queue.is_empty():
            logger.warning("Rejected turn: queue is empty")
            raise QueueEmptyError(self.queue.capacity)
        added = self.supplier.next_piece()
        played = self.queue.dequeue()
        self.queue.enqueue(added)
        self.turns += 1
        logger.debug(f"Turn {self.turns}: played {played}, added {added}")
        return TurnResult(played=played, added=added)

    def view(self) -> tuple[Piece, ...]:
        return self.queue.peek_all()
