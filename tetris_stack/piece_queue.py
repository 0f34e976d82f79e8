from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from loguru import logger

from .config import config
from .errors import QueueEmptyError, QueueFullError
from .types import Piece

if TYPE_CHECKING:  # only needed for annotations
    from .supplier import PieceSupplier


class CircularPieceQueue:
    """
    Fixed-capacity FIFO of upcoming pieces.

    Pieces live in a list of exactly ``capacity`` slots. ``front`` points at
    the oldest piece and ``back`` at the next free slot; both advance modulo
    the capacity so nothing is ever shifted. The occupied slots are always
    ``(front + i) % capacity`` for ``i`` in ``range(count)``.
    """

    __slots__ = ("_slots", "_capacity", "_front", "_back", "_count")

    def __init__(self, capacity: Optional[int] = None):
        """
        Create an empty queue.

        Args:
            capacity: Number of slots; defaults to ``config.QUEUE_CAPACITY``

        Raises:
            ValueError: If capacity is not a positive integer
        """
        if capacity is None:
            capacity = config.QUEUE_CAPACITY
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._slots: List[Optional[Piece]] = [None] * capacity
        self._front = 0
        self._back = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def front(self) -> int:
        return self._front

    @property
    def back(self) -> int:
        return self._back

    @property
    def count(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._capacity

    def enqueue(self, piece: Piece) -> None:
        """
        Store a piece at the back of the queue.

        Raises:
            QueueFullError: If the queue already holds ``capacity`` pieces;
                the queue is left untouched
        """
        if self.is_full():
            logger.warning(f"Rejected enqueue of {piece}: queue is full")
            raise QueueFullError(self._capacity)

        self._slots[self._back] = piece
        self._back = (self._back + 1) % self._capacity
        self._count += 1
        logger.debug(f"Enqueued {piece} ({self._count}/{self._capacity})")

    def dequeue(self) -> Piece:
        """
        Remove and return the piece at the front of the queue.

        Raises:
            QueueEmptyError: If the queue holds no pieces; the queue is left
                untouched
        """
        if self.is_empty():
            logger.warning("Rejected dequeue: queue is empty")
            raise QueueEmptyError(self._capacity)

        piece = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self._capacity
        self._count -= 1
        logger.debug(f"Dequeued {piece} ({self._count}/{self._capacity})")
        return piece

    def peek_all(self) -> tuple[Piece, ...]:
        """Occupied pieces in front-to-back order, without mutating the queue."""
        return tuple(
            self._slots[(self._front + i) % self._capacity] for i in range(self._count)
        )

    def fill_to_capacity(self, supplier: "PieceSupplier") -> List[Piece]:
        """Enqueue supplied pieces until the queue is full and return them."""
        added: List[Piece] = []
        while not self.is_full():
            piece = supplier.next_piece()
            self.enqueue(piece)
            added.append(piece)
        logger.debug(f"Filled queue with {len(added)} piece(s)")
        return added

    def to_dict(self) -> Dict[str, object]:
        return {
            "capacity": self._capacity,
            "count": self._count,
            "front": self._front,
            "back": self._back,
            "pieces": [piece.to_dict() for piece in self.peek_all()],
        }

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Piece]:
        return iter(self.peek_all())

    def __str__(self) -> str:
        pieces = [str(p) for p in self.peek_all()]
        return f"CircularPieceQueue({self._count}/{self._capacity}: {pieces})"
