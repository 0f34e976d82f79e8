from __future__ import annotations

import itertools
import unittest

from loguru import logger

from tetris_stack.errors import QueueEmptyError, QueueFullError
from tetris_stack.game import TetrisStack
from tetris_stack.piece_queue import CircularPieceQueue
from tetris_stack.supplier import PieceSupplier
from tetris_stack.types import PIECE_TYPES, TurnResult


def make_game(capacity: int = 5) -> TetrisStack:
    types = itertools.cycle(PIECE_TYPES)
    return TetrisStack(
        queue=CircularPieceQueue(capacity),
        supplier=PieceSupplier(chooser=lambda: next(types)),
    )


class TetrisStackTests(unittest.TestCase):
    def setUp(self) -> None:
        self.game = make_game()
        logger.disable("tetris_stack")

    def tearDown(self) -> None:
        logger.enable("tetris_stack")

    def test_start_fills_queue(self) -> None:
        added = self.game.start()
        self.assertEqual([p.id for p in added], [1, 2, 3, 4, 5])
        self.assertTrue(self.game.queue.is_full())
        self.assertEqual(self.game.view(), tuple(added))

    def test_play_turn_keeps_count_and_advances_cursors(self) -> None:
        self.game.start()
        queue = self.game.queue
        for turn in range(1, 13):
            front, back = queue.front, queue.back
            result = self.game.play_turn()
            self.assertIsInstance(result, TurnResult)
            self.assertEqual(queue.count, queue.capacity)
            self.assertEqual(queue.front, (front + 1) % queue.capacity)
            self.assertEqual(queue.back, (back + 1) % queue.capacity)
            self.assertEqual(result.played.id, turn)
            self.assertEqual(result.added.id, turn + 5)
            self.assertEqual(self.game.view()[-1], result.added)
        self.assertEqual(self.game.turns, 12)

    def test_play_turn_on_empty_queue_does_not_consume_supplier(self) -> None:
        with self.assertRaises(QueueEmptyError):
            self.game.play_turn()
        self.assertEqual(self.game.supplier.issued, 0)
        self.assertEqual(self.game.turns, 0)
        self.assertTrue(self.game.queue.is_empty())

    def test_failing_supplier_leaves_queue_untouched(self) -> None:
        self.game.start()
        before = self.game.view()
        state = self.game.queue.to_dict()
        self.game.supplier.chooser = lambda: "X"
        with self.assertRaises(ValueError):
            self.game.play_turn()
        self.assertEqual(self.game.view(), before)
        self.assertEqual(self.game.queue.count, self.game.queue.capacity)
        self.assertEqual(self.game.queue.to_dict(), state)
        self.assertEqual(self.game.turns, 0)

        self.game.supplier.chooser = lambda: "T"
        result = self.game.play_turn()
        self.assertEqual(result.played.id, 1)
        self.assertEqual(result.added.id, 6)

    def test_play_turn_on_partial_queue(self) -> None:
        self.game.queue.enqueue(self.game.supplier.next_piece())
        result = self.game.play_turn()
        self.assertEqual(result.played.id, 1)
        self.assertEqual([p.id for p in self.game.view()], [2])

    def test_direct_enqueue_on_full_queue_still_rejected(self) -> None:
        self.game.start()
        with self.assertRaises(QueueFullError):
            self.game.queue.enqueue(self.game.supplier.next_piece())

    def test_view_does_not_mutate(self) -> None:
        self.game.start()
        self.game.play_turn()
        state = self.game.queue.to_dict()
        self.game.view()
        self.game.view()
        self.assertEqual(self.game.queue.to_dict(), state)

    def test_create_with_seed(self) -> None:
        a = TetrisStack.create(capacity=4, seed=99)
        b = TetrisStack.create(capacity=4, seed=99)
        self.assertEqual(a.queue.capacity, 4)
        self.assertEqual(a.start(), b.start())
        self.assertEqual(a.play_turn(), b.play_turn())


if __name__ == "__main__":
    unittest.main()
