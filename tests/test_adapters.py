"""
Tests for the input adapter and the best-score stores.
"""

import json
import tempfile
from pathlib import Path
from unittest import TestCase, main

import numpy as np

from tilegrid.adapters.keyboard import InputAdapter, direction_from_key, direction_from_swipe
from tilegrid.adapters.store import JsonScoreStore, MemoryScoreStore
from tilegrid.config import GameConfig
from tilegrid.core.gamemove import Direction
from tilegrid.envs.engine import GridEngine
from tilegrid.session import GameSession


class TestKeys(TestCase):
    def test_bindings(self):
        self.assertIs(direction_from_key("ArrowUp"), Direction.UP)
        self.assertIs(direction_from_key("ArrowRight"), Direction.RIGHT)
        self.assertIs(direction_from_key("down"), Direction.DOWN)
        self.assertIs(direction_from_key("a"), Direction.LEFT)

    def test_unbound(self):
        self.assertIsNone(direction_from_key("x"))
        self.assertIsNone(direction_from_key(None))


class TestSwipe(TestCase):
    def test_short_swipe_ignored(self):
        """Swipes shorter than the threshold on both axes produce no direction."""
        self.assertIsNone(direction_from_swipe((100, 100), (120, 90)))
        self.assertIsNone(direction_from_swipe((0, 0), (29, -29)))

    def test_dominant_axis(self):
        self.assertIs(direction_from_swipe((0, 0), (50, 10)), Direction.RIGHT)
        self.assertIs(direction_from_swipe((0, 0), (-50, 10)), Direction.LEFT)
        self.assertIs(direction_from_swipe((0, 0), (5, -40)), Direction.UP)
        self.assertIs(direction_from_swipe((0, 0), (0, 40)), Direction.DOWN)

    def test_threshold_edges(self):
        """A swipe exactly at the threshold counts; equal axes count as vertical."""
        self.assertIs(direction_from_swipe((0, 0), (30, 0)), Direction.RIGHT)
        self.assertIs(direction_from_swipe((0, 0), (40, 40)), Direction.DOWN)
        self.assertIsNone(direction_from_swipe((0, 0), (60, 0), threshold=100))


class TestInputAdapter(TestCase):
    def setUp(self):
        engine = GridEngine.from_grid(
            [[0, 2, 0, 2], [0] * 4, [0] * 4, [0] * 4], rng=np.random.default_rng(1), config=GameConfig()
        )
        self.session = GameSession(engine)
        self.adapter = InputAdapter(self.session)

    def test_threshold_from_config(self):
        self.assertEqual(self.adapter.threshold, 30.0)

    def test_key_moves(self):
        self.assertTrue(self.adapter.handle_key("ArrowLeft"))
        self.assertEqual(self.session.engine.grid[0, 0], 4)

    def test_unbound_key(self):
        self.assertFalse(self.adapter.handle_key("q"))
        self.assertEqual(np.count_nonzero(self.session.engine.grid), 2)

    def test_swipe(self):
        self.assertFalse(self.adapter.handle_swipe((10, 10), (20, 20)))
        self.assertTrue(self.adapter.handle_swipe((200, 10), (20, 20)))
        self.assertEqual(self.session.engine.score, 4)


class TestScoreStores(TestCase):
    def setUp(self):
        self.directory = tempfile.TemporaryDirectory()
        self.path = Path(self.directory.name) / "nested" / "best.json"

    def tearDown(self):
        self.directory.cleanup()

    def test_memory(self):
        store = MemoryScoreStore()
        self.assertEqual(store.load_best(), 0)
        store.save_best(64)
        self.assertEqual(store.load_best(), 64)
        with self.assertRaises(ValueError):
            store.save_best(-1)

    def test_missing_file(self):
        self.assertEqual(JsonScoreStore(self.path).load_best(), 0)

    def test_round_trip(self):
        """Scores survive a new store instance and parent directories are created."""
        JsonScoreStore(self.path).save_best(2048)
        self.assertEqual(JsonScoreStore(self.path).load_best(), 2048)
        self.assertEqual(json.loads(self.path.read_text()), {"2048-best-score": 2048})

    def test_other_keys_kept(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({"theme": "dark"}))
        JsonScoreStore(self.path, key="best").save_best(12)
        self.assertEqual(json.loads(self.path.read_text()), {"theme": "dark", "best": 12})

    def test_corrupt_file(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("not json")
        with self.assertLogs("tilegrid.adapters.store", level="WARNING"):
            self.assertEqual(JsonScoreStore(self.path).load_best(), 0)

    def test_invalid_value(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({"2048-best-score": "lots"}))
        with self.assertLogs("tilegrid.adapters.store", level="WARNING"):
            self.assertEqual(JsonScoreStore(self.path).load_best(), 0)

    def test_from_config(self):
        store = JsonScoreStore.from_config(GameConfig(best_score_path=self.path, best_score_key="best"))
        store.save_best(8)
        self.assertEqual(json.loads(self.path.read_text()), {"best": 8})

    def test_negative_rejected(self):
        with self.assertRaises(ValueError):
            JsonScoreStore(self.path).save_best(-5)
        self.assertFalse(self.path.exists())


if __name__ == "__main__":
    main()
