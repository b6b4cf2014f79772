"""
Tests for the engine configuration.
"""

from unittest import TestCase, main

from game2048.config import BOARD_SIZE, EngineConfig


class TestEngineConfig(TestCase):
    """Test defaults and validation of EngineConfig."""

    def test_defaults(self):
        config = EngineConfig()
        self.assertEqual(config.size, BOARD_SIZE)
        self.assertEqual(config.initial_tiles, 2)
        self.assertEqual(config.spawn_tiles, 1)
        self.assertEqual(config.tile_probs, {2: 0.9, 4: 0.1})
        self.assertIsNone(config.seed)

    def test_defaults_not_shared(self):
        """Each config gets its own probability table."""
        first, second = EngineConfig(), EngineConfig()
        first.tile_probs[2] = 0.5
        self.assertEqual(second.tile_probs[2], 0.9)

    def test_fixed_size(self):
        with self.assertRaises(ValueError):
            EngineConfig(size=5)

    def test_negative_counts(self):
        with self.assertRaises(ValueError):
            EngineConfig(spawn_tiles=-1)

    def test_probabilities_must_sum_to_one(self):
        with self.assertRaises(ValueError):
            EngineConfig(tile_probs={2: 0.8, 4: 0.1})

    def test_tiles_must_be_powers_of_two(self):
        with self.assertRaises(ValueError):
            EngineConfig(tile_probs={3: 1.0})
        with self.assertRaises(ValueError):
            EngineConfig(tile_probs={1: 1.0})
        with self.assertRaises(ValueError):
            EngineConfig(tile_probs={2.0: 1.0})

    def test_empty_probabilities(self):
        with self.assertRaises(ValueError):
            EngineConfig(tile_probs={})


if __name__ == '__main__':
    main()
