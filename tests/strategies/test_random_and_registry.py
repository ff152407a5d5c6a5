import random
import unittest

from tridice.game import Game
from tridice.orientation import Orientation
from tridice.strategy import registry
from tridice.strategy.random_strategy import RandomStrategy
from tridice.strategy.tactician import TacticianStrategy


class RegistryTests(unittest.TestCase):
    def test_available(self):
        self.assertEqual(registry.available(), ["random", "tactician"])

    def test_create(self):
        self.assertIsInstance(registry.create("Tactician"), TacticianStrategy)
        strategy = registry.create("random", rng_seed=3)
        self.assertIsInstance(strategy, RandomStrategy)
        self.assertEqual(strategy.rng_seed, 3)

    def test_unknown_name(self):
        with self.assertRaises(KeyError):
            registry.create("nope")


class RandomStrategyTests(unittest.TestCase):
    def test_fresh_game_only_places(self):
        game = Game(rng=random.Random(0))
        options = RandomStrategy(rng_seed=1).options(game)
        self.assertEqual(len(options), 16)
        self.assertTrue(all(o.kind == "place" and o.piece_id == 10 for o in options))

    def test_same_seed_same_choice(self):
        plans = [RandomStrategy(rng_seed=9).plan(Game(rng=random.Random(0))) for _ in range(2)]
        self.assertEqual(plans[0], plans[1])

    def test_moves_only_to_empty_cells(self):
        game = Game(rng=random.Random(0), pieces_per_player=1)
        piece = game.piece(10)
        piece.set_orientation(Orientation([1, 2, 3, 4, 0]))
        game.select_piece(piece)
        game.place_selected_at(33)
        game.deselect()
        blocker = game.piece(20)
        blocker.set_orientation(Orientation([1, 2, 3, 4, 0]))
        game.select_piece(blocker)
        game.place_selected_at(35)
        game.deselect()

        targets = sorted(o.target_cell for o in RandomStrategy(rng_seed=0).options(game))
        self.assertEqual(targets, [21, 23, 31, 43, 45])

    def test_take_turn_plays_a_legal_turn(self):
        game = Game(rng=random.Random(4))
        strategy = RandomStrategy(rng_seed=4)
        plan = strategy.take_turn(game)
        self.assertEqual(plan.kind, "place")
        self.assertEqual(game.piece_at(plan.target_cell).owner_id, 1)
        self.assertIs(game.current_player, game.p2)


if __name__ == "__main__":
    unittest.main()
