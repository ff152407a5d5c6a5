import unittest

from tridice.board import Board
from tridice.errors import UndefinedCell
from tridice.strategy.search import can_reach, full_paths, path_directions, reach_from
from tridice.types import Direction, TurnPlan


class ReachSearchTests(unittest.TestCase):
    def setUp(self):
        self.board = Board(height=4)

    def test_discovery_order_and_paths(self):
        reach = reach_from(self.board, 33, 2)
        self.assertEqual(list(reach), [33, 32, 31, 21, 34, 35, 23, 44, 43, 45])
        self.assertEqual(reach[33], [])
        self.assertEqual(reach[32], [33])
        self.assertEqual(reach[21], [33, 32])
        self.assertEqual(reach[45], [33, 44])

    def test_zero_budget(self):
        self.assertEqual(reach_from(self.board, 11, 0), {11: []})

    def test_unknown_origin(self):
        with self.assertRaises(UndefinedCell):
            reach_from(self.board, 12, 2)

    def test_full_paths_include_endpoints(self):
        paths = full_paths(self.board, 33, 2)
        self.assertEqual(sorted(paths), [21, 23, 31, 35, 43, 45])
        self.assertEqual(paths[35], [33, 34, 35])

    def test_can_reach_needs_exact_budget(self):
        self.assertTrue(can_reach(self.board, 33, 35, 2))
        self.assertFalse(can_reach(self.board, 33, 34, 2))
        self.assertTrue(can_reach(self.board, 33, 34, 1))
        self.assertFalse(can_reach(self.board, 33, 47, 2))

    def test_full_budget_walk_replaces_shorter_path(self):
        # the smallest loop back to a cell goes around a six-cell ring
        reach = reach_from(self.board, 33, 6)
        self.assertEqual(len(reach[33]), 6)
        self.assertEqual(reach[33][0], 33)
        self.assertTrue(can_reach(self.board, 33, 33, 6))

    def test_no_immediate_backtrack(self):
        for origin in self.board.cell_ids:
            for path in full_paths(self.board, origin, 4).values():
                for a, c in zip(path, path[2:]):
                    self.assertNotEqual(a, c, path)

    def test_paths_follow_tip_neighbors(self):
        for path in full_paths(self.board, 22, 3).values():
            for a, b in zip(path, path[1:]):
                self.assertIn(b, self.board.tip_neighbors(a))

    def test_path_directions(self):
        self.assertEqual(path_directions([33, 34, 35]), [Direction.RIGHT, Direction.RIGHT])
        self.assertEqual(path_directions([33, 44, 43]), [Direction.DOWN, Direction.LEFT])
        self.assertEqual(path_directions([34, 23, 22, 11]), [Direction.UP, Direction.LEFT, Direction.UP])
        self.assertEqual(path_directions([11]), [])

    def test_turn_plan_directions_match_path(self):
        path = full_paths(self.board, 33, 2)[35]
        plan = TurnPlan("escape", 10, path, target_cell=35)
        self.assertEqual(plan.directions, path_directions(path))
        self.assertEqual(TurnPlan("place", 10, target_cell=11).directions, [])


if __name__ == "__main__":
    unittest.main()
