import unittest

from tridice.board import Board, cell_ids
from tridice.errors import (
    AlreadyFull,
    DiceDoesntFit,
    EmptyCell,
    InvalidNeighbor,
    NeighborAlreadySet,
    UndefinedCell,
)
from tridice.orientation import Orientation
from tridice.piece import Piece
from tridice.types import Direction, PointingDirection


class BoardTopologyTests(unittest.TestCase):
    def setUp(self):
        self.board = Board(height=4)

    def test_cell_ids_row_by_row(self):
        self.assertEqual(
            self.board.cell_ids,
            [11, 21, 22, 23, 31, 32, 33, 34, 35, 41, 42, 43, 44, 45, 46, 47],
        )
        self.assertEqual(list(cell_ids(2)), [11, 21, 22, 23])

    def test_pointing_alternates_by_slot(self):
        self.assertIs(self.board.cell(11).pointing_direction, PointingDirection.UP)
        self.assertIs(self.board.cell(22).pointing_direction, PointingDirection.DOWN)
        self.assertIs(self.board.cell(47).pointing_direction, PointingDirection.UP)
        self.assertEqual(len(self.board.cells_pointing("up")), 10)
        self.assertEqual(self.board.cells_pointing(PointingDirection.DOWN), [22, 32, 34, 42, 44, 46])

    def test_apex_only_links_down(self):
        self.assertEqual(
            self.board.neighbor_ids(11),
            {"up": None, "down": 22, "left": None, "right": None},
        )

    def test_inner_cell_links(self):
        self.assertEqual(
            self.board.neighbor_ids(22),
            {"up": 11, "down": 33, "left": 21, "right": 23},
        )

    def test_left_right_links_are_mirrored(self):
        for cid, cell in self.board.cells.items():
            right = cell.neighbor(Direction.RIGHT)
            if right is not None:
                self.assertEqual(self.board.cell(right).neighbor(Direction.LEFT), cid)

    def test_edges_have_no_outside_links(self):
        self.assertIsNone(self.board.cell(21).neighbor(Direction.UP))
        self.assertIsNone(self.board.cell(35).neighbor(Direction.RIGHT))
        self.assertIsNone(self.board.cell(44).neighbor(Direction.DOWN))

    def test_tip_neighbors_use_flat_edge(self):
        self.assertEqual(self.board.tip_neighbors(11), [22])
        self.assertEqual(self.board.tip_neighbors(22), [21, 23, 11])
        self.assertEqual(self.board.tip_neighbors(33), [32, 34, 44])
        self.assertEqual(self.board.tip_neighbors(41), [42])

    def test_undefined_cell(self):
        with self.assertRaises(UndefinedCell) as ctx:
            self.board.cell(99)
        self.assertEqual(ctx.exception.cell_id, 99)
        self.assertEqual(ctx.exception.context(), {"cell_id": 99})

    def test_link_errors(self):
        cell = self.board.cell(22)
        with self.assertRaises(NeighborAlreadySet):
            cell.set_neighbor(Direction.UP, self.board.cell(11))
        lone = Board(height=2).cell(21)
        with self.assertRaises(InvalidNeighbor):
            lone.set_neighbor(Direction.DOWN, self.board.cell(33))

    def test_height_bounds(self):
        for height in (0, 6):
            with self.assertRaises(ValueError):
                Board(height=height)
        tallest = Board(height=5)
        self.assertEqual(len(tallest.cells), 25)
        self.assertEqual(tallest.cell_ids[-1], 59)
        self.assertTrue(all(cid // 10 <= 5 for cid in tallest.cell_ids))


class BoardOccupancyTests(unittest.TestCase):
    def setUp(self):
        self.board = Board(height=4)
        self.piece = Piece(piece_id=10, owner_id=1)
        self.other = Piece(piece_id=20, owner_id=2)

    def test_place_and_move(self):
        self.board.place(self.piece, 11)
        self.assertEqual(self.board.occupant_id(11), 10)
        self.assertEqual(self.piece.cell_id, 11)
        self.board.place(self.piece, 33)
        self.assertIsNone(self.board.occupant_id(11))
        self.assertEqual(self.board.occupant_id(33), 10)
        self.assertNotIn(11, [c for c in self.board.cell_ids if not self.board.cell(c).is_empty])

    def test_place_rejects_occupied_and_wrong_pointing(self):
        self.board.place(self.piece, 11)
        with self.assertRaises(AlreadyFull):
            self.board.place(self.other, 11)
        with self.assertRaises(DiceDoesntFit):
            self.board.place(self.other, 22)
        self.other.set_orientation(Orientation([1, 2, 3, 0, 4]))
        self.board.place(self.other, 22)
        self.assertEqual(self.board.occupant_id(22), 20)

    def test_remove(self):
        with self.assertRaises(EmptyCell):
            self.board.remove(11, self.piece)
        self.board.place(self.piece, 11)
        self.board.remove(11, self.piece)
        self.assertIsNone(self.piece.cell_id)
        self.assertIn(11, self.board.empty_cells())


if __name__ == "__main__":
    unittest.main()
