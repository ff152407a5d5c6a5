import random
import unittest

from tridice.errors import IllegalTip
from tridice.orientation import Orientation
from tridice.types import Direction, PointingDirection


class OrientationTests(unittest.TestCase):
    def test_default_faces(self):
        o = Orientation()
        self.assertEqual(o.faces, [1, 2, 3, 4, 0])
        self.assertEqual(o.top, 2)
        self.assertEqual(o.secondary_face, 4)
        self.assertIs(o.pointing_direction, PointingDirection.UP)
        self.assertEqual(str(o), "1,2,3,4,0")

    def test_tip_right(self):
        o = Orientation()
        o.tip_move(Direction.RIGHT)
        self.assertEqual(o.faces, [4, 1, 2, 0, 3])
        self.assertIs(o.pointing_direction, PointingDirection.DOWN)

    def test_tip_left(self):
        o = Orientation()
        o.tip_move("left")
        self.assertEqual(o.faces, [2, 3, 4, 0, 1])

    def test_tip_down_moves_top_into_secondary(self):
        o = Orientation()
        o.tip_move(Direction.DOWN)
        self.assertEqual(o.faces, [1, 4, 3, 0, 2])
        self.assertEqual(o.top, 4)

    def test_tip_up_needs_empty_up_slot(self):
        o = Orientation()
        self.assertFalse(o.can_tip(Direction.UP))
        with self.assertRaises(IllegalTip) as ctx:
            o.tip_move(Direction.UP)
        self.assertEqual(ctx.exception.direction, "up")
        self.assertEqual(o.faces, [1, 2, 3, 4, 0])

    def test_tip_then_inverse_restores(self):
        for d in (Direction.RIGHT, Direction.LEFT, Direction.DOWN):
            o = Orientation()
            o.tip_move(d)
            o.tip_move(d.inverse)
            self.assertEqual(o.faces, [1, 2, 3, 4, 0], d)

    def test_every_tip_flips_pointing(self):
        rng = random.Random(3)
        o = Orientation()
        for _ in range(50):
            before = o.pointing_direction
            choices = [d for d in Direction if o.can_tip(d)]
            o.tip_move(rng.choice(choices))
            self.assertIsNot(o.pointing_direction, before)
            self.assertEqual(sorted(o.faces), [0, 1, 2, 3, 4])

    def test_rotate_right_keeps_top(self):
        o = Orientation()
        o.rotate_in_place(Direction.RIGHT)
        self.assertEqual(o.faces, [1, 2, 4, 0, 3])
        self.assertIs(o.pointing_direction, PointingDirection.DOWN)

    def test_rotate_right_on_down_pointing_turns_left(self):
        o = Orientation([1, 2, 4, 0, 3])
        o.rotate_in_place(Direction.RIGHT)
        self.assertEqual(o.faces, [3, 2, 4, 1, 0])
        self.assertEqual(o.top, 2)

    def test_rotate_rejects_vertical(self):
        with self.assertRaises(ValueError):
            Orientation().rotate_in_place(Direction.UP)

    def test_invalid_faces_rejected(self):
        for faces in ([1, 2, 3, 0, 0], [1, 1, 3, 4, 0], [1, 2, 3, 4], [1, 2, 3, 4, 5]):
            with self.assertRaises(ValueError):
                Orientation(faces)

    def test_copy_is_independent(self):
        o = Orientation()
        c = o.copy()
        c.tip_move(Direction.RIGHT)
        self.assertEqual(o.faces, [1, 2, 3, 4, 0])

    def test_randomize_and_walk_stay_valid(self):
        rng = random.Random(7)
        o = Orientation()
        for _ in range(20):
            o.randomize(rng)
            Orientation(o.faces)
        o.random_walk(30, rng)
        Orientation(o.faces)


if __name__ == "__main__":
    unittest.main()
