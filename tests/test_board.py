import unittest

from reversi_core.board import DIRECTIONS, Board, Coord, Disk, Side
from reversi_core.errors import (
    BoardSizeError,
    EmptyCellError,
    OccupiedError,
    OutOfBoundsError,
)


class TestSideAndDisk(unittest.TestCase):
    def test_given_each_side_when_opposite_then_maps_to_the_other(self):
        self.assertIs(Side.DARK.opposite(), Side.LIGHT)
        self.assertIs(Side.LIGHT.opposite(), Side.DARK)
        self.assertIs(Side.DARK.opposite().opposite(), Side.DARK)

    def test_given_disk_when_flipped_then_new_disk_of_other_side(self):
        d = Disk(Side.DARK)
        self.assertEqual(d.flipped(), Disk(Side.LIGHT))
        self.assertEqual(d.side, Side.DARK)


class TestCoord(unittest.TestCase):
    def test_given_out_of_range_values_when_constructing_then_bounds_error(self):
        with self.assertRaises(OutOfBoundsError):
            Coord(8, 0)
        with self.assertRaises(OutOfBoundsError):
            Coord(0, -1)
        Coord(3, 3, size=4)

    def test_given_inner_coord_when_stepping_all_directions_then_neighbours(self):
        c = Coord(3, 3)
        got = {(n.row, n.col) for n in (c.step(d) for d in DIRECTIONS)}
        self.assertEqual(len(got), 8)
        self.assertNotIn((3, 3), got)
        self.assertEqual(c, Coord(3, 3))  # step does not mutate

    def test_given_corner_coord_when_stepping_off_grid_then_bounds_error(self):
        with self.assertRaises(OutOfBoundsError):
            Coord(0, 0).step((-1, 0))
        with self.assertRaises(OutOfBoundsError):
            Coord(7, 7).step((1, 1))


class TestBoard(unittest.TestCase):
    def test_given_bad_sizes_when_building_empty_board_then_size_error(self):
        for size in (0, 2, 5, 7, 28):
            with self.assertRaises(BoardSizeError):
                Board.empty(size)
        self.assertEqual(Board.empty(4).occupied(), 0)

    def test_given_empty_cell_when_placing_then_new_board_and_original_untouched(self):
        b0 = Board.empty()
        c = b0.coord(2, 5)
        b1 = b0.place_disk(Side.LIGHT, c)
        self.assertIsNone(b0.get_cell(c))
        self.assertEqual(b1.get_disk(c), Disk(Side.LIGHT))
        self.assertEqual(b1.count(Side.LIGHT), 1)
        self.assertEqual(b1.count(Side.DARK), 0)

    def test_given_occupied_cell_when_placing_then_occupied_error(self):
        b = Board.empty().place_disk(Side.DARK, Coord(0, 0))
        with self.assertRaises(OccupiedError):
            b.place_disk(Side.LIGHT, Coord(0, 0))

    def test_given_empty_cell_when_flipping_or_reading_disk_then_empty_cell_error(self):
        b = Board.empty()
        with self.assertRaises(EmptyCellError):
            b.flip_disk(Coord(1, 1))
        with self.assertRaises(EmptyCellError):
            b.get_disk(Coord(1, 1))

    def test_given_disk_when_flipped_then_side_changes(self):
        b = Board.empty().place_disk(Side.DARK, Coord(1, 1)).flip_disk(Coord(1, 1))
        self.assertEqual(b.get_disk(Coord(1, 1)).side, Side.LIGHT)

    def test_given_coord_for_larger_board_when_reading_then_bounds_error(self):
        with self.assertRaises(OutOfBoundsError):
            Board.empty(8).get_cell(Coord(9, 9, size=10))
        # In range on both boards is fine.
        self.assertIsNone(Board.empty(8).get_cell(Coord(1, 1, size=10)))

    def test_given_rows_when_from_rows_then_cells_and_counts_match(self):
        b = Board.from_rows([
            "X O . .",
            ". . . .",
            ". . . .",
            ". . . O",
        ])
        self.assertEqual(b.size, 4)
        self.assertEqual(b.count(Side.DARK), 1)
        self.assertEqual(b.count(Side.LIGHT), 2)
        self.assertEqual(b.get_disk(b.coord(3, 3)).side, Side.LIGHT)
        self.assertFalse(b.is_full())
        with self.assertRaises(ValueError):
            Board.from_rows(["X?..", "....", "....", "...."])
        with self.assertRaises(ValueError):
            Board.from_rows(["X...", "...", "....", "...."])

    def test_given_board_when_pretty_then_symbols_labels_and_marks(self):
        b = Board.from_rows(["XO..", "....", "....", "...."])
        txt = b.pretty([Coord(1, 1, 4)])
        lines = txt.splitlines()
        self.assertEqual(lines[0].split(), ["a", "b", "c", "d"])
        self.assertEqual(lines[1].split(), ["1", "X", "O", ".", "."])
        self.assertEqual(lines[2].split(), ["2", ".", "*", ".", "."])

    def test_given_coord_sized_for_other_board_when_localising_then_reanchored(self):
        b = Board.empty(4)
        c = b.local(Coord(3, 0))
        self.assertEqual(c, Coord(3, 0, 4))
        with self.assertRaises(OutOfBoundsError):
            c.step((1, 0))
        placed = b.place_disk(Side.DARK, Coord(1, 1))
        self.assertEqual(placed.get_disk(Coord(1, 1, 4)).side, Side.DARK)
