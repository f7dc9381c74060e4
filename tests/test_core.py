"""Tests for core data structures."""

from core import BOARD_HEIGHT, BOARD_WIDTH, KNIGHT_OFFSETS, Pos, Region


class TestPosIndex:
    def test_origin_is_index_zero(self) -> None:
        assert Pos(0, 0).index() == 0

    def test_rows_are_contiguous(self) -> None:
        assert Pos(3, 2).index() == 2 * BOARD_WIDTH + 3

    def test_index_is_injective_over_the_board(self) -> None:
        indices = {Pos(x, y).index() for x in range(BOARD_WIDTH) for y in range(BOARD_HEIGHT)}
        assert len(indices) == BOARD_WIDTH * BOARD_HEIGHT

    def test_from_index_inverts_index(self) -> None:
        for x in range(BOARD_WIDTH):
            for y in range(BOARD_HEIGHT):
                p = Pos(x, y)
                assert Pos.from_index(p.index()) == p

    def test_custom_width(self) -> None:
        p = Pos(1, 3)
        assert p.index(width=4) == 13
        assert Pos.from_index(13, width=4) == p


class TestPosBounds:
    def test_corners_are_in_bounds(self) -> None:
        assert Pos(0, 0).in_bounds()
        assert Pos(BOARD_WIDTH - 1, BOARD_HEIGHT - 1).in_bounds()

    def test_negative_coordinates_are_out_of_bounds(self) -> None:
        assert not Pos(-1, 0).in_bounds()
        assert not Pos(0, -1).in_bounds()

    def test_edge_overflow_is_out_of_bounds(self) -> None:
        assert not Pos(BOARD_WIDTH, 0).in_bounds()
        assert not Pos(0, BOARD_HEIGHT).in_bounds()


class TestPosEquality:
    def test_equal_iff_both_coordinates_match(self) -> None:
        assert Pos(2, 3) == Pos(2, 3)
        assert Pos(2, 3) != Pos(3, 2)

    def test_usable_as_dict_key(self) -> None:
        assert {Pos(1, 1): "a"}[Pos(1, 1)] == "a"


class TestKnightOffsets:
    def test_eight_distinct_knight_jumps(self) -> None:
        assert len(set(KNIGHT_OFFSETS)) == 8
        for dx, dy in KNIGHT_OFFSETS:
            assert {abs(dx), abs(dy)} == {1, 2}

    def test_offset_moves_position(self) -> None:
        assert Pos(4, 4).offset(-2, 1) == Pos(2, 5)


class TestRegion:
    def test_equal_when_cells_match(self) -> None:
        a = Region(frozenset([Pos(0, 0), Pos(1, 0)]))
        b = Region(frozenset([Pos(1, 0), Pos(0, 0)]))
        assert a == b

    def test_cells_are_a_set(self) -> None:
        region = Region(frozenset([Pos(0, 0), Pos(1, 0)]))
        assert Pos(0, 0) in region.cells
        assert Pos(5, 5) not in region.cells
