"""Tests for the board model and extent adapter."""

import dataclasses

import pytest

from fumen_renderer.board import (
    PIECE_OFFSETS,
    BoardPage,
    CellColor,
    PiecePlacement,
    PieceType,
    Rotation,
    has_garbage,
    page_extent,
    piece_cells,
    sequence_has_garbage,
)
from fumen_renderer.constants import MAX_BOARD_HEIGHT


def test_t_piece_spawn_cells():
    """A spawn-oriented T occupies three cells in a row plus one above the centre."""
    piece = PiecePlacement(PieceType.T, Rotation.NORTH, 4, 0)

    assert set(piece.cells()) == {(3, 0), (4, 0), (5, 0), (4, 1)}


def test_i_piece_east_is_vertical():
    """An east-facing I stands in the centre column."""
    piece = PiecePlacement(PieceType.I, Rotation.EAST, 4, 2)

    assert set(piece.cells()) == {(4, 3), (4, 2), (4, 1), (4, 0)}
    assert piece.top == 3


def test_t_piece_south_points_down():
    """Rotating twice flips the T's nub below the centre."""
    piece = PiecePlacement(PieceType.T, Rotation.SOUTH, 4, 1)

    assert set(piece.cells()) == {(3, 1), (4, 1), (5, 1), (4, 0)}


def test_offset_table_covers_every_shape_and_rotation():
    """Every piece resolves to four distinct cells in every rotation."""
    for kind in PieceType:
        for rotation in Rotation:
            offsets = PIECE_OFFSETS[(kind, rotation)]
            assert len(set(offsets)) == 4


def test_piece_color_matches_cell_color():
    """Piece identities share their value with the matching cell colour."""
    assert PieceType.S.color is CellColor.S
    assert PieceType.I.color == 1
    assert CellColor.EMPTY == 0


def test_empty_page_has_extent_zero():
    """A page with no blocks and no piece is one row tall."""
    assert page_extent(BoardPage()) == 0
    assert page_extent(BoardPage.from_rows([[0] * 10] * 23)) == 0


def test_extent_ignores_trailing_empty_rows():
    """Empty rows stored above the stack do not raise the extent."""
    page = BoardPage.from_rows([[8] * 9 + [0], [0] * 10, [0] * 10, [0] * 10])

    assert page_extent(page) == 0


def test_extent_is_highest_filled_row():
    """The extent is the index of the topmost row holding a block."""
    page = BoardPage.from_diagram(
        """
        ____T_____
        ___TTT____
        XXXXXXXXX_
        """
    )

    assert len(page.field) == 3
    assert page_extent(page) == 2


def test_extent_counts_active_piece():
    """A floating piece above the stack raises the extent to its top cell."""
    page = BoardPage(piece=PiecePlacement(PieceType.T, Rotation.NORTH, 4, 5))

    assert page_extent(page) == 6


def test_piece_cells_carry_piece_color():
    """The adapter reports the piece's absolute cells in the piece's colour."""
    page = BoardPage(piece=PiecePlacement(PieceType.O, Rotation.NORTH, 4, 0))

    cells = piece_cells(page)

    assert sorted(cells) == [
        (4, 0, CellColor.O),
        (4, 1, CellColor.O),
        (5, 0, CellColor.O),
        (5, 1, CellColor.O),
    ]


def test_piece_cells_empty_without_piece():
    """Pages without an active piece contribute no piece cells."""
    assert piece_cells(BoardPage()) == []


def test_diagram_rows_are_stored_bottom_up():
    """The last diagram line becomes row 0."""
    page = BoardPage.from_diagram(
        """
        I_________
        JJJ_______
        """
    )

    assert page.field[0][:3] == (CellColor.J, CellColor.J, CellColor.J)
    assert page.field[1][0] is CellColor.I
    assert len(page.field) == 2


def test_garbage_detection_is_sequence_wide():
    """One page with garbage is enough for the whole sequence to need the strip."""
    plain = BoardPage()
    garbage = BoardPage.from_diagram(
        """
        __________
        !XXXX_XXXX
        """
    )

    assert not has_garbage(plain)
    assert has_garbage(garbage)
    assert sequence_has_garbage([plain, garbage, plain])
    assert not sequence_has_garbage([plain, plain])


def test_rows_must_be_board_width():
    """Rows narrower than the board are rejected when a page is built."""
    with pytest.raises(ValueError, match="10 cells"):
        BoardPage.from_rows([[0] * 9])


def test_rows_are_capped_at_max_height():
    """Pages taller than the largest supported field are rejected."""
    BoardPage.from_rows([[0] * 10] * MAX_BOARD_HEIGHT)

    with pytest.raises(ValueError, match="at most 40 rows"):
        BoardPage.from_rows([[0] * 10] * (MAX_BOARD_HEIGHT + 1))


def test_pages_are_immutable():
    """Board pages cannot be modified after construction."""
    page = BoardPage()

    with pytest.raises(dataclasses.FrozenInstanceError):
        page.comment = "changed"  # type: ignore[misc]
