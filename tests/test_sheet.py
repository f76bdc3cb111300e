import pytest

from boardcut.models import OccupiedRect, Orientation
from boardcut.packing import Sheet


def test_first_piece_goes_to_origin():
    sheet = Sheet(96, 48)
    placement = sheet.try_place(48, 24, True)

    assert (placement.x, placement.y) == (0, 0)
    assert placement.orientation is Orientation.NATURAL
    assert not placement.rotated
    assert sheet.occupied == (OccupiedRect(0, 0, 48, 24),)


def test_bottom_left_prefers_lowest_then_leftmost():
    sheet = Sheet(96, 48)
    sheet.try_place(24, 24, False)
    second = sheet.try_place(24, 24, False)
    assert (second.x, second.y) == (24, 0)

    for _ in range(2):
        sheet.try_place(24, 24, False)
    fifth = sheet.try_place(24, 24, False)
    assert (fifth.x, fifth.y) == (0, 24)


def test_rotates_only_when_natural_orientation_fails():
    sheet = Sheet(96, 48)
    sheet.try_place(90, 40, True)

    placement = sheet.try_place(8, 30, True)

    assert placement.rotated
    assert (placement.x, placement.y) == (0, 40)
    assert sheet.occupied[-1] == OccupiedRect(0, 40, 30, 8)


def test_rotation_forbidden_leaves_sheet_unchanged():
    sheet = Sheet(96, 48)
    sheet.try_place(90, 40, True)
    before = sheet.occupied

    assert sheet.try_place(8, 30, False) is None
    assert sheet.occupied == before


def test_swapped_orientation_on_empty_sheet():
    sheet = Sheet(96, 48)
    placement = sheet.try_place(40, 60, True)

    assert placement.rotated
    assert sheet.occupied == (OccupiedRect(0, 0, 60, 40),)


def test_piece_larger_than_sheet_never_fits():
    sheet = Sheet(96, 48)
    assert sheet.try_place(200, 200, True) is None
    assert sheet.find_space(97, 1) is None
    assert sheet.is_empty


def test_exact_fit_fills_sheet():
    sheet = Sheet(96, 48)
    assert sheet.try_place(96, 48, False) is not None
    assert sheet.compute_waste() == 0
    assert sheet.try_place(1, 1, True) is None


def test_compute_waste_is_pure():
    sheet = Sheet(96, 48)
    sheet.try_place(48, 24, False)

    assert sheet.compute_waste() == 96 * 48 - 48 * 24
    assert sheet.compute_waste() == 96 * 48 - 48 * 24
    assert len(sheet.occupied) == 1


def test_edge_touching_rectangles_do_not_overlap():
    a = OccupiedRect(0, 0, 10, 10)
    assert not a.overlaps(OccupiedRect(10, 0, 5, 5))
    assert not a.overlaps(OccupiedRect(0, 10, 5, 5))
    assert a.overlaps(OccupiedRect(9, 9, 5, 5))
    assert a.overlaps(OccupiedRect(2, 2, 1, 1))


def test_orientation_extents():
    assert Orientation.NATURAL.extents(60, 36) == (60, 36)
    assert Orientation.SWAPPED.extents(60, 36) == (36, 60)


@pytest.mark.parametrize("width,height", [(0, 48), (96, 0), (-1, 48)])
def test_invalid_sheet_extents_rejected(width, height):
    with pytest.raises(ValueError):
        Sheet(width, height)


@pytest.mark.parametrize("length,width", [(0, 10), (10, 0), (-5, 10)])
def test_invalid_piece_dimensions_rejected(length, width):
    sheet = Sheet(96, 48)
    with pytest.raises(ValueError):
        sheet.try_place(length, width, True)
