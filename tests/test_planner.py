import pytest

from boardcut import BottomLeftPacker, PieceSpec, plan
from boardcut.models import OccupiedRect


def _spec(id_, length, width, quantity=1, rotation=True, name=None):
    return PieceSpec(id=id_, length=length, width=width, quantity=quantity,
                     rotation_allowed=rotation, name=name)


def _assert_valid_layout(outcome):
    """겹침 없음 + 원판 범위 안"""
    for sheet in outcome.sheets:
        rects = [OccupiedRect(p.x, p.y, p.placed_width, p.placed_height) for p in sheet.pieces]
        for i, a in enumerate(rects):
            assert a.x >= 0 and a.y >= 0
            assert a.x + a.width <= outcome.sheet_length
            assert a.y + a.height <= outcome.sheet_width
            for b in rects[i + 1:]:
                assert not a.overlaps(b)


def test_single_board_on_one_sheet():
    outcome = plan([_spec("1", 48, 24)])

    assert len(outcome.sheets) == 1
    placed = outcome.sheets[0].pieces
    assert len(placed) == 1
    assert (placed[0].x, placed[0].y) == (0, 0)
    assert not placed[0].rotated
    assert outcome.unplaceable == []
    assert outcome.total_placed == 1


def test_rotates_board_when_needed_and_allowed():
    outcome = plan([_spec("2", 40, 60)])

    assert outcome.unplaceable == []
    assert outcome.sheets[0].pieces[0].rotated


def test_rotation_forbidden_makes_board_unplaceable():
    spec = _spec("3", 40, 60, rotation=False)
    outcome = plan([spec])

    assert outcome.unplaceable == [spec]
    assert outcome.sheets == []


def test_splits_boards_across_multiple_sheets():
    specs = [_spec(f"b{i}", 24, 24) for i in range(20)]
    outcome = plan(specs)

    assert len(outcome.sheets) > 1
    assert outcome.total_placed == 20
    assert outcome.placed_per_sheet == [8, 8, 4]
    assert outcome.unplaceable == []
    _assert_valid_layout(outcome)


def test_huge_board_is_unplaceable():
    spec = _spec("huge", 200, 200)
    outcome = plan([spec])

    assert outcome.sheets == []
    assert outcome.unplaceable == [spec]
    assert outcome.total_placed == 0
    assert outcome.total_waste == 0


def test_respects_custom_sheet_size():
    spec = _spec("big", 60, 36)

    assert plan([spec]).unplaceable == []

    small = plan([spec], 50, 40)
    assert small.unplaceable == [spec]
    assert small.sheet_length == 50
    assert small.sheet_width == 40


def test_empty_input_gives_empty_outcome():
    outcome = plan([])

    assert outcome.sheets == []
    assert outcome.total_placed == 0
    assert outcome.total_waste == 0
    assert outcome.placed_per_sheet == []
    assert outcome.unplaceable == []


def test_zero_quantity_is_ignored():
    outcome = plan([_spec("none", 10, 10, quantity=0), _spec("neg", 0, 0, quantity=-1)])
    assert outcome.sheets == []
    assert outcome.unplaceable == []


def test_unplaceable_reported_once_per_spec():
    huge = _spec("huge", 200, 200, quantity=3)
    small = _spec("small", 10, 10, quantity=2)

    outcome = plan([huge, small])

    assert outcome.unplaceable == [huge]
    assert len(outcome.sheets) == 1
    assert outcome.total_placed == 2


def test_unplaceable_after_full_sheet_keeps_packing_rest():
    full = _spec("full", 96, 48, rotation=False)
    too_long = _spec("long", 200, 10, rotation=False)
    tiny = _spec("tiny", 10, 10)

    outcome = plan([tiny, too_long, full])

    assert outcome.unplaceable == [too_long]
    assert outcome.placed_per_sheet == [1, 1]
    assert outcome.sheets[0].pieces[0].spec is full
    assert outcome.sheets[1].pieces[0].spec is tiny


def test_unplaceable_in_first_failure_order():
    a = _spec("a", 300, 10, rotation=False)
    b = _spec("b", 10, 300, rotation=False)
    c = _spec("c", 100, 100)

    outcome = plan([c, a, b])

    assert [s.id for s in outcome.unplaceable] == ["c", "a", "b"]


def test_larger_boards_placed_first():
    small = _spec("small", 10, 10)
    big = _spec("big", 50, 40)

    outcome = plan([small, big])

    pieces = outcome.sheets[0].pieces
    assert [p.spec.id for p in pieces] == ["big", "small"]
    assert (pieces[1].x, pieces[1].y) == (50, 0)


def test_equal_area_keeps_input_order():
    first = _spec("first", 20, 10)
    second = _spec("second", 10, 20)

    outcome = plan([first, second])

    assert [p.spec.id for p in outcome.sheets[0].pieces] == ["first", "second"]


def test_no_rotation_flag_is_respected():
    specs = [
        _spec("a", 30, 20, quantity=5, rotation=False),
        _spec("b", 45, 15, quantity=4, rotation=True),
        _spec("c", 12, 40, quantity=6, rotation=False),
        _spec("d", 70, 8, quantity=3, rotation=True),
    ]
    outcome = plan(specs)

    for sheet in outcome.sheets:
        for placed in sheet.pieces:
            if not placed.spec.rotation_allowed:
                assert not placed.rotated
    _assert_valid_layout(outcome)


def test_every_unit_accounted_for():
    specs = [
        _spec("a", 30, 20, quantity=5),
        _spec("b", 100, 100, quantity=4),
        _spec("c", 12, 40, quantity=6, rotation=False),
        _spec("d", 49, 49, quantity=2, rotation=False),
    ]
    outcome = plan(specs)

    unplaced_units = sum(s.quantity for s in outcome.unplaceable)
    assert outcome.total_placed + unplaced_units == sum(s.quantity for s in specs)
    assert outcome.total_placed == sum(outcome.placed_per_sheet)


def test_waste_matches_placed_area():
    specs = [_spec("a", 30, 20, quantity=7), _spec("b", 45, 15, quantity=5)]
    outcome = plan(specs)
    sheet_area = 96 * 48

    for sheet in outcome.sheets:
        used = sum(p.area for p in sheet.pieces)
        assert sheet.waste == pytest.approx(sheet_area - used)
        assert 0 <= sheet.waste < sheet_area
    assert outcome.total_waste == pytest.approx(sum(s.waste for s in outcome.sheets))


def test_plan_is_deterministic():
    specs = [_spec("a", 30, 20, quantity=5), _spec("b", 45, 15, quantity=4)]
    assert plan(specs).to_dict() == plan(specs).to_dict()


def test_packer_matches_plan():
    specs = [_spec("a", 30, 20, quantity=3)]
    packer = BottomLeftPacker(96, 48)
    assert packer.pack(specs).to_dict() == plan(specs).to_dict()


def test_invalid_dimensions_fail_fast():
    with pytest.raises(ValueError):
        plan([_spec("bad", 0, 10)])
    with pytest.raises(ValueError):
        plan([_spec("ok", 10, 10)], 0, 48)
