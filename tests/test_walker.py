import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest

import utils
from grid import Grid
from walker import Walker, TraversalResult, traverse
from errors import (
    NavigationError,
    NoStartFound,
    MultipleOrMissingStart,
    MultipleOrMissingEnd,
    InvalidCharacter,
    DeadEnd,
    ForkDetected,
    BrokenPath,
    FakeTurn,
    InfiniteLoop,
)
from sample_maps import VALID_MAPS, EXPECTED_RESULTS, INVALID_MAPS, EXPECTED_ERRORS


def test_straight_line():
    result = traverse(["@-A-x"])
    assert result.letters == "A"
    assert result.path == "@-A-x"


def test_map_with_a_turn():
    result = traverse(["@", "|", "+-A-+", "    |", "    x"])
    assert result == TraversalResult("A", "@|+-A-+|x")


def test_stuff_after_end_is_ignored():
    result = traverse(["  @-A-+", "      |", "      +-B--x-C--D"])
    assert result == TraversalResult("AB", "@-A-+|+-B--x")


def test_junction_off_by_one_column():
    # the bend sits one column left of the segment below it
    with pytest.raises(DeadEnd) as exc:
        traverse(["  @-A-+", "       |", "       +-B--x-C--D"])
    assert exc.value.position == (0, 6)


def test_fake_turn():
    with pytest.raises(FakeTurn) as exc:
        traverse(["  @-A-+-B-x"])
    assert exc.value.position == (0, 6)
    assert exc.value.kind == "FakeTurn"


def test_two_ends():
    with pytest.raises(MultipleOrMissingEnd):
        traverse(["  x-B-@-A-x"])


def test_broken_vertical_segment():
    with pytest.raises(BrokenPath) as exc:
        traverse(["   @--A-+", "        |", "         ", "        B-x"])
    assert exc.value.position == (1, 8)


@pytest.mark.parametrize("name", list(VALID_MAPS))
def test_sample_maps(name):
    letters, path = EXPECTED_RESULTS[name]
    result = traverse(VALID_MAPS[name])
    assert result.letters == letters
    assert result.path == path


@pytest.mark.parametrize("name", list(INVALID_MAPS))
def test_invalid_sample_maps(name):
    with pytest.raises(EXPECTED_ERRORS[name]):
        traverse(INVALID_MAPS[name])


def test_missing_start():
    with pytest.raises(NoStartFound):
        traverse(["-A-x"])


def test_missing_start_is_checked_before_end():
    with pytest.raises(MultipleOrMissingStart):
        traverse(["@-A-@"])


def test_missing_end():
    with pytest.raises(MultipleOrMissingEnd):
        traverse(["@-A-+", "    |", "    B"])


def test_unreached_extra_start_still_rejected():
    with pytest.raises(MultipleOrMissingStart):
        traverse(["@-A-x", "", "   @"])


def test_markers_checked_before_moving():
    # The first move would hit an invalid character, but the marker count wins
    with pytest.raises(MultipleOrMissingEnd):
        traverse(["@*x", "x"])


def test_invalid_character_on_path():
    with pytest.raises(InvalidCharacter) as exc:
        traverse(["@-A-*-x"])
    assert exc.value.char == '*'
    assert exc.value.position == (0, 4)


def test_invalid_character_off_path_is_ignored():
    result = traverse(["@-A-x", "", "  #? not a path"])
    assert result.letters == "A"


def test_start_without_exit():
    with pytest.raises(DeadEnd):
        traverse(["@ x"])


def test_start_with_two_exits():
    with pytest.raises(ForkDetected):
        traverse(["x-@-A"])


def test_junction_leading_nowhere():
    with pytest.raises(DeadEnd) as exc:
        traverse(["@-+", "", "x"])
    assert exc.value.position == (0, 2)


def test_fork_at_junction():
    with pytest.raises(ForkDetected):
        traverse([
            "        x",
            "        |",
            "   @--A-+",
            "        |",
            "        B",
        ])


def test_fork_at_letter_corner():
    with pytest.raises(ForkDetected):
        traverse([
            "      x",
            "      |",
            "  @-A-B",
            "      |",
            "      +-C",
        ])


def test_letter_as_corner():
    result = traverse(["@-A", "  |", "  x"])
    assert result == TraversalResult("A", "@-A|x")


def test_letter_corner_without_exit():
    with pytest.raises(BrokenPath):
        traverse(["@-A  x"])


def test_straight_segment_out_of_bounds():
    with pytest.raises(BrokenPath):
        traverse(["@--", "", "x"])


def test_crossing_is_walked_straight():
    result = traverse([
        "    x",
        "    |",
        "@---|-+",
        "    | |",
        "    +-+",
    ])
    assert result.path == "@---|-+|+-+|||x"
    assert result.letters == ""


def test_letter_crossed_twice_counted_once():
    result = traverse([
        "     +-+",
        "     | |",
        " @---A-+",
        "     |",
        "     x",
    ])
    assert result.letters == "A"
    assert result.path == "@---A-+|+-+|A|x"
    assert result.path.count("A") == 2


def test_same_letter_at_different_cells_counted_each_time():
    result = traverse(["@-A-A-x"])
    assert result.letters == "AA"


def test_path_invariants():
    for name, rows in VALID_MAPS.items():
        result = traverse(rows)
        assert result.path.startswith('@')
        assert result.path.endswith('x')
        assert len(result.path) == result.steps + 1
        assert len(result.trail) == len(result.path)
        letter_cells = [pos for pos in result.trail if Grid(rows).cell_at(pos).isupper()]
        assert len(result.letters) == len(set(letter_cells))


def test_traverse_is_deterministic():
    rows = VALID_MAPS["keep direction, even in a compact space"]
    results = [traverse(rows) for _ in range(5)]
    assert all(r == results[0] for r in results)
    assert all(r.trail == results[0].trail for r in results)


def test_traverse_accepts_grid():
    grid = Grid(["@-B-x"])
    assert traverse(grid) == traverse(["@-B-x"])


def test_step_budget():
    with pytest.raises(InfiniteLoop):
        traverse(["@-A-x"], max_steps=3)
    assert traverse(["@-A-x"], max_steps=4).steps == 4


def test_step_budget_from_utils(monkeypatch):
    monkeypatch.setattr(utils, "MAX_STEPS", 2)
    with pytest.raises(InfiniteLoop):
        traverse(["@-A-x"])
    assert traverse(["@-x"]).path == "@-x"


def test_walker_is_single_use_state():
    walker = Walker(Grid(["@-A-x"]))
    result = walker.run()
    assert walker.steps == 4
    assert walker.seen_letters == {(0, 2)}
    assert result.to_dict() == {"letters": "A", "path": "@-A-x", "steps": 4}


def test_all_errors_are_navigation_errors():
    for cls in (NoStartFound, MultipleOrMissingStart, MultipleOrMissingEnd, InvalidCharacter,
                DeadEnd, ForkDetected, BrokenPath, FakeTurn, InfiniteLoop):
        assert issubclass(cls, NavigationError)


def test_error_message_names_position():
    with pytest.raises(NavigationError) as exc:
        traverse(["  @-A-+-B-x"])
    assert "0,6" in str(exc.value)


def test_junction_ignores_straight_through_neighbour():
    result = traverse(["@-+-A", "  |", "  x"])
    assert result == TraversalResult("", "@-+|x")


def test_traverse_accepts_text():
    assert traverse("@-A-x") == TraversalResult("A", "@-A-x")
    assert traverse("@\n|\n+-A-+\n    |\n    x\n").path == "@|+-A-+|x"
