import itertools
import random
from collections import Counter

import pytest

from dungeon_engine.world.errors import LevelNameError, WallCodeError
from dungeon_engine.world.wall_codes import (
    Direction,
    generate_wall_code,
    is_open,
    level_identifier,
    level_name_for_code,
    level_name_from_identifier,
    wall_code_from_level_name,
)


def test_direction_bits_and_opposites():
    assert [d.bit for d in Direction] == [1, 2, 4, 8]
    assert Direction.NORTH.opposite is Direction.SOUTH
    assert Direction.EAST.opposite is Direction.WEST
    assert Direction.WEST.offset == (-1, 0)


def test_code_zero_is_open_everywhere():
    assert all(is_open(0, d) for d in Direction)
    assert not any(is_open(15, d) for d in Direction)


def test_unknown_neighbors_draw_uniformly_over_zero_to_fourteen():
    rng = random.Random(1234)
    counts = Counter(generate_wall_code((None, None, None, None), rng) for _ in range(15000))

    assert set(counts) == set(range(15))
    for value in range(15):
        assert 800 < counts[value] < 1200


def test_open_neighbor_always_clears_shared_bit():
    rng = random.Random(7)
    # Neighbor to the north with an open south side.
    for _ in range(500):
        code = generate_wall_code((0b1011, None, None, None), rng)
        assert is_open(code, Direction.NORTH)


def test_walled_neighbor_always_sets_shared_bit():
    rng = random.Random(7)
    # Neighbor to the east with a wall on its west side.
    for _ in range(500):
        code = generate_wall_code((None, 0b1000, None, None), rng)
        assert not is_open(code, Direction.EAST)


def test_every_neighbor_combination_agrees_on_shared_edges():
    rng = random.Random(99)
    options = [None] + list(range(15))
    for neighbors in itertools.product(options, repeat=4):
        try:
            code = generate_wall_code(neighbors, rng)
        except WallCodeError:
            # Only reachable when no known neighbor opens onto this chunk.
            assert not any(
                n is not None and is_open(n, d.opposite) for d, n in zip(Direction, neighbors)
            )
            continue

        assert 0 <= code <= 14
        for direction, neighbor in zip(Direction, neighbors):
            if neighbor is not None:
                assert is_open(code, direction) == is_open(neighbor, direction.opposite)


def test_forced_fully_walled_code_is_fatal():
    class AlwaysSeven(random.Random):
        def randint(self, a, b):
            return 7

    # 7 leaves only the west side open; a walled west neighbor closes it.
    with pytest.raises(WallCodeError):
        generate_wall_code((None, None, None, 0b0010), AlwaysSeven())


def test_level_names_round_trip():
    for code in range(15):
        assert wall_code_from_level_name(level_name_for_code(code)) == code
    assert wall_code_from_level_name("Start_Hall") == 0


@pytest.mark.parametrize("name", ["Level_15", "Level_", "Level_x", "Level_-1", "Hall_3", "start_hall", ""])
def test_malformed_level_names_are_rejected(name):
    with pytest.raises(LevelNameError):
        wall_code_from_level_name(name)


def test_level_name_for_out_of_range_code_is_rejected():
    with pytest.raises(WallCodeError):
        level_name_for_code(15)


def test_level_identifier_points_into_the_project_file():
    identifier = level_identifier("Level_3")
    assert identifier == "ldtk/dungeon_of_madness.ldtk#worlds:Dungeon/Level_3"
    assert level_name_from_identifier(identifier) == "Level_3"

    with pytest.raises(LevelNameError):
        level_name_from_identifier("Level_3")
