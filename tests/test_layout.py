import pytest

from dungeon_engine.constants import PILLAR_TILE, WALL_TILE
from dungeon_engine.world.errors import LevelNameError
from dungeon_engine.world.layout import ChunkLayoutGenerator

DOOR = range(3, 6)


def door_cells(side):
    return {
        "north": [(x, 8) for x in DOOR],
        "east": [(8, y) for y in DOOR],
        "south": [(x, 0) for x in DOOR],
        "west": [(0, y) for y in DOOR],
    }[side]


def test_start_hall_is_open_on_all_sides_without_pillars():
    obstacles = ChunkLayoutGenerator(seed=1).layout("Start_Hall", (0, 0))

    assert set(obstacles.values()) == {WALL_TILE}
    assert len(obstacles) == 32 - 12
    for side in ("north", "east", "south", "west"):
        for cell in door_cells(side):
            assert cell not in obstacles


def test_doors_follow_the_wall_code():
    # 5 = walls north and south, open east and west.
    obstacles = ChunkLayoutGenerator(seed=1).layout("Level_5", (2, 3))

    for cell in door_cells("north") + door_cells("south"):
        assert obstacles[cell] == WALL_TILE
    for cell in door_cells("east") + door_cells("west"):
        assert cell not in obstacles


def test_corners_are_always_walls():
    obstacles = ChunkLayoutGenerator(seed=1).layout("Level_0", (4, 4))
    for corner in [(0, 0), (0, 8), (8, 0), (8, 8)]:
        assert obstacles[corner] == WALL_TILE


def test_pillars_stay_off_the_corridors():
    generator = ChunkLayoutGenerator(seed=42)
    for cx in range(-5, 5):
        for cy in range(-5, 5):
            obstacles = generator.layout("Level_0", (cx, cy))
            pillars = [cell for cell, value in obstacles.items() if value == PILLAR_TILE]
            assert len(pillars) <= generator.max_pillars
            for lx, ly in pillars:
                assert 0 < lx < 8 and 0 < ly < 8
                assert lx not in DOOR and ly not in DOOR


def test_layout_is_deterministic_per_seed_and_cell():
    a = ChunkLayoutGenerator(seed=9).layout("Level_3", (1, 2))
    b = ChunkLayoutGenerator(seed=9).layout("Level_3", (1, 2))
    assert a == b


def test_layout_rejects_unknown_level_names():
    with pytest.raises(LevelNameError):
        ChunkLayoutGenerator(seed=0).layout("Boss_Room", (0, 0))


def test_door_must_fit_inside_the_wall():
    with pytest.raises(ValueError):
        ChunkLayoutGenerator(seed=0, cells_per_chunk=4, door_width=3)
