import pytest

from dungeon_engine.world.bounds import (
    Chunk,
    ChunkBoundsIndex,
    ChunkState,
    Rect,
    cell_anchor,
    cell_at,
    cell_center,
)


def make_chunk(chunk_id, origin, name="Level_0"):
    return Chunk(id=chunk_id, level_name=name, origin=origin, state=ChunkState.BOUNDS_KNOWN)


def test_chunk_at_finds_containing_chunk():
    index = ChunkBoundsIndex()
    chunk = make_chunk(1, (0.0, 0.0))
    index.insert(chunk)

    assert index.chunk_at((72.0, 72.0)) is chunk
    assert index.chunk_at((1000.0, 1000.0)) is None
    assert index.any_contains((72.0, 72.0))
    assert not index.any_contains((1000.0, 1000.0))


def test_bounds_are_inclusive_on_every_edge():
    rect = Rect(0.0, 0.0, 144.0, 144.0)
    for point in [(0.0, 0.0), (144.0, 0.0), (0.0, 144.0), (144.0, 144.0), (72.0, 144.0)]:
        assert rect.contains(point)
    assert not rect.contains((144.01, 72.0))
    assert not rect.contains((72.0, -0.01))


def test_shared_edge_goes_to_first_loaded_chunk():
    index = ChunkBoundsIndex()
    east = make_chunk(2, (144.0, 0.0))
    start = make_chunk(1, (0.0, 0.0), "Start_Hall")
    index.insert(east)
    index.insert(start)

    assert index.chunk_at((144.0, 72.0)) is east
    assert index.chunk_at((100.0, 72.0)) is start


def test_requested_chunks_cannot_be_indexed():
    index = ChunkBoundsIndex()
    chunk = Chunk(id=1, level_name="Level_2", origin=(0.0, 0.0))
    with pytest.raises(ValueError):
        index.insert(chunk)
    assert len(index) == 0


def test_insert_is_idempotent_per_chunk_id():
    index = ChunkBoundsIndex()
    chunk = make_chunk(5, (0.0, 0.0))
    index.insert(chunk)
    index.insert(chunk)
    assert len(index) == 1
    assert 5 in index
    assert list(index) == [chunk]


def test_chunk_reads_wall_code_from_its_name():
    assert make_chunk(1, (0.0, 0.0), "Start_Hall").wall_code == 0
    assert make_chunk(2, (0.0, 0.0), "Level_11").wall_code == 11


def test_cell_helpers():
    assert cell_anchor((1, -1)) == (144.0, -144.0)
    assert cell_center((0, 0)) == (72.0, 72.0)
    assert cell_at((143.9, 0.0)) == (0, 0)
    assert cell_at((-0.1, 150.0)) == (-1, 1)
    assert make_chunk(1, (-144.0, 288.0)).cell == (-1, 2)
