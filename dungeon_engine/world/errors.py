class DungeonDataError(ValueError):
    """Static dungeon data broke an invariant it is trusted to keep."""


class LevelNameError(DungeonDataError):
    pass


class WallCodeError(DungeonDataError):
    pass
