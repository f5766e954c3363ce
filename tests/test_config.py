import pytest

from mazecarve.config import DEFAULTS, MazeConfig
from mazecarve.errors import InvalidDimension, InvalidGeometry

def test_defaults():
    assert (DEFAULTS.width, DEFAULTS.height) == (32, 32)
    assert DEFAULTS.cell_size == 32
    assert DEFAULTS.image_size == (32 * 32 + 8, 32 * 32 + 8)
    assert DEFAULTS.validate() is DEFAULTS

def test_validate_rejects():
    with pytest.raises(InvalidDimension):
        MazeConfig(width=0).validate()
    with pytest.raises(InvalidGeometry):
        MazeConfig(open_space=0).validate()

def test_from_env_overlay():
    env = {"MAZECARVE_WIDTH": "10", "MAZECARVE_SEED": "0x2A", "MAZECARVE_WALL": ""}
    cfg = MazeConfig.from_env(env)
    assert cfg.width == 10 and cfg.seed == 42
    assert cfg.height == DEFAULTS.height and cfg.wall_thickness == DEFAULTS.wall_thickness

def test_from_env_bad_value():
    with pytest.raises(ValueError, match="MAZECARVE_HEIGHT"):
        MazeConfig.from_env({"MAZECARVE_HEIGHT": "tall"})
