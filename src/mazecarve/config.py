import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .errors import InvalidDimension, InvalidGeometry

ENV_PREFIX = "MAZECARVE_"


@dataclass(frozen=True)
class MazeConfig:
    # Grid size in cells
    width: int = 32
    height: int = 32
    # Render geometry in pixels
    wall_thickness: int = 8
    open_space: int = 24
    # None -> draw a fresh seed per run
    seed: Optional[int] = None

    @property
    def cell_size(self) -> int:
        return self.wall_thickness + self.open_space

    @property
    def image_size(self) -> Tuple[int, int]:
        return (
            self.width * self.cell_size + self.wall_thickness,
            self.height * self.cell_size + self.wall_thickness,
        )

    def validate(self) -> "MazeConfig":
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimension(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if self.wall_thickness < 1 or self.open_space < 1:
            raise InvalidGeometry(
                f"wall_thickness and open_space must be >= 1, "
                f"got {self.wall_thickness} and {self.open_space}"
            )
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ, base: "Optional[MazeConfig]" = None) -> "MazeConfig":
        """
        Overlay MAZECARVE_WIDTH / _HEIGHT / _WALL / _SPACE / _SEED on top of
        `base` (DEFAULTS if omitted). Unset keys keep the base value.
        """
        base = base or DEFAULTS
        fields = {
            "width": "WIDTH",
            "height": "HEIGHT",
            "wall_thickness": "WALL",
            "open_space": "SPACE",
            "seed": "SEED",
        }
        values = {}
        for attr, key in fields.items():
            raw = environ.get(ENV_PREFIX + key)
            if raw is None or raw.strip() == "":
                values[attr] = getattr(base, attr)
                continue
            try:
                values[attr] = int(raw, 0)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX + key} must be an integer, got {raw!r}") from None
        return cls(**values)


# Global defaults (tools may overlay env/CLI values)
DEFAULTS = MazeConfig()
