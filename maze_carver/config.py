from dataclasses import dataclass, asdict
from typing import Optional, Tuple

Color = Tuple[int, int, int]

@dataclass
class MazeConfig:
    # Window
    screen_width: int = 800
    screen_height: int = 800
    cell_size: int = 40
    title: str = "Maze Generator"

    # Grid (None -> derived from screen / cell size)
    width: Optional[int] = None
    height: Optional[int] = None

    # Pacing: advance the generator once every N frames
    step_delay: int = 1
    fps: int = 60

    seed: Optional[int] = None

    # Colors
    color_unvisited: Color = (255, 255, 255)
    color_visited: Color = (200, 200, 255)
    color_wall: Color = (0, 0, 0)
    color_current: Color = (255, 100, 100)

    def __post_init__(self):
        # Checked first: width/height are derived by dividing by it
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.width is None:
            self.width = self.screen_width // self.cell_size
        if self.height is None:
            self.height = self.screen_height // self.cell_size
        self.validate()

    def validate(self):
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Maze dimensions must be positive, got {self.width}x{self.height}")
        if self.step_delay < 1:
            raise ValueError(f"step_delay must be at least 1 frame, got {self.step_delay}")
        if self.fps < 1:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @classmethod
    def from_args(cls, args) -> "MazeConfig":
        """Builds a config from an argparse namespace; missing options keep defaults."""
        overrides = {}
        for field_name in ("width", "height", "seed", "step_delay", "cell_size", "fps"):
            value = getattr(args, field_name, None)
            if value is not None:
                overrides[field_name] = value
        return cls(**overrides)

    def to_dict(self):
        return asdict(self)
