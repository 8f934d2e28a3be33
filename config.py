# config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board / session
    cols: int = 20
    rows: int = 20
    tick_ms: int = 150
    growth: int = 4                  # segments added per food, absorbed one per tick
    seed: Optional[int] = None

    # window loop
    fps: int = 60

    # render
    render_cell: int = 24
    render_title: str = "Snake"
    render_grid_lines: bool = True
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # session log (CSV, one row per tick)
    log_path: Optional[str] = None

    def __post_init__(self):
        if self.cols < 1 or self.rows < 1:
            raise ValueError(f"board must be at least 1x1, got {self.cols}x{self.rows}")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.growth < 0:
            raise ValueError(f"growth must be >= 0, got {self.growth}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
