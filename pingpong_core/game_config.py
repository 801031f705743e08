# pingpong_core/game_config.py
from dataclasses import dataclass

from pingpong_core.constants import WIDTH, HEIGHT, FPS


@dataclass(frozen=True)
class EngineConfig:
    field_w: int = WIDTH
    field_h: int = HEIGHT

    paddle_w: int = 100
    paddle_h: int = 10
    paddle_x: float = 350.0
    paddle_y: float = 580.0
    paddle_speed: float = 8.0

    ball_x: float = 400.0
    ball_y: float = 300.0
    ball_r: int = 8
    ball_speed: float = 6.0      # base speed used by paddle deflection
    ball_dx: float = 6.0
    ball_dy: float = 6.0

    friction: float = 0.99       # per frame, multiplicative
    min_speed: float = 0.5       # below this the ball counts as stopped

    deflect_scale: float = 1.5   # dx = hit * ball_speed * deflect_scale
    boost: float = 1.1           # applied to both components after a paddle hit

    fps: int = FPS               # frames per second a fixed tick stands for

    def __post_init__(self):
        if self.field_w <= 0 or self.field_h <= 0:
            raise ValueError(f"field size must be positive, got {self.field_w}x{self.field_h}")
        if self.paddle_w <= 0 or self.paddle_h <= 0:
            raise ValueError("paddle size must be positive")
        if self.paddle_w > self.field_w:
            raise ValueError("paddle is wider than the field")
        if self.ball_r <= 0:
            raise ValueError("ball radius must be positive")
        if not 0.0 < self.friction < 1.0:
            raise ValueError(f"friction must be in (0, 1), got {self.friction}")
        if self.min_speed < 0:
            raise ValueError("min_speed cannot be negative")
        if self.fps <= 0:
            raise ValueError("fps must be positive")


CFG = EngineConfig()
