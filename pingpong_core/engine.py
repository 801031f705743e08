# pingpong_core/engine.py
import enum
import hashlib
import logging
from dataclasses import dataclass
from typing import Optional, Union

from pygame.math import Vector2 as Vec2

from pingpong_core.game_config import CFG, EngineConfig

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"

    @classmethod
    def coerce(cls, value: Union["Direction", str, None]) -> "Direction":
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"unknown direction: {value!r}") from None


# ---------------- Entities ----------------
@dataclass
class Paddle:
    x: float
    y: float
    w: int
    h: int
    speed: float
    dx: float = 0.0

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2


@dataclass
class Ball:
    pos: Vec2
    vel: Vec2
    r: int
    base_speed: float
    friction: float
    min_speed: float

    @property
    def speed(self) -> float:
        return self.vel.length()


@dataclass(frozen=True)
class Snapshot:
    """What the renderer gets each frame. Never written back."""

    paddle_x: float
    paddle_y: float
    paddle_width: int
    paddle_height: int
    ball_x: float
    ball_y: float
    ball_radius: int
    score: int
    is_over: bool
    ball_speed: float
    min_speed: float

    @property
    def ball_stopped(self) -> bool:
        return self.ball_speed < self.min_speed

    @property
    def end_message(self) -> Optional[str]:
        if not self.is_over:
            return None
        return "Ball Stopped!" if self.ball_stopped else "Game Over!"


def hit_position(ball_x: float, paddle: Paddle) -> float:
    """Offset of the contact point from the paddle centre, -1 at the left
    edge and 1 at the right edge. Not clamped."""
    return (ball_x - paddle.center_x) / (paddle.w / 2)


# ---------------- Engine ----------------
class PingPongEngine:
    """
    Single-player paddle/ball simulation.
    Owns the paddle, the ball, the score and the over flag; the host only
    talks to it through handle_input / tick / reset and reads snapshot().
    """

    def __init__(self, cfg: EngineConfig = CFG):
        self.cfg = cfg
        self.paddle = Paddle(cfg.paddle_x, cfg.paddle_y, cfg.paddle_w, cfg.paddle_h, cfg.paddle_speed)
        self.ball = Ball(
            Vec2(cfg.ball_x, cfg.ball_y),
            Vec2(cfg.ball_dx, cfg.ball_dy),
            cfg.ball_r,
            cfg.ball_speed,
            cfg.friction,
            cfg.min_speed,
        )
        self.score: int = 0
        self.is_over: bool = False

    # ---------------- Input ----------------
    def handle_input(self, direction: Union[Direction, str, None]):
        d = Direction.coerce(direction)
        if d is Direction.LEFT:
            self.paddle.dx = -self.paddle.speed
        elif d is Direction.RIGHT:
            self.paddle.dx = self.paddle.speed
        else:
            self.paddle.dx = 0.0

    # ---------------- Physics update ----------------
    def tick(self, dt: Optional[float] = None):
        if self.is_over:
            return

        if dt is None:
            scale = 1.0
        elif dt <= 0:
            return
        else:
            scale = dt * self.cfg.fps

        f_w, f_h = self.cfg.field_w, self.cfg.field_h
        p = self.paddle
        b = self.ball

        # paddle: hard clamp, velocity untouched
        p.x += p.dx * scale
        if p.x < 0:
            p.x = 0.0
        if p.x + p.w > f_w:
            p.x = float(f_w - p.w)

        # friction before moving
        b.vel *= b.friction if scale == 1.0 else b.friction ** scale
        b.pos += b.vel * scale

        if b.speed < b.min_speed:
            self._finish("stopped")
            return

        if b.pos.x + b.r > f_w or b.pos.x - b.r < 0:
            b.vel.x *= -1
        if b.pos.y - b.r < 0:
            b.vel.y *= -1

        # no swept test: a ball already past the paddle top still bounces
        if b.pos.y + b.r > p.y and p.x < b.pos.x < p.x + p.w:
            self._bounce_off_paddle()

        if b.pos.y + b.r > f_h:
            self._finish("bottom")

    def _bounce_off_paddle(self):
        b = self.ball
        hit = hit_position(b.pos.x, self.paddle)

        b.vel.x = hit * b.base_speed * self.cfg.deflect_scale
        b.vel.y = -abs(b.vel.y)
        b.vel *= self.cfg.boost

        self.score += 1
        logger.debug("paddle hit at %.2f, score=%d, vel=(%.2f, %.2f)", hit, self.score, b.vel.x, b.vel.y)

    def _finish(self, reason: str):
        self.is_over = True
        logger.info("round over (%s), final score %d", reason, self.score)

    # ---------------- Round control ----------------
    def reset(self):
        cfg = self.cfg
        self.ball.pos = Vec2(cfg.ball_x, cfg.ball_y)
        self.ball.vel = Vec2(cfg.ball_dx, cfg.ball_dy)
        self.ball.base_speed = cfg.ball_speed
        self.paddle.x = cfg.paddle_x
        self.score = 0
        self.is_over = False
        logger.info("round reset")

    # ---------------- Read side ----------------
    def snapshot(self) -> Snapshot:
        p, b = self.paddle, self.ball
        return Snapshot(
            paddle_x=p.x,
            paddle_y=p.y,
            paddle_width=p.w,
            paddle_height=p.h,
            ball_x=b.pos.x,
            ball_y=b.pos.y,
            ball_radius=b.r,
            score=self.score,
            is_over=self.is_over,
            ball_speed=b.speed,
            min_speed=b.min_speed,
        )

    def state_hash(self) -> str:
        p, b = self.paddle, self.ball
        parts = [
            f"{round(p.x, 6)},{round(p.dx, 6)}",
            f"{round(b.pos.x, 6)},{round(b.pos.y, 6)}",
            f"{round(b.vel.x, 6)},{round(b.vel.y, 6)}",
            f"{self.score},{int(self.is_over)}",
        ]
        payload = (";".join(parts)).encode("utf-8")
        return hashlib.md5(payload).hexdigest()
