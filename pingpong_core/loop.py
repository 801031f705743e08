# pingpong_core/loop.py
import logging
from typing import Callable, Optional

from pingpong_core.engine import PingPongEngine, Snapshot

logger = logging.getLogger(__name__)

RenderFn = Callable[[Snapshot], None]
ClockFn = Callable[[], float]


class FrameLoop:
    """
    Cooperative frame driver: tick the engine, then hand the snapshot to the
    renderer. Whoever embeds the engine decides when it starts and stops.

    clock() returns the seconds elapsed for the frame (and may block to cap
    the frame rate). With fixed_step the elapsed time is ignored and every
    frame is one engine step.
    """

    def __init__(self, engine: PingPongEngine, render: RenderFn,
                 clock: Optional[ClockFn] = None, fixed_step: bool = True):
        self.engine = engine
        self.render = render
        self.clock = clock
        self.fixed_step = fixed_step

        self.running: bool = False
        self.frames: int = 0

    def start(self):
        if self.running:
            return
        self.running = True
        logger.debug("frame loop started")

    def stop(self):
        if not self.running:
            return
        self.running = False
        logger.debug("frame loop stopped after %d frames", self.frames)

    def step(self, dt: Optional[float] = None):
        if dt is None and self.clock:
            dt = self.clock()
        if self.fixed_step:
            self.engine.tick()
        else:
            self.engine.tick(dt)
        self.render(self.engine.snapshot())
        self.frames += 1

    def run(self, max_frames: Optional[int] = None):
        self.start()
        try:
            while self.running:
                if max_frames is not None and self.frames >= max_frames:
                    break
                self.step()
        finally:
            self.stop()
