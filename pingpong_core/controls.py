# pingpong_core/controls.py
import enum

from pingpong_core.engine import Direction, PingPongEngine


class Key(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


class InputMapper:
    """Turns key transitions into engine directions.

    Only the last transition counts: releasing either arrow stops the paddle
    even while the other one is still held down.
    """

    def __init__(self, engine: PingPongEngine):
        self.engine = engine

    def press(self, key: Key):
        if key is Key.LEFT:
            self.engine.handle_input(Direction.LEFT)
        elif key is Key.RIGHT:
            self.engine.handle_input(Direction.RIGHT)

    def release(self, key: Key):
        if key in (Key.LEFT, Key.RIGHT):
            self.engine.handle_input(Direction.NONE)
