import pytest

from pingpong_core.loop import FrameLoop


def test_run_renders_every_frame(engine):
    frames = []
    loop = FrameLoop(engine, frames.append)
    loop.run(max_frames=10)

    assert len(frames) == 10
    assert loop.frames == 10
    assert not loop.running
    assert frames[-1] == engine.snapshot()


def test_renderer_can_stop_the_loop(engine):
    loop = None

    def render(snap):
        if snap.is_over:
            loop.stop()

    loop = FrameLoop(engine, render)
    loop.run(max_frames=10_000)
    assert engine.is_over
    assert loop.frames < 10_000


def test_fixed_step_ignores_clock(engine):
    loop = FrameLoop(engine, lambda snap: None, clock=lambda: 0.5)
    loop.step()
    assert engine.ball.pos.x == pytest.approx(400 + 6 * 0.99)


def test_variable_step_uses_clock(engine):
    loop = FrameLoop(engine, lambda snap: None, clock=lambda: 2 / 60, fixed_step=False)
    loop.step()
    assert engine.ball.pos.x == pytest.approx(400 + 2 * 6 * 0.99 ** 2)


def test_start_stop_are_idempotent(engine):
    loop = FrameLoop(engine, lambda snap: None)
    loop.start()
    loop.start()
    assert loop.running
    loop.stop()
    loop.stop()
    assert not loop.running
