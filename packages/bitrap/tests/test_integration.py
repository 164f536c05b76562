"""End-to-end: renderer driven by the real RedrawScheduler."""
import math

from bitrap import FillConfig, RedrawScheduler, Renderer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class RecordingCanvas:
    width = 320
    height = 480

    def __init__(self):
        self.shapes = []

    def clear(self, color):
        pass

    def draw_shape(self, color_index, progress, width, height):
        self.shapes.append((color_index, progress))


class Harness:
    """Minimal host: renders once per fired redraw request."""

    def __init__(self, config):
        self.clock = FakeClock()
        self.canvas = RecordingCanvas()
        self.frames = 0
        self.scheduler = RedrawScheduler(self._redraw, clock=self.clock)
        self.renderer = Renderer(self.scheduler, config)

    def _redraw(self):
        self.frames += 1
        self.renderer.render_frame(self.canvas)

    def run_until_idle(self, limit=10_000):
        for _ in range(limit):
            if self.scheduler.run_due() == 0:
                if self.scheduler.pending == 0:
                    return
                self.clock.now = self.scheduler.next_due
        raise AssertionError("animation never went idle")


class TestEndToEnd:
    def test_tap_to_completion(self):
        config = FillConfig(step=0.1 / 7)
        h = Harness(config)
        h.renderer.handle_tap()
        h.run_until_idle()
        cycle = math.ceil(1 / config.step)
        # One frame per tick plus the trailing redraw at rest.
        assert h.frames == cycle + 1
        assert h.renderer.cursor.active.index == 1
        assert not h.renderer.driver.running
        assert h.canvas.shapes[-1] == (1, 0.0)
        assert math.isclose(h.clock.now, cycle * config.delay)

    def test_drawn_progress_is_monotonic_during_fill(self):
        h = Harness(FillConfig(step=0.05))
        h.renderer.handle_tap()
        h.run_until_idle()
        progresses = [p for i, p in h.canvas.shapes if i == 0]
        assert progresses == sorted(progresses)
        assert progresses[0] == 0.0

    def test_full_round_trip(self):
        config = FillConfig(step=0.5)
        h = Harness(config)
        order = [h.renderer.cursor.active.index]
        for _ in range(2 * config.chain_length):
            h.renderer.handle_tap()
            h.run_until_idle()
            order.append(h.renderer.cursor.active.index)
        assert order == [0, 1, 2, 3, 4, 4, 3, 2, 1, 0, 0]
        assert all(n.state.committed_progress == 0.0 for n in h.renderer.cursor.nodes)

    def test_closed_scheduler_never_crashes(self, capsys):
        h = Harness(FillConfig(step=0.25))
        h.renderer.handle_tap()
        h.scheduler.run_due()
        h.scheduler.close()
        # Host keeps rendering on its own; the dropped request is reported.
        while h.renderer.driver.running:
            h.renderer.render_frame(h.canvas)
        assert h.renderer.cursor.active.index == 1
        assert "redraw request dropped" in capsys.readouterr().err
