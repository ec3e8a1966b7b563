import queue
import types

import pytest

pytest.importorskip("tkinter")

from PingCrystal import CrystalApp
from presenter import WHITE, ColorToggle, DisplayState, Failure, FailureReason, Success


def make_app(color_enabled=False):
    """A display-free stand-in carrying CrystalApp's state, with render/after recorded."""
    app = types.SimpleNamespace(
        result_queue=queue.Queue(),
        color_toggle=ColorToggle(enabled=color_enabled),
        display_state=DisplayState(color_enabled=color_enabled),
        last_result=None,
        renders=[],
        scheduled=[],
    )
    app.render = lambda: app.renders.append(app.display_state)
    app.after = lambda ms, callback: app.scheduled.append(ms)
    app.apply_result = lambda result: CrystalApp.apply_result(app, result)
    app.process_probe_results = lambda: CrystalApp.process_probe_results(app)
    return app


def test_queue_is_drained_and_last_result_wins():
    app = make_app()
    for result in (Success(20), Failure(FailureReason.TIMEOUT), Success(70)):
        app.result_queue.put(result)

    CrystalApp.process_probe_results(app)

    assert app.result_queue.empty()
    assert app.last_result == Success(70)
    assert app.display_state == DisplayState(text="70", title="70ms", color_enabled=False, color=WHITE)
    assert [state.text for state in app.renders] == ["20", "NA", "70"]
    assert app.scheduled == [50]


def test_toggle_represents_last_result():
    app = make_app()
    app.result_queue.put(Success(70))
    CrystalApp.process_probe_results(app)

    CrystalApp.toggle_color(app)
    assert app.display_state.color == (128, 128, 255)
    assert app.display_state.color_enabled is True

    CrystalApp.toggle_color(app)
    assert app.display_state.color == WHITE
    assert app.display_state.text == "70"
    assert app.renders[-1] == app.display_state


def test_toggle_before_any_result_keeps_na():
    app = make_app()
    CrystalApp.toggle_color(app)
    assert app.display_state == DisplayState(color_enabled=True)
    assert len(app.renders) == 1


def test_color_enabled_result_is_tinted():
    app = make_app(color_enabled=True)
    app.result_queue.put(Success(20))
    CrystalApp.process_probe_results(app)
    assert app.display_state.color == (215, 215, 255)


def test_bad_queue_item_does_not_stop_rescheduling(capsys):
    app = make_app()
    app.result_queue.put("bogus")
    app.result_queue.put(Success(5))

    CrystalApp.process_probe_results(app)
    assert app.scheduled == [50]
    out, err = capsys.readouterr()
    assert "[ERROR] Exception in process_probe_results" in out
    assert "AttributeError" in err

    # the item behind the bad one is picked up on the next tick
    CrystalApp.process_probe_results(app)
    assert app.scheduled == [50, 50]
    assert app.last_result == Success(5)
    assert app.display_state.text == "5"
