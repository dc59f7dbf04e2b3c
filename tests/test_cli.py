from __future__ import annotations

import io

import pytest
from rich.console import Console

from pynpf.app import NpfApp
from pynpf.cli import handle_line, main, run_session
from pynpf.config import NpfConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("NPF_DECLINATION", "NPF_LOG_LEVEL", "NPF_LOG_SNAPSHOTS"):
        monkeypatch.delenv(key, raising=False)


def _console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


def _output(console: Console) -> str:
    assert isinstance(console.file, io.StringIO)
    return console.file.getvalue()


def _app() -> NpfApp:
    return NpfApp(NpfConfig(log_snapshots=False), console=_console())


def test_main_once_renders_initial_values() -> None:
    console = _console()

    code = main(["--focal-length", "24", "--sensor-size", "mft", "--once"], console=console)

    assert code == 0
    output = _output(console)
    assert "24 [mm]" in output
    assert "[Micro Four Thirds]" in output
    # One render only: start-up values are applied before the form subscribes.
    assert output.count("NPF rule") == 1


def test_main_runs_scripted_session() -> None:
    console = _console()

    code = main([], console=console, lines=["p 4000", "quit", "f 10"])

    assert code == 0
    output = _output(console)
    assert "4000 [px]" in output
    assert "10 [mm]" not in output


def test_main_overlong_start_up_value_renders_infinity() -> None:
    console = _console()

    code = main(["--pixel-width", "9" * 5000, "--once"], console=console)

    assert code == 0
    assert "Infinity [px]" in _output(console)


def test_main_rejects_bad_environment() -> None:
    console = _console()

    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("NPF_DECLINATION", "polaris")
        code = main(["--once"], console=console)

    assert code == 2
    assert "NPF_DECLINATION" in _output(console)


def test_main_rejects_unknown_log_level() -> None:
    console = _console()

    assert main(["--once", "--log-level", "chatty"], console=console) == 2


def test_handle_line_aliases_and_names() -> None:
    app = _app()

    handle_line(app, "n 2.8")
    handle_line(app, "focal_length 85")
    handle_line(app, "trailType visible")
    handle_line(app, "s apsc-x")

    assert app.snapshot.as_dict() == {
        "sensorSize": "apsc-x",
        "pixelWidth": 6000,
        "focalLength": 85,
        "fNumber": 2.8,
        "trailType": "visible",
    }


def test_handle_line_slide() -> None:
    app = _app()

    handle_line(app, "slide f 300.4")

    assert app.snapshot.focal_length == 300


def test_handle_line_errors_keep_session_alive() -> None:
    app = _app()

    assert handle_line(app, "iso 800") is True
    assert handle_line(app, "s medium-format") is True
    assert handle_line(app, "slide p far") is True

    output = _output(app.view.console)
    assert "unknown configuration field: 'iso'" in output
    assert "medium-format" in output
    assert app.snapshot.sensor_size == "full"


def test_handle_line_help_show_and_quit() -> None:
    app = _app()

    assert handle_line(app, "") is True
    assert handle_line(app, "help") is True
    assert handle_line(app, "show") is True
    assert handle_line(app, "exit") is False

    output = _output(app.view.console)
    assert "pixelWidth" in output
    assert "NPF rule" in output


def test_run_session_stops_at_quit() -> None:
    app = _app()

    run_session(app, ["p 100", "q", "p 200"])

    assert app.snapshot.pixel_width == 100


def test_app_estimate_uses_configured_declination() -> None:
    equator = NpfApp(NpfConfig(log_snapshots=False), console=_console()).estimate()
    north = NpfApp(NpfConfig(declination=60.0, log_snapshots=False), console=_console()).estimate()

    assert north.detailed_seconds == pytest.approx(equator.detailed_seconds * 2)


def test_app_close_detaches_view() -> None:
    app = _app()
    app.close()

    app.store.apply_update("pixelWidth", "10")

    assert _output(app.view.console) == ""
