from typer.testing import CliRunner

from remonitor import __version__
from remonitor.cli.commands import app
from remonitor.store import ConfigStore, PlacementConfig

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_show_without_record(isolated_settings):
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "No saved placement" in result.output


def test_show_with_record(isolated_settings):
    ConfigStore(isolated_settings).save(PlacementConfig(monitor_index=2, fullscreen=True))
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert "Monitor: 2" in result.output
    assert "Fullscreen: yes" in result.output


def test_reset_clears_record(isolated_settings):
    ConfigStore(isolated_settings).save(PlacementConfig(monitor_index=0, fullscreen=False))
    result = runner.invoke(app, ["reset"])
    assert result.exit_code == 0
    assert not isolated_settings.exists()


def test_monitors_lists_screens(isolated_settings, monkeypatch):
    from screeninfo import Monitor

    import remonitor.backends.tk_backend as tk_backend

    monkeypatch.setattr(
        tk_backend,
        "get_monitors",
        lambda: [Monitor(x=0, y=0, width=1920, height=1080, name="DP-1", is_primary=True)],
    )
    result = runner.invoke(app, ["monitors"])
    assert result.exit_code == 0
    assert "DP-1" in result.output
    assert "1920x1080+0+0" in result.output
