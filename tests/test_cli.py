import json
from pathlib import Path

from click.testing import CliRunner

from linkexploder.cli import cli
from linkexploder.settings import Location, load_settings


def test_canvas_command(vault_path: Path, linked_vault) -> None:
    result = CliRunner().invoke(cli, ["--vault", str(vault_path), "canvas", "hub", "--no-open"])

    assert result.exit_code == 0, result.output
    assert (vault_path / "hub.canvas").exists()


def test_canvas_command_dry_run(vault_path: Path, linked_vault) -> None:
    result = CliRunner().invoke(cli, ["--vault", str(vault_path), "canvas", "projects/beta.md", "--dry-run"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert {n["id"] for n in data["nodes"]} == {"projects/beta.md", "gamma.md", "alpha.md", "hub.md"}


def test_canvas_command_missing_note(vault_path: Path, linked_vault) -> None:
    result = CliRunner().invoke(cli, ["--vault", str(vault_path), "canvas", "nope", "--no-open"])

    assert result.exit_code == 1


def test_vault_detected_from_working_directory(vault_path: Path, linked_vault, monkeypatch) -> None:
    monkeypatch.chdir(vault_path / "projects")

    result = CliRunner().invoke(cli, ["canvas", "beta", "--no-open"])

    assert result.exit_code == 0, result.output
    assert (vault_path / "beta.canvas").exists()


def test_missing_vault_is_an_error(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["--vault", str(tmp_path / "nowhere"), "config", "show"])

    assert result.exit_code != 0


def test_config_set_and_show(vault_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["--vault", str(vault_path), "config", "set", "--location", "specified", "--folder", "canvases/"]
    )
    assert result.exit_code == 0, result.output

    settings = load_settings(vault_path)
    assert settings.new_file_location is Location.SPECIFIED
    assert settings.custom_file_location == "canvases"

    result = runner.invoke(cli, ["--vault", str(vault_path), "config", "show", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"new_file_location": "specified", "custom_file_location": "canvases"}


def test_config_set_requires_an_option(vault_path: Path) -> None:
    result = CliRunner().invoke(cli, ["--vault", str(vault_path), "config", "set"])

    assert result.exit_code == 2


def test_canvas_uses_configured_folder(vault_path: Path, linked_vault) -> None:
    runner = CliRunner()
    runner.invoke(cli, ["--vault", str(vault_path), "config", "set", "--location", "specified", "--folder", "maps"])

    result = runner.invoke(cli, ["--vault", str(vault_path), "canvas", "gamma", "--no-open"])

    assert result.exit_code == 0, result.output
    assert (vault_path / "maps" / "gamma.canvas").exists()
