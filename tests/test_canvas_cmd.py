import json
from pathlib import Path

from linkexploder.commands.canvas_cmd import run_canvas
from linkexploder.settings import Location, Settings, save_settings


def _read_canvas(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def test_canvas_written_to_vault_root(vault_path: Path, linked_vault) -> None:
    exit_code = run_canvas(vault_path, "hub", open_file=False)

    assert exit_code == 0
    data = _read_canvas(vault_path / "hub.canvas")
    assert {n["id"] for n in data["nodes"]} == {"hub.md", "alpha.md", "projects/beta.md", "gamma.md", "fan.md"}
    assert {(e["fromNode"], e["toNode"]) for e in data["edges"]} == {
        ("hub.md", "alpha.md"),
        ("hub.md", "projects/beta.md"),
        ("alpha.md", "projects/beta.md"),
        ("projects/beta.md", "gamma.md"),
        ("fan.md", "hub.md"),
    }
    focus = next(n for n in data["nodes"] if n["id"] == "hub.md")
    assert focus["color"] == "1"
    fan = next(n for n in data["nodes"] if n["id"] == "fan.md")
    assert fan["x"] == -1000


def test_second_canvas_gets_suffix(vault_path: Path, linked_vault) -> None:
    assert run_canvas(vault_path, "hub", open_file=False) == 0
    assert run_canvas(vault_path, "hub", open_file=False) == 0

    assert (vault_path / "hub.canvas").exists()
    assert (vault_path / "hub-0.canvas").exists()


def test_folder_option_overrides_settings(vault_path: Path, linked_vault) -> None:
    save_settings(vault_path, Settings(Location.SPECIFIED, "configured"))

    assert run_canvas(vault_path, "alpha", folder="maps/links", open_file=False) == 0

    assert (vault_path / "maps" / "links" / "alpha.canvas").exists()
    assert not (vault_path / "configured").exists()


def test_same_folder_setting(vault_path: Path, linked_vault) -> None:
    save_settings(vault_path, Settings(Location.SAME))

    assert run_canvas(vault_path, "beta", open_file=False) == 0

    assert (vault_path / "projects" / "beta.canvas").exists()


def test_canvas_is_opened_after_writing(vault_path: Path, linked_vault, monkeypatch) -> None:
    opened: list[str] = []
    monkeypatch.setattr("click.launch", lambda url, **kwargs: opened.append(url) or 0)

    assert run_canvas(vault_path, "gamma") == 0

    assert opened == [str(vault_path / "gamma.canvas")]


def test_dry_run_prints_without_writing(vault_path: Path, linked_vault, capsys) -> None:
    assert run_canvas(vault_path, "gamma", dry_run=True) == 0

    out = capsys.readouterr().out
    data = json.loads(out)
    assert {n["id"] for n in data["nodes"]} == {"gamma.md", "projects/beta.md"}
    assert not list(vault_path.glob("*.canvas"))


def test_missing_note_fails(vault_path: Path, linked_vault, capsys) -> None:
    assert run_canvas(vault_path, "nope", open_file=False) == 1

    assert "not found" in capsys.readouterr().err


def test_no_free_path_fails(vault_path: Path, linked_vault, capsys) -> None:
    (vault_path / "gamma.canvas").write_text("{}", encoding="utf-8")
    for i in range(50):
        (vault_path / f"gamma-{i}.canvas").write_text("{}", encoding="utf-8")

    assert run_canvas(vault_path, "gamma", open_file=False) == 1

    assert "no available path" in capsys.readouterr().err
