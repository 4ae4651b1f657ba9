from __future__ import annotations

import json
from pathlib import Path

import pytest

from cliciv.actions import AssignJob, Collect
from cliciv.cli import build_parser, main
from cliciv.runtime.snapshot import load_state
from cliciv.vault.save_file import SaveConfig, SaveFile
from cliciv.world.jobs import Job
from cliciv.world.resources import PrimaryResource


def _run(save: Path, *args: str) -> int:
    return main(["--save", str(save), *args])


def test_parser_maps_subcommands_to_actions() -> None:
    parser = build_parser()
    assert parser.parse_args(["next", "collect", "stone"]).action == Collect(PrimaryResource.STONE)
    args = parser.parse_args(["next", "-r", "4", "-t", "jobs", "assign", "miner"])
    assert args.action == AssignJob(Job.MINER)
    assert args.repeat == 4
    assert args.trust


def test_create_then_play(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    save = tmp_path / "cliciv-save.json"
    assert _run(save, "create", "--seed", "42") == 0
    assert load_state(save).seed == 42

    assert _run(save, "next", "-r", "3", "collect", "wood") == 0
    state = load_state(save)
    assert state.iterations == 3
    assert state.resources.wood == 3.0
    assert "Iterations     3" in capsys.readouterr().out


def test_failed_action_keeps_the_save(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    save = tmp_path / "save.json"
    _run(save, "create", "--seed", "42")
    capsys.readouterr()

    assert _run(save, "next", "jobs", "assign", "farmer") == 1
    assert "Failed to apply action: not enough idle workers" in capsys.readouterr().out
    assert load_state(save).iterations == 0


def test_check_reports_ok_and_corruption(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    save = tmp_path / "save.json"
    _run(save, "create", "--seed", "7")
    _run(save, "next", "idle")
    capsys.readouterr()

    assert _run(save, "check") == 0
    assert "Save file is ok." in capsys.readouterr().out

    record = json.loads(save.read_text())
    record["resources"]["gold"] = 500.0
    save.write_text(json.dumps(record))

    assert _run(save, "check") == 2
    assert "Save file is corrupted: hash mismatch." in capsys.readouterr().out
    assert _run(save, "next", "idle") == 2
    assert _run(save, "next", "--trust", "idle") == 0


def test_create_refuses_to_overwrite(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    save = tmp_path / "save.json"
    _run(save, "create", "--seed", "1")
    assert _run(save, "create") == 3
    assert "--force" in capsys.readouterr().out
    assert _run(save, "create", "--force", "--seed", "2") == 0
    assert load_state(save).seed == 2


def test_missing_or_broken_save(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    save = tmp_path / "save.json"
    assert _run(save, "show") == 3
    assert "run 'cliciv create' first" in capsys.readouterr().out

    save.write_text("{not json")
    assert _run(save, "check") == 3
    assert "could not read save file" in capsys.readouterr().out


def test_show_renders_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    save = tmp_path / "save.json.gz"
    _run(save, "create", "--seed", "5")
    capsys.readouterr()
    assert _run(save, "show") == 0
    out = capsys.readouterr().out
    assert "Resources" in out
    assert "Citizens" in out


def test_save_config_resolution(tmp_path: Path) -> None:
    explicit = SaveConfig.resolve(tmp_path / "a.json.gz", environ={})
    assert explicit.path == tmp_path / "a.json.gz"
    assert explicit.gzip_output

    from_env = SaveConfig.resolve(environ={"CLICIV_SAVE": str(tmp_path / "b.json")})
    assert from_env.path == tmp_path / "b.json"
    assert not from_env.gzip_output

    default = SaveConfig.resolve(environ={})
    assert default.path.name == "cliciv-save.json"
    assert not SaveFile(SaveConfig(path=tmp_path / "none.json")).exists()


@pytest.mark.parametrize("nonces", [[], [0]])
def test_trusted_turn_on_save_without_nonces(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], nonces: list[int]
) -> None:
    save = tmp_path / "save.json"
    _run(save, "create", "--seed", "5")
    _run(save, "next", "-r", "2", "idle")
    record = json.loads(save.read_text())
    record["nonces"] = nonces
    save.write_text(json.dumps(record))
    capsys.readouterr()

    assert _run(save, "next", "-t", "idle") == 3
    assert "is malformed" in capsys.readouterr().out
    assert json.loads(save.read_text())["nonces"] == nonces


@pytest.mark.parametrize("seed", [str(1 << 127), str(-(1 << 127) - 1), "abc"])
def test_create_rejects_out_of_range_seed(tmp_path: Path, seed: str) -> None:
    save = tmp_path / "save.json"
    with pytest.raises(SystemExit) as excinfo:
        _run(save, "create", "--seed", seed)
    assert excinfo.value.code == 2
    assert not save.exists()


def test_create_accepts_seed_bounds(tmp_path: Path) -> None:
    save = tmp_path / "save.json"
    assert _run(save, "create", "--seed", str(-(1 << 127))) == 0
    assert _run(save, "create", "--force", "--seed", str((1 << 127) - 1)) == 0


@pytest.mark.parametrize("repeat", ["0", "-2"])
def test_repeat_must_be_positive(tmp_path: Path, capsys: pytest.CaptureFixture[str], repeat: str) -> None:
    save = tmp_path / "save.json"
    _run(save, "create", "--seed", "5")
    capsys.readouterr()
    with pytest.raises(SystemExit) as excinfo:
        _run(save, "next", "-r", repeat, "idle")
    assert excinfo.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err
    assert load_state(save).iterations == 0
