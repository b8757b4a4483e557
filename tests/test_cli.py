from __future__ import annotations

import json
from pathlib import Path
import pytest
from gallery_timeline import cli
from gallery_timeline.cli import build_parser, main


@pytest.fixture
def image_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("LOG_PATH", str(tmp_path / "logs" / "gallery.log"))
    d = tmp_path / "imgs"
    d.mkdir()
    for name in ["2023-01-a.jpg", "2023-02-a.jpg", "2023-12-a.jpg", "broken.jpg"]:
        (d / name).write_bytes(b"")
    return d


def test_generate_writes_artifact(image_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "out" / "images.json"
    main(["generate", "--image-dir", str(image_dir), "--output", str(out)])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [g["dateRange"] for g in data] == ["2023-01 to 2023-02", "2023-12"]
    assert [g["size"] for g in data] == [2, 1]


def test_generate_threshold_flags(image_dir: Path, tmp_path: Path) -> None:
    out = tmp_path / "images.json"
    main([
        "generate", "--image-dir", str(image_dir), "--output", str(out),
        "--max-months-distance", "10",
    ])

    data = json.loads(out.read_text(encoding="utf-8"))
    assert [g["dateRange"] for g in data] == ["2023-01 to 2023-12"]
    assert data[0]["size"] == 3


def test_generate_missing_source_exits_nonzero(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_PATH", str(tmp_path / "gallery.log"))
    with pytest.raises(SystemExit) as exc:
        main(["generate", "--image-dir", str(tmp_path / "missing"), "--output", str(tmp_path / "x.json")])
    assert exc.value.code == 1
    assert not (tmp_path / "x.json").exists()


def test_show_runs(image_dir: Path) -> None:
    main(["show", "--image-dir", str(image_dir)])


def test_parser_requires_subcommand() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


@pytest.mark.parametrize(
    "flags",
    [
        ["--min-group-size", "0"],
        ["--max-months-distance", "-1"],
        ["--pair-max-months", "-2"],
        ["--min-group-size", "seven"],
    ],
)
def test_invalid_threshold_flags_are_usage_errors(flags: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["generate", *flags])
    assert exc.value.code == 2


def test_serve_port_zero_is_kept(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: dict[str, object] = {}

    class _App:
        def run(self, host: str, port: int) -> None:
            calls.update(host=host, port=port)

    monkeypatch.setattr(cli, "create_app", lambda s: _App())
    cli.cmd_serve(build_parser().parse_args(["serve", "--host", "0.0.0.0", "--port", "0"]))
    assert calls == {"host": "0.0.0.0", "port": 0}


def test_each_run_logs_to_its_own_file(image_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "run1.log"
    second = tmp_path / "run2.log"

    monkeypatch.setenv("LOG_PATH", str(first))
    main(["show", "--image-dir", str(image_dir)])
    monkeypatch.setenv("LOG_PATH", str(second))
    main(["show", "--image-dir", str(image_dir)])

    assert "2023-12" in second.read_text(encoding="utf-8")
    assert first.read_text(encoding="utf-8").count("2023-12") == second.read_text(encoding="utf-8").count("2023-12")
