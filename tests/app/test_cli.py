from __future__ import annotations

import logging
from pathlib import Path

import pytest

from transit_rules.ui import cli as cli_module


def test_cli_apply_passes_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_apply(input_dir: Path, output_dir: Path, **kwargs: object) -> None:
        captured.update(kwargs, input_dir=input_dir, output_dir=output_dir)

    monkeypatch.setattr(cli_module, "apply_rules_to_dataset", fake_apply)

    cli_module.main(
        [
            "apply",
            "--input",
            "data/in",
            "--output",
            "data/out",
            "-c",
            "codes_a.csv",
            "--complementary-code-rules",
            "codes_b.csv",
            "-p",
            "properties.csv",
            "--report",
            "out/report.json",
        ]
    )

    assert captured["input_dir"] == Path("data/in")
    assert captured["output_dir"] == Path("data/out")
    assert captured["complementary_code_rules_files"] == [
        Path("codes_a.csv"),
        Path("codes_b.csv"),
    ]
    assert captured["property_rules_files"] == [Path("properties.csv")]
    assert captured["report_path"] == Path("out/report.json")


def test_cli_report_path_defaults_to_config(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    captured: dict[str, object] = {}

    def fake_apply(*_: object, **kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "apply_rules_to_dataset", fake_apply)
    monkeypatch.setenv("TRANSIT_RULES_REPORT_PATH", str(tmp_path / "diagnostics.json"))

    cli_module.main(["apply", "-i", "in", "-o", "out"])

    assert captured["report_path"] == (tmp_path / "diagnostics.json").resolve()
    assert captured["complementary_code_rules_files"] == []
    assert captured["property_rules_files"] == []


def test_cli_fatal_error_exits_with_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_apply(*_: object, **__: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "apply_rules_to_dataset", failing_apply)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["apply", "-i", "in", "-o", "out"])

    assert excinfo.value.code == 1


def test_cli_invalid_log_level_exits_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRANSIT_RULES_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["apply", "-i", "in", "-o", "out"])

    assert excinfo.value.code == 2


def test_cli_requires_a_command() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2


def test_cli_log_level_flag_overrides_config(monkeypatch: pytest.MonkeyPatch) -> None:
    levels: list[int | str] = []

    def fake_configure_logging(*, level: int | str = logging.INFO, force: bool = False) -> None:
        levels.append(level)

    monkeypatch.setattr(cli_module, "apply_rules_to_dataset", lambda *_, **__: None)
    monkeypatch.setattr(cli_module, "configure_logging", fake_configure_logging)
    monkeypatch.setenv("TRANSIT_RULES_LOG_LEVEL", "warning")

    cli_module.main(["apply", "-i", "in", "-o", "out", "--log-level", "debug"])

    assert levels == [logging.DEBUG]


def test_cli_invalid_log_level_flag_exits_with_two() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["apply", "-i", "in", "-o", "out", "--log-level", "chatty"])

    assert excinfo.value.code == 2
