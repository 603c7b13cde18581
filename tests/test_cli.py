"""Tests for cutlist CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from cutlist.cli import app

runner = CliRunner()


class TestInitCommand:
    def test_init_writes_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", "-d", str(tmp_path)])
        assert result.exit_code == 0
        content = (tmp_path / "cutlist.yaml").read_text()
        assert "THE RACE" in content

    def test_init_with_title(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", "-d", str(tmp_path), "-t", "PROMO CUT"])
        assert result.exit_code == 0
        assert "PROMO CUT" in (tmp_path / "cutlist.yaml").read_text()

    def test_init_fails_if_config_exists(self, tmp_path: Path) -> None:
        (tmp_path / "cutlist.yaml").write_text("title: x\n")
        result = runner.invoke(app, ["init", "-d", str(tmp_path)])
        assert result.exit_code == 1
        assert "already exists" in result.output


class TestAuditCommand:
    def test_audit_prints_markdown(self, snapshot_file: Path) -> None:
        result = runner.invoke(app, ["audit", str(snapshot_file)])
        assert result.exit_code == 0
        assert result.output.startswith("# CYBERNETIC LIST")
        assert "**1. The Race Begins**" in result.output
        assert "**3. Rescue\\_Shot\\*1**" in result.output
        assert "- **Clips found:** 4" in result.output

    def test_audit_writes_file(self, tmp_path: Path, snapshot_file: Path) -> None:
        output = tmp_path / "audit.md"
        result = runner.invoke(app, ["audit", str(snapshot_file), "-o", str(output)])
        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("# CYBERNETIC LIST")

    def test_audit_with_config(self, snapshot_file: Path, config_file: Path) -> None:
        result = runner.invoke(app, ["audit", str(snapshot_file), "-c", str(config_file)])
        assert result.exit_code == 0
        assert result.output.startswith("# TEST CUT")
        assert "## CLOSE" in result.output

    def test_audit_no_active_sequence(self, tmp_path: Path) -> None:
        snapshot = tmp_path / "empty.yaml"
        snapshot.write_text("active_sequence: null\n")
        result = runner.invoke(app, ["audit", str(snapshot)])
        assert result.exit_code == 1
        assert "No active sequence" in result.output

    def test_audit_missing_snapshot(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["audit", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_audit_bad_config(self, snapshot_file: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["audit", str(snapshot_file), "-c", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestExtractCommand:
    def test_extract_writes_payload(self, tmp_path: Path, snapshot_file: Path) -> None:
        output = tmp_path / "payload.json"
        result = runner.invoke(app, ["extract", str(snapshot_file), "-o", str(output)])
        assert result.exit_code == 0

        data = json.loads(output.read_text())
        assert data["totalDurationFrames"] == 1440
        assert len(data["clips"]) == 4

    def test_extract_failure_payload(self, tmp_path: Path) -> None:
        snapshot = tmp_path / "empty.yaml"
        snapshot.write_text("{}\n")
        output = tmp_path / "payload.json"
        result = runner.invoke(app, ["extract", str(snapshot), "-o", str(output)])
        assert result.exit_code == 1

        data = json.loads(output.read_text())
        assert data["kind"] == "no_active_sequence"

    def test_extract_stdout_is_only_the_payload(self, snapshot_file: Path) -> None:
        result = runner.invoke(app, ["extract", str(snapshot_file)])
        assert result.exit_code == 0

        data = json.loads(result.stdout)
        assert len(data["clips"]) == 4

    def test_failed_extract_stdout_renders_as_failure(self, tmp_path: Path) -> None:
        snapshot = tmp_path / "empty.yaml"
        snapshot.write_text("active_sequence: null\n")
        result = runner.invoke(app, ["extract", str(snapshot)])
        assert result.exit_code == 1
        assert "No active sequence" in result.stderr

        payload = tmp_path / "payload.json"
        payload.write_text(result.stdout)
        rendered = runner.invoke(app, ["render", str(payload)])
        assert rendered.exit_code == 1
        assert "No active sequence" in rendered.output
        assert "Could not parse" not in rendered.output


class TestRenderCommand:
    def test_render_payload(self, tmp_path: Path, sample_audit_payload: dict) -> None:
        payload = tmp_path / "payload.json"
        payload.write_text(json.dumps(sample_audit_payload))
        result = runner.invoke(app, ["render", str(payload)])
        assert result.exit_code == 0
        assert "## THE HERO" in result.output
        assert "40 frames (1.67 s)" in result.output

    def test_render_extracted_payload(self, tmp_path: Path, snapshot_file: Path) -> None:
        payload = tmp_path / "payload.json"
        runner.invoke(app, ["extract", str(snapshot_file), "-o", str(payload)])
        audit = runner.invoke(app, ["audit", str(snapshot_file)])
        rendered = runner.invoke(app, ["render", str(payload)])
        assert rendered.exit_code == 0
        assert rendered.output == audit.output

    def test_render_legacy_error(self, tmp_path: Path) -> None:
        payload = tmp_path / "payload.txt"
        payload.write_text("Error: An ExtendScript error occurred: boom")
        result = runner.invoke(app, ["render", str(payload)])
        assert result.exit_code == 1
        assert "boom" in result.output

    def test_render_malformed(self, tmp_path: Path) -> None:
        payload = tmp_path / "payload.json"
        payload.write_text("<html>")
        result = runner.invoke(app, ["render", str(payload)])
        assert result.exit_code == 1
        assert "Could not parse extractor result" in result.output

    def test_render_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", str(tmp_path / "missing.json")])
        assert result.exit_code == 1


class TestInfoCommands:
    def test_clips_table(self, snapshot_file: Path) -> None:
        result = runner.invoke(app, ["clips", str(snapshot_file)])
        assert result.exit_code == 0
        assert "Behind" in result.output
        assert "REJECTION" in result.output
        assert "4 clip(s)" in result.output

    def test_acts_table(self) -> None:
        result = runner.invoke(app, ["acts"])
        assert result.exit_code == 0
        assert "THE HERO" in result.output
        assert "1284" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "cutlist" in result.output
