"""End-to-end CLI tests: verify exact output lines, exit codes and files."""
from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

from prompt_builder.drafting.models import Character, default_prompt
from prompt_builder.cli import validate_draft_command
from prompt_builder.schemas.draft_v1 import load_draft, save_draft

_REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str):
    return subprocess.run(
        [sys.executable, "-m", "prompt_builder.cli", *args],
        capture_output=True, text=True, cwd=_REPO_ROOT,
    )


@pytest.fixture
def draft_path(tmp_path: Path) -> Path:
    d = default_prompt()
    d.characters.append(Character(id="char_1", name="Aya", description="", wardrobe=""))
    d.consistency.character_id_map = {"lead": "char_1"}
    p = tmp_path / "draft.json"
    save_draft(p, d)
    return p


class TestNew:
    def test_writes_default_draft(self, tmp_path: Path):
        out = tmp_path / "new.json"
        r = _run("new", "--output", str(out))
        assert r.returncode == 0
        assert r.stdout.strip() == f"OK: wrote {out}"
        assert load_draft(out) == default_prompt()


class TestExtract:
    def test_text_into_fresh_draft(self, tmp_path: Path):
        out = tmp_path / "out.json"
        r = _run("extract", "--text", "neo-noir in rainy Tokyo at night, 30s", "--output", str(out))
        assert r.returncode == 0
        d = load_draft(out)
        assert d.duration_seconds == 30
        assert d.locations[0].name == "Tokyo"

    def test_text_file_merged_into_draft(self, tmp_path: Path, draft_path: Path):
        ideas = tmp_path / "ideas.txt"
        ideas.write_text("protagonist Aya (leather jacket), antagonist in chrome mask", encoding="utf-8")
        out = tmp_path / "out.json"
        r = _run("extract", "--text-file", str(ideas), "--draft", str(draft_path), "--output", str(out))
        assert r.returncode == 0
        d = load_draft(out)
        assert [c.id for c in d.characters] == ["char_1", "char_2"]
        assert d.characters[0].wardrobe == "leather jacket"

    def test_text_and_text_file_are_exclusive(self, tmp_path: Path):
        r = _run("extract", "--text", "x", "--text-file", "y", "--output", str(tmp_path / "o.json"))
        assert r.returncode == 2

    def test_unreadable_draft(self, tmp_path: Path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json}", encoding="utf-8")
        out = tmp_path / "out.json"
        r = _run("extract", "--text", "30s", "--draft", str(bad), "--output", str(out))
        assert r.returncode == 1
        assert r.stdout.startswith("ERROR: invalid JSON")
        assert not out.exists()


class TestEdit:
    def test_edit_in_place(self, draft_path: Path):
        r = _run("edit", "--draft", str(draft_path), "--update",
                 '{"op": "set_title", "value": "Night Run"}')
        assert r.returncode == 0
        assert load_draft(draft_path).title == "Night Run"

    def test_edit_to_output(self, tmp_path: Path, draft_path: Path):
        out = tmp_path / "edited.json"
        r = _run("edit", "--draft", str(draft_path), "--output", str(out), "--update",
                 '{"op": "apply_preset", "presetId": "high_budget"}')
        assert r.returncode == 0
        assert load_draft(out).aspect_ratio == "2.39:1"
        assert load_draft(draft_path).aspect_ratio == "16:9"

    def test_unknown_character_exits_1(self, draft_path: Path):
        before = draft_path.read_text(encoding="utf-8")
        r = _run("edit", "--draft", str(draft_path), "--update",
                 '{"op": "remove_character", "characterId": "char_9"}')
        assert r.returncode == 1
        assert r.stdout.strip() == "ERROR: no character with id 'char_9'"
        assert draft_path.read_text(encoding="utf-8") == before

    def test_bad_update_exits_1(self, draft_path: Path):
        r = _run("edit", "--draft", str(draft_path), "--update", '{"op": "explode"}')
        assert r.returncode == 1
        assert r.stdout.startswith("ERROR: invalid update")


class TestValidate:
    def test_valid_draft(self, draft_path: Path):
        r = _run("validate", "--draft", str(draft_path))
        assert r.returncode == 0
        assert r.stdout.strip() == "OK: draft is valid"

    def test_every_error_printed(self, tmp_path: Path):
        raw = default_prompt().model_dump(by_alias=True)
        raw["fps"] = -1
        raw["aspectRatio"] = "wide"
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps(raw), encoding="utf-8")
        r = _run("validate", "--draft", str(bad))
        assert r.returncode == 1
        lines = r.stdout.strip().splitlines()
        assert lines[0] == "ERROR: fps: must be non-negative, got -1"
        assert lines[1].startswith("ERROR: aspectRatio: ")

    def test_duration_mismatch_warns_but_passes(self, tmp_path: Path, draft_path: Path):
        edited = tmp_path / "shots.json"
        _run("edit", "--draft", str(draft_path), "--output", str(edited), "--update",
             '{"op": "add_shot"}')
        r = _run("validate", "--draft", str(edited))
        assert r.returncode == 0
        assert r.stdout.startswith("WARNING: shot durations sum to 3s")
        assert r.stdout.strip().endswith("OK: draft is valid")

    def test_missing_file(self, tmp_path: Path):
        r = _run("validate", "--draft", str(tmp_path / "ghost.json"))
        assert r.returncode == 1
        assert r.stdout.startswith("ERROR: Draft file not found")

    def test_reads_draft_once(self, draft_path: Path, monkeypatch, capsys):
        reads = []
        original = Path.read_text

        def counting_read_text(self, *args, **kwargs):
            reads.append(self)
            return original(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", counting_read_text)
        with pytest.raises(SystemExit) as exc_info:
            validate_draft_command(draft_path)
        assert exc_info.value.code == 0
        assert reads == [draft_path]
        assert capsys.readouterr().out.strip() == "OK: draft is valid"


class TestGenerate:
    def test_prints_prompt(self, draft_path: Path):
        r = _run("generate", "--draft", str(draft_path))
        assert r.returncode == 0
        data = json.loads(r.stdout)
        assert data["schemaVersion"] == "1.0.0"
        assert data["consistency"]["characterReferences"]["lead"]["id"] == "char_1"

    def test_writes_output(self, tmp_path: Path, draft_path: Path):
        out = tmp_path / "prompt.json"
        r = _run("generate", "--draft", str(draft_path), "--output", str(out))
        assert r.returncode == 0
        assert r.stdout.strip() == f"OK: wrote {out}"
        assert json.loads(out.read_text(encoding="utf-8"))["title"] == ""

    def test_unresolved_reference_writes_nothing(self, tmp_path: Path):
        d = default_prompt()
        d.consistency.character_id_map = {"lead": "char_9"}
        src = tmp_path / "draft.json"
        save_draft(src, d)
        out = tmp_path / "prompt.json"
        r = _run("generate", "--draft", str(src), "--output", str(out))
        assert r.returncode == 1
        assert r.stdout.strip() == (
            "ERROR: consistency.characterIdMap.lead references unknown character id 'char_9'"
        )
        assert not out.exists()

    def test_invalid_draft_writes_nothing(self, tmp_path: Path):
        raw = default_prompt().model_dump(by_alias=True)
        del raw["shots"]
        raw["durationSeconds"] = -3
        src = tmp_path / "draft.json"
        src.write_text(json.dumps(raw), encoding="utf-8")
        out = tmp_path / "prompt.json"
        r = _run("generate", "--draft", str(src), "--output", str(out))
        assert r.returncode == 1
        assert r.stdout.strip().splitlines() == [
            "ERROR: shots: required field missing",
            "ERROR: durationSeconds: must be non-negative, got -3",
        ]
        assert not out.exists()

    def test_deterministic_output(self, draft_path: Path):
        assert _run("generate", "--draft", str(draft_path)).stdout == \
            _run("generate", "--draft", str(draft_path)).stdout


class TestHelp:
    def test_no_command_exits_1(self):
        r = _run()
        assert r.returncode == 1

    def test_verbose_logs_to_stderr(self, draft_path: Path):
        r = _run("--verbose", "generate", "--draft", str(draft_path))
        assert r.returncode == 0
        assert "generated structured prompt" in r.stderr
        json.loads(r.stdout)
