"""Integration tests for the export command"""

import json

from typer.testing import CliRunner

from linediff.cli.cli import app


runner = CliRunner()


def test_export_patch_default(sample_files, tmp_path, monkeypatch):
    """export writes a patch named diff-<date>.patch into --out-dir."""
    monkeypatch.chdir(tmp_path)
    left, right = sample_files
    out = tmp_path / "dist"
    result = runner.invoke(app, ["export", str(left), str(right), "--out-dir", str(out)])

    assert result.exit_code == 0, result.output
    (patch,) = out.glob("diff-*.patch")
    assert patch.read_text(encoding="utf-8") == (
        "--- original.txt\n+++ modified.txt\n"
        "@@ -1,3 +1,3 @@\n line1\n-line2\n+line2modified\n line3\n"
    )
    assert str(patch) in result.output


def test_export_json_with_custom_names(sample_files, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    left, right = sample_files
    result = runner.invoke(app, [
        "export", str(left), str(right), "--format", "json",
        "--name-left", "before", "--name-right", "after", "--out-dir", str(tmp_path / "dist"),
    ])

    assert result.exit_code == 0, result.output
    (path,) = (tmp_path / "dist").glob("diff-*.json")
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert list(doc["files"]) == ["before", "after"]
    assert doc["stats"] == {"additions": 1, "deletions": 1, "modifications": 0, "total": 4}


def test_export_html_without_line_numbers(sample_files, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    left, right = sample_files
    result = runner.invoke(app, [
        "export", str(left), str(right), "-f", "html", "--no-line-numbers", "--out-dir", str(tmp_path / "dist"),
    ])

    assert result.exit_code == 0, result.output
    (path,) = (tmp_path / "dist").glob("diff-*.html")
    html = path.read_text(encoding="utf-8")
    assert '<div class="diff-line added">line2modified</div>' in html
    assert '<span class="line-number">' not in html


def test_export_output_dir_from_env(sample_files, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LINEDIFF_OUTPUT_DIR", str(tmp_path / "from-env"))
    left, right = sample_files
    result = runner.invoke(app, ["export", str(left), str(right)])
    assert result.exit_code == 0, result.output
    assert any((tmp_path / "from-env").glob("diff-*.patch"))


def test_export_unknown_format_is_rejected(sample_files, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    left, right = sample_files
    result = runner.invoke(app, ["export", str(left), str(right), "--format", "pdf"])
    assert result.exit_code != 0


def test_export_names_from_config_yaml(sample_files, tmp_path, monkeypatch):
    """left_name/right_name in config.yaml label the patch instead of the file names."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("left_name: old\nright_name: new\n")
    left, right = sample_files
    result = runner.invoke(app, ["export", str(left), str(right), "--out-dir", str(tmp_path / "dist")])

    assert result.exit_code == 0, result.output
    (patch,) = (tmp_path / "dist").glob("diff-*.patch")
    assert patch.read_text(encoding="utf-8").startswith("--- old\n+++ new\n")


def test_export_name_options_beat_config(sample_files, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("left_name: old\nright_name: new\n")
    monkeypatch.setenv("LINEDIFF_RIGHT_NAME", "from-env")
    left, right = sample_files
    result = runner.invoke(app, [
        "export", str(left), str(right), "--name-left", "cli-left", "--out-dir", str(tmp_path / "dist"),
    ])

    assert result.exit_code == 0, result.output
    (patch,) = (tmp_path / "dist").glob("diff-*.patch")
    assert patch.read_text(encoding="utf-8").startswith("--- cli-left\n+++ from-env\n")
