"""CLI orchestration integration tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner
from raml_reflector.cli import cli
from raml_reflector.schema_merging import RAML_HEADER


def _write_template(tmp_path: Path) -> Path:
    path = tmp_path / "template.raml"
    path.write_text("#%RAML 1.0\ntitle: Api\ntypes: {}\n", encoding="utf-8")
    return path


def _write_config(tmp_path: Path) -> Path:
    _write_template(tmp_path)
    path = tmp_path / "raml-reflector.yaml"
    path.write_text(
        "template: template.raml\nvalues:\n  - 'reflection_samples:TreeNode'\noutput: api.raml\n",
        encoding="utf-8",
    )
    return path


def test_generate_command_writes_merged_document(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["generate", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    output_path = tmp_path / "api.raml"
    assert result.output.strip() == str(output_path.resolve())
    document = output_path.read_text(encoding="utf-8")
    assert document.startswith(RAML_HEADER)
    assert yaml.safe_load(document)["types"]["TreeNode"]["properties"]["Parent?"] == {
        "type": "TreeNode",
        "description": "",
    }


def test_generate_command_prints_document_with_stdout_flag(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["generate", "--config", str(config_path), "--stdout"])

    assert result.exit_code == 0, result.output
    assert result.output.startswith(RAML_HEADER)
    assert not (tmp_path / "api.raml").exists()


def test_infer_command_prints_document(tmp_path: Path) -> None:
    runner = CliRunner()
    template_path = _write_template(tmp_path)

    result = runner.invoke(
        cli,
        ["infer", "--template", str(template_path), "reflection_samples:SAMPLE_PERSON"],
    )

    assert result.exit_code == 0, result.output
    types = yaml.safe_load(result.output)["types"]
    assert types == {
        "Person": {
            "type": "object",
            "properties": {
                "Name": {"type": "string", "description": ""},
                "Age": {"type": "integer", "description": ""},
            },
        }
    }


def test_infer_command_output_is_stable_when_fed_back(tmp_path: Path) -> None:
    runner = CliRunner()
    template_path = _write_template(tmp_path)
    first_output = tmp_path / "first.raml"
    second_output = tmp_path / "second.raml"
    values = ["reflection_samples:Order", "reflection_samples:Event"]

    first = runner.invoke(
        cli, ["infer", "--template", str(template_path), "--output", str(first_output), *values]
    )
    second = runner.invoke(
        cli, ["infer", "--template", str(first_output), "--output", str(second_output), *values]
    )

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert second_output.read_bytes() == first_output.read_bytes()


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "raml-reflector.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])
    repeated = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert repeated.exit_code == 1


def test_verbose_flag_is_accepted(tmp_path: Path) -> None:
    runner = CliRunner()
    template_path = _write_template(tmp_path)

    result = runner.invoke(
        cli, ["--verbose", "infer", "--template", str(template_path), "reflection_samples:Item"]
    )

    assert result.exit_code == 0, result.output


def test_infer_command_imports_modules_from_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "raml_reflector_cwd_models.py").write_text(
        "from dataclasses import dataclass\n\n\n@dataclass\nclass Gadget:\n    Serial: int = 0\n",
        encoding="utf-8",
    )
    template_path = _write_template(tmp_path)
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        cli, ["infer", "--template", str(template_path), "raml_reflector_cwd_models:Gadget"]
    )

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.output)["types"]["Gadget"] == {
        "type": "object",
        "properties": {"Serial": {"type": "integer", "description": ""}},
    }
    assert str(tmp_path.resolve()) not in sys.path
