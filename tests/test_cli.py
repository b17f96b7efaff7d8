"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from schemadoc.cli import app
from schemadoc.errors import CompileError, ErrorCode, error_boundary

runner = CliRunner()


class TestDocCommand:
    """Tests for `schemadoc doc`."""

    def test_default_text_output(self) -> None:
        result = runner.invoke(app, ["doc", "schemadoc.io/os"])

        assert result.exit_code == 0
        assert result.stdout.startswith("Package schemadoc.io/os\n")
        assert "\n#Container\n" in result.stdout
        assert "\n#Mode\n" not in result.stdout

    def test_markdown_output(self) -> None:
        result = runner.invoke(app, ["doc", "schemadoc.io/os", "-o", "md"])

        assert result.exit_code == 0
        assert "#### #File Inputs" in result.stdout

    def test_json_output(self, sample_path: Path) -> None:
        result = runner.invoke(app, ["doc", str(sample_path), "--output", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [f["Name"] for f in data["Fields"]] == ["#Build", "#Noop"]

    def test_output_from_environment(self) -> None:
        result = runner.invoke(
            app, ["doc", "schemadoc.io/git"], env={"SCHEMADOC_OUTPUT": "json"}
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["Name"] == "schemadoc.io/git"

    def test_invalid_output_format(self) -> None:
        """Test an unknown format fails before the package is loaded."""
        result = runner.invoke(app, ["doc", "does/not-exist", "-o", "xml"])

        assert result.exit_code == ErrorCode.CONFIG_INVALID.value
        assert "output must be either" in result.output

    def test_unknown_package(self) -> None:
        result = runner.invoke(app, ["doc", "schemadoc.io/missing"])

        assert result.exit_code == ErrorCode.COMPILE_FAILED.value
        assert "cannot find package" in result.output

    def test_write_to_file(self, sample_path: Path, tmp_path: Path) -> None:
        target = tmp_path / "sample.md"

        result = runner.invoke(app, ["doc", str(sample_path), "-o", "md", "--file", str(target)])

        assert result.exit_code == 0
        assert target.read_text(encoding="utf-8").startswith("## Package ")

    def test_write_into_directory(self, sample_path: Path, tmp_path: Path) -> None:
        reports = tmp_path / "reports"
        reports.mkdir()

        result = runner.invoke(app, ["doc", str(sample_path), "-o", "json", "-f", str(reports)])

        assert result.exit_code == 0
        data = json.loads((reports / "sample.json").read_text(encoding="utf-8"))
        assert data["Name"] == str(sample_path)

    def test_library_option(self, tmp_path: Path) -> None:
        (tmp_path / "deploy.yaml").write_text('fields:\n  "#Deploy":\n    fields: {}\n')

        result = runner.invoke(app, ["doc", "acme/deploy", "-L", f"acme={tmp_path}"])

        assert result.exit_code == 0
        assert "#Deploy" in result.stdout

    def test_malformed_library_option(self) -> None:
        result = runner.invoke(app, ["doc", "schemadoc.io/os", "-L", "acme"])

        assert result.exit_code == ErrorCode.CONFIG_INVALID.value

    def test_invalid_log_level(self) -> None:
        result = runner.invoke(app, ["--log-level", "loud", "doc", "schemadoc.io/os"])

        assert result.exit_code == ErrorCode.CONFIG_INVALID.value

    def test_help_lists_doc(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "doc" in result.stdout


class TestErrorBoundary:
    """Tests for error_boundary()."""

    def test_schemadoc_error_exit_code(self) -> None:
        @error_boundary
        def fail() -> None:
            raise CompileError("cannot compile code", "pkg")

        with pytest.raises(typer.Exit) as exc_info:
            fail()

        assert exc_info.value.exit_code == ErrorCode.COMPILE_FAILED.value

    def test_unexpected_error(self) -> None:
        @error_boundary
        def fail() -> None:
            raise RuntimeError("boom")

        with pytest.raises(typer.Exit) as exc_info:
            fail()

        assert exc_info.value.exit_code == ErrorCode.GENERAL_ERROR.value

    def test_exit_passes_through(self) -> None:
        @error_boundary
        def done() -> None:
            raise typer.Exit(0)

        with pytest.raises(typer.Exit) as exc_info:
            done()

        assert exc_info.value.exit_code == 0
