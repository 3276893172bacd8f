"""Tests for the command-line interface."""

from typer.testing import CliRunner

from svgdoc.cli import app

runner = CliRunner()


class TestRender:
    """Tests for the render command."""

    def test_writes_artifact(self, tmp_path, output_dir):
        input_path = tmp_path / "report.txt"
        input_path.write_text("1. 文檔概述\n- item\n注意事項：\nbody", encoding="utf-8")

        result = runner.invoke(
            app, ["render", str(input_path), "--output-dir", str(output_dir), "--source-name", "report.pdf"]
        )

        assert result.exit_code == 0, result.output
        out_path = output_dir / "translated_report_svg.html"
        assert out_path.exists()
        assert "文檔概述" in out_path.read_text(encoding="utf-8")

    def test_plain_profile(self, tmp_path, output_dir):
        input_path = tmp_path / "a.txt"
        input_path.write_text("1. Title", encoding="utf-8")

        result = runner.invoke(
            app, ["render", str(input_path), "--output-dir", str(output_dir), "--profile", "plain"]
        )

        assert result.exit_code == 0, result.output
        markup = (output_dir / "translated_a.txt_svg.html").read_text(encoding="utf-8")
        assert "<circle" not in markup
        assert 'rx="4"' not in markup

    def test_missing_input(self, tmp_path, output_dir):
        result = runner.invoke(
            app, ["render", str(tmp_path / "missing.txt"), "--output-dir", str(output_dir)]
        )

        assert result.exit_code == 1
        assert "Input not found" in result.output

    def test_invalid_page_width(self, tmp_path, output_dir):
        """A page narrower than its margins is rejected."""
        input_path = tmp_path / "a.txt"
        input_path.write_text("body", encoding="utf-8")

        result = runner.invoke(
            app, ["render", str(input_path), "--output-dir", str(output_dir), "--width", "50"]
        )

        assert result.exit_code == 1
        assert "Invalid page size" in result.output

    def test_non_utf8_input(self, tmp_path, output_dir):
        """Undecodable input is reported instead of crashing."""
        input_path = tmp_path / "latin1.txt"
        input_path.write_bytes(b"caf\xe9")

        result = runner.invoke(app, ["render", str(input_path), "--output-dir", str(output_dir)])

        assert result.exit_code == 1
        assert "not UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_unwritable_output_dir(self, tmp_path):
        """An output path that is a file fails cleanly."""
        input_path = tmp_path / "a.txt"
        input_path.write_text("body", encoding="utf-8")
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        result = runner.invoke(app, ["render", str(input_path), "--output-dir", str(blocker)])

        assert result.exit_code == 1
        assert "Cannot write output" in result.output


class TestDemo:
    """Tests for the demo command."""

    def test_demo(self, output_dir):
        result = runner.invoke(app, ["demo", "report.pdf", "--output-dir", str(output_dir)])

        assert result.exit_code == 0, result.output
        markup = (output_dir / "translated_report_svg.html").read_text(encoding="utf-8")
        assert "翻譯文檔：report.pdf" in markup
        assert markup.rstrip().endswith("</html>")

    def test_demo_with_directory_in_name(self, output_dir):
        """Directory parts of the source name do not leak into the output path."""
        result = runner.invoke(app, ["demo", "reports/q1.pdf", "--output-dir", str(output_dir)])

        assert result.exit_code == 0, result.output
        assert (output_dir / "translated_q1_svg.html").exists()


class TestClassify:
    """Tests for the classify command."""

    def test_table(self, tmp_path):
        input_path = tmp_path / "a.txt"
        input_path.write_text("1. Title\n- item\n[red]body[/red]", encoding="utf-8")

        result = runner.invoke(app, ["classify", str(input_path)])

        assert result.exit_code == 0, result.output
        assert "title" in result.output
        assert "bullet_point" in result.output
        assert "[red]body[/red]" in result.output

    def test_non_utf8_input(self, tmp_path):
        input_path = tmp_path / "latin1.txt"
        input_path.write_bytes(b"caf\xe9")

        result = runner.invoke(app, ["classify", str(input_path)])

        assert result.exit_code == 1
        assert "not UTF-8" in result.output
