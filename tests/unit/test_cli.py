"""Tests for the tonekit command line."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

runner = CliRunner()


class TestColorCommands:
    """Test color and contrast commands."""

    def test_color(self):
        from tonekit.cli import app

        result = runner.invoke(app, ["color", "#ABC"])
        assert result.exit_code == 0
        assert "#AABBCCFF" in result.output
        assert "rgba(170,187,204,1)" in result.output

    def test_color_invalid(self):
        from tonekit.cli import app

        result = runner.invoke(app, ["color", "notacolor"])
        assert result.exit_code == 1

    def test_contrast_met(self):
        from tonekit.cli import app

        result = runner.invoke(app, ["contrast", "black", "white"])
        assert result.exit_code == 0
        assert "Ratio: 21.00" in result.output
        assert "Suggested" not in result.output

    def test_contrast_repaired(self):
        from tonekit.cli import app

        result = runner.invoke(app, ["contrast", "#777777", "#808080"])
        assert result.exit_code == 0
        assert "Suggested: #" in result.output

    def test_contrast_unreachable(self):
        from tonekit.cli import app

        result = runner.invoke(app, ["contrast", "#808080", "#808080", "--min", "21"])
        assert result.exit_code == 1


class TestBrandCommands:
    """Test init, validate and build."""

    def test_init_creates_brand(self, tmp_path: Path):
        from tonekit.cli import app

        result = runner.invoke(app, ["init", str(tmp_path)])
        assert result.exit_code == 0
        assert (tmp_path / "brand.yaml").exists()

    def test_init_refuses_overwrite(self, brand_yaml: Path):
        from tonekit.cli import app

        original = (brand_yaml / "brand.yaml").read_text(encoding="utf-8")
        result = runner.invoke(app, ["init", str(brand_yaml)])
        assert result.exit_code == 1
        assert (brand_yaml / "brand.yaml").read_text(encoding="utf-8") == original

        result = runner.invoke(app, ["init", str(brand_yaml), "--overwrite"])
        assert result.exit_code == 0
        assert (brand_yaml / "brand.yaml").read_text(encoding="utf-8") != original

    def test_validate(self, brand_yaml: Path):
        from tonekit.cli import app

        result = runner.invoke(app, ["validate", str(brand_yaml)])
        assert result.exit_code == 0
        assert "Brand is valid" in result.output

    def test_validate_invalid_file(self, tmp_path: Path):
        from tonekit.cli import app

        (tmp_path / "brand.yaml").write_text("light:\n  primary: nope\n", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(tmp_path)])
        assert result.exit_code == 1

    def test_build_single_theme(self, tmp_path: Path):
        from tonekit.cli import app

        result = runner.invoke(app, ["build", str(tmp_path), "--theme", "dark"])
        assert result.exit_code == 0
        assert '[data-theme="dark"] a {' in result.output
        assert '[data-theme="light"]' not in result.output

    def test_build_variables(self, tmp_path: Path):
        from tonekit.cli import app

        result = runner.invoke(app, ["build", str(tmp_path), "-t", "light", "--variables"])
        assert result.exit_code == 0
        assert "--tk-link-default-color:" in result.output

    def test_build_to_file(self, brand_yaml: Path):
        from tonekit.cli import app

        output = brand_yaml / "dist" / "theme.css"
        result = runner.invoke(app, ["build", str(brand_yaml), "--output", str(output)])
        assert result.exit_code == 0
        css = output.read_text(encoding="utf-8")
        assert "@media (prefers-color-scheme: dark)" in css
        assert 'font-family:Inter,"Open Sans",sans-serif;' in css

    def test_build_rejects_unknown_theme(self, tmp_path: Path):
        from tonekit.cli import app

        result = runner.invoke(app, ["build", str(tmp_path), "--theme", "sepia"])
        assert result.exit_code == 1

    def test_build_variables_needs_single_theme(self, tmp_path: Path):
        from tonekit.cli import app

        result = runner.invoke(app, ["build", str(tmp_path), "--variables"])
        assert result.exit_code == 1

    def test_version(self):
        from tonekit._version import __version__
        from tonekit.cli import app

        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output
