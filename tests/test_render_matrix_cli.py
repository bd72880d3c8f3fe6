"""
Tests for the render_matrix command line entry point.
"""

import pytest

from tempmatrix.cli.render_matrix import main, render_to_html
from tempmatrix.models.temperature import Mode


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "temperature_daily.csv"
    lines = ["date,max_temperature,min_temperature"]
    for year in (2021, 2022, 2023):
        lines.append(f"{year}-01-10,15,7")
        lines.append(f"{year}-07-10,33,26")
    path.write_text("\n".join(lines) + "\n")
    return path


class TestRenderMatrixCli:
    """Test the CLI."""

    def test_writes_html(self, csv_path, tmp_path):
        output = tmp_path / "matrix.html"

        assert main(["--data", str(csv_path), "--output", str(output)]) == 0
        assert output.exists()
        assert "plotly" in output.read_text().lower()

    def test_year_limit(self, csv_path, tmp_path):
        count = render_to_html(str(csv_path), str(tmp_path / "m.html"), 2, Mode.EXTREME_MIN)
        assert count == 2

    def test_min_mode(self, csv_path, tmp_path, capsys):
        output = tmp_path / "matrix.html"

        assert main(["--data", str(csv_path), "--output", str(output), "--mode", "min"]) == 0
        assert "Rendered 3 years" in capsys.readouterr().out

    def test_missing_data_file(self, tmp_path, capsys):
        code = main(["--data", str(tmp_path / "missing.csv"), "--output", str(tmp_path / "m.html")])

        assert code == 1
        assert "Error" in capsys.readouterr().out

    def test_unwritable_output(self, csv_path, tmp_path, capsys):
        output = tmp_path / "no_such_dir" / "matrix.html"

        code = main(["--data", str(csv_path), "--output", str(output)])

        assert code == 1
        assert "Error" in capsys.readouterr().out
        assert not output.exists()

    def test_negative_years_rejected(self, csv_path):
        with pytest.raises(SystemExit):
            main(["--data", str(csv_path), "--years", "-1"])
