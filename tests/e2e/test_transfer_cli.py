# ABOUTME: End-to-end tests for `shoka export` and `shoka import`.
# ABOUTME: Writes and reads JSON/CSV backup files against temporary databases.

import json
from pathlib import Path

from click.testing import CliRunner

from shoka.cli import cli
from shoka.core.transfer import default_export_name


def _seed(db_path: Path) -> None:
    runner = CliRunner()
    for title, location in [("Dune", "Study"), ("吾輩は猫である", "書斎")]:
        result = runner.invoke(cli, ["add", "--title", title, "-l", location, "--db", str(db_path)])
        assert result.exit_code == 0


class TestExportCommand:
    """E2E tests for shoka export."""

    def test_export_json_to_file(self, db_path: Path, tmp_path: Path) -> None:
        _seed(db_path)
        out = tmp_path / "backup.json"
        result = CliRunner().invoke(cli, ["export", "-o", str(out), "--db", str(db_path)])

        assert result.exit_code == 0
        assert "Exported 2 book(s)" in result.output
        records = json.loads(out.read_text(encoding="utf-8"))
        assert sorted(r["title"] for r in records) == ["Dune", "吾輩は猫である"]

    def test_export_csv_to_stdout(self, db_path: Path) -> None:
        _seed(db_path)
        result = CliRunner().invoke(
            cli, ["export", "-f", "csv", "-o", "-", "--db", str(db_path)]
        )

        assert result.exit_code == 0
        assert "Title,Author,ISBN" in result.output
        assert "吾輩は猫である" in result.output

    def test_export_default_file_name(self, db_path: Path, tmp_path: Path) -> None:
        _seed(db_path)
        runner = CliRunner()
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(cli, ["export", "-f", "csv", "--db", str(db_path)])
            assert result.exit_code == 0
            assert Path(default_export_name("csv")).exists()

    def test_export_empty_csv_fails(self, db_path: Path) -> None:
        result = CliRunner().invoke(cli, ["export", "-f", "csv", "-o", "-", "--db", str(db_path)])

        assert result.exit_code == 1
        assert "no books to export" in result.output


class TestImportCommand:
    """E2E tests for shoka import."""

    def test_import_json(self, db_path: Path, tmp_path: Path) -> None:
        source = tmp_path / "books.json"
        source.write_text(
            json.dumps([{"title": "Dune", "location": "Study"}, {"title": "Emma"}]),
            encoding="utf-8",
        )
        result = CliRunner().invoke(
            cli, ["import", str(source), "-l", "Box 1", "--db", str(db_path)]
        )
        listing = CliRunner().invoke(cli, ["locations", "--db", str(db_path)])

        assert result.exit_code == 0
        assert "2 added" in result.output
        assert "Box 1" in listing.output
        assert "Study" in listing.output

    def test_import_reports_rejected_books(self, db_path: Path, tmp_path: Path) -> None:
        source = tmp_path / "books.csv"
        source.write_text("Title,Author,ISBN\nDune,,bad\nEmma,,\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["import", str(source), "--db", str(db_path)])

        assert result.exit_code == 0
        assert "1 added" in result.output
        assert "1 error(s)" in result.output
        assert "invalid ISBN" in result.output

    def test_import_invalid_file(self, db_path: Path, tmp_path: Path) -> None:
        source = tmp_path / "books.json"
        source.write_text("{not json", encoding="utf-8")
        result = CliRunner().invoke(cli, ["import", str(source), "--db", str(db_path)])

        assert result.exit_code == 1
        assert "Import failed" in result.output

    def test_import_rejects_list_valued_field_before_writing(
        self, db_path: Path, tmp_path: Path
    ) -> None:
        source = tmp_path / "books.json"
        books = [{"title": "Good", "author": "A"}, {"title": "Listy", "author": ["A", "B"]}]
        source.write_text(json.dumps(books), encoding="utf-8")
        result = CliRunner().invoke(cli, ["import", str(source), "--db", str(db_path)])
        listing = CliRunner().invoke(cli, ["ls", "--db", str(db_path)])

        assert result.exit_code == 1
        assert "item 2" in result.output
        assert "No books in the catalog." in listing.output

    def test_import_unknown_extension(self, db_path: Path, tmp_path: Path) -> None:
        source = tmp_path / "books.txt"
        source.write_text("Title\nDune\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["import", str(source), "--db", str(db_path)])

        assert result.exit_code == 1
        assert "pass --format" in result.output

    def test_export_then_import_round_trip(self, db_path: Path, tmp_path: Path) -> None:
        _seed(db_path)
        backup = tmp_path / "backup.csv"
        CliRunner().invoke(cli, ["export", "-f", "csv", "-o", str(backup), "--db", str(db_path)])

        restored = tmp_path / "restored.db"
        result = CliRunner().invoke(cli, ["import", str(backup), "--db", str(restored)])
        listing = CliRunner().invoke(cli, ["ls", "--db", str(restored)])

        assert "2 added" in result.output
        assert "Dune" in listing.output
        assert "書斎" in listing.output
