"""
Tests for the tf command line.
"""
import json
import pytest
from tableforge.main import main, build_parser


@pytest.fixture
def schema_file(tmp_path):
    f = tmp_path / "schema.sql"
    f.write_text("CREATE TABLE users (id INT NOT NULL, email VARCHAR(100) COMMENT 'login', PRIMARY KEY (id));")
    return str(f)


class TestCLI:

    def test_text_output(self, schema_file, capsys):
        assert main(['extract', schema_file]) == 0
        out = capsys.readouterr().out
        assert "table name: users" in out
        assert "col email\t\tVARCHAR(100)\t\tcomment login" in out
        assert "primary key: id" in out

    def test_sql_text_source(self, capsys):
        assert main(['extract', 'CREATE TABLE t (a INT)']) == 0
        assert "table name: t" in capsys.readouterr().out

    def test_json_output(self, schema_file, capsys):
        assert main(['extract', schema_file, '--format', 'json']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["tables"][0]["name"] == "users"
        assert data["tables"][0]["constraints"][0]["column_primary_key"] == ["id"]

    def test_json_out_file(self, schema_file, tmp_path, capsys):
        out_path = tmp_path / "out.json"
        assert main(['extract', schema_file, '--json-out', str(out_path)]) == 0
        assert "JSON output saved" in capsys.readouterr().err
        data = json.loads(out_path.read_text())
        assert [c["name"] for c in data["tables"][0]["columns"]] == ["id", "email"]

    def test_no_tables(self, capsys):
        assert main(['extract', 'SELECT 1;']) == 0
        assert "No tables found." in capsys.readouterr().out

    def test_strict_with_diagnostics(self, capsys):
        assert main(['extract', 'CREATE TABLE t (a INT VISIBLE)', '--strict']) == 2
        assert "strict mode" in capsys.readouterr().err

    def test_strict_clean(self, schema_file):
        assert main(['extract', schema_file, '--strict']) == 0

    def test_syntax_error(self, capsys):
        assert main(['extract', 'CREATE TABLE t (a INT']) == 1
        assert capsys.readouterr().err.startswith("Error: line 1:")

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['--version'])
        assert exc.value.code == 0
        assert "TableForge v" in capsys.readouterr().out

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['compare', 'x.sql'])
