"""
Unit tests for configuration diagnostics and the CLI commands.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.cli.app import app
from src.config.diagnostics import (
    ANON_KEY,
    URL_KEY,
    Severity,
    check_client_values,
    check_env_values,
    has_errors,
    load_env_file,
)

GOOD_URL = "https://abcdefghijklmnop.supabase.co"
GOOD_KEY = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9." + "a" * 80 + ".signature"

runner = CliRunner()


def write_env(tmp_path: Path, text: str) -> Path:
    path = tmp_path / ".env"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadEnvFile:
    def test_comments_and_quotes(self, tmp_path: Path) -> None:
        path = write_env(
            tmp_path,
            f'# comment\n{URL_KEY}="{GOOD_URL}"\n{ANON_KEY}=abc=def\n',
        )
        values = load_env_file(path)
        assert values[URL_KEY] == GOOD_URL
        assert values[ANON_KEY] == "abc=def"


class TestCheckEnvValues:
    def test_all_set(self) -> None:
        findings = check_env_values({URL_KEY: GOOD_URL, ANON_KEY: "k" * 12})
        assert not has_errors(findings)
        assert findings[0].message == f"{GOOD_URL[:40]}..."
        assert findings[1].message == "set (12 characters)"

    @pytest.mark.parametrize(
        "values",
        [
            {},
            {URL_KEY: "", ANON_KEY: ""},
            {URL_KEY: "your-project-url", ANON_KEY: "your-anon-key"},
            {URL_KEY: None, ANON_KEY: None},
        ],
    )
    def test_unset_or_placeholder(self, values) -> None:
        findings = check_env_values(values)
        assert [f.severity for f in findings] == [Severity.ERROR, Severity.ERROR]


class TestCheckClientValues:
    def test_good_values(self) -> None:
        findings = check_client_values({URL_KEY: GOOD_URL, ANON_KEY: GOOD_KEY})
        assert all(f.severity is Severity.OK for f in findings)

    def test_missing_value_is_error(self) -> None:
        findings = check_client_values({URL_KEY: GOOD_URL})
        assert has_errors(findings)
        assert findings[0].key == ANON_KEY

    def test_invalid_url_is_error(self) -> None:
        findings = check_client_values({URL_KEY: "not a url", ANON_KEY: GOOD_KEY})
        assert has_errors(findings)

    def test_http_and_foreign_host_warn(self) -> None:
        findings = check_client_values({URL_KEY: "http://localhost:54321", ANON_KEY: GOOD_KEY})
        warnings = [f.message for f in findings if f.severity is Severity.WARNING]
        assert "URL scheme is not https" in warnings
        assert "host does not look like a Supabase project URL" in warnings
        assert not has_errors(findings)

    def test_short_key_warns(self) -> None:
        findings = check_client_values({URL_KEY: GOOD_URL, ANON_KEY: "short"})
        assert findings[-1].severity is Severity.WARNING
        assert findings[-1].message == "key looks too short"

    def test_non_jwt_key_warns(self) -> None:
        findings = check_client_values({URL_KEY: GOOD_URL, ANON_KEY: "x" * 120})
        assert findings[-1].message == "key is not in JWT format"


class TestCli:
    def test_check_env_ok(self, tmp_path: Path) -> None:
        path = write_env(tmp_path, f"{URL_KEY}={GOOD_URL}\n{ANON_KEY}={GOOD_KEY}\n")
        result = runner.invoke(app, ["check-env", "--env-file", str(path)])
        assert result.exit_code == 0
        assert "All environment variables are set" in result.output

    def test_check_env_placeholder_fails(self, tmp_path: Path) -> None:
        path = write_env(tmp_path, f"{URL_KEY}=your-project-url\n{ANON_KEY}=your-anon-key\n")
        result = runner.invoke(app, ["check-env", "--env-file", str(path)])
        assert result.exit_code == 1

    def test_missing_file_fails(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["check-env", "--env-file", str(tmp_path / "nope.env")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_check_client_ok(self, tmp_path: Path) -> None:
        path = write_env(tmp_path, f"{URL_KEY}={GOOD_URL}\n{ANON_KEY}={GOOD_KEY}\n")
        result = runner.invoke(app, ["check-client", "-e", str(path)])
        assert result.exit_code == 0

    def test_check_client_missing_key_fails(self, tmp_path: Path) -> None:
        path = write_env(tmp_path, f"{URL_KEY}={GOOD_URL}\n")
        result = runner.invoke(app, ["check-client", "-e", str(path)])
        assert result.exit_code == 1
