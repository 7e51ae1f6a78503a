"""
Configuration diagnostics for the auth provider values.

Pure checks over a mapping of environment values, used by the
`practice-english check-env` and `check-client` commands. Nothing here
contacts the provider.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import urlparse

from dotenv import dotenv_values

from src.config.settings import SUPABASE_ANON_KEY_ENV, SUPABASE_URL_ENV, configured_value

URL_KEY = SUPABASE_URL_ENV
ANON_KEY = SUPABASE_ANON_KEY_ENV
REQUIRED_KEYS = (URL_KEY, ANON_KEY)

MIN_ANON_KEY_LENGTH = 100
URL_PREVIEW_LENGTH = 40


class Severity(str, Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Finding:
    severity: Severity
    key: str
    message: str


def load_env_file(path: Path) -> dict[str, str | None]:
    """Parse a .env file without touching os.environ."""
    return dict(dotenv_values(path))


def _value(values: dict[str, str | None], key: str) -> str | None:
    return configured_value(key, values.get(key))


def check_env_values(values: dict[str, str | None]) -> list[Finding]:
    """Report whether each required key is set to a non-placeholder value."""
    findings = []

    url = _value(values, URL_KEY)
    if url:
        findings.append(Finding(Severity.OK, URL_KEY, f"{url[:URL_PREVIEW_LENGTH]}..."))
    else:
        findings.append(Finding(Severity.ERROR, URL_KEY, "not set or still the default value"))

    key = _value(values, ANON_KEY)
    if key:
        findings.append(Finding(Severity.OK, ANON_KEY, f"set ({len(key)} characters)"))
    else:
        findings.append(Finding(Severity.ERROR, ANON_KEY, "not set or still the default value"))

    return findings


def check_client_values(values: dict[str, str | None]) -> list[Finding]:
    """
    Check that the values look usable for a Supabase client.

    Missing values and unparsable URLs are errors; an unusual scheme,
    host or key shape only warns.
    """
    url = _value(values, URL_KEY)
    key = _value(values, ANON_KEY)
    missing = [name for name, value in ((URL_KEY, url), (ANON_KEY, key)) if not value]
    if missing:
        return [Finding(Severity.ERROR, name, "not set") for name in missing]

    findings = []
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.hostname:
        return [Finding(Severity.ERROR, URL_KEY, f"invalid URL: {url}")]
    if parsed.scheme != "https":
        findings.append(Finding(Severity.WARNING, URL_KEY, "URL scheme is not https"))
    if "supabase.co" not in parsed.hostname:
        findings.append(
            Finding(Severity.WARNING, URL_KEY, "host does not look like a Supabase project URL")
        )
    findings.append(Finding(Severity.OK, URL_KEY, url))

    if len(key) < MIN_ANON_KEY_LENGTH:
        findings.append(Finding(Severity.WARNING, ANON_KEY, "key looks too short"))
        return findings

    findings.append(Finding(Severity.OK, ANON_KEY, f"key length {len(key)}"))
    if len(key.split(".")) == 3:
        findings.append(Finding(Severity.OK, ANON_KEY, "JWT format (3 segments)"))
    else:
        findings.append(Finding(Severity.WARNING, ANON_KEY, "key is not in JWT format"))
    return findings


def has_errors(findings: list[Finding]) -> bool:
    return any(f.severity is Severity.ERROR for f in findings)
