#!/usr/bin/env python
from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

TARGET_DIRS = [
    ROOT / "wordlists",
    ROOT / "tests",
]

EXCLUDE_DIRNAMES = {".venv", "__pycache__", ".pytest_cache"}

ALLOW_EXT = {".py", ".pyi"}

PATTERNS: dict[str, re.Pattern[str]] = {
    "typing.Any": re.compile(r"\btyping\.Any\b"),
    "Any usage": re.compile(r"(?<!\w)Any(?!\w)"),
    "type: ignore": re.compile(r"type:\s*ignore"),
    "typing.cast": re.compile(r"\btyping\.cast\b"),
    # Drift markers
    "TODO": re.compile(r"\bTODO\b"),
    "FIXME": re.compile(r"\bFIXME\b"),
    "XXX": re.compile(r"\bXXX\b"),
    # Output goes through sys.stdout / sys.stderr or logging
    "print()": re.compile(r"(^|\s)print\s*\("),
    "dataclass(frozen=True)": re.compile(r"@dataclass\(\s*frozen\s*=\s*True\s*\)"),
    # Logging is configured in one place (core/logging/setup.py)
    "logging.basicConfig": re.compile(r"\blogging\.basicConfig\s*\("),
    "noqa": re.compile(r"#\s*noqa\b"),
}

_EXCEPT_RE = re.compile(r"^(\s*)except(\s+([^:]+))?:\s*$")
_LOG_CALL_RE = re.compile(r"\.(debug|info|warning|error|exception|critical)\(")
_RAISE_RE = re.compile(r"\braise\b")


def iter_files(paths: Iterable[Path]) -> Iterable[Path]:
    for base in paths:
        if not base.exists():
            continue
        for p in sorted(base.rglob("*")):
            if not p.is_file() or p.suffix not in ALLOW_EXT:
                continue
            if any(part in EXCLUDE_DIRNAMES for part in p.parts):
                continue
            yield p


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _scan_patterns(path: Path, lines: Sequence[str]) -> list[str]:
    errors: list[str] = []
    for name, pat in PATTERNS.items():
        for i, line in enumerate(lines, start=1):
            if pat.search(line):
                errors.append(f"{path}:{i}: disallowed pattern: {name}")
    return errors


def _except_body(lines: Sequence[str], start: int, except_indent: int) -> list[str]:
    body: list[str] = []
    for cur in lines[start:]:
        if cur.strip() == "":
            continue
        if _indent(cur) <= except_indent:
            break
        body.append(cur)
    return body


def _scan_excepts(path: Path, lines: Sequence[str]) -> list[str]:
    """Every except block must log or re-raise; broad ones must do both."""
    errors: list[str] = []
    for i, line in enumerate(lines, start=1):
        m = _EXCEPT_RE.match(line)
        if not m:
            continue
        body = _except_body(lines, i, len(m.group(1)))
        if not body or all(b.strip() in ("pass", "...") for b in body):
            errors.append(f"{path}:{i}: disallowed pattern: silent except body")
            continue
        has_log = any(_LOG_CALL_RE.search(b) for b in body)
        has_raise = any(_RAISE_RE.search(b) for b in body)
        types = (m.group(3) or "").strip()
        broad = types == "" or "Exception" in types or "BaseException" in types
        if broad and not (has_log and has_raise):
            errors.append(f"{path}:{i}: disallowed pattern: broad except requires log and raise")
        elif not broad and not (has_log or has_raise):
            errors.append(f"{path}:{i}: disallowed pattern: except block without log/raise")
    return errors


def _scan_config(path: Path, lines: Sequence[str]) -> list[str]:
    # Settings are pydantic models only
    if "config" not in path.parts:
        return []
    errors: list[str] = []
    for i, line in enumerate(lines, start=1):
        if re.match(r"^\s*@dataclass\b", line) or re.search(
            r"from\s+dataclasses\s+import\s+dataclass\b", line
        ):
            errors.append(f"{path}:{i}: disallowed pattern: dataclass in config")
    return errors


def scan_file(path: Path) -> list[str]:
    text = path.read_text(encoding="utf-8", errors="ignore")
    lines = text.splitlines()
    return _scan_patterns(path, lines) + _scan_excepts(path, lines) + _scan_config(path, lines)


def main(argv: Sequence[str] | None = None) -> int:
    targets = [Path(a) for a in argv] if argv else TARGET_DIRS
    violations: list[str] = []
    for f in iter_files(targets):
        violations.extend(scan_file(f))
    if violations:
        sys.stdout.write("Guard checks failed:\n")
        for v in violations:
            sys.stdout.write(f"  {v}\n")
        return 2
    sys.stdout.write("Guards OK\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
