"""Fixture corpus verification.

A fixture directory holds FTL sources next to golden entries files
(``hello.ftl`` / ``hello.entries.json``). Each source must parse to the
same resource its golden file decodes to. Sources whose name carries the
error marker are deliberately broken and are left out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from fluent_entries.config import CodecConfig
from fluent_entries.errors import FluentEntriesError
from fluent_entries.model import Resource
from fluent_entries.pipeline import load_json, parse

log = logging.getLogger("fluent_entries.fixtures")


@dataclass
class FixturePair:
    """An FTL source and its golden entries file."""

    source: Path
    entries: Path

    @property
    def name(self) -> str:
        return self.source.name


@dataclass
class FixtureResult:
    """Outcome of comparing one fixture pair."""

    pair: FixturePair
    passed: bool
    error: str = ""
    mismatched_ids: list[str] = field(default_factory=list)


@dataclass
class FixtureReport:
    """All results for a fixture directory."""

    directory: Path
    results: list[FixtureResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> list[FixtureResult]:
        return [r for r in self.results if not r.passed]

    def summary(self) -> str:
        total = len(self.results)
        ok = total - len(self.failures)
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {ok}/{total} fixtures matched"


def discover_fixtures(directory: str | Path, config: CodecConfig | None = None) -> list[FixturePair]:
    """List fixture pairs in a directory, skipping deliberate error cases."""
    config = config or CodecConfig()
    directory = Path(directory)

    pairs = []
    for source in sorted(directory.glob(f"*{config.source_suffix}")):
        if config.error_marker and config.error_marker in source.name:
            log.debug("Skipping error fixture %s", source.name)
            continue
        stem = source.name[: -len(config.source_suffix)]
        pairs.append(FixturePair(source=source, entries=source.with_name(stem + config.entries_suffix)))
    return pairs


def verify_fixture(pair: FixturePair) -> FixtureResult:
    """Compare a source's parse result with its golden file's decode result."""
    if not pair.entries.exists():
        return FixtureResult(pair=pair, passed=False, error=f"Missing golden file: {pair.entries.name}")

    try:
        actual = parse(pair.source.read_text(encoding="utf-8"))
        expected = load_json(pair.entries.read_text(encoding="utf-8"))
    except (FluentEntriesError, OSError, UnicodeDecodeError) as e:
        return FixtureResult(pair=pair, passed=False, error=str(e))

    if actual == expected:
        return FixtureResult(pair=pair, passed=True)

    mismatched = _mismatched_ids(actual, expected)
    return FixtureResult(
        pair=pair,
        passed=False,
        error=f"{pair.name} didn't match its fixture",
        mismatched_ids=mismatched,
    )


def verify_directory(directory: str | Path, config: CodecConfig | None = None) -> FixtureReport:
    """Verify every fixture pair in a directory."""
    report = FixtureReport(directory=Path(directory))
    for pair in discover_fixtures(directory, config):
        result = verify_fixture(pair)
        if not result.passed:
            log.info("Fixture %s failed: %s", pair.name, result.error)
        report.results.append(result)
    return report


def _mismatched_ids(actual: Resource, expected: Resource) -> list[str]:
    """Ids whose message differs, plus ids present on one side only."""
    mismatched = []
    for message_id in dict.fromkeys(actual.ids + expected.ids):
        if actual.get(message_id) != expected.get(message_id):
            mismatched.append(message_id)
    if not mismatched and actual.ids != expected.ids:
        # Same messages, different declaration order
        mismatched = [a for a, b in zip(actual.ids, expected.ids) if a != b]
        # Duplicate ids make one side longer
        longer = max(actual.ids, expected.ids, key=len)
        mismatched += longer[min(len(actual.ids), len(expected.ids)):]
    return mismatched
