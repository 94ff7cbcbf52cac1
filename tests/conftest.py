"""Shared pytest fixtures and test data for fnrctl tests.

Every number below satisfies both weighted control sums (checked by hand
against the weight tables in ``fnrctl.domain.checksum``). None of them is
meant to belong to a real person.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from fnrctl.config.settings import FnrSettings

# ---------------------------------------------------------------------------
# Checksum-valid numbers, grouped by how they classify
# ---------------------------------------------------------------------------

MALE_BIRTH_NUMBERS = [
    "31129956715",
    "15038543145",
    "01019012561",
    "31129956987",
    "03065056711",
]

FEMALE_BIRTH_NUMBERS = [
    "01019012480",
    "15038543226",
    "01019012642",
    "22048831269",
]

D_NUMBERS = [
    "51019012364",
    "71020345602",
    "61019012416",
    "41559012384",  # third digit 5, still a D number
    "41559012465",
]

H_NUMBERS = [
    "01459012342",
    "02458543200",
    "12459012514",
    "02559012753",
    "03559012873",
]

FH_NUMBERS = [
    "95010112371",
    "81020345683",
    "91020345735",
    "88010112308",
    "92559012116",  # third digit 5, still an FH number
    "90559012229",
]

# Same digits at positions 0, 2 and 8; differ everywhere else.
SAME_CLASS_VARIANTS = [
    "01159012308",
    "02159012347",
    "01159022370",
    "01159112329",
    "01179012398",
]

# Length 11, all digits, at least one control sum not divisible by 11.
INVALID_CHECKSUM_NUMBERS = [
    "01019012481",  # only the second sum fails
    "01019012490",  # both sums fail
    "12345678901",
    "31129956716",
    "95010112372",
]

INVALID_LENGTH_NUMBERS = [
    "",
    "0",
    "0101901248",
    "010190124800",
    "01019012480 ",
    "0101-9012480",
]

ALL_VALID = (
    MALE_BIRTH_NUMBERS + FEMALE_BIRTH_NUMBERS + D_NUMBERS + H_NUMBERS + FH_NUMBERS
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FnrSettings:
    """Default settings, isolated from any fnrctl.toml or FNRCTL_* env vars."""
    monkeypatch.delenv("FNRCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return FnrSettings.from_cli(search_root=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Run CLI commands from an empty temp directory with no config env var.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("FNRCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fnr = logging.getLogger("fnrctl")
    fnr_level = fnr.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fnr.setLevel(fnr_level)
