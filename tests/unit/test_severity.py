"""Tests for syslog severity mapping."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gelfkit.core.models import LogLevel
from gelfkit.core.severity import level_from_levelno, severity_level


class TestSeverityLevel:
    """Tests for severity_level()."""

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (LogLevel.FATAL, 2),
            (LogLevel.ERROR, 3),
            (LogLevel.WARN, 4),
            (LogLevel.INFO, 6),
            (LogLevel.TRACE, 6),
            (LogLevel.DEBUG, 7),
        ],
    )
    def test_maps_known_levels(self, level: LogLevel, expected: int) -> None:
        """Each host level maps to its syslog severity."""
        assert severity_level(level) == expected

    @pytest.mark.core
    @pytest.mark.parametrize("level", ["WARN", 30, None, object()])
    def test_unrecognized_level_maps_to_error(self, level: object) -> None:
        """Anything that is not a LogLevel is treated as an error."""
        assert severity_level(level) == 3

    @pytest.mark.core
    @given(st.one_of(st.sampled_from(LogLevel), st.text(), st.integers(), st.none()))
    def test_mapping_is_total_and_within_syslog_range(self, level: object) -> None:
        """Every input maps to one of the emitted severities."""
        assert severity_level(level) in {2, 3, 4, 6, 7}


class TestLevelFromLevelno:
    """Tests for level_from_levelno()."""

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (5, LogLevel.TRACE),
            (logging.DEBUG, LogLevel.DEBUG),
            (logging.INFO, LogLevel.INFO),
            (logging.WARNING, LogLevel.WARN),
            (logging.ERROR, LogLevel.ERROR),
            (logging.CRITICAL, LogLevel.FATAL),
            (logging.CRITICAL + 10, LogLevel.FATAL),
        ],
    )
    def test_maps_stdlib_levels(self, levelno: int, expected: LogLevel) -> None:
        """Standard library level numbers map onto the host taxonomy."""
        assert level_from_levelno(levelno) is expected

    @pytest.mark.core
    def test_custom_level_between_info_and_warning(self) -> None:
        """Custom levels fall into the nearest lower standard level."""
        assert level_from_levelno(25) is LogLevel.INFO
