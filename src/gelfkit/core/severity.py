"""Mapping of host log levels onto the syslog severity scale."""

import logging

from gelfkit.core.models import LogLevel

# Syslog severities: 2 critical, 3 error, 4 warning, 6 informational, 7 debug
_SYSLOG_SEVERITY: dict[LogLevel, int] = {
    LogLevel.FATAL: 2,
    LogLevel.ERROR: 3,
    LogLevel.WARN: 4,
    LogLevel.INFO: 6,
    LogLevel.TRACE: 6,
    LogLevel.DEBUG: 7,
}

DEFAULT_SEVERITY = 3


def severity_level(level: object) -> int:
    """Map a host log level to a syslog severity.

    Args:
        level: Host log level. Anything that is not a known LogLevel is
            treated as an error.

    Returns:
        Syslog severity between 0 and 7.
    """
    if not isinstance(level, LogLevel):
        return DEFAULT_SEVERITY
    return _SYSLOG_SEVERITY.get(level, DEFAULT_SEVERITY)


def level_from_levelno(levelno: int) -> LogLevel:
    """Map a standard library logging level number to a LogLevel.

    Levels below DEBUG become TRACE; levels at or above CRITICAL become FATAL.
    """
    if levelno < logging.DEBUG:
        return LogLevel.TRACE
    if levelno < logging.INFO:
        return LogLevel.DEBUG
    if levelno < logging.WARNING:
        return LogLevel.INFO
    if levelno < logging.ERROR:
        return LogLevel.WARN
    if levelno < logging.CRITICAL:
        return LogLevel.ERROR
    return LogLevel.FATAL
