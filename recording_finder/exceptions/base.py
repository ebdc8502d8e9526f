"""Base exception classes for Recording Finder."""


class FinderError(Exception):
    """Base class for all user-facing Recording Finder errors.

    The CLI catches this class, reports the message to the operator and
    terminates the run with a non-zero exit code.
    """


class ConfigError(FinderError):
    """Base class for user-facing configuration errors.

    Covers both settings-file problems and missing interactive input
    (no roots, no search mode, no day, no search text). All of them are
    fatal for the current run and are never retried.
    """
