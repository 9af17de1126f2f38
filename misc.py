from dotenv import load_dotenv
from os import getenv
import datetime
import re
import sys


"""Utility helpers used throughout the project.

This module provides the environment configuration lookups, the
timestamped file logger and small parsing helpers used by the record
codec.

Notes
-----
Settings are read from the process environment, optionally populated from
a ``.env`` file via :func:`load_dotenv`. Variables already present in the
environment take precedence over the ``.env`` file.
"""


DEFAULT_LOG_FILE = "logs.log"

LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")

TRUTHY_VALUES = ("1", "true", "yes", "on")


def get_log_file() -> str:
    """Return the path of the log file from the environment.

    Loads environment variables from a .env file (via load_dotenv()) and
    returns the value of the "BOATS_LOG_FILE" variable, falling back to
    ``DEFAULT_LOG_FILE``.

    Example
    -------
    >>> # with .env containing BOATS_LOG_FILE=/tmp/marina.log
    >>> get_log_file()
    '/tmp/marina.log'
    """
    load_dotenv()
    return getenv("BOATS_LOG_FILE") or DEFAULT_LOG_FILE


def get_log_echo() -> bool:
    """Return True if log entries should also be printed to stdout.

    Controlled by the "BOATS_LOG_ECHO" variable; see :func:`get_log_file`
    for behavior of environment loading.
    """
    load_dotenv()
    return (getenv("BOATS_LOG_ECHO") or "").strip().lower() in TRUTHY_VALUES


def get_current_datetime() -> datetime.datetime:
    """Return the current datetime (datetime.datetime.now()).

    This wrapper exists to ease testing and to provide a single place to
    change time retrieval behavior if necessary.
    """
    return datetime.datetime.now()


def log(msg: str) -> None:
    """Append a timestamped message to the log file.

    The entry is also printed when :func:`get_log_echo` is enabled. A log
    file that cannot be written is reported on stderr and otherwise
    ignored, so logging never interrupts the operation being logged.

    Parameters
    ----------
    msg : str
        Message text to persist to the log file.
    """
    curr_dt = get_current_datetime()
    log_str = f"[{curr_dt.strftime('%d/%m/%Y %H:%M:%S.%f')}]\n\t{msg}\n\n"
    log_path = get_log_file()
    try:
        with open(log_path, "a", encoding="utf-8") as log_file:
            log_file.write(log_str)
    except OSError as e:
        print(f"Could not write to log file {log_path}: {e}", file=sys.stderr)
    if get_log_echo():
        print(log_str)


def leading_int(text: str) -> int:
    """Parse the integer at the start of ``text`` the way C's atoi does.

    Leading whitespace and an optional sign are accepted; parsing stops at
    the first non-digit. Text that does not start with a number yields 0.

    Parameters
    ----------
    text : str
        Raw field value, e.g. ``"24"`` or ``"7b"``.

    Returns
    -------
    int
        The parsed value, or 0.
    """
    match = LEADING_INT_PATTERN.match(text)
    return int(match.group(1)) if match else 0
