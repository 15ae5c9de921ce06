"""
Utility functions for Shipyard CLI.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

import click


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Log debug messages, including every HTTP request
        quiet: Only log errors
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )

    if not verbose:
        # urllib3 logs every connection at DEBUG
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def print_success(message: str) -> None:
    click.echo(click.style("✓ ", fg="green") + message)


def print_error(message: str, details: Optional[str] = None) -> None:
    click.echo(click.style("✗ Error: ", fg="red", bold=True) + message, err=True)
    if details:
        click.echo(click.style(f"  {details}", fg="red"), err=True)


def print_warning(message: str) -> None:
    click.echo(click.style("! ", fg="yellow") + message)


def print_info(message: str) -> None:
    click.echo(click.style("ℹ ", fg="blue") + message)


def print_json(data: Any, indent: int = 2) -> None:
    """Print data as formatted JSON."""
    click.echo(json.dumps(data, indent=indent, default=str))


def print_table(headers: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    """
    Print rows as a plain-text table with a header line.

    Column widths fit the widest cell. Cells are converted with ``str``.
    """
    str_rows = [["" if cell is None else str(cell) for cell in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in str_rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(cell))

    header_line = "  ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    click.echo(click.style(header_line, bold=True))
    click.echo("  ".join("-" * w for w in widths))

    for row in str_rows:
        click.echo("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip())


def format_datetime(value: Union[str, int, float, datetime, None]) -> str:
    """
    Format a timestamp for display.

    Accepts ISO 8601 strings, epoch seconds, or datetime objects.
    Returns "-" for empty values and the input unchanged if it can't be parsed.
    """
    if value is None or value == "":
        return "-"

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)):
        dt = datetime.fromtimestamp(value, tz=timezone.utc)
    else:
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value

    return dt.strftime("%Y-%m-%d %H:%M:%S")


def truncate_string(value: Optional[str], max_length: int = 50) -> str:
    """Truncate a string to max_length, ending with "..." when cut."""
    if not value:
        return ""
    if len(value) <= max_length:
        return value
    return value[:max_length - 3] + "..."


def parse_key_value(items: Sequence[str], separator: str = "=") -> Dict[str, str]:
    """
    Parse ``KEY=VALUE`` strings into a dict.

    Raises:
        ValueError: If an item has no separator or an empty key
    """
    result: Dict[str, str] = {}
    for item in items:
        if separator not in item:
            raise ValueError(f"Invalid format: '{item}'. Expected KEY{separator}VALUE")
        key, value = item.split(separator, 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid format: '{item}'. Key cannot be empty")
        result[key] = value
    return result


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask the user to confirm an action."""
    return click.confirm(message, default=default)


def short_id(value: Optional[str], length: int = 12) -> str:
    """Shorten a container or engine ID for table output."""
    return (value or "")[:length]


def pluck(record: Optional[Dict[str, Any]], *keys: str, default: Any = "") -> Any:
    """Walk nested dict keys, returning default if any level is missing."""
    current: Any = record
    for key in keys:
        if not isinstance(current, dict):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def join_values(values: Optional[List[Any]], separator: str = ", ") -> str:
    if not values:
        return ""
    return separator.join(str(v) for v in values)
