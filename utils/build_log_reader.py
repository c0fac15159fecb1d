# utils/build_log_reader.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Reader for build log files written by project build scripts

from pathlib import Path
from typing import List, Sequence

from core.event import BuildEvent
from core.exceptions import BuildLogFormatError
from utils.logger import get_logger


def read_build_log(filepath: str) -> List[str]:
    """Read build log tokens from a file.

    Build scripts append one line per transition, e.g. ``echo $1s >> build.log``
    at the start and ``echo $1f >> build.log`` at the end. Lines are stripped
    and blank lines are skipped; line order is the temporal order.

    Expected format:
        1s
        Cs
        1f

    Args:
        filepath: Path to the build log file

    Returns:
        List of tokens in file order

    Raises:
        BuildLogFormatError: If the file does not exist or cannot be read
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise BuildLogFormatError(f"Build log not found: {filepath}")

    logger.debug(f"Reading build log: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            tokens = [line.strip() for line in file if line.strip()]
    except (OSError, UnicodeDecodeError) as e:
        raise BuildLogFormatError(f"Error reading build log {filepath}: {e}")

    logger.debug(f"Read {len(tokens)} build log entries")
    return tokens


def validate_build_log(tokens: Sequence[str]) -> List[BuildEvent]:
    """Check that every token decodes to a build event.

    Args:
        tokens: Build log tokens

    Returns:
        The decoded events, in log order

    Raises:
        BuildLogFormatError: Naming the first malformed entry (1-based line number)
    """
    events = []
    for line_num, token in enumerate(tokens, start=1):
        try:
            events.append(BuildEvent.from_token(token))
        except BuildLogFormatError as e:
            raise BuildLogFormatError(f"Invalid build log entry at line {line_num}: {e}")

    get_logger().debug(f"Build log validation successful: {len(events)} events")
    return events


def projects_in_log(tokens: Sequence[str]) -> List[str]:
    """Project names in order of first appearance in the log.

    Raises:
        BuildLogFormatError: If a token is malformed
    """
    names: List[str] = []
    for event in validate_build_log(tokens):
        if event.project not in names:
            names.append(event.project)
    return names
