# core/locator.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Lookup of project events in a build log

from typing import Sequence

from .event import BuildEvent, EventKind
from .exceptions import MissingEventError
from utils.logger import get_logger


def event_token(project: str, kind: EventKind) -> str:
    """Build log token recording ``kind`` for ``project``."""
    return BuildEvent(project, kind).token


def index_of(project: str, kind: EventKind, log: Sequence[str]) -> int:
    """Find the first position of a project event in the build log.

    Only the first occurrence is considered. Logs holding several builds of
    the same project must be sliced per build before lookup.

    Args:
        project: Project name
        kind: START or FINISH
        log: Build log tokens in temporal order

    Returns:
        Index of the token in the log

    Raises:
        MissingEventError: If the token does not occur in the log
    """
    token = event_token(project, kind)
    try:
        index = list(log).index(token)
    except ValueError:
        raise MissingEventError(project, kind, token) from None

    get_logger().debug(f"Located {token} at index {index}")
    return index
