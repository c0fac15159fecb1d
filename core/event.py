# core/event.py
# This file is part of Ordo - A Build-Order Conformance Checker
#
# Build event tokens and their log encoding

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .exceptions import BuildLogFormatError

# Suffixes appended to a project name in the build log.
STARTED = "s"
FINISHED = "f"


class EventKind(Enum):
    """Lifecycle transition recorded in the build log.

    The value of each member is the one-character suffix the build script
    appends to the project name when it writes the event.
    """

    START = STARTED
    FINISH = FINISHED

    @property
    def suffix(self) -> str:
        return self.value

    @classmethod
    def from_suffix(cls, suffix: str) -> EventKind:
        """Return the kind encoded by a log suffix.

        Raises:
            BuildLogFormatError: If the suffix is not a known event suffix
        """
        try:
            return cls(suffix)
        except ValueError:
            raise BuildLogFormatError(f"Unknown event suffix: {suffix!r}")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BuildEvent:
    """A single START or FINISH entry of a project build.

    Serialized as ``<project><suffix>``. Project names must not end in an
    event suffix character; such names are not escaped.

    Attributes:
        project: Name of the project being built
        kind: Whether the build started or finished
    """

    project: str
    kind: EventKind

    @property
    def token(self) -> str:
        """The log line that records this event."""
        return self.project + self.kind.suffix

    @classmethod
    def from_token(cls, token: str) -> BuildEvent:
        """Decode a build log token.

        Args:
            token: A string such as ``"As"`` or ``"libf"``

        Returns:
            BuildEvent: The decoded event

        Raises:
            BuildLogFormatError: If the token is too short or has an unknown suffix
        """
        token = token.strip()
        if len(token) < 2:
            raise BuildLogFormatError(f"Invalid build log token: {token!r}")
        return cls(token[:-1], EventKind.from_suffix(token[-1]))

    def __str__(self) -> str:
        return self.token


def is_finish_token(token: str) -> bool:
    """True if a raw log token records a build finishing."""
    return token.endswith(FINISHED)


def has_ambiguous_name(project: str) -> bool:
    """True if a project name ends in an event suffix character."""
    return project.endswith((STARTED, FINISHED))
