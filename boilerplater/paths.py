"""Path resolution against the current context root."""

import os
import re
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, Union

from .logging_config import get_logger

logger = get_logger(__name__)

PathParts = Union[str, Sequence[str]]


def to_parts(parts: PathParts) -> list:
    """Wrap a single fragment into a list."""
    if isinstance(parts, (str, os.PathLike)):
        return [os.fspath(parts)]
    return [os.fspath(p) for p in parts]


def clean_name(full_path: str) -> str:
    """
    Get the clean name from a full path.

    The clean name is the part after the last slash (either style) with
    leading underscores removed.
    """
    return re.split(r"[/\\]", str(full_path))[-1].lstrip("_")


def format_slashes(path: str) -> str:
    """Display form of ``path`` with forward slashes only."""
    return str(path).replace("\\", "/")


class PathResolver:
    """Join relative fragments onto a root directory."""

    def __init__(self, context: Optional[str] = None) -> None:
        self.context = context or os.getcwd()

    def resolve(self, parts: PathParts, context: Optional[str] = None) -> str:
        """
        Resolve ``parts`` against ``context`` or the current root.

        Args:
            parts: Path fragment or ordered sequence of fragments
            context: Root to use instead of the current one

        Returns:
            Joined path
        """
        return os.path.join(context or self.context, *to_parts(parts))

    @contextmanager
    def scoped(self, context: Optional[str]) -> Iterator[str]:
        """Temporarily switch the root; the previous root is always restored."""
        original = self.context
        if context:
            self.context = os.fspath(context)
            logger.debug("Context switched to %s", self.context)
        try:
            yield self.context
        finally:
            self.context = original
