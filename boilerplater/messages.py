"""Console reporting of localized success and error lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from rich.console import Console
from rich.text import Text

from .i18n import Localizer

SUCCESS_ICON = "✔"
ERROR_ICON = "✖"
DEPTH_MARKER = "-"


@dataclass
class MessageOptions:
    """Message layout: nesting depth and whether to show the icon."""

    depth: int = 0
    icon: bool = True


def _message_options(
    options: MessageOptions | Mapping[str, Any] | None,
) -> MessageOptions:
    if options is None:
        return MessageOptions()
    if isinstance(options, MessageOptions):
        return MessageOptions(options.depth, options.icon)
    return MessageOptions(
        depth=int(options.get("depth", 0)), icon=bool(options.get("icon", True))
    )


class Messenger:
    """Print localized, colored status lines."""

    def __init__(self, localizer: Localizer, console: Console | None = None) -> None:
        self.localizer = localizer
        self.console = console or Console(highlight=False)

    def i18n(self, message: str, *args: Any) -> str:
        """Return ``message`` localized in the active locale."""
        return self.localizer.translate(message, *args)

    def success(
        self,
        message: str,
        options: MessageOptions | Mapping[str, Any] | None = None,
        *args: Any,
    ) -> None:
        self._print(message, options, SUCCESS_ICON, "bold green", args)

    def error(
        self,
        message: str,
        options: MessageOptions | Mapping[str, Any] | None = None,
        *args: Any,
    ) -> None:
        self._print(message, options, ERROR_ICON, "bold red", args)

    def info(self, message: str, *args: Any) -> None:
        text = Text(self.i18n(message, *args), style="yellow")
        self.console.print(text, soft_wrap=True)

    def format_prefix(self, options: MessageOptions, icon: str) -> str:
        """Build the line prefix: icon at depth 0, dashes when nested."""
        if options.depth:
            options.icon = False

        prefix = f"{icon} " if options.icon else "  "
        if options.depth:
            prefix += f"{DEPTH_MARKER * options.depth} "
        return prefix

    def _print(self, message, options, icon, style, args) -> None:
        options = _message_options(options)
        line = self.format_prefix(options, icon) + self.i18n(message, *args)
        self.console.print(Text(line, style=style), soft_wrap=True)
