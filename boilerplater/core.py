"""
Boilerplater facade.

Wires localization, console messages, path resolution, file helpers and
the generator registry together for a host application.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

from rich.console import Console

from .config import ConfigError, ToolkitConfig, load_config
from .dispatcher import Dispatcher, PromptRunner
from .fileops import FileOps
from .i18n import Localizer
from .logging_config import get_logger, setup_logging
from .messages import Messenger
from .options import GeneratorEntry
from .paths import PathResolver
from .registry import GeneratorRegistry

logger = get_logger(__name__)


def _resolve_config(
    config: ToolkitConfig | Mapping[str, Any] | str | Path | None,
    overrides: Dict[str, Any],
) -> ToolkitConfig:
    if isinstance(config, ToolkitConfig):
        if overrides:
            return load_config(custom_config={**vars(config), **overrides})
        return config
    if isinstance(config, (str, Path)):
        return load_config(custom_config=overrides, config_file=config)
    if isinstance(config, Mapping):
        return load_config(custom_config={**config, **overrides})
    if config is None:
        return load_config(custom_config=overrides)
    raise ConfigError(f"Invalid config type: {type(config)}")


class Boilerplater:
    """Register generators and run them from the command line."""

    def __init__(
        self,
        config: ToolkitConfig | Mapping[str, Any] | str | Path | None = None,
        console: Console | None = None,
        **options: Any,
    ) -> None:
        """
        Initialize the toolkit.

        Args:
            config: ToolkitConfig, a dict of options, or a JSON config path.
            console: Rich console for messages (creates new if None).
            **options: Option overrides (``locale``, ``locales``, ``context``).

        Raises:
            ConfigError: If the configuration or a locale file is invalid.
        """
        self.config = _resolve_config(config, options)
        self.resolver = PathResolver(self.config.context)
        self.localizer = Localizer()
        self.registry = GeneratorRegistry()

        for locale, file in self.config.locales.items():
            self.localizer.load_catalog_file(locale, os.path.join(self.context, file))
        self.localizer.set_locale(self.config.locale)

        self._messenger = Messenger(self.localizer, console)
        self._helpers = FileOps(self.resolver, self._messenger)
        logger.debug("Boilerplater initialized (context=%s)", self.context)

    @property
    def context(self) -> str:
        """Root directory relative paths are resolved against."""
        return self.resolver.context

    @property
    def message(self) -> Messenger:
        return self._messenger

    @property
    def helpers(self) -> FileOps:
        return self._helpers

    def add_generator(
        self, generator: GeneratorEntry | Mapping[str, Any]
    ) -> GeneratorEntry:
        """
        Register a generator.

        Args:
            generator: GeneratorEntry or a mapping of the same shape.

        Returns:
            The registered entry.

        Raises:
            RegistryError: If the declaration is invalid or the command is taken.
        """
        entry = (
            generator
            if isinstance(generator, GeneratorEntry)
            else GeneratorEntry.from_dict(generator)
        )
        self.registry.register(entry)
        return entry

    def listen(
        self,
        argv: Sequence[str] | None = None,
        prompt: PromptRunner | None = None,
        prog: str | None = None,
    ) -> int:
        """
        Parse ``argv`` (default: ``sys.argv[1:]``) and run the chosen generator.

        Returns:
            Exit code
        """
        setup_logging(self.config.log_level)
        if argv is None:
            argv = sys.argv[1:]

        dispatcher = Dispatcher(self.registry, self.message, self.resolver, prompt)
        return dispatcher.dispatch(argv, prog=prog)
