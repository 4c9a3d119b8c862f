"""
Message catalogs and lookup.

Catalogs are flat JSON objects mapping a message key to a template with
``%s`` placeholders. Each Localizer owns its catalogs and active locale.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .config import ConfigError
from .logging_config import get_logger

logger = get_logger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent / "locales"
DEFAULT_LOCALE = "en"


def read_catalog(path: Union[str, Path]) -> Dict[str, str]:
    """Read a flat JSON catalog file.

    Raises:
        ConfigError: If the file is missing, unreadable or not a JSON object.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            entries = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Locale file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in locale file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading locale file {path}: {e}") from e

    if not isinstance(entries, dict):
        raise ConfigError(f"Locale file must contain a JSON object: {path}")
    return {str(k): str(v) for k, v in entries.items()}


class Localizer:
    """Resolve message keys to localized strings."""

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        default_locale: str = DEFAULT_LOCALE,
        directory: Optional[Path] = LOCALES_DIR,
    ) -> None:
        self._catalogs: Dict[str, Dict[str, str]] = {}
        self.default_locale = default_locale
        self._locale = locale

        if directory is not None and Path(directory).is_dir():
            for file in sorted(Path(directory).glob("*.json")):
                self.merge_catalog(file.stem, read_catalog(file))

        logger.debug(
            "Localizer ready: locale=%s, catalogs=%s", locale, sorted(self._catalogs)
        )

    @property
    def locale(self) -> str:
        return self._locale

    def set_locale(self, code: str) -> None:
        """Switch the active locale."""
        if code not in self._catalogs:
            logger.warning(
                "No catalog for locale '%s'; falling back to '%s'",
                code,
                self.default_locale,
            )
        self._locale = code

    def get_catalog(self, locale: Optional[str] = None) -> Dict[str, str]:
        """Return a copy of the catalog for ``locale`` (active by default)."""
        return dict(self._catalogs.get(locale or self._locale, {}))

    def merge_catalog(self, locale: str, entries: Mapping[str, str]) -> None:
        """Overlay ``entries`` on the catalog for ``locale``; new keys win."""
        catalog = self._catalogs.setdefault(locale, {})
        catalog.update(entries)

    def load_catalog_file(self, locale: str, path: Union[str, Path]) -> None:
        """Merge a JSON catalog file into ``locale``."""
        self.merge_catalog(locale, read_catalog(path))
        logger.info("Merged locale file %s into '%s'", path, locale)

    def translate(self, key: str, *args: Any) -> str:
        """
        Localize ``key`` and substitute positional ``%s`` placeholders.

        Lookup order is the active locale, the default locale, then the key
        itself.
        """
        template = self._catalogs.get(self._locale, {}).get(key)
        if template is None:
            template = self._catalogs.get(self.default_locale, {}).get(key, key)

        if not args:
            return template

        try:
            return template % tuple(args)
        except (TypeError, ValueError) as e:
            logger.warning("Cannot format message %r with %r: %s", key, args, e)
            return template

    __call__ = translate
