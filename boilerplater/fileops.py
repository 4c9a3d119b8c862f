"""
File system helpers used by generator controllers.

Each operation resolves its paths against the current context, performs a
single file system action and reports the outcome through the Messenger.
Failures are reported, never raised.
"""

import os
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union

from .logging_config import get_logger
from .messages import Messenger
from .paths import PathParts, PathResolver, clean_name, format_slashes
from .templates import TemplateEngine, TemplateError

logger = get_logger(__name__)

BLANK_LINES_RE = re.compile(r"\n{3,}")


@dataclass
class UpdateReplacement:
    """
    One edit applied by ``FileOps.update_file``.

    If ``needle`` is empty, ``replacement`` is appended to the end of the file.
    If ``skip_if`` is found in the current content, the edit is skipped.
    """

    replacement: str
    needle: Optional[str] = None
    skip_if: Optional[str] = None

    @classmethod
    def coerce(
        cls, value: Union["UpdateReplacement", Mapping[str, Any]]
    ) -> "UpdateReplacement":
        if isinstance(value, cls):
            item = value
        elif isinstance(value, Mapping):
            item = cls(
                replacement=value.get("replacement", ""),
                needle=value.get("needle"),
                skip_if=value.get("skip_if", value.get("skipIf")),
            )
        else:
            raise TypeError(f"Expected a mapping of edit fields, got {value!r}")

        if not isinstance(item.replacement, str):
            raise TypeError(f"Replacement must be a string, got {item.replacement!r}")
        return item


def normalize_contents(contents: str) -> str:
    """
    Collapse runs of blank lines, trim and end with a single newline.

    A single blank line between two lines is kept. Two or more blank lines
    in a row are removed entirely, so ``"a\\n\\n\\nb"`` and ``"a\\n\\n\\n\\nb"``
    both become ``"a\\nb\\n"``. Templates that need a visible gap keep it to
    one blank line.
    """
    return BLANK_LINES_RE.sub("\n", contents).strip() + "\n"


def apply_replacements(contents: str, replacements: Iterable[Sequence[str]]) -> str:
    """
    Apply ``(search, replacement)`` pairs in order, each one globally.

    Raises:
        TypeError: If a pair is malformed or holds a non-string value
    """
    for pair in replacements:
        try:
            search, replacement = pair
        except (TypeError, ValueError):
            raise TypeError(
                f"Expected a (search, replacement) pair, got {pair!r}"
            ) from None
        if not isinstance(search, str) or not isinstance(replacement, str):
            raise TypeError(f"Replacement values must be strings, got {pair!r}")
        contents = contents.replace(search, replacement)
    return contents


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: str, contents: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(contents)


class FileOps:
    """Directory and file helpers bound to a resolver and a messenger."""

    def __init__(
        self,
        resolver: PathResolver,
        messenger: Messenger,
        template_engine: Optional[TemplateEngine] = None,
    ) -> None:
        self.resolver = resolver
        self.messenger = messenger
        self._template_engine = template_engine

    @property
    def template_engine(self) -> TemplateEngine:
        if self._template_engine is None:
            self._template_engine = TemplateEngine()
        return self._template_engine

    @staticmethod
    def clean_name(full_path: str) -> str:
        return clean_name(full_path)

    def make_directory(
        self, path_parts: PathParts, child: bool = False, entity: str = "Directory"
    ) -> None:
        """
        Create the directory for ``path_parts`` (relative to current context).

        Args:
            path_parts: Path to the new directory or a sequence of path parts.
            child: Child directory flag, affects only the message nesting.
            entity: Entity name used in the localized message.
        """
        directory_path = self.resolver.resolve(path_parts)
        directory_name = clean_name(directory_path)
        base_depth = 1 if child else 0
        display_path = format_slashes(directory_path)

        if os.path.exists(directory_path):
            logger.debug("Directory exists, skipping: %s", directory_path)
            self.messenger.error(
                f"{entity} '%s' already exists", {"depth": base_depth}, directory_name
            )
            if child:
                self.messenger.error("%s", {"depth": base_depth + 1}, display_path)
            return

        try:
            os.makedirs(directory_path)
        except OSError:
            logger.error("Failed to create %s", directory_path, exc_info=True)
            self.messenger.error(
                f"Unable to create {entity.lower()} '%s'",
                {"depth": base_depth},
                directory_name,
            )
            return

        logger.info("Created directory %s", directory_path)
        self.messenger.success(
            f"{entity} '%s' successfully created", {"depth": base_depth}, directory_name
        )
        if child:
            self.messenger.success("%s", {"depth": base_depth + 1}, display_path)

    def make_file(
        self,
        template_path: PathParts,
        file_path: PathParts,
        replacements: Iterable[Tuple[str, str]] = (),
        entity: str = "File",
        variables: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Create a file from a template, replacing every search string found.

        Args:
            template_path: Template file path relative to current context.
            file_path: Path of the new file.
            replacements: ``(search, replacement)`` pairs applied in order.
            entity: Entity name used in the localized message.
            variables: If given, the template is rendered with Jinja2 first.
        """
        template_path = self.resolver.resolve(template_path)
        file_path = self.resolver.resolve(file_path)
        filename = clean_name(file_path)

        try:
            contents = _read_text(template_path)
        except (OSError, UnicodeError):
            logger.debug("Template not readable: %s", template_path, exc_info=True)
            self.messenger.error("Template '%s' not found", {"depth": 1}, template_path)
            return

        if variables is not None:
            try:
                contents = self.template_engine.render_string(contents, variables)
            except TemplateError as e:
                logger.error("Cannot render %s: %s", template_path, e)
                self.messenger.error(
                    "Unable to render template '%s'", {"depth": 1}, template_path
                )
                return

        try:
            contents = normalize_contents(apply_replacements(contents, replacements))
        except TypeError as e:
            logger.error("Invalid replacements for %s: %s", file_path, e)
            self.messenger.error(
                f"Unable to create {entity.lower()} '%s'", {"depth": 1}, filename
            )
            return

        if os.path.exists(file_path):
            self.messenger.error(f"{entity} '%s' already exists", {"depth": 1}, filename)
            self.messenger.error("%s", {"depth": 2}, format_slashes(file_path))
            return

        try:
            # Create subfolders
            parent = os.path.dirname(file_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            _write_text(file_path, contents)
        except OSError:
            logger.error("Failed to write %s", file_path, exc_info=True)
            self.messenger.error(
                f"Unable to create {entity.lower()} '%s'", {"depth": 1}, filename
            )
            return

        logger.info("Created file %s from %s", file_path, template_path)
        self.messenger.success(
            f"{entity} '%s' successfully created", {"depth": 1}, filename
        )
        self.messenger.success("%s", {"depth": 2}, format_slashes(file_path))

    def update_file(
        self,
        file_path: PathParts,
        replacements: Iterable[Union[UpdateReplacement, Mapping[str, Any]]],
    ) -> None:
        """
        Update a file: replace ``needle`` or append ``replacement`` to the end.

        Args:
            file_path: Path to the file.
            replacements: Edits applied in order, see ``UpdateReplacement``.
        """
        file_path = self.resolver.resolve(file_path)
        filename = clean_name(file_path)
        display_path = format_slashes(file_path)

        try:
            content = _read_text(file_path)

            for item in replacements:
                item = UpdateReplacement.coerce(item)

                if item.skip_if and item.skip_if in content:
                    logger.debug("Skip condition matched in %s", file_path)
                    self.messenger.error(
                        "Content to modify already in use in '%s'",
                        {"depth": 1},
                        filename,
                    )
                    self.messenger.error("%s", {"depth": 2}, display_path)
                    continue

                if item.needle:
                    content = content.replace(item.needle, item.replacement)
                else:
                    content += item.replacement

            _write_text(file_path, content)
        except (OSError, UnicodeError, TypeError):
            # Nothing is written when any edit is malformed
            logger.warning("Cannot update %s", file_path, exc_info=True)
            self.messenger.error(
                "File '%s' doesn't exists or locked", {"depth": 1}, filename
            )
            self.messenger.error("%s", {"depth": 2}, display_path)
            return

        logger.info("Updated file %s", file_path)
        self.messenger.success("File '%s' successfully updated", {"depth": 1}, filename)
        self.messenger.success("%s", {"depth": 2}, display_path)
