"""
Generator registry.

Holds registered generator declarations in registration order and
validates them against their option schema when they are added.
"""

from typing import Dict, Iterator, List

from .logging_config import get_logger
from .options import GeneratorEntry, OptionKind, OptionSpec

logger = get_logger(__name__)

RESERVED_NAMES = {"names", "help", "verbose", "command"}


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


def validate_entry(entry: GeneratorEntry) -> None:
    """
    Check a generator declaration.

    Raises:
        RegistryError: If the declaration cannot be turned into a CLI command
    """
    if not entry.command or any(c.isspace() for c in entry.command):
        raise RegistryError(f"Invalid command name: {entry.command!r}")

    if not callable(entry.controller):
        raise RegistryError(f"Controller of '{entry.command}' is not callable")

    seen: Dict[str, str] = {}

    def claim(name: str, owner: str) -> None:
        if name in RESERVED_NAMES:
            raise RegistryError(f"'{name}' is reserved ({entry.command}: {owner})")
        if name in seen:
            raise RegistryError(
                f"'{name}' is declared twice in '{entry.command}' "
                f"({seen[name]} and {owner})"
            )
        seen[name] = owner

    for option in entry.options:
        _validate_option(entry.command, option)

        if option.kind is OptionKind.CHECKBOX:
            # Flags land in the same namespace as option names on the CLI
            claim(option.name, f"option '{option.name}'")
            for flag in option.flags:
                claim(flag, f"flag of '{option.name}'")
        elif option.kind is OptionKind.LIST:
            claim(option.name, f"option '{option.name}'")
        else:
            raise RegistryError(f"Unsupported option: {option!r}")


def _validate_option(command: str, option: OptionSpec) -> None:
    if not option.name:
        raise RegistryError(f"Option without a name in '{command}'")

    unknown = [d for d in option.default_values if d not in option.choices]
    if unknown:
        raise RegistryError(
            f"Default {', '.join(unknown)} of '{option.name}' is not among its choices"
        )

    if option.kind is OptionKind.LIST and not option.choices:
        raise RegistryError(f"List option '{option.name}' has no choices")

    if not (callable(option.when) or isinstance(option.when, bool)):
        raise RegistryError(f"'when' of '{option.name}' must be a bool or callable")


class GeneratorRegistry:
    """Registry for managing available generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, GeneratorEntry] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, entry: GeneratorEntry, replace: bool = False):
        """
        Register a generator under its command name.

        Args:
            entry: Generator declaration
            replace: If True, replace an existing registration

        Raises:
            RegistryError: If the declaration is invalid or conflicts exist
        """
        validate_entry(entry)
        command = entry.command

        if command in self._generators and not replace:
            raise RegistryError(f"Generator '{command}' is already registered")
        if command in self._aliases:
            raise RegistryError(
                f"'{command}' is already an alias of '{self._aliases[command]}'"
            )

        for alias in entry.aliases:
            if alias == command:
                continue
            if alias in self._generators:
                raise RegistryError(
                    f"Alias '{alias}' conflicts with an existing command"
                )
            if alias in self._aliases and self._aliases[alias] != command:
                raise RegistryError(
                    f"Alias '{alias}' already points to '{self._aliases[alias]}'"
                )

        if command in self._generators:
            self.unregister(command)

        self._generators[command] = entry
        for alias in entry.aliases:
            if alias != command:
                self._aliases[alias] = command

        logger.debug("Registered generator '%s'", command)

    def unregister(self, command: str):
        """
        Unregister a generator and its aliases.

        Args:
            command: Command name to unregister
        """
        self._generators.pop(command, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == command
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def get(self, command: str) -> GeneratorEntry:
        """
        Get a generator by command name or alias.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        if command in self._generators:
            return self._generators[command]

        if command in self._aliases:
            return self._generators[self._aliases[command]]

        raise RegistryError(
            f"No generator registered for command: {command}. "
            f"Available: {', '.join(self.list_commands())}"
        )

    def is_registered(self, command: str) -> bool:
        return command in self._generators or command in self._aliases

    def list_commands(self) -> List[str]:
        """Get registered command names in registration order."""
        return list(self._generators)

    def __iter__(self) -> Iterator[GeneratorEntry]:
        return iter(list(self._generators.values()))

    def __len__(self) -> int:
        return len(self._generators)
