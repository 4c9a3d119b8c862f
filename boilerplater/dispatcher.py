"""
Command dispatching.

Turns registered generators into argparse subcommands, collects arguments
either from the command line or interactively, normalizes both into one
shape and runs the controller once per target name.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Callable, Dict, List, Mapping, Sequence

import questionary

from .logging_config import get_logger, setup_logging
from .messages import Messenger
from .options import GeneratorEntry, OptionKind
from .paths import PathResolver
from .prompt import PromptAdapter
from .registry import GeneratorRegistry

logger = get_logger(__name__)

PromptRunner = Callable[[List[Dict[str, Any]]], Dict[str, Any]]


def normalize_cli_args(
    entry: GeneratorEntry, parsed: Mapping[str, Any]
) -> Dict[str, Any]:
    """
    Reshape parsed CLI flags into the form interactive answers have.

    Checkbox choices arrive as one boolean per flag; they are grouped into
    ``{option_name: {flag: True}}``. Flags that were not set are dropped, so
    an empty selection gives an empty mapping, as an empty checkbox answer does.

    Args:
        entry: Generator the flags belong to
        parsed: Parsed argument values

    Returns:
        Normalized options
    """
    args: Dict[str, Any] = {
        option.name: {} for option in entry.options if option.kind is OptionKind.CHECKBOX
    }

    for key, value in parsed.items():
        option = entry.option_for_flag(key)
        if option is not None:
            if value:
                group = dict(args[option.name])
                group[key] = True
                args[option.name] = group
            continue

        declared = next((o for o in entry.options if o.name == key), None)
        if declared is None:
            continue
        if declared.kind is OptionKind.CHECKBOX:
            # Merge with flags already grouped under this name
            chosen = {flag: True for flag, on in dict(value or {}).items() if on}
            args[key] = {**chosen, **args[key]}
        else:
            args[key] = value

    return args


class Dispatcher:
    """Run generators from the command line or interactive prompts."""

    def __init__(
        self,
        registry: GeneratorRegistry,
        messenger: Messenger,
        resolver: PathResolver,
        prompt: PromptRunner | None = None,
    ) -> None:
        self.registry = registry
        self.messenger = messenger
        self.resolver = resolver
        self.prompt = prompt or questionary.prompt
        self.adapter = PromptAdapter(messenger.i18n)
        self._command_parsers: Dict[str, argparse.ArgumentParser] = {}

    def build_parser(self, prog: str | None = None) -> argparse.ArgumentParser:
        """Create the parser with one subcommand per registered generator."""
        parser = argparse.ArgumentParser(
            prog=prog, description="Generate boilerplate from registered templates."
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable debug logging"
        )
        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        self._command_parsers = {}

        for entry in self.registry:
            self._add_command(subparsers, entry)

        return parser

    def _add_command(self, subparsers, entry: GeneratorEntry) -> None:
        i18n = self.messenger.i18n
        command = subparsers.add_parser(
            entry.command,
            aliases=list(entry.aliases),
            help=i18n(entry.help or entry.message),
        )
        for name in (entry.command, *entry.aliases):
            self._command_parsers[name] = command
        command.add_argument(
            "names", nargs="*", metavar="NAME", help=i18n(entry.message)
        )

        for option in entry.options:
            if option.kind is OptionKind.CHECKBOX:
                # One boolean per choice
                for flag, description in option.choices.items():
                    command.add_argument(
                        f"--{flag}",
                        dest=flag,
                        action="store_true",
                        default=False,
                        help=i18n(description),
                    )
            elif option.kind is OptionKind.LIST:
                command.add_argument(
                    f"--{option.name}",
                    dest=option.name,
                    metavar="VALUE",
                    choices=option.flags,
                    default=option.default_choice,
                    help=i18n(option.message),
                )
            else:
                raise TypeError(f"Unsupported option: {option!r}")

        command.set_defaults(_generator=entry.command)

    def dispatch(
        self, argv: Sequence[str] | None = None, prog: str | None = None
    ) -> int:
        """
        Parse ``argv`` and run the selected generator.

        Options of a generator may appear anywhere among its names, so
        ``component Button --styles Card`` targets both names.

        Returns:
            Exit code (0 when a command ran, 1 when none was given)
        """
        argv = sys.argv[1:] if argv is None else list(argv)
        parser = self.build_parser(prog)
        parsed, rest = parser.parse_known_args(argv)
        parsed = vars(parsed)

        if parsed.pop("verbose", False):
            setup_logging("DEBUG")

        command = parsed.pop("_generator", None)
        if command is None:
            if rest:
                parser.error(f"unrecognized arguments: {' '.join(rest)}")
            parser.print_help()
            return 1

        # Re-parse the subcommand's own arguments with options and names mixed
        used = parsed["command"]
        command_args = argv[argv.index(used) + 1 :]
        command_parser = self._command_parsers[used]
        parsed = vars(command_parser.parse_intermixed_args(command_args))
        parsed.pop("_generator", None)

        entry = self.registry.get(command)
        names = parsed.pop("names", [])
        self.invoke(entry, names, parsed)
        return 0

    def invoke(
        self,
        entry: GeneratorEntry,
        names: Sequence[str] | None,
        parsed: Mapping[str, Any] | None = None,
    ) -> None:
        """
        Collect arguments for ``entry`` and execute it.

        Names given on the command line select CLI mode; otherwise the user
        is prompted.
        """
        if names:
            logger.info("Running '%s' from the command line", entry.command)
            args = normalize_cli_args(entry, parsed or {})
        else:
            logger.info("Running '%s' interactively", entry.command)
            answers = dict(self.prompt(self.adapter.to_prompt(entry)) or {})
            names = answers.pop("names", None) or []
            if not names:
                self.messenger.info(entry.message)
                return
            args = answers

        self.execute(entry, names, args)

    def execute(
        self, entry: GeneratorEntry, names: Sequence[str], args: Mapping[str, Any]
    ) -> None:
        """Call the controller once per name inside the generator's context."""
        for name in names:
            with self.resolver.scoped(entry.context):
                logger.debug("Controller '%s' for %s", entry.command, name)
                try:
                    entry.controller(name, _copy_args(args), dict(entry.settings))
                except Exception:
                    logger.exception(
                        "Controller '%s' failed for %s", entry.command, name
                    )
                    self.messenger.error(
                        "Generator '%s' failed for '%s'", None, entry.command, name
                    )


def _copy_args(args: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: dict(v) if isinstance(v, dict) else v for k, v in args.items()}
