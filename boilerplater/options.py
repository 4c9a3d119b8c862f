"""
Generator declarations.

An option is either a checkbox (multi-select, one CLI flag per choice) or a
list (single select, one valued CLI flag). A GeneratorEntry bundles the
command, its options and the controller that does the work.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

Answers = Dict[str, Any]
When = Union[bool, Callable[[Answers], bool]]
Controller = Callable[[str, Dict[str, Any], Dict[str, Any]], None]


class OptionKind(Enum):
    """Supported option shapes."""

    CHECKBOX = "checkbox"
    LIST = "list"


@dataclass(frozen=True)
class OptionSpec:
    """Common fields of a generator option."""

    name: str
    message: str
    choices: Dict[str, str] = field(default_factory=dict)
    default: Union[str, Sequence[str], None] = None
    when: When = True

    kind = None  # set by subclasses

    @property
    def flags(self) -> List[str]:
        """Choice keys in declaration order."""
        return list(self.choices)

    @property
    def default_values(self) -> Tuple[str, ...]:
        if self.default is None:
            return ()
        if isinstance(self.default, str):
            return (self.default,)
        return tuple(self.default)


@dataclass(frozen=True)
class CheckboxOption(OptionSpec):
    """Multi-select option; answers become ``{flag: True}`` mappings."""

    kind = OptionKind.CHECKBOX


@dataclass(frozen=True)
class ListOption(OptionSpec):
    """Single-select option; the answer is the chosen flag."""

    kind = OptionKind.LIST

    @property
    def default_choice(self) -> Optional[str]:
        """The declared default (first one if several), else the first choice."""
        if self.default_values:
            return self.default_values[0]
        return self.flags[0] if self.flags else None


OPTION_TYPES = {
    OptionKind.CHECKBOX: CheckboxOption,
    OptionKind.LIST: ListOption,
}


def option_from_dict(data: Mapping[str, Any]) -> OptionSpec:
    """
    Build an option from a mapping with a ``type`` key.

    Raises:
        ValueError: If ``type`` is missing or unknown.
    """
    values = dict(data)
    try:
        kind = OptionKind(values.pop("type"))
    except KeyError:
        raise ValueError(f"Option {values.get('name')!r} has no 'type'") from None
    except ValueError:
        raise ValueError(f"Unknown option type: {data['type']!r}") from None

    if "choices" in values:
        values["choices"] = dict(values["choices"] or {})
    return OPTION_TYPES[kind](**values)


@dataclass(frozen=True)
class GeneratorEntry:
    """
    A registered generator.

    Attributes:
        command: Subcommand name exposed on the CLI.
        message: Message shown when asking for names interactively.
        controller: Called as ``controller(name, options, settings)`` once per
            target name.
        options: Additional CLI flags / interactive questions.
        settings: Passed to the controller as is.
        context: Root directory for relative paths while the controller runs.
        aliases: Additional subcommand names.
        help: Subcommand description shown in ``--help``.
    """

    command: str
    message: str
    controller: Controller
    options: Tuple[OptionSpec, ...] = ()
    settings: Dict[str, Any] = field(default_factory=dict)
    context: Optional[str] = None
    aliases: Tuple[str, ...] = ()
    help: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "options", tuple(self.options or ()))
        object.__setattr__(self, "aliases", tuple(self.aliases or ()))
        object.__setattr__(self, "settings", dict(self.settings or {}))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneratorEntry":
        """Build an entry; ``options`` may hold mappings or OptionSpec objects."""
        values = dict(data)
        values["options"] = tuple(
            o if isinstance(o, OptionSpec) else option_from_dict(o)
            for o in values.get("options") or ()
        )
        return cls(**values)

    def option_for_flag(self, flag: str) -> Optional[OptionSpec]:
        """Return the checkbox option declaring ``flag``, if any."""
        for option in self.options:
            if option.kind is OptionKind.CHECKBOX and flag in option.choices:
                return option
        return None
