"""
Conversion of generator declarations into interactive questions.

The produced question dicts are understood by ``questionary.prompt``.
"""

from typing import Any, Callable, Dict, List

from questionary import Choice

from .logging_config import get_logger
from .options import Answers, GeneratorEntry, OptionKind, OptionSpec

logger = get_logger(__name__)

Question = Dict[str, Any]

EMPTY_NAMES_MESSAGE = "Enter at least one name"


def split_names(value: str | None) -> List[str]:
    """Split a raw answer into non-empty names, keeping their order."""
    return [name.strip() for name in (value or "").split() if name.strip()]


def to_flag_map(values: List[str] | None) -> Dict[str, bool]:
    """Turn chosen checkbox flags into the ``{flag: True}`` form used by the CLI."""
    return {flag: True for flag in values or []}


def _passthrough(value: Any) -> Any:
    return value


def _constant(value: bool) -> Callable[[Answers], bool]:
    return lambda answers: value


class PromptAdapter:
    """Build the question list for a generator."""

    def __init__(self, i18n: Callable[..., str]):
        """
        Args:
            i18n: Function localizing a message key
        """
        self.i18n = i18n

    def to_prompt(self, entry: GeneratorEntry) -> List[Question]:
        """
        Convert a generator declaration into questions.

        The first question always asks for target names; each option adds
        one checkbox or select question.

        Args:
            entry: Generator declaration

        Returns:
            Ready-to-use list for ``questionary.prompt``
        """
        questions = [self.names_question(entry)]
        questions.extend(self.option_question(option) for option in entry.options)
        logger.debug("Built %d questions for '%s'", len(questions), entry.command)
        return questions

    def names_question(self, entry: GeneratorEntry) -> Question:
        def validate(value: str) -> bool | str:
            if value and not split_names(value):
                return self.i18n(EMPTY_NAMES_MESSAGE)
            return True

        return {
            "type": "text",
            "name": "names",
            "message": self.i18n(entry.message),
            "validate": validate,
            "filter": split_names,
        }

    def option_question(self, option: OptionSpec) -> Question:
        if callable(option.when):
            when = option.when
        elif isinstance(option.when, bool):
            # questionary only accepts callables here
            when = _constant(option.when)
        else:
            when = _constant(True)

        question = {
            "name": option.name,
            "message": self.i18n(option.message),
            "when": when,
        }

        if option.kind is OptionKind.CHECKBOX:
            defaults = option.default_values
            question["type"] = "checkbox"
            question["choices"] = [
                Choice(self.i18n(description), value=flag, checked=flag in defaults)
                for flag, description in option.choices.items()
            ]
            question["filter"] = to_flag_map
        elif option.kind is OptionKind.LIST:
            question["type"] = "select"
            question["choices"] = [
                Choice(self.i18n(description), value=flag)
                for flag, description in option.choices.items()
            ]
            question["default"] = option.default_choice
            question["filter"] = _passthrough
        else:
            raise TypeError(f"Unsupported option: {option!r}")

        return question
