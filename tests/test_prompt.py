"""Tests for converting generator declarations into questions."""

import pytest

from boilerplater.options import CheckboxOption, GeneratorEntry, ListOption
from boilerplater.prompt import PromptAdapter, split_names, to_flag_map


def noop(name, options, settings):
    pass


@pytest.fixture
def entry():
    return GeneratorEntry(
        command="component",
        message="Component names",
        controller=noop,
        options=[
            CheckboxOption(
                name="extras",
                message="Extras",
                choices={"styles": "Add stylesheet", "tests": "Add tests"},
                default="tests",
            ),
            ListOption(
                name="flavor",
                message="Flavor",
                choices={"function": "Function", "class": "Class"},
                when=lambda answers: bool(answers.get("extras")),
            ),
        ],
    )


@pytest.fixture
def adapter(localizer):
    return PromptAdapter(localizer.translate)


class TestNamesQuestion:
    def test_first_question_asks_for_names(self, adapter, entry):
        question = adapter.to_prompt(entry)[0]
        assert question["type"] == "text"
        assert question["name"] == "names"
        assert question["message"] == "Component names"

    def test_filter_splits_on_whitespace(self, adapter, entry):
        question = adapter.to_prompt(entry)[0]
        assert question["filter"]("  Button   Card\tModal ") == ["Button", "Card", "Modal"]
        assert question["filter"]("") == []

    def test_validate_rejects_blank(self, adapter, entry):
        validate = adapter.to_prompt(entry)[0]["validate"]
        assert validate("   ") == "Enter at least one name"
        assert validate("Button") is True
        assert validate("") is True


class TestOptionQuestions:
    def test_one_question_per_option(self, adapter, entry):
        questions = adapter.to_prompt(entry)
        assert [q["name"] for q in questions] == ["names", "extras", "flavor"]
        assert [q["type"] for q in questions] == ["text", "checkbox", "select"]

    def test_checkbox_choices(self, adapter, entry):
        question = adapter.to_prompt(entry)[1]
        assert [c.value for c in question["choices"]] == ["styles", "tests"]
        assert [c.title for c in question["choices"]] == ["Add stylesheet", "Add tests"]
        assert [c.checked for c in question["choices"]] == [False, True]

    def test_checkbox_filter_builds_flag_map(self, adapter, entry):
        question = adapter.to_prompt(entry)[1]
        assert question["filter"](["styles", "tests"]) == {"styles": True, "tests": True}
        assert question["filter"]([]) == {}

    def test_list_default_is_first_choice(self, adapter, entry):
        question = adapter.to_prompt(entry)[2]
        assert question["default"] == "function"
        assert question["filter"]("class") == "class"

    def test_list_explicit_default(self, adapter):
        entry = GeneratorEntry(
            command="page",
            message="Pages",
            controller=noop,
            options=[
                ListOption(
                    name="layout",
                    message="Layout",
                    choices={"wide": "Wide", "narrow": "Narrow"},
                    default=["narrow"],
                )
            ],
        )
        assert adapter.to_prompt(entry)[1]["default"] == "narrow"

    def test_when_predicate_passed_through(self, adapter, entry):
        when = adapter.to_prompt(entry)[2]["when"]
        assert when({"extras": {"styles": True}}) is True
        assert when({"extras": {}}) is False

    @pytest.mark.parametrize("value", [True, False])
    def test_boolean_when_becomes_predicate(self, adapter, value):
        entry = GeneratorEntry(
            command="page",
            message="Pages",
            controller=noop,
            options=[CheckboxOption(name="x", message="X", choices={"a": "A"}, when=value)],
        )
        when = adapter.to_prompt(entry)[1]["when"]
        assert callable(when)
        assert when({}) is value

    def test_messages_are_localized(self):
        from boilerplater.i18n import Localizer

        localizer = Localizer(locale="ru")
        localizer.merge_catalog("ru", {"Extras": "Дополнительно"})
        entry = GeneratorEntry(
            command="c",
            message="Extras",
            controller=noop,
        )
        questions = PromptAdapter(localizer.translate).to_prompt(entry)
        assert questions[0]["message"] == "Дополнительно"

    def test_no_options(self, adapter):
        entry = GeneratorEntry(command="c", message="Names", controller=noop)
        assert len(adapter.to_prompt(entry)) == 1


def test_split_names_none():
    assert split_names(None) == []


def test_to_flag_map_none():
    assert to_flag_map(None) == {}
