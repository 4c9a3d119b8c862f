"""Shared fixtures for Boilerplater tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest

from boilerplater.fileops import FileOps
from boilerplater.i18n import Localizer
from boilerplater.messages import Messenger
from boilerplater.paths import PathResolver


class FakePrompt:
    """Stand-in for ``questionary.prompt`` answering from a script.

    Applies ``when`` and ``filter`` the way questionary does. Questions
    without a scripted answer get their initial value.
    """

    def __init__(self, answers: Dict[str, Any]):
        self.answers = answers
        self.calls: List[List[Dict[str, Any]]] = []
        self.asked: List[str] = []

    def __call__(self, questions):
        self.calls.append(questions)
        result: Dict[str, Any] = {}
        for question in questions:
            when = question.get("when")
            if when is not None and not when(result):
                continue
            self.asked.append(question["name"])
            answer = self.answers.get(question["name"], self._initial(question))
            validate = question.get("validate")
            if validate is not None:
                assert validate(answer) is True
            result[question["name"]] = question["filter"](answer)
        return result

    @staticmethod
    def _initial(question):
        if question["type"] == "checkbox":
            return [c.value for c in question["choices"] if c.checked]
        if question["type"] == "select":
            return question["default"]
        return ""


@pytest.fixture
def localizer() -> Localizer:
    return Localizer(locale="en")


@pytest.fixture
def messenger(localizer: Localizer) -> Messenger:
    return Messenger(localizer)


@pytest.fixture
def resolver(tmp_path: Path) -> PathResolver:
    return PathResolver(str(tmp_path))


@pytest.fixture
def fileops(resolver: PathResolver, messenger: Messenger) -> FileOps:
    return FileOps(resolver, messenger)


@pytest.fixture
def fake_prompt():
    return FakePrompt
