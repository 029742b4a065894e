"""Shared fixtures for tracker tests."""

import pytest


class ScriptedInput:
    """Feeds prepared answers to code expecting builtin input()."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("No more scripted answers")
        return self.answers.pop(0)


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput instances."""
    return ScriptedInput
