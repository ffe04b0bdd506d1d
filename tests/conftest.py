"""
Shared fixtures for Cougar Craves tests.

No test touches the network, AWS, or Oracle: HTTP responses are built as
real requests.Response objects, the store runs against a temporary SQLite
file, and prompts are answered from a script.
"""
import json
import os

import pytest
import requests

from cougar_craves import database, prompts


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Ignore any CRAVES_* variables from the developer's shell."""
    for name in list(os.environ):
        if name.startswith("CRAVES_"):
            monkeypatch.delenv(name)


@pytest.fixture
def db(tmp_path):
    """Fresh SQLite database with the preference table created."""
    database.init_engine(f"sqlite:///{tmp_path / 'craves.db'}")
    database.create_tables()
    yield
    database.dispose_engine()


def make_response(status_code: int = 200, payload=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = "https://api.example.test/"
    response._content = json.dumps(payload).encode() if payload is not None else b""
    return response


class ScriptedPrompts:
    """Answers prompts.choose() from a list and records everything shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []
        self.output = []

    def choose(self, message, choices):
        self.questions.append((message, list(choices)))
        if not self.answers:
            raise AssertionError(f"Unscripted prompt: {message}")
        answer = self.answers.pop(0)
        assert answer in choices, f"{answer!r} not offered for {message!r}: {choices}"
        return answer

    def say(self, message=""):
        self.output.append(message)

    @property
    def text(self) -> str:
        return "\n".join(str(line) for line in self.output)


@pytest.fixture
def scripted(monkeypatch):
    """Factory: scripted(["Get dining ideas", ...]) installs the answers."""

    def install(answers):
        script = ScriptedPrompts(answers)
        monkeypatch.setattr(prompts, "choose", script.choose)
        monkeypatch.setattr(prompts, "say", script.say)
        monkeypatch.setattr(prompts, "clear_screen", lambda: None)
        return script

    return install


@pytest.fixture
def http_response():
    """Factory for canned requests.Response objects."""
    return make_response
