"""Shared fixtures for design drills tests."""

import io
from collections.abc import Iterator

import pytest
import structlog
from rich.console import Console

from design_drills.cli import configure_logging
from design_drills.console import ConsolePrinter
from design_drills.documents import RequirementsDocumentBuilder
from design_drills.prompts import Question


class ScriptedInputService:
    """Input service answering questions from a fixed script."""

    def __init__(self, *answers: dict[str, str]) -> None:
        """Initialize with one answer mapping per expected ask() call."""
        self.answers = list(answers)
        self.asked: list[list[Question]] = []

    def ask(self, questions: list[Question]) -> dict[str, str]:
        """Return the next scripted answer mapping."""
        self.asked.append(questions)
        answer = self.answers.pop(0)
        for question in questions:
            assert question.name in answer
            if question.kind == "list":
                assert answer[question.name] in question.choices
        return answer


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving console output."""
    return io.StringIO()


@pytest.fixture
def printer(output: io.StringIO) -> ConsolePrinter:
    """Console printer writing to the output buffer."""
    return ConsolePrinter(console=Console(file=output, width=120))


@pytest.fixture
def shared_builder(monkeypatch: pytest.MonkeyPatch) -> Iterator[RequirementsDocumentBuilder]:
    """Start every test with no shared builder instance."""
    monkeypatch.setattr(RequirementsDocumentBuilder, "_instance", None)
    yield RequirementsDocumentBuilder.get_instance()


@pytest.fixture
def scripted() -> type[ScriptedInputService]:
    """Factory for scripted input services."""
    return ScriptedInputService


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Silence log output so it does not mix with captured stdout."""
    configure_logging("critical")
    yield
    structlog.reset_defaults()
