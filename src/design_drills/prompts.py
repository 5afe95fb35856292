"""Interactive input service."""

from dataclasses import dataclass
from typing import Literal, Protocol

import structlog
from rich.console import Console
from rich.prompt import Prompt

logger = structlog.get_logger()


@dataclass(frozen=True)
class Question:
    """A single prompt: free text, or one choice from a list."""

    name: str
    message: str
    kind: Literal["text", "list"] = "text"
    choices: tuple[str, ...] = ()


class InputService(Protocol):
    """Asks a series of questions and returns the answers keyed by name."""

    def ask(self, questions: list[Question]) -> dict[str, str]: ...


class RichInputService:
    """Input service that prompts on the terminal with rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def ask(self, questions: list[Question]) -> dict[str, str]:
        answers: dict[str, str] = {}
        for question in questions:
            if question.kind == "list":
                answers[question.name] = self._choose(question)
            else:
                answers[question.name] = Prompt.ask(question.message, console=self.console)
            logger.debug("Question answered", name=question.name)
        return answers

    def _choose(self, question: Question) -> str:
        """Show a numbered menu and return the selected choice.

        Args:
            question: Question with a non-empty list of choices

        Returns:
            The chosen entry of question.choices
        """
        self.console.print(question.message, markup=False)
        for number, choice in enumerate(question.choices, 1):
            self.console.print(f"  {number}. {choice}", markup=False)

        numbers = [str(number) for number in range(1, len(question.choices) + 1)]
        selected = Prompt.ask("Choice", console=self.console, choices=numbers, show_choices=False)
        return question.choices[int(selected) - 1]
