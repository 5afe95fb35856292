"""Interactive console for assembling a requirements document."""

from collections.abc import Callable

import structlog

from design_drills.console import ConsolePrinter
from design_drills.documents import RequirementsDocument, RequirementsDocumentBuilder
from design_drills.models import RequirementDescription
from design_drills.prompts import InputService, Question

logger = structlog.get_logger()

ACTIONS = ("Add Author", "Add Name", "Add Project", "Add Requirements", "Create", "Exit")
CREATE = "Create"
EXIT = "Exit"


class RequirementsShell:
    """Command loop collecting document fields into a builder.

    Requirements are accumulated locally and only handed to the builder when
    the document is created.
    """

    def __init__(
        self,
        prompter: InputService,
        printer: ConsolePrinter,
        builder: RequirementsDocumentBuilder | None = None,
    ) -> None:
        self.prompter = prompter
        self.printer = printer
        self.builder = builder if builder is not None else RequirementsDocumentBuilder.get_instance()
        self.requirements: list[RequirementDescription] = []

        self._handlers: dict[str, Callable[[], None]] = {
            "Add Author": self.add_author,
            "Add Name": self.add_name,
            "Add Project": self.add_project,
            "Add Requirements": self.add_requirement,
        }

    def run(self) -> RequirementsDocument | None:
        """Prompt for actions until the document is created or the user exits.

        Returns:
            The created document, or None if the user exited without creating one
        """
        logger.info("Requirements shell started")
        while True:
            answers = self.prompter.ask(
                [Question(name="action", message="What do you want to do?", kind="list", choices=ACTIONS)]
            )
            action = answers["action"]
            logger.debug("Action selected", action=action)
            if action == CREATE:
                return self.create_document()
            if action == EXIT:
                logger.info("Requirements shell exited without creating a document")
                return None

            handler = self._handlers.get(action)
            if handler is None:
                raise ValueError(f"Unknown action: {action}")
            handler()

    def create_document(self) -> RequirementsDocument:
        self.builder.set_requirements(self.requirements)
        document = self.builder.build()
        document.print(self.printer)
        logger.info("Requirements document created", requirements=len(self.requirements))
        return document

    def _ask(self, name: str, message: str) -> str:
        return self.prompter.ask([Question(name=name, message=message)])[name]

    def add_author(self) -> None:
        author = self._ask("author", "Document Author?")
        self.printer.line(f"My document's author name is: {author}")
        self.builder.set_author(author)

    def add_name(self) -> None:
        name = self._ask("name", "Document name?")
        self.printer.line(f"My document's name is: {name}")
        self.builder.set_name(name)

    def add_project(self) -> None:
        project = self._ask("project", "Project name?")
        self.printer.line(f"My document's project name is: '{project}'")
        self.builder.set_project(project)

    def add_requirement(self) -> None:
        answers = self.prompter.ask(
            [
                Question(name="code", message="Code number?"),
                Question(name="description", message="Write a description"),
            ]
        )
        self.requirements.append(RequirementDescription(code=answers["code"], description=answers["description"]))
        self.printer.line("Requirement added!")
