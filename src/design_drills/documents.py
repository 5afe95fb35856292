"""Requirements document and its builder."""

from dataclasses import asdict, dataclass
from typing import ClassVar

import structlog

from design_drills.console import ConsolePrinter, format_value
from design_drills.models import RequirementDescription

logger = structlog.get_logger()


@dataclass(frozen=True)
class RequirementsDocument:
    """Snapshot of the fields collected by a RequirementsDocumentBuilder.

    Any field may be None if it was never set before the document was built.
    """

    author: str | None = None
    name: str | None = None
    project: str | None = None
    requirements: list[RequirementDescription] | None = None

    def render_lines(self) -> list[str]:
        """Return the header lines of the printed document."""
        return [
            f"Document:{format_value(self.author)}",
            f"Name:{format_value(self.name)}",
            f"Project:{format_value(self.project)}",
            "Requirements:",
        ]

    def print(self, printer: ConsolePrinter) -> None:
        """Print the document header followed by a table of requirements."""
        for line in self.render_lines():
            printer.line(line)
        printer.table(asdict(requirement) for requirement in self.requirements or [])


class RequirementsDocumentBuilder:
    """Step-wise builder for RequirementsDocument.

    A single process-wide builder is available through get_instance(). Every
    caller of get_instance() shares and mutates the same state. The class can
    still be constructed directly when an isolated builder is needed.

    build() does not reset the builder, so later builds see the same values.
    """

    _instance: ClassVar["RequirementsDocumentBuilder | None"] = None

    def __init__(self) -> None:
        self.author: str | None = None
        self.name: str | None = None
        self.project: str | None = None
        self.requirements: list[RequirementDescription] | None = None

    @classmethod
    def get_instance(cls) -> "RequirementsDocumentBuilder":
        """Return the shared builder, creating it on first use."""
        if cls._instance is None:
            logger.debug("Creating shared requirements document builder")
            cls._instance = cls()
        return cls._instance

    def set_author(self, author: str) -> "RequirementsDocumentBuilder":
        self.author = author
        return self

    def set_name(self, name: str) -> "RequirementsDocumentBuilder":
        self.name = name
        return self

    def set_project(self, project: str) -> "RequirementsDocumentBuilder":
        self.project = project
        return self

    def set_requirements(self, requirements: list[RequirementDescription]) -> "RequirementsDocumentBuilder":
        self.requirements = requirements
        return self

    def build(self) -> RequirementsDocument:
        """Create a document from the values currently set."""
        logger.debug(
            "Building requirements document",
            author=self.author,
            name=self.name,
            project=self.project,
            requirements=len(self.requirements) if self.requirements is not None else None,
        )
        return RequirementsDocument(
            author=self.author,
            name=self.name,
            project=self.project,
            requirements=self.requirements,
        )
