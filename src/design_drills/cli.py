"""CLI for design drills."""

from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from design_drills.console import ConsolePrinter
from design_drills.documents import RequirementsDocumentBuilder
from design_drills.library import LibraryShell
from design_drills.prompts import RichInputService
from design_drills.requirements import RequirementsShell

logger = structlog.get_logger()

DEFAULT_LOG_LEVEL = "critical"

app = App(
    help="Design Drills - Interactive exercises for object-oriented design patterns",
)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()))


@app.command
def library() -> None:
    """Add, list, remove and look up books and users."""
    printer = ConsolePrinter()
    shell = LibraryShell(prompter=RichInputService(printer.console), printer=printer)
    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Library shell interrupted")


@app.command
def requirements() -> None:
    """Collect fields and build a requirements document."""
    printer = ConsolePrinter()
    shell = RequirementsShell(
        prompter=RichInputService(printer.console),
        printer=printer,
        builder=RequirementsDocumentBuilder.get_instance(),
    )
    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Requirements shell interrupted")


def run_library() -> None:
    """Entry point that starts the library shell without arguments."""
    configure_logging(DEFAULT_LOG_LEVEL)
    library()


def run_requirements() -> None:
    """Entry point that starts the requirements shell without arguments."""
    configure_logging(DEFAULT_LOG_LEVEL)
    requirements()


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = DEFAULT_LOG_LEVEL,
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    app(tokens)


if __name__ == "__main__":
    app.meta()
