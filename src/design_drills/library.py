"""Interactive console for managing books and users."""

from collections.abc import Callable

import structlog

from design_drills.console import ConsolePrinter
from design_drills.manager import EntityManager, Manager
from design_drills.models import Book, Entity, User
from design_drills.prompts import InputService, Question

logger = structlog.get_logger()

ACTIONS = (
    "Add Book",
    "List Books",
    "Remove Book",
    "Add User",
    "List Users",
    "Remove User",
    "Get User",
    "Get Book",
    "Exit",
)
EXIT = "Exit"
NOT_FOUND = "Entity not found"


class LibraryShell:
    """Command loop over a book manager and a user manager."""

    def __init__(
        self,
        prompter: InputService,
        printer: ConsolePrinter,
        book_manager: Manager[Book] | None = None,
        user_manager: Manager[User] | None = None,
    ) -> None:
        self.prompter = prompter
        self.printer = printer
        self.book_manager = book_manager if book_manager is not None else EntityManager("book")
        self.user_manager = user_manager if user_manager is not None else EntityManager("user")

        self._handlers: dict[str, Callable[[], None]] = {
            "Add Book": self.add_book,
            "List Books": lambda: self.list(self.book_manager),
            "Remove Book": lambda: self.remove(self.book_manager),
            "Add User": self.add_user,
            "List Users": lambda: self.list(self.user_manager),
            "Remove User": lambda: self.remove(self.user_manager),
            "Get User": lambda: self.get(self.user_manager),
            "Get Book": lambda: self.get(self.book_manager),
        }

    def run(self) -> None:
        """Prompt for actions until the user exits."""
        logger.info("Library shell started")
        while True:
            answers = self.prompter.ask(
                [Question(name="action", message="What do you want to do?", kind="list", choices=ACTIONS)]
            )
            action = answers["action"]
            logger.debug("Action selected", action=action)
            if action == EXIT:
                break

            handler = self._handlers.get(action)
            if handler is None:
                raise ValueError(f"Unknown action: {action}")
            handler()
        logger.info("Library shell finished")

    def list(self, manager: Manager[Entity]) -> None:
        self.printer.table(entity.as_row() for entity in manager.list_all())

    def get(self, manager: Manager[Entity]) -> None:
        answers = self.prompter.ask([Question(name="name", message="Enter the entity name:")])
        entity = manager.get(answers["name"])
        if entity is None:
            self.printer.line(NOT_FOUND)
        else:
            self.printer.line(entity.describe())

    def remove(self, manager: Manager[Entity]) -> None:
        answers = self.prompter.ask([Question(name="name", message="Entity name?")])
        entity = manager.remove(answers["name"])
        if entity is None:
            self.printer.line(NOT_FOUND)
        else:
            self.printer.line(f"{entity.describe()} removed!")

    def add_book(self) -> None:
        answers = self.prompter.ask(
            [
                Question(name="name", message="Book Name?"),
                Question(name="isbn", message="Book ISBN?"),
            ]
        )
        book = self.book_manager.add(Book(answers["name"], answers["isbn"]))
        self.printer.line(f"Added {book.describe()}")

    def add_user(self) -> None:
        answers = self.prompter.ask(
            [
                Question(name="name", message="User Name?"),
                Question(name="age", message="User Age?"),
            ]
        )
        user = self.user_manager.add(User(answers["name"], answers["age"]))
        self.printer.line(f"Added {user.describe()}")
