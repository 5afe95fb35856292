"""Design Drills - interactive exercises for object-oriented design patterns."""

from design_drills.documents import RequirementsDocument, RequirementsDocumentBuilder
from design_drills.manager import EntityManager, Manager
from design_drills.models import Book, Entity, EntityKind, RequirementDescription, User

__all__ = [
    "Book",
    "Entity",
    "EntityKind",
    "EntityManager",
    "Manager",
    "RequirementDescription",
    "RequirementsDocument",
    "RequirementsDocumentBuilder",
    "User",
]
