"""Document and artifact repositories.

- repositories: protocols the study services depend on
- memory: in-memory implementations with cascading document delete
"""
from core.services.storage.memory import (
    InMemoryChatMessageRepository,
    InMemoryDocumentRepository,
    InMemoryQuestionRepository,
    InMemoryStudyNotesRepository,
    MonotonicClock,
    create_memory_storage,
)
from core.services.storage.repositories import StudyStorage

__all__ = [
    "StudyStorage",
    "create_memory_storage",
    "MonotonicClock",
    "InMemoryDocumentRepository",
    "InMemoryQuestionRepository",
    "InMemoryChatMessageRepository",
    "InMemoryStudyNotesRepository",
]
