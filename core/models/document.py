"""Document data models."""
from datetime import datetime
from typing import Optional

from core.models.common import CamelModel


class DocumentCreate(CamelModel):
    """Metadata recorded when a file is uploaded."""
    filename: str  # name on disk
    original_name: str
    file_path: str
    file_size: int


class Document(DocumentCreate):
    """Uploaded document with identity and extracted text."""
    id: str
    uploaded_at: datetime
    text_content: Optional[str] = None

    @property
    def has_text(self) -> bool:
        return bool(self.text_content)
