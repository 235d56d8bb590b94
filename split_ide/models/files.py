"""In-memory file collection shown in the editor panes.

Panes only hold a file id. The content lives here and is looked up by id
when a pane is rendered.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import FileOperationError
from ..utils import unique_untitled_name

logger = logging.getLogger(__name__)


@dataclass
class FileData:
    """Represents an open file in the editor."""

    id: str
    name: str
    content: str = ""
    original_content: str = ""
    path: str = ""
    last_modified: float = field(default_factory=time.time)

    @property
    def is_modified(self) -> bool:
        return self.content != self.original_content

    @property
    def display_name(self) -> str:
        return f"* {self.name}" if self.is_modified else self.name


class FileStore:
    """Ordered collection of files keyed by id."""

    def __init__(self) -> None:
        self._files: dict[str, FileData] = {}
        self.active_file_id: Optional[str] = None

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, file_id: object) -> bool:
        return file_id in self._files

    @property
    def files(self) -> list[FileData]:
        return list(self._files.values())

    def names(self) -> list[str]:
        return [f.name for f in self._files.values()]

    def add_file(self, name: str, content: str = "", path: str = "") -> str:
        """Add a file and make it active. Returns the new file id."""
        file_id = str(uuid.uuid4())
        self._files[file_id] = FileData(
            id=file_id,
            name=name,
            content=content,
            original_content=content,
            path=path,
        )
        self.active_file_id = file_id
        logger.debug("Added file %s (%s)", name, file_id)
        return file_id

    def new_untitled(self) -> str:
        """Add an empty file with the first free ``Untitled-N`` name."""
        return self.add_file(unique_untitled_name(self.names()))

    def get(self, file_id: str) -> FileData:
        try:
            return self._files[file_id]
        except KeyError:
            raise FileOperationError(f"Unknown file id: {file_id}") from None

    def find(self, file_id: Optional[str]) -> Optional[FileData]:
        """Like ``get`` but returns None for missing or empty ids."""
        if file_id is None:
            return None
        return self._files.get(file_id)

    def update_file(self, file_id: str, content: str) -> None:
        data = self.get(file_id)
        data.content = content
        data.last_modified = time.time()

    def remove_file(self, file_id: str) -> None:
        if self._files.pop(file_id, None) is None:
            return
        if self.active_file_id == file_id:
            self.active_file_id = None
        logger.debug("Removed file %s", file_id)
