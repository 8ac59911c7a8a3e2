"""Document sources the pipeline reads notes from."""

import os
from pathlib import Path
from typing import Iterator, List

from ragchat.rag.models import Document

NOTE_EXTENSIONS = (".md", ".txt")

# Directories never searched for notes
EXCLUDED_DIRS = {".git", ".obsidian", ".trash", "node_modules", "__pycache__"}


class DocumentSource:
    """Read-only access to a set of notes."""

    def list_documents(self) -> List[str]:
        raise NotImplementedError

    def read_document(self, doc_id: str) -> str:
        raise NotImplementedError

    def documents(self) -> Iterator[Document]:
        """Yield documents one at a time so content is read only when needed."""
        for doc_id in self.list_documents():
            yield Document(doc_id=doc_id, content=self.read_document(doc_id))


class InMemorySource(DocumentSource):
    """Documents held in a dict of ``{doc_id: content}``."""

    def __init__(self, notes):
        self.notes = dict(notes)

    def list_documents(self):
        return list(self.notes)

    def read_document(self, doc_id):
        return self.notes[doc_id]


class FolderVault(DocumentSource):
    """Markdown and text notes below a folder; ids are POSIX paths relative to it."""

    def __init__(self, root_path, extensions=NOTE_EXTENSIONS):
        self.root_path = Path(root_path)
        self.extensions = tuple(extensions)

    def list_documents(self):
        found = []
        for root, dirs, files in os.walk(self.root_path):
            # Prune in place so os.walk does not descend into excluded folders
            dirs[:] = [d for d in dirs if d not in EXCLUDED_DIRS]
            for name in files:
                if name.lower().endswith(self.extensions):
                    path = Path(root) / name
                    found.append(path.relative_to(self.root_path).as_posix())
        return sorted(found)

    def read_document(self, doc_id):
        path = self.root_path / doc_id
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
