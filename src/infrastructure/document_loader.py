# src/infrastructure/document_loader.py

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from src.domain.models import Document


SUPPORTED_EXTENSIONS = {".txt", ".md"}


class DocumentLoader:
    """
    Loads plain-text and Markdown files from a directory as whole documents.

    Each file becomes one Document:
    - id: path relative to the loaded directory (stable across runs)
    - title: file name
    - timestamp: file modification time, UTC
    """

    def load_directory(self, directory_path: str) -> List[Document]:
        data_dir = Path(directory_path)
        if not data_dir.exists():
            raise FileNotFoundError(f"Data directory not found: {directory_path}")

        documents: List[Document] = []

        for file_path in sorted(data_dir.rglob("*")):
            if not file_path.is_file():
                continue
            document = self.load_file(file_path, root=data_dir)
            if document is not None:
                documents.append(document)
                print(f"[DocumentLoader] Loaded '{document.id}'")

        print(f"[DocumentLoader] Total documents loaded: {len(documents)}")
        return documents

    def load_file(self, file_path: Path, root: Optional[Path] = None) -> Optional[Document]:
        """
        Load a single file. Returns None for unsupported or empty files.
        """
        if file_path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            return None

        text = file_path.read_text(encoding="utf-8", errors="ignore")
        if not text.strip():
            return None

        document_id = file_path.relative_to(root).as_posix() if root else file_path.name
        modified = datetime.fromtimestamp(file_path.stat().st_mtime, tz=timezone.utc)

        return Document(
            id=document_id,
            title=file_path.name,
            content=text,
            timestamp=modified,
        )
