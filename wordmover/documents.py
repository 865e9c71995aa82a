"""Document loading and tokenising for the comparison entry points."""
from __future__ import annotations

from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import List
from zipfile import BadZipFile

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError

SUPPORTED_EXTENSIONS = {".txt", ".md", ".markdown", ".docx"}


@dataclass
class Document:
    """A named text and its whitespace tokens."""

    name: str
    text: str
    tokens: List[str] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.tokens)


def tokenize(text: str) -> List[str]:
    return text.split()


def load_document(path: Path) -> Document:
    path = Path(path)
    text = extract_text(path.name, path.read_bytes())
    return Document(name=path.name, text=text, tokens=tokenize(text))


def extract_text(filename: str, blob: bytes, content_type: str = "") -> str:
    """Return plain text content of an uploaded or on-disk file."""
    suffix = Path(filename).suffix.lower()
    extractor = _select_extractor(suffix, content_type)
    return extractor(blob)


def _select_extractor(suffix: str, content_type: str):
    if suffix in {".txt", ".md", ".markdown"} or content_type.startswith("text/"):
        return _extract_text_plain
    if suffix == ".docx":
        return _extract_text_docx
    return _extract_text_plain


def _extract_text_plain(blob: bytes) -> str:
    return blob.decode("utf-8", errors="replace")


def _extract_text_docx(blob: bytes) -> str:
    try:
        document = DocxDocument(BytesIO(blob))
    except (BadZipFile, PackageNotFoundError, KeyError) as exc:
        raise ValueError("Not a readable .docx file") from exc
    paragraphs = [para.text for para in document.paragraphs if para.text]
    return "\n".join(paragraphs)
