# file_utils.py
# Loads a corpus fully into memory from plain text, PDF or DOCX files.

import logging
import os

import docx
import pdfplumber

from .config import ENCODING

log = logging.getLogger(__name__)


class CorpusNotFoundError(FileNotFoundError):
    """A named corpus is absent or could not be read."""

    def __init__(self, path, reason=""):
        self.path = path
        self.reason = reason
        message = f"Corpus not found: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


def corpus_name(path):
    return os.path.basename(path)


def extract_text_from_pdf(pdf_file_path):
    """Extracts all text from a PDF file."""
    pages = []
    with pdfplumber.open(pdf_file_path) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                pages.append(page_text)
    return "\n".join(pages)


def extract_text_from_docx(docx_file_path):
    """Extracts all paragraph text from a DOCX file."""
    doc = docx.Document(docx_file_path)
    return "\n".join(para.text for para in doc.paragraphs)


def read_text_file(path, encoding=ENCODING):
    with open(path, "r", encoding=encoding, errors="replace") as f:
        return f.read()


def load_corpus(path, encoding=ENCODING):
    """
    Reads the whole corpus at ``path`` into a string.

    Raises CorpusNotFoundError when the file is missing or any reader fails
    on it, so callers can skip it and carry on with the next one.
    """
    if not os.path.isfile(path):
        raise CorpusNotFoundError(path)

    ext = os.path.splitext(path)[1].lower()
    try:
        if ext == ".pdf":
            text = extract_text_from_pdf(path)
        elif ext == ".docx":
            text = extract_text_from_docx(path)
        else:
            text = read_text_file(path, encoding)
    except Exception as e:
        raise CorpusNotFoundError(path, str(e)) from e

    log.info("Loaded %s (%d characters)", corpus_name(path), len(text))
    return text
