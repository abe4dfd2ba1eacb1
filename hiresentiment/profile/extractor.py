"""Resume text extraction for PDF (pymupdf, optional dependency) and text files."""

from pathlib import Path

TEXT_SUFFIXES = {".txt", ".md"}


def extract_text_from_pdf(path: str | Path) -> str:
    """Extract plain text from a PDF file.

    Args:
        path: Path to the PDF file.

    Returns:
        Concatenated text from all pages.

    Raises:
        FileNotFoundError: If the PDF file does not exist.
        ImportError: If pymupdf is not installed.
    """
    path = Path(path)
    if not path.exists():
        msg = f"PDF file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        import pymupdf
    except ImportError:
        msg = (
            "pymupdf is required for PDF extraction. "
            "Install with: pip install 'hiresentiment[profile]'"
        )
        raise ImportError(msg) from None

    doc = pymupdf.open(str(path))
    text_parts: list[str] = []
    for page in doc:
        text_parts.append(page.get_text())
    doc.close()

    return "\n".join(text_parts)


def extract_resume_text(path: str | Path) -> str:
    """Read a resume from a .pdf, .txt, or .md file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file type is not supported.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return extract_text_from_pdf(path)
    if suffix not in TEXT_SUFFIXES:
        msg = f"Unsupported resume format '{suffix}' (expected .pdf, .txt, or .md)"
        raise ValueError(msg)
    if not path.exists():
        msg = f"Resume file not found: {path}"
        raise FileNotFoundError(msg)
    return path.read_text(encoding="utf-8")
