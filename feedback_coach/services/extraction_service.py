"""
Text Extraction Service
=======================
Turns an uploaded file into plain text.

Supported uploads (closed set, one branch per format):
- text/plain   -> UTF-8 decode
- application/pdf -> PyMuPDF text layer
- .docx        -> mammoth raw text
- png/jpeg/webp -> Tesseract OCR (English model)

An empty result from a PDF or DOCX without a text layer is returned as-is;
the length check downstream decides whether there is enough content.
"""
import io
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum

import fitz  # PyMuPDF
import mammoth
import pytesseract
from PIL import Image, UnidentifiedImageError

from feedback_coach.errors import ExtractionFailed, ImageTooSmall, UnsupportedFormat

logger = logging.getLogger(__name__)

DOCX_MIMETYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Byte-size heuristic standing in for "resolution too low to OCR usefully".
# It does not look at pixel dimensions; a small but sharp PNG is rejected too.
MIN_OCR_IMAGE_BYTES = 30_000
OCR_LANGUAGE = "eng"


class DocumentFormat(Enum):
    PLAIN_TEXT = "plain_text"
    PDF = "pdf"
    DOCX = "docx"
    IMAGE = "image"


MIMETYPE_FORMATS = {
    "text/plain": DocumentFormat.PLAIN_TEXT,
    "application/pdf": DocumentFormat.PDF,
    DOCX_MIMETYPE: DocumentFormat.DOCX,
    "image/png": DocumentFormat.IMAGE,
    "image/jpeg": DocumentFormat.IMAGE,
    "image/webp": DocumentFormat.IMAGE,
}


@dataclass(frozen=True)
class UploadedDocument:
    """Raw upload as received. Lives for one request and is never stored."""

    data: bytes
    mimetype: str
    size: int = None

    def __post_init__(self):
        if self.size is None:
            object.__setattr__(self, "size", len(self.data))

    @property
    def declared_format(self):
        return MIMETYPE_FORMATS.get((self.mimetype or "").lower())


# =============================================================================
# FORMAT EXTRACTORS
# =============================================================================

def _extract_plain_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExtractionFailed(f"Text file is not valid UTF-8: {e}") from e


def _extract_pdf_text(data: bytes) -> str:
    """Concatenate the text layer of every page."""
    try:
        with fitz.open(stream=data, filetype="pdf") as doc:
            pages = [page.get_text() for page in doc]
    except Exception as e:
        raise ExtractionFailed(f"PDF could not be read: {e}") from e
    return "\n\n".join(pages)


def _extract_docx_text(data: bytes) -> str:
    try:
        result = mammoth.extract_raw_text(io.BytesIO(data))
    except Exception as e:
        raise ExtractionFailed(f"DOCX could not be read: {e}") from e
    return result.value or ""


class OcrWorker:
    """Holds the images opened for recognition until terminated."""

    def __init__(self, lang: str = OCR_LANGUAGE):
        self.lang = lang
        self.terminated = False
        self._images = []

    def recognize(self, data: bytes) -> str:
        image = Image.open(io.BytesIO(data))
        self._images.append(image)
        return pytesseract.image_to_string(image, lang=self.lang) or ""

    def terminate(self):
        for image in self._images:
            image.close()
        self._images = []
        self.terminated = True


@contextmanager
def ocr_worker(lang: str = OCR_LANGUAGE):
    """Yield an OCR worker that is terminated on every exit path."""
    worker = OcrWorker(lang)
    try:
        yield worker
    finally:
        worker.terminate()


def _extract_image_text(data: bytes, size: int) -> str:
    if size < MIN_OCR_IMAGE_BYTES:
        raise ImageTooSmall(f"Image has {size} bytes, need at least {MIN_OCR_IMAGE_BYTES}")

    try:
        with ocr_worker() as worker:
            return worker.recognize(data)
    except (UnidentifiedImageError, pytesseract.TesseractError) as e:
        raise ExtractionFailed(f"OCR failed: {e}") from e


# =============================================================================
# DISPATCH
# =============================================================================

def extract_text(doc: UploadedDocument) -> str:
    """
    Extract plain text from an uploaded document.

    Raises:
        UnsupportedFormat: the declared MIME type is not one of the four classes
        ImageTooSmall: image payload below MIN_OCR_IMAGE_BYTES (OCR is not run)
        ExtractionFailed: the decoder or OCR engine failed
    """
    fmt = doc.declared_format
    logger.debug("Extracting %s upload (%s, %d bytes)", fmt, doc.mimetype, doc.size)

    if fmt is DocumentFormat.PLAIN_TEXT:
        text = _extract_plain_text(doc.data)
    elif fmt is DocumentFormat.PDF:
        text = _extract_pdf_text(doc.data)
    elif fmt is DocumentFormat.DOCX:
        text = _extract_docx_text(doc.data)
    elif fmt is DocumentFormat.IMAGE:
        text = _extract_image_text(doc.data, doc.size)
    else:
        raise UnsupportedFormat(f"Unsupported upload type: {doc.mimetype!r}")

    logger.info("Extracted %d characters from %s upload", len(text), doc.mimetype)
    return text
