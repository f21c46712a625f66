"""Statement converter - external text extraction."""
from .pdftotext import PdfToTextClient, TextExtractionError, strip_zero_width

__all__ = [
    "PdfToTextClient",
    "TextExtractionError",
    "strip_zero_width",
]
