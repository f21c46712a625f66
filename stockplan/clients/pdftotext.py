"""pdftotext (poppler) client - plain-text rendering of statement PDFs."""
import logging
import re
import subprocess
from pathlib import Path
from typing import Optional, Union

from ..config import PDFTOTEXT_MAX_BYTES, PDFTOTEXT_PATH, PDFTOTEXT_TIMEOUT

logger = logging.getLogger(__name__)

# Zero-width space/joiners and BOM that statement PDFs scatter through the text
_ZERO_WIDTH = re.compile("[\u200B-\u200D\uFEFF]")


class TextExtractionError(RuntimeError):
    """Raised when a document cannot be turned into text."""
    pass


def strip_zero_width(text: str) -> str:
    return _ZERO_WIDTH.sub("", text)


class PdfToTextClient:
    """Runs `pdftotext -layout <file> -` and returns the cleaned text."""

    def __init__(
        self,
        binary: Optional[str] = None,
        timeout: Optional[float] = None,
        max_bytes: Optional[int] = None,
    ):
        self.binary = binary or PDFTOTEXT_PATH
        self.timeout = timeout if timeout is not None else PDFTOTEXT_TIMEOUT
        self.max_bytes = max_bytes if max_bytes is not None else PDFTOTEXT_MAX_BYTES

    def extract_text(self, path: Union[str, Path]) -> str:
        pdf = Path(path)
        if not pdf.is_file():
            raise TextExtractionError(f"File not found: {pdf}")

        cmd = [self.binary, "-layout", str(pdf), "-"]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, timeout=self.timeout, check=False)
        except FileNotFoundError as e:
            raise TextExtractionError(f"{self.binary} not found; install poppler-utils or set PDFTOTEXT_PATH") from e
        except subprocess.TimeoutExpired as e:
            raise TextExtractionError(f"{self.binary} timed out after {self.timeout}s on {pdf}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            raise TextExtractionError(f"{self.binary} failed on {pdf} (exit {result.returncode}): {stderr}")
        if len(result.stdout) > self.max_bytes:
            raise TextExtractionError(f"Extracted text from {pdf} exceeds {self.max_bytes} bytes")

        return strip_zero_width(result.stdout.decode("utf-8", errors="replace"))
