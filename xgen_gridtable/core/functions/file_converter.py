# xgen_gridtable/core/functions/file_converter.py
"""
TextFileConverter - bytes to str for grid table documents

Documents are read as bytes and decoded here before any table is looked for:
    bytes -> TextFileConverter.convert() -> str -> TextHandler

Encodings are tried in this order, the first that decodes wins:
    BOM               utf-8-sig / utf-16 / utf-32, taken from the first bytes
    caller encoding   the encoding= argument
    chardet           guess over the first 10KB, used above CHARDET_CONFIDENCE_THRESHOLD
    candidates        ENCODING_CANDIDATES (or the list given to the converter)
    utf-8             with replacement characters, never fails

Usage:
    converter = TextFileConverter()
    text = converter.convert(data)
    converter.detected_encoding   # e.g. 'utf-8'
"""
import logging
from typing import BinaryIO, Iterator, List, Optional, Tuple

import chardet

logger = logging.getLogger("document-processor")

ENCODING_CANDIDATES = ['utf-8', 'utf-8-sig', 'cp949', 'euc-kr', 'latin-1', 'ascii']

CHARDET_CONFIDENCE_THRESHOLD = 0.7
CHARDET_SAMPLE_SIZE = 10000

# utf-32-le before utf-16-le: both start with FF FE
_BOMS: Tuple[Tuple[bytes, str], ...] = (
    (b'\xef\xbb\xbf', 'utf-8-sig'),
    (b'\xff\xfe\x00\x00', 'utf-32-le'),
    (b'\x00\x00\xfe\xff', 'utf-32-be'),
    (b'\xff\xfe', 'utf-16-le'),
    (b'\xfe\xff', 'utf-16-be'),
)


def detect_bom(data: bytes) -> Optional[str]:
    """Return the encoding announced by a leading byte order mark, if any."""
    for mark, encoding in _BOMS:
        if data.startswith(mark):
            return encoding
    return None


class TextFileConverter:
    """
    Decodes document bytes, remembering which encoding succeeded.

    Args:
        encodings: Candidate encodings tried after BOM and chardet
    """

    def __init__(self, encodings: Optional[List[str]] = None):
        self._encodings = list(encodings or ENCODING_CANDIDATES)
        self._detected_encoding: Optional[str] = None

    @property
    def detected_encoding(self) -> Optional[str]:
        """Encoding used by the last convert() call."""
        return self._detected_encoding

    def convert(
        self,
        file_data: bytes,
        file_stream: Optional[BinaryIO] = None,
        encoding: Optional[str] = None,
        **kwargs
    ) -> str:
        """
        Decode a document.

        Args:
            file_data: Document bytes
            file_stream: Read from the start instead of file_data when given
            encoding: Encoding to try before detection

        Returns:
            The document text
        """
        if file_stream is not None:
            file_stream.seek(0)
            file_data = file_stream.read()

        for source, candidate in self._candidates(file_data, encoding):
            try:
                text = file_data.decode(candidate)
            except (UnicodeDecodeError, LookupError):
                logger.debug(f"{source} encoding {candidate} did not decode")
                continue
            self._detected_encoding = candidate
            return text

        logger.warning("No encoding decoded the document, using utf-8 with replacement characters")
        self._detected_encoding = 'utf-8'
        return file_data.decode('utf-8', errors='replace')

    def _candidates(self, file_data: bytes, encoding: Optional[str]) -> Iterator[Tuple[str, str]]:
        bom_encoding = detect_bom(file_data)
        if bom_encoding:
            logger.debug(f"BOM detected: {bom_encoding}")
            yield 'BOM', bom_encoding

        if encoding:
            yield 'Requested', encoding

        guess = chardet.detect(file_data[:CHARDET_SAMPLE_SIZE])
        if guess and guess.get('encoding'):
            confidence = guess.get('confidence') or 0
            logger.debug(f"chardet guessed {guess['encoding']} (confidence: {confidence})")
            if confidence > CHARDET_CONFIDENCE_THRESHOLD:
                yield 'Detected', guess['encoding']

        for candidate in self._encodings:
            yield 'Candidate', candidate
