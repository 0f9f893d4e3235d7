"""
Document processing module for extracting plain text from PDF, Word and text contract files.
"""

import io
import logging
from typing import Any, Dict, List, Optional

import pdfplumber
import pypdf
from docx import Document
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from .exceptions import ExtractionError

SUPPORTED_FORMATS = ['.pdf', '.docx', '.txt']


class DocumentProcessor:
    """Converts the raw bytes of a contract file into plain text."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.supported_formats = self.config.get('document_processing', {}).get(
            'supported_formats', SUPPORTED_FORMATS
        )
        self.logger = logging.getLogger(__name__)

    def is_supported(self, file_name: str) -> bool:
        """Case-sensitive suffix match against the supported formats."""
        return any(file_name.endswith(ext) for ext in self.supported_formats)

    def extract_text(self, data: bytes, file_name: str) -> str:
        """
        Extract plain text from a single file.

        Args:
            data: Raw file contents
            file_name: Name of the file; its suffix selects the extractor

        Returns:
            The extracted text

        Raises:
            ExtractionError: if the format is unsupported or the parser fails
        """
        try:
            if file_name.endswith('.pdf'):
                return self._process_pdf(data, file_name)
            if file_name.endswith('.docx'):
                return self._process_docx(data)
            if file_name.endswith('.txt'):
                return self._process_text(data)
            raise ValueError(f"Unsupported file format: {file_name}")
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(file_name, e) from e

    def _process_pdf(self, data: bytes, file_name: str) -> str:
        """Extract text from PDF: words joined by a space per page, pages concatenated."""
        try:
            # pdfplumber first (its words map onto the page's text items)
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [
                    ' '.join(word['text'] for word in page.extract_words())
                    for page in pdf.pages
                ]
            return ''.join(pages)
        except Exception as e:
            self.logger.warning(f"pdfplumber failed for {file_name}, trying pypdf: {e}")

        # Fallback to pypdf; a failure here propagates
        reader = pypdf.PdfReader(io.BytesIO(data))
        pages = []
        for page in reader.pages:
            text = page.extract_text() or ''
            pages.append(' '.join(text.split()))
        return ''.join(pages)

    def _process_docx(self, data: bytes) -> str:
        """Extract raw text from a Word document, paragraphs and tables in body order."""
        doc = Document(io.BytesIO(data))
        text_content = []

        for child in doc.element.body.iterchildren():
            if child.tag == qn('w:p'):
                text_content.append(Paragraph(child, doc).text)
            elif child.tag == qn('w:tbl'):
                text_content.extend(self._table_cell_texts(Table(child, doc)))

        return '\n'.join(text_content)

    @staticmethod
    def _table_cell_texts(table: Table) -> List[str]:
        # Merged cells come back once per grid position; keep the first
        seen = set()
        texts = []
        for row in table.rows:
            for cell in row.cells:
                if cell._tc in seen:
                    continue
                seen.add(cell._tc)
                if cell.text.strip():
                    texts.append(cell.text)
        return texts

    def _process_text(self, data: bytes) -> str:
        """Decode a plain text file as UTF-8."""
        return data.decode('utf-8', errors='replace')

    def get_supported_formats(self) -> List[str]:
        """Return list of supported file formats."""
        return list(self.supported_formats)
