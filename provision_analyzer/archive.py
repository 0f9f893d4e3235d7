"""
Walks a ZIP archive of contracts and turns each supported file into a Contract.
"""

import io
import logging
import zipfile
from typing import Callable, List, Optional

from .document_processor import DocumentProcessor
from .exceptions import EmptyArchiveError, ExtractionError, InvalidArchiveError
from .extractors import ProvisionDetector
from .models import Contract, ContractType, RunIdentity

StatusCallback = Callable[[str], None]


def _no_status(message: str) -> None:
    pass


class ArchiveWalker:
    """Extracts and scans every qualifying archive entry, one file at a time."""

    def __init__(self, document_processor: DocumentProcessor, detector: ProvisionDetector):
        self.document_processor = document_processor
        self.detector = detector
        self.logger = logging.getLogger(__name__)

    def list_entries(self, archive: zipfile.ZipFile) -> List[zipfile.ZipInfo]:
        """Non-directory entries with a supported suffix, in archive order."""
        return [
            info for info in archive.infolist()
            if not info.is_dir() and self.document_processor.is_supported(info.filename)
        ]

    def walk(
        self,
        archive_bytes: bytes,
        contract_type: ContractType,
        update_status: Optional[StatusCallback] = None,
        identity: Optional[RunIdentity] = None
    ) -> List[Contract]:
        """
        Process every qualifying entry of the archive.

        Args:
            archive_bytes: Contents of the uploaded ZIP file
            contract_type: Category applied to every contract in the run
            update_status: Called with a progress message before each file
            identity: Identity source for the run

        Returns:
            Contracts that yielded at least one provision, in archive order

        Raises:
            InvalidArchiveError: if the bytes are not a ZIP archive
            EmptyArchiveError: if no entry has a supported extension
        """
        update_status = update_status or _no_status
        identity = identity or RunIdentity()

        try:
            archive = zipfile.ZipFile(io.BytesIO(archive_bytes))
        except zipfile.BadZipFile as e:
            raise InvalidArchiveError(f"The uploaded file is not a valid zip archive: {e}") from e

        contracts: List[Contract] = []
        with archive:
            entries = self.list_entries(archive)
            if not entries:
                raise EmptyArchiveError(
                    "No valid contract files (.pdf, .docx, .txt) found in the zip archive."
                )

            total = len(entries)
            for position, info in enumerate(entries, 1):
                update_status(f"Parsing contract: {info.filename} ({position}/{total})")
                try:
                    contract = self._process_entry(archive, info, contract_type, identity)
                except ExtractionError as e:
                    self.logger.error(f"Failed to process file {info.filename}: {e.cause}")
                    continue
                except Exception as e:
                    self.logger.error(f"Failed to process file {info.filename}: {e}", exc_info=True)
                    continue

                if contract is not None:
                    contracts.append(contract)

        self.logger.info(f"Archive walk finished: {len(contracts)} of {total} files yielded provisions")
        return contracts

    def _process_entry(
        self,
        archive: zipfile.ZipFile,
        info: zipfile.ZipInfo,
        contract_type: ContractType,
        identity: RunIdentity
    ) -> Optional[Contract]:
        try:
            data = archive.read(info)
        except Exception as e:
            raise ExtractionError(info.filename, e) from e

        text = self.document_processor.extract_text(data, info.filename)
        provisions = self.detector.detect(text, identity)
        if not provisions:
            self.logger.info(f"No provisions found in {info.filename}, skipping")
            return None

        return Contract(
            id=identity.next_contract_id(),
            name=info.filename,
            type=contract_type,
            content=text,
            provisions=provisions
        )
