import asyncio
import logging
from typing import Any, Dict, List, Optional

from .archive import ArchiveWalker, StatusCallback
from .config import DEFAULT_CONFIG_PATH, load_app_config
from .document_processor import DocumentProcessor
from .extractors import ProvisionDetector
from .llm_service import LLMService
from .models import Contract, ContractType, RunIdentity
from .summarizer import BATCH_SIZE, FALLBACK_SUMMARY, SummarizationDispatcher
from .utils import Timer, setup_logging


class ProvisionPipeline:
    """Main pipeline: archive → text → provisions → AI summaries."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        config_path: str = DEFAULT_CONFIG_PATH,
        generator=None
    ):
        """
        Initialize the pipeline from an explicit config or the YAML file plus .env.

        A text generator may be injected; otherwise an LLMService is built from
        the config, which fails fast when no API key is configured.
        """
        self.config = config if config is not None else load_app_config(config_path)

        setup_logging(self.config)
        self.logger = logging.getLogger(__name__)

        self.document_processor = DocumentProcessor(self.config)
        self.detector = ProvisionDetector(self.config.get('detection', {}).get('keywords'))
        self.archive_walker = ArchiveWalker(self.document_processor, self.detector)

        self.generator = generator if generator is not None else LLMService(self.config)

        summarization_config = self.config.get('summarization', {})
        self.dispatcher = SummarizationDispatcher(
            self.generator,
            batch_size=summarization_config.get('batch_size', BATCH_SIZE),
            fallback_summary=summarization_config.get('fallback_summary', FALLBACK_SUMMARY)
        )

        self.logger.info("Provision pipeline initialized")

    async def process_archive(
        self,
        archive_bytes: bytes,
        contract_type: ContractType,
        update_status: Optional[StatusCallback] = None
    ) -> List[Contract]:
        """
        Extract and summarize the insurance provisions of every contract in a ZIP archive.

        Raises:
            ArchiveError: if the archive is unreadable or holds no supported files
        """
        update_status = update_status or (lambda message: None)
        contract_type = ContractType(contract_type)
        identity = RunIdentity()

        update_status("Unzipping files...")
        with Timer("Contract parsing"):
            contracts = self.archive_walker.walk(archive_bytes, contract_type, update_status, identity)

        all_provisions = [provision for contract in contracts for provision in contract.provisions]
        if all_provisions:
            update_status(f"Found {len(all_provisions)} potential provisions. Analyzing with AI...")
            with Timer("Provision summarization"):
                summaries = await self.dispatcher.summarize(all_provisions)

            for provision, summary in zip(all_provisions, summaries):
                provision.summary = summary
        else:
            self.logger.warning("No insurance provisions found in the archive")

        update_status("Analysis complete.")
        self.logger.info(
            f"Processed archive: {len(contracts)} contracts, {len(all_provisions)} provisions"
        )
        return contracts

    def run(
        self,
        archive_bytes: bytes,
        contract_type: ContractType,
        update_status: Optional[StatusCallback] = None
    ) -> List[Contract]:
        """Synchronous wrapper around process_archive for non-async callers."""
        return asyncio.run(self.process_archive(archive_bytes, contract_type, update_status))

    def get_system_status(self) -> Dict[str, Any]:
        """Get configuration of all pipeline components."""
        status = {
            'pipeline_status': 'healthy',
            'configuration': {
                'batch_size': self.dispatcher.batch_size,
                'supported_formats': self.document_processor.get_supported_formats(),
                'keyword_count': len(self.detector.keywords)
            }
        }
        if isinstance(self.generator, LLMService):
            status['llm_service'] = self.generator.get_model_info()
        return status
