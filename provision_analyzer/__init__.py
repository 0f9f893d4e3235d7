"""
Contract Insurance Provision Analyzer

Extracts insurance-related provisions from a ZIP archive of contracts
(PDF, Word, text) and summarizes each one with an LLM.
"""

__version__ = "1.0.0"

from .archive import ArchiveWalker
from .document_processor import DocumentProcessor
from .exceptions import (
    ArchiveError,
    ConfigurationError,
    EmptyArchiveError,
    ExtractionError,
    InvalidArchiveError,
    SummarizationBatchError,
)
from .extractors import INSURANCE_KEYWORDS, ProvisionDetector, split_sentences
from .llm_service import LLMService
from .models import Contract, ContractType, Provision, RunIdentity
from .pipeline import ProvisionPipeline
from .summarizer import SummarizationDispatcher

__all__ = [
    "ArchiveWalker",
    "DocumentProcessor",
    "ProvisionDetector",
    "split_sentences",
    "INSURANCE_KEYWORDS",
    "LLMService",
    "SummarizationDispatcher",
    "ProvisionPipeline",
    "Contract",
    "ContractType",
    "Provision",
    "RunIdentity",
    "ArchiveError",
    "ConfigurationError",
    "EmptyArchiveError",
    "ExtractionError",
    "InvalidArchiveError",
    "SummarizationBatchError",
]
