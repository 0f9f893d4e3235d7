"""
Error taxonomy for the provision extraction pipeline.

Only the archive-level errors (and configuration errors at construction time)
reach the caller. Extraction and summarization errors are recovered from
inside the pipeline.
"""


class ProvisionAnalyzerError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(ProvisionAnalyzerError):
    """Required configuration (e.g. the LLM API key) is missing or invalid."""


class ArchiveError(ProvisionAnalyzerError):
    """Fatal: the uploaded archive cannot be processed at all."""


class EmptyArchiveError(ArchiveError):
    """The archive holds no supported contract files."""


class InvalidArchiveError(ArchiveError):
    """The upload is not a readable ZIP archive."""


class ExtractionError(ProvisionAnalyzerError):
    """Text could not be extracted from a single archive entry."""

    def __init__(self, file_name: str, cause: Exception):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Failed to extract text from {file_name}: {cause}")


class SummarizationBatchError(ProvisionAnalyzerError):
    """At least one summarization request in a batch failed."""

    def __init__(self, batch_index: int, cause: Exception):
        self.batch_index = batch_index
        self.cause = cause
        super().__init__(f"Summarization batch {batch_index} failed: {cause}")
