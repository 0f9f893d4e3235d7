"""
Batched summarization of detected provisions through a text-generation service.
"""

import asyncio
import logging
from typing import List, Sequence

from .exceptions import SummarizationBatchError
from .models import Provision

BATCH_SIZE = 10
FALLBACK_SUMMARY = "AI summary failed."


def create_summary_prompt(clause: str) -> str:
    """Creates the prompt asking for a one-sentence summary of a clause."""
    return f"""You are a legal analyst. Summarize the following contract clause in one concise sentence, focusing on the core insurance obligation, coverage requirement, or liability assignment.

Clause: "{clause}"

Summary:"""


class SummarizationDispatcher:
    """
    Summarizes provisions in fixed-size batches.

    Requests inside a batch run concurrently; the next batch starts only once
    every request of the current one has settled. A failed batch is not
    retried: each of its provisions gets the fallback summary.
    """

    def __init__(self, generator, batch_size: int = BATCH_SIZE,
                 fallback_summary: str = FALLBACK_SUMMARY):
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.generator = generator
        self.batch_size = batch_size
        self.fallback_summary = fallback_summary
        self.logger = logging.getLogger(__name__)

    async def summarize(self, provisions: Sequence[Provision]) -> List[str]:
        """Return one summary per provision, in input order."""
        if not provisions:
            return []

        summaries: List[str] = []
        for batch_index, start in enumerate(range(0, len(provisions), self.batch_size)):
            batch = provisions[start:start + self.batch_size]
            try:
                summaries.extend(await self._summarize_batch(batch_index, batch))
            except SummarizationBatchError as e:
                self.logger.error(f"Error summarizing provision batch: {e}")
                summaries.extend([self.fallback_summary] * len(batch))

        return summaries

    async def _summarize_batch(self, batch_index: int, batch: Sequence[Provision]) -> List[str]:
        requests = [self.generator.generate(create_summary_prompt(p.text)) for p in batch]
        # return_exceptions keeps the batch running to completion before we inspect it
        responses = await asyncio.gather(*requests, return_exceptions=True)

        for response in responses:
            if isinstance(response, BaseException):
                raise SummarizationBatchError(batch_index, response)
            if not isinstance(response, str) or not response.strip():
                raise SummarizationBatchError(batch_index, ValueError(f"Malformed response: {response!r}"))

        self.logger.info(f"Summarized batch {batch_index} ({len(batch)} provisions)")
        return [response.strip() for response in responses]
