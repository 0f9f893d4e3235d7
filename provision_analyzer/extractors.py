import logging
import re
from typing import List, Optional, Sequence

from .models import Provision, RunIdentity
from .utils import normalize_whitespace

# Keyword-first detection of insurance provisions in contract text.
# Matches are whole words, case-insensitive.

INSURANCE_KEYWORDS = [
    'insurance',
    'insure',
    'insured',
    'insurer',
    'insurers',
    'additional insured',
    'certificate of insurance',
    'liability',
    'liabilities',
    'general liability',
    'professional liability',
    'errors and omissions',
    'indemnify',
    'indemnification',
    'indemnity',
    'hold harmless',
    'coverage',
    'policy',
    'policies',
    'premium',
    'premiums',
    'claim',
    'claims',
    'deductible',
    'underwriter',
    'subrogation',
    'umbrella',
    "workers' compensation",
    'workers compensation',
]

_SENTENCE_RE = re.compile(r'[^.!?]+[.!?]*')

logger = logging.getLogger(__name__)


def split_sentences(text: str) -> List[str]:
    # Basic splitter: a run of non-terminators plus its trailing terminators.
    # Segments are kept verbatim; context windows normalize them later.
    if not text:
        return []
    return _SENTENCE_RE.findall(text)


def build_keyword_pattern(keywords: Sequence[str]) -> re.Pattern:
    """Compile a case-insensitive whole-word alternation of the keywords."""
    if not keywords:
        raise ValueError("At least one keyword is required")
    alternation = '|'.join(re.escape(keyword) for keyword in keywords)
    return re.compile(rf'\b({alternation})\b', re.IGNORECASE)


class ProvisionDetector:
    """
    Finds sentences mentioning insurance keywords and turns each into a provision
    whose text is the sentence plus its immediate neighbours.
    """

    def __init__(self, keywords: Optional[Sequence[str]] = None):
        self.keywords = list(keywords) if keywords is not None else list(INSURANCE_KEYWORDS)
        self.pattern = build_keyword_pattern(self.keywords)

    def find_windows(self, sentences: Sequence[str]) -> List[str]:
        """
        Return the deduplicated context windows for every keyword match, in sentence order.

        A candidate is skipped when an already accepted window contains the
        matching sentence itself, so overlapping hits in adjacent sentences
        collapse into the first window.
        """
        windows: List[str] = []
        for index, sentence in enumerate(sentences):
            if not self.pattern.search(sentence):
                continue

            neighbours = sentences[max(index - 1, 0):index + 2]
            window = normalize_whitespace(' '.join(neighbours))

            matched = normalize_whitespace(sentence)
            if any(matched in accepted for accepted in windows):
                continue
            windows.append(window)
        return windows

    def detect(self, text: str, identity: Optional[RunIdentity] = None) -> List[Provision]:
        """Detect provisions in a document's text. Summaries are left empty."""
        identity = identity or RunIdentity()
        windows = self.find_windows(split_sentences(text))
        logger.debug(f"Detected {len(windows)} provision windows")
        return [
            Provision(id=identity.next_provision_id(), text=window)
            for window in windows
        ]
