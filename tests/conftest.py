"""
Shared fixtures for the provision analyzer tests.
"""

import asyncio
import io
import re
import zipfile

import pytest

_CLAUSE_RE = re.compile(r'Clause: "(.*)"', re.DOTALL)


class FakeGenerator:
    """In-memory stand-in for the LLM service that records call ordering."""

    def __init__(self, fail_when=None, empty_when=None):
        self.fail_when = fail_when or (lambda clause: False)
        self.empty_when = empty_when or (lambda clause: False)
        self.clauses = []
        self.events = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def generate(self, prompt: str) -> str:
        clause = _CLAUSE_RE.search(prompt).group(1)
        self.clauses.append(clause)
        self.events.append(('start', clause))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)

        await asyncio.sleep(0)

        self.in_flight -= 1
        self.events.append(('end', clause))
        if self.fail_when(clause):
            raise RuntimeError("quota exceeded")
        if self.empty_when(clause):
            return "   "
        return f"  Summary of: {clause}  "


def build_zip(files, directories=()):
    """Create ZIP archive bytes from a {name: bytes|str} mapping."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as archive:
        for directory in directories:
            archive.writestr(directory.rstrip('/') + '/', '')
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def test_config():
    """Test configuration."""
    return {
        'llm': {
            'api': {
                'groq_api_key': None,
                'model': 'llama-3.1-8b-instant'
            },
            'generation_params': {
                'temperature': 0.2,
                'top_p': 0.8,
                'max_tokens': 120
            }
        },
        'summarization': {
            'batch_size': 10,
            'fallback_summary': 'AI summary failed.'
        },
        'document_processing': {
            'supported_formats': ['.pdf', '.docx', '.txt']
        },
        'logging': {
            'level': 'INFO'
        }
    }


@pytest.fixture
def liability_text():
    return (
        "Policy requires liability coverage. The weather was nice. "
        "Claims must be filed within 30 days."
    )


@pytest.fixture
def make_generator():
    """Factory for generators with custom failure rules."""
    return FakeGenerator


@pytest.fixture
def make_zip():
    return build_zip
