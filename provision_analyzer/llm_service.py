import logging
from typing import Any, Dict

from groq import AsyncGroq

from .exceptions import ConfigurationError


class LLMService:
    """
    Text-generation service backed by the Groq chat completions API.

    One request per call, no retries: callers decide how to degrade on failure.
    """

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.llm_config = config.get('llm', {})
        self.logger = logging.getLogger(__name__)

        api_config = self.llm_config.get('api', {})
        self.api_key = api_config.get('groq_api_key')
        if not self.api_key:
            raise ConfigurationError(
                "No Groq API key configured. Set GROQ_API_KEY in the environment or .env file."
            )
        self.model = api_config.get('model', 'llama-3.1-8b-instant')

        gen_params = self.llm_config.get('generation_params', {})
        self.temperature = gen_params.get('temperature', 0.2)
        self.top_p = gen_params.get('top_p', 0.8)
        self.max_tokens = gen_params.get('max_tokens', 120)

        # SDK default is max_retries=2; each request is sent once
        self.client = AsyncGroq(api_key=self.api_key, max_retries=0)
        self.logger.info(f"LLM service initialized with model {self.model}")

    async def generate(self, prompt: str) -> str:
        """Asynchronously generates a response for a single prompt. Raises on any failure."""
        chat_completion = await self.client.chat.completions.create(
            messages=[{"role": "user", "content": prompt}],
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            top_p=self.top_p,
        )
        content = chat_completion.choices[0].message.content
        if not content or not content.strip():
            raise ValueError(f"Empty response from model {self.model}")
        return content

    def get_model_info(self) -> Dict[str, Any]:
        return {
            'model': self.model,
            'temperature': self.temperature,
            'top_p': self.top_p,
            'max_tokens': self.max_tokens,
        }
