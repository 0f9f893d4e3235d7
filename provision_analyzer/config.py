# config.py

import copy
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .utils import deep_merge, load_config

# --- Application Configuration ---

DEFAULT_CONFIG_PATH = "config/config.yaml"

DEFAULT_CONFIG: Dict[str, Any] = {
    'llm': {
        'api': {
            # Injected from GROQ_API_KEY by load_app_config.
            'groq_api_key': None,
            # Fast non-reasoning model; one-sentence summaries need no thinking budget.
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
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'file': None
    }
}


def load_app_config(config_path: Optional[str] = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Build the application config: defaults, then the YAML file, then secrets from .env.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path and os.path.exists(config_path):
        config = deep_merge(config, load_config(config_path))

    load_dotenv()
    api_key = os.environ.get('GROQ_API_KEY')
    if api_key:
        config['llm']['api']['groq_api_key'] = api_key.strip()

    log_level = os.environ.get('LOG_LEVEL')
    if log_level:
        config['logging']['level'] = log_level

    return config
