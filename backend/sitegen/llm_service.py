import logging
from typing import Optional

from anthropic import AsyncAnthropic
from anthropic.types import TextBlock

from .config import Settings
from .errors import ConfigurationError, GenerationError

logger = logging.getLogger(__name__)


class LLMService:
    def __init__(self, settings: Settings, client=None):
        self.settings = settings
        if client is None:
            if not settings.anthropic_api_key:
                raise ConfigurationError(
                    "ANTHROPIC_API_KEY environment variable is not set", config_key="ANTHROPIC_API_KEY"
                )
            # Single-shot requests; callers that need a deadline or retry wrap this themselves
            client = AsyncAnthropic(api_key=settings.anthropic_api_key, max_retries=0)
        self.client = client

    async def complete(self, prompt: str, model: str, max_tokens: int, temperature: Optional[float] = None) -> str:
        """Send one user message and return the text of the first content block ("" if it isn't text)."""
        logger.info(f"Calling Claude ({model}), prompt length: {len(prompt)} characters")

        params = {
            "model": model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if temperature is not None:
            params["temperature"] = temperature

        message = await self.client.messages.create(**params)

        if not message.content:
            return ""
        content_block = message.content[0]
        if isinstance(content_block, TextBlock):
            response_text = content_block.text
        else:
            logger.warning(f"Claude returned a non-text block ({getattr(content_block, 'type', 'unknown')})")
            response_text = ""

        logger.info(f"✅ Claude response received, length: {len(response_text)} characters")
        return response_text

    async def analyze_structure(self, prompt: str) -> str:
        return await self.complete(prompt, self.settings.analysis_model, self.settings.analysis_max_tokens)

    async def generate_components(self, prompt: str) -> str:
        """Generate tagged layout components from a built prompt."""
        try:
            return await self.complete(prompt, self.settings.generation_model, self.settings.generation_max_tokens)
        except Exception as e:
            logger.error(f"❌ Layout generation error: {e}")
            raise GenerationError(f"Layout generation failed: {str(e)}") from e
