"""Provider-agnostic client for token counting and text generation."""

import json
import logging
from typing import Any

from sitecast.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Fixed seed for deterministic output (OpenAI only)
DETERMINISTIC_SEED = 42


class LLMError(Exception):
    """Base error for LLM provider failures."""


class TokenCountError(LLMError):
    """The provider could not count tokens for a prompt."""


class GenerationError(LLMError):
    """The provider failed to generate text, or returned none."""


class LLMClient:
    """Counts tokens and generates text with the configured LLM provider."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._gemini_client = None
        self._openai_client = None
        self._anthropic_client = None

    def _get_gemini_client(self):
        """Lazy load Gemini client."""
        if self._gemini_client is None:
            from google import genai
            self._gemini_client = genai.Client(api_key=self.settings.gemini_key)
        return self._gemini_client

    def _get_openai_client(self):
        """Lazy load OpenAI client."""
        if self._openai_client is None:
            from openai import AsyncOpenAI
            self._openai_client = AsyncOpenAI(api_key=self.settings.openai_api_key)
        return self._openai_client

    def _get_anthropic_client(self):
        """Lazy load Anthropic client."""
        if self._anthropic_client is None:
            from anthropic import AsyncAnthropic
            self._anthropic_client = AsyncAnthropic(api_key=self.settings.anthropic_api_key)
        return self._anthropic_client

    async def count_tokens(self, prompt: str, model: str | None = None) -> int | None:
        """Count prompt tokens with the configured provider.

        Returns:
            The token count, or None if the provider gave no usable count.

        Raises:
            TokenCountError: If the provider call fails
        """
        provider = self.settings.llm_provider
        model = model or self.settings.llm_model

        try:
            if provider == "gemini":
                response = await self._get_gemini_client().aio.models.count_tokens(
                    model=model,
                    contents=prompt,
                )
                return response.total_tokens if response else None
            elif provider == "openai":
                return self._count_openai_tokens(prompt, model)
            elif provider == "anthropic":
                response = await self._get_anthropic_client().messages.count_tokens(
                    model=model,
                    messages=[{"role": "user", "content": prompt}],
                )
                return response.input_tokens if response else None
        except Exception as e:
            raise TokenCountError(f"{provider} token count failed: {e}") from e

        raise ValueError(f"Unknown LLM provider: {provider}")

    def _count_openai_tokens(self, prompt: str, model: str) -> int:
        """Count OpenAI tokens locally; OpenAI has no counting endpoint."""
        import tiktoken

        try:
            encoding = tiktoken.encoding_for_model(model)
        except KeyError:
            encoding = tiktoken.get_encoding("o200k_base")
        return len(encoding.encode(prompt))

    async def _generate_gemini(self, prompt: str, model: str, json_output: bool) -> str | None:
        from google.genai import types

        config = types.GenerateContentConfig(response_mime_type="application/json") if json_output else None
        response = await self._get_gemini_client().aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )
        return response.text if response else None

    async def _generate_openai(self, prompt: str, model: str, json_output: bool) -> str | None:
        kwargs: dict[str, Any] = {}
        if json_output:
            kwargs["response_format"] = {"type": "json_object"}

        response = await self._get_openai_client().chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            seed=DETERMINISTIC_SEED,
            **kwargs,
        )
        logger.info(f"OpenAI fingerprint: {response.system_fingerprint}")
        return response.choices[0].message.content

    async def _generate_anthropic(self, prompt: str, model: str, json_output: bool) -> str | None:
        response = await self._get_anthropic_client().messages.create(
            model=model,
            max_tokens=8192,
            messages=[{"role": "user", "content": prompt}],
        )
        return response.content[0].text if response.content else None

    async def generate(
        self,
        prompt: str,
        model: str | None = None,
        json_output: bool = False,
    ) -> str:
        """Generate text for a prompt with the configured provider.

        Raises:
            GenerationError: If the provider call fails or returns no text
        """
        provider = self.settings.llm_provider
        model = model or self.settings.llm_model

        logger.info(f"Calling {provider} {model}...")

        if provider == "gemini":
            call = self._generate_gemini
        elif provider == "openai":
            call = self._generate_openai
        elif provider == "anthropic":
            call = self._generate_anthropic
        else:
            raise ValueError(f"Unknown LLM provider: {provider}")

        try:
            text = await call(prompt, model, json_output)
        except Exception as e:
            raise GenerationError(f"{provider} generation failed: {e}") from e

        if not text:
            raise GenerationError(f"{provider} returned an empty response")
        return text

    async def generate_json(self, prompt: str, model: str | None = None) -> dict | list:
        """Generate and parse a JSON response.

        Raises:
            GenerationError: If generation fails or the response is not JSON
        """
        response = await self.generate(prompt, model=model, json_output=True)
        try:
            return parse_json(response)
        except json.JSONDecodeError as e:
            raise GenerationError(f"Response is not valid JSON: {e}") from e


def parse_json(response: str) -> dict | list:
    """Parse JSON from an LLM response, handling code fences."""
    content = response.strip()

    # Remove markdown code fences if present
    if content.startswith("```"):
        first_newline = content.find("\n")
        if first_newline != -1:
            content = content[first_newline + 1:]
        if content.endswith("```"):
            content = content[:-3].rstrip()

    return json.loads(content)


# Singleton instance
_llm_client: LLMClient | None = None


def get_llm_client() -> LLMClient:
    """Get or create LLM client singleton."""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient(get_settings())
    return _llm_client
