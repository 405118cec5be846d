"""LLM provider interface and implementations."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

import httpx
import openai
from openai import AsyncOpenAI
from rich.console import Console

from ..errors import GenerationError, GenerationErrorKind

console = Console()


class LLMProvider(ABC):
    """Abstract base class for text generation providers."""

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """
        Complete a single-turn prompt.

        Args:
            prompt: Full prompt text

        Returns:
            Generated text

        Raises:
            GenerationError: On failure, timeout or rate limiting
        """
        pass

    @abstractmethod
    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        pass


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions provider (works with compatible endpoints)."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        temperature: float = 0.3,
        max_tokens: int = 1200,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: API key
            model: Model name to use
            base_url: Custom base URL (OpenAI-compatible endpoints, testing)
            timeout: Per-request timeout in seconds
            temperature: Sampling temperature
            max_tokens: Completion token cap
            http_client: Custom httpx client (for testing)
        """
        # Retries are left to the caller's fallback handling.
        self.client = AsyncOpenAI(
            api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0, http_client=http_client
        )
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.total_tokens = 0
        self.prompt_tokens = 0
        self.completion_tokens = 0
        self.api_calls = 0
        self.failed_calls = 0

        # Token cost estimates (per 1K tokens)
        self.cost_per_1k_tokens = {
            "gpt-4o": {"input": 0.005, "output": 0.015},
            "gpt-4o-mini": {"input": 0.00015, "output": 0.0006},
            "gpt-4.1-mini": {"input": 0.0004, "output": 0.0016},
            "gpt-3.5-turbo": {"input": 0.001, "output": 0.002},
        }

    async def generate_text(self, prompt: str) -> str:
        """Generate text with a chat completion."""
        self.api_calls += 1
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.RateLimitError as e:
            self.failed_calls += 1
            raise GenerationError(f"Rate limited: {e}", GenerationErrorKind.RATE_LIMITED) from e
        except openai.APITimeoutError as e:
            self.failed_calls += 1
            raise GenerationError("Generation request timed out", GenerationErrorKind.TIMEOUT) from e
        except openai.OpenAIError as e:
            self.failed_calls += 1
            raise GenerationError(f"Generation failed: {e}") from e

        if response.usage:
            self.total_tokens += response.usage.total_tokens
            self.prompt_tokens += response.usage.prompt_tokens
            self.completion_tokens += response.usage.completion_tokens

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            self.failed_calls += 1
            raise GenerationError("Model returned an empty response", GenerationErrorKind.EMPTY_RESPONSE)

        return content.strip()

    def get_usage_stats(self) -> Dict:
        """Get usage statistics."""
        estimated_cost = 0.0
        if self.model in self.cost_per_1k_tokens:
            rates = self.cost_per_1k_tokens[self.model]
            estimated_cost = (
                (self.prompt_tokens / 1000) * rates["input"] +
                (self.completion_tokens / 1000) * rates["output"]
            )

        return {
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "failed_calls": self.failed_calls,
            "estimated_cost": estimated_cost,
            "model": self.model,
        }


class MockLLMProvider(LLMProvider):
    """Mock LLM provider for offline runs and tests.

    With ``responses`` set, each call consumes the next entry: strings are
    returned, exceptions are raised. Otherwise canned text is produced.
    """

    def __init__(self, responses: Optional[List[Union[str, Exception]]] = None) -> None:
        """Initialize mock provider."""
        self.responses = list(responses) if responses is not None else None
        self.calls = []

    async def generate_text(self, prompt: str) -> str:
        """Mock text generation."""
        self.calls.append(prompt)

        if self.responses is not None:
            if not self.responses:
                raise GenerationError("Mock responses exhausted")
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            return response

        if '"keyTakeaways"' in prompt:
            return (
                '{"tldr": "Mock summary of the core health finding.", '
                '"keyTakeaways": ["Mock medical insight", '
                '"Mock health implication", "Mock research conclusion"]}'
            )
        return "Mock simplified article text written in clear, professional language."

    def get_usage_stats(self) -> Dict:
        """Get mock usage statistics."""
        return {
            "total_tokens": len(self.calls) * 100,
            "api_calls": len(self.calls),
            "failed_calls": 0,
            "estimated_cost": 0.0,
            "model": "mock",
        }
