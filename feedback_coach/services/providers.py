"""
Completion Providers
====================
Interchangeable backends that turn a prompt string into raw response text.

- DemoProvider: canned feedback, no network
- DeepSeekProvider: hosted chat-completions API (OpenAI-compatible)
- OllamaProvider: local Ollama server

Pick one with get_provider(config, lang); callers only ever use complete().
"""
import json
import logging

import openai
import requests
from openai import OpenAI

from feedback_coach.errors import ProviderError, ProviderUnavailable
from feedback_coach.services.demo_responses import demo_response

logger = logging.getLogger(__name__)

JSON_ONLY_SYSTEM_PROMPT = "Return ONLY valid JSON. No markdown. No extra text."
DEFAULT_TEMPERATURE = 0.3
OLLAMA_TIMEOUT = 300  # seconds; local models can be slow on first load


class CompletionProvider:
    """Common interface: prompt in, raw text out."""

    name = "base"

    def complete(self, prompt: str) -> str:
        raise NotImplementedError


class DemoProvider(CompletionProvider):
    """Serves the canned feedback for its language and ignores the prompt."""

    name = "demo"

    def __init__(self, lang: str = "de"):
        self.lang = lang

    def complete(self, prompt: str) -> str:
        return json.dumps(demo_response(self.lang), ensure_ascii=False)


class DeepSeekProvider(CompletionProvider):
    """DeepSeek chat completions through the OpenAI SDK."""

    name = "deepseek"

    def __init__(self, api_key: str, model: str = "deepseek-chat",
                 base_url: str = "https://api.deepseek.com/v1",
                 temperature: float = DEFAULT_TEMPERATURE, client=None):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.temperature = temperature
        self._client = client

    def _get_client(self):
        if not self.api_key:
            raise ProviderUnavailable(details="DEEPSEEK_API_KEY is not set")
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    def complete(self, prompt: str) -> str:
        client = self._get_client()
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": JSON_ONLY_SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
            )
        except openai.APIError as e:
            logger.error("DeepSeek API error: %s", e)
            raise ProviderError(details=str(e)) from e

        if not response.choices or response.choices[0].message.content is None:
            logger.error("DeepSeek returned no completion content: %r", response)
            raise ProviderError(details="Response contained no completion content")
        return response.choices[0].message.content


class OllamaProvider(CompletionProvider):
    """Local Ollama server via its /api/generate endpoint."""

    name = "ollama"

    def __init__(self, base_url: str = "http://localhost:11434", model: str = "llama3.1",
                 timeout: int = OLLAMA_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    def complete(self, prompt: str) -> str:
        url = f"{self.base_url}/api/generate"
        try:
            r = requests.post(
                url,
                json={"model": self.model, "prompt": prompt, "stream": False},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Ollama not reachable at %s (is `ollama serve` running?): %s", url, e)
            raise ProviderUnavailable(details=str(e)) from e

        if not r.ok:
            logger.error("Ollama error %s: %s", r.status_code, r.text)
            raise ProviderError(details=f"HTTP {r.status_code}: {r.text}")

        try:
            data = r.json()
        except ValueError as e:
            logger.error("Ollama returned a non-JSON body: %s", r.text[:500])
            raise ProviderError(details="Response body is not JSON") from e
        return data.get("response") or ""


def get_provider(cfg, lang: str = "de") -> CompletionProvider:
    """Select the completion provider from configuration."""
    if cfg.demo_active:
        return DemoProvider(lang)
    if cfg.provider == "ollama":
        return OllamaProvider(cfg.ollama_url, cfg.ollama_model)
    if cfg.provider != "deepseek":
        logger.warning("Unknown PROVIDER %r, falling back to deepseek", cfg.provider)
    return DeepSeekProvider(
        cfg.deepseek_api_key,
        model=cfg.deepseek_model,
        base_url=cfg.deepseek_base_url,
    )
