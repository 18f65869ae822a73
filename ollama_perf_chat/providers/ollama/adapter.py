from typing import Optional

from openai import AsyncOpenAI

from ..base import ProviderAdapter, ProviderError
from ..errors import ErrorMapper
from ...config.constants import DEFAULT_API_KEY, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, HANDSHAKE_PROMPT
from ...models.generation import GenerationParams
from ...models.measurement import ExchangeResult
from ...observability.logging import ProviderLogger

logger = ProviderLogger("ollama")


class OllamaProvider(ProviderAdapter):
    """Ollama server reached through its OpenAI-compatible chat completions API."""

    def __init__(self,
                 model: str,
                 base_url: str = DEFAULT_BASE_URL,
                 api_key: str = DEFAULT_API_KEY,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 client: Optional[AsyncOpenAI] = None):
        super().__init__(model)
        self.params = GenerationParams(model=model)
        self._base_url = base_url
        self._api_key = api_key
        self._timeout = timeout
        self._client = client

    @classmethod
    def from_settings(cls, model: str, settings) -> "OllamaProvider":
        return cls(
            model=model,
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout=settings.timeout
        )

    @property
    def client(self) -> AsyncOpenAI:
        """Lazy initialization of the OpenAI client."""
        if self._client is None:
            self._client = AsyncOpenAI(
                base_url=self._base_url,
                api_key=self._api_key,
                timeout=self._timeout,
                max_retries=0
            )
        return self._client

    async def complete(self, prompt: str) -> ExchangeResult:
        """Complete a prompt, reporting any failure in the returned result."""
        try:
            text = await self._generate(prompt, "complete")
        except ProviderError as e:
            return ExchangeResult.failure(f"Error: {e.message}")
        return ExchangeResult.success(text)

    async def ping(self) -> None:
        """Raise ProviderError unless the handshake prompt gets an answer."""
        await self._generate(HANDSHAKE_PROMPT, "ping")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def _generate(self, prompt: str, method: str) -> str:
        with logger.track_request(method, self.model) as exchange:
            try:
                payload = self.params.model_dump(exclude_none=True)
                payload["messages"] = [{"role": "user", "content": prompt}]

                response = await self.client.chat.completions.create(**payload)

                if not getattr(response, "choices", None):
                    raise ProviderError(
                        message="Ollama API error: response contained no choices",
                        provider="ollama"
                    )

                text = response.choices[0].message.content or ""
                exchange["response_chars"] = len(text)

                usage = getattr(response, "usage", None)
                if usage is not None:
                    try:
                        usage_dict = usage.model_dump() if hasattr(usage, "model_dump") else dict(usage.__dict__)
                    except Exception:
                        usage_dict = {}
                    logger.log_usage(usage_dict, text, exchange)

                return text

            except Exception as e:
                raise ErrorMapper.map_ollama_error(e, self.model)
