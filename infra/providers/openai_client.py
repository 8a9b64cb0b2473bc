from typing import Any, Dict, Sequence
from openai import OpenAI
from domain.ports import LLMClientPort, ChatMessage
from infra.providers.base import ProviderConfig, require_text

class ChatCompletionsClient(LLMClientPort):
    """Phần chung của OpenAI và Azure OpenAI (chat.completions API)."""
    provider_name = "OpenAI"
    # Model mới (o-series) chỉ nhận max_completion_tokens
    token_param = "max_completion_tokens"

    def __init__(self, sdk: Any, max_tokens: int):
        self._sdk = sdk
        self._max_tokens = max_tokens

    def chat_completion(self, model: str, messages: Sequence[ChatMessage], temperature: float = 0.2) -> str:
        kwargs: Dict[str, Any] = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": temperature,
            self.token_param: self._max_tokens,
        }
        resp = self._sdk.chat.completions.create(**kwargs)
        if not resp.choices:
            return require_text(self.provider_name, None)
        return require_text(self.provider_name, resp.choices[0].message.content)


class OpenAIClient(ChatCompletionsClient):
    def __init__(self, cfg: ProviderConfig):
        super().__init__(OpenAI(api_key=cfg.api_key), cfg.max_tokens)
