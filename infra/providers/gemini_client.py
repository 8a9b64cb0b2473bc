from typing import Sequence
from google import genai
from google.genai import types
from domain.ports import LLMClientPort, ChatMessage
from infra.providers.base import ProviderConfig, require_text

class GeminiClient(LLMClientPort):
    def __init__(self, cfg: ProviderConfig):
        self._client = genai.Client(api_key=cfg.api_key)
        self._max_tokens = cfg.max_tokens

    def chat_completion(self, model: str, messages: Sequence[ChatMessage], temperature: float = 0.2) -> str:
        # Gemini tách system instruction khỏi contents
        system = "\n\n".join(m.content for m in messages if m.role == "system")
        contents = [m.content for m in messages if m.role != "system"]
        resp = self._client.models.generate_content(
            model=model,
            contents=contents,
            config=types.GenerateContentConfig(
                system_instruction=system or None,
                temperature=temperature,
                max_output_tokens=self._max_tokens,
            ),
        )
        # resp.text là None khi response bị chặn hoặc không có text part
        return require_text("Gemini", resp.text)
