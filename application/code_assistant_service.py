from typing import Optional

from application.prompts import CLEAN, EXPLAIN, build_prompt
from config.logging import logger
from domain.models import LLMRequestError
from domain.ports import LLMClientPort, CodeAssistantPort, ChatMessage


class CodeAssistantService(CodeAssistantPort):
    """
    Mỗi lần gọi = đúng một request tới model.
    Không retry, không stream, không cache.
    """
    def __init__(self, client: LLMClientPort, default_model: str, temperature: float = 0.2):
        self.client = client
        self.default_model = default_model
        self.temperature = temperature

    def _complete(self, role: str, language: str, code: str, model: Optional[str]) -> str:
        prompt = build_prompt(role, language, code)
        model = model or self.default_model
        logger.info(f"[{role}] Gọi model {model} ({language}, {len(code)} ký tự)")
        try:
            reply = self.client.chat_completion(
                model=model,
                messages=[ChatMessage("user", prompt)],
                temperature=self.temperature,
            )
        except Exception as e:
            logger.exception(f"[{role}] Lỗi gọi model: {e}")
            raise LLMRequestError("request failed") from e
        if reply is None:
            logger.error(f"[{role}] Model không trả về text")
            raise LLMRequestError("request failed")
        return reply

    def clean(self, language: str, code: str, model: Optional[str] = None) -> str:
        return self._complete(CLEAN, language, code, model).strip()

    def explain(self, language: str, code: str, model: Optional[str] = None) -> str:
        return self._complete(EXPLAIN, language, code, model)
