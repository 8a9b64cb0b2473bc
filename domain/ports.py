from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Sequence, Optional

@dataclass
class ChatMessage:
    role: str
    content: str

class LLMClientPort(Protocol):
    def chat_completion(
        self,
        model: str,
        messages: Sequence[ChatMessage],
        temperature: float = 0.2,
    ) -> str: ...

class CodeAssistantPort(Protocol):
    def clean(
        self,
        language: str,
        code: str,
        model: Optional[str] = None,
    ) -> str: ...

    def explain(
        self,
        language: str,
        code: str,
        model: Optional[str] = None,
    ) -> str: ...
