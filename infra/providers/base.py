from dataclasses import dataclass
from typing import Optional

class ProviderConfigError(RuntimeError):
    pass

class EmptyResponseError(RuntimeError):
    """Model không trả về text (bị chặn, chỉ có tool call, ...)."""

@dataclass
class ProviderConfig:
    provider: str                 # "Gemini" | "OpenAI" | "Azure OpenAI"
    api_key: str = ""
    model: str = ""              # Gemini/OpenAI model hoặc Azure deployment name
    azure_api_base: str = ""
    azure_api_version: str = ""
    max_tokens: int = 4096

    def validate(self) -> None:
        if not (self.api_key or "").strip():
            raise ProviderConfigError(f"Missing API key for {self.provider}.")
        if not (self.model or "").strip():
            label = "deployment name" if self.provider == "Azure OpenAI" else "model"
            raise ProviderConfigError(f"Missing {label} for {self.provider}.")
        if self.provider == "Azure OpenAI" and not (self.azure_api_base or "").strip():
            raise ProviderConfigError("Missing Azure API base (endpoint).")


def require_text(provider: str, text: Optional[str]) -> str:
    # "" là câu trả lời hợp lệ; None nghĩa là không có text part nào
    if text is None:
        raise EmptyResponseError(f"{provider} returned empty response")
    return text
