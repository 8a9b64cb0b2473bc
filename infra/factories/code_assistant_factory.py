from config.env import settings
from infra.providers.base import ProviderConfig
from infra.providers.gemini_client import GeminiClient
from infra.providers.openai_client import OpenAIClient
from infra.providers.azure_client import AzureOpenAIClient
from application.code_assistant_service import CodeAssistantService


def build_code_assistant_service(provider: str, api_key: str, model: str,
                                 azure_api_base: str = "", azure_api_version: str = "") -> CodeAssistantService:
    cfg = ProviderConfig(
        provider=provider,
        api_key=api_key,
        model=model,
        azure_api_base=azure_api_base,
        azure_api_version=azure_api_version,
        max_tokens=settings.MAX_TOKENS,
    )
    cfg.validate()
    if provider == "OpenAI":
        client = OpenAIClient(cfg)
    elif provider == "Azure OpenAI":
        client = AzureOpenAIClient(cfg)
    else:
        client = GeminiClient(cfg)
    return CodeAssistantService(client, default_model=model, temperature=settings.TEMPERATURE)
