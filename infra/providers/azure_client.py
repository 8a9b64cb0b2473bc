from openai import AzureOpenAI
from infra.providers.base import ProviderConfig
from infra.providers.openai_client import ChatCompletionsClient

class AzureOpenAIClient(ChatCompletionsClient):
    """
    - azure_api_base: dạng https://<resource>.openai.azure.com
    - model truyền vào chat_completion là tên deployment
    """
    provider_name = "Azure OpenAI"
    # api_version cũ (2024-02-15-preview) chưa có max_completion_tokens
    token_param = "max_tokens"

    def __init__(self, cfg: ProviderConfig):
        sdk = AzureOpenAI(
            api_key=cfg.api_key,
            azure_endpoint=cfg.azure_api_base,
            api_version=cfg.azure_api_version,
        )
        super().__init__(sdk, cfg.max_tokens)
