from types import SimpleNamespace

import pytest

from infra.providers import azure_client as azure_mod
from infra.providers import gemini_client as gemini_mod
from infra.providers import openai_client as openai_mod
from infra.providers.base import EmptyResponseError, ProviderConfig
from domain.ports import ChatMessage


class _FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _fake_sdk(content):
    completions = _FakeCompletions(content)
    sdk = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return sdk, completions


def test_openai_client_passes_max_tokens(monkeypatch):
    sdk, completions = _fake_sdk("x = 1")
    monkeypatch.setattr(openai_mod, "OpenAI", lambda api_key: sdk)
    client = openai_mod.OpenAIClient(ProviderConfig(provider="OpenAI", api_key="k", model="gpt-4o-mini", max_tokens=123))

    out = client.chat_completion(model="gpt-4o-mini", messages=[ChatMessage("user", "hi")], temperature=0.3)

    assert out == "x = 1"
    assert completions.kwargs["max_completion_tokens"] == 123
    assert completions.kwargs["messages"] == [{"role": "user", "content": "hi"}]
    assert completions.kwargs["temperature"] == 0.3


def test_azure_client_passes_max_tokens(monkeypatch):
    sdk, completions = _fake_sdk("ok")
    monkeypatch.setattr(azure_mod, "AzureOpenAI", lambda **kwargs: sdk)
    cfg = ProviderConfig(provider="Azure OpenAI", api_key="k", model="deploy",
                         azure_api_base="https://x.openai.azure.com", azure_api_version="2024-02-15-preview",
                         max_tokens=77)
    client = azure_mod.AzureOpenAIClient(cfg)

    client.chat_completion(model="deploy", messages=[ChatMessage("user", "hi")])

    assert completions.kwargs["model"] == "deploy"
    assert completions.kwargs["max_tokens"] == 77


def test_openai_client_without_text_raises(monkeypatch):
    sdk, _ = _fake_sdk(None)
    monkeypatch.setattr(openai_mod, "OpenAI", lambda api_key: sdk)
    client = openai_mod.OpenAIClient(ProviderConfig(provider="OpenAI", api_key="k", model="m"))

    with pytest.raises(EmptyResponseError):
        client.chat_completion(model="m", messages=[ChatMessage("user", "hi")])


class _FakeGenai:
    def __init__(self, text):
        self.text = text
        self.request = None

    def __call__(self, api_key):
        self.models = self
        return self

    def generate_content(self, **kwargs):
        self.request = kwargs
        return SimpleNamespace(text=self.text)


def test_gemini_client_sends_config(monkeypatch):
    fake = _FakeGenai("## Overall Goal")
    monkeypatch.setattr(gemini_mod.genai, "Client", fake)
    client = gemini_mod.GeminiClient(ProviderConfig(provider="Gemini", api_key="k", model="gemini-2.5-flash", max_tokens=50))

    out = client.chat_completion(
        model="gemini-2.5-flash",
        messages=[ChatMessage("system", "be brief"), ChatMessage("user", "explain")],
    )

    assert out == "## Overall Goal"
    assert fake.request["contents"] == ["explain"]
    assert fake.request["config"].system_instruction == "be brief"
    assert fake.request["config"].max_output_tokens == 50


def test_gemini_blocked_response_raises(monkeypatch):
    monkeypatch.setattr(gemini_mod.genai, "Client", _FakeGenai(None))
    client = gemini_mod.GeminiClient(ProviderConfig(provider="Gemini", api_key="k", model="m"))

    with pytest.raises(EmptyResponseError):
        client.chat_completion(model="m", messages=[ChatMessage("user", "clean")])
