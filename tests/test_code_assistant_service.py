import pytest

from application.code_assistant_service import CodeAssistantService
from application.prompts import build_clean_prompt, build_explain_prompt
from domain.models import LLMRequestError
from fakes import FakeLLMClient


def test_clean_sends_single_user_prompt_and_trims_reply():
    client = FakeLLMClient(reply="\n\n  x = 1\n  ")
    service = CodeAssistantService(client, default_model="gemini-2.5-flash")

    out = service.clean("python", "x=1")

    assert out == "x = 1"
    assert len(client.calls) == 1
    call = client.calls[0]
    assert call["model"] == "gemini-2.5-flash"
    assert [(m.role, m.content) for m in call["messages"]] == [("user", build_clean_prompt("python", "x=1"))]


def test_explain_returns_reply_verbatim():
    md = "## Overall Goal\n- adds one\n"
    client = FakeLLMClient(reply=md)
    service = CodeAssistantService(client, default_model="gpt-4o-mini")

    assert service.explain("python", "x = 1") == md
    assert client.calls[0]["messages"][0].content == build_explain_prompt("python", "x = 1")


def test_model_override_and_temperature():
    client = FakeLLMClient(reply="ok")
    service = CodeAssistantService(client, default_model="a", temperature=0.7)

    service.clean("c", "int x;", model="b")

    assert client.calls[0]["model"] == "b"
    assert client.calls[0]["temperature"] == 0.7


def test_no_memoization_same_input_sends_again():
    client = FakeLLMClient(reply="ok")
    service = CodeAssistantService(client, default_model="m")

    service.clean("c", "int x;")
    service.clean("c", "int x;")

    assert len(client.calls) == 2


def test_provider_error_becomes_request_failed():
    boom = ConnectionError("network down")
    service = CodeAssistantService(FakeLLMClient(error=boom), default_model="m")

    with pytest.raises(LLMRequestError) as exc_info:
        service.explain("java", "class A {}")

    assert exc_info.value.__cause__ is boom


def test_missing_reply_text_is_request_failed():
    client = FakeLLMClient(reply=None)
    service = CodeAssistantService(client, default_model="m")

    with pytest.raises(LLMRequestError):
        service.clean("c", "x")
    assert len(client.calls) == 1


def test_empty_string_reply_is_kept():
    service = CodeAssistantService(FakeLLMClient(reply="   "), default_model="m")
    assert service.clean("c", "x") == ""
