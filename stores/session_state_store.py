# stores/session_state_store.py
from dataclasses import dataclass
from typing import Any, MutableMapping, Optional
import streamlit as st


SESSION_KEYS = {
    "file_name": "file_name",
    "original_code": "original_code",
    "language": "language",
    "cleaned_code": "cleaned_code",
    "explanation": "explanation",
    "model": "model",
    "busy": "busy",
    "uploader_key": "uploader_key",
    "upload_sig": "upload_sig",
}

@dataclass
class SessionState:
    file_name: str = ""
    original_code: str = ""
    language: str = "text"
    cleaned_code: str = ""
    explanation: str = ""
    model: str = ""
    busy: bool = False
    uploader_key: int = 0
    upload_sig: str = ""


class SessionStateStore:
    """Đọc/ghi SessionState vào st.session_state (hoặc một dict khi test)."""

    def __init__(self, backend: Optional[MutableMapping[str, Any]] = None):
        self._backend = st.session_state if backend is None else backend

    def get(self) -> SessionState:
        b = self._backend
        return SessionState(
            file_name=b.get(SESSION_KEYS["file_name"], ""),
            original_code=b.get(SESSION_KEYS["original_code"], ""),
            language=b.get(SESSION_KEYS["language"], "text"),
            cleaned_code=b.get(SESSION_KEYS["cleaned_code"], ""),
            explanation=b.get(SESSION_KEYS["explanation"], ""),
            model=b.get(SESSION_KEYS["model"], ""),
            busy=b.get(SESSION_KEYS["busy"], False),
            uploader_key=b.get(SESSION_KEYS["uploader_key"], 0),
            upload_sig=b.get(SESSION_KEYS["upload_sig"], ""),
        )

    def set(self, state: SessionState) -> None:
        b = self._backend
        b[SESSION_KEYS["file_name"]] = state.file_name
        b[SESSION_KEYS["original_code"]] = state.original_code
        b[SESSION_KEYS["language"]] = state.language
        b[SESSION_KEYS["cleaned_code"]] = state.cleaned_code
        b[SESSION_KEYS["explanation"]] = state.explanation
        b[SESSION_KEYS["model"]] = state.model
        b[SESSION_KEYS["busy"]] = state.busy
        b[SESSION_KEYS["uploader_key"]] = state.uploader_key
        b[SESSION_KEYS["upload_sig"]] = state.upload_sig
