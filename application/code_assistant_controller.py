from __future__ import annotations
import hashlib
from typing import Callable, Optional

from config.logging import logger
from domain.models import ActionResult, LLMRequestError, UploadedFile
from domain.ports import CodeAssistantPort
from stores.session_state_store import SessionState, SessionStateStore
from utils.decoding import decode_upload
from utils.language import detect_language
from utils.markdown import extract_code_block

MSG_NO_FILE = "Upload a file first!"
MSG_NO_CLEANED = "Clean the code first!"
MSG_BUSY = "A request is already in progress."
MSG_NO_PROVIDER = "Configure the AI provider (API key) first."
MSG_CLEAN_FAILED = "Error calling the AI API. Check the logs."
MSG_EXPLAIN_FAILED = "Error getting explanation."


class CodeAssistantController:
    """
    Luồng trạng thái của một phiên:
    Empty -> FileLoaded -> Cleaning -> Cleaned -> Explaining -> Explained.
    Request lỗi thì state giữ nguyên như trước khi bấm.
    """
    def __init__(self, *, service: Optional[CodeAssistantPort], state_store: SessionStateStore,
                 strip_code_fences: bool = False):
        self.service = service
        self.state_store = state_store
        self.strip_code_fences = strip_code_fences

    # --- Upload / clear ---
    def load_file(self, *, file_name: str, raw: bytes) -> SessionState:
        upload = UploadedFile(name=file_name, content=decode_upload(raw))
        state = self.state_store.get()
        state.file_name = upload.name
        state.original_code = upload.content
        state.language = detect_language(upload.name)
        # code gốc đổi -> kết quả cũ không còn đúng
        state.cleaned_code = ""
        state.explanation = ""
        self.state_store.set(state)
        logger.info(f"[upload] {upload.name} ({state.language}, {len(upload.content)} ký tự)")
        return state

    def load_upload(self, *, file_name: str, raw: bytes) -> bool:
        """
        st.file_uploader trả lại cùng file ở mọi lần rerun; chỉ load khi
        file thật sự thay đổi. Trả về True nếu đã load.
        """
        sig = f"{file_name}:{hashlib.sha256(raw).hexdigest()}"
        if self.state_store.get().upload_sig == sig:
            return False
        state = self.load_file(file_name=file_name, raw=raw)
        state.upload_sig = sig
        self.state_store.set(state)
        return True

    def clear(self) -> SessionState:
        state = self.state_store.get()
        cleared = SessionState(model=state.model, uploader_key=state.uploader_key + 1)
        self.state_store.set(cleared)
        return cleared

    # --- Actions ---
    def _run(self, action: str, call: Callable[[SessionState], str],
             apply: Callable[[SessionState, str], None], failed_msg: str) -> ActionResult:
        state = self.state_store.get()
        if self.service is None:
            return ActionResult(False, MSG_NO_PROVIDER)
        if state.busy:
            logger.info(f"[{action}] Bỏ qua: đang có request khác")
            return ActionResult(False, MSG_BUSY)

        state.busy = True
        self.state_store.set(state)
        try:
            reply = call(state)
        except LLMRequestError:
            return ActionResult(False, failed_msg)
        finally:
            # chỉ reset cờ busy, các field khác giữ nguyên
            current = self.state_store.get()
            current.busy = False
            self.state_store.set(current)

        state.busy = False
        apply(state, reply)
        self.state_store.set(state)
        return ActionResult(True)

    def clean(self) -> ActionResult:
        state = self.state_store.get()
        if not state.original_code:
            return ActionResult(False, MSG_NO_FILE)

        def call(s: SessionState) -> str:
            return self.service.clean(s.language, s.original_code, model=s.model or None)

        def apply(s: SessionState, reply: str) -> None:
            s.cleaned_code = extract_code_block(reply) if self.strip_code_fences else reply
            s.explanation = ""

        return self._run("clean", call, apply, MSG_CLEAN_FAILED)

    def explain(self) -> ActionResult:
        state = self.state_store.get()
        if not state.cleaned_code:
            return ActionResult(False, MSG_NO_CLEANED)

        def call(s: SessionState) -> str:
            return self.service.explain(s.language, s.cleaned_code, model=s.model or None)

        def apply(s: SessionState, reply: str) -> None:
            s.explanation = reply

        return self._run("explain", call, apply, MSG_EXPLAIN_FAILED)

    # --- Download ---
    def download_payload(self) -> Optional[bytes]:
        cleaned = self.state_store.get().cleaned_code
        return cleaned.encode("utf-8") if cleaned else None
