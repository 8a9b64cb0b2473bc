# main.py
from typing import Optional
import streamlit as st

from application.code_assistant_controller import CodeAssistantController
from application.code_assistant_service import CodeAssistantService
from config.constant import (
    APP_TITLE, DOWNLOAD_FILE_NAME, DOWNLOAD_MIME, GEMINI_MODELS, HIGHLIGHT_MAP, OPENAI_MODELS, PROVIDER_OPTIONS,
)
from config.env import settings
from config.logging import logger
from infra.factories.code_assistant_factory import build_code_assistant_service
from infra.providers.base import ProviderConfigError
from stores.session_state_store import SessionState, SessionStateStore

# ============== Page & header ==============
st.set_page_config(page_title=APP_TITLE, page_icon="🧹", layout="wide")
st.title("🧹 " + APP_TITLE)
st.caption("Upload a source file, clean it with AI, download the result and get an explanation.")

# ============== Sidebar (Settings) ==============
with st.sidebar:
    st.header("⚙️ Settings")
    default_provider = PROVIDER_OPTIONS.index(settings.PROVIDER) if settings.PROVIDER in PROVIDER_OPTIONS else 0
    provider = st.selectbox("Provider", PROVIDER_OPTIONS, index=default_provider)
    azure_api_base, azure_api_version = "", ""
    if provider == "Gemini":
        api_key = st.text_input("Gemini API Key", type="password", value=settings.GEMINI_API_KEY,
                                help="Hoặc đặt GEMINI_API_KEY.")
        models = GEMINI_MODELS if settings.GEMINI_MODEL in GEMINI_MODELS else [settings.GEMINI_MODEL] + GEMINI_MODELS
        model = st.selectbox("Model (Gemini)", models, index=models.index(settings.GEMINI_MODEL))
    elif provider == "OpenAI":
        api_key = st.text_input("OpenAI API Key", type="password", value=settings.OPENAI_API_KEY,
                                help="Hoặc đặt OPENAI_API_KEY.")
        models = OPENAI_MODELS if settings.OPENAI_MODEL in OPENAI_MODELS else [settings.OPENAI_MODEL] + OPENAI_MODELS
        model = st.selectbox("Model (OpenAI)", models, index=models.index(settings.OPENAI_MODEL))
    else:
        azure_api_base = st.text_input(
            "Azure API Base",
            placeholder="https://<resource>.openai.azure.com",
            value=settings.AZURE_OPENAI_API_BASE,
        )
        azure_api_version = st.text_input("Azure API Version", value=settings.AZURE_OPENAI_API_VERSION)
        api_key = st.text_input("Azure API Key", type="password", value=settings.AZURE_OPENAI_API_KEY,
                                help="Hoặc AZURE_OPENAI_API_KEY.")
        model = st.text_input(
            "Deployment name (Azure)",
            placeholder="vd: gpt-4o-mini-deploy",
            value=settings.AZURE_OPENAI_DEPLOYMENT,
        )
    with st.expander("ℹ️ Notes"):
        st.markdown("- App **không lưu** API key hay source code; mọi thứ ở trong **phiên làm việc hiện tại**.")

# ============== Khởi tạo service & controller ==============
service: Optional[CodeAssistantService] = None
try:
    service = build_code_assistant_service(
        provider=provider,
        api_key=api_key,
        model=model,
        azure_api_base=azure_api_base,
        azure_api_version=azure_api_version,
    )
except ProviderConfigError as e:
    st.sidebar.warning(f"⚠️ {e}")

store = SessionStateStore()
controller = CodeAssistantController(
    service=service, state_store=store, strip_code_fences=settings.STRIP_CODE_FENCES
)
state: SessionState = store.get()

# set model in state
if state.model != model:
    state.model = model
    store.set(state)

# ============== Upload ==============
uploaded = st.file_uploader("Source file", key=f"uploader_{state.uploader_key}")
if uploaded is not None:
    if controller.load_upload(file_name=uploaded.name, raw=uploaded.getvalue()):
        state = store.get()

if state.original_code:
    st.success(f"🔍 Detected language: **{state.language}**")

# ============== Actions ==============
# Request chạy trọn trong một lần script run nên busy gần như không bao giờ hiện ra ở UI;
# chặn double-click thật sự nằm ở controller (busy check).
can_call = service is not None and not state.busy
col_clean, col_download, col_explain, col_clear = st.columns(4)
with col_clean:
    if state.original_code:
        if st.button("Clean Code", key="clean_btn", use_container_width=True,
                     type="primary", disabled=not can_call):
            with st.spinner("Cleaning…"):
                result = controller.clean()
            if result.ok:
                st.rerun()
            st.error(result.message)

with col_download:
    payload = controller.download_payload()
    if payload is not None:
        st.download_button("Download", data=payload, file_name=DOWNLOAD_FILE_NAME, mime=DOWNLOAD_MIME,
                           key="download_btn", use_container_width=True)

with col_explain:
    if state.cleaned_code:
        if st.button("Explain", key="explain_btn", use_container_width=True, disabled=not can_call):
            with st.spinner("Explaining…"):
                result = controller.explain()
            if result.ok:
                st.rerun()
            st.error(result.message)

with col_clear:
    if st.button("🧹 Clear", key="clear_btn", use_container_width=True):
        controller.clear()
        logger.info("[clear] Reset session")
        st.rerun()

# ============== Side-by-side view ==============
state = store.get()
highlight = HIGHLIGHT_MAP.get(state.language, "text")
col_orig, col_cleaned = st.columns(2)
with col_orig:
    st.subheader("Original Code")
    with st.container(height=400, border=True):
        st.code(state.original_code, language=highlight)
with col_cleaned:
    st.subheader("Cleaned Code")
    with st.container(height=400, border=True):
        st.code(state.cleaned_code, language=highlight)

# ============== Markdown explanation ==============
if state.explanation:
    st.subheader("Code Explanation")
    with st.container(height=500, border=True):
        st.markdown(state.explanation)
