from typing import Dict


APP_TITLE = "Clean Code AI Assistant"

PROVIDER_OPTIONS = ["Gemini", "OpenAI", "Azure OpenAI"]
GEMINI_MODELS = ["gemini-2.5-flash", "gemini-2.5-pro", "gemini-2.0-flash"]
OPENAI_MODELS = ["gpt-4o-mini", "gpt-4.1-mini", "o4-mini"]

# Download của bản đã clean luôn dùng tên cố định
DOWNLOAD_FILE_NAME = "cleaned_code.txt"
DOWNLOAD_MIME = "text/plain"

# Tên ngôn ngữ cho st.code (highlight)
HIGHLIGHT_MAP: Dict[str, str] = {
    "python": "python", "cpp": "cpp", "c": "c", "java": "java",
    "javascript": "javascript", "html": "html", "css": "css",
    "json": "json", "xml": "xml", "text": "text",
}
