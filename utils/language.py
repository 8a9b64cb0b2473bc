from typing import Dict, Optional

FALLBACK_LANGUAGE = "text"

# Phần mở rộng (không có dấu chấm) -> language tag
_EXT_MAP: Dict[str, str] = {
    "py": "python",
    "cpp": "cpp",
    "c": "c",
    "java": "java",
    "js": "javascript",
    "html": "html",
    "css": "css",
    "json": "json",
    "xml": "xml",
}

LANGUAGE_TAGS = tuple(_EXT_MAP.values()) + (FALLBACK_LANGUAGE,)


def file_extension(filename: Optional[str]) -> str:
    """Phần sau dấu '.' cuối cùng; '' nếu tên file không có dấu chấm."""
    name = filename or ""
    head, sep, ext = name.rpartition(".")
    return ext if sep else ""


def detect_language(filename: Optional[str]) -> str:
    return _EXT_MAP.get(file_extension(filename), FALLBACK_LANGUAGE)
