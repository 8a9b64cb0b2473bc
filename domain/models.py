from dataclasses import dataclass


class LLMRequestError(RuntimeError):
    """Gọi model thất bại (network / API). Không retry."""


@dataclass
class UploadedFile:
    name: str
    content: str


@dataclass
class ActionResult:
    ok: bool
    message: str = ""
