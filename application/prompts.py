CLEAN = "clean"
EXPLAIN = "explain"

EXPLAIN_SECTIONS = (
    "Overall Goal",
    "Key Components/Functions",
    "Step-by-Step Logic",
    "Conclusion",
)


def build_clean_prompt(language: str, code: str) -> str:
    return "\n".join([
        f"Please clean, format, and optimize the following {language} code. "
        "Focus on readability, best practices, and minor efficiency improvements.",
        "IMPORTANT: Return ONLY the cleaned code as raw text, with no markdown and no explanations.",
        "Code:",
        code,
    ])


def build_explain_prompt(language: str, code: str) -> str:
    sections = [f"{i}. {title}" for i, title in enumerate(EXPLAIN_SECTIONS, start=1)]
    return "\n".join([
        f"Please explain the following {language} code in Markdown.",
        "Use clear sections with headings and bullet points:",
        *sections,
        "Code:",
        code,
    ])


_BUILDERS = {
    CLEAN: build_clean_prompt,
    EXPLAIN: build_explain_prompt,
}


def build_prompt(role: str, language: str, code: str) -> str:
    try:
        builder = _BUILDERS[role]
    except KeyError:
        raise ValueError(f"Unknown prompt role: {role!r}") from None
    return builder(language, code)
