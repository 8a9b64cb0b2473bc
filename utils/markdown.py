import re

_LANG_LINE = re.compile(r"^[A-Za-z0-9_.+\-]+$")


def extract_code_block(md: str) -> str:
    """
    Bỏ cặp ``` ngoài cùng trong chuỗi markdown, trả lại nội dung bên trong.
    Nếu không có đủ hai dấu ```, trả về chuỗi gốc (strip).
    """
    if not md:
        return ""

    fence = "```"
    start = md.find(fence)
    end = md.rfind(fence)
    if start == -1 or end == start:
        return md.strip()

    inner = md[start + len(fence): end]

    # Dòng đầu kiểu "python", "c++" là tên ngôn ngữ -> bỏ
    first_line, sep, rest = inner.partition("\n")
    if sep and _LANG_LINE.fullmatch(first_line.strip()):
        inner = rest
    elif sep and not first_line.strip():
        inner = rest
    return inner.rstrip("\n")
