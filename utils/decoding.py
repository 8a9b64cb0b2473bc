def decode_upload(file_bytes: bytes) -> str:
    # utf-8-sig bỏ BOM ở đầu; byte lỗi được thay thế thay vì raise
    return file_bytes.decode("utf-8-sig", errors="replace")
