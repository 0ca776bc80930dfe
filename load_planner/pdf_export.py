from __future__ import annotations

from typing import List

LINES_PER_PAGE = 52
PAGE_WIDTH = 595
PAGE_HEIGHT = 842
FONT_SIZE = 10
LEADING = 14


def _escape_pdf_text(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def _page_stream(lines: List[str]) -> bytes:
    ops = ["BT", f"/F1 {FONT_SIZE} Tf", f"40 {PAGE_HEIGHT - 42} Td", f"{LEADING} TL"]
    for idx, line in enumerate(lines):
        text = _escape_pdf_text(line) or " "
        ops.append(f"({text}) Tj" if idx == 0 else f"T* ({text}) Tj")
    ops.append("ET")
    # Helvetica with WinAnsi covers the accented French labels
    return "\n".join(ops).encode("cp1252", errors="replace")


def _chunk(lines: List[str], size: int) -> List[List[str]]:
    if not lines:
        return [[]]
    return [lines[i : i + size] for i in range(0, len(lines), size)]


def build_text_pdf(lines: List[str], lines_per_page: int = LINES_PER_PAGE) -> bytes:
    """Write ``lines`` as a plain Helvetica PDF, one page per chunk of lines."""
    pages = _chunk(list(lines), lines_per_page)
    font_obj = 3
    first_page_obj = 4
    page_ids = [first_page_obj + 2 * i for i in range(len(pages))]

    objs: List[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        (
            "<< /Type /Pages /Kids ["
            + " ".join(f"{pid} 0 R" for pid in page_ids)
            + f"] /Count {len(pages)} >>"
        ).encode("ascii"),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
    ]
    for page_id, page_lines in zip(page_ids, pages):
        stream = _page_stream(page_lines)
        objs.append(
            (
                f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {PAGE_WIDTH} {PAGE_HEIGHT}] "
                f"/Resources << /Font << /F1 {font_obj} 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode("ascii")
        )
        objs.append(f"<< /Length {len(stream)} >>\nstream\n".encode("ascii") + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objs, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode("ascii") + body + b"\nendobj\n"
    xref_start = len(out)
    out += f"xref\n0 {len(objs) + 1}\n".encode("ascii")
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode("ascii")
    out += f"trailer << /Size {len(objs) + 1} /Root 1 0 R >>\nstartxref\n{xref_start}\n%%EOF".encode("ascii")
    return bytes(out)
