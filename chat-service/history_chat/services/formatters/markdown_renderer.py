"""
markdown_renderer.py — Year groups → markdown sections.

Output shape:

    ### Năm 1930

    - Khởi nghĩa Yên Bái bùng nổ.
    - Thành lập Đảng Cộng sản Việt Nam.

    ### Sự kiện khác

    - ...

Only the heading carries the year; bullets have their own
"Năm XXXX, " prefix removed so the year is not repeated.
"""

from typing import List, Optional, Sequence

from history_chat.core.config import OTHER_YEAR_KEY
from history_chat.core.payload_schema import YearGroup
from history_chat.utils.normalize import strip_given_year_prefix

NOT_FOUND_MESSAGE = "Xin lỗi, tôi không tìm thấy thông tin phù hợp."
OTHER_YEAR_HEADING = "Sự kiện khác"


def year_heading(key: str) -> str:
    if key == OTHER_YEAR_KEY:
        return f"### {OTHER_YEAR_HEADING}"
    return f"### Năm {key}"


def render_bullet(key: str, content: str) -> str:
    if key != OTHER_YEAR_KEY:
        content = strip_given_year_prefix(content, key)
    return f"- {content}"


def render_year_groups(groups: Sequence[YearGroup]) -> str:
    """Render already-ordered groups. Empty groups render nothing."""
    parts: List[str] = []
    for group in groups:
        if not group.contents:
            continue
        parts.append(year_heading(group.year_key))
        parts.append("")
        parts.extend(render_bullet(group.year_key, c) for c in group.contents)
        parts.append("")
    return "\n".join(parts).strip()


def pick_answer(answer: Optional[str]) -> Optional[str]:
    """Trimmed prose answer, or None if missing/blank."""
    if isinstance(answer, str) and answer.strip():
        return answer.strip()
    return None
