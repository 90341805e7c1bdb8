"""
conftest.py - Pytest configuration for the chat formatter tests

Puts chat-service on sys.path so `history_chat` imports without installing.
"""
import sys
from pathlib import Path

import pytest

CHAT_SERVICE_DIR = Path(__file__).parent.parent / "chat-service"

if str(CHAT_SERVICE_DIR) not in sys.path:
    sys.path.insert(0, str(CHAT_SERVICE_DIR))


NO_DATA_MESSAGE = "Xin lỗi, tôi không tìm thấy thông tin lịch sử phù hợp với yêu cầu của bạn."
NOT_FOUND_MESSAGE = "Xin lỗi, tôi không tìm thấy thông tin phù hợp."


def bullets(markdown: str):
    """Bullet lines of rendered markdown."""
    return [line for line in markdown.split("\n") if line.startswith("- ")]


def headings(markdown: str):
    return [line for line in markdown.split("\n") if line.startswith("### ")]


@pytest.fixture
def nguyen_tat_thanh_events():
    """Real backend output for "Nguyễn Tất Thành ra đi tìm đường cứu nước"."""
    return [
        {
            "id": None,
            "year": 1911,
            "event": "Nguyễn Tất Thành ra đi tìm đường cứu nước (1911). ...",
            "story": "Năm 1911, Nguyễn Tất Thành ra đi tìm đường cứu nước (1911). "
                     "Nguyễn Tất Thành rời bến Nhà Rồng, bắt đầu hành trình qua nhiều châu lục.",
        },
        {
            "id": None,
            "year": 1911,
            "event": "Câu hỏi nhắm tới sự kiện Nguyễn Tất Thành ra đi tìm đường cứu nước (1911). Cốt lõi. ...",
            "story": "Năm 1911, Câu hỏi nhắm tới sự kiện Nguyễn Tất Thành ra đi tìm đường cứu nước (1911). "
                     "Cốt lõi. Nguyễn Tất Thành rời bến Nhà Rồng.. Trả lời sẽ nêu rõ mốc, diễn biến chính và.",
        },
        {
            "id": None,
            "year": 1911,
            "event": "B1. gắn mốc 1911 với Nguyễn Tất Thành ra đi tìm đường cứu nước.",
            "story": "Năm 1911, B1. gắn mốc 1911 với Nguyễn Tất Thành ra đi tìm đường cứu nước. "
                     "B2. nêu diễn biến trọng tâm – \"Nguyễn Tất Thành rời bến Nhà Rồng.\".",
        },
    ]
