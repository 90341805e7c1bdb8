"""
test_legacy_format.py - Year-keyed legacy payloads

    {"938": {"summary": "...", "events": [{"year": 938, "event": "...", "persons": [...]}]}}
"""
import json

from history_chat.services.formatters.legacy_formatter import format_legacy_payload
from history_chat.services.response_formatter import format_history_response


BACH_DANG = {
    "938": {
        "summary": "Chiến thắng Bạch Đằng chấm dứt thời kỳ Bắc thuộc.",
        "events": [
            {
                "year": 938,
                "event": "Ngô Quyền đánh bại quân Nam Hán trên sông Bạch Đằng.",
                "persons": ["Ngô Quyền"],
                "places": ["Sông Bạch Đằng"],
                "keywords": ["Bạch Đằng", "Nam Hán"],
                "tone": "heroic",
                "story": "không hiển thị",
            }
        ],
    }
}


class TestLegacyFormat:

    def test_scenario(self):
        data = {"938": {"summary": "S", "events": [{"year": 938, "event": "E", "persons": ["Ngô Quyền"]}]}}
        result = format_history_response(data)
        assert "### Năm 938" in result
        assert "**Tóm tắt:** S" in result
        assert "  - *Nhân vật:* Ngô Quyền" in result

    def test_full_layout(self):
        result = format_history_response(BACH_DANG)
        assert result == (
            "### Năm 938\n\n"
            "**Tóm tắt:** Chiến thắng Bạch Đằng chấm dứt thời kỳ Bắc thuộc.\n\n"
            "**Sự kiện tiêu biểu:**\n\n"
            "- **938:** Ngô Quyền đánh bại quân Nam Hán trên sông Bạch Đằng.\n"
            "  - *Nhân vật:* Ngô Quyền\n"
            "  - *Địa danh:* Sông Bạch Đằng\n"
            "  - *Từ khóa:* Bạch Đằng, Nam Hán\n\n"
            "---"
        )

    def test_extra_fields_not_rendered(self):
        result = format_history_response(BACH_DANG)
        assert "heroic" not in result
        assert "không hiển thị" not in result

    def test_empty_detail_lists_skipped(self):
        data = {"1010": {"summary": "Dời đô", "events": [
            {"year": 1010, "event": "Lý Thái Tổ dời đô", "persons": [], "places": []},
        ]}}
        result = format_history_response(data)
        assert "Nhân vật" not in result
        assert "Địa danh" not in result
        assert "- **1010:** Lý Thái Tổ dời đô" in result

    def test_summary_without_events(self):
        result = format_history_response({"1945": {"summary": "Cách mạng tháng Tám"}})
        assert result == "### Năm 1945\n\n**Tóm tắt:** Cách mạng tháng Tám\n\n---"

    def test_keys_without_summary_skipped(self):
        data = {
            "meta": "v1",
            "1009": {"events": []},
            "1010": {"summary": "Dời đô"},
        }
        result = format_history_response(data)
        assert result.count("### Năm") == 1
        assert "### Năm 1010" in result

    def test_key_order_preserved(self):
        data = {"1954": {"summary": "B"}, "938": {"summary": "A"}}
        result = format_history_response(data)
        assert result.index("### Năm 1954") < result.index("### Năm 938")

    def test_blocks_separated(self):
        data = {"938": {"summary": "A"}, "1954": {"summary": "B"}}
        assert format_history_response(data).count("---") == 2

    def test_malformed_event_entries(self):
        data = {"938": {"summary": "S", "events": [None, {"event": "Không có năm"}]}}
        result = format_history_response(data)
        assert "- **:** " in result
        assert "- **:** Không có năm" in result

    def test_no_year_data_falls_back_to_json(self):
        data = {"1009": {"events": []}}
        assert format_history_response(data) == json.dumps(data, indent=2)

    def test_direct_call_empty(self):
        assert format_legacy_payload({"a": 1}) == ""
        assert format_legacy_payload([]) == ""
