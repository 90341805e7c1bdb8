import os

# ===============================
# SCAFFOLD FILTER CONFIG
# ===============================
# Template remnants from the answer generator ("B1. gắn mốc ...", "Câu hỏi nhắm tới ...").
# Records whose content starts with one of these (after "Năm XXXX, ") are dropped.
DEFAULT_SCAFFOLD_PREFIXES = (
    "B1.",
    "B2.",
    "B3.",
    "Câu hỏi nhắm tới",
    "Bối cảnh.",
    "Cốt lõi.",
)


def _split_prefixes(raw: str) -> tuple:
    return tuple(p for p in (part.strip() for part in raw.split("|")) if p)


_SCAFFOLD_ENV = os.getenv("SCAFFOLD_PREFIXES", "")
SCAFFOLD_PREFIXES = _split_prefixes(_SCAFFOLD_ENV) or DEFAULT_SCAFFOLD_PREFIXES

# ===============================
# DEDUP CONFIG
# ===============================
SIMILARITY_KEY_LENGTH = int(os.getenv("SIMILARITY_KEY_LENGTH", 30))
# 0 keeps records whose similarity text is empty (pure punctuation / emoji)
MIN_SIMILARITY_CHARS = int(os.getenv("MIN_SIMILARITY_CHARS", 0))

# Bucket for records without a year
OTHER_YEAR_KEY = "Khác"

# ===============================
# SERVICE CONFIG
# ===============================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", 8080))
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:8080,http://localhost:3000,http://127.0.0.1:8080,http://127.0.0.1:3000",
    ).split(",")
    if o.strip()
]
