import re
import unicodedata
from typing import Iterable

ALLOWED_SEASONS = {"spring", "summer", "fall", "winter"}
ALLOWED_OCCASIONS = {"casual", "work", "party", "gym", "formal", "date"}

MAX_COLORS = 6


def normalize_tag(s: str) -> str:
    s = unicodedata.normalize("NFKD", s or "").encode("ascii", "ignore").decode()
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    s = re.sub(r"-{2,}", "-", s).strip("-")
    if not (1 <= len(s) <= 24):
        raise ValueError("invalid_length")
    return s


def normalize_many(xs: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for x in xs or []:
        t = normalize_tag(x)
        if t and t not in seen:
            seen.add(t)
            out.append(t)
    return out
