from __future__ import annotations

SQL_KEYWORDS = ("select", "insert", "delete", "update")


def looks_like_sql(text: str) -> bool:
    # Plain substring containment; "updated_at" and prose both count.
    lowered = text.lower()
    return any(keyword in lowered for keyword in SQL_KEYWORDS)
