from __future__ import annotations

DEFAULT_INTENT = "summary"

# intent -> keywords (Japanese and English); dict order is output order
INTENT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "trend": ("トレンド", "trend", "傾向", "推移", "変化", "時系列"),
    "summary": ("要約", "summary", "概要", "まとめ", "統計", "サマリー"),
    "correlation": ("相関", "correlation", "関係", "関連"),
    "anomaly": ("異常", "anomaly", "外れ値", "outlier", "アノマリー"),
    "comparison": ("比較", "comparison", "compare", "違い", "difference", "対比"),
}


def extract_analysis_intents(text: str) -> list[str]:
    """
    Infer what kind of analysis a message asks for.

    Matching is a case-insensitive substring test; a message that matches
    nothing asks for a summary.
    """
    lowered = (text or "").lower()
    intents = [
        intent
        for intent, keywords in INTENT_KEYWORDS.items()
        if any(k in lowered for k in keywords)
    ]
    return intents or [DEFAULT_INTENT]
