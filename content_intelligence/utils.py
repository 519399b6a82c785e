"""
Small helpers shared across the content intelligence services.
"""

import re
from typing import Any, Dict, Iterable, List


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(high, value))


def capitalize_topic(topic: str) -> str:
    """Upper-case the first letter of every whitespace-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in topic.split())


def lower_set(items: Iterable[str]) -> set:
    """Lower-cased set of strings, skipping None."""
    return {item.lower() for item in items if item is not None}


def ordered_unique(items: Iterable[str]) -> List[str]:
    """Drop duplicates, keeping first-seen order."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def split_sentences(text: str) -> List[str]:
    """Split on sentence punctuation."""
    return re.split(r'[.!?]+', text)


def pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present, non-None value among several key spellings."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default
