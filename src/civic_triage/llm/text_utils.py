"""
Text processing utilities for the LLM layer.

Provides description truncation for the prompt, JSON extraction from
chatty model output, and the crude gibberish heuristics used by the
input gate.
"""

import re
from typing import Optional


_JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")
_ALPHA_RUN_PATTERN = re.compile(r"[^\W\d_]{3,}")


def truncate_at_sentence_boundary(text: str, max_chars: int) -> str:
    """
    Truncate text at the nearest sentence boundary before max_chars.

    Preserves complete sentences to maintain semantic coherence for the LLM.
    Looks for sentence-ending punctuation (. ! ?) followed by whitespace or end.

    Args:
        text: Text to truncate
        max_chars: Maximum character count

    Returns:
        Truncated text ending at a sentence boundary, or hard-truncated if
        no sentence boundary found within the limit.

    Examples:
        >>> truncate_at_sentence_boundary("Hello. World. Test.", 15)
        'Hello. World.'
    """
    if len(text) <= max_chars:
        return text

    truncated_segment = text[:max_chars]

    # Sentence-ending punctuation followed by whitespace or end of segment
    matches = list(re.finditer(r'[.!?](?:\s|$)', truncated_segment))

    if matches:
        cutoff = matches[-1].end()
        if truncated_segment[cutoff - 1:cutoff].isspace():
            cutoff -= 1
        return text[:cutoff]

    # No sentence boundary: avoid cutting a word in half if a space is near the end
    last_space = truncated_segment.rfind(' ')
    if last_space > max_chars * 0.8:
        return text[:last_space]

    return text[:max_chars]


def extract_json_object(text: str) -> Optional[str]:
    """
    Greedy brace-delimited substring: first ``{`` to last ``}``.

    Models wrap their JSON in prose or markdown fences; this strips that
    without trying to be clever about nested or multiple objects.

    Examples:
        >>> extract_json_object('Sure! ```json\\n{"a": 1}\\n```')
        '{"a": 1}'
        >>> extract_json_object("no json here") is None
        True
    """
    if not text:
        return None
    match = _JSON_OBJECT_PATTERN.search(text)
    return match.group(0) if match else None


def has_alpha_run(text: str, min_run: int = 3) -> bool:
    """True when ``text`` contains at least ``min_run`` consecutive letters (any script)."""
    if min_run == 3:
        return _ALPHA_RUN_PATTERN.search(text) is not None
    return re.search(rf"[^\W\d_]{{{min_run},}}", text) is not None
