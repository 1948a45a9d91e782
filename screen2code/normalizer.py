"""Response normalizer — model segments in, clean source code out."""
import re
from dataclasses import dataclass

from screen2code.constants import FENCE_CLOSE_PATTERN, FENCE_OPEN_PATTERN, SEGMENT_SEPARATOR

_FENCE_OPEN_RE = re.compile(FENCE_OPEN_PATTERN)
_FENCE_CLOSE_RE = re.compile(FENCE_CLOSE_PATTERN)


@dataclass(frozen=True)
class TextSegment:
    text: str


@dataclass(frozen=True)
class OtherSegment:
    """Any non-text content block (tool use, thinking, ...). Always dropped."""

    kind: str


Segment = TextSegment | OtherSegment


# ── pure helpers (module-level so tests can import them directly) ──────────────


def _text_of(segment: Segment) -> str | None:
    match segment:
        case TextSegment(text=text):
            return text
        case _:
            return None


def join_text(segments: list[Segment]) -> str:
    texts = [t for t in map(_text_of, segments) if t is not None]
    return SEGMENT_SEPARATOR.join(texts).strip()


def strip_code_fence(text: str) -> str:
    """Remove one leading ```lang fence and one trailing ``` fence.

    Only markers at the very start and end of the trimmed text are touched;
    prose around a fence is kept as-is. Repeated calls give the same result
    only for single-fenced or unfenced text; nested fences lose one layer per call.
    """
    cleaned = _FENCE_OPEN_RE.sub("", text.strip(), count=1)
    cleaned = _FENCE_CLOSE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def normalize_segments(segments: list[Segment]) -> str:
    return strip_code_fence(join_text(segments))
