"""Response normalizer tests"""
import pytest

from screen2code.normalizer import (
    OtherSegment,
    TextSegment,
    join_text,
    normalize_segments,
    strip_code_fence,
)


def test_round_trip_jsx_fence():
    segments = [TextSegment("```jsx\nexport default function X(){}\n```")]

    assert normalize_segments(segments) == "export default function X(){}"


def test_join_text_drops_non_text_segments():
    segments = [
        OtherSegment("thinking"),
        TextSegment("first"),
        OtherSegment("tool_use"),
        TextSegment("second"),
    ]

    assert join_text(segments) == "first\nsecond"


def test_join_text_trims_outer_whitespace():
    assert join_text([TextSegment("  \n<div></div>\n  ")]) == "<div></div>"


@pytest.mark.parametrize(
    "segments",
    [[], [OtherSegment("tool_use")], [TextSegment("   ")]],
)
def test_normalize_empty_or_non_text_response_is_empty_code(segments):
    assert normalize_segments(segments) == ""


@pytest.mark.parametrize(
    "fenced, expected",
    [
        ("```\n<div></div>\n```", "<div></div>"),
        ("```html\n<!DOCTYPE html>\n```", "<!DOCTYPE html>"),
        ("```vue\n<template></template>\n```", "<template></template>"),
        ("```tsx\nconst a = 1;\n```", "const a = 1;"),
        ("```  \n", "```"),
    ],
)
def test_strip_code_fence(fenced, expected):
    assert strip_code_fence(fenced) == expected


def test_strip_code_fence_handles_only_leading_marker():
    assert strip_code_fence("```jsx\nconst a = 1;") == "const a = 1;"


def test_strip_code_fence_handles_only_trailing_marker():
    assert strip_code_fence("const a = 1;\n```") == "const a = 1;"


def test_strip_code_fence_leaves_unfenced_code_alone():
    code = "<section>\n  <h1>Hi</h1>\n</section>"

    assert strip_code_fence(code) == code


def test_strip_code_fence_keeps_surrounding_prose():
    """Known limitation: fences that are not at the very start/end stay."""
    text = "Here is your component:\n```jsx\nconst a = 1;\n```"

    assert strip_code_fence(text) == "Here is your component:\n```jsx\nconst a = 1;"


def test_strip_code_fence_keeps_inner_fences():
    text = "```md\n# Title\n```js\nx\n```\n```"

    assert strip_code_fence(text) == "# Title\n```js\nx\n```"


@pytest.mark.parametrize(
    "text",
    [
        "```jsx\nexport default function X(){}\n```",
        "export default function X(){}",
        "```\n<div></div>\n```",
        "plain text",
        "",
    ],
)
def test_strip_code_fence_is_idempotent(text):
    once = strip_code_fence(text)

    assert strip_code_fence(once) == once


def test_strip_code_fence_nested_fences_lose_one_layer_per_call():
    text = "```md\n# Title\n```js\nx\n```\n```"

    once = strip_code_fence(text)

    assert once == "# Title\n```js\nx\n```"
    assert strip_code_fence(once) == "# Title\n```js\nx"
