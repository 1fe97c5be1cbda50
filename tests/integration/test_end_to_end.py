# tests/integration/test_end_to_end.py

"""Realistic model outputs through the default pygments + bleach stack."""

import json
import re

import pytest

from response_kit import create_formatter, format_response, format_structured_response
from response_kit.config import FormatterConfig

MARKDOWN_REVIEW = """# Overall Assessment: 8/10

The reply is warm and stays in character.

## Dialogue Quality (7/10)
**Strengths:**
- Natural phrasing
- Good *pacing* with `callbacks`

## Consistency
Score: 9/10
Keeps every established detail.

## Example
```python
def greet(name):
    return f"<b>{name}</b>"
```

---

Final note: see https://example.com for the rubric.
"""

STRUCTURED_REVIEW = {
    "overall_score": 82,
    "summary": "Strong scene work with a few pacing issues in the middle act.",
    "characters": [
        {
            "name": "Mira",
            "score": 9,
            "feedback": "Consistent voice and motivations throughout the whole scene.",
            "issues": ["tone shift", "contradicts backstory"],
        },
        {
            "name": "Tomas",
            "score": 4,
            "feedback": "Drifts out of character when the conversation turns to the war.",
        },
    ],
    "metrics": {"word_count": 1532, "is_complete": True, "source": None},
    "reference": "https://example.com/rubric",
    "contact": "editor@example.com",
}


@pytest.fixture
def structured_text() -> str:
    return "Here is my review:\n```json\n" + json.dumps(STRUCTURED_REVIEW) + "\n```"


class TestMarkdownResponse:
    def test_layout(self) -> None:
        html = format_response(MARKDOWN_REVIEW)

        assert "cr-hero cr-hero--high" in html
        assert "Overall Assessment" in html
        assert html.count('class="cr-section"') == 3
        assert "cr-section__score" in html
        assert '<ul class="cr-list">' in html
        assert "<em>pacing</em>" in html
        assert '<code class="cr-inline-code">callbacks</code>' in html

    def test_code_block_highlighted_and_escaped(self) -> None:
        html = format_response(MARKDOWN_REVIEW)

        assert '<div class="cr-code__lang">python</div>' in html
        assert "<b>" not in html
        assert "&lt;b&gt;" in html

    def test_deterministic(self) -> None:
        assert format_response(MARKDOWN_REVIEW) == format_response(MARKDOWN_REVIEW)


class TestStructuredResponse:
    def test_every_top_level_key_rendered(self, structured_text: str) -> None:
        html = format_response(structured_text)

        for label in ["Summary", "Characters", "Metrics", "Reference", "Contact"]:
            assert f">{label}<" in html
        assert ">Overall Score<" in html
        assert html.count("Overall Score") == 1

    def test_cards_and_badges(self, structured_text: str) -> None:
        html = format_response(structured_text)

        assert html.count('class="cr-card"') == 2
        assert "cr-score--high" in html
        assert "cr-score--mid" in html
        assert "<li>tone shift</li>" in html

    def test_values(self, structured_text: str) -> None:
        html = format_response(structured_text)

        assert '<span class="cr-num">1,532</span>' in html
        assert "cr-bool--yes" in html
        assert '<span class="cr-null">—</span>' in html
        assert 'href="https://example.com/rubric"' in html
        assert 'href="mailto:editor@example.com"' in html

    def test_declared_schema(self) -> None:
        schema = {
            "name": "review",
            "strict": True,
            "value": {
                "type": "object",
                "properties": {
                    "contact": {"type": "string", "format": "email"},
                    "summary": {"type": "string"},
                },
            },
        }

        html = format_structured_response(json.dumps(STRUCTURED_REVIEW), schema)

        assert html.index("Contact") < html.index("Summary")
        assert "Characters" not in html


class TestSafety:
    @pytest.mark.parametrize(
        "text",
        [
            "<script>alert(1)</script>",
            "## <img src=x onerror=alert(1)> 5/10\n<iframe src=evil></iframe>",
            '{"bio": "<script>alert(1)</script>", "link": "javascript:alert(1)"}',
            "```html\n<script>alert(1)</script>\n```",
            "**<svg onload=alert(1)>**",
        ],
    )
    def test_no_raw_markup_from_input(self, text: str) -> None:
        html = format_response(text)

        assert not re.search(r"<(script|img|iframe|svg)", html)
        assert 'href="javascript' not in html

    def test_unsanitized_output_is_still_escaped(self) -> None:
        formatter = create_formatter(FormatterConfig(sanitize=False))

        html = formatter.format_response("## <b>Title</b>\n<i>body</i>")

        assert "<b>" not in html
        assert "<i>" not in html

    def test_empty_input_placeholder(self) -> None:
        assert "No content" in format_response("")
