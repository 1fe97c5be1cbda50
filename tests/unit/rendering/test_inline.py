# tests/unit/rendering/test_inline.py

from response_kit.rendering.inline import format_inline_content


class TestEscaping:
    def test_markup_escaped(self) -> None:
        assert format_inline_content("<script>x</script>") == (
            "&lt;script&gt;x&lt;/script&gt;"
        )

    def test_empty(self) -> None:
        assert format_inline_content("") == ""

    def test_nul_characters_dropped(self) -> None:
        assert format_inline_content("a\x000\x00b") == "a0b"


class TestEmphasis:
    def test_bold_stars(self) -> None:
        assert format_inline_content("**bold**") == "<strong>bold</strong>"

    def test_bold_underscores(self) -> None:
        assert format_inline_content("__bold__") == "<strong>bold</strong>"

    def test_italic_stars(self) -> None:
        assert format_inline_content("an *important* word") == (
            "an <em>important</em> word"
        )

    def test_italic_underscores(self) -> None:
        assert format_inline_content("_gentle_") == "<em>gentle</em>"

    def test_underscores_inside_words_untouched(self) -> None:
        assert format_inline_content("snake_case_name") == "snake_case_name"

    def test_bold_and_italic_together(self) -> None:
        assert format_inline_content("**a** and *b*") == (
            "<strong>a</strong> and <em>b</em>"
        )


class TestInlineCode:
    def test_code_escaped(self) -> None:
        assert format_inline_content("`x < y`") == (
            '<code class="cr-inline-code">x &lt; y</code>'
        )

    def test_emphasis_inside_code(self) -> None:
        assert format_inline_content("`**bold**`") == (
            '<code class="cr-inline-code"><strong>bold</strong></code>'
        )

    def test_code_wraps_bold_and_score(self) -> None:
        html = format_inline_content("`**x** 8/10`")

        assert html.startswith('<code class="cr-inline-code"><strong>x</strong> <span')
        assert "cr-inline-score--high" in html
        assert html.endswith("</span></code>")


class TestInlineScores:
    def test_labeled_score(self) -> None:
        html = format_inline_content("Clarity: 8/10")

        assert '<span class="cr-inline-score__label">Clarity:</span>' in html
        assert "cr-inline-score--high" in html

    def test_bare_score(self) -> None:
        html = format_inline_content("about 3/10 here")

        assert html.startswith("about <span")
        assert "cr-inline-score--low" in html
        assert html.endswith("</span> here")

    def test_zero_max_left_alone(self) -> None:
        assert format_inline_content("7/0") == "7/0"

    def test_badge_classes_not_reformatted(self) -> None:
        html = format_inline_content("**Score: 9/10**")

        assert html.startswith("<strong>")
        assert html.count("<strong>") == 1
        assert "cr-inline-score__max" in html

    def test_overlong_denominator_stays_text(self) -> None:
        text = "Rated 1/" + "9" * 5000

        assert format_inline_content(text) == text

    def test_score_before_sentence_period(self) -> None:
        assert "cr-inline-score--high" in format_inline_content("Tone: 8/10.")
