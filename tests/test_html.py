"""Tests for projectlist.lib.html module."""

from projectlist.lib.html import escape_html


class TestEscapeHtml:
    """Test escape_html function."""

    def test_escapes_special_characters(self):
        assert escape_html('<script>alert("xss")</script>') == \
            "&lt;script&gt;alert(&quot;xss&quot;)&lt;/script&gt;"

    def test_none_and_empty(self):
        assert escape_html(None) == ""
        assert escape_html("") == ""

    def test_escapes_ampersands(self):
        assert escape_html("foo & bar") == "foo &amp; bar"

    def test_escapes_single_quotes(self):
        assert escape_html("it's") == "it&#39;s"

    def test_single_pass(self):
        assert escape_html("<&>") == "&lt;&amp;&gt;"

    def test_plain_text_unchanged(self):
        assert escape_html("Codev CLI 0039") == "Codev CLI 0039"

    def test_not_idempotent(self):
        once = escape_html("a & b")
        assert escape_html(once) == "a &amp;amp; b"
