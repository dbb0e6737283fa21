import pytest

from ca65docs.parser import (
    Ca65HtmlParser,
    KeywordInfo,
    invert_snippet_types,
    parse_ca65_html,
)

SNIPPETS = {"directive": ["byte", "end"]}


def _document(body):
    return (
        '<H2><A NAME=".byte">.BYTE</A></H2>'
        + body
        + '<H2><A NAME=".end">.END</A></H2>'
    )


def _byte_doc(body):
    return parse_ca65_html(_document(body), SNIPPETS)["byte"].documentation


def test_invert_snippet_types():
    result = invert_snippet_types({"a": ["x", "y"], "b": ["z"]})
    assert result == {"x": "a", "y": "a", "z": "b"}


def test_paragraph_section_is_recorded():
    docs = Ca65HtmlParser(_document("<P>Define bytes.</P>"), SNIPPETS).parse()
    assert set(docs) == {"byte"}
    info = docs["byte"]
    assert info.snippet_type == "directive"
    assert info.documentation.startswith("\n---\n")
    assert "Define bytes." in info.documentation
    assert info.documentation.endswith("\n\n")


def test_last_section_without_following_header_is_dropped():
    docs = parse_ca65_html(_document(""), SNIPPETS)
    assert "end" not in docs


def test_keyword_is_lowercased():
    html = '<H2><A NAME=".BYTE">x</A></H2><H2><A NAME=".end">y</A></H2>'
    docs = parse_ca65_html(html, SNIPPETS)
    assert list(docs) == ["byte"]


def test_inline_code_gets_backticks():
    assert "Use `lda` here" in _byte_doc("<P>Use <CODE>lda</CODE> here</P>")


def test_html_escapes_are_decoded():
    assert "a < b > c d" in _byte_doc("<P>a &lt; b &gt; c&nbsp;d</P>")


def test_emphasis_uses_underscores():
    assert "_word_" in _byte_doc("<P><EM>word</EM></P>")


def test_fragment_link_points_to_manual():
    doc = _byte_doc('<P>See <A HREF="#s1">this</A>.</P>')
    assert "See [this](https://cc65.github.io/doc/ca65.html#s1)." in doc


def test_code_link_keeps_code_inside_brackets():
    doc = _byte_doc('<P><CODE><A HREF="ca65.html#x">.foo</A></CODE></P>')
    assert "[`.foo`](https://cc65.github.io/doc/ca65.html#x)" in doc


def test_code_block_is_fenced_and_dedented():
    doc = _byte_doc("<BLOCKQUOTE><PRE>\n        lda #1\n</PRE></BLOCKQUOTE>")
    assert "```ca65\n  lda #1\n```\n" in doc


def test_list_items_become_bullets():
    doc = _byte_doc("<UL><LI>one<LI>two</UL>")
    assert "\n- one\n- two\n" in doc


def test_definition_list_headings():
    doc = _byte_doc("<DL><DT><P>Term</P><DD><P>Meaning</P></DL>")
    assert doc.index("\n### ") < doc.index("Term") < doc.index("Meaning")


def test_text_outside_sections_is_ignored():
    docs = parse_ca65_html("<P>preamble</P>" + _document("<P>body</P>"), SNIPPETS)
    assert "preamble" not in docs["byte"].documentation


def test_missing_snippet_type_raises():
    with pytest.raises(KeyError):
        parse_ca65_html(_document("<P>x</P>"), {"directive": ["end"]})


def test_unterminated_tag_raises():
    with pytest.raises(ValueError):
        parse_ca65_html("<H2", SNIPPETS)


def test_keyword_info_to_dict():
    info = KeywordInfo(documentation="doc", snippet_type="kind")
    assert info.to_dict() == {"documentation": "doc", "snippet_type": "kind"}