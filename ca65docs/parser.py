"""Turn the ca65 HTML manual into Markdown snippets keyed by directive."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass

from ca65docs.stream import Stream

_DOC_BASE_URL = "https://cc65.github.io/doc/"
_DOC_PAGE_URL = _DOC_BASE_URL + "ca65.html"

# Elements that never get a closing tag in ca65.html (the manual leaves <li> open).
_UNCLOSED_ELEMENTS = frozenset({"!doctype", "meta", "link", "rel", "br", "hr", "li"})

_TEXT_ELEMENTS = frozenset({"p", "a", "ul", "em"})

_ESCAPES = {"gt": ">", "lt": "<", "nbsp": " "}

# The manual indents code blocks with 8 spaces; keep only the first 2 of them.
_PRE_INDENT_SCAN = 8
_PRE_INDENT_KEEP = 2


@dataclass
class KeywordInfo:
    """Documentation for one keyword and the kind of snippet it belongs to."""

    documentation: str
    snippet_type: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def invert_snippet_types(snippet_types: Mapping[str, Iterable[str]]) -> dict[str, str]:
    """Map each keyword to its snippet type, given keywords grouped by type."""
    return {
        keyword: snippet_type
        for snippet_type, keywords in snippet_types.items()
        for keyword in keywords
    }


class Ca65HtmlParser:
    """Single-pass parser for the structure of the ca65 manual."""

    def __init__(self, text: str, snippet_types: Mapping[str, Iterable[str]]) -> None:
        self._input = Stream(text)
        self._start = 0
        self._stack: list[str] = []
        self._key = ""
        self._description: list[str] = []
        self._href = ""
        self._href_is_code = False
        self._snippet_types = invert_snippet_types(snippet_types)

    def parse(self) -> dict[str, KeywordInfo]:
        """Read the whole document and return documentation per keyword.

        A keyword's section is recorded when the next <h2> begins.
        Raises ValueError on truncated markup and KeyError for a keyword
        that has no snippet type.
        """
        docs: dict[str, KeywordInfo] = {}
        stream = self._input
        while not stream.at_end():
            char = stream.advance()
            if char != "<":
                if self._key:
                    self._handle_text(char)
                continue

            is_closing = stream.peek() == "/"
            if is_closing:
                stream.advance()
            name_start = stream.pos()
            self._consume_until_before(" >")
            name = stream.slice(name_start, stream.pos()).lower()

            if is_closing and name != "li":
                if self._stack:
                    element = self._stack.pop()
                    if element == name and self._key:
                        self._close_element(element)
            elif name not in _UNCLOSED_ELEMENTS:
                self._stack.append(name)

            if stream.advance() == " ":
                if name == "a":
                    self._read_anchor_attribute()
                self._consume_until_after(">")

            if not is_closing and self._key:
                self._open_element(name, docs)
        return docs

    @property
    def _text(self) -> str:
        return "".join(self._description)

    def _ends_with(self, suffix: str) -> bool:
        return bool(self._description) and self._text.endswith(suffix)

    def _top_is(self, element: str) -> bool:
        return bool(self._stack) and self._stack[-1] == element

    def _current_string(self) -> str:
        return self._input.slice(self._start, self._input.pos())

    def _handle_text(self, char: str) -> None:
        if self._top_is("code"):
            if char != "\n":
                self._description.append(char)
        elif "h2" not in self._stack:
            top = self._stack[-1] if self._stack else None
            if top in _TEXT_ELEMENTS:
                self._append_text_char(char)
            elif top == "pre":
                if char == "\n":
                    self._description.append("\n")
                    for index in range(_PRE_INDENT_SCAN):
                        if not self._input.match_char(" "):
                            break
                        if index < _PRE_INDENT_KEEP:
                            self._description.append(" ")
                else:
                    self._append_text_char(char)

    def _append_text_char(self, char: str) -> None:
        # Every '&' in the manual starts an HTML entity.
        if char == "&":
            self._append_html_escape()
        else:
            self._description.append(char)

    def _append_html_escape(self) -> None:
        self._input.match_char("&")
        self._start = self._input.pos()
        self._consume_until_before(";")
        replacement = _ESCAPES.get(self._current_string())
        if replacement is not None:
            self._description.append(replacement)
        self._input.match_char(";")

    def _read_anchor_attribute(self) -> None:
        stream = self._input
        self._start = stream.pos()
        self._consume_until_after('"')
        if len(self._stack) > 1 and self._stack[-2] == "h2":
            if stream.match_char(".") and self._current_string() == 'NAME=".':
                self._start = stream.pos()
                self._consume_until_before('"')
                self._key = self._current_string().lower()
        elif self._key and "h2" not in self._stack and self._current_string() == 'HREF="':
            self._start = stream.pos()
            self._consume_until_before('"')
            href = self._current_string()
            if href.startswith("#"):
                href = _DOC_PAGE_URL + href
            elif href.startswith("ca65.html"):
                href = _DOC_BASE_URL + href
            self._href = href
            if self._ends_with("`"):
                self._href_is_code = True
                text = self._text[:-1]
                self._description = [text, "[`"]
            else:
                self._description.append("[")

    def _close_element(self, element: str) -> None:
        append = self._description.append
        if element == "h2":
            append("\n---\n")
        elif element == "blockquote":
            append("```\n")
        elif element == "a":
            if "h2" not in self._stack:
                if self._href_is_code:
                    append("`")
                if self._href:
                    append(f"]({self._href})")
                    self._href = ""
        elif element == "p":
            append("\n\n")
        elif element == "ul":
            append("\n")
        elif element == "code":
            if "blockquote" not in self._stack:
                if self._href_is_code:
                    self._href_is_code = False
                else:
                    append("`")
        elif element == "em":
            append("_")

    def _open_element(self, name: str, docs: dict[str, KeywordInfo]) -> None:
        append = self._description.append
        if name == "h2":
            try:
                snippet_type = self._snippet_types[self._key]
            except KeyError:
                raise KeyError(f"no snippet type for keyword {self._key!r}") from None
            docs[self._key] = KeywordInfo(self._text, snippet_type)
            self._key = ""
            self._description = []
        elif name == "blockquote":
            append("```ca65")
        elif name == "code":
            if "blockquote" not in self._stack:
                append("`")
        elif name == "li":
            append("\n- ")
        elif name == "dd":
            append("\n\n")
        elif name == "dt":
            append("\n### ")
        elif name == "em":
            append("_")

    def _consume_until_before(self, terminators: str) -> None:
        while True:
            char = self._input.peek()
            if char is None:
                raise ValueError(
                    f"unexpected end of input while looking for one of {terminators!r}"
                )
            if char in terminators:
                return
            self._input.advance()

    def _consume_until_after(self, terminators: str) -> None:
        while True:
            if self._input.at_end():
                raise ValueError(
                    f"unexpected end of input while looking for one of {terminators!r}"
                )
            if self._input.advance() in terminators:
                return


def parse_ca65_html(
    text: str, snippet_types: Mapping[str, Iterable[str]]
) -> dict[str, KeywordInfo]:
    """Parse the ca65 manual and return documentation per keyword."""
    return Ca65HtmlParser(text, snippet_types).parse()