# ca65docs

`ca65docs` reads the HTML manual of the ca65 6502 assembler. It turns the
section for every control command (`.byte`, `.macro`, `.if`, ...) into a
small Markdown document. The result is written as one JSON file. An editor
extension or language server can load that file to show hover help and to
choose a snippet type for each keyword.

## Installation

```
pip install .
```

## Command line

```
ca65docs HTML SNIPPETS OUTPUT
```

The three arguments are:

- `HTML`: the path of the ca65 HTML manual.
- `SNIPPETS`: a JSON file that maps snippet types to lists of keywords.
- `OUTPUT`: the path of the JSON file to write.

Run `ca65docs --help` to see the usage text.

On success the command prints `Successfully wrote JSON to OUTPUT` and exits
with status 0. If any of these steps fails, it prints a red `ERROR` line to
standard error and exits with status 1:

- the manual or the snippet file cannot be read,
- the snippet file is not valid JSON,
- the manual ends in the middle of a tag,
- a documented keyword has no snippet type,
- the output cannot be written.

The snippet type file looks like this:

```json
{
  "statement": ["byte", "word", "res"],
  "block": ["macro", "proc", "scope"]
}
```

Every keyword documented in the manual must appear in one of the lists. If a
keyword is listed under several types, the type that comes last in the file
is used.

## Output

The written JSON is indented by two spaces and has two tables:

- `keys_to_doc` maps each keyword to an object that holds `documentation`
  (Markdown text) and `snippet_type`. Keywords are lower case and have no
  leading dot.
- `keys_with_shared_doc` maps short aliases to the keyword whose
  documentation they share. For example, `mac` maps to `macro`, `byt` to
  `byte` and `endrep` to `endrepeat`.

## Library use

```python
from ca65docs.cli import build_documentation, load_snippet_types, write_documentation
from ca65docs.parser import parse_ca65_html

snippet_types = load_snippet_types("ca65-keyword-snippets.json")
with open("ca65.html", encoding="utf-8") as f:
    html = f.read()

keywords = parse_ca65_html(html, snippet_types)
print(keywords["byte"].documentation)
print(keywords["byte"].to_dict())

write_documentation(build_documentation(html, snippet_types), "ca65-docs.json")
```

`parse_ca65_html` returns a dictionary of `KeywordInfo` objects. It is a
shortcut for `Ca65HtmlParser(html, snippet_types).parse()`. It raises
`ValueError` on truncated markup and `KeyError` for a keyword that has no
snippet type. `invert_snippet_types` turns the snippet type mapping into a
dictionary from keyword to type.

## How the manual is converted

The conversion follows the layout of the ca65 manual:

- An `<h2>` heading with a named anchor such as `NAME=".byte"` starts a
  keyword. Its section is recorded when the next `<h2>` begins.
- Paragraphs, lists, definition terms, emphasis and inline code become their
  Markdown counterparts.
- `<blockquote>` code blocks become fenced `ca65` blocks, with their
  indentation reduced.
- Links inside a section are kept as Markdown links. Relative links are made
  absolute against the online ca65 manual.
- The entities `&gt;`, `&lt;` and `&nbsp;` are decoded. Other entities are
  dropped.

## What it does not do

The package does not fetch the ca65 manual, and it does not ship a snippet
type file. Both must be supplied by the user. The parser is built for the
structure of the ca65 manual and is not a general HTML to Markdown converter.

## Running the tests

```
pip install .[test]
pytest
```