# bookpress

Building blocks for turning a book written in Markdown into HTML pages, or
for handing it to an external rendering program.

## What is inside

| Module | Purpose |
| --- | --- |
| `bookpress.markup` | Markdown to HTML, with `.md` links rewritten to `.html`, optional curly quotes, and anchor ids |
| `bookpress.headers` | Adds unique anchor links to `<h1>`…`<h6>` headers and turns comma-separated code classes into space-separated ones |
| `bookpress.playground` | Wraps Rust code blocks for an interactive playground and hides "boring" lines |
| `bookpress.toc` | Builds the sidebar table of contents from chapter data |
| `bookpress.navigation` | Finds the previous and next chapter for a page, builds their links, labels theme options |
| `bookpress.theme` | Loads theme files from a directory over a set of defaults |
| `bookpress.strings` | Takes line ranges or anchored sections out of included source files |
| `bookpress.tomlpath` | Reads, inserts and deletes values in nested dicts by dotted keys |
| `bookpress.fsutil` | File helpers for the build directory |
| `bookpress.command` | The render context and a renderer that passes it, as JSON, to an external program |

Install with `pip install .`; the only runtime dependency is `markdown-it-py`.

## Rendering Markdown

```python
from bookpress.markup import render_markdown, id_from_content

render_markdown("[example](example.md)", False)
# '<p><a href="example.html">example</a></p>\n'

render_markdown("'one'", True)
# '<p>‘one’</p>\n'

id_from_content("## Method-call expressions")
# 'method-call-expressions'
```

`render_markdown_with_path(text, curly_quotes, path)` does the same but
resolves relative and fragment-only links against the page at `path`, which
is what a single "print everything" page needs. Links with a scheme such as
`https:` are left alone. Whitespace is removed from fenced code block info
strings, so ```` ```rust, no_run ```` becomes the class `language-rust,no_run`.

`new_markdown_parser()` returns the `MarkdownIt` parser used: CommonMark with
tables and strikethrough enabled. Other helpers: `normalize_id`,
`collapse_whitespace`, `convert_quotes_to_curly`, and `log_backtrace(error)`,
which logs an exception and the chain of exceptions that caused it.

## Post-processing rendered pages

```python
from bookpress.headers import build_header_links

build_header_links("<h1>Foo</h1><h3>Foo</h3>")
# '<h1 id="foo"><a class="header" href="#foo">Foo</a></h1>'
# '<h3 id="foo-1"><a class="header" href="#foo-1">Foo</a></h3>'
```

`bookpress.playground.post_process(rendered, playground, edition)` runs the
full chain: `build_header_links`, `fix_code_blocks`, then
`add_playground_pre`, driven by a `Playground` (`editable`, `copyable`,
`copy_js`, `line_numbers`) and an optional `RustEdition` (`E2015`, `E2018`).
Rust blocks without `fn main` get one wrapped around them, hidden as boring
lines; blocks marked `ignore`, `noplayground` or `noplaypen` are not wrapped
unless also marked `mdbook-runnable`.

## Table of contents and navigation

`RenderToc(no_section_label=False).render(data)` returns the `<ol>` sidebar
for a page. `data` is a dict with `chapters` (a list of dicts of strings with
keys such as `name`, `path`, `section`, `part`, `spacer`, `has_sub_items`),
the current `path`, `fold_enable`, `fold_level` and optionally `section`.

`previous_chapter(data)` and `next_chapter(data)` look up neighbouring
chapters in the same data; `chapter_link(data, chapter)` returns the
`title`, `link` and `path_to_root` for linking to one.
`theme_option("Light", "light")` returns `"Light (default)"`.
Malformed data raises `TocError` or `NavigationError`.

## Themes

`load_theme(theme_dir, defaults=None)` returns a `Theme` copied from
`defaults`, with every file found in `theme_dir` (`index.hbs`, `book.js`,
`css/general.css`, `favicon.png`, …) replacing the matching field. If only
one favicon is overridden, the other is set to `None`.

## Including parts of files

```python
from bookpress.strings import take_lines, take_anchored_lines

source = "Lorem\nipsum\ndolor\nsit\namet"
take_lines(source, 1, 3)             # 'ipsum\ndolor'

tagged = "a\nANCHOR: demo\nb\nc\nANCHOR_END: demo\nd"
take_anchored_lines(tagged, "demo")  # 'b\nc'
```

`take_rustdoc_include_lines` and `take_rustdoc_include_anchored_lines` keep
every line but prefix those outside the selection with `# `, so they stay
hidden in the rendered page yet still compile.

## Nested configuration values

```python
from bookpress import tomlpath

config = {}
tomlpath.insert(config, "output.html.optional", True)
tomlpath.read(config, "output.html.optional")    # True
tomlpath.delete(config, "output.html.optional")  # True
```

## External renderers

`bookpress.command.CmdRenderer(name, cmd)` splits `cmd` shell-style, starts
the program in the destination directory, writes the `RenderContext` to its
standard input as JSON (`RenderContext.to_json()`) and waits for it. A
non-zero exit status raises `RenderError`. Relative program paths are looked
up under the book root first, then under the destination. If the program
cannot be found and `output.<name>.optional` is `true` in the context's
config, a warning is logged instead of an error.

A program on the receiving end can rebuild the context with
`bookpress.command.load_render_context(reader)`.

## What it does not do

- There is no command-line tool and no complete site builder: nothing here
  loads a book from disk, walks its chapters, fills page templates or writes
  a whole HTML site. The pieces above are meant to be combined by your own
  build code.
- No theme files ship with the package: a bare `Theme()` holds empty bytes,
  so pass your own `defaults` to `load_theme`.
- No search index is produced.
- The Markdown parser does not handle footnotes or task lists.