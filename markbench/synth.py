from __future__ import annotations

from typing import List

_FIXED_DOCUMENT = """<!DOCTYPE html>
<html>
<head>
    <title>Small Test Document</title>
    <meta charset="utf-8">
</head>
<body>
    <h1>Hello World</h1>
    <p>This is a <strong>small</strong> test document.</p>
    <ul>
        <li>Item 1</li>
        <li>Item 2</li>
        <li>Item 3</li>
    </ul>
</body>
</html>"""

_LINEAR_HEAD = """<!DOCTYPE html>
<html>
<head>
    <title>Large Test Document</title>
    <meta charset="utf-8">
</head>
<body>"""

_LINEAR_BLOCK = """
    <div class="item-{i}" id="id-{i}">
        <h2>Section {i}</h2>
        <p>This is paragraph {i} with some <strong>bold</strong> and <em>italic</em> text.</p>
        <ul>
            <li>Item 1 in section {i}</li>
            <li>Item 2 in section {i}</li>
            <li>Item 3 in section {i}</li>
        </ul>
    </div>"""

_LINEAR_TAIL = """
</body>
</html>"""

# Compact shell shared by the deep and wide documents.
_COMPACT_HEAD = "<!DOCTYPE html><html><body>"
_COMPACT_TAIL = "</body></html>"


def generate_fixed() -> str:
  """Small hand-written document: heading, emphasized paragraph, three-item list."""
  return _FIXED_DOCUMENT


def generate_linear(count: int = 10_000) -> str:
  """
  Document with `count` sibling section blocks.

  Every block carries its index in its class, id and text so no two blocks
  are identical. Size grows linearly with `count`.
  """
  parts: List[str] = [_LINEAR_HEAD]
  for i in range(count):
    parts.append(_LINEAR_BLOCK.format(i=i))
  parts.append(_LINEAR_TAIL)
  return "".join(parts)


def generate_deep(depth: int = 100) -> str:
  """`depth` nested <div class="level-N"> containers around a single <p> leaf."""
  parts: List[str] = [_COMPACT_HEAD]
  for i in range(depth):
    parts.append(f'<div class="level-{i}">')
  parts.append("<p>Deep content</p>")
  parts.append("</div>" * max(depth, 0))
  parts.append(_COMPACT_TAIL)
  return "".join(parts)


def generate_wide(width: int = 1_000) -> str:
  """`width` sibling <p> leaves directly under <body>."""
  parts: List[str] = [_COMPACT_HEAD]
  for i in range(width):
    parts.append(f'<p id="p-{i}">Paragraph {i}</p>')
  parts.append(_COMPACT_TAIL)
  return "".join(parts)


def byte_length(document: str) -> int:
  """Size of the document once encoded as UTF-8."""
  return len(document.encode("utf-8"))
