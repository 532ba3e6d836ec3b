from __future__ import annotations

from html.parser import HTMLParser
from typing import Callable, List, Protocol

# Elements that never take a closing tag.
VOID_ELEMENTS = frozenset(
  {
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
  }
)


class ParseSubject(Protocol):
  """
  What the driver needs from a parser under test.

  Instances are single-use: the driver builds a fresh one for every parse
  and calls parse_complete() exactly once with the whole document.
  """

  def parse_complete(self, document: str) -> None: ...


ParserFactory = Callable[[], ParseSubject]


class HtmlTreeParser(HTMLParser):
  """
  Event-driven HTML parser used as the default subject.

  Besides driving the tokenizer to completion it keeps the open-element
  stack, so callers can inspect element counts, the deepest nesting seen,
  and whether every container was closed in order.
  """

  def __init__(self) -> None:
    super().__init__(convert_charrefs=True)
    self.stack: List[str] = []
    self.elements: int = 0
    self.text_nodes: int = 0
    self.max_depth: int = 0
    self.mismatched: int = 0
    self.tag_counts: dict[str, int] = {}

  def parse_complete(self, document: str) -> None:
    self.feed(document)
    self.close()

  @property
  def well_formed(self) -> bool:
    return self.mismatched == 0 and not self.stack

  # -------- HTMLParser callbacks --------
  def handle_starttag(self, tag, attrs):
    self.elements += 1
    self.tag_counts[tag] = self.tag_counts.get(tag, 0) + 1
    if tag in VOID_ELEMENTS:
      return
    self.stack.append(tag)
    if len(self.stack) > self.max_depth:
      self.max_depth = len(self.stack)

  def handle_startendtag(self, tag, attrs):
    self.elements += 1
    self.tag_counts[tag] = self.tag_counts.get(tag, 0) + 1

  def handle_endtag(self, tag):
    if tag in VOID_ELEMENTS:
      return
    if self.stack and self.stack[-1] == tag:
      self.stack.pop()
    else:
      self.mismatched += 1

  def handle_data(self, data):
    if data.strip():
      self.text_nodes += 1
