from __future__ import annotations

import json
import os
import sys

# Ensure project root is importable when running as a script
ROOT = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
if ROOT not in sys.path:
  sys.path.insert(0, ROOT)

from markbench.subject import HtmlTreeParser
from markbench.synth import byte_length, generate_deep, generate_fixed, generate_linear, generate_wide


def describe(document: str) -> dict:
  p = HtmlTreeParser()
  p.parse_complete(document)
  return {
    "bytes": byte_length(document),
    "elements": p.elements,
    "max_depth": p.max_depth,
    "well_formed": p.well_formed,
  }


def main() -> None:
  out = {
    "fixed": describe(generate_fixed()),
    "linear_10": describe(generate_linear(10)),
    "deep_50": describe(generate_deep(50)),
    "wide_50": describe(generate_wide(50)),
  }
  print(json.dumps(out, indent=2))


if __name__ == "__main__":
  main()
