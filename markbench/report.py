from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from .driver import ResultRecord
from .scenarios import Highlight

RULE_WIDTH = 80
NAME_WIDTH = 35
COL_WIDTH = 10
CAPTION_WIDTH = 31


@dataclass(frozen=True)
class Summary:
  peak_throughput_mbps: float
  peak_ops_per_sec: float


def summarize(records: Iterable[ResultRecord]) -> Summary:
  """Peak throughput and peak parse rate over all records (zeros when empty)."""
  peak_mbps = 0.0
  peak_ops = 0.0
  for r in records:
    if r.throughput_mbps > peak_mbps:
      peak_mbps = r.throughput_mbps
    if r.ops_per_sec > peak_ops:
      peak_ops = r.ops_per_sec
  return Summary(peak_throughput_mbps=peak_mbps, peak_ops_per_sec=peak_ops)


def banner(title: str) -> List[str]:
  rule = "=" * RULE_WIDTH
  return [rule, title, rule]


def _row(cells: Sequence[str]) -> str:
  name, *rest = cells
  return " | ".join([name.ljust(NAME_WIDTH)] + [c.rjust(COL_WIDTH) for c in rest])


def render_table(records: Iterable[ResultRecord]) -> List[str]:
  lines = [
    _row(["Test", "Size", "Avg (ms)", "MB/sec", "Parses/s"]),
    "-" * RULE_WIDTH,
  ]
  for r in records:
    lines.append(
      _row(
        [
          r.name,
          f"{r.kb:.2f} KB",
          f"{r.avg_ms:.4f}",
          f"{r.throughput_mbps:.2f}",
          f"{r.ops_per_sec:.2f}",
        ]
      )
    )
  return lines


def render_characteristics(records: Iterable[ResultRecord], highlights: Iterable[Highlight]) -> List[str]:
  """
  One line per highlighted scenario. Throughput highlights print MB/sec,
  latency highlights print the average parse time. Highlights whose
  scenario did not run are left out.
  """
  by_name: Dict[str, ResultRecord] = {r.name: r for r in records}
  lines: List[str] = []
  for h in highlights:
    r = by_name.get(h.scenario)
    if r is None:
      continue
    if h.metric == "throughput":
      value = f"{r.throughput_mbps:.2f} MB/sec"
    else:
      value = f"{r.avg_ms:.4f} ms avg"
    lines.append(f"{h.caption.ljust(CAPTION_WIDTH)}{value}")
  return lines


def render_report(records: Sequence[ResultRecord], highlights: Iterable[Highlight]) -> str:
  summary = summarize(records)
  lines: List[str] = []
  lines += banner("Results Summary")
  lines.append("")
  lines += render_table(records)
  lines.append("")
  lines += banner("Performance Characteristics")
  lines.append("")
  lines += render_characteristics(records, highlights)
  lines.append("")
  lines.append(f"{'Peak Throughput:'.ljust(CAPTION_WIDTH)}{summary.peak_throughput_mbps:.2f} MB/sec")
  lines.append(f"{'Peak Parse Rate:'.ljust(CAPTION_WIDTH)}{summary.peak_ops_per_sec:.2f} parses/sec")
  lines.append("")
  lines += banner("Benchmark complete!")
  return "\n".join(lines)
