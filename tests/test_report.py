from __future__ import annotations

from markbench.driver import ResultRecord
from markbench.report import (
  render_characteristics,
  render_report,
  render_table,
  summarize,
)
from markbench.scenarios import Highlight


def _record(name: str, kb: float, avg_ms: float, iterations: int = 10) -> ResultRecord:
  total_ms = avg_ms * iterations
  kbps = kb * iterations / (total_ms / 1000.0)
  return ResultRecord(
    name=name,
    bytes=int(kb * 1024),
    kb=kb,
    iterations=iterations,
    total_ms=total_ms,
    avg_ms=avg_ms,
    throughput_kbps=kbps,
    throughput_mbps=kbps / 1024,
    ops_per_sec=1000.0 / avg_ms,
  )


RECORDS = (
  _record("Small", kb=1.0, avg_ms=0.5),
  _record("Big", kb=2048.0, avg_ms=100.0),
  _record("Deep", kb=4.0, avg_ms=0.25),
)

HIGHLIGHTS = (
  Highlight("Small Document Throughput:", "Small", "throughput"),
  Highlight("Deep Tree Performance:", "Deep", "avg"),
  Highlight("Missing Performance:", "Not Run", "avg"),
)


def test_summarize_finds_peaks():
  s = summarize(RECORDS)
  assert s.peak_throughput_mbps == max(r.throughput_mbps for r in RECORDS)
  assert s.peak_ops_per_sec == 4000.0


def test_summarize_empty_is_zero():
  s = summarize([])
  assert s.peak_throughput_mbps == 0.0
  assert s.peak_ops_per_sec == 0.0


def test_table_layout_is_fixed_width():
  lines = render_table(RECORDS)
  assert len(lines) == 2 + len(RECORDS)
  assert lines[1] == "-" * 80

  header = lines[0].split(" | ")
  assert header[0] == "Test".ljust(35)
  assert header[1:] == ["Size".rjust(10), "Avg (ms)".rjust(10), "MB/sec".rjust(10), "Parses/s".rjust(10)]

  big = lines[3].split(" | ")
  assert big[0] == "Big".ljust(35)
  assert big[1] == "2048.00 KB"
  assert big[2] == "  100.0000"
  assert big[3] == "     20.00"
  assert big[4] == "     10.00"


def test_characteristics_skip_missing_scenarios():
  lines = render_characteristics(RECORDS, HIGHLIGHTS)
  assert len(lines) == 2
  assert lines[0].startswith("Small Document Throughput:     ")
  assert lines[0].endswith(" MB/sec")
  assert lines[1] == "Deep Tree Performance:         0.2500 ms avg"


def test_full_report_sections():
  text = render_report(RECORDS, HIGHLIGHTS)
  assert "Results Summary" in text
  assert "Performance Characteristics" in text
  assert "Peak Parse Rate:               4000.00 parses/sec" in text
  assert "Peak Throughput:" in text
  assert text.rstrip().endswith("=" * 80)
  assert text.index("Results Summary") < text.index("Performance Characteristics") < text.index("Benchmark complete!")
