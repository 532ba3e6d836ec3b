from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .subject import HtmlTreeParser, ParserFactory
from .synth import byte_length

WARMUP_ITERATIONS = 10


@dataclass(frozen=True)
class Scenario:
  """
  One named measurement: how to build the document and how often to parse it.

      generator: called once with `size` to synthesize the document.
      iterations: number of timed parses (warmup parses come on top).
  """

  name: str
  generator: Callable[[int], str]
  size: int
  iterations: int

  def __post_init__(self) -> None:
    if self.iterations < 1:
      raise ValueError(f"scenario {self.name!r}: iterations must be >= 1")

  def build(self) -> str:
    return self.generator(self.size)


@dataclass(frozen=True)
class ResultRecord:
  """Timing outcome of one scenario. Times in milliseconds, sizes in bytes/KB."""

  name: str
  bytes: int
  kb: float
  iterations: int
  total_ms: float
  avg_ms: float
  throughput_kbps: float
  throughput_mbps: float
  ops_per_sec: float

  def as_dict(self) -> Dict[str, Any]:
    return asdict(self)


def _parse_once(parser_factory: ParserFactory, document: str) -> None:
  parser = parser_factory()
  parser.parse_complete(document)


def measure(
  name: str,
  document: str,
  iterations: int,
  parser_factory: ParserFactory = HtmlTreeParser,
  warmup: int = WARMUP_ITERATIONS,
  clock: Callable[[], float] = time.perf_counter,
) -> ResultRecord:
  """
  Time `iterations` complete parses of `document`, each on a fresh parser.

  A fixed number of untimed warmup parses runs first. Errors raised by the
  parser are not caught. ops_per_sec is derived from the average latency
  (1000 / avg_ms), not counted separately.
  """
  if iterations < 1:
    raise ValueError("iterations must be >= 1")
  if not document:
    raise ValueError("document must be non-empty")

  n_bytes = byte_length(document)
  kb = n_bytes / 1024

  for _ in range(warmup):
    _parse_once(parser_factory, document)

  start = clock()
  for _ in range(iterations):
    _parse_once(parser_factory, document)
  end = clock()

  total_ms = (end - start) * 1000.0
  avg_ms = total_ms / iterations
  throughput_kbps = (kb * iterations) / (total_ms / 1000.0) if total_ms > 0 else float("inf")
  ops_per_sec = 1000.0 / avg_ms if avg_ms > 0 else float("inf")

  return ResultRecord(
    name=name,
    bytes=n_bytes,
    kb=kb,
    iterations=iterations,
    total_ms=total_ms,
    avg_ms=avg_ms,
    throughput_kbps=throughput_kbps,
    throughput_mbps=throughput_kbps / 1024,
    ops_per_sec=ops_per_sec,
  )


def run_scenario(
  scenario: Scenario,
  parser_factory: ParserFactory = HtmlTreeParser,
  warmup: int = WARMUP_ITERATIONS,
) -> ResultRecord:
  document = scenario.build()
  return measure(scenario.name, document, scenario.iterations, parser_factory=parser_factory, warmup=warmup)


def run_all(
  scenarios: Iterable[Scenario],
  parser_factory: ParserFactory = HtmlTreeParser,
  on_start: Optional[Callable[[Scenario], None]] = None,
  warmup: int = WARMUP_ITERATIONS,
) -> Tuple[ResultRecord, ...]:
  """Run scenarios one after another, in order. The first failure aborts the run."""
  records: List[ResultRecord] = []
  for scenario in scenarios:
    if on_start is not None:
      on_start(scenario)
    records.append(run_scenario(scenario, parser_factory=parser_factory, warmup=warmup))
  return tuple(records)
