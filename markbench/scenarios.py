from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Tuple

from .driver import Scenario
from .synth import generate_deep, generate_fixed, generate_linear, generate_wide


def _fixed(_size: int) -> str:
  return generate_fixed()


@dataclass(frozen=True)
class Highlight:
  """A scenario singled out in the characteristics section of the report."""

  caption: str
  scenario: str
  metric: Literal["throughput", "avg"]


@dataclass(frozen=True)
class Plan:
  scenarios: Tuple[Scenario, ...]
  highlights: Tuple[Highlight, ...]

  def names(self) -> Tuple[str, ...]:
    return tuple(s.name for s in self.scenarios)

  def subset(self, names: Iterable[str]) -> "Plan":
    """
    Keep only the named scenarios, in plan order.
    Raises ValueError listing any name the plan does not contain.
    """
    wanted = list(names)
    unknown = [n for n in wanted if n not in self.names()]
    if unknown:
      raise ValueError(f"unknown scenario(s): {', '.join(unknown)}")
    keep = set(wanted)
    return Plan(
      scenarios=tuple(s for s in self.scenarios if s.name in keep),
      highlights=self.highlights,
    )


FULL_PLAN = Plan(
  scenarios=(
    Scenario("Small Document (1KB)", _fixed, 0, 1000),
    Scenario("Medium Document (100KB)", generate_linear, 1_000, 500),
    Scenario("Large Document (1MB)", generate_linear, 10_000, 100),
    Scenario("Very Large Document (10MB)", generate_linear, 100_000, 10),
    Scenario("Deep Tree (depth=100)", generate_deep, 100, 500),
    Scenario("Very Deep Tree (depth=500)", generate_deep, 500, 100),
    Scenario("Shallow Tree (width=1000)", generate_wide, 1_000, 500),
    Scenario("Very Shallow Tree (width=10000)", generate_wide, 10_000, 100),
  ),
  highlights=(
    Highlight("Small Document Throughput:", "Small Document (1KB)", "throughput"),
    Highlight("Large Document Throughput:", "Large Document (1MB)", "throughput"),
    Highlight("Deep Tree Performance:", "Deep Tree (depth=100)", "avg"),
    Highlight("Shallow Tree Performance:", "Shallow Tree (width=1000)", "avg"),
  ),
)

# Same shapes at a tenth of the work; for CI and quick local checks.
FAST_PLAN = Plan(
  scenarios=(
    Scenario("Small Document (1KB)", _fixed, 0, 100),
    Scenario("Medium Document (100 blocks)", generate_linear, 100, 50),
    Scenario("Large Document (1000 blocks)", generate_linear, 1_000, 10),
    Scenario("Deep Tree (depth=100)", generate_deep, 100, 50),
    Scenario("Very Deep Tree (depth=500)", generate_deep, 500, 10),
    Scenario("Shallow Tree (width=1000)", generate_wide, 1_000, 50),
    Scenario("Very Shallow Tree (width=10000)", generate_wide, 10_000, 10),
  ),
  highlights=(
    Highlight("Small Document Throughput:", "Small Document (1KB)", "throughput"),
    Highlight("Large Document Throughput:", "Large Document (1000 blocks)", "throughput"),
    Highlight("Deep Tree Performance:", "Deep Tree (depth=100)", "avg"),
    Highlight("Shallow Tree Performance:", "Shallow Tree (width=1000)", "avg"),
  ),
)


def default_plan(fast: bool = False) -> Plan:
  return FAST_PLAN if fast else FULL_PLAN
