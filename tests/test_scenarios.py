from __future__ import annotations

import pytest

from markbench.scenarios import FAST_PLAN, FULL_PLAN, default_plan
from markbench.synth import byte_length


def test_full_plan_order_and_iterations():
  assert FULL_PLAN.names() == (
    "Small Document (1KB)",
    "Medium Document (100KB)",
    "Large Document (1MB)",
    "Very Large Document (10MB)",
    "Deep Tree (depth=100)",
    "Very Deep Tree (depth=500)",
    "Shallow Tree (width=1000)",
    "Very Shallow Tree (width=10000)",
  )
  assert [s.iterations for s in FULL_PLAN.scenarios] == [1000, 500, 100, 10, 500, 100, 500, 100]


@pytest.mark.parametrize("plan", [FULL_PLAN, FAST_PLAN])
def test_highlights_point_at_planned_scenarios(plan):
  assert len(plan.highlights) == 4
  for h in plan.highlights:
    assert h.scenario in plan.names()
  assert len(set(plan.names())) == len(plan.names())


def test_default_plan_switch():
  assert default_plan() is FULL_PLAN
  assert default_plan(fast=True) is FAST_PLAN


def test_subset_keeps_plan_order():
  sub = FAST_PLAN.subset(["Shallow Tree (width=1000)", "Small Document (1KB)"])
  assert sub.names() == ("Small Document (1KB)", "Shallow Tree (width=1000)")
  assert sub.highlights == FAST_PLAN.highlights


def test_subset_rejects_unknown_names():
  with pytest.raises(ValueError, match="Nope"):
    FAST_PLAN.subset(["Nope"])


def test_fast_documents_are_smaller_than_full_ones():
  fast = {s.name: byte_length(s.build()) for s in FAST_PLAN.scenarios if s.size <= 1_000}
  assert fast["Small Document (1KB)"] < 1024
  assert fast["Medium Document (100 blocks)"] < fast["Large Document (1000 blocks)"]
