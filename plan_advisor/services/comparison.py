"""Side-by-side plan comparison helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import Plan, PlanComparison
from .catalog import FEATURE_NAMES
from .providers import canonical_plan_id


def select_for_comparison(plans: List[Plan], selected: Optional[Plan] = None, size: int = 3) -> List[Plan]:
    """Pick the plans to compare, keeping the user's selection in the first column."""

    if size < 1:
        raise ValueError("Comparison size must be at least 1.")
    if selected is None:
        return plans[:size]
    others = [plan for plan in plans if canonical_plan_id(plan.id) != canonical_plan_id(selected.id)]
    return [selected, *others[: size - 1]]


def build_comparison(plans: List[Plan]) -> PlanComparison:
    if not plans:
        return PlanComparison(plans=[], feature_names=list(FEATURE_NAMES))

    expected = set(plans[0].features)
    for plan in plans[1:]:
        if set(plan.features) != expected:
            raise ValueError(
                f"Plan {plan.id} does not share the feature set of plan {plans[0].id}."
            )

    feature_names = [name for name in FEATURE_NAMES if name in expected]
    feature_names += sorted(expected.difference(FEATURE_NAMES))

    rows: List[Dict[str, Any]] = []
    for name in feature_names:
        rows.append({"feature": name, "values": [plan.features[name] for plan in plans]})
    return PlanComparison(plans=list(plans), feature_names=feature_names, rows=rows)
