"""Tests for comparison helpers."""

import pytest

from plan_advisor.services.catalog import FEATURE_NAMES, generate_catalog
from plan_advisor.services.comparison import build_comparison, select_for_comparison


def test_select_without_selection_takes_first_plans():
    plans = generate_catalog()
    assert [p.id for p in select_for_comparison(plans)] == [1, 2, 3]


def test_select_with_selection_keeps_it_first():
    plans = generate_catalog()
    chosen = select_for_comparison(plans, selected=plans[2], size=3)
    assert [p.id for p in chosen] == [3, 1, 2]


def test_build_comparison_rows_follow_feature_order():
    plans = generate_catalog()[:2]
    comparison = build_comparison(plans)
    assert comparison.feature_names == FEATURE_NAMES
    assert comparison.rows[0] == {"feature": "Hospital Room", "values": ["Private Room", "Semi-Private Room"]}


def test_build_comparison_rejects_mismatched_features():
    plans = generate_catalog()[:2]
    del plans[1].features["Dental Coverage"]
    with pytest.raises(ValueError):
        build_comparison(plans)
