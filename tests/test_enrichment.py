"""Tests for plan detail enrichment."""

import pytest

from plan_advisor.models import plan_to_dict
from plan_advisor.services.catalog import generate_catalog
from plan_advisor.services.enrichment import (
    EXTRA_BENEFITS,
    STANDARD_EXCLUSIONS,
    USD_TO_INR_RATE,
    build_detailed_plan,
    derive_waiting_periods,
    enrich_currency,
    enrich_plan_record,
)


def _plan(plan_id):
    return next(plan for plan in generate_catalog() if plan.id == plan_id)


def test_enrich_currency_converts_with_fixed_rate():
    plan = enrich_currency(_plan(1))
    assert plan.monthly_premium_inr == 2999 * USD_TO_INR_RATE
    assert plan.coverage_inr == 500_000 * USD_TO_INR_RATE


def test_enrich_currency_keeps_existing_values():
    plan = _plan(2)
    plan.monthly_premium_inr = 123.0
    enrich_currency(plan)
    assert plan.monthly_premium_inr == 123.0
    assert plan.coverage_inr == 300_000 * USD_TO_INR_RATE


@pytest.mark.parametrize(
    "features, expected",
    [
        ({"Pre-existing Conditions": "Covered after 2 years", "Maternity Coverage": "Included"},
         ("2 years", "9 months")),
        ({"Pre-existing Conditions": "Covered after 2.5 years",
          "Maternity Coverage": "Included with sub-limits"},
         ("2.5 years", "Not covered")),
        ({"Pre-existing Conditions": "Not covered", "Maternity Coverage": "Optional Add-on"},
         ("Not covered", "Not covered")),
    ],
)
def test_derive_waiting_periods(features, expected):
    periods = derive_waiting_periods(features)
    assert periods.general == "30 days"
    assert (periods.pre_existing, periods.maternity) == expected


def test_build_detailed_plan_appends_boilerplate():
    plan = _plan(3)
    detailed = build_detailed_plan(plan)
    assert detailed.detailed_benefits == plan.benefits + EXTRA_BENEFITS
    assert detailed.exclusions == STANDARD_EXCLUSIONS
    assert detailed.benefits == plan.benefits
    assert detailed.waiting_periods.pre_existing == "4 years"


def test_enrich_plan_record_accepts_already_enriched_mapping():
    record = plan_to_dict(build_detailed_plan(_plan(1)))
    assert record["monthlyPremiumINR"] == 2999 * USD_TO_INR_RATE

    again = enrich_plan_record(record, rate=1.0)
    assert again.monthly_premium_inr == 2999 * USD_TO_INR_RATE
    assert again.coverage_inr == record["coverageINR"]


def test_enrich_plan_record_rejects_incomplete_mapping():
    with pytest.raises(ValueError):
        enrich_plan_record({"id": 1, "name": "Partial"})


def test_enrich_plan_record_caches_inr_on_plan_instance():
    plan = _plan(5)
    enrich_plan_record(plan)
    assert plan.monthly_premium_inr == 1799 * USD_TO_INR_RATE

    again = enrich_plan_record(plan, rate=1.0)
    assert again.coverage_inr == 250_000 * USD_TO_INR_RATE


def test_enrich_plan_record_leaves_mapping_untouched():
    record = plan_to_dict(_plan(2))
    enrich_plan_record(record)
    assert "monthlyPremiumINR" not in record


def test_plan_record_with_text_premium_is_rejected():
    record = plan_to_dict(_plan(1))
    record["monthlyPremium"] = "2999"
    with pytest.raises(ValueError):
        enrich_plan_record(record)
