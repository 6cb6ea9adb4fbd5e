"""Derive the detail-view fields that the base catalog does not carry."""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, Mapping, Union

from ..models import DetailedPlan, Plan, WaitingPeriods, plan_from_dict


USD_TO_INR_RATE = 83.0
PRE_EXISTING_PREFIX = "Covered after "

EXTRA_BENEFITS = [
    "Access to wellness programs",
    "Cashless treatment at network hospitals",
    "Tax benefits under Section 80D",
]

STANDARD_EXCLUSIONS = [
    "Cosmetic treatments",
    "Self-inflicted injuries",
    "Experimental treatments",
    "Non-allopathic treatments (unless specified)",
]


def convert_to_inr(amount: float, rate: float = USD_TO_INR_RATE) -> float:
    return amount * rate


def enrich_currency(plan: Plan, rate: float = USD_TO_INR_RATE) -> Plan:
    """Fill in INR amounts on ``plan`` in place, leaving existing values alone."""

    if not plan.monthly_premium_inr:
        plan.monthly_premium_inr = convert_to_inr(plan.monthly_premium, rate)
    if not plan.coverage_inr:
        plan.coverage_inr = convert_to_inr(plan.coverage, rate)
    return plan


def derive_waiting_periods(features: Mapping[str, str]) -> WaitingPeriods:
    pre_existing = features.get("Pre-existing Conditions", "")
    maternity = "9 months" if features.get("Maternity Coverage") == "Included" else "Not covered"
    return WaitingPeriods(
        general="30 days",
        pre_existing=pre_existing.replace(PRE_EXISTING_PREFIX, ""),
        maternity=maternity,
    )


def build_detailed_plan(plan: Plan, rate: float = USD_TO_INR_RATE) -> DetailedPlan:
    """Return the detail view of ``plan``; INR amounts are cached onto ``plan`` itself."""

    enrich_currency(plan, rate)
    base: Dict[str, Any] = {f.name: getattr(plan, f.name) for f in fields(Plan)}
    base["benefits"] = list(plan.benefits)
    base["features"] = dict(plan.features)
    return DetailedPlan(
        **base,
        detailed_benefits=[*plan.benefits, *EXTRA_BENEFITS],
        waiting_periods=derive_waiting_periods(plan.features),
        exclusions=list(STANDARD_EXCLUSIONS),
    )


def enrich_plan_record(
    record: Union[Plan, Mapping[str, Any]], rate: float = USD_TO_INR_RATE
) -> DetailedPlan:
    """Enrich a plan the caller already holds, without a catalog lookup.

    A :class:`Plan` passed in is updated in place: its INR amounts are filled
    in and stay on the record, so a later call reuses them. Mappings are
    copied into a new Plan first and are left untouched.
    """

    plan = record if isinstance(record, Plan) else plan_from_dict(record)
    return build_detailed_plan(plan, rate)
