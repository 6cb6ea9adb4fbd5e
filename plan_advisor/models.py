"""Core data models for the insurance plan advisor."""

from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any, Mapping


Preferences = Dict[str, Any]
UserData = Dict[str, Any]


@dataclass
class Plan:
    id: int
    name: str
    provider: str
    monthly_premium: float
    coverage: float
    benefits: List[str]
    features: Dict[str, str]
    rating: float
    api_source: str
    monthly_premium_inr: Optional[float] = None
    coverage_inr: Optional[float] = None


@dataclass
class WaitingPeriods:
    general: str
    pre_existing: str
    maternity: str


@dataclass
class DetailedPlan(Plan):
    detailed_benefits: List[str] = field(default_factory=list)
    waiting_periods: Optional[WaitingPeriods] = None
    exclusions: List[str] = field(default_factory=list)


@dataclass
class SubmissionReceipt:
    reference_id: str
    message: str
    next_steps: List[str]
    success: bool = True


@dataclass
class ProviderInfo:
    id: str
    name: str
    logo: str


@dataclass
class PlanComparison:
    plans: List[Plan]
    feature_names: List[str]
    rows: List[Dict[str, Any]] = field(default_factory=list)


_PLAN_KEYS = {
    "id": "id",
    "name": "name",
    "provider": "provider",
    "monthly_premium": "monthlyPremium",
    "coverage": "coverage",
    "benefits": "benefits",
    "features": "features",
    "rating": "rating",
    "api_source": "apiSource",
    "monthly_premium_inr": "monthlyPremiumINR",
    "coverage_inr": "coverageINR",
}


_NUMERIC_FIELDS = ("monthly_premium", "coverage", "rating", "monthly_premium_inr", "coverage_inr")


def plan_to_dict(plan: Plan) -> Dict[str, Any]:
    """Serialize a plan (or detailed plan) with the camelCase keys clients expect."""

    raw = asdict(plan)
    data: Dict[str, Any] = {}
    for attr, key in _PLAN_KEYS.items():
        value = raw[attr]
        if value is None and attr in ("monthly_premium_inr", "coverage_inr"):
            continue
        data[key] = value

    if isinstance(plan, DetailedPlan):
        data["detailedBenefits"] = list(plan.detailed_benefits)
        if plan.waiting_periods is not None:
            data["waitingPeriods"] = {
                "general": plan.waiting_periods.general,
                "preExisting": plan.waiting_periods.pre_existing,
                "maternity": plan.waiting_periods.maternity,
            }
        data["exclusions"] = list(plan.exclusions)
    return data


def plan_from_dict(data: Mapping[str, Any]) -> Plan:
    """Build a Plan from a plan-like mapping in either camelCase or snake_case."""

    values: Dict[str, Any] = {}
    for attr, key in _PLAN_KEYS.items():
        if key in data:
            values[attr] = data[key]
        elif attr in data:
            values[attr] = data[attr]

    missing = [attr for attr in _PLAN_KEYS if attr not in values and not attr.endswith("_inr")]
    if missing:
        raise ValueError(f"Plan record is missing fields: {', '.join(missing)}")

    for attr in _NUMERIC_FIELDS:
        value = values.get(attr)
        if value is None and attr.endswith("_inr"):
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Plan field {_PLAN_KEYS[attr]} must be a number, got {value!r}")

    values["benefits"] = list(values["benefits"] or [])
    values["features"] = dict(values["features"] or {})
    return Plan(**values)


def receipt_to_dict(receipt: SubmissionReceipt) -> Dict[str, Any]:
    return {
        "success": receipt.success,
        "referenceId": receipt.reference_id,
        "message": receipt.message,
        "nextSteps": list(receipt.next_steps),
    }


def comparison_to_dict(comparison: PlanComparison) -> Dict[str, Any]:
    return {
        "plans": [plan_to_dict(plan) for plan in comparison.plans],
        "featureNames": list(comparison.feature_names),
        "rows": [dict(row) for row in comparison.rows],
    }
