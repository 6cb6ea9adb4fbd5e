"""Health insurance plan advisor."""

from .config import Settings, get_settings, load_settings
from .errors import FetchFailure, PlanNotFound, PlanServiceError, SubmissionFailure
from .models import DetailedPlan, Plan, SubmissionReceipt, WaitingPeriods
from .services.plans import InsurancePlanService, build_service

__all__ = [
    "DetailedPlan",
    "FetchFailure",
    "InsurancePlanService",
    "Plan",
    "PlanNotFound",
    "PlanServiceError",
    "Settings",
    "SubmissionFailure",
    "SubmissionReceipt",
    "WaitingPeriods",
    "build_service",
    "get_settings",
    "load_settings",
]
