"""HTTP routes for browsing, comparing and selecting insurance plans."""

from functools import lru_cache
from typing import Any, Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import get_settings
from .errors import FetchFailure, PlanNotFound, SubmissionFailure
from .models import comparison_to_dict, plan_to_dict, receipt_to_dict
from .services.plans import InsurancePlanService, build_service


app = FastAPI(title="Health Insurance Plan Advisor", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


class ComparisonPayload(BaseModel):
    selected_plan_id: Optional[Any] = Field(default=None, alias="selectedPlanId")
    size: int = Field(default=3, ge=1)


class SelectionPayload(BaseModel):
    user_data: Dict[str, Any] = Field(default_factory=dict, alias="userData")
    selected_plan: Dict[str, Any] = Field(default_factory=dict, alias="selectedPlan")


@lru_cache(maxsize=1)
def get_service() -> InsurancePlanService:
    return build_service(get_settings())


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "backend": get_settings().backend}


@app.post("/plans")
async def list_plans(
    preferences: Optional[Dict[str, Any]] = None,
    service: InsurancePlanService = Depends(get_service),
) -> List[Dict[str, Any]]:
    try:
        plans = await service.fetch_plans(preferences or {})
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
    return [plan_to_dict(plan) for plan in plans]


@app.get("/plans/{plan_id}")
async def plan_details(
    plan_id: str,
    provider: Optional[str] = None,
    service: InsurancePlanService = Depends(get_service),
) -> Dict[str, Any]:
    try:
        plan = await service.fetch_plan_details(plan_id, provider)
    except PlanNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
    return plan_to_dict(plan)


@app.get("/providers")
async def providers(service: InsurancePlanService = Depends(get_service)) -> List[Dict[str, str]]:
    try:
        infos = await service.list_providers()
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
    return [{"id": info.id, "name": info.name, "logo": info.logo} for info in infos]


@app.post("/comparison")
async def compare(
    payload: ComparisonPayload,
    service: InsurancePlanService = Depends(get_service),
) -> Dict[str, Any]:
    try:
        comparison = await service.compare_plans(payload.selected_plan_id, payload.size)
    except PlanNotFound as exc:
        raise HTTPException(status_code=404, detail=exc.message) from exc
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
    return comparison_to_dict(comparison)


@app.post("/selections")
async def submit_selection(
    payload: SelectionPayload,
    service: InsurancePlanService = Depends(get_service),
) -> Dict[str, Any]:
    try:
        receipt = await service.submit_selection(payload.user_data, payload.selected_plan)
    except SubmissionFailure as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
    return receipt_to_dict(receipt)
