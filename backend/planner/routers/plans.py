# backend/planner/routers/plans.py
# Explication endpoints: the plan is recomputed from the request on every
# call, nothing is stored between calls.

from fastapi import APIRouter
from fastapi.responses import StreamingResponse, PlainTextResponse
from typing import Dict, Any, List, Optional
import logging
import re

from .. import config, schemas
from ..services.house_plan import HouseParameters, build_house_plan
from ..services.room_allocation import FloorAllocationInput, allocate_floor
from ..services.room_labels import merge_room_labels
from ..services.explication import format_explication_text
from ..services.cost_estimate import SiteObject, estimate_cost
from ..services.pdf_generator import generate_explication_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/plans", tags=["plans"])


def resolve_language(language: Optional[str]) -> str:
    return (language or config.DEFAULT_LANGUAGE).lower()


def get_house_params(request: schemas.HouseRequest) -> HouseParameters:
    return HouseParameters(
        house_width=request.house_width,
        house_length=request.house_length,
        floors=request.floors,
        format=request.format,
        has_office=request.has_office,
        is_kitchen_living_combined=request.is_kitchen_living_combined,
        floor_comments=list(request.floor_comments)
    )


def get_site_objects(request: schemas.HouseRequest) -> List[SiteObject]:
    return [SiteObject(**obj.model_dump()) for obj in request.site_objects]


def get_project_data(request: schemas.HouseRequest) -> Dict[str, Any]:
    """Project metadata for documents, footprint included."""
    project_data = request.project.model_dump(exclude_none=True) if request.project else {}
    project_data['house_width'] = request.house_width
    project_data['house_length'] = request.house_length
    project_data['plot_width'] = request.plot_width
    project_data['plot_length'] = request.plot_length
    project_data['site_objects'] = get_site_objects(request)
    return project_data


def build_plan_for_request(request: schemas.HouseRequest):
    labels = merge_room_labels(resolve_language(request.language), request.room_labels)
    return build_house_plan(get_house_params(request), labels)


@router.post("/explication", response_model=schemas.HousePlanResponse)
def compute_explication(request: schemas.HouseRequest):
    """Compute the room explication for every floor of the house."""
    plan = build_plan_for_request(request)
    return plan.to_dict()


@router.post("/floor", response_model=schemas.FloorPlanResponse)
def compute_floor(request: schemas.FloorRequest):
    """Compute the room explication for a single floor."""
    labels = merge_room_labels(resolve_language(request.language), request.room_labels)
    plan = allocate_floor(FloorAllocationInput(
        floor_area=request.floor_area,
        floor_index=request.floor_index,
        floor_count=request.floor_count,
        format=request.format,
        has_office=request.has_office,
        is_kitchen_living_combined=request.is_kitchen_living_combined,
        room_labels=labels
    ))
    return plan.to_dict()


@router.post("/explication/text", response_class=PlainTextResponse)
def export_explication_text(request: schemas.HouseRequest):
    """Plain-text project summary for archiving."""
    plan = build_plan_for_request(request)
    return PlainTextResponse(format_explication_text(plan, get_project_data(request)))


@router.post("/explication/pdf")
def export_explication_pdf(request: schemas.HouseRequest):
    """Generate and download the explication PDF."""
    language = resolve_language(request.language)
    plan = build_plan_for_request(request)
    project_data = get_project_data(request)

    pdf_buffer = generate_explication_pdf(plan, project_data, language)
    filename = re.sub(r'[^A-Za-z0-9_.-]+', '_', project_data.get('name') or '').strip('_') or 'explication'

    logger.info(f"Explication PDF generated: {filename}, {len(plan.floors)} floor(s)")

    return StreamingResponse(
        pdf_buffer,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={filename}.pdf"
        }
    )


@router.post("/estimate", response_model=schemas.CostEstimateResponse)
def compute_estimate(request: schemas.HouseRequest):
    """Design fee estimate for the house, its plot and site objects."""
    estimate = estimate_cost(
        request.house_width * request.house_length * request.floors,
        request.plot_width,
        request.plot_length,
        get_site_objects(request)
    )
    logger.info(f"Cost estimate: {estimate.grand_total:.0f} for {estimate.total_area:.1f} m²")
    return estimate.to_dict()


@router.get("/labels/{language}", response_model=schemas.RoomLabelsResponse)
def get_labels(language: str):
    """Built-in room-name table for a language."""
    language = resolve_language(language)
    return {"language": language, "labels": merge_room_labels(language)}
