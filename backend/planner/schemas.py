from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Dict

from .services.room_allocation import LivingFormat
from .services.cost_estimate import SiteObjectKind
from .validators import HouseValidators


class ProjectInfo(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    client: Optional[str] = Field(None, max_length=100)
    date: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    style: Optional[str] = None
    planning_wishes: Optional[str] = Field(None, max_length=2000)
    extra_wishes: Optional[str] = Field(None, max_length=2000)
    files_attached: int = Field(0, ge=0)


class SiteObjectRequest(BaseModel):
    kind: SiteObjectKind
    width: float = Field(0, ge=0)
    depth: float = Field(0, ge=0)
    cars: int = Field(1, ge=1, le=3)
    label: Optional[str] = Field(None, max_length=50)

    @model_validator(mode='after')
    def validate_footprint(self):
        HouseValidators.validate_site_object(self.kind.value, self.width, self.depth)
        return self


# Request Schemas
class HouseRequest(BaseModel):
    house_width: float = Field(..., gt=0)
    house_length: float = Field(..., gt=0)
    floors: int = Field(1, ge=1, le=10)
    format: LivingFormat = LivingFormat.ORDINARY
    has_office: bool = False
    is_kitchen_living_combined: bool = True
    language: Optional[str] = None
    room_labels: Optional[Dict[str, str]] = None
    floor_comments: List[str] = Field(default_factory=list)
    plot_width: Optional[float] = Field(None, gt=0)
    plot_length: Optional[float] = Field(None, gt=0)
    site_objects: List[SiteObjectRequest] = Field(default_factory=list)
    project: Optional[ProjectInfo] = None

    @model_validator(mode='after')
    def validate_house(self):
        HouseValidators.validate_house_dimensions(self.house_width, self.house_length)
        HouseValidators.validate_floors(self.floors)
        HouseValidators.validate_plot(self.plot_width, self.plot_length)
        return self


class FloorRequest(BaseModel):
    floor_area: float = Field(..., gt=0)
    floor_index: int = Field(1, ge=1)
    floor_count: int = Field(1, ge=1, le=10)
    format: LivingFormat = LivingFormat.ORDINARY
    has_office: bool = False
    is_kitchen_living_combined: bool = True
    language: Optional[str] = None
    room_labels: Optional[Dict[str, str]] = None

    @model_validator(mode='after')
    def validate_position(self):
        HouseValidators.validate_floor_position(self.floor_index, self.floor_count)
        return self


# Response Schemas
class RoomEntryResponse(BaseModel):
    name: str
    area: float
    key: str
    elastic: bool


class FloorPlanResponse(BaseModel):
    floor_number: int
    rooms: List[RoomEntryResponse]
    comment: str = ""
    floor_area: float
    total_area: float
    residual: float
    warnings: List[str] = []


class FloorSummaryResponse(BaseModel):
    living_area: float
    overhead_area: float
    service_area: float
    total_area: float
    efficiency: float


class HousePlanResponse(BaseModel):
    format: LivingFormat
    floor_area: float
    total_area: float
    allocated_area: float
    floors: List[FloorPlanResponse]
    summary: List[FloorSummaryResponse]
    warnings: List[str] = []


class RoomLabelsResponse(BaseModel):
    language: str
    labels: Dict[str, str]


class SiteObjectCostResponse(BaseModel):
    kind: str
    name: str
    area: float
    cost: float


class CostEstimateResponse(BaseModel):
    total_area: float
    architecture_price: float
    plot_area_sotka: float
    landscape_price: float
    objects: List[SiteObjectCostResponse]
    objects_price: float
    grand_total: float
