# backend/planner/services/house_plan.py
# Build the whole-house plan: one allocation per floor, same footprint on
# every floor. The plan is always rebuilt from scratch.

from typing import Dict, Any, List, Optional, Mapping
from dataclasses import dataclass, field
import math
import logging

from .room_allocation import (
    FloorAllocationInput,
    FloorPlan,
    LivingFormat,
    allocate_floor,
    get_floor_summary
)
from .room_labels import require_room_labels

logger = logging.getLogger(__name__)


@dataclass
class HouseParameters:
    """House inputs that drive the explication."""
    house_width: float
    house_length: float
    floors: int = 1
    format: LivingFormat = LivingFormat.ORDINARY
    has_office: bool = False
    is_kitchen_living_combined: bool = True
    floor_comments: List[str] = field(default_factory=list)

    @property
    def floor_area(self) -> float:
        return self.house_width * self.house_length

    @property
    def total_area(self) -> float:
        return self.floor_area * self.floors


@dataclass
class HousePlan:
    floors: List[FloorPlan]
    floor_area: float
    format: LivingFormat = LivingFormat.ORDINARY

    @property
    def total_area(self) -> float:
        return self.floor_area * len(self.floors)

    @property
    def allocated_area(self) -> float:
        return math.fsum(floor.total_area for floor in self.floors)

    @property
    def warnings(self) -> List[str]:
        return [message for floor in self.floors for message in floor.warnings]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'format': LivingFormat(self.format).value,
            'floor_area': round(self.floor_area, 2),
            'total_area': round(self.total_area, 2),
            'allocated_area': round(self.allocated_area, 2),
            'floors': [floor.to_dict() for floor in self.floors],
            'summary': [get_floor_summary(floor) for floor in self.floors],
            'warnings': self.warnings
        }


def build_house_plan(params: HouseParameters, room_labels: Mapping[str, str]) -> HousePlan:
    """
    Allocate every floor of the house.

    Args:
        params: Footprint, floor count, format and ground-floor options
        room_labels: Resolved room-name table (see room_labels.get_room_labels)

    Returns:
        HousePlan with floors ordered by floor number.
    """
    labels = require_room_labels(room_labels)
    floor_area = params.floor_area
    floor_count = max(1, int(params.floors))

    floors = []
    for floor_index in range(1, floor_count + 1):
        plan = allocate_floor(FloorAllocationInput(
            floor_area=floor_area,
            floor_index=floor_index,
            floor_count=floor_count,
            format=LivingFormat(params.format),
            has_office=params.has_office,
            is_kitchen_living_combined=params.is_kitchen_living_combined,
            room_labels=labels
        ))
        plan.comment = _floor_comment(params.floor_comments, floor_index)
        floors.append(plan)

    house_plan = HousePlan(floors=floors, floor_area=floor_area, format=LivingFormat(params.format))
    logger.info(
        f"Built plan: {params.house_width}m x {params.house_length}m, "
        f"{floor_count} floor(s), {LivingFormat(params.format).value}, "
        f"{sum(len(f.rooms) for f in floors)} rooms"
    )
    return house_plan


def _floor_comment(comments: Optional[List[str]], floor_index: int) -> str:
    if not comments or floor_index > len(comments):
        return ""
    return comments[floor_index - 1] or ""
