# backend/planner/services/room_allocation.py
# Partition one floor of the house into labelled rooms
# Overheads (walls, halls, stairs) are charged first, the living program
# absorbs what is left and a balancing pass reconciles the total.
#
# Floor programs: ground (entry, utility, kitchen/living, optional bedrooms),
#                 upper (master suite + bedrooms + wet rooms),
#                 other (media/play attic)

from typing import Dict, Any, List, Optional, Mapping
from dataclasses import dataclass, field
from enum import Enum
import math
import logging

from .room_labels import require_room_labels

logger = logging.getLogger(__name__)

# =============================================================================
# OVERHEAD CONSTANTS
# =============================================================================

CONSTRUCTION_RATIO = 0.15            # walls and partitions, every floor
HALLWAY_RATIO_ORDINARY = 0.15        # circulation share, ordinary format
HALLWAY_RATIO_SIGNATURE = 0.20       # circulation share, signature format
STAIR_AREA = 7.0                     # m² - charged on every floor of a multi-storey house

# =============================================================================
# ROOM SIZE CONSTANTS (m²)
# =============================================================================

MIN_BEDROOM_AREA = 16.0
GROUND_ENSUITE_WC_AREA = 4.5         # signature bedroom WC, ground floor
UPPER_ENSUITE_BATH_AREA = 5.0        # signature bedroom bathroom, upper floor
SIGNATURE_UNIT_EXTRA = 5.0           # bedroom-unit sizing on every floor, even where the ground WC is 4.5

ENTRY_HALL_MIN = 8.0
ENTRY_HALL_RATIO = 0.12
GUEST_WC_AREA = 4.5
TECH_ROOM_MIN = 7.0
TECH_ROOM_RATIO = 0.10

GROUND_MASTER_MIN = 28.0
GROUND_MASTER_RATIO = 0.25
GROUND_MASTER_BEDROOM_SHARE = 0.58
GROUND_MASTER_BATH_SHARE = 0.42
MAX_GROUND_EXTRA_BEDROOMS = 4

UPPER_MASTER_BASE_ORDINARY = 30.0
UPPER_MASTER_BASE_SIGNATURE = 32.0
UPPER_MASTER_BEDROOM_SHARE = 0.52
UPPER_MASTER_WARDROBE_SHARE = 0.23
UPPER_MASTER_BATH_SHARE = 0.25
MAX_UPPER_EXTRA_BEDROOMS = 3

OFFICE_AREA_ORDINARY = 16.0
OFFICE_AREA_SIGNATURE = 18.0
OFFICE_ENSUITE_AREA = 4.5

KITCHEN_LIVING_MIN = 30.0
KITCHEN_MIN = 16.0
KITCHEN_SHARE = 0.4
LIVING_MIN = 24.0
LIVING_SHARE = 0.6

UPPER_BATHROOM_AREA = 6.5            # ordinary format only
LAUNDRY_AREA_ORDINARY = 6.0
LAUNDRY_AREA_SIGNATURE = 7.0

MEDIA_SHARE = 0.5
PLAY_SHARE = 0.3
ATTIC_WC_AREA = 5.5

# Balancing pass
RECONCILIATION_THRESHOLD = 0.1       # m² - smaller gaps are left alone
AREA_TOLERANCE = 0.11                # m² - acceptable residual after balancing


# =============================================================================
# ENUMS
# =============================================================================

class LivingFormat(str, Enum):
    ORDINARY = "ordinary"
    SIGNATURE = "signature"


class FloorRole(str, Enum):
    """Room program of a floor, chosen from its position in the house."""
    GROUND = "ground"
    UPPER = "upper"
    OTHER = "other"

    @classmethod
    def for_floor(cls, floor_index: int, floor_count: int) -> "FloorRole":
        if floor_index <= 1:
            return cls.GROUND
        if floor_index == 2:
            return cls.UPPER
        return cls.OTHER


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass
class RoomEntry:
    """One line of the explication."""
    name: str
    area: float
    key: str = ""
    elastic: bool = False  # may absorb balancing slack

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'area': self.area,
            'key': self.key,
            'elastic': self.elastic
        }


@dataclass
class FloorPlan:
    floor_number: int
    rooms: List[RoomEntry] = field(default_factory=list)
    comment: str = ""
    floor_area: float = 0.0
    warnings: List[str] = field(default_factory=list)

    @property
    def total_area(self) -> float:
        return math.fsum(room.area for room in self.rooms)

    @property
    def residual(self) -> float:
        """Floor area not covered by any room (negative when over-allocated)."""
        return self.floor_area - self.total_area

    def to_dict(self) -> Dict[str, Any]:
        return {
            'floor_number': self.floor_number,
            'rooms': [room.to_dict() for room in self.rooms],
            'comment': self.comment,
            'floor_area': round(self.floor_area, 2),
            'total_area': round(self.total_area, 2),
            'residual': round(self.residual, 3),
            'warnings': list(self.warnings)
        }


@dataclass
class FloorAllocationInput:
    floor_area: float
    floor_index: int
    floor_count: int
    format: LivingFormat = LivingFormat.ORDINARY
    has_office: bool = False
    is_kitchen_living_combined: bool = True
    room_labels: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_signature(self) -> bool:
        return LivingFormat(self.format) == LivingFormat.SIGNATURE

    @property
    def role(self) -> FloorRole:
        return FloorRole.for_floor(self.floor_index, self.floor_count)


class _RoomList:
    """Ordered room collector that drops non-positive areas."""

    def __init__(self, labels: Mapping[str, str]):
        self.labels = labels
        self.rooms: List[RoomEntry] = []

    def add(self, key: str, area: float, elastic: bool = False,
            name: Optional[str] = None, number: Optional[int] = None) -> float:
        if area <= 0:
            logger.debug(f"Skipping '{key}' with non-positive area {area:.2f}")
            return 0.0
        if name is None:
            name = self.labels[key]
        if number is not None:
            name = f"{name} №{number}"
        self.rooms.append(RoomEntry(name=name, area=area, key=key, elastic=elastic))
        return area


# =============================================================================
# MAIN ALLOCATION FUNCTION
# =============================================================================

def allocate_floor(request: FloorAllocationInput) -> FloorPlan:
    """
    Partition one floor into an ordered list of rooms.

    The areas of the returned rooms sum to ``request.floor_area`` within
    AREA_TOLERANCE whenever the floor has at least one elastic room.

    Args:
        request: Floor geometry, position, format, ground-floor flags and
            the room-label table used for every emitted name.

    Returns:
        FloorPlan with rooms in explication order: the floor program first,
        then hallway, stairs and construction overheads.
    """
    labels = require_room_labels(request.room_labels)
    floor_area = request.floor_area
    hallway_ratio = HALLWAY_RATIO_SIGNATURE if request.is_signature else HALLWAY_RATIO_ORDINARY

    construction = floor_area * CONSTRUCTION_RATIO
    hallway = floor_area * hallway_ratio
    stair = STAIR_AREA if request.floor_count > 1 else 0.0
    available = floor_area - construction - hallway - stair

    rooms = _RoomList(labels)
    role = request.role
    FLOOR_PROGRAMS[role](rooms, request, available)

    rooms.add('halls', hallway)
    if stair > 0:
        rooms.add('stairs', stair)
    rooms.add('construction', construction)

    plan = FloorPlan(
        floor_number=request.floor_index,
        rooms=rooms.rooms,
        floor_area=floor_area
    )
    reconcile_floor(plan)

    logger.debug(
        f"Floor {plan.floor_number} ({role.value}): {len(plan.rooms)} rooms, "
        f"{plan.total_area:.2f}/{floor_area:.2f} m²"
    )
    return plan


# =============================================================================
# FLOOR PROGRAMS
# =============================================================================

def _allocate_ground(rooms: _RoomList, request: FloorAllocationInput, available: float) -> None:
    signature = request.is_signature
    floor_area = request.floor_area

    rooms.add('hallway', max(ENTRY_HALL_MIN, available * ENTRY_HALL_RATIO))
    rooms.add('guestWC', GUEST_WC_AREA)
    rooms.add('tech', max(TECH_ROOM_MIN, available * TECH_ROOM_RATIO))
    # Living zone is charged the minimum utility sizes, not the scaled ones
    budget = available - (ENTRY_HALL_MIN + GUEST_WC_AREA + TECH_ROOM_MIN)

    # Single-storey houses keep the bedrooms on the ground floor
    if request.floor_count == 1:
        master_base = max(GROUND_MASTER_MIN, floor_area * GROUND_MASTER_RATIO)
        rooms.add('master', max(MIN_BEDROOM_AREA, master_base * GROUND_MASTER_BEDROOM_SHARE), elastic=True)
        rooms.add(
            'masterBath',
            master_base * GROUND_MASTER_BATH_SHARE,
            name=f"{rooms.labels['bathroom']}/{rooms.labels['wardrobe']} {rooms.labels['masterTag']}"
        )
        budget -= master_base

        unit = bedroom_unit_area(signature)
        count = min(max(0, math.floor(budget / unit)), MAX_GROUND_EXTRA_BEDROOMS)
        for number in range(2, count + 2):
            rooms.add('kids', MIN_BEDROOM_AREA, elastic=True, number=number)
            if signature:
                rooms.add('wc', GROUND_ENSUITE_WC_AREA, number=number)
            budget -= unit

    # Office is carved out even when the budget is already spent
    if request.has_office:
        budget -= rooms.add('office', OFFICE_AREA_SIGNATURE if signature else OFFICE_AREA_ORDINARY)
        if signature:
            budget -= rooms.add('ensuite', OFFICE_ENSUITE_AREA)

    if request.is_kitchen_living_combined:
        rooms.add('kitchenLiving', max(KITCHEN_LIVING_MIN, budget), elastic=True)
    else:
        rooms.add('kitchen', max(KITCHEN_MIN, budget * KITCHEN_SHARE))
        rooms.add('living', max(LIVING_MIN, budget * LIVING_SHARE), elastic=True)


def _allocate_upper(rooms: _RoomList, request: FloorAllocationInput, available: float) -> None:
    signature = request.is_signature
    labels = rooms.labels
    master_base = UPPER_MASTER_BASE_SIGNATURE if signature else UPPER_MASTER_BASE_ORDINARY

    rooms.add('masterSuite', max(MIN_BEDROOM_AREA, master_base * UPPER_MASTER_BEDROOM_SHARE), elastic=True)
    rooms.add('wardrobe', master_base * UPPER_MASTER_WARDROBE_SHARE,
              name=f"{labels['wardrobe']} {labels['masterTag']}")
    rooms.add('bathroom', master_base * UPPER_MASTER_BATH_SHARE,
              name=f"{labels['bathroom']} {labels['masterTag']}")
    budget = available - master_base

    unit = bedroom_unit_area(signature)
    rooms.add('kids', MIN_BEDROOM_AREA, elastic=True)
    if signature:
        rooms.add('bathroom', UPPER_ENSUITE_BATH_AREA, number=1)
    budget -= unit

    count = min(max(0, math.floor(budget / unit)), MAX_UPPER_EXTRA_BEDROOMS)
    for number in range(2, count + 2):
        rooms.add('kids', MIN_BEDROOM_AREA, elastic=True, number=number)
        if signature:
            rooms.add('bathroom', UPPER_ENSUITE_BATH_AREA, number=number)

    if signature:
        rooms.add('laundry', LAUNDRY_AREA_SIGNATURE)
    else:
        rooms.add('bathroom', UPPER_BATHROOM_AREA)
        rooms.add('laundry', LAUNDRY_AREA_ORDINARY)


def _allocate_other(rooms: _RoomList, request: FloorAllocationInput, available: float) -> None:
    # The remaining 20% is left to the balancing pass
    rooms.add('media', available * MEDIA_SHARE, elastic=True)
    rooms.add('play', available * PLAY_SHARE, elastic=True)
    rooms.add('guestWC', ATTIC_WC_AREA)


FLOOR_PROGRAMS = {
    FloorRole.GROUND: _allocate_ground,
    FloorRole.UPPER: _allocate_upper,
    FloorRole.OTHER: _allocate_other,
}


def bedroom_unit_area(signature: bool) -> float:
    """Area consumed by one additional bedroom, including its bathroom in signature format."""
    return MIN_BEDROOM_AREA + (SIGNATURE_UNIT_EXTRA if signature else 0.0)


# =============================================================================
# BALANCING
# =============================================================================

def reconcile_floor(plan: FloorPlan) -> FloorPlan:
    """
    Spread the gap between floor area and room total over the elastic rooms.

    Gaps up to RECONCILIATION_THRESHOLD are left untouched. Without elastic
    rooms the gap stays and a warning is recorded on the plan.
    """
    diff = plan.residual
    if abs(diff) > RECONCILIATION_THRESHOLD:
        elastic = [room for room in plan.rooms if room.elastic]
        if elastic:
            share = diff / len(elastic)
            for room in elastic:
                room.area += share

    if abs(plan.residual) > AREA_TOLERANCE:
        message = (
            f"Floor {plan.floor_number}: rooms cover {plan.total_area:.2f} m² "
            f"of {plan.floor_area:.2f} m²"
        )
        logger.warning(message)
        plan.warnings.append(message)

    for room in plan.rooms:
        if room.area <= 0:
            message = f"Floor {plan.floor_number}: '{room.name}' shrank to {room.area:.2f} m²"
            logger.warning(message)
            plan.warnings.append(message)

    return plan


def get_floor_summary(plan: FloorPlan) -> Dict[str, float]:
    """
    Group a floor's rooms into living, overhead and service totals.

    Returns dict with living_area, overhead_area, service_area,
    total_area and efficiency (living share of the floor, percent).
    """
    overhead_keys = {'halls', 'stairs', 'construction'}

    living_area = 0.0
    overhead_area = 0.0
    service_area = 0.0
    for room in plan.rooms:
        if room.elastic:
            living_area += room.area
        elif room.key in overhead_keys:
            overhead_area += room.area
        else:
            service_area += room.area

    total = plan.total_area
    return {
        'living_area': round(living_area, 1),
        'overhead_area': round(overhead_area, 1),
        'service_area': round(service_area, 1),
        'total_area': round(total, 1),
        'efficiency': round(living_area / total * 100, 1) if total > 0 else 0
    }
