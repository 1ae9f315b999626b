# backend/planner/services/__init__.py
# Floor-plan allocation and explication services

from .room_allocation import (
    allocate_floor,
    reconcile_floor,
    bedroom_unit_area,
    get_floor_summary,
    FloorAllocationInput,
    FloorPlan,
    RoomEntry,
    FloorRole,
    LivingFormat,
    AREA_TOLERANCE
)

from .room_labels import (
    get_room_labels,
    get_document_labels,
    require_room_labels,
    merge_room_labels,
    REQUIRED_ROOM_KEYS,
    SUPPORTED_LANGUAGES
)

from .house_plan import (
    build_house_plan,
    HouseParameters,
    HousePlan
)

from .explication import (
    build_explication_rows,
    format_explication_text,
    ExplicationRow
)

from .cost_estimate import (
    estimate_cost,
    architecture_price,
    CostEstimate,
    SiteObject,
    SiteObjectKind
)

from .pdf_generator import (
    generate_explication_pdf,
    ExplicationPDFGenerator
)

__all__ = [
    # Allocation
    'allocate_floor',
    'reconcile_floor',
    'bedroom_unit_area',
    'get_floor_summary',
    'FloorAllocationInput',
    'FloorPlan',
    'RoomEntry',
    'FloorRole',
    'LivingFormat',
    'AREA_TOLERANCE',

    # Labels
    'get_room_labels',
    'get_document_labels',
    'require_room_labels',
    'merge_room_labels',
    'REQUIRED_ROOM_KEYS',
    'SUPPORTED_LANGUAGES',

    # Plan
    'build_house_plan',
    'HouseParameters',
    'HousePlan',

    # Explication
    'build_explication_rows',
    'format_explication_text',
    'ExplicationRow',

    # Cost estimate
    'estimate_cost',
    'architecture_price',
    'CostEstimate',
    'SiteObject',
    'SiteObjectKind',

    # PDF
    'generate_explication_pdf',
    'ExplicationPDFGenerator',
]
