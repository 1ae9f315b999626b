# backend/planner/services/explication.py
# Flatten a house plan into explication rows and the plain-text
# project summary archived with every order.

from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from .house_plan import HousePlan
from .room_allocation import LivingFormat
from .cost_estimate import plot_area_sotka

# Row kinds
ROW_ROOM = "room"
ROW_SUBTOTAL = "subtotal"
ROW_TOTAL = "total"


@dataclass
class ExplicationRow:
    kind: str
    floor_number: Optional[int]
    name: str
    area: float
    position: Optional[int] = None  # 1-based index within the floor

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'floor_number': self.floor_number,
            'name': self.name,
            'area': round(self.area, 2),
            'position': self.position
        }


def build_explication_rows(
    plan: HousePlan,
    subtotal_label: str = "Subtotal",
    total_label: str = "Total"
) -> List[ExplicationRow]:
    """
    Rows of the printable explication table.

    Each floor contributes its rooms followed by a subtotal row; the last
    row holds the grand total of all floors.
    """
    rows = []
    for floor in plan.floors:
        for position, room in enumerate(floor.rooms, start=1):
            rows.append(ExplicationRow(ROW_ROOM, floor.floor_number, room.name, room.area, position))
        rows.append(ExplicationRow(ROW_SUBTOTAL, floor.floor_number, subtotal_label, floor.total_area))
    rows.append(ExplicationRow(ROW_TOTAL, None, total_label, plan.allocated_area))
    return rows


def format_explication_text(plan: HousePlan, project: Optional[Dict[str, Any]] = None) -> str:
    """
    Format the plan as the structured plain-text project summary.

    Args:
        plan: Plan from build_house_plan()
        project: Optional metadata (name, client, date, phone, email, style,
            house_width, house_length, plot_width, plot_length, site_objects,
            planning_wishes, extra_wishes, files_attached)

    Returns:
        Summary text with [ARCHITECTURE_SPECS], [EXPLICATION_OF_ROOMS],
        [LANDSCAPE_OBJECTS] and [CLIENT_WISHES] sections
    """
    project = project or {}
    lines = ["### PROJECT DATA FOR AI ANALYSIS ###"]

    if project.get('name'):
        lines.append(f"PROJECT_ID: {project['name']}")
    if project.get('client'):
        lines.append(f"CLIENT: {project['client']}")
    if project.get('date'):
        lines.append(f"DATE: {project['date']}")
    if project.get('phone') or project.get('email'):
        lines.append(f"CONTACT: {project.get('phone', '')} | {project.get('email', '')}")
    lines.append("")

    lines.append("[ARCHITECTURE_SPECS]")
    if project.get('style'):
        lines.append(f"STYLE: {project['style']}")
    lines.append(f"LIVING_FORMAT: {LivingFormat(plan.format).value.upper()}")
    lines.append(f"TOTAL_AREA_M2: {plan.total_area:.2f}")
    lines.append(f"FLOORS: {len(plan.floors)}")
    if 'house_width' in project:
        lines.append(f"FOOTPRINT_WIDTH_M: {project['house_width']:g}")
    if 'house_length' in project:
        lines.append(f"FOOTPRINT_DEPTH_M: {project['house_length']:g}")
    if project.get('plot_width') and project.get('plot_length'):
        lines.append(f"PLOT_WIDTH_M: {project['plot_width']:g}")
        lines.append(f"PLOT_DEPTH_M: {project['plot_length']:g}")
        lines.append(f"PLOT_AREA_SOTKA: {plot_area_sotka(project['plot_width'], project['plot_length']):.2f}")
    lines.append("")

    lines.append("[EXPLICATION_OF_ROOMS]")
    for floor in plan.floors:
        lines.append(f"FLOOR_{floor.floor_number}:")
        for room in floor.rooms:
            lines.append(f"  - {room.name}: {room.area:.2f}m2")
    lines.append("")

    lines.append("[LANDSCAPE_OBJECTS]")
    for site_object in project.get('site_objects') or []:
        lines.append(f"- {site_object.describe()}")
    lines.append("")

    lines.append("[CLIENT_WISHES]")
    lines.append(f"PLANNING: {project.get('planning_wishes') or 'No specific planning wishes'}")
    lines.append(f"ADDITIONAL: {project.get('extra_wishes') or 'No additional notes'}")
    lines.append(f"FILES_ATTACHED: {project.get('files_attached', 0)}")

    return '\n'.join(lines) + '\n'
