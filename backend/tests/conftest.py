import pytest

from planner.services.room_labels import get_room_labels
from planner.services.room_allocation import FloorAllocationInput, LivingFormat


@pytest.fixture
def en_labels():
    return get_room_labels('en')


@pytest.fixture
def make_floor(en_labels):
    """Build a FloorAllocationInput with English labels and sensible defaults."""

    def _make(floor_area=120.0, floor_index=1, floor_count=1, format=LivingFormat.ORDINARY,
              has_office=False, is_kitchen_living_combined=True, room_labels=None):
        return FloorAllocationInput(
            floor_area=floor_area,
            floor_index=floor_index,
            floor_count=floor_count,
            format=format,
            has_office=has_office,
            is_kitchen_living_combined=is_kitchen_living_combined,
            room_labels=room_labels if room_labels is not None else en_labels
        )

    return _make


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from planner.main import app

    return TestClient(app)
