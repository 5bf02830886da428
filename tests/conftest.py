"""
Shared fixtures: a small wedding with both families, friends and colleagues
"""

import pytest

from seatplan.models import (
    ArrangementConstraints,
    Guest,
    Table,
    VenueElement,
)

def make_guest(guest_id, relationship, side, dietary=None, additional=0, **extra):
    return Guest(
        id=guest_id,
        name=f"Guest {guest_id}",
        relationship_type=relationship,
        bride_or_groom_side=side,
        dietary_restrictions=dietary or [],
        additional_guest_count=additional,
        **extra
    )

@pytest.fixture
def wedding_guests():
    """Two parent couples, two gluten-free friends and two colleagues"""
    return [
        make_guest("guest-1", "Parent", "bride", ["vegetarian"]),
        make_guest("guest-2", "Parent", "bride", ["vegetarian"]),
        make_guest("guest-3", "Parent", "groom", additional=1),
        make_guest("guest-4", "Parent", "groom"),
        make_guest("guest-5", "Friend", "bride", ["gluten-free"]),
        make_guest("guest-6", "Friend", "bride", ["gluten-free"]),
        make_guest("guest-7", "Colleague", "groom"),
        make_guest("guest-8", "Colleague", "groom"),
    ]

@pytest.fixture
def wedding_tables():
    """Two open tables of eight and one locked table of six"""
    return [
        Table(id="table-1", name="Table 1", capacity=8, position={"x": 100, "y": 100}, event_id="event-1"),
        Table(id="table-2", name="Table 2", capacity=8, position={"x": 200, "y": 100}, event_id="event-1"),
        Table(id="table-3", name="Table 3", capacity=6, position={"x": 300, "y": 200}, is_locked=True, event_id="event-1"),
    ]

@pytest.fixture
def venue_elements():
    return [
        VenueElement(
            id="stage-1", type="stage", name="Main Stage",
            position={"x": 150, "y": 50}, dimensions={"width": 100, "height": 50}, event_id="event-1"
        ),
        VenueElement(
            id="dance-floor-1", type="dance_floor", name="Dance Floor",
            position={"x": 250, "y": 150}, dimensions={"width": 100, "height": 100}, event_id="event-1"
        ),
        VenueElement(
            id="bar-1", type="bar", name="Bar",
            position={"x": 400, "y": 100}, dimensions={"width": 80, "height": 40}, event_id="event-1"
        ),
    ]

@pytest.fixture
def all_constraints():
    """Every arrangement rule switched on"""
    return ArrangementConstraints(
        respect_relationships=True,
        consider_dietary_restrictions=True,
        keep_families_together=True,
        optimize_venue_proximity=True,
        balance_bride_groom_sides=True,
        min_guests_per_table=2,
        max_guests_per_table=8,
        preferred_table_distance=100,
    )

@pytest.fixture
def no_constraints():
    """Every arrangement rule switched off"""
    return ArrangementConstraints(
        respect_relationships=False,
        consider_dietary_restrictions=False,
        keep_families_together=False,
        optimize_venue_proximity=False,
        balance_bride_groom_sides=False,
    )
