"""
Tests for guest grouping
"""

from seatplan.models import ArrangementConstraints, RelationshipType
from seatplan.services.grouping import GroupBuilder

from conftest import make_guest

def test_empty_guest_list_gives_no_groups(all_constraints):
    """An empty guest list is not an error"""
    assert GroupBuilder.build_groups([], all_constraints) == []

def test_families_grouped_per_side(wedding_guests, all_constraints):
    """Parents of each side become one group each"""
    groups = GroupBuilder.build_groups(wedding_guests, all_constraints)
    by_id = {group.id: group for group in groups}
    
    assert [g.id for g in by_id["bride-Parent"].guests] == ["guest-1", "guest-2"]
    assert [g.id for g in by_id["groom-Parent"].guests] == ["guest-3", "guest-4"]
    assert by_id["bride-Parent"].constraints.must_sit_together
    assert by_id["bride-Parent"].constraints.preferred_side == "bride"

def test_groups_sorted_by_priority(wedding_guests, all_constraints):
    """Parents come before friends, friends before colleagues"""
    groups = GroupBuilder.build_groups(wedding_guests, all_constraints)
    
    assert [group.id for group in groups] == [
        "bride-Parent",
        "groom-Parent",
        "bride-Friend-1",
        "groom-Colleague-1",
    ]
    priorities = [group.priority for group in groups]
    assert priorities == sorted(priorities, reverse=True)

def test_dietary_restrictions_are_unioned(all_constraints):
    """A group's dietary needs cover all of its members"""
    guests = [
        make_guest("a", "Sibling", "bride", ["vegan"]),
        make_guest("b", "Sibling", "bride", ["nut allergy", "Vegan "]),
    ]
    groups = GroupBuilder.build_groups(guests, all_constraints)
    
    assert len(groups) == 1
    assert groups[0].constraints.dietary_restrictions == {"vegan", "nut allergy"}

def test_no_flags_gives_singletons(wedding_guests, no_constraints):
    """Without grouping rules every guest stands alone"""
    groups = GroupBuilder.build_groups(wedding_guests, no_constraints)
    
    assert len(groups) == len(wedding_guests)
    assert all(len(group.guests) == 1 for group in groups)
    assert not any(group.constraints.must_sit_together for group in groups)
    # parents first, colleagues last
    assert groups[0].guests[0].relationship_type == RelationshipType.PARENT
    assert groups[-1].guests[0].relationship_type == RelationshipType.COLLEAGUE

def test_relationship_clusters_split_by_table_size():
    """A cluster bigger than one table becomes several same-type groups"""
    constraints = ArrangementConstraints(
        respect_relationships=True,
        keep_families_together=False,
        max_guests_per_table=4,
    )
    guests = [make_guest(f"f{i}", "Friend", "groom") for i in range(10)]
    groups = GroupBuilder.build_groups(guests, constraints)
    
    assert [len(group.guests) for group in groups] == [4, 4, 2]
    assert {group.constraints.relationship_type for group in groups} == {RelationshipType.FRIEND}
    assert len({group.id for group in groups}) == 3

def test_cluster_split_counts_additional_guests():
    """Cluster size is measured in seats, not names"""
    constraints = ArrangementConstraints(keep_families_together=False, max_guests_per_table=4)
    guests = [
        make_guest("f1", "Friend", "bride", additional=2),
        make_guest("f2", "Friend", "bride", additional=1),
        make_guest("f3", "Friend", "bride"),
    ]
    groups = GroupBuilder.build_groups(guests, constraints)
    
    assert [[g.id for g in group.guests] for group in groups] == [["f1"], ["f2", "f3"]]

def test_clusters_keep_sides_apart(all_constraints):
    """Friends of the bride and friends of the groom are separate clusters"""
    guests = [
        make_guest("a", "Friend", "bride"),
        make_guest("b", "Friend", "groom"),
        make_guest("c", "Friend", "bride"),
    ]
    groups = GroupBuilder.build_groups(guests, all_constraints)
    
    assert sorted([g.id for g in group.guests] for group in groups) == [["a", "c"], ["b"]]

def test_duplicate_guest_ids_ignored(all_constraints):
    guest = make_guest("dup", "Cousin", "bride")
    groups = GroupBuilder.build_groups([guest, guest], all_constraints)
    
    assert len(groups) == 1
    assert len(groups[0].guests) == 1

def test_family_groups_carry_proximity_rules(wedding_guests, all_constraints):
    groups = GroupBuilder.build_groups(wedding_guests, all_constraints)
    parents = groups[0]
    
    element_types = [pref.element_type.value for pref in parents.constraints.proximity_preferences]
    assert element_types == ["stage", "dance_floor"]

def test_split_to_fit_is_first_fit_in_order():
    guests = [
        make_guest("a", "Other", "bride", additional=2),
        make_guest("b", "Other", "bride"),
        make_guest("c", "Other", "bride", additional=1),
    ]
    taken, left = GroupBuilder.split_to_fit(guests, 2)
    
    assert [g.id for g in taken] == ["b"]
    assert [g.id for g in left] == ["a", "c"]

def test_couple_forms_head_table_group():
    """Bride and groom share one group even though they come from different sides"""
    guests = [
        make_guest("p1", "Parent", "bride"),
        make_guest("bride", "Bride", "bride"),
        make_guest("groom", "Groom", "groom"),
    ]
    groups = GroupBuilder.build_groups(guests, ArrangementConstraints())
    
    head = groups[0]
    assert head.id == "head-table"
    assert [guest.id for guest in head.guests] == ["bride", "groom"]
    assert head.constraints.must_sit_together
    assert head.constraints.preferred_side == "mixed"
    assert head.priority > max(group.priority for group in groups[1:])

def test_head_table_group_formed_without_grouping_flags(no_constraints):
    guests = [make_guest("groom", "Groom", "groom"), make_guest("bride", "Bride", "bride")]
    
    groups = GroupBuilder.build_groups(guests, no_constraints)
    
    assert len(groups) == 1
    assert [guest.id for guest in groups[0].guests] == ["groom", "bride"]
