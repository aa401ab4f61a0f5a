from typing import Dict, List

import pandas as pd

from charter_ops.models.schemas import (
    Booking, StaffMember, CrewAssignment, StaffRole, StaffStatus, AssignmentStatus
)

POOL_ROLES = {
    "captains": StaffRole.CAPTAIN.value,
    "first_mates": StaffRole.FIRST_MATE.value,
    "crew_members": StaffRole.CREW_MEMBER.value,
}


def _staff_frame(staff: List[StaffMember]) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"id": s.id, "role": s.role, "status": s.status} for s in staff],
        columns=["id", "role", "status"],
    )
    df["role"] = df["role"].astype(str).str.strip().str.lower()
    df["status"] = df["status"].astype(str).str.strip().str.lower()
    return df


def partition_candidates(staff: List[StaffMember]) -> Dict[str, List[StaffMember]]:
    """
    Split the roster into selectable candidates per role.

    Organization:
    - Only staff whose status is "available" are candidates
    - captains / first_mates / crew_members match their role exactly
    - Anyone with another role (coordinator, ...) is in no pool

    Args:
        staff (list of StaffMember): Full staff roster

    Returns:
        dict: {"captains": [...], "first_mates": [...], "crew_members": [...]}
    """
    pools = {name: [] for name in POOL_ROLES}
    if not staff:
        return pools

    df = _staff_frame(staff)
    available = df["status"] == StaffStatus.AVAILABLE.value
    for name, role in POOL_ROLES.items():
        ids = set(df.loc[available & (df["role"] == role), "id"].tolist())
        pools[name] = [s for s in staff if s.id in ids]
    return pools


def find_unassigned_bookings(bookings: List[Booking], assignments: List[CrewAssignment]) -> List[Booking]:
    """
    Bookings that still require crew: no loaded assignment references them.

    This reflects the assignment list the caller loaded and can be stale; the
    store's uniqueness constraint is what prevents double assignment.
    """
    if not bookings:
        return []
    assigned_ids = sorted({a.booking_id for a in assignments})
    df = pd.DataFrame([{"id": b.id} for b in bookings], columns=["id"])
    ids = set(df.loc[~df["id"].isin(assigned_ids), "id"].tolist())
    return [b for b in bookings if b.id in ids]


def summarize_crew(staff: List[StaffMember], bookings: List[Booking],
                   assignments: List[CrewAssignment]) -> Dict[str, int]:
    """Dashboard counters for the crew management screen"""
    pools = partition_candidates(staff)
    available = sum(len(pool) for pool in pools.values())
    return {
        "total_crew": len(staff),
        "available_crew": available,
        "available_captains": len(pools["captains"]),
        "total_assignments": len(assignments),
        "active_assignments": len([a for a in assignments if a.status == AssignmentStatus.IN_PROGRESS]),
        "bookings_requiring_crew": len(find_unassigned_bookings(bookings, assignments)),
    }
