"""
Purpose: Central configuration for locating vehicles near a rider.
What it does:

Stores the tunable eligibility rules for the vehicle locator:

eligible_statuses = None  -> every status is matched (vehicles in
                             maintenance or offline still appear)
eligible_statuses = {ONLINE, FULL} -> only vehicles in service

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from .models import VehicleStatus


@dataclass(frozen=True)
class LocatorPolicy:
    """
    Central configuration for the vehicle locator.
    """

    # --- Status filter ---
    # None keeps the unfiltered behaviour of the pilot app.
    eligible_statuses: Optional[FrozenSet[VehicleStatus]] = None

    def validate(self) -> None:
        if self.eligible_statuses is not None:
            if not self.eligible_statuses:
                raise ValueError("eligible_statuses must be None or a non-empty set")
            for status in self.eligible_statuses:
                if not isinstance(status, VehicleStatus):
                    raise ValueError(f"eligible_statuses contains a non-VehicleStatus value: {status!r}")

    def allows(self, status: VehicleStatus) -> bool:
        return self.eligible_statuses is None or status in self.eligible_statuses


def default_locator_policy() -> LocatorPolicy:
    """
    Convenience factory for the default (unfiltered) policy.
    """
    p = LocatorPolicy()
    p.validate()
    return p


def in_service_locator_policy() -> LocatorPolicy:
    """
    Only vehicles that are actually driving: online, or online but full
    (full vehicles are still shown, flagged as over capacity).
    """
    p = LocatorPolicy(eligible_statuses=frozenset({VehicleStatus.ONLINE, VehicleStatus.FULL}))
    p.validate()
    return p


def locator_policy_for_statuses(values: Iterable[str]) -> LocatorPolicy:
    """
    Builds a policy from raw status names, e.g. ["online", "full"] read from
    configuration. An empty list keeps the default (unfiltered) policy.
    """
    statuses = frozenset(VehicleStatus(value.strip()) for value in values if value.strip())
    if not statuses:
        return default_locator_policy()

    p = LocatorPolicy(eligible_statuses=statuses)
    p.validate()
    return p
