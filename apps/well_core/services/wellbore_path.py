from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from django.db import DatabaseError

from apps.well_core.models import Wellbore

logger = logging.getLogger(__name__)


class WellborePathCycleError(RuntimeError):
    """The parent-wellbore chain loops back on itself. Input data is corrupt."""


@dataclass(frozen=True)
class WellborePathNode:
    well_id: str
    wellbore_id: str
    name: str
    parent_wellbore_id: Optional[str]
    kickoff_md: Optional[float]
    kickoff_tvd: Optional[float]


def resolve_path(well_id: str, wellbore_id: str) -> List[WellborePathNode]:
    """
    Walk parent links from ``wellbore_id`` up to the original hole and
    return the chain top-to-bottom (mother bore first, target last).

    A missing wellbore anywhere in the chain, or a database error while
    walking it, yields ``[]`` so callers report the schematic as not found.
    A chain that revisits a wellbore raises ``WellborePathCycleError``.
    """
    nodes: List[WellborePathNode] = []
    visited = set()
    current_id: Optional[str] = wellbore_id

    try:
        while current_id:
            if current_id in visited:
                raise WellborePathCycleError(
                    f"Wellbore chain for well {well_id} loops back to {current_id}"
                )
            visited.add(current_id)

            wellbore = (
                Wellbore.objects.filter(well_id=well_id, wellbore_id=current_id)
                .only("well_id", "wellbore_id", "wellbore_name", "parent_wellbore_id", "ko_md", "ko_tvd")
                .first()
            )
            if wellbore is None:
                logger.warning(f"Wellbore {current_id} not found in well {well_id}; path unavailable")
                return []

            logger.info(f"Appending wellbore with name {wellbore.wellbore_name}")
            nodes.append(
                WellborePathNode(
                    well_id=wellbore.well_id,
                    wellbore_id=wellbore.wellbore_id,
                    name=wellbore.wellbore_name,
                    parent_wellbore_id=wellbore.parent_wellbore_id,
                    kickoff_md=wellbore.ko_md,
                    kickoff_tvd=wellbore.ko_tvd,
                )
            )
            current_id = wellbore.parent_wellbore_id
    except DatabaseError:
        logger.exception(f"Failed to resolve wellbore path for well {well_id} wellbore {wellbore_id}")
        return []

    nodes.reverse()
    return nodes
