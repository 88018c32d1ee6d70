from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from django.db import DatabaseError

from apps.barriers.models import BarrierElement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementBarrier:
    """One barrier a physical element belongs to."""

    barrier_name: str
    barrier_envelope_id: str
    barrier_element_id: str
    top_depth: Optional[float]
    base_depth: Optional[float]


def _barrier_rows(well_id: str, wellbore_id: str, scenario_id: str, diagram_date: Optional[datetime], ref_id: Optional[str] = None):
    qs = BarrierElement.objects.select_related("barrier_envelope").filter(
        barrier_diagram__well_id=well_id,
        barrier_diagram__wellbore_id=wellbore_id,
        barrier_diagram__scenario_id=scenario_id,
    )
    if diagram_date is not None:
        qs = qs.filter(barrier_diagram__diagram_date=diagram_date)
    if ref_id is not None:
        qs = qs.filter(ref_id=ref_id)
    return qs.order_by("barrier_envelope__name")


def _to_barrier(element: BarrierElement) -> ElementBarrier:
    return ElementBarrier(
        barrier_name=element.barrier_envelope.name,
        barrier_envelope_id=element.barrier_envelope_id,
        barrier_element_id=element.barrier_element_id,
        top_depth=element.top_depth,
        base_depth=element.base_depth,
    )


def get_element_barriers(
    well_id: str,
    wellbore_id: str,
    scenario_id: str,
    diagram_date: Optional[datetime],
    ref_id: str,
) -> List[ElementBarrier]:
    """Barriers touching one element. Without a date, every diagram of the scenario is searched."""
    try:
        return [_to_barrier(e) for e in _barrier_rows(well_id, wellbore_id, scenario_id, diagram_date, ref_id)]
    except DatabaseError:
        logger.exception(f"Failed to load barriers for element {ref_id}")
        return []


class BarrierLookup:
    """
    Request-scoped cache of the diagram/envelope/element join.

    The first lookup loads every barrier element for the well, wellbore,
    scenario and date in one query and groups it by ``ref_id``; later
    lookups are served from memory. Build a new instance per request.
    """

    def __init__(self, well_id: str, wellbore_id: str, scenario_id: str, diagram_date: Optional[datetime]):
        self.well_id = well_id
        self.wellbore_id = wellbore_id
        self.scenario_id = scenario_id
        self.diagram_date = diagram_date
        self._by_ref: Optional[Dict[str, List[ElementBarrier]]] = None

    def _load(self) -> Dict[str, List[ElementBarrier]]:
        grouped: Dict[str, List[ElementBarrier]] = defaultdict(list)
        try:
            for element in _barrier_rows(self.well_id, self.wellbore_id, self.scenario_id, self.diagram_date):
                grouped[element.ref_id].append(_to_barrier(element))
        except DatabaseError:
            logger.exception(
                f"Failed to load barrier elements for well {self.well_id} wellbore {self.wellbore_id}"
            )
            return {}
        logger.info(f"Loaded barrier elements for {len(grouped)} reference ids")
        return dict(grouped)

    def for_ref(self, ref_id: str) -> List[ElementBarrier]:
        if self._by_ref is None:
            self._by_ref = self._load()
        return self._by_ref.get(ref_id, [])

    def names(self, ref_id: str) -> str:
        """Comma-joined barrier names, as drawn next to the element."""
        return ",".join(b.barrier_name for b in self.for_ref(ref_id))
