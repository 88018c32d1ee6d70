from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from django.db import DatabaseError, transaction

from apps.barriers.models import BarrierDiagram, BarrierElement, BarrierElementTestLink, BarrierEnvelope
from apps.barriers.services.evaluation import get_element_history, get_latest_envelope_test
from apps.barriers.services.ref_ids import sub_ids_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagramKey:
    well_id: str
    wellbore_id: str
    scenario_id: str
    diagram_date: datetime


@dataclass
class ToggleResult:
    barrier: str
    ref_id: str
    action: str  # "added" or "removed"
    barrier_element_id: str


def get_diagram(key: DiagramKey) -> Optional[BarrierDiagram]:
    try:
        return BarrierDiagram.objects.filter(
            well_id=key.well_id,
            wellbore_id=key.wellbore_id,
            scenario_id=key.scenario_id,
            diagram_date=key.diagram_date,
        ).first()
    except DatabaseError:
        logger.exception(f"An error occurred while fetching barrier diagram for {key}")
        return None


def get_or_create_diagram(key: DiagramKey) -> BarrierDiagram:
    """
    Diagram for the natural key, created on first touch.
    The unique constraint makes a racing second creator re-read the winner's row.
    """
    diagram, created = BarrierDiagram.objects.get_or_create(
        well_id=key.well_id,
        wellbore_id=key.wellbore_id,
        scenario_id=key.scenario_id,
        diagram_date=key.diagram_date,
    )
    if created:
        logger.info(f"Created barrier diagram {diagram.barrier_diagram_id} for {key.well_id}/{key.wellbore_id} on {key.diagram_date:%Y-%m-%d}")
    return diagram


def get_or_create_envelope(diagram: BarrierDiagram, name: str) -> BarrierEnvelope:
    envelope, created = BarrierEnvelope.objects.get_or_create(
        barrier_diagram=diagram,
        name=name,
        defaults={
            "well_id": diagram.well_id,
            "wellbore_id": diagram.wellbore_id,
            "scenario_id": diagram.scenario_id,
        },
    )
    if created:
        logger.info(f"Created barrier envelope {name} ({envelope.barrier_envelope_id}) on diagram {diagram.barrier_diagram_id}")
    return envelope


@transaction.atomic
def modify_barriers(key: DiagramKey, items: List[Dict[str, Any]]) -> List[ToggleResult]:
    """
    Toggle physical elements in and out of named barriers.

    Each item is ``{barrier, element_type, ref_id, top?, base?}``. An element
    already in the barrier is removed; otherwise its reference id is parsed
    and a new element row is inserted. Applying the same item twice leaves
    the diagram unchanged. A malformed reference id rolls back the whole call.
    """
    diagram = get_or_create_diagram(key)
    results: List[ToggleResult] = []

    for item in items:
        envelope = get_or_create_envelope(diagram, item["barrier"])
        ref_id = item["ref_id"]

        existing = BarrierElement.objects.filter(
            barrier_envelope=envelope,
            barrier_diagram=diagram,
            ref_id=ref_id,
            well_id=key.well_id,
            wellbore_id=key.wellbore_id,
            scenario_id=key.scenario_id,
        ).first()

        if existing is not None:
            element_id = existing.barrier_element_id
            existing.delete()
            logger.info(f"Removed {ref_id} from barrier {envelope.name}")
            results.append(ToggleResult(envelope.name, ref_id, "removed", element_id))
            continue

        element_type = item["element_type"].upper()
        element = BarrierElement.objects.create(
            barrier_envelope=envelope,
            barrier_diagram=diagram,
            well_id=key.well_id,
            wellbore_id=key.wellbore_id,
            scenario_id=key.scenario_id,
            ref_id=ref_id,
            element_type=element_type,
            top_depth=item.get("top"),
            base_depth=item.get("base"),
            **sub_ids_for(element_type, ref_id),
        )
        logger.info(f"Added {ref_id} to barrier {envelope.name}")
        results.append(ToggleResult(envelope.name, ref_id, "added", element.barrier_element_id))

    return results


def get_barrier_diagrams(well_id: str, wellbore_id: str, scenario_id: str) -> List[BarrierDiagram]:
    return list(
        BarrierDiagram.objects.filter(well_id=well_id, wellbore_id=wellbore_id, scenario_id=scenario_id)
        .order_by("-diagram_date")
    )


def get_all_barriers(key: DiagramKey) -> Optional[List[Dict[str, Any]]]:
    """
    Every barrier element on the diagram for ``key`` with its envelope name,
    the live evaluation of the element and its evaluation history.
    Returns None when no diagram exists for that date.
    """
    diagram = get_diagram(key)
    if diagram is None:
        logger.warning(f"No barrier diagram for {key.well_id}/{key.wellbore_id}/{key.scenario_id} on {key.diagram_date:%Y-%m-%d}")
        return None

    live_links = {
        link.barrier_element_id: link
        for link in BarrierElementTestLink.objects.filter(barrier_diagram=diagram, barrier_element__isnull=False)
    }

    envelope_tests: Dict[str, Any] = {}
    barriers: List[Dict[str, Any]] = []
    elements = (
        BarrierElement.objects.select_related("barrier_envelope")
        .filter(barrier_diagram=diagram)
        .order_by("barrier_envelope__name", "ref_id")
    )
    for element in elements:
        link = live_links.get(element.barrier_element_id)
        envelope = element.barrier_envelope
        if envelope.barrier_envelope_id not in envelope_tests:
            envelope_tests[envelope.barrier_envelope_id] = get_latest_envelope_test(envelope)
        envelope_test = envelope_tests[envelope.barrier_envelope_id]
        barriers.append({
            "barrier_diagram_id": diagram.barrier_diagram_id,
            "barrier_envelope_id": element.barrier_envelope_id,
            "barrier_element_id": element.barrier_element_id,
            "name": envelope.name,
            "envelope_status": envelope.status,
            "envelope_last_test_date": envelope_test.last_test_date if envelope_test else None,
            "envelope_test_user": envelope_test.create_user if envelope_test else None,
            "ref_id": element.ref_id,
            "type": element.element_type,
            "scenario_id": element.scenario_id,
            "top_depth": element.top_depth,
            "base_depth": element.base_depth,
            "component_ovality": element.component_ovality,
            "component_wearing": element.component_wearing,
            "status": link.status if link else None,
            "details": link.details if link else None,
            "last_test_date": link.last_test_date if link else None,
            "create_user": link.create_user if link else None,
            "element_history": get_element_history(element.barrier_element_id),
        })
    return barriers
