from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.barriers.models import AnnulusElement, AnnulusTest
from apps.barriers.services.barrier_overlay import DiagramKey, get_diagram, get_or_create_diagram

logger = logging.getLogger(__name__)


@dataclass
class AnnulusLatestTests:
    mop_value: Optional[float] = None
    mawop_value: Optional[float] = None
    mawop_location: Optional[str] = None
    maasp_value: Optional[float] = None
    maasp_location: Optional[str] = None


@transaction.atomic
def set_annulus_element(
    key: DiagramKey,
    name: str,
    pressure: Optional[float],
    density: Optional[float],
) -> AnnulusElement:
    """Replace the annulus called ``name`` on the diagram for ``key`` (its tests go with it)."""
    diagram = get_or_create_diagram(key)
    deleted, _ = AnnulusElement.objects.filter(barrier_diagram=diagram, name=name).delete()
    element = AnnulusElement.objects.create(
        barrier_diagram=diagram,
        well_id=key.well_id,
        wellbore_id=key.wellbore_id,
        scenario_id=key.scenario_id,
        name=name,
        pressure=pressure,
        density=density,
    )
    logger.info(f"{'Replaced' if deleted else 'Created'} annulus {name} on diagram {diagram.barrier_diagram_id}")
    return element


@transaction.atomic
def evaluate_annulus(
    element: AnnulusElement,
    mop: Optional[float],
    mawop: Optional[float],
    mawop_location: Optional[str],
    maasp: Optional[float],
    maasp_location: Optional[str],
    create_user: str = "",
) -> List[AnnulusTest]:
    """
    Replace the operating limits of an annulus: all previous test rows are
    deleted and exactly one MOP, one MAWOP and one MAASP row are written.
    """
    AnnulusTest.objects.filter(annulus_element=element).delete()

    now = timezone.now()
    values = {
        AnnulusTest.MOP: (mop, None),
        AnnulusTest.MAWOP: (mawop, mawop_location),
        AnnulusTest.MAASP: (maasp, maasp_location),
    }
    tests = [
        AnnulusTest.objects.create(
            annulus_element=element,
            barrier_diagram_id=element.barrier_diagram_id,
            well_id=element.well_id,
            wellbore_id=element.wellbore_id,
            scenario_id=element.scenario_id,
            test_type=test_type,
            pressure=pressure,
            location=location,
            last_test_date=now,
            create_user=create_user,
        )
        for test_type, (pressure, location) in values.items()
    ]
    logger.info(f"Annulus {element.name} ({element.annulus_element_id}) evaluated: MOP={mop} MAWOP={mawop} MAASP={maasp}")
    return tests


def get_annulus_latest_tests(element: AnnulusElement) -> AnnulusLatestTests:
    """Latest MOP/MAWOP/MAASP values of an annulus; a missing type leaves its fields None."""
    latest = AnnulusLatestTests()
    try:
        tests = list(AnnulusTest.objects.filter(annulus_element=element))
    except DatabaseError:
        logger.exception(f"An error occurred while fetching annulus tests for {element.annulus_element_id}")
        return latest

    by_type = {}
    for test in tests:
        by_type.setdefault(test.test_type, test)

    mop = by_type.get(AnnulusTest.MOP)
    mawop = by_type.get(AnnulusTest.MAWOP)
    maasp = by_type.get(AnnulusTest.MAASP)
    if mop:
        latest.mop_value = mop.pressure
    if mawop:
        latest.mawop_value = mawop.pressure
        latest.mawop_location = mawop.location
    if maasp:
        latest.maasp_value = maasp.pressure
        latest.maasp_location = maasp.location
    return latest


def get_annulus_data(key: DiagramKey) -> List[Dict[str, Any]]:
    """Annuli on the diagram for ``key``, each merged with its latest test values."""
    diagram = get_diagram(key)
    if diagram is None:
        return []

    try:
        elements = list(AnnulusElement.objects.filter(barrier_diagram=diagram).order_by("name"))
    except DatabaseError:
        logger.exception(f"An error occurred while fetching annulus data for diagram {diagram.barrier_diagram_id}")
        return []

    annuli = []
    for element in elements:
        annuli.append({
            "annulus_element_id": element.annulus_element_id,
            "barrier_diagram_id": element.barrier_diagram_id,
            "well_id": element.well_id,
            "wellbore_id": element.wellbore_id,
            "scenario_id": element.scenario_id,
            "name": element.name,
            "pressure": element.pressure,
            "density": element.density,
            **asdict(get_annulus_latest_tests(element)),
        })
    return annuli
