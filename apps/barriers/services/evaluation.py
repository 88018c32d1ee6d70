from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional

from django.db import DatabaseError, transaction
from django.utils import timezone

from apps.barriers.models import (
    BarrierElement,
    BarrierElementTestLink,
    BarrierElementTestLinkAudit,
    BarrierEnvelope,
    BarrierEnvelopeTest,
    BarrierEnvelopeTestAudit,
    BarrierStatus,
)

logger = logging.getLogger(__name__)


def aggregate_status(statuses: Iterable[Optional[str]]) -> str:
    """
    Envelope status from its element statuses.

    Not Effective wins over Partially Effective, which wins over Effective.
    A missing status counts as Not Effective.
    """
    statuses = list(statuses)
    if any(not s or s == BarrierStatus.NOT_EFFECTIVE for s in statuses):
        return BarrierStatus.NOT_EFFECTIVE
    if any(s == BarrierStatus.PARTIALLY_EFFECTIVE for s in statuses):
        return BarrierStatus.PARTIALLY_EFFECTIVE
    return BarrierStatus.EFFECTIVE


def _audit_envelope_test(test: BarrierEnvelopeTest) -> None:
    # non-fatal: audit failures never roll back the evaluation
    try:
        with transaction.atomic():
            BarrierEnvelopeTestAudit.objects.create(
                barrier_envelope_test_id=test.barrier_envelope_test_id,
                barrier_envelope_id=test.barrier_envelope_id,
                barrier_diagram_id=test.barrier_diagram_id,
                well_id=test.well_id,
                wellbore_id=test.wellbore_id,
                scenario_id=test.scenario_id,
                status=test.status,
                last_test_date=test.last_test_date,
                create_user=test.create_user,
            )
    except DatabaseError:
        logger.exception(f"Audit copy of envelope test {test.barrier_envelope_test_id} failed (non-fatal)")


def _audit_link(link: BarrierElementTestLink) -> None:
    try:
        with transaction.atomic():
            BarrierElementTestLinkAudit.objects.create(
                barrier_envelope_test_id=link.barrier_envelope_test_id,
                barrier_envelope_id=link.barrier_envelope_id,
                barrier_diagram_id=link.barrier_diagram_id,
                barrier_element_id=link.barrier_element_id,
                ref_id=link.ref_id,
                status=link.status,
                component_ovality=link.component_ovality,
                component_wearing=link.component_wearing,
                details=link.details,
                last_test_date=link.last_test_date,
                create_user=link.create_user,
            )
    except DatabaseError:
        logger.exception(f"Audit copy of element test for {link.ref_id} failed (non-fatal)")


def _resolve_element(envelope: BarrierEnvelope, item: Dict[str, Any]) -> Optional[BarrierElement]:
    element_id = item.get("barrier_element_id")
    qs = BarrierElement.objects.filter(barrier_envelope=envelope)
    if element_id:
        return qs.filter(barrier_element_id=element_id).first()
    return qs.filter(ref_id=item.get("ref_id")).first()


@transaction.atomic
def set_barrier_evaluation(evaluations: List[Dict[str, Any]], create_user: str = "") -> List[BarrierEnvelopeTest]:
    """
    Replace the evaluation of every envelope named in ``evaluations``.

    Each item carries ref_id, barrier_envelope_id, barrier_diagram_id,
    status, component_ovality, component_wearing and details. Items are
    grouped by envelope; each group deletes the envelope's previous test and
    links, writes one new test with the aggregate status plus one link per
    item, and mirrors both into the audit tables.

    Returns the new envelope tests. Unknown envelope ids are skipped.
    """
    groups: "OrderedDict[str, List[Dict[str, Any]]]" = OrderedDict()
    for item in evaluations:
        groups.setdefault(item["barrier_envelope_id"], []).append(item)

    now = timezone.now()
    written: List[BarrierEnvelopeTest] = []

    for envelope_id, items in groups.items():
        envelope = BarrierEnvelope.objects.select_related("barrier_diagram").filter(
            barrier_envelope_id=envelope_id
        ).first()
        if envelope is None:
            logger.warning(f"Skipping evaluation for unknown barrier envelope {envelope_id}")
            continue

        diagram_id = items[0].get("barrier_diagram_id") or envelope.barrier_diagram_id
        user = items[0].get("create_user") or create_user

        BarrierElementTestLink.objects.filter(barrier_envelope=envelope, barrier_diagram_id=diagram_id).delete()
        BarrierEnvelopeTest.objects.filter(barrier_envelope=envelope, barrier_diagram_id=diagram_id).delete()

        status = aggregate_status(item.get("status") for item in items)
        test = BarrierEnvelopeTest.objects.create(
            barrier_envelope=envelope,
            barrier_diagram_id=diagram_id,
            well_id=envelope.well_id,
            wellbore_id=envelope.wellbore_id,
            scenario_id=envelope.scenario_id,
            status=status,
            last_test_date=now,
            create_user=user,
        )
        _audit_envelope_test(test)

        for item in items:
            element = _resolve_element(envelope, item)
            if element is not None:
                element.component_ovality = item.get("component_ovality")
                element.component_wearing = item.get("component_wearing")
                element.save(update_fields=["component_ovality", "component_wearing"])

            link = BarrierElementTestLink.objects.create(
                barrier_envelope_test=test,
                barrier_envelope=envelope,
                barrier_diagram_id=diagram_id,
                barrier_element=element,
                ref_id=item.get("ref_id") or (element.ref_id if element else ""),
                status=item.get("status"),
                component_ovality=item.get("component_ovality"),
                component_wearing=item.get("component_wearing"),
                details=item.get("details") or "",
                last_test_date=now,
                create_user=user,
            )
            _audit_link(link)

        envelope.status = status
        envelope.save(update_fields=["status", "updated_at"])
        logger.info(f"Envelope {envelope.name} ({envelope_id}) evaluated as {status} from {len(items)} elements")
        written.append(test)

    return written


def get_latest_envelope_test(envelope: BarrierEnvelope) -> Optional[BarrierEnvelopeTest]:
    return (
        BarrierEnvelopeTest.objects.filter(barrier_envelope=envelope, barrier_diagram_id=envelope.barrier_diagram_id)
        .order_by("-last_test_date")
        .first()
    )


def get_element_history(barrier_element_id: str) -> List[Dict[str, Any]]:
    """Every evaluation ever recorded for an element, newest first."""
    return list(
        BarrierElementTestLinkAudit.objects.filter(barrier_element_id=barrier_element_id)
        .order_by("-last_test_date")
        .values(
            "barrier_envelope_id",
            "barrier_diagram_id",
            "barrier_element_id",
            "status",
            "last_test_date",
            "create_user",
            "details",
        )
    )
