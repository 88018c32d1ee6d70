from apps.barriers.models import BarrierStatus
from apps.barriers.services.evaluation import aggregate_status


def test_all_effective():
    assert aggregate_status([BarrierStatus.EFFECTIVE, BarrierStatus.EFFECTIVE]) == BarrierStatus.EFFECTIVE


def test_partially_effective_beats_effective():
    statuses = [BarrierStatus.EFFECTIVE, BarrierStatus.PARTIALLY_EFFECTIVE]
    assert aggregate_status(statuses) == BarrierStatus.PARTIALLY_EFFECTIVE


def test_missing_status_counts_as_not_effective():
    assert aggregate_status([BarrierStatus.EFFECTIVE, None]) == BarrierStatus.NOT_EFFECTIVE
    assert aggregate_status([BarrierStatus.EFFECTIVE, ""]) == BarrierStatus.NOT_EFFECTIVE


def test_not_effective_wins():
    statuses = [BarrierStatus.PARTIALLY_EFFECTIVE, BarrierStatus.EFFECTIVE]
    assert aggregate_status(statuses + [BarrierStatus.NOT_EFFECTIVE]) == BarrierStatus.NOT_EFFECTIVE
