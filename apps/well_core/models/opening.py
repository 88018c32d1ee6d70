from django.db import models

from .well import Well
from .wellbore import Wellbore


class WellboreOpening(models.Model):
    """Perforated (or otherwise opened) interval of a wellbore."""

    wellbore_opening_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='openings')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='openings')
    opening_name = models.CharField(max_length=128, blank=True)
    md_top = models.FloatField()
    md_base = models.FloatField()

    class Meta:
        db_table = 'well_core_wellbore_opening'
        indexes = [
            models.Index(fields=['well', 'wellbore'], name='wc_opening_well_wb_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"Opening<{self.wellbore_opening_id} {self.md_top}-{self.md_base}>"


class OpeningStatus(models.Model):
    """Dated status changes (Open, Squeezed, Isolated...) of an opening."""

    opening = models.ForeignKey(WellboreOpening, on_delete=models.CASCADE, related_name='statuses')
    status = models.CharField(max_length=32)
    effective_date = models.DateTimeField()

    class Meta:
        db_table = 'well_core_opening_status'
        ordering = ['-effective_date']
        indexes = [
            models.Index(fields=['opening', 'effective_date'], name='wc_opstatus_open_date_idx'),
        ]
