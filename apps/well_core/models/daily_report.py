from django.db import models

from .well import Well
from .wellbore import Wellbore


class DailyReport(models.Model):
    """Operations daily report header (report journal)."""

    report_journal_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='daily_reports')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='daily_reports')
    event_id = models.CharField(max_length=32, blank=True)
    report_no = models.IntegerField(null=True, blank=True)
    date_report = models.DateTimeField()
    status_summary = models.TextField(blank=True)

    class Meta:
        db_table = 'well_core_daily_report'
        indexes = [
            models.Index(fields=['well', 'wellbore', '-date_report'], name='wc_dailyrep_date_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"DailyReport<{self.report_journal_id} #{self.report_no} {self.date_report:%Y-%m-%d}>"
