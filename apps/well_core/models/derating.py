from django.db import models

from .daily_report import DailyReport
from .well import Well
from .wellbore import Wellbore


class PressureSurvey(models.Model):
    """Casing pressure survey recorded against a daily report."""

    pressure_survey_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='pressure_surveys')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='pressure_surveys')
    daily_report = models.ForeignKey(DailyReport, on_delete=models.CASCADE, related_name='pressure_surveys')

    class Meta:
        db_table = 'well_core_pressure_survey'

    def __str__(self) -> str:  # pragma: no cover
        return f"PressureSurvey<{self.pressure_survey_id}>"


class FinalLoadSimm(models.Model):
    """
    Derated burst/collapse ratings of one casing interval, as simulated from
    a pressure survey after wear and ovality.
    """

    final_load_simm_id = models.CharField(max_length=32, primary_key=True)
    pressure_survey = models.ForeignKey(PressureSurvey, on_delete=models.CASCADE, related_name='final_loads')
    trapped_volume_id = models.CharField(max_length=32, blank=True)
    assembly_name = models.CharField(max_length=64, blank=True)
    sequence_no = models.IntegerField(null=True, blank=True)
    casing_od = models.FloatField(null=True, blank=True)
    top_interval = models.FloatField(null=True, blank=True)
    base_interval = models.FloatField(null=True, blank=True)
    wear = models.FloatField(null=True, blank=True)
    ovality = models.FloatField(null=True, blank=True)
    nom_burst_pressure = models.FloatField(null=True, blank=True)
    nom_collapse_pressure = models.FloatField(null=True, blank=True)
    calc_burst_pressure = models.FloatField(null=True, blank=True)
    calc_collapse_pressure = models.FloatField(null=True, blank=True)
    comments = models.TextField(blank=True)

    class Meta:
        db_table = 'well_core_final_load_simm'
        indexes = [
            models.Index(fields=['pressure_survey', 'sequence_no'], name='wc_finalload_seq_idx'),
        ]
