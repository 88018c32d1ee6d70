from django.db import models

from .well import Well
from .wellbore import Wellbore


class DefinitiveSurveyHeader(models.Model):
    def_survey_header_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='survey_headers')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='survey_headers')
    name = models.CharField(max_length=128, blank=True)

    class Meta:
        db_table = 'well_core_definitive_survey_header'

    def __str__(self) -> str:  # pragma: no cover
        return f"Survey<{self.def_survey_header_id}>"


class SurveyStation(models.Model):
    header = models.ForeignKey(DefinitiveSurveyHeader, on_delete=models.CASCADE, related_name='stations')
    md = models.FloatField()
    inclination = models.FloatField(null=True, blank=True)
    azimuth = models.FloatField(null=True, blank=True)
    tvd = models.FloatField(null=True, blank=True)
    offset_north = models.FloatField(null=True, blank=True)
    offset_east = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_survey_station'
        ordering = ['md']
        indexes = [
            models.Index(fields=['header', 'md'], name='wc_station_header_md_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"Station<{self.header_id} @ {self.md}>"
