from django.db import models


class Well(models.Model):
    """
    Physical well identity plus the offshore facts needed for reference depths.
    """

    well_id = models.CharField(max_length=32, primary_key=True)
    well_common_name = models.CharField(max_length=128, blank=True)
    well_legal_name = models.CharField(max_length=128, blank=True)
    field_name = models.CharField(max_length=128, blank=True)

    is_offshore = models.BooleanField(default=False)
    water_depth = models.FloatField(null=True, blank=True)
    wellhead_depth = models.FloatField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'well_core_well'

    def __str__(self) -> str:  # pragma: no cover
        return f"Well {self.well_id} ({self.well_common_name})"


class Datum(models.Model):
    """Elevation datum for a well. Exactly one datum per well is flagged as default."""

    datum_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='datums')
    datum_name = models.CharField(max_length=64, blank=True)
    datum_elevation = models.FloatField(null=True, blank=True)
    is_default = models.BooleanField(default=False)

    class Meta:
        db_table = 'well_core_datum'
        indexes = [
            models.Index(fields=['well', 'is_default'], name='wc_datum_default_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"Datum<{self.well_id} {self.datum_name} {self.datum_elevation}>"
