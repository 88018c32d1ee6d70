from django.db import models

from .well import Well
from .wellbore import Wellbore


class HoleSectionGroup(models.Model):
    """Drilled (or planned) open-hole interval of a wellbore."""

    hole_sect_group_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='hole_section_groups')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='hole_section_groups')
    hole_name = models.CharField(max_length=128, blank=True)
    phase = models.CharField(max_length=16, default='ACTUAL')

    md_hole_sect_top = models.FloatField()
    md_hole_sect_base = models.FloatField()
    date_sect_start = models.DateTimeField(null=True, blank=True)
    date_sect_end = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_hole_sect_group'
        indexes = [
            models.Index(fields=['well', 'wellbore', 'phase'], name='wc_holesect_phase_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"HoleSection<{self.hole_name} {self.md_hole_sect_top}-{self.md_hole_sect_base}>"


class HoleSection(models.Model):
    """Individual bit run diameters within a hole section group."""

    group = models.ForeignKey(HoleSectionGroup, on_delete=models.CASCADE, related_name='sections')
    diameter = models.FloatField()
    md_top = models.FloatField(null=True, blank=True)
    md_base = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_hole_sect'


class WellboreIntegrityTest(models.Model):
    """Leak-off / formation integrity test run in a hole section."""

    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='integrity_tests')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='integrity_tests')
    hole_sect_group = models.ForeignKey(HoleSectionGroup, on_delete=models.CASCADE, related_name='integrity_tests')

    test_type = models.CharField(max_length=16, null=True, blank=True)
    date_test = models.DateTimeField(null=True, blank=True)
    lot_md = models.FloatField(null=True, blank=True)
    lot_tvd = models.FloatField(null=True, blank=True)
    weight_lot_emw = models.FloatField(null=True, blank=True)
    weight_lot_amw = models.FloatField(null=True, blank=True)
    lot_press = models.FloatField(null=True, blank=True)
    total_bh_press = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_wellbore_integ'
