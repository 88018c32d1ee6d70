from django.db import models

from .well import Well
from .wellbore import Wellbore


class Assembly(models.Model):
    """
    A run string in a wellbore: casing, liner, tubing, completion string.

    Casings and liners are told apart by ``string_type``; everything else
    is drawn as a non-casing assembly.
    """

    CASING_STRING_TYPES = ('Casing', 'Liner')

    assembly_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='assemblies')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='assemblies')
    assembly_name = models.CharField(max_length=128, blank=True)
    string_type = models.CharField(max_length=32, db_index=True)
    phase = models.CharField(max_length=16, default='ACTUAL')

    is_casing_liner = models.BooleanField(default=False)
    susp_point = models.CharField(max_length=64, null=True, blank=True, help_text='Liner suspension point')
    assembly_size = models.FloatField(null=True, blank=True, help_text='Nominal OD (in)')

    md_assembly_top = models.FloatField()
    md_assembly_base = models.FloatField()
    tvd_assembly_top = models.FloatField(null=True, blank=True)
    tvd_assembly_base = models.FloatField(null=True, blank=True)

    date_in = models.DateTimeField(null=True, blank=True)
    date_out = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_assembly'
        indexes = [
            models.Index(fields=['well', 'wellbore', 'phase'], name='wc_assembly_phase_idx'),
            models.Index(fields=['md_assembly_top', 'md_assembly_base'], name='wc_assembly_md_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"Assembly<{self.assembly_name} {self.string_type} {self.md_assembly_top}-{self.md_assembly_base}>"


class AssemblyComponent(models.Model):
    assembly_comp_id = models.CharField(max_length=32, primary_key=True)
    assembly = models.ForeignKey(Assembly, on_delete=models.CASCADE, related_name='components')
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='assembly_components')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='assembly_components')
    sequence_no = models.IntegerField(default=0)

    sect_type_code = models.CharField(max_length=16, blank=True)
    comp_type_code = models.CharField(max_length=16, blank=True)
    manufacturer = models.CharField(max_length=128, null=True, blank=True)
    model = models.CharField(max_length=128, null=True, blank=True)
    serial_no = models.CharField(max_length=64, null=True, blank=True)
    catalog_key_desc = models.CharField(max_length=255, null=True, blank=True)
    description = models.CharField(max_length=255, null=True, blank=True)

    md_top = models.FloatField()
    md_base = models.FloatField()
    length = models.FloatField(null=True, blank=True)
    joints = models.IntegerField(null=True, blank=True)

    od_body = models.FloatField(null=True, blank=True)
    id_body = models.FloatField(null=True, blank=True)
    grade_id = models.CharField(max_length=32, null=True, blank=True)
    grade = models.CharField(max_length=32, null=True, blank=True)
    approximate_weight = models.FloatField(null=True, blank=True)

    press_rating_top = models.FloatField(null=True, blank=True)
    press_rating_bottom = models.FloatField(null=True, blank=True)
    pressure_burst = models.FloatField(null=True, blank=True)
    pressure_collapse = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_assembly_comp'
        ordering = ['sequence_no']
        indexes = [
            models.Index(fields=['assembly', 'sequence_no'], name='wc_asmcomp_seq_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"Component<{self.assembly_comp_id} {self.sect_type_code}/{self.comp_type_code}>"


class SafetyValve(models.Model):
    """Subsurface safety valve test record for a completion component."""

    component = models.OneToOneField(AssemblyComponent, on_delete=models.CASCADE, related_name='safety_valve')
    recorded_opening_pressure = models.FloatField(null=True, blank=True)
    recorded_closing_pressure = models.FloatField(null=True, blank=True)
    nominal_opening_pressure = models.FloatField(null=True, blank=True)
    maximum_hydraulics_pressure = models.FloatField(null=True, blank=True)
    function_test_pass_fail = models.CharField(max_length=16, null=True, blank=True)

    class Meta:
        db_table = 'well_core_weqp_sssv'


class Packer(models.Model):
    component = models.OneToOneField(AssemblyComponent, on_delete=models.CASCADE, related_name='packer')
    pressure_test_above = models.FloatField(null=True, blank=True)
    pressure_test_below = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_weqp_packer'


class PipeCatalog(models.Model):
    """Static pipe body catalog returned with every schematic."""

    grade = models.CharField(max_length=32)
    od_body = models.FloatField()
    nominal_weight = models.FloatField(null=True, blank=True)
    internal_yield_press = models.FloatField(null=True, blank=True)
    collapse_resistance = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_pipe_catalog'
        ordering = ['od_body', 'grade']
