from django.db import models

from .assembly import Assembly
from .well import Well


class Wellhead(models.Model):
    """
    Wellhead stack of a well. Actual wellheads have no scenario; planned
    designs may carry their own.
    """

    wellhead_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='wellheads')
    scenario = models.ForeignKey(
        'well_core.Scenario',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='wellheads',
    )
    event_id = models.CharField(max_length=32, blank=True)

    class Meta:
        db_table = 'well_core_wellhead'

    def __str__(self) -> str:  # pragma: no cover
        return f"Wellhead<{self.wellhead_id}>"


class WellheadComponent(models.Model):
    wellhead_comp_id = models.CharField(max_length=32, primary_key=True)
    wellhead = models.ForeignKey(Wellhead, on_delete=models.CASCADE, related_name='components')
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='wellhead_components')
    event_id = models.CharField(max_length=32, blank=True)
    sequence_no = models.IntegerField(default=0)

    sect_type_code = models.CharField(max_length=16, blank=True)
    comp_type_code = models.CharField(max_length=16, blank=True)
    make = models.CharField(max_length=128, null=True, blank=True)
    model = models.CharField(max_length=128, null=True, blank=True)
    working_press_rating = models.FloatField(null=True, blank=True)
    wellhead_section = models.CharField(max_length=64, null=True, blank=True)
    comments = models.TextField(null=True, blank=True)

    test_result = models.CharField(max_length=32, null=True, blank=True)
    test_duration = models.FloatField(null=True, blank=True)
    test_pressure = models.FloatField(null=True, blank=True)

    install_date = models.DateTimeField()
    removal_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_wellhead_comp'
        ordering = ['sequence_no']
        indexes = [
            models.Index(fields=['well', 'install_date'], name='wc_whcomp_install_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"WellheadComponent<{self.wellhead_comp_id} {self.sect_type_code}/{self.comp_type_code}>"


class WellheadOutlet(models.Model):
    outlet_id = models.CharField(max_length=32, primary_key=True)
    component = models.ForeignKey(WellheadComponent, on_delete=models.CASCADE, related_name='outlets')
    sequence_no = models.IntegerField(default=0)

    sect_type_code = models.CharField(max_length=16, blank=True)
    comp_type_code = models.CharField(max_length=16, blank=True)
    outlet_location = models.CharField(max_length=64, null=True, blank=True)
    outlet_working_press = models.CharField(max_length=32, null=True, blank=True)
    valve_make = models.CharField(max_length=128, null=True, blank=True)
    valve_model = models.CharField(max_length=128, null=True, blank=True)
    valve_install_date = models.DateTimeField()
    valve_removal_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_wellhead_comp_outlet'
        ordering = ['sequence_no']


class WellheadHanger(models.Model):
    """Hanger landed in a wellhead component. Only hangers holding an assembly are drawn."""

    wellhead_hanger_id = models.CharField(max_length=32, primary_key=True)
    component = models.ForeignKey(WellheadComponent, on_delete=models.CASCADE, related_name='hangers')
    assembly = models.ForeignKey(
        Assembly,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='hangers',
    )
    comp_type_code = models.CharField(max_length=16, blank=True)
    model = models.CharField(max_length=128, null=True, blank=True)
    hanger_size = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_wellhead_hanger'


class WellheadAnnularPressure(models.Model):
    wellhead_ann_press_id = models.CharField(max_length=32, primary_key=True)
    wellhead = models.ForeignKey(Wellhead, on_delete=models.CASCADE, related_name='annular_pressures')
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='annular_pressures')
    annulus = models.CharField(max_length=32, blank=True)
    sequence_no = models.CharField(max_length=16, blank=True)
    pressure = models.FloatField(null=True, blank=True)
    test_date = models.DateTimeField(null=True, blank=True)
    comments = models.TextField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_wellhead_annular_pres'
        indexes = [
            models.Index(fields=['well', 'wellhead'], name='wc_whannpress_well_idx'),
        ]


class WellheadPressureRelief(models.Model):
    """Bleed-off record against an annular pressure reading."""

    annular_pressure = models.ForeignKey(
        WellheadAnnularPressure,
        on_delete=models.CASCADE,
        related_name='pressure_reliefs',
    )
    annulus = models.CharField(max_length=32, blank=True)
    sequence_no = models.CharField(max_length=16, blank=True)
    drain_date = models.DateTimeField(null=True, blank=True)
    drained_fluid_type = models.CharField(max_length=64, null=True, blank=True)
    drained_press_from = models.FloatField(null=True, blank=True)
    drained_press_to = models.FloatField(null=True, blank=True)
    drained_volume = models.FloatField(null=True, blank=True)
    estimated_fluid_level = models.CharField(max_length=64, null=True, blank=True)
    fluid_density = models.FloatField(null=True, blank=True)
    fluid_level = models.FloatField(null=True, blank=True)
    max_press = models.FloatField(null=True, blank=True)
    comments = models.TextField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_wellhead_press_relief'
