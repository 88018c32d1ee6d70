from django.db import models

from .well import Well


class Wellbore(models.Model):
    """
    A wellbore within a well. Sidetracks point at the wellbore they were
    kicked off from, and carry the kickoff depth on that parent.
    """

    wellbore_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='wellbores')
    wellbore_name = models.CharField(max_length=128, blank=True)
    parent_wellbore = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sidetracks',
    )

    ko_md = models.FloatField(null=True, blank=True, help_text='Kickoff measured depth on the parent wellbore')
    ko_tvd = models.FloatField(null=True, blank=True, help_text='Kickoff true vertical depth on the parent wellbore')

    class Meta:
        db_table = 'well_core_wellbore'
        indexes = [
            models.Index(fields=['well', 'wellbore_id'], name='wc_wellbore_well_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"Wellbore<{self.well_id}/{self.wellbore_id} {self.wellbore_name}>"


class Scenario(models.Model):
    """
    A design alternative for a wellbore. The phase decides which provider
    builds the schematic: ACTUAL is as-built, anything else is a plan.
    """

    PHASE_ACTUAL = 'ACTUAL'
    PHASE_PLAN = 'PLAN'
    PHASE_PROTOTYPE = 'PROTOTYPE'

    PHASE_CHOICES = [
        (PHASE_ACTUAL, 'Actual'),
        (PHASE_PLAN, 'Plan'),
        (PHASE_PROTOTYPE, 'Prototype'),
    ]

    scenario_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='scenarios')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='scenarios')
    name = models.CharField(max_length=128, blank=True)
    phase = models.CharField(max_length=16, choices=PHASE_CHOICES, default=PHASE_ACTUAL)
    def_survey_header = models.ForeignKey(
        'well_core.DefinitiveSurveyHeader',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='scenarios',
    )

    class Meta:
        db_table = 'well_core_scenario'
        indexes = [
            models.Index(fields=['well', 'wellbore', 'scenario_id'], name='wc_scenario_scope_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"Scenario<{self.scenario_id} {self.phase}>"
