from django.db import models

from .assembly import Assembly
from .well import Well
from .wellbore import Wellbore


class CementJob(models.Model):
    cement_job_id = models.CharField(max_length=32, primary_key=True)
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='cement_jobs')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='cement_jobs')
    assembly = models.ForeignKey(Assembly, on_delete=models.CASCADE, related_name='cement_jobs')

    job_type = models.CharField(max_length=64, blank=True)
    job_start_date = models.DateTimeField(null=True, blank=True)
    is_drilled_out = models.BooleanField(default=False)
    plug_type = models.CharField(max_length=64, null=True, blank=True)
    date_report = models.DateTimeField(null=True, blank=True)

    casing_test_press = models.FloatField(null=True, blank=True)
    casing_test_duration = models.FloatField(null=True, blank=True)
    test_comments = models.TextField(null=True, blank=True)
    is_liner_neg_test_tool = models.CharField(max_length=64, null=True, blank=True)
    liner_emw_neg_test = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_cement_job'
        indexes = [
            models.Index(fields=['well', 'wellbore', 'assembly'], name='wc_cemjob_well_wb_asm_idx'),
        ]

    @property
    def is_plug(self) -> bool:
        return 'PLUG' in (self.job_type or '').upper()

    def __str__(self) -> str:  # pragma: no cover
        return f"CementJob<{self.cement_job_id} {self.job_type}>"


class CementStage(models.Model):
    cement_stage_id = models.CharField(max_length=32, primary_key=True)
    job = models.ForeignKey(CementJob, on_delete=models.CASCADE, related_name='stages')
    well = models.ForeignKey(Well, on_delete=models.CASCADE, related_name='cement_stages')
    wellbore = models.ForeignKey(Wellbore, on_delete=models.CASCADE, related_name='cement_stages')
    stage_no = models.IntegerField(default=1)

    md_top = models.FloatField()
    md_base = models.FloatField()
    tvd_top = models.FloatField(null=True, blank=True)

    class Meta:
        db_table = 'well_core_cement_stage'
        indexes = [
            models.Index(fields=['md_top', 'md_base'], name='wc_cemstage_md_idx'),
        ]

    def __str__(self) -> str:  # pragma: no cover
        return f"CementStage<{self.cement_stage_id} {self.md_top}-{self.md_base}>"
