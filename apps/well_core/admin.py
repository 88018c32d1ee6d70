from django.contrib import admin

from .models import (
    Well,
    Datum,
    Wellbore,
    Scenario,
    HoleSectionGroup,
    Assembly,
    AssemblyComponent,
    CementJob,
    CementStage,
    WellboreOpening,
    CompletionFluid,
    DrillingFluid,
    WellheadComponent,
    DailyReport,
    PressureSurvey,
    FinalLoadSimm,
)


class DatumInline(admin.TabularInline):
    model = Datum
    extra = 0


@admin.register(Well)
class WellAdmin(admin.ModelAdmin):
    """Admin interface for physical wells."""
    list_display = ('well_id', 'well_common_name', 'field_name', 'is_offshore', 'water_depth')
    list_filter = ('is_offshore',)
    search_fields = ('well_id', 'well_common_name', 'well_legal_name', 'field_name')
    readonly_fields = ('created_at', 'updated_at')
    inlines = [DatumInline]


@admin.register(Wellbore)
class WellboreAdmin(admin.ModelAdmin):
    list_display = ('wellbore_id', 'well', 'wellbore_name', 'parent_wellbore', 'ko_md', 'ko_tvd')
    search_fields = ('wellbore_id', 'wellbore_name', 'well__well_id')
    raw_id_fields = ('well', 'parent_wellbore')


@admin.register(Scenario)
class ScenarioAdmin(admin.ModelAdmin):
    list_display = ('scenario_id', 'well', 'wellbore', 'name', 'phase')
    list_filter = ('phase',)
    search_fields = ('scenario_id', 'name', 'well__well_id')


@admin.register(HoleSectionGroup)
class HoleSectionGroupAdmin(admin.ModelAdmin):
    list_display = ('hole_sect_group_id', 'wellbore', 'hole_name', 'phase', 'md_hole_sect_top', 'md_hole_sect_base')
    list_filter = ('phase',)
    search_fields = ('hole_sect_group_id', 'hole_name', 'wellbore__wellbore_id')


class AssemblyComponentInline(admin.TabularInline):
    model = AssemblyComponent
    extra = 0
    fields = ('assembly_comp_id', 'sequence_no', 'sect_type_code', 'comp_type_code', 'md_top', 'md_base', 'length')


@admin.register(Assembly)
class AssemblyAdmin(admin.ModelAdmin):
    """Admin interface for casing, liner and completion strings."""
    list_display = ('assembly_id', 'wellbore', 'assembly_name', 'string_type', 'phase', 'md_assembly_top', 'md_assembly_base', 'date_in', 'date_out')
    list_filter = ('string_type', 'phase')
    search_fields = ('assembly_id', 'assembly_name', 'wellbore__wellbore_id')
    inlines = [AssemblyComponentInline]


class CementStageInline(admin.TabularInline):
    model = CementStage
    extra = 0
    fk_name = 'job'


@admin.register(CementJob)
class CementJobAdmin(admin.ModelAdmin):
    list_display = ('cement_job_id', 'wellbore', 'assembly', 'job_type', 'job_start_date', 'is_drilled_out')
    list_filter = ('job_type', 'is_drilled_out')
    inlines = [CementStageInline]


@admin.register(WellboreOpening)
class WellboreOpeningAdmin(admin.ModelAdmin):
    list_display = ('wellbore_opening_id', 'wellbore', 'opening_name', 'md_top', 'md_base')


@admin.register(DrillingFluid)
class DrillingFluidAdmin(admin.ModelAdmin):
    list_display = ('fluid_id', 'wellbore', 'fluid_name', 'density', 'check_date')
    date_hierarchy = 'check_date'


@admin.register(CompletionFluid)
class CompletionFluidAdmin(admin.ModelAdmin):
    list_display = ('completion_fluid_id', 'wellbore', 'fluid_type', 'fluid_density', 'md_top', 'md_base', 'install_date', 'removal_date')


@admin.register(WellheadComponent)
class WellheadComponentAdmin(admin.ModelAdmin):
    list_display = ('wellhead_comp_id', 'wellhead', 'sequence_no', 'sect_type_code', 'comp_type_code', 'install_date', 'removal_date')


@admin.register(DailyReport)
class DailyReportAdmin(admin.ModelAdmin):
    list_display = ('report_journal_id', 'wellbore', 'report_no', 'date_report')
    date_hierarchy = 'date_report'


class FinalLoadSimmInline(admin.TabularInline):
    model = FinalLoadSimm
    extra = 0
    fields = ('final_load_simm_id', 'sequence_no', 'assembly_name', 'top_interval', 'base_interval', 'wear', 'calc_burst_pressure', 'calc_collapse_pressure')


@admin.register(PressureSurvey)
class PressureSurveyAdmin(admin.ModelAdmin):
    list_display = ('pressure_survey_id', 'wellbore', 'daily_report')
    raw_id_fields = ('well', 'wellbore', 'daily_report')
    inlines = [FinalLoadSimmInline]
