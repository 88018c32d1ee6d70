from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    AnnulusElement,
    AnnulusTest,
    BarrierDiagram,
    BarrierElement,
    BarrierEnvelope,
    BarrierEnvelopeTest,
    BarrierElementTestLinkAudit,
)


@admin.register(BarrierDiagram)
class BarrierDiagramAdmin(admin.ModelAdmin):
    list_display = ('barrier_diagram_id', 'well_id', 'wellbore_id', 'scenario_id', 'diagram_date', 'status')
    list_filter = ('diagram_date',)
    search_fields = ('barrier_diagram_id', 'well_id', 'wellbore_id', 'scenario_id')
    readonly_fields = ('created_at', 'updated_at')


@admin.register(BarrierEnvelope)
class BarrierEnvelopeAdmin(SimpleHistoryAdmin):
    """Envelope status changes are browsable through the history view."""
    list_display = ('barrier_envelope_id', 'barrier_diagram', 'name', 'status', 'updated_at')
    list_filter = ('status', 'name')
    search_fields = ('barrier_envelope_id', 'name', 'well_id')
    history_list_display = ['status']


@admin.register(BarrierElement)
class BarrierElementAdmin(admin.ModelAdmin):
    list_display = ('barrier_element_id', 'barrier_envelope', 'element_type', 'ref_id', 'top_depth', 'base_depth')
    list_filter = ('element_type',)
    search_fields = ('ref_id', 'barrier_element_id')


@admin.register(BarrierEnvelopeTest)
class BarrierEnvelopeTestAdmin(admin.ModelAdmin):
    list_display = ('barrier_envelope_test_id', 'barrier_envelope', 'status', 'last_test_date', 'create_user')
    list_filter = ('status',)


@admin.register(BarrierElementTestLinkAudit)
class BarrierElementTestLinkAuditAdmin(admin.ModelAdmin):
    list_display = ('barrier_element_id', 'ref_id', 'status', 'last_test_date', 'create_user', 'audited_at')
    list_filter = ('status',)
    search_fields = ('ref_id', 'barrier_element_id')
    readonly_fields = [f.name for f in BarrierElementTestLinkAudit._meta.fields]


@admin.register(AnnulusElement)
class AnnulusElementAdmin(admin.ModelAdmin):
    list_display = ('annulus_element_id', 'barrier_diagram', 'name', 'pressure', 'density')


@admin.register(AnnulusTest)
class AnnulusTestAdmin(admin.ModelAdmin):
    list_display = ('annulus_test_id', 'annulus_element', 'test_type', 'pressure', 'location', 'last_test_date')
    list_filter = ('test_type',)
