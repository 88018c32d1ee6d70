# Generated migration for barrier diagram, evaluation and annulus models

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import simple_history.models

import apps.barriers.services.short_ids


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        # Diagram, envelopes and elements
        migrations.CreateModel(
            name="BarrierDiagram",
            fields=[
                ("barrier_diagram_id", models.CharField(default=apps.barriers.services.short_ids.make_short_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("well_id", models.CharField(db_index=True, max_length=32)),
                ("wellbore_id", models.CharField(max_length=32)),
                ("scenario_id", models.CharField(max_length=32)),
                ("diagram_date", models.DateTimeField()),
                ("description", models.CharField(blank=True, max_length=255)),
                ("comments", models.TextField(blank=True)),
                ("status", models.CharField(blank=True, max_length=32, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "barriers_diagram",
                "ordering": ["-diagram_date"],
                "indexes": [models.Index(fields=["well_id", "wellbore_id", "scenario_id"], name="bar_diagram_scope_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("well_id", "wellbore_id", "scenario_id", "diagram_date"), name="uniq_barrier_diagram_natural_key"),
                ],
            },
        ),
        migrations.CreateModel(
            name="BarrierEnvelope",
            fields=[
                ("barrier_envelope_id", models.CharField(default=apps.barriers.services.short_ids.make_short_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("well_id", models.CharField(max_length=32)),
                ("wellbore_id", models.CharField(max_length=32)),
                ("scenario_id", models.CharField(max_length=32)),
                ("name", models.CharField(max_length=64)),
                ("color", models.CharField(blank=True, max_length=32, null=True)),
                ("status", models.CharField(blank=True, max_length=32, null=True)),
                ("sequence_no", models.IntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("barrier_diagram", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="envelopes", to="barriers.barrierdiagram")),
            ],
            options={
                "db_table": "barriers_envelope",
                "constraints": [models.UniqueConstraint(fields=("barrier_diagram", "name"), name="uniq_barrier_envelope_name")],
            },
        ),
        # Status history of envelopes
        migrations.CreateModel(
            name="HistoricalBarrierEnvelope",
            fields=[
                ("barrier_envelope_id", models.CharField(db_index=True, default=apps.barriers.services.short_ids.make_short_id, editable=False, max_length=32)),
                ("well_id", models.CharField(max_length=32)),
                ("wellbore_id", models.CharField(max_length=32)),
                ("scenario_id", models.CharField(max_length=32)),
                ("name", models.CharField(max_length=64)),
                ("color", models.CharField(blank=True, max_length=32, null=True)),
                ("status", models.CharField(blank=True, max_length=32, null=True)),
                ("sequence_no", models.IntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(blank=True, editable=False)),
                ("updated_at", models.DateTimeField(blank=True, editable=False)),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                ("history_type", models.CharField(choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")], max_length=1)),
                ("barrier_diagram", models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name="+", to="barriers.barrierdiagram")),
                ("history_user", models.ForeignKey(db_constraint=False, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "historical barrier envelope",
                "verbose_name_plural": "historical barrier envelopes",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name="BarrierElement",
            fields=[
                ("barrier_element_id", models.CharField(default=apps.barriers.services.short_ids.make_short_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("well_id", models.CharField(max_length=32)),
                ("wellbore_id", models.CharField(max_length=32)),
                ("scenario_id", models.CharField(max_length=32)),
                ("ref_id", models.CharField(db_index=True, max_length=255)),
                ("element_type", models.CharField(max_length=32)),
                ("wellhead_comp_id", models.CharField(blank=True, max_length=32, null=True)),
                ("wellhead_hanger_id", models.CharField(blank=True, max_length=32, null=True)),
                ("wellhead_outlet_id", models.CharField(blank=True, max_length=32, null=True)),
                ("wellbore_formation_id", models.CharField(blank=True, max_length=32, null=True)),
                ("hole_sect_group_id", models.CharField(blank=True, max_length=32, null=True)),
                ("assembly_id", models.CharField(blank=True, max_length=32, null=True)),
                ("assembly_comp_id", models.CharField(blank=True, max_length=32, null=True)),
                ("cement_job_id", models.CharField(blank=True, max_length=32, null=True)),
                ("cement_stage_id", models.CharField(blank=True, max_length=32, null=True)),
                ("wellbore_opening_id", models.CharField(blank=True, max_length=32, null=True)),
                ("fluid_id", models.CharField(blank=True, max_length=32, null=True)),
                ("top_depth", models.FloatField(blank=True, null=True)),
                ("base_depth", models.FloatField(blank=True, null=True)),
                ("component_ovality", models.FloatField(blank=True, null=True)),
                ("component_wearing", models.FloatField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("barrier_diagram", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="elements", to="barriers.barrierdiagram")),
                ("barrier_envelope", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="elements", to="barriers.barrierenvelope")),
            ],
            options={
                "db_table": "barriers_element",
                "indexes": [models.Index(fields=["well_id", "wellbore_id", "scenario_id", "ref_id"], name="bar_element_scope_ref_idx")],
                "constraints": [models.UniqueConstraint(fields=("barrier_envelope", "ref_id"), name="uniq_barrier_element_ref")],
            },
        ),
        # Evaluations and their audit copies
        migrations.CreateModel(
            name="BarrierEnvelopeTest",
            fields=[
                ("barrier_envelope_test_id", models.CharField(default=apps.barriers.services.short_ids.make_short_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("well_id", models.CharField(max_length=32)),
                ("wellbore_id", models.CharField(max_length=32)),
                ("scenario_id", models.CharField(max_length=32)),
                ("status", models.CharField(choices=[("Effective", "Effective"), ("Partially Effective", "Partially Effective"), ("Not Effective", "Not Effective")], max_length=32)),
                ("last_test_date", models.DateTimeField()),
                ("create_user", models.CharField(blank=True, max_length=150)),
                ("barrier_diagram", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="envelope_tests", to="barriers.barrierdiagram")),
                ("barrier_envelope", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="tests", to="barriers.barrierenvelope")),
            ],
            options={
                "db_table": "barriers_envelope_test",
                "indexes": [models.Index(fields=["barrier_envelope", "barrier_diagram"], name="bar_envtest_env_diag_idx")],
            },
        ),
        migrations.CreateModel(
            name="BarrierElementTestLink",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("ref_id", models.CharField(max_length=255)),
                ("status", models.CharField(blank=True, max_length=32, null=True)),
                ("component_ovality", models.FloatField(blank=True, null=True)),
                ("component_wearing", models.FloatField(blank=True, null=True)),
                ("details", models.TextField(blank=True)),
                ("last_test_date", models.DateTimeField()),
                ("create_user", models.CharField(blank=True, max_length=150)),
                ("barrier_diagram", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="element_test_links", to="barriers.barrierdiagram")),
                ("barrier_element", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="test_links", to="barriers.barrierelement")),
                ("barrier_envelope", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="test_links", to="barriers.barrierenvelope")),
                ("barrier_envelope_test", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="links", to="barriers.barrierenvelopetest")),
            ],
            options={
                "db_table": "barriers_element_test_link",
            },
        ),
        migrations.CreateModel(
            name="BarrierEnvelopeTestAudit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("barrier_envelope_test_id", models.CharField(db_index=True, max_length=32)),
                ("barrier_envelope_id", models.CharField(db_index=True, max_length=32)),
                ("barrier_diagram_id", models.CharField(max_length=32)),
                ("well_id", models.CharField(max_length=32)),
                ("wellbore_id", models.CharField(max_length=32)),
                ("scenario_id", models.CharField(max_length=32)),
                ("status", models.CharField(max_length=32)),
                ("last_test_date", models.DateTimeField()),
                ("create_user", models.CharField(blank=True, max_length=150)),
                ("audited_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "barriers_envelope_test_audit",
            },
        ),
        migrations.CreateModel(
            name="BarrierElementTestLinkAudit",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("barrier_envelope_test_id", models.CharField(max_length=32)),
                ("barrier_envelope_id", models.CharField(max_length=32)),
                ("barrier_diagram_id", models.CharField(max_length=32)),
                ("barrier_element_id", models.CharField(blank=True, db_index=True, max_length=32, null=True)),
                ("ref_id", models.CharField(max_length=255)),
                ("status", models.CharField(blank=True, max_length=32, null=True)),
                ("component_ovality", models.FloatField(blank=True, null=True)),
                ("component_wearing", models.FloatField(blank=True, null=True)),
                ("details", models.TextField(blank=True)),
                ("last_test_date", models.DateTimeField()),
                ("create_user", models.CharField(blank=True, max_length=150)),
                ("audited_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "barriers_element_test_link_audit",
                "ordering": ["-last_test_date"],
            },
        ),
        # Annulus operating limits
        migrations.CreateModel(
            name="AnnulusElement",
            fields=[
                ("annulus_element_id", models.CharField(default=apps.barriers.services.short_ids.make_short_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("well_id", models.CharField(max_length=32)),
                ("wellbore_id", models.CharField(max_length=32)),
                ("scenario_id", models.CharField(max_length=32)),
                ("name", models.CharField(max_length=32)),
                ("pressure", models.FloatField(blank=True, null=True)),
                ("density", models.FloatField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("barrier_diagram", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="annuli", to="barriers.barrierdiagram")),
            ],
            options={
                "db_table": "barriers_annulus_element",
                "ordering": ["name"],
                "constraints": [models.UniqueConstraint(fields=("barrier_diagram", "name"), name="uniq_annulus_element_name")],
            },
        ),
        migrations.CreateModel(
            name="AnnulusTest",
            fields=[
                ("annulus_test_id", models.CharField(default=apps.barriers.services.short_ids.make_short_id, editable=False, max_length=32, primary_key=True, serialize=False)),
                ("well_id", models.CharField(max_length=32)),
                ("wellbore_id", models.CharField(max_length=32)),
                ("scenario_id", models.CharField(max_length=32)),
                ("test_type", models.CharField(choices=[("MOP", "MOP"), ("MAWOP", "MAWOP"), ("MAASP", "MAASP")], max_length=8)),
                ("pressure", models.FloatField(blank=True, null=True)),
                ("location", models.CharField(blank=True, max_length=64, null=True)),
                ("last_test_date", models.DateTimeField()),
                ("create_user", models.CharField(blank=True, max_length=150)),
                ("annulus_element", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="tests", to="barriers.annuluselement")),
                ("barrier_diagram", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="annulus_tests", to="barriers.barrierdiagram")),
            ],
            options={
                "db_table": "barriers_annulus_test",
                "indexes": [models.Index(fields=["annulus_element", "test_type"], name="bar_anntest_elem_type_idx")],
            },
        ),
    ]
