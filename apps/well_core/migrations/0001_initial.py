# Generated migration for well, wellbore and in-hole equipment models

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        # Well identity and datums
        migrations.CreateModel(
            name="Well",
            fields=[
                ("well_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("well_common_name", models.CharField(blank=True, max_length=128)),
                ("well_legal_name", models.CharField(blank=True, max_length=128)),
                ("field_name", models.CharField(blank=True, max_length=128)),
                ("is_offshore", models.BooleanField(default=False)),
                ("water_depth", models.FloatField(blank=True, null=True)),
                ("wellhead_depth", models.FloatField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "well_core_well",
            },
        ),
        migrations.CreateModel(
            name="Datum",
            fields=[
                ("datum_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("datum_name", models.CharField(blank=True, max_length=64)),
                ("datum_elevation", models.FloatField(blank=True, null=True)),
                ("is_default", models.BooleanField(default=False)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="datums", to="well_core.well")),
            ],
            options={
                "db_table": "well_core_datum",
                "indexes": [models.Index(fields=["well", "is_default"], name="wc_datum_default_idx")],
            },
        ),
        # Wellbores, surveys and scenarios
        migrations.CreateModel(
            name="Wellbore",
            fields=[
                ("wellbore_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("wellbore_name", models.CharField(blank=True, max_length=128)),
                ("ko_md", models.FloatField(blank=True, help_text="Kickoff measured depth on the parent wellbore", null=True)),
                ("ko_tvd", models.FloatField(blank=True, help_text="Kickoff true vertical depth on the parent wellbore", null=True)),
                ("parent_wellbore", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="sidetracks", to="well_core.wellbore")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="wellbores", to="well_core.well")),
            ],
            options={
                "db_table": "well_core_wellbore",
                "indexes": [models.Index(fields=["well", "wellbore_id"], name="wc_wellbore_well_idx")],
            },
        ),
        migrations.CreateModel(
            name="DefinitiveSurveyHeader",
            fields=[
                ("def_survey_header_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("name", models.CharField(blank=True, max_length=128)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="survey_headers", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="survey_headers", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_definitive_survey_header",
            },
        ),
        migrations.CreateModel(
            name="SurveyStation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("md", models.FloatField()),
                ("inclination", models.FloatField(blank=True, null=True)),
                ("azimuth", models.FloatField(blank=True, null=True)),
                ("tvd", models.FloatField(blank=True, null=True)),
                ("offset_north", models.FloatField(blank=True, null=True)),
                ("offset_east", models.FloatField(blank=True, null=True)),
                ("header", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="stations", to="well_core.definitivesurveyheader")),
            ],
            options={
                "db_table": "well_core_survey_station",
                "ordering": ["md"],
                "indexes": [models.Index(fields=["header", "md"], name="wc_station_header_md_idx")],
            },
        ),
        migrations.CreateModel(
            name="Scenario",
            fields=[
                ("scenario_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("name", models.CharField(blank=True, max_length=128)),
                ("phase", models.CharField(choices=[("ACTUAL", "Actual"), ("PLAN", "Plan"), ("PROTOTYPE", "Prototype")], default="ACTUAL", max_length=16)),
                ("def_survey_header", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="scenarios", to="well_core.definitivesurveyheader")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="scenarios", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="scenarios", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_scenario",
                "indexes": [models.Index(fields=["well", "wellbore", "scenario_id"], name="wc_scenario_scope_idx")],
            },
        ),
        # Hole sections
        migrations.CreateModel(
            name="HoleSectionGroup",
            fields=[
                ("hole_sect_group_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("hole_name", models.CharField(blank=True, max_length=128)),
                ("phase", models.CharField(default="ACTUAL", max_length=16)),
                ("md_hole_sect_top", models.FloatField()),
                ("md_hole_sect_base", models.FloatField()),
                ("date_sect_start", models.DateTimeField(blank=True, null=True)),
                ("date_sect_end", models.DateTimeField(blank=True, null=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hole_section_groups", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hole_section_groups", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_hole_sect_group",
                "indexes": [models.Index(fields=["well", "wellbore", "phase"], name="wc_holesect_phase_idx")],
            },
        ),
        migrations.CreateModel(
            name="HoleSection",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("diameter", models.FloatField()),
                ("md_top", models.FloatField(blank=True, null=True)),
                ("md_base", models.FloatField(blank=True, null=True)),
                ("group", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sections", to="well_core.holesectiongroup")),
            ],
            options={
                "db_table": "well_core_hole_sect",
            },
        ),
        migrations.CreateModel(
            name="WellboreIntegrityTest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("test_type", models.CharField(blank=True, max_length=16, null=True)),
                ("date_test", models.DateTimeField(blank=True, null=True)),
                ("lot_md", models.FloatField(blank=True, null=True)),
                ("lot_tvd", models.FloatField(blank=True, null=True)),
                ("weight_lot_emw", models.FloatField(blank=True, null=True)),
                ("weight_lot_amw", models.FloatField(blank=True, null=True)),
                ("lot_press", models.FloatField(blank=True, null=True)),
                ("total_bh_press", models.FloatField(blank=True, null=True)),
                ("hole_sect_group", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="integrity_tests", to="well_core.holesectiongroup")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="integrity_tests", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="integrity_tests", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_wellbore_integ",
            },
        ),
        # Run strings and their components
        migrations.CreateModel(
            name="Assembly",
            fields=[
                ("assembly_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("assembly_name", models.CharField(blank=True, max_length=128)),
                ("string_type", models.CharField(db_index=True, max_length=32)),
                ("phase", models.CharField(default="ACTUAL", max_length=16)),
                ("is_casing_liner", models.BooleanField(default=False)),
                ("susp_point", models.CharField(blank=True, help_text="Liner suspension point", max_length=64, null=True)),
                ("assembly_size", models.FloatField(blank=True, help_text="Nominal OD (in)", null=True)),
                ("md_assembly_top", models.FloatField()),
                ("md_assembly_base", models.FloatField()),
                ("tvd_assembly_top", models.FloatField(blank=True, null=True)),
                ("tvd_assembly_base", models.FloatField(blank=True, null=True)),
                ("date_in", models.DateTimeField(blank=True, null=True)),
                ("date_out", models.DateTimeField(blank=True, null=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assemblies", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assemblies", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_assembly",
                "indexes": [
                    models.Index(fields=["well", "wellbore", "phase"], name="wc_assembly_phase_idx"),
                    models.Index(fields=["md_assembly_top", "md_assembly_base"], name="wc_assembly_md_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="AssemblyComponent",
            fields=[
                ("assembly_comp_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("sequence_no", models.IntegerField(default=0)),
                ("sect_type_code", models.CharField(blank=True, max_length=16)),
                ("comp_type_code", models.CharField(blank=True, max_length=16)),
                ("manufacturer", models.CharField(blank=True, max_length=128, null=True)),
                ("model", models.CharField(blank=True, max_length=128, null=True)),
                ("serial_no", models.CharField(blank=True, max_length=64, null=True)),
                ("catalog_key_desc", models.CharField(blank=True, max_length=255, null=True)),
                ("description", models.CharField(blank=True, max_length=255, null=True)),
                ("md_top", models.FloatField()),
                ("md_base", models.FloatField()),
                ("length", models.FloatField(blank=True, null=True)),
                ("joints", models.IntegerField(blank=True, null=True)),
                ("od_body", models.FloatField(blank=True, null=True)),
                ("id_body", models.FloatField(blank=True, null=True)),
                ("grade_id", models.CharField(blank=True, max_length=32, null=True)),
                ("grade", models.CharField(blank=True, max_length=32, null=True)),
                ("approximate_weight", models.FloatField(blank=True, null=True)),
                ("press_rating_top", models.FloatField(blank=True, null=True)),
                ("press_rating_bottom", models.FloatField(blank=True, null=True)),
                ("pressure_burst", models.FloatField(blank=True, null=True)),
                ("pressure_collapse", models.FloatField(blank=True, null=True)),
                ("assembly", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="components", to="well_core.assembly")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assembly_components", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assembly_components", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_assembly_comp",
                "ordering": ["sequence_no"],
                "indexes": [models.Index(fields=["assembly", "sequence_no"], name="wc_asmcomp_seq_idx")],
            },
        ),
        migrations.CreateModel(
            name="SafetyValve",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("recorded_opening_pressure", models.FloatField(blank=True, null=True)),
                ("recorded_closing_pressure", models.FloatField(blank=True, null=True)),
                ("nominal_opening_pressure", models.FloatField(blank=True, null=True)),
                ("maximum_hydraulics_pressure", models.FloatField(blank=True, null=True)),
                ("function_test_pass_fail", models.CharField(blank=True, max_length=16, null=True)),
                ("component", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="safety_valve", to="well_core.assemblycomponent")),
            ],
            options={
                "db_table": "well_core_weqp_sssv",
            },
        ),
        migrations.CreateModel(
            name="Packer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("pressure_test_above", models.FloatField(blank=True, null=True)),
                ("pressure_test_below", models.FloatField(blank=True, null=True)),
                ("component", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="packer", to="well_core.assemblycomponent")),
            ],
            options={
                "db_table": "well_core_weqp_packer",
            },
        ),
        migrations.CreateModel(
            name="PipeCatalog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("grade", models.CharField(max_length=32)),
                ("od_body", models.FloatField()),
                ("nominal_weight", models.FloatField(blank=True, null=True)),
                ("internal_yield_press", models.FloatField(blank=True, null=True)),
                ("collapse_resistance", models.FloatField(blank=True, null=True)),
            ],
            options={
                "db_table": "well_core_pipe_catalog",
                "ordering": ["od_body", "grade"],
            },
        ),
        # Cement
        migrations.CreateModel(
            name="CementJob",
            fields=[
                ("cement_job_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("job_type", models.CharField(blank=True, max_length=64)),
                ("job_start_date", models.DateTimeField(blank=True, null=True)),
                ("is_drilled_out", models.BooleanField(default=False)),
                ("plug_type", models.CharField(blank=True, max_length=64, null=True)),
                ("date_report", models.DateTimeField(blank=True, null=True)),
                ("casing_test_press", models.FloatField(blank=True, null=True)),
                ("casing_test_duration", models.FloatField(blank=True, null=True)),
                ("test_comments", models.TextField(blank=True, null=True)),
                ("is_liner_neg_test_tool", models.CharField(blank=True, max_length=64, null=True)),
                ("liner_emw_neg_test", models.FloatField(blank=True, null=True)),
                ("assembly", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cement_jobs", to="well_core.assembly")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cement_jobs", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cement_jobs", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_cement_job",
                "indexes": [models.Index(fields=["well", "wellbore", "assembly"], name="wc_cemjob_well_wb_asm_idx")],
            },
        ),
        migrations.CreateModel(
            name="CementStage",
            fields=[
                ("cement_stage_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("stage_no", models.IntegerField(default=1)),
                ("md_top", models.FloatField()),
                ("md_base", models.FloatField()),
                ("tvd_top", models.FloatField(blank=True, null=True)),
                ("job", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="stages", to="well_core.cementjob")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cement_stages", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cement_stages", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_cement_stage",
                "indexes": [models.Index(fields=["md_top", "md_base"], name="wc_cemstage_md_idx")],
            },
        ),
        # Openings
        migrations.CreateModel(
            name="WellboreOpening",
            fields=[
                ("wellbore_opening_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("opening_name", models.CharField(blank=True, max_length=128)),
                ("md_top", models.FloatField()),
                ("md_base", models.FloatField()),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="openings", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="openings", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_wellbore_opening",
                "indexes": [models.Index(fields=["well", "wellbore"], name="wc_opening_well_wb_idx")],
            },
        ),
        migrations.CreateModel(
            name="OpeningStatus",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(max_length=32)),
                ("effective_date", models.DateTimeField()),
                ("opening", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="statuses", to="well_core.wellboreopening")),
            ],
            options={
                "db_table": "well_core_opening_status",
                "ordering": ["-effective_date"],
                "indexes": [models.Index(fields=["opening", "effective_date"], name="wc_opstatus_open_date_idx")],
            },
        ),
        # Fluids
        migrations.CreateModel(
            name="DrillingFluid",
            fields=[
                ("fluid_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("event_id", models.CharField(blank=True, max_length=32)),
                ("check_date", models.DateTimeField()),
                ("fluid_name", models.CharField(blank=True, max_length=128)),
                ("density", models.FloatField(blank=True, null=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="drilling_fluids", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="drilling_fluids", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_fluid",
                "indexes": [models.Index(fields=["well", "wellbore", "check_date"], name="wc_fluid_well_wb_date_idx")],
            },
        ),
        migrations.CreateModel(
            name="CompletionFluid",
            fields=[
                ("completion_fluid_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("event_id", models.CharField(blank=True, max_length=32)),
                ("fluid_type", models.CharField(blank=True, max_length=128)),
                ("fluid_density", models.FloatField(blank=True, null=True)),
                ("md_top", models.FloatField()),
                ("md_base", models.FloatField()),
                ("install_date", models.DateTimeField()),
                ("removal_date", models.DateTimeField(blank=True, null=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="completion_fluids", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="completion_fluids", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_completion_fluid",
                "indexes": [models.Index(fields=["well", "wellbore", "install_date"], name="wc_compfluid_install_idx")],
            },
        ),
        # Wellhead
        migrations.CreateModel(
            name="Wellhead",
            fields=[
                ("wellhead_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("event_id", models.CharField(blank=True, max_length=32)),
                ("scenario", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="wellheads", to="well_core.scenario")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="wellheads", to="well_core.well")),
            ],
            options={
                "db_table": "well_core_wellhead",
            },
        ),
        migrations.CreateModel(
            name="WellheadComponent",
            fields=[
                ("wellhead_comp_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("event_id", models.CharField(blank=True, max_length=32)),
                ("sequence_no", models.IntegerField(default=0)),
                ("sect_type_code", models.CharField(blank=True, max_length=16)),
                ("comp_type_code", models.CharField(blank=True, max_length=16)),
                ("make", models.CharField(blank=True, max_length=128, null=True)),
                ("model", models.CharField(blank=True, max_length=128, null=True)),
                ("working_press_rating", models.FloatField(blank=True, null=True)),
                ("wellhead_section", models.CharField(blank=True, max_length=64, null=True)),
                ("comments", models.TextField(blank=True, null=True)),
                ("test_result", models.CharField(blank=True, max_length=32, null=True)),
                ("test_duration", models.FloatField(blank=True, null=True)),
                ("test_pressure", models.FloatField(blank=True, null=True)),
                ("install_date", models.DateTimeField()),
                ("removal_date", models.DateTimeField(blank=True, null=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="wellhead_components", to="well_core.well")),
                ("wellhead", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="components", to="well_core.wellhead")),
            ],
            options={
                "db_table": "well_core_wellhead_comp",
                "ordering": ["sequence_no"],
                "indexes": [models.Index(fields=["well", "install_date"], name="wc_whcomp_install_idx")],
            },
        ),
        migrations.CreateModel(
            name="WellheadOutlet",
            fields=[
                ("outlet_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("sequence_no", models.IntegerField(default=0)),
                ("sect_type_code", models.CharField(blank=True, max_length=16)),
                ("comp_type_code", models.CharField(blank=True, max_length=16)),
                ("outlet_location", models.CharField(blank=True, max_length=64, null=True)),
                ("outlet_working_press", models.CharField(blank=True, max_length=32, null=True)),
                ("valve_make", models.CharField(blank=True, max_length=128, null=True)),
                ("valve_model", models.CharField(blank=True, max_length=128, null=True)),
                ("valve_install_date", models.DateTimeField()),
                ("valve_removal_date", models.DateTimeField(blank=True, null=True)),
                ("component", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="outlets", to="well_core.wellheadcomponent")),
            ],
            options={
                "db_table": "well_core_wellhead_comp_outlet",
                "ordering": ["sequence_no"],
            },
        ),
        migrations.CreateModel(
            name="WellheadHanger",
            fields=[
                ("wellhead_hanger_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("comp_type_code", models.CharField(blank=True, max_length=16)),
                ("model", models.CharField(blank=True, max_length=128, null=True)),
                ("hanger_size", models.FloatField(blank=True, null=True)),
                ("assembly", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="hangers", to="well_core.assembly")),
                ("component", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="hangers", to="well_core.wellheadcomponent")),
            ],
            options={
                "db_table": "well_core_wellhead_hanger",
            },
        ),
        migrations.CreateModel(
            name="WellheadAnnularPressure",
            fields=[
                ("wellhead_ann_press_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("annulus", models.CharField(blank=True, max_length=32)),
                ("sequence_no", models.CharField(blank=True, max_length=16)),
                ("pressure", models.FloatField(blank=True, null=True)),
                ("test_date", models.DateTimeField(blank=True, null=True)),
                ("comments", models.TextField(blank=True, null=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="annular_pressures", to="well_core.well")),
                ("wellhead", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="annular_pressures", to="well_core.wellhead")),
            ],
            options={
                "db_table": "well_core_wellhead_annular_pres",
                "indexes": [models.Index(fields=["well", "wellhead"], name="wc_whannpress_well_idx")],
            },
        ),
        migrations.CreateModel(
            name="WellheadPressureRelief",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("annulus", models.CharField(blank=True, max_length=32)),
                ("sequence_no", models.CharField(blank=True, max_length=16)),
                ("drain_date", models.DateTimeField(blank=True, null=True)),
                ("drained_fluid_type", models.CharField(blank=True, max_length=64, null=True)),
                ("drained_press_from", models.FloatField(blank=True, null=True)),
                ("drained_press_to", models.FloatField(blank=True, null=True)),
                ("drained_volume", models.FloatField(blank=True, null=True)),
                ("estimated_fluid_level", models.CharField(blank=True, max_length=64, null=True)),
                ("fluid_density", models.FloatField(blank=True, null=True)),
                ("fluid_level", models.FloatField(blank=True, null=True)),
                ("max_press", models.FloatField(blank=True, null=True)),
                ("comments", models.TextField(blank=True, null=True)),
                ("annular_pressure", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pressure_reliefs", to="well_core.wellheadannularpressure")),
            ],
            options={
                "db_table": "well_core_wellhead_press_relief",
            },
        ),
        # Subsurface
        migrations.CreateModel(
            name="WellboreGradient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kind", models.CharField(choices=[("PP", "Pore pressure"), ("FRAC", "Fracture"), ("TEMP", "Temperature")], db_index=True, max_length=8)),
                ("formation", models.CharField(blank=True, max_length=128)),
                ("depth_tvd", models.FloatField()),
                ("value", models.FloatField(help_text="Pressure for PP/FRAC, temperature for TEMP")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="gradients", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="gradients", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_wellbore_gradient",
                "ordering": ["depth_tvd"],
                "indexes": [models.Index(fields=["well", "wellbore", "kind"], name="wc_gradient_kind_idx")],
            },
        ),
        migrations.CreateModel(
            name="WellboreFormation",
            fields=[
                ("wellbore_formation_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("formation_name", models.CharField(blank=True, max_length=128)),
                ("lithology_name", models.CharField(blank=True, max_length=64, null=True)),
                ("strat_unit_name", models.CharField(blank=True, max_length=128, null=True)),
                ("prognosed_md", models.FloatField(blank=True, null=True)),
                ("comments", models.TextField(blank=True, null=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="formations", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="formations", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_wellbore_formation",
            },
        ),
        migrations.CreateModel(
            name="FormationPick",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("md_top", models.FloatField(blank=True, null=True)),
                ("md_base", models.FloatField(blank=True, null=True)),
                ("tvd_top", models.FloatField(blank=True, null=True)),
                ("tvd_base", models.FloatField(blank=True, null=True)),
                ("phase", models.CharField(blank=True, max_length=16, null=True)),
                ("formation", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="pick", to="well_core.wellboreformation")),
            ],
            options={
                "db_table": "well_core_formation_pick",
            },
        ),
        migrations.CreateModel(
            name="ScenarioFormationLink",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_log", models.BooleanField(default=False)),
                ("formation", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="scenario_links", to="well_core.wellboreformation")),
                ("scenario", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="formation_links", to="well_core.scenario")),
            ],
            options={
                "db_table": "well_core_scenario_formation_link",
                "constraints": [models.UniqueConstraint(fields=("scenario", "formation"), name="uniq_scenario_formation")],
            },
        ),
        migrations.CreateModel(
            name="LogInterval",
            fields=[
                ("log_interval_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("log_date", models.DateTimeField(blank=True, null=True)),
                ("service", models.CharField(blank=True, max_length=128)),
                ("md_top", models.FloatField(blank=True, null=True)),
                ("md_base", models.FloatField(blank=True, null=True)),
                ("reason", models.CharField(blank=True, max_length=255, null=True)),
                ("comments", models.JSONField(blank=True, null=True)),
                ("assembly_name", models.CharField(blank=True, max_length=128, null=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="log_intervals", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="log_intervals", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_log_interval",
                "ordering": ["log_date"],
            },
        ),
        # Daily reports and casing derating
        migrations.CreateModel(
            name="DailyReport",
            fields=[
                ("report_journal_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("event_id", models.CharField(blank=True, max_length=32)),
                ("report_no", models.IntegerField(blank=True, null=True)),
                ("date_report", models.DateTimeField()),
                ("status_summary", models.TextField(blank=True)),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="daily_reports", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="daily_reports", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_daily_report",
                "indexes": [models.Index(fields=["well", "wellbore", "-date_report"], name="wc_dailyrep_date_idx")],
            },
        ),
        migrations.CreateModel(
            name="PressureSurvey",
            fields=[
                ("pressure_survey_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("daily_report", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pressure_surveys", to="well_core.dailyreport")),
                ("well", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pressure_surveys", to="well_core.well")),
                ("wellbore", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="pressure_surveys", to="well_core.wellbore")),
            ],
            options={
                "db_table": "well_core_pressure_survey",
            },
        ),
        migrations.CreateModel(
            name="FinalLoadSimm",
            fields=[
                ("final_load_simm_id", models.CharField(max_length=32, primary_key=True, serialize=False)),
                ("trapped_volume_id", models.CharField(blank=True, max_length=32)),
                ("assembly_name", models.CharField(blank=True, max_length=64)),
                ("sequence_no", models.IntegerField(blank=True, null=True)),
                ("casing_od", models.FloatField(blank=True, null=True)),
                ("top_interval", models.FloatField(blank=True, null=True)),
                ("base_interval", models.FloatField(blank=True, null=True)),
                ("wear", models.FloatField(blank=True, null=True)),
                ("ovality", models.FloatField(blank=True, null=True)),
                ("nom_burst_pressure", models.FloatField(blank=True, null=True)),
                ("nom_collapse_pressure", models.FloatField(blank=True, null=True)),
                ("calc_burst_pressure", models.FloatField(blank=True, null=True)),
                ("calc_collapse_pressure", models.FloatField(blank=True, null=True)),
                ("comments", models.TextField(blank=True)),
                ("pressure_survey", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="final_loads", to="well_core.pressuresurvey")),
            ],
            options={
                "db_table": "well_core_final_load_simm",
                "indexes": [models.Index(fields=["pressure_survey", "sequence_no"], name="wc_finalload_seq_idx")],
            },
        ),
    ]
