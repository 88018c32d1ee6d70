from io import StringIO

import pytest
from django.core.management import call_command
from django.db import connection
from django.db.migrations.loader import MigrationLoader


def test_initial_migrations_are_registered():
    loader = MigrationLoader(None, ignore_no_migrations=True)
    assert ("well_core", "0001_initial") in loader.disk_migrations
    assert ("barriers", "0001_initial") in loader.disk_migrations


@pytest.mark.django_db
def test_migrated_tables_include_envelope_history():
    tables = connection.introspection.table_names()
    for table in (
        "well_core_wellbore",
        "well_core_final_load_simm",
        "barriers_envelope",
        "barriers_historicalbarrierenvelope",
        "barriers_annulus_test",
    ):
        assert table in tables


@pytest.mark.django_db
def test_models_have_no_pending_migrations():
    out = StringIO()
    call_command("makemigrations", "well_core", "barriers", "--check", "--dry-run", stdout=out)
    assert "No changes detected" in out.getvalue()
