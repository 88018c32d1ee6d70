from __future__ import annotations

import json
from datetime import datetime, time
from typing import Any

from django.core.management.base import BaseCommand, CommandError, CommandParser
from django.core.serializers.json import DjangoJSONEncoder
from django.utils import timezone
from django.utils.dateparse import parse_date

from apps.schematic.services.schematic_service import assemble_schematic
from apps.well_core.services.wellbore_path import WellborePathCycleError


class Command(BaseCommand):
    help = "Assemble the schematic of a wellbore as of a date and print it as JSON."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--well", dest="well_id", required=True, help="Well id")
        parser.add_argument("--wellbore", dest="wellbore_id", required=True, help="Target wellbore id")
        parser.add_argument("--scenario", dest="scenario_id", required=True, help="Scenario id; its phase picks actual or design")
        parser.add_argument("--date", dest="date", default=None, help="As-of date YYYY-MM-DD (default: today)")
        parser.add_argument("--indent", dest="indent", type=int, default=2)

    def handle(self, *args: Any, **options: Any) -> None:
        raw_date = options.get("date")
        if raw_date:
            day = parse_date(raw_date)
            if day is None:
                raise CommandError(f"Invalid --date {raw_date!r}; expected YYYY-MM-DD")
        else:
            day = timezone.localdate()
        as_of = timezone.make_aware(datetime.combine(day, time.min))

        try:
            schematic = assemble_schematic(options["well_id"], options["wellbore_id"], options["scenario_id"], as_of)
        except WellborePathCycleError as e:
            raise CommandError(str(e))

        if schematic is None:
            self.stderr.write(json.dumps({"error": "not_found", "well_id": options["well_id"], "wellbore_id": options["wellbore_id"]}))
            return

        self.stdout.write(json.dumps(schematic.to_dict(), cls=DjangoJSONEncoder, indent=options["indent"], ensure_ascii=False))
