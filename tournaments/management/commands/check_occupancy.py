from django.core.management.base import BaseCommand, CommandError
from tournaments.catalog import count_mismatches

class Command(BaseCommand):
    help = "Reports tournaments whose occupancy differs from their registered-row count"

    def handle(self, *args, **options):
        mismatches = list(count_mismatches())
        for tournament_id, occupancy, registered in mismatches:
            self.stdout.write(self.style.ERROR(
                f"MISMATCH: tournament {tournament_id} occupancy={occupancy} registered={registered}"
            ))
        if mismatches:
            raise CommandError(f"{len(mismatches)} tournament(s) violate the occupancy invariant")
        self.stdout.write(self.style.SUCCESS("OK: occupancy matches registrations for every tournament"))
