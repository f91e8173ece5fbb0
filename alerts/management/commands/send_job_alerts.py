from django.core.management.base import BaseCommand

from alerts.services import process_alerts


class Command(BaseCommand):
    help = "Email a digest of new matching jobs for every due job alert."

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help="List what would be sent without recording or sending anything.",
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        results = process_alerts(dry_run=dry_run)

        for alert, jobs, notification in results:
            outcome = "would send" if dry_run else notification.status
            self.stdout.write(f"Alert {alert.id} ({alert.name}): {len(jobs)} job(s), {outcome}")

        self.stdout.write(self.style.SUCCESS(f"Processed {len(results)} alert(s)"))
