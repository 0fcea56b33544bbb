# seotemplates/app/seo/management/commands/seo_sync.py
import logging

from django.core.management.base import BaseCommand

from seo.conf import get_collection

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Stores the default SEO setting of every registered page type that has no stored setting yet.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help="Only list the page types that would be stored.",
        )

    def handle(self, *args, **options):
        collection = get_collection()

        missing = [
            definition for definition in collection.definitions()
            if collection.repository.find_setting(definition.name) is None
        ]

        if not missing:
            self.stdout.write(self.style.SUCCESS('All registered page types already have stored SEO settings.'))
            return

        for definition in missing:
            if options['dry_run']:
                self.stdout.write(f"Would store default SEO setting for '{definition.name}'.")
                continue
            collection.save_page_setting(definition.name, definition.default_setting)
            logger.info(f"[seo_sync] Stored default SEO setting for '{definition.name}'.")

        if options['dry_run']:
            self.stdout.write(self.style.SUCCESS(f'{len(missing)} page type(s) have no stored SEO setting.'))
        else:
            self.stdout.write(self.style.SUCCESS(f'Successfully stored {len(missing)} default SEO setting(s).'))
