from django.core.management.base import BaseCommand
from django.db import transaction
from loguru import logger

from catalog import models, seed


class Command(BaseCommand):
    help = "Load the sample categories, cities, events and ticket types."

    def handle(self, *args, **options):
        if models.Event.objects.exists():
            logger.info("Catalog already has events, skipping seed")
            return

        with transaction.atomic():
            categories = [models.Category.objects.create(**row) for row in seed.CATEGORIES]
            cities = [models.City.objects.create(**row) for row in seed.CITIES]
            events = []
            for row in seed.EVENTS:
                fields = dict(row)
                category = categories[fields.pop("category_id") - 1]
                city = cities[fields.pop("city_id") - 1]
                events.append(
                    models.Event.objects.create(category=category, city=city, **fields)
                )
            for row in seed.TICKET_TYPES:
                fields = dict(row)
                event = events[fields.pop("event_id") - 1]
                models.TicketType.objects.create(event=event, **fields)

        logger.info(
            "Seeded {} events and {} ticket types", len(events), len(seed.TICKET_TYPES)
        )
        self.stdout.write(self.style.SUCCESS("Catalog seeded"))
