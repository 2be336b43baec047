"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.core.validators import MinValueValidator
from django.db import models


class Category(models.Model):
    """Persistence model for event categories."""

    name = models.CharField(max_length=100)
    icon = models.CharField(max_length=100)
    icon_bg_color = models.CharField(max_length=50)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class City(models.Model):
    """Persistence model for cities."""

    name = models.CharField(max_length=100)

    class Meta:
        ordering = ["id"]
        verbose_name_plural = "cities"

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    title = models.CharField(max_length=255)
    description = models.TextField()
    image_url = models.URLField(max_length=500)
    venue = models.CharField(max_length=255)
    address = models.CharField(max_length=255)
    city = models.ForeignKey(City, on_delete=models.PROTECT, related_name="events")
    category = models.ForeignKey(
        Category, on_delete=models.PROTECT, related_name="events"
    )
    start_date = models.DateTimeField()
    end_date = models.DateTimeField(blank=True, null=True)
    is_featured = models.BooleanField(default=False)
    is_trending = models.BooleanField(default=False)
    age_restriction = models.TextField(blank=True, null=True)
    entry_policy = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["category"], name="event_category_idx"),
            models.Index(fields=["city"], name="event_city_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class TicketType(models.Model):
    """Persistence model for ticket types."""

    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="ticket_types"
    )
    name = models.CharField(max_length=100)
    description = models.TextField()
    price = models.DecimalField(max_digits=10, decimal_places=2)
    available_quantity = models.PositiveIntegerField()
    max_per_order = models.PositiveIntegerField(
        default=10, validators=[MinValueValidator(1)]
    )

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["event"], name="ticket_type_event_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"
