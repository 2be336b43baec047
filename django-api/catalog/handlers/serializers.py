"""Serializers for transforming catalog domain models to API responses.

Field names are camelCase to match the storefront client.
"""

from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Serializer for Category domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    icon = serializers.CharField()
    iconBgColor = serializers.CharField(source="icon_bg_color")


class CitySerializer(serializers.Serializer):
    """Serializer for City domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    imageUrl = serializers.CharField(source="image_url")
    venue = serializers.CharField()
    address = serializers.CharField()
    cityId = serializers.IntegerField(source="city_id.value")
    categoryId = serializers.IntegerField(source="category_id.value")
    startDate = serializers.DateTimeField(source="start_date")
    endDate = serializers.DateTimeField(source="end_date", allow_null=True)
    isFeatured = serializers.BooleanField(source="is_featured")
    isTrending = serializers.BooleanField(source="is_trending")
    ageRestriction = serializers.CharField(source="age_restriction", allow_null=True)
    entryPolicy = serializers.CharField(source="entry_policy", allow_null=True)


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.IntegerField(source="id.value")
    eventId = serializers.IntegerField(source="event_id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(source="price.amount", max_digits=10, decimal_places=2)
    availableQuantity = serializers.IntegerField(source="available_quantity.value")
    maxPerOrder = serializers.IntegerField(source="max_per_order")


class EventListQuerySerializer(serializers.Serializer):
    """Query parameters accepted by GET /api/events."""

    featured = serializers.BooleanField(required=False, allow_null=True)
    trending = serializers.BooleanField(required=False, allow_null=True)
    category = serializers.CharField(required=False)
    city = serializers.CharField(required=False)
    q = serializers.CharField(required=False, allow_blank=True)
