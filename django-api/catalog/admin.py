from django.contrib import admin

from catalog.models import Category, City, Event, TicketType


class TicketTypeInline(admin.TabularInline):
    model = TicketType
    extra = 1


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "icon"]


@admin.register(City)
class CityAdmin(admin.ModelAdmin):
    list_display = ["name"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "venue", "city", "category", "start_date", "is_featured", "is_trending"]
    list_filter = ["category", "city", "is_featured", "is_trending"]
    search_fields = ["title", "description", "venue"]
    inlines = [TicketTypeInline]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "available_quantity", "max_per_order"]
    list_filter = ["event__category"]
