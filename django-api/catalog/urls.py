from django.urls import path

from catalog.handlers import (
    CategoryEventListView,
    CategoryListView,
    CityEventListView,
    CityListView,
    EventDetailView,
    EventListView,
    FeaturedEventListView,
    TicketTypeListView,
    TrendingEventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/featured", FeaturedEventListView.as_view(), name="event-featured"),
    path("events/trending", TrendingEventListView.as_view(), name="event-trending"),
    path(
        "events/category/<str:category_id>",
        CategoryEventListView.as_view(),
        name="event-by-category",
    ),
    path("events/city/<str:city_id>", CityEventListView.as_view(), name="event-by-city"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/tickets",
        TicketTypeListView.as_view(),
        name="ticket-type-list",
    ),
    path("categories", CategoryListView.as_view(), name="category-list"),
    path("cities", CityListView.as_view(), name="city-list"),
]
