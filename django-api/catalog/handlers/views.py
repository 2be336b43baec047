"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic

Domain errors propagate to storefront.exceptions, which maps them to
responses.
"""

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from catalog.handlers.serializers import (
    CategorySerializer,
    CitySerializer,
    EventListQuerySerializer,
    EventSerializer,
    TicketTypeSerializer,
)
from catalog.services import CatalogService
from storefront.stores import catalog_store


def catalog_service() -> CatalogService:
    return CatalogService(catalog_store())


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        query = EventListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data
        events = catalog_service().list_events(
            category_id=params.get("category"),
            city_id=params.get("city"),
            featured=params.get("featured"),
            trending=params.get("trending"),
            query=params.get("q"),
        )
        return Response(EventSerializer(events, many=True).data)


class FeaturedEventListView(APIView):
    """Handler for GET /api/events/featured"""

    def get(self, request: Request) -> Response:
        events = catalog_service().list_featured_events()
        return Response(EventSerializer(events, many=True).data)


class TrendingEventListView(APIView):
    """Handler for GET /api/events/trending"""

    def get(self, request: Request) -> Response:
        events = catalog_service().list_trending_events()
        return Response(EventSerializer(events, many=True).data)


class CategoryEventListView(APIView):
    """Handler for GET /api/events/category/{category_id}"""

    def get(self, request: Request, category_id: str) -> Response:
        events = catalog_service().list_events_by_category(category_id)
        return Response(EventSerializer(events, many=True).data)


class CityEventListView(APIView):
    """Handler for GET /api/events/city/{city_id}"""

    def get(self, request: Request, city_id: str) -> Response:
        events = catalog_service().list_events_by_city(city_id)
        return Response(EventSerializer(events, many=True).data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = catalog_service().get_event(event_id)
        return Response(EventSerializer(event).data)


class TicketTypeListView(APIView):
    """Handler for GET /api/events/{event_id}/tickets"""

    def get(self, request: Request, event_id: str) -> Response:
        ticket_types = catalog_service().list_ticket_types(event_id)
        return Response(TicketTypeSerializer(ticket_types, many=True).data)


class CategoryListView(APIView):
    """Handler for GET /api/categories"""

    def get(self, request: Request) -> Response:
        categories = catalog_service().list_categories()
        return Response(CategorySerializer(categories, many=True).data)


class CityListView(APIView):
    """Handler for GET /api/cities"""

    def get(self, request: Request) -> Response:
        cities = catalog_service().list_cities()
        return Response(CitySerializer(cities, many=True).data)
