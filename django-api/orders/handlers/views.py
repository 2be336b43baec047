"""HTTP handlers (views) for checkout and order history.

The identity gate runs here: the request user is resolved into a principal
and handed to the service, which rejects anonymous callers.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from orders.handlers.serializers import (
    CreateOrderSerializer,
    OrderItemSerializer,
    OrderSerializer,
    OrderWithItemsSerializer,
)
from orders.services import OrderService, require_principal, resolve_principal
from storefront.stores import order_store


def order_service() -> OrderService:
    return OrderService(order_store())


class OrderListView(APIView):
    """Handler for GET/POST /api/orders"""

    def get(self, request: Request) -> Response:
        orders = order_service().list_orders(resolve_principal(request.user))
        return Response(OrderWithItemsSerializer(orders, many=True).data)

    def post(self, request: Request) -> Response:
        # Anonymous callers are rejected before the body is parsed
        principal = require_principal(resolve_principal(request.user))
        payload = CreateOrderSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        order = order_service().create_order(principal, payload.to_request())
        body = {
            "order": OrderSerializer(order).data,
            "items": OrderItemSerializer(order.items, many=True).data,
        }
        return Response(body, status=status.HTTP_201_CREATED)


class OrderDetailView(APIView):
    """Handler for GET /api/orders/{order_id}"""

    def get(self, request: Request, order_id: str) -> Response:
        order = order_service().get_order(resolve_principal(request.user), order_id)
        return Response(OrderWithItemsSerializer(order).data)
