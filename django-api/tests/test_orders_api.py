"""Integration tests for checkout and order history.

Run with: pytest tests/test_orders_api.py -v
"""

import pytest
from rest_framework.test import APIClient

from catalog import models as catalog_models
from orders import models

VALID_PAYMENT = {
    "cardName": "Alice Example",
    "cardNumber": "4242424242424242",
    "expiryMonth": "12",
    "expiryYear": "99",
    "cvv": "123",
}


def checkout_body(*lines, **extra) -> dict:
    body = {
        "status": "completed",
        "items": [{"ticketTypeId": tid, "quantity": qty} for tid, qty in lines],
    }
    body.update(extra)
    return body


def stock(ticket_type) -> int:
    return catalog_models.TicketType.objects.get(pk=ticket_type.pk).available_quantity


@pytest.mark.django_db
class TestCreateOrder:
    """Tests for POST /api/orders"""

    def test_anonymous_checkout_is_rejected(self, api_client: APIClient, db_catalog):
        response = api_client.post(
            "/api/orders", checkout_body((db_catalog.general.pk, 1)), format="json"
        )

        assert response.status_code == 401
        assert response.data["code"] == "UNAUTHORIZED"
        assert stock(db_catalog.general) == 5
        assert not models.Order.objects.exists()

    def test_checkout_books_tickets(self, auth_client: APIClient, user, db_catalog):
        """3 x 50.00 leaves 2 in stock and totals 168.00."""
        body = checkout_body(
            (db_catalog.general.pk, 3),
            totalAmount="168.00",
            serviceFee="18.00",
            payment=VALID_PAYMENT,
        )
        response = auth_client.post("/api/orders", body, format="json")

        assert response.status_code == 201
        order = response.data["order"]
        assert order["userId"] == user.pk
        assert order["status"] == "completed"
        assert order["subtotal"] == "150.00"
        assert order["serviceFee"] == "18.0000"
        assert order["totalAmount"] == "168.0000"
        [item] = response.data["items"]
        assert item["orderId"] == order["id"]
        assert item["ticketTypeId"] == db_catalog.general.pk
        assert item["quantity"] == 3
        assert item["pricePerItem"] == "50.00"
        assert stock(db_catalog.general) == 2

    def test_payment_is_not_persisted(self, auth_client: APIClient, db_catalog):
        body = checkout_body((db_catalog.balcony.pk, 1), payment=VALID_PAYMENT)
        response = auth_client.post("/api/orders", body, format="json")

        assert response.status_code == 201
        assert "payment" not in response.data["order"]
        assert "cardNumber" not in str(response.data)

    def test_insufficient_inventory_returns_conflict(self, auth_client: APIClient, db_catalog):
        auth_client.post("/api/orders", checkout_body((db_catalog.general.pk, 3)), format="json")

        response = auth_client.post(
            "/api/orders", checkout_body((db_catalog.general.pk, 3)), format="json"
        )

        assert response.status_code == 409
        assert response.data == {
            "code": "INSUFFICIENT_INVENTORY",
            "message": "Not enough tickets available for General Admission. Only 2 remaining.",
            "ticketTypeName": "General Admission",
            "remaining": 2,
        }
        assert stock(db_catalog.general) == 2
        assert models.Order.objects.count() == 1

    def test_failing_line_rolls_back_whole_order(self, auth_client: APIClient, db_catalog):
        body = checkout_body((db_catalog.balcony.pk, 1), (db_catalog.general.pk, 999))
        response = auth_client.post("/api/orders", body, format="json")

        assert response.status_code == 409
        assert stock(db_catalog.balcony) == 10
        assert stock(db_catalog.general) == 5
        assert not models.Order.objects.exists()
        assert not models.OrderItem.objects.exists()

    def test_unknown_ticket_type(self, auth_client: APIClient, db_catalog):
        body = checkout_body((db_catalog.balcony.pk, 1), (9999, 1))
        response = auth_client.post("/api/orders", body, format="json")

        assert response.status_code == 404
        assert response.data["code"] == "TICKET_TYPE_NOT_FOUND"
        assert stock(db_catalog.balcony) == 10

    def test_stock_is_checked_before_per_order_cap(self, auth_client: APIClient, db_catalog):
        response = auth_client.post(
            "/api/orders", checkout_body((db_catalog.general.pk, 9)), format="json"
        )
        # 9 also exceeds the stock of 5, which is checked first
        assert response.status_code == 409

        response = auth_client.post(
            "/api/orders", checkout_body((db_catalog.balcony.pk, 11)), format="json"
        )
        assert response.status_code == 409

    def test_max_per_order_below_stock(self, auth_client: APIClient, db_catalog):
        catalog_models.TicketType.objects.filter(pk=db_catalog.courtside.pk).update(
            available_quantity=10
        )
        response = auth_client.post(
            "/api/orders", checkout_body((db_catalog.courtside.pk, 3)), format="json"
        )

        assert response.status_code == 400
        assert response.data["code"] == "MAX_PER_ORDER_EXCEEDED"
        assert stock(db_catalog.courtside) == 10

    def test_empty_order(self, auth_client: APIClient, db_catalog):
        response = auth_client.post("/api/orders", checkout_body(), format="json")

        assert response.status_code == 400
        assert response.data["code"] == "EMPTY_ORDER"

    def test_zero_quantity(self, auth_client: APIClient, db_catalog):
        response = auth_client.post(
            "/api/orders", checkout_body((db_catalog.general.pk, 0)), format="json"
        )
        assert response.status_code == 400
        assert response.data["code"] == "INVALID_QUANTITY"

    def test_malformed_payment_details(self, auth_client: APIClient, db_catalog):
        payment = dict(VALID_PAYMENT, cardNumber="4242", expiryMonth="13")
        body = checkout_body((db_catalog.general.pk, 1), payment=payment)
        response = auth_client.post("/api/orders", body, format="json")

        assert response.status_code == 400
        assert set(response.data["payment"]) == {"cardNumber", "expiryMonth"}
        assert stock(db_catalog.general) == 5

    def test_expired_card_year(self, auth_client: APIClient, db_catalog):
        payment = dict(VALID_PAYMENT, expiryYear="00")
        body = checkout_body((db_catalog.general.pk, 1), payment=payment)
        response = auth_client.post("/api/orders", body, format="json")

        assert response.status_code == 400
        assert "expiryYear" in response.data["payment"]

    def test_client_totals_are_recomputed(self, auth_client: APIClient, db_catalog):
        body = checkout_body(
            (db_catalog.balcony.pk, 2), totalAmount="1.00", serviceFee="0.00"
        )
        body["items"][0]["pricePerItem"] = "0.50"
        response = auth_client.post("/api/orders", body, format="json")

        assert response.status_code == 201
        assert response.data["order"]["totalAmount"] == "44.8000"
        assert response.data["items"][0]["pricePerItem"] == "20.00"

    def test_default_status(self, auth_client: APIClient, db_catalog):
        body = {"items": [{"ticketTypeId": db_catalog.balcony.pk, "quantity": 1}]}
        response = auth_client.post("/api/orders", body, format="json")
        assert response.data["order"]["status"] == "completed"


@pytest.mark.django_db
class TestOrderHistory:
    """Tests for GET /api/orders and GET /api/orders/{id}"""

    def test_anonymous_history_is_rejected(self, api_client: APIClient):
        assert api_client.get("/api/orders").status_code == 401
        assert api_client.get("/api/orders/1").status_code == 401

    def test_list_orders_with_items(self, auth_client: APIClient, db_catalog):
        auth_client.post(
            "/api/orders",
            checkout_body((db_catalog.general.pk, 1), (db_catalog.balcony.pk, 2)),
            format="json",
        )
        auth_client.post("/api/orders", checkout_body((db_catalog.courtside.pk, 1)), format="json")

        response = auth_client.get("/api/orders")

        assert response.status_code == 200
        assert len(response.data) == 2
        first, second = response.data
        assert [i["ticketTypeId"] for i in first["items"]] == [
            db_catalog.general.pk,
            db_catalog.balcony.pk,
        ]
        assert first["subtotal"] == "90.00"
        assert second["totalAmount"] == "504.0000"

    def test_list_only_own_orders(
        self, api_client: APIClient, user, other_user, db_catalog
    ):
        api_client.force_authenticate(user=other_user)
        api_client.post("/api/orders", checkout_body((db_catalog.balcony.pk, 1)), format="json")

        api_client.force_authenticate(user=user)
        response = api_client.get("/api/orders")

        assert response.status_code == 200
        assert response.data == []

    def test_get_own_order(self, auth_client: APIClient, db_catalog):
        created = auth_client.post(
            "/api/orders", checkout_body((db_catalog.balcony.pk, 1)), format="json"
        )
        order_id = created.data["order"]["id"]

        response = auth_client.get(f"/api/orders/{order_id}")

        assert response.status_code == 200
        assert response.data["id"] == order_id
        assert len(response.data["items"]) == 1

    def test_other_users_order_is_not_found(
        self, api_client: APIClient, user, other_user, db_catalog
    ):
        api_client.force_authenticate(user=other_user)
        created = api_client.post(
            "/api/orders", checkout_body((db_catalog.balcony.pk, 1)), format="json"
        )

        api_client.force_authenticate(user=user)
        response = api_client.get(f"/api/orders/{created.data['order']['id']}")

        assert response.status_code == 404
        assert response.data["code"] == "ORDER_NOT_FOUND"

    def test_malformed_order_id(self, auth_client: APIClient):
        response = auth_client.get("/api/orders/latest")
        assert response.status_code == 400


@pytest.mark.django_db
class TestMemoryBackendCheckout:
    """Checkout against the seeded in-memory catalog."""

    def test_checkout_decrements_memory_stock(self, auth_client: APIClient, memory_backend):
        response = auth_client.post(
            "/api/orders", checkout_body((1, 2)), format="json"
        )

        assert response.status_code == 201
        assert response.data["order"]["subtotal"] == "198.00"
        assert memory_backend.ticket_types[1].available_quantity.value == 998

        history = auth_client.get("/api/orders")
        assert len(history.data) == 1
