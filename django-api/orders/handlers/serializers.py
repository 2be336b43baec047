"""Serializers for checkout requests and order responses.

Payment details are validated for shape only; they are dropped after
validation and never reach the service layer.
"""

from datetime import date

from rest_framework import serializers

from catalog.domain import TicketTypeId
from orders.domain import OrderLineRequest, OrderRequest


class OrderLineSerializer(serializers.Serializer):
    ticketTypeId = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField()
    pricePerItem = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False, allow_null=True
    )


class PaymentDetailsSerializer(serializers.Serializer):
    """Card fields collected at checkout."""

    cardName = serializers.CharField(min_length=3, error_messages={"min_length": "Name is required"})
    cardNumber = serializers.RegexField(
        r"^\d{16}$", error_messages={"invalid": "Card number must be 16 digits"}
    )
    expiryMonth = serializers.RegexField(
        r"^(0[1-9]|1[0-2])$", error_messages={"invalid": "Invalid month"}
    )
    expiryYear = serializers.RegexField(r"^\d{2}$", error_messages={"invalid": "Invalid year"})
    cvv = serializers.RegexField(r"^\d{3,4}$", error_messages={"invalid": "CVV must be 3-4 digits"})

    def validate_expiryYear(self, value: str) -> str:
        if int(value) < date.today().year % 100:
            raise serializers.ValidationError("Invalid year")
        return value


class CreateOrderSerializer(serializers.Serializer):
    """Request body for POST /api/orders.

    Totals and per-item prices are accepted for compatibility with the
    storefront client but are recomputed server-side.
    """

    status = serializers.CharField(max_length=50, required=False, allow_blank=True)
    totalAmount = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False, allow_null=True
    )
    serviceFee = serializers.DecimalField(
        max_digits=None, decimal_places=None, required=False, allow_null=True
    )
    items = OrderLineSerializer(many=True, required=False)
    payment = PaymentDetailsSerializer(required=False)

    def to_request(self) -> OrderRequest:
        data = self.validated_data
        return OrderRequest(
            lines=tuple(
                OrderLineRequest(
                    ticket_type_id=TicketTypeId(item["ticketTypeId"]),
                    quantity=item["quantity"],
                    claimed_price=item.get("pricePerItem"),
                )
                for item in data.get("items", [])
            ),
            status=data.get("status") or None,
            claimed_total=data.get("totalAmount"),
            claimed_service_fee=data.get("serviceFee"),
        )


class OrderItemSerializer(serializers.Serializer):
    """Serializer for OrderItem domain model."""

    id = serializers.IntegerField(source="id.value")
    orderId = serializers.IntegerField(source="order_id.value")
    ticketTypeId = serializers.IntegerField(source="ticket_type_id.value")
    quantity = serializers.IntegerField()
    pricePerItem = serializers.DecimalField(
        source="price_per_item.amount", max_digits=10, decimal_places=2
    )


class OrderSerializer(serializers.Serializer):
    """Serializer for Order domain model.

    ``serviceFee`` and ``totalAmount`` carry 4 decimal places ("18.0000") so
    that total == subtotal + 12% fee holds exactly; clients round for display.
    """

    id = serializers.IntegerField(source="id.value")
    userId = serializers.IntegerField(source="user_id.value")
    status = serializers.CharField()
    subtotal = serializers.DecimalField(source="subtotal.amount", max_digits=12, decimal_places=2)
    serviceFee = serializers.DecimalField(
        source="service_fee.amount", max_digits=14, decimal_places=4
    )
    totalAmount = serializers.DecimalField(
        source="total_amount.amount", max_digits=14, decimal_places=4
    )
    createdAt = serializers.DateTimeField(source="created_at")


class OrderWithItemsSerializer(OrderSerializer):
    items = OrderItemSerializer(many=True)
