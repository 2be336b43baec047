from orders.services.identity import require_principal, resolve_principal
from orders.services.order_service import OrderService

__all__ = ["OrderService", "require_principal", "resolve_principal"]
