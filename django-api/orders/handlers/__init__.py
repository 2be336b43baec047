from orders.handlers.views import OrderDetailView, OrderListView

__all__ = ["OrderDetailView", "OrderListView"]
