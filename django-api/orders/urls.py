from django.urls import path

from orders.handlers import OrderDetailView, OrderListView

urlpatterns = [
    path("orders", OrderListView.as_view(), name="order-list"),
    path("orders/<str:order_id>", OrderDetailView.as_view(), name="order-detail"),
]
