from django.contrib import admin

from orders.models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    can_delete = False
    readonly_fields = ["ticket_type", "quantity", "price_per_item"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Orders are immutable once placed, so the admin is read-only."""

    list_display = ["id", "user", "status", "total_amount", "created_at"]
    list_filter = ["status"]
    readonly_fields = ["user", "status", "subtotal", "service_fee", "total_amount", "created_at"]
    inlines = [OrderItemInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
