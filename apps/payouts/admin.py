from django.contrib import admin

from .fees import format_currency
from .models import Payout


@admin.register(Payout)
class PayoutAdmin(admin.ModelAdmin):
    list_display = (
        "id", "seller_email", "method", "status", "gross_usd", "payout_fee_usd", "net_usd", "created_at"
    )
    list_filter = ("status", "method")
    search_fields = ("id", "seller_id", "seller_email", "trade_id")
    readonly_fields = (
        "platform_fee_cents", "payout_fee_cents", "net_amount_cents", "retry_count", "created_at", "updated_at"
    )

    def gross_usd(self, obj):
        return format_currency(obj.gross_amount_cents)
    gross_usd.short_description = "Gross"

    def payout_fee_usd(self, obj):
        return format_currency(obj.payout_fee_cents)
    payout_fee_usd.short_description = "Payout fee"

    def net_usd(self, obj):
        return format_currency(obj.net_amount_cents)
    net_usd.short_description = "Net"
