from django import forms
from django.contrib import admin

from apps.payouts.constants import PAYOUT_FEE_KEYS
from apps.payouts.forms import clean_fee_setting

from .models import AdminConfig


class AdminConfigForm(forms.ModelForm):
    class Meta:
        model = AdminConfig
        fields = ("key", "value", "description", "category")

    def clean(self):
        cleaned_data = super().clean()
        key = cleaned_data.get("key") or getattr(self.instance, "key", None)
        value = cleaned_data.get("value")
        if key in PAYOUT_FEE_KEYS and value is not None:
            try:
                cleaned_data["value"] = clean_fee_setting(key, value)
            except forms.ValidationError as e:
                self.add_error("value", e)
        return cleaned_data


@admin.register(AdminConfig)
class AdminConfigAdmin(admin.ModelAdmin):
    form = AdminConfigForm
    list_display = ("key", "value", "category", "updated_by", "updated_at")
    list_filter = ("category",)
    search_fields = ("key", "description")
    readonly_fields = ("created_at", "updated_at", "updated_by")

    def save_model(self, request, obj, form, change):
        obj.updated_by = request.user
        super().save_model(request, obj, form, change)
