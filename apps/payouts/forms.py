from decimal import Decimal, InvalidOperation

from django import forms

from .constants import CENTS_SUFFIX, PAYOUT_FEE_KEYS, PERCENTAGE_SUFFIX
from .models import PAYOUT_METHOD_CHOICES


def clean_fee_setting(key: str, value) -> str:
    """
    Validate a raw payout fee setting and return the string to store.

    Raises forms.ValidationError for unknown keys and out-of-range values.
    """
    if key not in PAYOUT_FEE_KEYS:
        raise forms.ValidationError("Invalid payout fee key")

    raw = str(value).strip()
    if key.endswith(PERCENTAGE_SUFFIX):
        try:
            number = Decimal(raw)
        except InvalidOperation:
            raise forms.ValidationError("Percentage must be between 0 and 100")
        if not number.is_finite() or number < 0 or number > 100:
            raise forms.ValidationError("Percentage must be between 0 and 100")
        return raw

    if key.endswith(CENTS_SUFFIX):
        try:
            number = int(raw)
        except ValueError:
            raise forms.ValidationError("Cents must be a non-negative integer")
        if number < 0:
            raise forms.ValidationError("Cents must be a non-negative integer")
        return str(number)

    return raw


class PayoutFeeSettingForm(forms.Form):
    key = forms.ChoiceField(
        choices=[(key, key) for key in PAYOUT_FEE_KEYS],
        error_messages={'invalid_choice': "Invalid payout fee key"}
    )
    value = forms.CharField(max_length=32)

    def clean(self):
        cleaned_data = super().clean()
        key = cleaned_data.get('key')
        value = cleaned_data.get('value')
        if key and value is not None:
            try:
                cleaned_data['value'] = clean_fee_setting(key, value)
            except forms.ValidationError as e:
                self.add_error('value', e)
        return cleaned_data


class FeePreviewForm(forms.Form):
    method = forms.ChoiceField(
        choices=PAYOUT_METHOD_CHOICES,
        error_messages={'invalid_choice': "Invalid payout method"}
    )
    amount_cents = forms.IntegerField(
        error_messages={'invalid': "amount_cents must be an integer"}
    )


def first_form_error(form: forms.Form) -> str:
    for field, errors in form.errors.items():
        if errors:
            return errors[0] if field == '__all__' else f"{field}: {errors[0]}"
    return "Invalid request"
