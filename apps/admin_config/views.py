import json
import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.payouts.constants import PAYOUT_FEE_KEYS
from apps.payouts.services.fee_config_service import PayoutFeeConfigService
from apps.security.decorators import staff_required

from .services.config_service import AdminConfigService

logger = logging.getLogger(__name__)


@staff_required
@require_http_methods(["GET", "PATCH"])
def admin_config(request):
    service = AdminConfigService()

    if request.method == "GET":
        return JsonResponse({'data': service.list_config(category=request.GET.get('category') or None)})

    if not request.user.has_perm('admin_config.change_adminconfig'):
        return JsonResponse({'error': 'Forbidden'}, status=403)

    try:
        body = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        return JsonResponse({'error': 'Invalid JSON body'}, status=400)

    if not isinstance(body, dict) or not body.get('key') or body.get('value') is None:
        return JsonResponse({'error': 'key and value are required'}, status=400)

    key = body['key']
    if key in PAYOUT_FEE_KEYS:
        success, message = PayoutFeeConfigService(config_service=service).update_fee_setting(
            key, body['value'], user_id=request.user.pk
        )
    else:
        if service.get_item(key) is None:
            return JsonResponse({'error': f"Config key not found: {key}"}, status=404)
        success, message = service.set_value(key, body['value'], user_id=request.user.pk, create=False)

    if not success:
        return JsonResponse({'error': message}, status=400)

    return JsonResponse({'success': True, 'message': message, 'data': service.get_item(key)})
