import json
import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.security.decorators import staff_required

from .fees import describe_fee, get_breakdown
from .forms import FeePreviewForm, first_form_error
from .services.fee_config_service import PayoutFeeConfigService
from .services.payout_service import PAYOUT_NOT_FOUND, PayoutService
from .services.reconciliation_service import FeeReconciliationService

logger = logging.getLogger(__name__)

CONFIG_CHANGE_PERMISSION = 'admin_config.change_adminconfig'


def _parse_json_body(request):
    try:
        body = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        return None
    return body if isinstance(body, dict) else None


def _parse_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@staff_required
@require_http_methods(["GET", "POST"])
def payout_fees(request):
    service = PayoutFeeConfigService()

    if request.method == "POST":
        if not request.user.has_perm(CONFIG_CHANGE_PERMISSION):
            return JsonResponse({'error': 'Forbidden'}, status=403)

        body = _parse_json_body(request)
        if body is None:
            return JsonResponse({'error': 'Invalid JSON body'}, status=400)
        if not body.get('key') or body.get('value') is None:
            return JsonResponse({'error': 'key and value are required'}, status=400)

        success, message = service.update_fee_setting(body['key'], body['value'], user_id=request.user.pk)
        if not success:
            return JsonResponse({'error': message}, status=400)

        return JsonResponse({'success': True, 'message': message, 'data': service.get_fee_settings()})

    mirrored = service.get_mirrored_fee_config()
    return JsonResponse({
        'data': service.get_fee_settings(),
        'config': service.get_fee_config().model_dump(),
        'rpc_data': mirrored.model_dump() if mirrored else None,
        'can_write': request.user.has_perm(CONFIG_CHANGE_PERMISSION),
    })


@staff_required
@require_http_methods(["GET"])
def payout_fee_preview(request):
    form = FeePreviewForm(request.GET)
    if not form.is_valid():
        return JsonResponse({'error': first_form_error(form)}, status=400)

    method = form.cleaned_data['method']
    config = PayoutFeeConfigService().get_fee_config()
    breakdown = get_breakdown(method, form.cleaned_data['amount_cents'], config)

    data = breakdown.model_dump()
    data['method'] = method
    data['description'] = describe_fee(method, config)
    return JsonResponse(data)


@staff_required
@require_http_methods(["GET"])
def payout_fee_reconcile(request):
    report = FeeReconciliationService().reconcile()
    return JsonResponse(report.as_dict())


@staff_required
@require_http_methods(["GET"])
def payouts(request):
    service = PayoutService()
    data = service.list_payouts(
        status=request.GET.get('status', 'all'),
        search=request.GET.get('search') or None,
        limit=_parse_int(request.GET.get('limit'), 100),
        offset=_parse_int(request.GET.get('offset'), 0),
    )
    return JsonResponse({'data': data, 'stats': service.get_stats(data)})


@staff_required
@require_http_methods(["POST"])
def retry_payout(request, payout_id):
    success, message = PayoutService().retry_payout(payout_id)
    if not success:
        status = 404 if message == PAYOUT_NOT_FOUND else 400
        return JsonResponse({'error': message}, status=status)

    logger.info(f"Payout {payout_id} retried by user {request.user.pk}")
    return JsonResponse({'success': True, 'message': message})
