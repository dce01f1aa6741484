from functools import wraps

from django.http import JsonResponse


def staff_required(view_func):
    """
    Restrict a JSON endpoint to authenticated staff users.

    Answers 401 for anonymous requests and 403 for non-staff accounts instead
    of redirecting to a login page.
    """
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        user = request.user
        if not user.is_authenticated:
            return JsonResponse({'error': 'Unauthorized'}, status=401)
        if not user.is_staff:
            return JsonResponse({'error': 'Forbidden'}, status=403)
        return view_func(request, *args, **kwargs)
    return _wrapped
