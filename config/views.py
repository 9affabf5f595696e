from django.conf import settings
from django.http import FileResponse, JsonResponse


def health_check(request):
    """Liveness probe."""
    return JsonResponse({'status': 'ok'})


def api_not_found(request):
    """Unknown endpoint under /api."""
    return JsonResponse({'error': 'API endpoint not found.'}, status=404)


def serve_frontend(request):
    """Serve the single page app's index.html for non-API routes."""
    index = settings.FRONTEND_DIR / 'index.html'
    if not index.exists():
        return error_404(request, None)
    return FileResponse(open(index, 'rb'), content_type='text/html')


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
