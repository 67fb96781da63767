"""
Single-page client fallback.

Static files of the built client are served by WhiteNoise from
``CLIENT_DIST_DIR``.  Any other path that is not an API route gets the
client's ``index.html`` so the client-side router can handle it.
"""
from django.conf import settings
from django.http import FileResponse, JsonResponse


def api_not_found(request, path=''):
    return JsonResponse({'message': 'Resource not found!'}, status=404)


def client_index(request, path=''):
    index = settings.CLIENT_DIST_DIR / 'index.html'
    if not index.is_file():
        return JsonResponse({'message': 'Client bundle not found!'}, status=404)
    return FileResponse(index.open('rb'), content_type='text/html')
