"""Core app views.

Contains:
- health: Health check endpoint
"""

from django.db import connection
from django.http import JsonResponse


def health(request):
    """Health check endpoint - verifies the database answers."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except Exception as exc:
        return JsonResponse({'status': 'error', 'detail': str(exc)}, status=503)

    return JsonResponse({'status': 'ok'})
