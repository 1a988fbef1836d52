"""
Unified response envelope helpers
"""
import logging

from rest_framework.response import Response
from rest_framework import status

logger = logging.getLogger(__name__)


def success_response(data=None, message='success', code=200):
    """Success envelope"""
    return Response({
        'code': code,
        'message': message,
        'data': data
    }, status=status.HTTP_200_OK)


def error_response(message='error', code=400, data=None):
    """Error envelope"""
    return Response({
        'code': code,
        'message': message,
        'data': data
    }, status=status.HTTP_200_OK)  # business errors are HTTP 200 too, told apart by code


def paginated_response(paginator, queryset, serializer_class, request, message='success', code=200):
    """Paginated envelope"""
    page = paginator.paginate_queryset(queryset, request)

    if page is not None:
        serializer = serializer_class(page, many=True)
        paginated_data = paginator.get_paginated_response(serializer.data)
        # paginated_data.data holds {count, next, previous, results}
        data = paginated_data.data
        data['page'] = paginator.page.number
        data['page_size'] = paginator.get_page_size(request)
        return Response({
            'code': code,
            'message': message,
            'data': data
        }, status=status.HTTP_200_OK)

    serializer = serializer_class(queryset, many=True)
    return success_response(serializer.data, message, code)


def custom_exception_handler(exc, context):
    """Render DRF and queue errors in the project envelope"""
    from rest_framework.views import exception_handler
    from appointments.exceptions import QueueError

    if isinstance(exc, QueueError):
        logger.info('Queue operation rejected: %s (%s)', exc.error_code, exc.message)
        return error_response(message=exc.message, code=exc.status_code, data=exc.as_data())

    response = exception_handler(exc, context)

    if response is not None:
        custom_response_data = {
            'code': response.status_code,
            'message': str(exc),
            'data': response.data if response.status_code == status.HTTP_400_BAD_REQUEST else None
        }
        response.data = custom_response_data

    return response
