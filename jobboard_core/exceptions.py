import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
    if isinstance(detail, (list, tuple)):
        for value in detail:
            return _first_message(value)
    return str(detail)


def api_exception_handler(exc, context):
    """
    Shapes every API error as {"message": ...} so clients read one key.
    Serializer errors keep their field map under "errors".
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else 'view')
        return Response(
            {"message": "Internal Server Error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    data = response.data
    if isinstance(exc, ValidationError):
        body = {"message": _first_message(data) or "Invalid request data"}
        if isinstance(data, dict) and set(data) != {'non_field_errors'}:
            body["errors"] = data
        response.data = body
    elif isinstance(data, dict) and 'detail' in data:
        extra = {key: value for key, value in data.items() if key != 'detail'}
        response.data = {"message": str(data['detail']), **extra}

    return response
