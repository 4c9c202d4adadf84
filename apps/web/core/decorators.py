"""
Decorators for request handling and validation.
"""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any

from django.http import HttpRequest, JsonResponse

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from apps.web.core.serializers import ValidationErrorDetail, ValidationErrorResponse


def validation_error_response(details: list[ValidationErrorDetail]) -> JsonResponse:
    """Build the standard 400 response for invalid request data."""
    response = ValidationErrorResponse(error="validation_error", details=details)
    return JsonResponse(response.model_dump(), status=400)


def json_body(schema: type[BaseModel]) -> Callable[..., Any]:
    """
    Decorator that parses and validates the JSON request body.

    The validated schema instance is passed to the view as the second
    positional argument, right after the request.

    Usage:
        @json_body(SendOTPRequest)
        def send_otp(request, payload):
            ...
    """

    def decorator(view_func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
            try:
                body = json.loads(request.body or b"{}")
                payload = schema.model_validate(body)
            except json.JSONDecodeError:
                return JsonResponse(
                    {"error": "Invalid JSON in request body"},
                    status=400,
                )
            except PydanticValidationError as e:
                return validation_error_response(
                    [
                        ValidationErrorDetail(
                            field=".".join(str(loc) for loc in err["loc"]),
                            message=err["msg"],
                        )
                        for err in e.errors()
                    ]
                )

            return view_func(request, payload, *args, **kwargs)

        return wrapper

    return decorator
