from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable

from flask import jsonify, request

from ..core.exceptions import AuthorizationError, NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def pick(body: dict, *names: str) -> dict:
    """Keep only the listed keys that are present in ``body``."""
    return {n: body[n] for n in names if n in body}


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_errors(view: Callable[..., Any]):
    """Map domain errors to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthorizationError as e:
            return fail(str(e), 403)
        except NotFoundError as e:
            return fail(str(e), 404)
        except StoreError as e:
            logger.error("Data store error in %s: %s", request.path, e)
            return fail("Data store error", 502)
        except Exception:
            logger.exception("Unexpected error in %s", request.path)
            return fail("Internal error", 500)

    return wrapper


def permission_required(get_user: Callable[[], Any], *permissions: str):
    """Allow the view when the current user holds any of ``permissions``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = get_user()
            if user is None:
                return fail("No active user", 401)
            if not any(user.has_permission(p) for p in permissions):
                return fail(f"Missing permission: {' or '.join(permissions)}", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator
