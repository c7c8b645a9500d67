from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import DataUnavailableError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def fail(message: str, status: int, **extra):
    body = {"success": False, "message": message}
    body.update(extra)
    return jsonify(body), status


def json_errors(view):
    """Map domain errors raised by a view onto JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            logger.debug("Rejected input on %s: %s", view.__name__, e.field_errors)
            return fail(str(e), 400, errors=e.field_errors)
        except NotFoundError as e:
            return fail(str(e), 404)
        except DataUnavailableError as e:
            return fail(str(e), 503)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return fail("Internal server error", 500)

    return wrapper
