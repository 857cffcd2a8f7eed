"""
Service Decorators

Resolve the service an endpoint needs and answer 500 when it is not running.
"""

from functools import wraps
from flask import jsonify


def require_service(getter, name: str):
    """
    Decorator for HTTP endpoints that need an initialized service.

    The resolved service is passed to the view as the ``service`` keyword.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            service = getter()
            if not service:
                return jsonify({
                    'success': False,
                    'error': f'{name} service unavailable'
                }), 500
            kwargs['service'] = service
            return f(*args, **kwargs)
        return decorated_function
    return decorator
