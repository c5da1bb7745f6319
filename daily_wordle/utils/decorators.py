"""
Authentication Decorators

Contains the decorator that resolves the calling user from a bearer token.
Tokens are issued by the account service; this server only verifies them.
"""

from functools import wraps

import jwt
from flask import request, jsonify, current_app


def require_auth(f):
    """
    Decorator to require authentication for protected HTTP endpoints.

    Sets ``request.user_id`` from the token's ``user_id`` claim (or ``id``,
    the claim name the mobile client's tokens carry).
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        jwt_secret = current_app.config.get('JWT_SECRET')
        if not jwt_secret:
            return jsonify({
                'success': False,
                'error': 'Authentication service unavailable'
            }), 500

        # Get token from Authorization header
        auth_header = request.headers.get('Authorization')
        if not auth_header or not auth_header.startswith('Bearer '):
            return jsonify({
                'success': False,
                'error': 'Authorization token required'
            }), 401

        token = auth_header.split(' ', 1)[1].strip()

        try:
            payload = jwt.decode(token, jwt_secret, algorithms=["HS256"])
        except jwt.ExpiredSignatureError:
            return jsonify({'success': False, 'error': 'Token has expired'}), 401
        except jwt.InvalidTokenError:
            return jsonify({'success': False, 'error': 'Invalid token'}), 401

        user_id = payload.get('user_id') or payload.get('id')
        if not user_id:
            return jsonify({'success': False, 'error': 'Invalid token payload'}), 401

        # Add user id to request context
        request.user_id = str(user_id)
        return f(*args, **kwargs)

    return decorated_function
