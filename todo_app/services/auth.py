"""
Token check for protected routes.

The token is read straight from the Authorization header, there is no
"Bearer " prefix.
"""

import logging
from functools import wraps

import jwt
from flask import current_app, jsonify, request

logger = logging.getLogger(__name__)


def issue_token(claims: dict, secret: str, algorithm: str = "HS256") -> str:
    """Sign claims with the shared secret. Used by tests and the MCP bridge."""
    return jwt.encode(claims, secret, algorithm=algorithm)


def verify_token(token: str, secret, algorithm: str = "HS256") -> dict:
    if not secret:
        raise jwt.InvalidKeyError("JWT_SECRET is not configured")
    return jwt.decode(token, secret, algorithms=[algorithm])


def token_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        token = request.headers.get("Authorization")
        if not token:
            logger.warning(f"Rejected {request.method} {request.path}: no token")
            return jsonify({"message": "No token provided"}), 401

        try:
            verify_token(
                token,
                current_app.config.get("JWT_SECRET"),
                current_app.config.get("JWT_ALGORITHM", "HS256"),
            )
        except jwt.PyJWTError as e:
            logger.warning(f"Rejected {request.method} {request.path}: {e}")
            return jsonify({"message": "Failed to authenticate token"}), 401

        # Claims are checked but not handed to the view
        return view(*args, **kwargs)

    return wrapper
