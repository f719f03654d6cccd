from .jwt_auth import JWTAuth, get_jwt_auth

__all__ = ["JWTAuth", "get_jwt_auth"]
