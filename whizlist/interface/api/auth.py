"""Bearer token handling for routes."""

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from whizlist.domain.service import JWTService
from whizlist.domain.value import UserId
from whizlist.interface.error import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


def bearer_token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    """Raw token from the Authorization header, if any."""
    return credentials.credentials if credentials else None


def require_user(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> UserId:
    """Resolve the authenticated user.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(bearer_token(credentials))
    if not user_id:
        raise AuthenticationError("Not authenticated")
    return user_id
