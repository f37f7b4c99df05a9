# inventory_api/utils/tokenJWT.py
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from inventory_api.config import settings
from inventory_api.dependencies import get_repository
from inventory_api.errors import AuthError
from inventory_api.repositories.base import InventoryRepository, UserRecord

# Missing or non-Bearer headers are reported by get_current_user as 401
bearer_scheme = HTTPBearer(auto_error=False)

# Generate a new JWT access token
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def token_for_user(user: UserRecord, expires_delta: Optional[timedelta] = None) -> str:
    return create_access_token({"sub": user.id, "email": user.email, "role": user.role}, expires_delta)

# Retrieve the currently authenticated user based on the JWT token
def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    repository: InventoryRepository = Depends(get_repository),
) -> UserRecord:
    if credentials is None:
        raise AuthError("No token provided")
    try:
        payload = jwt.decode(credentials.credentials, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        user_id = payload.get("sub")
        # Ensure the user id is present in the token payload
        if user_id is None:
            raise AuthError("Token invalid or expired")
    except JWTError:
        raise AuthError("Token invalid or expired")

    user = repository.get_user(user_id)
    if user is None:
        raise AuthError("Token invalid or expired")
    return user
