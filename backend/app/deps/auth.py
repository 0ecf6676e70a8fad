# app/deps/auth.py
from fastapi import Depends, HTTPException, Query, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose.exceptions import ExpiredSignatureError, JWTError

from app.db import get_db
from app.models import User
from app.schemas.enums import UserRole
from app.security import decode_token

# Exposes Bearer auth in Swagger; login endpoint issues the token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

def get_current_user(
    db: Session = Depends(get_db),
    token: str = Depends(oauth2_scheme),
) -> User:
    unauth = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token)
        user = db.get(User, int(payload["sub"]))
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except (JWTError, ValueError):
        raise unauth

    if not user:
        raise unauth
    return user

def require_role(*allowed_roles: UserRole):
    """
    Usage: dependencies=[Depends(require_role(UserRole.coach, UserRole.admin))]
    """
    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role",
            )
        return current_user
    return dependency

require_staff = require_role(UserRole.coach, UserRole.admin)

def resolve_client_id(
    user_id: int | None = Query(None, description="Client to act on (coach/admin only)"),
    current_user: User = Depends(get_current_user),
) -> int:
    """
    Clients always act on themselves; coaches and admins may target a client
    through ``?user_id=``.
    """
    if user_id is None or user_id == current_user.id:
        return current_user.id
    if not current_user.is_staff:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed")
    return user_id
