"""Bearer token verification for tokens issued by the hosted auth service."""
import os
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from pydantic import BaseModel

# JWT Configuration
SECRET_KEY = os.getenv("JWT_SECRET", "classdesk-dev-secret-change-me")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
TEACHER_ROLES = frozenset({"teacher", "admin"})

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


class TokenData(BaseModel):
    user_id: str
    email: Optional[str] = None
    role: str


def create_access_token(user_id: str, role: str, email: Optional[str] = None,
                        expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token the way the auth service does. Used by tests and local tooling."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=15))
    to_encode = {"sub": user_id, "role": role, "email": email, "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> TokenData:
    """Verify and decode a JWT token."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise credentials_exception
    user_id = payload.get("sub")
    role = payload.get("role")
    if user_id is None or role is None:
        raise credentials_exception
    return TokenData(user_id=user_id, email=payload.get("email"), role=role)


def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> TokenData:
    """Dependency to get the caller from the bearer token."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return verify_token(token)


def get_current_teacher(current_user: TokenData = Depends(get_current_user)) -> TokenData:
    """Dependency that admits teachers and admins only."""
    if current_user.role not in TEACHER_ROLES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Teacher access required",
        )
    return current_user
