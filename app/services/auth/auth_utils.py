import bcrypt
from datetime import datetime, timedelta, timezone
from jose import jwt
from config import JWT_CONFIG
from fastapi import HTTPException, Depends
from fastapi import status
from jose import JWTError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

# --------------------------------------------------------------------
# Password hashing
# --------------------------------------------------------------------
def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


# --------------------------------------------------------------------
# JWT token creation
# --------------------------------------------------------------------
def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Create a JWT access token for the admin API."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=JWT_CONFIG["ACCESS_TOKEN_EXPIRE_MINUTES"]))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, JWT_CONFIG["JWT_SECRET_KEY"], algorithm=JWT_CONFIG["JWT_ALGORITHM"])


# --------------------------------------------------------------------
# Token verification
# --------------------------------------------------------------------
def verify_access_token(token: str) -> dict:
    """Verify and decode an access token."""
    try:
        payload = jwt.decode(token, JWT_CONFIG["JWT_SECRET_KEY"], algorithms=[JWT_CONFIG["JWT_ALGORITHM"]])
        return payload
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired access token",
            headers={"WWW-Authenticate": "Bearer"},
        )


security_scheme = HTTPBearer()


def require_scope(required_scope: str):
    def dependency(credentials: HTTPAuthorizationCredentials = Depends(security_scheme)):
        token = credentials.credentials
        payload = verify_access_token(token)
        scope = payload.get("scope")
        if scope != required_scope:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return payload
    return dependency
