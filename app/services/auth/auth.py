from fastapi import HTTPException, status

from app.database.conn import mongo_client
from app.services.auth.auth_utils import verify_password, create_access_token
from app.services.user_management.user_helper import to_user_out
from app.models.auth.auth import AuthResponse, LoginPayload
from app.utils.logger_utils import logger
from config import OWNER_CONFIG


async def login_owner(payload: LoginPayload) -> AuthResponse:
    admin_pass = OWNER_CONFIG["ADMIN_PASS"]
    if admin_pass and payload.admin_pass != admin_pass:
        logger.warning(f"Rejected login for {payload.email}: bad admin pass")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    user = await mongo_client.collection("USER_COLLECTION").find_one({"email": payload.email})
    if not user or not verify_password(payload.password, user.get("password", "")):
        logger.warning(f"Rejected login for {payload.email}: bad email or password")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    user_out = to_user_out(user)
    token = create_access_token({"sub": user_out.id, "scope": "admin"})
    logger.info(f"User {user_out.id} logged in")
    return AuthResponse(token=token, data=user_out)
