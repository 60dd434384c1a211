from fastapi import APIRouter, status

from app.models.auth.auth import LoginPayload
from app.services.auth.auth import login_owner
from app.utils.response_utils import response_api

router = APIRouter(prefix="/api/admin")


@router.post("/auth")
async def admin_auth(payload: LoginPayload):
    auth = await login_owner(payload)
    return response_api(status.HTTP_200_OK, "Login successful", auth)
