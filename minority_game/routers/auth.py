from fastapi import APIRouter, Response, status

from ..dependencies import CoordinatorDep
from ..schemas import LoginRequest, LoginResponse, PasswordChangeRequest, PasswordChangeResponse

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def login(request: LoginRequest, response: Response, manager: CoordinatorDep):
    role = manager.passcodes.resolve_role(request.passcode)
    if role is None:
        response.status_code = status.HTTP_401_UNAUTHORIZED
        return LoginResponse(ok=False)
    return LoginResponse(ok=True, role=role)


@router.post("/password", response_model=PasswordChangeResponse, response_model_exclude_none=True)
async def change_password(request: PasswordChangeRequest, response: Response, manager: CoordinatorDep):
    """
    Rotate the admin and/or player passcode, gated by the current admin passcode.
    Blank new values leave that passcode unchanged.
    """
    if not manager.passcodes.rotate(
        request.admin_pass, request.new_admin_pass, request.new_player_pass
    ):
        response.status_code = status.HTTP_401_UNAUTHORIZED
        return PasswordChangeResponse(ok=False, reason="unauthorized")
    return PasswordChangeResponse(ok=True)
