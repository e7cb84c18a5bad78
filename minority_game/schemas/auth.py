from pydantic import Field

from ..models import CamelModel, Role


class LoginRequest(CamelModel):
    passcode: str | None = Field(default=None, alias="pass")


class LoginResponse(CamelModel):
    ok: bool
    role: Role | None = None


class PasswordChangeRequest(CamelModel):
    admin_pass: str | None = None
    new_admin_pass: str | None = None
    new_player_pass: str | None = None


class PasswordChangeResponse(CamelModel):
    ok: bool
    reason: str | None = None
