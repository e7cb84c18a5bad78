from .auth import LoginRequest, LoginResponse, PasswordChangeRequest, PasswordChangeResponse
from .state import StateSnapshot, YouView, RosterEntry, AdminView, AuthReply, RegisteredReply

__all__ = [
    "LoginRequest", "LoginResponse", "PasswordChangeRequest", "PasswordChangeResponse",
    "StateSnapshot", "YouView", "RosterEntry", "AdminView", "AuthReply", "RegisteredReply",
]
