import hmac
import logging

from ..models import Role

log = logging.getLogger(__name__)


def _matches(candidate: str | None, expected: str) -> bool:
    return hmac.compare_digest((candidate or "").strip().encode(), expected.encode())


class PassCodes:
    """Shared secrets for the admin and player roles, rotatable at runtime."""

    def __init__(self, admin_pass: str, player_pass: str):
        self._secrets = {Role.ADMIN: admin_pass, Role.PLAYER: player_pass}

    def verify(self, role: Role, passcode: str | None) -> bool:
        if role == Role.VIEWER:
            return True
        return _matches(passcode, self._secrets[role])

    def resolve_role(self, passcode: str | None) -> Role | None:
        for role in (Role.ADMIN, Role.PLAYER):
            if self.verify(role, passcode):
                return role
        return None

    def rotate(self, admin_pass: str | None, new_admin: str | None = None, new_player: str | None = None) -> bool:
        if not self.verify(Role.ADMIN, admin_pass):
            log.warning("Rejected passcode change: admin passcode mismatch")
            return False

        new_admin = (new_admin or "").strip()
        new_player = (new_player or "").strip()
        if new_admin:
            self._secrets[Role.ADMIN] = new_admin
            log.info("Admin passcode rotated")
        if new_player:
            self._secrets[Role.PLAYER] = new_player
            log.info("Player passcode rotated")
        return True
