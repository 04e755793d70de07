"""Session DTOs shared across application layers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Screen(str, Enum):
    SIGN_IN = "signin"
    SIGN_UP = "signup"
    RESET = "reset"
    DASHBOARD = "dashboard"


@dataclass(frozen=True)
class User:
    id: int
    email: str
    first_name: str
    last_name: str
    username: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "User":
        """Build a user from the camelCase record returned by the auth backend."""
        return cls(
            id=data["id"],
            email=data["email"],
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            username=data.get("username", ""),
        )


@dataclass(frozen=True)
class Session:
    user: Optional[User] = None
    loading: bool = False


@dataclass(frozen=True)
class SignUpPayload:
    first_name: str
    last_name: str
    username: str
    email: str
    password: str

    def to_api(self) -> Dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "username": self.username,
            "email": self.email,
            "password": self.password,
        }


@dataclass(frozen=True)
class SignInResult:
    user: User
    token: str


def is_authenticated(session: Session) -> bool:
    return session.user is not None
