"""Stub authentication context.

Signing in only records who the visitor says they are so pages can greet
them and keep their workspace apart from other sessions. No credentials are
collected or verified.
"""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass
from functools import wraps
from typing import Any, Callable, Optional, TypeVar, cast

from flask import redirect, request, session, url_for

USER_KEY = "user"
WORKSPACE_KEY = "workspace_key"

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class User:
    email: str
    first_name: str = ""
    last_name: str = ""

    @property
    def display_name(self) -> str:
        if self.first_name:
            return self.first_name
        return self.email.split("@", 1)[0]

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part) or self.display_name


def login_user(user: User) -> str:
    """Store ``user`` in the session and hand it a fresh workspace key."""

    session.clear()
    session[USER_KEY] = asdict(user)
    session[WORKSPACE_KEY] = uuid.uuid4().hex
    return session[WORKSPACE_KEY]


def logout_user() -> Optional[str]:
    """Forget the signed-in user and return the workspace key they held."""

    workspace_key = session.get(WORKSPACE_KEY)
    session.clear()
    return workspace_key


def current_user() -> Optional[User]:
    payload = session.get(USER_KEY)
    if not isinstance(payload, dict) or not payload.get("email"):
        return None
    return User(
        email=str(payload["email"]),
        first_name=str(payload.get("first_name", "")),
        last_name=str(payload.get("last_name", "")),
    )


def current_workspace_key() -> Optional[str]:
    return session.get(WORKSPACE_KEY)


def login_required(view: F) -> F:
    @wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if current_user() is None or not current_workspace_key():
            return redirect(url_for("login", next=request.path))
        return view(*args, **kwargs)

    return cast(F, wrapper)
