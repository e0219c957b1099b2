from dataclasses import dataclass, field
from typing import Optional

from .config import Settings, get_settings
from .errors import NotAuthenticated
from .specs import RequestTemplate, build_auth_template, build_base_template
from .transport import Session


@dataclass
class ApiContext:
    """
    Per-test execution context handed to every client call. Holds the session,
    the unauthenticated template and, once logged in, the authenticated one.
    """

    session: Session
    settings: Settings = field(default_factory=get_settings)
    base_template: Optional[RequestTemplate] = None
    token: Optional[str] = None
    _auth_template: Optional[RequestTemplate] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.base_template is None:
            self.base_template = build_base_template(self.settings)

    @property
    def auth_template(self) -> RequestTemplate:
        if self._auth_template is None:
            raise NotAuthenticated("no authenticated template; log in first")
        return self._auth_template

    @property
    def is_authenticated(self) -> bool:
        return self._auth_template is not None

    def authenticate(self, token: str) -> RequestTemplate:
        # always a fresh template, never a header added to the previous one
        self._auth_template = build_auth_template(token, self.settings)
        self.token = token
        return self._auth_template

    def clear_auth(self) -> None:
        self.token = None
        self._auth_template = None
