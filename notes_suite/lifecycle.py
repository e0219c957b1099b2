import enum
import logging
from typing import Callable, Optional

from . import data
from .config import Settings, get_settings
from .context import ApiContext
from .endpoints import auth
from .errors import LifecycleError
from .schemas import Credentials
from .specs import RequestTemplate, build_base_template
from .transport import Session, new_session

logger = logging.getLogger(__name__)


class LifecycleState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    BASE_READY = "base_ready"
    AUTH_READY = "auth_ready"
    TORN_DOWN = "torn_down"


class FixtureLifecycle:
    """
    Setup/teardown around each test: a fresh registered user and token per test,
    deleted again afterwards. Teardown never raises; a failed cleanup is logged
    and handed back to the caller.
    """

    def __init__(
        self,
        session: Optional[Session] = None,
        settings: Optional[Settings] = None,
        user_factory: Callable[[], Credentials] = data.random_user,
    ):
        self.session = session if session is not None else new_session()
        self.settings = settings or get_settings()
        self.user_factory = user_factory
        self.state = LifecycleState.UNINITIALIZED
        self.base_template: Optional[RequestTemplate] = None
        self.context: Optional[ApiContext] = None
        self.current_credentials: Optional[Credentials] = None

    def start(self) -> RequestTemplate:
        if self.state is not LifecycleState.UNINITIALIZED:
            raise LifecycleError(f"start() called in state {self.state.value}")
        self.base_template = build_base_template(self.settings)
        self.state = LifecycleState.BASE_READY
        return self.base_template

    def set_up(self) -> ApiContext:
        if self.state not in (LifecycleState.BASE_READY, LifecycleState.TORN_DOWN):
            raise LifecycleError(f"set_up() called in state {self.state.value}")

        ctx = ApiContext(session=self.session, settings=self.settings, base_template=self.base_template)
        credentials = self.user_factory()
        try:
            token = auth.register_and_login(ctx, credentials)
        except Exception as exc:
            logger.warning("set up failed for test user %s, account may be left behind: %s", credentials.email, exc)
            raise
        ctx.authenticate(token)

        self.context = ctx
        self.current_credentials = credentials
        self.state = LifecycleState.AUTH_READY
        return ctx

    def tear_down(self) -> Optional[Exception]:
        failure: Optional[Exception] = None
        ctx = self.context
        if ctx is not None and ctx.token is not None:
            try:
                auth.delete_account(ctx, ctx.token)
            except Exception as exc:
                logger.warning("failed to delete test user %s: %s", self._user_label(), exc)
                failure = exc
        if ctx is not None:
            ctx.clear_auth()
        self.context = None
        self.current_credentials = None
        if self.state is not LifecycleState.UNINITIALIZED:
            self.state = LifecycleState.TORN_DOWN
        return failure

    def _user_label(self) -> str:
        return self.current_credentials.email if self.current_credentials else "<unknown>"
