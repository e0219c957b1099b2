import logging

from ..context import ApiContext
from ..errors import ResponseDecodeError
from ..schemas import AuthResult, Credentials, LoginCredentials
from ..specs import TOKEN_HEADER
from ..transport import ApiResponse, decode_data, expect_status, send
from . import paths

logger = logging.getLogger(__name__)


def register_response(ctx: ApiContext, credentials: Credentials) -> ApiResponse:
    return send(ctx.session, ctx.base_template, "POST", paths.USERS_REGISTER, json=credentials.model_dump())


def register(ctx: ApiContext, credentials: Credentials) -> AuthResult:
    response = expect_status(register_response(ctx, credentials), 201)
    return decode_data(response, AuthResult)


def login_response(ctx: ApiContext, login_credentials: LoginCredentials) -> ApiResponse:
    return send(ctx.session, ctx.base_template, "POST", paths.USERS_LOGIN, json=login_credentials.model_dump())


def login(ctx: ApiContext, login_credentials: LoginCredentials) -> AuthResult:
    response = expect_status(login_response(ctx, login_credentials), 200)
    result = decode_data(response, AuthResult)
    if not result.token:
        raise ResponseDecodeError("login response carries no token", response.text)
    return result


def delete_account_response(ctx: ApiContext, token: str) -> ApiResponse:
    # token goes on explicitly so this works without an authenticated context
    return send(ctx.session, ctx.base_template, "DELETE", paths.USERS_DELETE, headers={TOKEN_HEADER: token})


def delete_account(ctx: ApiContext, token: str) -> None:
    expect_status(delete_account_response(ctx, token), 200)


def register_and_login(ctx: ApiContext, credentials: Credentials) -> str:
    registered = register(ctx, credentials)
    logger.info("registered test user %s (%s)", registered.email, registered.id)
    return login(ctx, credentials.to_login()).token
