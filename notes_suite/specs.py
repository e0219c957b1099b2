from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .config import LogLevel, Settings, get_settings

JSON_CONTENT_TYPE = "application/json"
TOKEN_HEADER = "X-AUTH-TOKEN"


class RequestTemplate(BaseModel):
    """
    Immutable request defaults merged into every call built from it.
    Headers are stored as pairs so the template cannot be mutated through them.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    headers: Tuple[Tuple[str, str], ...]
    log_detail: LogLevel

    def header_dict(self) -> Dict[str, str]:
        return dict(self.headers)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @property
    def token(self) -> Optional[str]:
        return self.header_dict().get(TOKEN_HEADER)


def _default_headers() -> Tuple[Tuple[str, str], ...]:
    return (
        ("Content-Type", JSON_CONTENT_TYPE),
        ("Accept", JSON_CONTENT_TYPE),
    )


def build_base_template(settings: Optional[Settings] = None) -> RequestTemplate:
    """Verbosity follows the configured log level (shipped properties: ALL, built-in default: BASIC)."""
    settings = settings or get_settings()
    return RequestTemplate(
        base_url=settings.base_url,
        headers=_default_headers(),
        log_detail=settings.log_level,
    )


def build_auth_template(token: str, settings: Optional[Settings] = None) -> RequestTemplate:
    if not token:
        raise ValueError("token must be a non-empty string")
    settings = settings or get_settings()
    return RequestTemplate(
        base_url=settings.base_url,
        headers=_default_headers() + ((TOKEN_HEADER, token),),
        log_detail=settings.log_level,
    )
