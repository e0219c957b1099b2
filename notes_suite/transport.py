import json as jsonlib
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .errors import ResponseDecodeError, UnexpectedStatus
from .schemas import Envelope, ErrorPayload
from .specs import RequestTemplate

http_logger = logging.getLogger("notes_suite.http")

ModelT = TypeVar("ModelT", bound=BaseModel)

_SHOW_HEADERS = {"HEADERS", "ALL"}
_SHOW_BODY = {"BODY", "ALL"}


class Session(Protocol):
    """Anything with a requests-style ``request``: requests.Session, httpx.Client, TestClient."""

    def request(self, method: str, url: str, **kwargs: Any) -> Any: ...


def new_session() -> requests.Session:
    return requests.Session()


_UNPARSED = object()


@dataclass
class ApiResponse:
    method: str
    url: str
    status_code: int
    headers: Dict[str, str]
    text: str
    _json: Any = field(default=_UNPARSED, repr=False)

    def json(self) -> Any:
        if self._json is _UNPARSED:
            try:
                self._json = jsonlib.loads(self.text) if self.text else None
            except ValueError as exc:
                raise ResponseDecodeError(f"{self.method} {self.url} did not return JSON", self.text) from exc
        return self._json

    def body_field(self, name: str) -> Any:
        body = self.json()
        if not isinstance(body, dict):
            return None
        return body.get(name)

    def error(self) -> ErrorPayload:
        body = self.json()
        if not isinstance(body, dict):
            raise ResponseDecodeError(f"{self.method} {self.url} error body is not an object", self.text)
        return ErrorPayload.model_validate(body)


def _log_request(template: RequestTemplate, method: str, url: str, headers: Mapping[str, str], body: Any) -> None:
    detail = template.log_detail
    if detail == "NONE":
        return
    http_logger.info("--> %s %s", method, url)
    if detail in _SHOW_HEADERS:
        for name, value in headers.items():
            http_logger.info("    %s: %s", name, value)
    if detail in _SHOW_BODY and body is not None:
        http_logger.info("    %s", jsonlib.dumps(body, ensure_ascii=False))


def _log_response(template: RequestTemplate, response: ApiResponse) -> None:
    detail = template.log_detail
    if detail == "NONE":
        return
    http_logger.info("<-- %s %s %s", response.status_code, response.method, response.url)
    if detail in _SHOW_HEADERS:
        for name, value in response.headers.items():
            http_logger.info("    %s: %s", name, value)
    if detail in _SHOW_BODY and response.text:
        http_logger.info("    %s", response.text)


def send(
    session: Session,
    template: RequestTemplate,
    method: str,
    path: str,
    json: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> ApiResponse:
    url = template.url(path)
    merged = template.header_dict()
    if headers:
        merged.update(headers)

    _log_request(template, method, url, merged, json)
    kwargs: Dict[str, Any] = {"headers": merged}
    if json is not None:
        kwargs["json"] = json
    raw = session.request(method, url, **kwargs)

    response = ApiResponse(
        method=method,
        url=url,
        status_code=raw.status_code,
        headers=dict(raw.headers),
        text=raw.text,
    )
    _log_response(template, response)
    return response


def expect_status(response: ApiResponse, expected: int) -> ApiResponse:
    if response.status_code != expected:
        raise UnexpectedStatus(response.method, response.url, expected, response.status_code, response.text)
    return response


def _envelope_data(response: ApiResponse) -> Any:
    body = response.json()
    if not isinstance(body, dict):
        raise ResponseDecodeError(f"{response.method} {response.url} body is not an envelope", response.text)
    try:
        envelope = Envelope.model_validate(body)
    except ValidationError as exc:
        raise ResponseDecodeError(f"{response.method} {response.url} invalid envelope: {exc}", response.text) from exc
    if envelope.data is None:
        raise ResponseDecodeError(f"{response.method} {response.url} envelope has no data", response.text)
    return envelope.data


def decode_data(response: ApiResponse, model: Type[ModelT]) -> ModelT:
    data = _envelope_data(response)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ResponseDecodeError(f"cannot decode {model.__name__}: {exc}", response.text) from exc


def decode_data_list(response: ApiResponse, model: Type[ModelT]) -> List[ModelT]:
    data = _envelope_data(response)
    if not isinstance(data, list):
        raise ResponseDecodeError(f"expected a list of {model.__name__}", response.text)
    try:
        return [model.model_validate(item) for item in data]
    except ValidationError as exc:
        raise ResponseDecodeError(f"cannot decode {model.__name__}: {exc}", response.text) from exc
