import pytest
from fastapi.testclient import TestClient

from fake_api import API_PREFIX, create_app
from notes_suite.config import Settings, get_settings
from notes_suite.context import ApiContext
from notes_suite.lifecycle import FixtureLifecycle
from notes_suite.transport import new_session


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="run against the configured remote Notes API instead of the local stand-in",
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--live"):
        return
    skip_offline = pytest.mark.skip(reason="inspects the local stand-in API")
    for item in items:
        if "offline" in item.keywords:
            item.add_marker(skip_offline)


@pytest.fixture(scope="session")
def live(request):
    return request.config.getoption("--live")


@pytest.fixture(scope="session")
def settings(live):
    if live:
        return get_settings()
    return Settings(base_url=f"http://testserver{API_PREFIX}", log_level="ALL")


@pytest.fixture(scope="session")
def fake_app():
    return create_app()


@pytest.fixture(scope="session")
def session(live, fake_app):
    if live:
        with new_session() as http:
            yield http
    else:
        with TestClient(fake_app) as client:
            yield client


@pytest.fixture(scope="session")
def lifecycle(session, settings):
    suite = FixtureLifecycle(session, settings)
    suite.start()
    return suite


@pytest.fixture
def api(lifecycle):
    ctx = lifecycle.set_up()
    yield ctx
    lifecycle.tear_down()


@pytest.fixture
def anon(session, settings):
    return ApiContext(session=session, settings=settings)
