from datetime import datetime, timezone

import pytest
import requests

from darksky.api.client import DarkSkyClient, resolve_options, validate_coordinates
from darksky.api.errors import AuthenticationError, DecodeError, TransportError
from darksky.data.options import Block, Language, Options, Unit


class DummyResp:
    def __init__(self, status_code, content):
        self.status_code = status_code
        self.content = content if isinstance(content, bytes) else content.encode("utf-8")
        self.text = self.content.decode("utf-8")


class DummySession:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        return self.responses.pop(0)

    def close(self):
        self.closed = True


class FailingSession(DummySession):
    def get(self, url, params=None, timeout=None):
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def make_client(settings):
    def factory(*responses):
        session = DummySession(responses)
        return DarkSkyClient(settings=settings, session=session), session
    return factory


def test_get_forecast(make_client, forecast_body):
    client, session = make_client(DummyResp(200, forecast_body))

    forecast = client.get_forecast(37.8267, -122.423)

    assert forecast.currently.summary == "Drizzle"
    assert session.calls == [{
        "url": "https://api.darksky.net/forecast/test-key/37.8267,-122.423",
        "params": {"units": "auto"},
        "timeout": 10,
    }]


def test_get_forecast_with_options_callable(make_client, forecast_body):
    client, session = make_client(DummyResp(200, forecast_body))

    client.get_forecast_with_options(
        19.2465, -99.1013,
        lambda o: o.exclude([Block.CURRENTLY, Block.DAILY]).extend_hourly().language(Language.ES).unit(Unit.SI),
    )

    assert session.calls[0]["url"].endswith("/forecast/test-key/19.2465,-99.1013")
    assert session.calls[0]["params"] == {
        "exclude": "currently,daily",
        "extend": "hourly",
        "lang": "es",
        "units": "si",
    }


def test_get_forecast_with_options_instance(make_client, forecast_body):
    client, session = make_client(DummyResp(200, forecast_body))

    client.get_forecast_with_options(1.0, 2.0, Options().exclude([Block.MINUTELY]))

    assert session.calls[0]["params"] == {"exclude": "minutely"}


def test_time_machine(make_client, forecast_body):
    client, session = make_client(DummyResp(200, forecast_body), DummyResp(200, forecast_body))

    client.get_forecast_time_machine(19.2465, -99.1013, 1450000000, lambda o: o.unit(Unit.SI))
    client.get_forecast_time_machine(19.2465, -99.1013, datetime(2015, 12, 13, 9, 46, 40, tzinfo=timezone.utc))

    assert session.calls[0]["url"].endswith("/forecast/test-key/19.2465,-99.1013,1450000000")
    assert session.calls[0]["params"] == {"units": "si"}
    assert session.calls[1]["url"].endswith("/19.2465,-99.1013,2015-12-13T09:46:40Z")
    assert session.calls[1]["params"] == {}


def test_api_key_argument_overrides_settings(settings, forecast_body):
    session = DummySession([DummyResp(200, forecast_body)])
    client = DarkSkyClient(api_key="other-key", settings=settings, session=session)

    client.get_forecast(1.0, 2.0)

    assert "/forecast/other-key/" in session.calls[0]["url"]


def test_missing_api_key_raises():
    from darksky.config.settings import Settings

    with pytest.raises(ValueError):
        DarkSkyClient(settings=Settings(darksky_api_key="", _env_file=None))


def test_http_error_is_mapped(make_client):
    client, _ = make_client(DummyResp(403, '{"code": 403, "error": "permission denied"}'))

    with pytest.raises(AuthenticationError) as info:
        client.get_forecast(1.0, 2.0)

    assert "permission denied" in str(info.value)


def test_schema_mismatch_raises_decode_error(make_client):
    client, _ = make_client(DummyResp(200, '{"latitude": 1.0}'))

    with pytest.raises(DecodeError):
        client.get_forecast(1.0, 2.0)


def test_transport_error(settings):
    client = DarkSkyClient(settings=settings, session=FailingSession([]))

    with pytest.raises(TransportError) as info:
        client.get_forecast(1.0, 2.0)

    assert isinstance(info.value.__cause__, requests.ConnectionError)


@pytest.mark.parametrize("lat, lon", [(91, 0), (-90.5, 0), (0, 180.1), (0, -181), (float("nan"), 0)])
def test_invalid_coordinates_are_rejected_before_request(make_client, lat, lon):
    client, session = make_client()

    with pytest.raises(ValueError):
        client.get_forecast(lat, lon)

    assert session.calls == []


def test_validate_coordinates_accepts_bounds():
    validate_coordinates(90, 180)
    validate_coordinates(-90, -180)


def test_resolve_options():
    built = Options().unit(Unit.SI)

    assert resolve_options(None) == Options()
    assert resolve_options(built) is built
    assert resolve_options(lambda o: o.unit(Unit.SI)) == built

    with pytest.raises(TypeError):
        resolve_options(lambda o: None)
    with pytest.raises(TypeError):
        resolve_options({"units": "si"})


def test_context_manager_closes_owned_session_only(settings):
    injected = DummySession([])
    with DarkSkyClient(settings=settings, session=injected):
        pass
    assert injected.closed is False

    client = DarkSkyClient(settings=settings)
    assert client.session.headers["Accept"] == "application/json"
    client.close()


def test_build_url(make_client):
    client, session = make_client()

    assert client.build_url(1.0, 2.0) == "https://api.darksky.net/forecast/test-key/1.0,2.0?units=auto"
    assert client.build_url(1.0, 2.0, time=0, options=lambda o: o.unit("ca")) == (
        "https://api.darksky.net/forecast/test-key/1.0,2.0,0?units=ca"
    )
    assert session.calls == []


def test_build_url_matches_time_machine_request(make_client, forecast_body):
    client, session = make_client(DummyResp(200, forecast_body))

    client.get_forecast_time_machine(1.0, 2.0, 0)

    sent = session.calls[0]
    assert sent["params"] == {}
    assert client.build_url(1.0, 2.0, time=0) == sent["url"]
    assert client.build_url(1.0, 2.0, time=0) == "https://api.darksky.net/forecast/test-key/1.0,2.0,0"
