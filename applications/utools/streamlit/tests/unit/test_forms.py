import pytest

from utools_ui.api_client import ToolApiError
from utools_ui.tools import network_ping, unit_converter


class FakeApi:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple] = []

    def _reply(self):
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, endpoint):
        self.calls.append(("GET", endpoint, None))
        return self._reply()

    def post(self, endpoint, data=None):
        self.calls.append(("POST", endpoint, data))
        return self._reply()


def test_convert_posts_units() -> None:
    api = FakeApi({"result": 0.001})
    assert unit_converter.convert(api, 1, "m", "km") == 0.001
    assert api.calls == [("POST", "/convert", {"value": 1, "from": "m", "to": "km"})]


@pytest.mark.parametrize("value", [0, -3.5])
def test_convert_rejects_non_positive_before_request(value: float) -> None:
    api = FakeApi({"result": 1})
    with pytest.raises(ValueError, match="valid positive number"):
        unit_converter.convert(api, value, "m", "km")
    assert api.calls == []


def test_convert_propagates_api_error() -> None:
    api = FakeApi(error=ToolApiError("Unsupported conversion", status_code=400, code="UnsupportedConversion"))
    with pytest.raises(ToolApiError):
        unit_converter.convert(api, 2, "m", "km")


def test_load_units() -> None:
    api = FakeApi([{"code": "m", "label": "Meters (m)"}, {"code": "km", "label": "Kilometers (km)"}])
    assert unit_converter.load_units(api) == {"m": "Meters (m)", "km": "Kilometers (km)"}


def test_format_result() -> None:
    assert unit_converter.format_result(1000.0, "m") == "Result: 1,000.0 m"


@pytest.mark.parametrize("count, expected", [(0, 1), (4, 4), (25, 10)])
def test_clamp_count(count: int, expected: int) -> None:
    assert network_ping.clamp_count(count) == expected


def test_run_ping_trims_host_and_clamps_count() -> None:
    api = FakeApi({"rttMs": 12, "success": True, "host": "example.com"})
    result = network_ping.run_ping(api, "  example.com  ", 40)
    assert api.calls == [("POST", "/run", {"host": "example.com", "count": 10})]
    assert result["success"] is True
    assert result["timestamp"]


@pytest.mark.parametrize("host", ["", "   "])
def test_run_ping_rejects_blank_host(host: str) -> None:
    api = FakeApi()
    with pytest.raises(ValueError, match="valid host"):
        network_ping.run_ping(api, host, 1)
    assert api.calls == []


def test_describe_result() -> None:
    ok = {"rttMs": 8, "success": True, "host": "example.com"}
    soft = {"rttMs": 0, "success": False, "host": "10.0.0.1", "error": "TimedOut"}
    assert network_ping.describe_result(ok) == "example.com · RTT: 8ms"
    assert network_ping.describe_result(soft) == "10.0.0.1 · TimedOut"
