import httpx
import pytest

from mlexport.api import MarketplaceClient
from mlexport.export import FetchFailedError, LookupFailedError


def make_client(handler):
    return MarketplaceClient(
        base_url="https://api.test", transport=httpx.MockTransport(handler)
    )


def test_search_builds_request():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"paging": {"total": 0}, "results": []})

    with make_client(handler) as client:
        data = client.search("MLA", offset=50, limit=50, q="ipod")

    assert data == {"paging": {"total": 0}, "results": []}
    request = requests[0]
    assert request.url.path == "/sites/MLA/search"
    assert request.url.params["q"] == "ipod"
    assert request.url.params["offset"] == "50"
    assert request.url.params["limit"] == "50"


def test_my_orders_sends_token_as_header():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"paging": {"total": 0}, "results": []})

    with make_client(handler) as client:
        client.my_orders(offset=0, limit=50, access_token="APP_USR-secret", seller=42)

    request = requests[0]
    assert request.url.path == "/orders/search"
    assert request.headers["Authorization"] == "Bearer APP_USR-secret"
    assert "access_token" not in request.url.params
    assert request.url.params["seller"] == "42"


def test_my_orders_without_token_has_no_auth_header():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={})

    with make_client(handler) as client:
        client.my_orders(offset=0, limit=50)

    assert "Authorization" not in requests[0].headers


def test_http_error_becomes_fetch_failed():
    def handler(request):
        return httpx.Response(403, json={"message": "invalid access token"})

    with make_client(handler) as client:
        with pytest.raises(FetchFailedError) as exc_info:
            client.search("MLA", offset=0, limit=50)

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "403 - invalid access token"


def test_http_error_with_plain_body():
    def handler(request):
        return httpx.Response(500, text="upstream failure")

    with make_client(handler) as client:
        with pytest.raises(FetchFailedError) as exc_info:
            client.search("MLA", offset=0, limit=50)

    assert exc_info.value.message == "500 - upstream failure"


def test_transport_error_becomes_fetch_failed():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with make_client(handler) as client:
        with pytest.raises(FetchFailedError) as exc_info:
            client.search("MLA", offset=0, limit=50)

    assert isinstance(exc_info.value.original_error, httpx.ConnectError)


def test_invalid_json_becomes_fetch_failed():
    def handler(request):
        return httpx.Response(200, text="<html>")

    with make_client(handler) as client:
        with pytest.raises(FetchFailedError):
            client.search("MLA", offset=0, limit=50)


def test_api_calls_are_logged(mocker):
    log_api_call = mocker.patch("mlexport.api.client.log_api_call")

    def handler(request):
        return httpx.Response(200, json={"results": []})

    with make_client(handler) as client:
        client.search("MLA", offset=0, limit=50)

    log_api_call.assert_called_once()
    args, kwargs = log_api_call.call_args
    assert args[0] == "GET"
    assert kwargs["status_code"] == 200


def test_user_lookup():
    def handler(request):
        assert request.url.path == "/users/42"
        return httpx.Response(200, json={"id": 42, "nickname": "SELLER"})

    with make_client(handler) as client:
        assert client.user(42)["nickname"] == "SELLER"


def test_user_lookup_failure():
    def handler(request):
        return httpx.Response(404, json={"message": "user not found"})

    with make_client(handler) as client:
        with pytest.raises(LookupFailedError) as exc_info:
            client.user(42)

    assert exc_info.value.user_id == 42
    assert isinstance(exc_info.value.original_error, FetchFailedError)


def test_user_lookup_non_object_body():
    def handler(request):
        return httpx.Response(200, json=[1, 2])

    with make_client(handler) as client:
        with pytest.raises(LookupFailedError):
            client.user(42)
