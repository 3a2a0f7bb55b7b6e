import httpx
import pytest

from mockworks.thing_cache.http_thing_service import HttpThingService
from mockworks.thing_cache.models import Thing

BASE_URL = "https://things.example.com"


def _make_service(handler) -> HttpThingService:  # type: ignore[no-untyped-def]
    return HttpThingService(
        base_url=BASE_URL,
        timeout_seconds=5,
        transport=httpx.MockTransport(handler),
    )


class TestHttpThingService:
    def test_reads_thing(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(200, json={"color": "blue"})

        with _make_service(handler) as service:
            thing = service.try_read("TheDress")

        assert thing == Thing("TheDress", {"color": "blue"})
        assert seen == ["/things/TheDress"]

    def test_not_found_is_none(self) -> None:
        service = _make_service(lambda request: httpx.Response(404))
        assert service.try_read("missing") is None

    def test_server_error_is_none(self) -> None:
        service = _make_service(lambda request: httpx.Response(500, json={}))
        assert service.try_read("TheDress") is None

    def test_network_error_is_none(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("down", request=request)

        assert _make_service(handler).try_read("TheDress") is None

    def test_invalid_json_is_none(self) -> None:
        service = _make_service(lambda request: httpx.Response(200, content=b"<html>"))
        assert service.try_read("TheDress") is None

    def test_non_object_json_is_none(self) -> None:
        service = _make_service(lambda request: httpx.Response(200, json=[1, 2]))
        assert service.try_read("TheDress") is None


class TestIdEscaping:
    @pytest.mark.parametrize(
        ("thing_id", "raw_path"),
        [
            ("a?b", b"/things/a%3Fb"),
            ("a/b", b"/things/a%2Fb"),
            ("a#b", b"/things/a%23b"),
            ("cool boots", b"/things/cool%20boots"),
        ],
    )
    def test_id_is_a_single_path_segment(self, thing_id: str, raw_path: bytes) -> None:
        seen: list[httpx.URL] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json={})

        thing = _make_service(handler).try_read(thing_id)

        assert thing == Thing(thing_id)
        assert seen[0].raw_path == raw_path
        assert seen[0].query == b""
