import httpx
import pytest

from acrossmedia.shared.adapters.youtube_adapter import YouTubeAdapter, extract_video_id
from acrossmedia.shared.core.exceptions import (
    ExternalServiceError,
    InvalidVideoUrlError,
    VideoNotFoundError,
)

from conftest import youtube_handler, youtube_item


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?t=42",
        "https://youtube.com/shorts/dQw4w9WgXcQ?si=abc",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
    ],
)
def test_extract_video_id_accepts_known_shapes(url):
    assert extract_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("url", ["", "https://vimeo.com/12345", "https://youtube.com/watch?v=short"])
def test_extract_video_id_rejects_unknown_urls(url):
    with pytest.raises(InvalidVideoUrlError):
        extract_video_id(url)


async def test_fetch_video_metadata_maps_response(make_youtube):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return youtube_handler({"dQw4w9WgXcQ": youtube_item("dQw4w9WgXcQ", duration="PT1H2M3S")})(request)

    adapter = make_youtube(handler)
    metadata = await adapter.fetch_video_metadata("https://youtu.be/dQw4w9WgXcQ")

    assert metadata.video_id == "dQw4w9WgXcQ"
    assert metadata.title == "Live title"
    assert metadata.duration == "1:02:03"
    assert metadata.views == "1500"
    assert metadata.channel_title == "Live Channel"
    assert metadata.thumbnail_url.endswith("/hqdefault.jpg")
    assert metadata.published_at.year == 2025

    params = requests[0].url.params
    assert params["id"] == "dQw4w9WgXcQ"
    assert params["part"] == "snippet,statistics,contentDetails"
    assert params["key"] == "test-youtube-key"


async def test_missing_view_count_defaults_to_zero(make_youtube):
    item = youtube_item("dQw4w9WgXcQ", view_count=None)
    del item["snippet"]["thumbnails"]["high"]
    adapter = make_youtube(youtube_handler({"dQw4w9WgXcQ": item}))

    metadata = await adapter.fetch_by_id("dQw4w9WgXcQ")

    assert metadata.views == "0"
    assert metadata.thumbnail_url.endswith("/default.jpg")


async def test_empty_result_is_not_found(make_youtube):
    adapter = make_youtube(youtube_handler({}))

    with pytest.raises(VideoNotFoundError):
        await adapter.fetch_by_id("dQw4w9WgXcQ")


async def test_error_status_is_not_found(make_youtube):
    adapter = make_youtube(lambda request: httpx.Response(403, json={"error": "quota"}))

    with pytest.raises(VideoNotFoundError):
        await adapter.fetch_by_id("dQw4w9WgXcQ")


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>proxy error</html>"),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, json={"items": ["not-an-item"]}),
        httpx.Response(200, json={"items": [{"snippet": "flattened"}]}),
    ],
)
async def test_malformed_body_is_not_found(make_youtube, response):
    adapter = make_youtube(lambda request: response)

    with pytest.raises(VideoNotFoundError) as exc_info:
        await adapter.fetch_by_id("dQw4w9WgXcQ")

    assert exc_info.value.details["reason"] == "malformed response"


async def test_timeout_is_not_found(make_youtube):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    adapter = make_youtube(handler)

    with pytest.raises(VideoNotFoundError):
        await adapter.fetch_by_id("dQw4w9WgXcQ")


async def test_transport_error_is_external_service_error(make_youtube):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    adapter = make_youtube(handler)

    with pytest.raises(ExternalServiceError):
        await adapter.fetch_by_id("dQw4w9WgXcQ")


async def test_missing_api_key_is_external_service_error(settings):
    adapter = YouTubeAdapter(settings.model_copy(update={"YOUTUBE_API_KEY": ""}))

    with pytest.raises(ExternalServiceError):
        await adapter.fetch_by_id("dQw4w9WgXcQ")
