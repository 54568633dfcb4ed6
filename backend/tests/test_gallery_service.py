import asyncio
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from acrossmedia.shared.core.exceptions import ValidationError
from acrossmedia.shared.models import ContentStatus, ContentType
from acrossmedia.shared.repositories.content_repository import (
    ProjectRepository,
    VideoRepository,
)
from acrossmedia.shared.services.gallery_service import (
    GalleryFilters,
    GalleryService,
    persist_metadata_cache,
)

from conftest import youtube_handler, youtube_item

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


class BrokenYouTube:
    """Adapter stand-in that fails with an error outside the provider taxonomy."""

    async def fetch_video_metadata(self, source_url: str):
        raise KeyError("snippet")


class SlowYouTube:
    """Adapter stand-in whose lookups never finish in time."""

    async def fetch_video_metadata(self, source_url: str):
        await asyncio.sleep(5)


@pytest.fixture
def add_project(session):
    async def factory(title: str, *, days: int = 0, **fields):
        fields.setdefault("category", "Branded Content")
        fields.setdefault("status", ContentStatus.PUBLISHED)
        return await ProjectRepository(session).create(
            title=title,
            description=fields.pop("description", f"{title} description"),
            image_url=f"https://cdn.example.com/{title}.jpg",
            created_at=BASE_TIME + timedelta(days=days),
            **fields,
        )

    return factory


@pytest.fixture
def add_video(session):
    async def factory(title: str, video_id: str, *, days: int = 0, **fields):
        fields.setdefault("category", "Branded Content")
        fields.setdefault("status", ContentStatus.ACTIVE)
        return await VideoRepository(session).create(
            title=title,
            description=fields.pop("description", f"{title} description"),
            url=f"https://www.youtube.com/watch?v={video_id}",
            created_at=BASE_TIME + timedelta(days=days),
            **fields,
        )

    return factory


@pytest.fixture
def offline_gallery(session, settings, make_youtube):
    """Gallery whose YouTube lookups all come back empty."""
    return GalleryService(session, settings=settings, youtube=make_youtube(youtube_handler({})))


async def test_type_filters_and_visibility(offline_gallery, add_project, add_video):
    await add_project("P1", days=1)
    await add_project("P2", days=2, status=ContentStatus.ACTIVE)
    await add_project("Draft", days=3, status=ContentStatus.DRAFT)
    await add_video("V1", "aaaaaaaaaaa", days=4)
    await add_video("Hidden", "bbbbbbbbbbb", days=5, status=ContentStatus.INACTIVE)

    everything = await offline_gallery.list_gallery_items(GalleryFilters())
    projects = await offline_gallery.list_gallery_items(GalleryFilters(type="project"))
    videos = await offline_gallery.list_gallery_items(GalleryFilters(type="video"))

    assert [item.title for item in everything.items] == ["V1", "P2", "P1"]
    assert everything.total_count == 3
    assert {item.type for item in projects.items} == {ContentType.PROJECT}
    assert projects.total_count == 2
    assert [item.title for item in videos.items] == ["V1"]


async def test_pagination(offline_gallery, add_project):
    for day in range(5):
        await add_project(f"P{day}", days=day)

    first = await offline_gallery.list_gallery_items(GalleryFilters(page=1, page_size=2))
    last = await offline_gallery.list_gallery_items(GalleryFilters(page=3, page_size=2))
    beyond = await offline_gallery.list_gallery_items(GalleryFilters(page=4, page_size=2))

    assert [item.title for item in first.items] == ["P4", "P3"]
    assert first.total_pages == 3
    assert first.total_count == 5
    assert [item.title for item in last.items] == ["P0"]
    assert beyond.items == []
    assert beyond.total_pages == 3


async def test_empty_gallery_has_zero_pages(offline_gallery):
    page = await offline_gallery.list_gallery_items(GalleryFilters())

    assert page.items == []
    assert page.total_pages == 0
    assert page.total_count == 0


async def test_search_and_category(offline_gallery, add_project, add_video):
    await add_project("Summer Campaign", category="Sponsorships")
    await add_project("Rebrand", description="A summer refresh for a retailer", days=1)
    await add_video("Launch Film", "aaaaaaaaaaa", days=2)

    by_term = await offline_gallery.list_gallery_items(GalleryFilters(search_term="SUMMER"))
    by_category = await offline_gallery.list_gallery_items(GalleryFilters(category="Sponsorships"))
    all_categories = await offline_gallery.list_gallery_items(GalleryFilters(category="All"))

    assert {item.title for item in by_term.items} == {"Summer Campaign", "Rebrand"}
    assert [item.title for item in by_category.items] == ["Summer Campaign"]
    assert all_categories.total_count == 3


async def test_video_without_metadata_uses_defaults(offline_gallery, add_video, settings):
    await add_video("Launch Film", "aaaaaaaaaaa")

    page = await offline_gallery.list_gallery_items(GalleryFilters(type="video"))

    item = page.items[0]
    assert item.views == "0"
    assert item.views_display == "0"
    assert item.duration == "0:00"
    assert item.channel_title == settings.GALLERY_DEFAULT_CHANNEL_TITLE
    assert item.title == "Launch Film"
    assert page.refreshed == []


async def test_cached_metadata_is_used_when_lookup_fails(offline_gallery, add_video):
    await add_video(
        "Launch Film",
        "aaaaaaaaaaa",
        views="15230",
        duration="0:58",
        channel_title="Cached Channel",
    )

    page = await offline_gallery.list_gallery_items(GalleryFilters())

    item = page.items[0]
    assert item.views == "15230"
    assert item.views_display == "15.2K"
    assert item.duration == "0:58"
    assert item.channel_title == "Cached Channel"


async def test_live_metadata_overrides_cache(session, settings, make_youtube, add_video):
    video = await add_video("Stored title", "aaaaaaaaaaa", views="10", channel_title="Cached Channel")
    youtube = make_youtube(youtube_handler({"aaaaaaaaaaa": youtube_item("aaaaaaaaaaa", view_count="2460000")}))
    gallery = GalleryService(session, settings=settings, youtube=youtube)

    page = await gallery.list_gallery_items(GalleryFilters())

    item = page.items[0]
    assert item.title == "Live title"
    assert item.views == "2460000"
    assert item.views_display == "2.5M"
    assert item.duration == "4:05"
    assert item.channel_title == "Live Channel"
    assert item.published_at == datetime(2025, 1, 20, 12, tzinfo=timezone.utc)
    assert [video_id for video_id, _ in page.refreshed] == [video.id]


async def test_unparseable_video_url_falls_back(offline_gallery, session):
    await VideoRepository(session).create(
        title="Broken link",
        description="",
        category="Branded Content",
        url="https://vimeo.com/12345",
        status=ContentStatus.ACTIVE,
    )

    page = await offline_gallery.list_gallery_items(GalleryFilters())

    assert [item.title for item in page.items] == ["Broken link"]
    assert page.items[0].views == "0"


async def test_slow_lookup_times_out_without_failing_the_page(session, settings, add_video):
    await add_video("Launch Film", "aaaaaaaaaaa", views="42")
    fast_settings = settings.model_copy(update={"YOUTUBE_TIMEOUT_SECONDS": 0.05})
    gallery = GalleryService(session, settings=fast_settings, youtube=SlowYouTube())

    page = await gallery.list_gallery_items(GalleryFilters())

    assert page.items[0].views == "42"
    assert page.refreshed == []


async def test_malformed_provider_body_only_affects_its_video(session, settings, make_youtube, add_video):
    await add_video("Healthy", "aaaaaaaaaaa", days=1)
    await add_video("Broken", "bbbbbbbbbbb", views="42")
    healthy = youtube_handler({"aaaaaaaaaaa": youtube_item("aaaaaaaaaaa", title="Healthy live")})

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.params.get("id") == "bbbbbbbbbbb":
            return httpx.Response(200, text="<html>proxy error</html>")
        return healthy(request)

    gallery = GalleryService(session, settings=settings, youtube=make_youtube(handler))

    page = await gallery.list_gallery_items(GalleryFilters())

    assert page.total_count == 2
    by_title = {item.title: item for item in page.items}
    assert by_title["Healthy live"].channel_title == "Live Channel"
    assert by_title["Broken"].views == "42"
    assert len(page.refreshed) == 1


async def test_unexpected_adapter_error_falls_back(session, settings, add_video):
    await add_video("Launch Film", "aaaaaaaaaaa", views="42")
    gallery = GalleryService(session, settings=settings, youtube=BrokenYouTube())

    page = await gallery.list_gallery_items(GalleryFilters())

    assert [item.views for item in page.items] == ["42"]
    assert page.refreshed == []


async def test_published_video_sorts_by_publish_date(offline_gallery, add_project, add_video):
    await add_project("Newer project", days=10)
    await add_video(
        "Old upload",
        "aaaaaaaaaaa",
        days=20,
        published_at=BASE_TIME + timedelta(days=5),
    )

    page = await offline_gallery.list_gallery_items(GalleryFilters())

    assert [item.title for item in page.items] == ["Newer project", "Old upload"]


@pytest.mark.parametrize(
    "filters",
    [
        GalleryFilters(page=0),
        GalleryFilters(page_size=0),
        GalleryFilters(type="podcast"),
    ],
)
async def test_invalid_filters(offline_gallery, filters):
    with pytest.raises(ValidationError):
        await offline_gallery.list_gallery_items(filters)


async def test_persist_metadata_cache_writes_back(session, session_factory, settings, make_youtube, add_video):
    video = await add_video("Launch Film", "aaaaaaaaaaa")
    await session.commit()
    youtube = make_youtube(youtube_handler({"aaaaaaaaaaa": youtube_item("aaaaaaaaaaa", view_count="777")}))
    page = await GalleryService(session, settings=settings, youtube=youtube).list_gallery_items(GalleryFilters())
    await session.commit()

    await persist_metadata_cache(page.refreshed, session_factory)

    async with session_factory() as fresh:
        stored = await VideoRepository(fresh).get(video.id)
    assert stored.views == "777"
    assert stored.duration == "4:05"
    assert stored.channel_title == "Live Channel"
    assert stored.title == "Launch Film"
