"""Tests for the Gravatar provider (lookup execution and clue building)."""

from __future__ import annotations

import httpx
import pytest

from extsearch.config import ExternalSearchConfig
from extsearch.diagnostics import InMemoryDiagnosticsSink
from extsearch.models import EntityType, ExternalSearchProvider, ExternalSearchQuery
from extsearch.providers.gravatar.client import GravatarClient, GravatarFetchError
from extsearch.providers.gravatar.model import ProfileAccount
from extsearch.providers.gravatar.provider import GRAVATAR_PROVIDER_ID, GravatarProvider
from tests.fixtures.gravatar import ANN_EMAIL, ANN_PROFILE_ID, make_response_body

PNG_BYTES = b"\x89PNG\r\n"


class _Handler:
    """Mock transport handler serving profiles and avatar images."""

    def __init__(self, *, profile_status: int = 200, avatar_status: int = 200) -> None:
        self.profile_status = profile_status
        self.avatar_status = avatar_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if "/avatar/" in request.url.path:
            return httpx.Response(
                self.avatar_status, content=PNG_BYTES, headers={"content-type": "image/png"}
            )
        if self.profile_status == 200:
            return httpx.Response(200, json=make_response_body())
        if self.profile_status == 599:
            raise httpx.ReadTimeout("timed out")
        return httpx.Response(self.profile_status, json={})


def _provider(
    handler: _Handler,
    *,
    download_preview_images: bool = True,
    diagnostics: InMemoryDiagnosticsSink | None = None,
) -> GravatarProvider:
    client = GravatarClient(http_client=httpx.Client(transport=httpx.MockTransport(handler)))
    return GravatarProvider(
        client=client,
        diagnostics=diagnostics,
        config=ExternalSearchConfig(download_preview_images=download_preview_images),
    )


def _query(identifier: str = ANN_EMAIL) -> ExternalSearchQuery:
    return ExternalSearchQuery(
        provider_id=GRAVATAR_PROVIDER_ID, entity_type=EntityType.PERSON, identifier=identifier
    )


class TestGravatarProviderProperties:
    def test_provider_id(self) -> None:
        assert _provider(_Handler()).provider_id == GRAVATAR_PROVIDER_ID

    def test_implements_contract(self) -> None:
        assert isinstance(_provider(_Handler()), ExternalSearchProvider)

    def test_accepts(self) -> None:
        provider = _provider(_Handler())
        assert provider.accepts(EntityType.PERSON)
        assert provider.accepts(EntityType.CONTACT)
        assert not provider.accepts(EntityType.ORGANIZATION)


class TestExecuteSearch:
    def test_hit_wraps_email_and_profile(self) -> None:
        handler = _Handler()
        result = _provider(handler).execute_search(_query())
        assert result is not None
        assert result.email == ANN_EMAIL
        assert result.profile.id == ANN_PROFILE_ID
        assert len(handler.requests) == 1

    def test_no_profile_returns_none(self) -> None:
        assert _provider(_Handler(profile_status=404)).execute_search(_query()) is None

    def test_empty_identifier_skips_call(self) -> None:
        handler = _Handler()
        assert _provider(handler).execute_search(_query("")) is None
        assert handler.requests == []

    @pytest.mark.parametrize("status", [500, 599])
    def test_failures_propagate(self, status: int) -> None:
        handler = _Handler(profile_status=status)
        with pytest.raises(GravatarFetchError):
            _provider(handler).execute_search(_query())
        assert len(handler.requests) == 1


class TestBuildClues:
    def test_single_clue_with_origin_code(self) -> None:
        provider = _provider(_Handler())
        result = provider.execute_search(_query())
        assert result is not None
        clues = provider.build_clues(_query(), result)
        assert len(clues) == 1
        clue = clues[0]
        assert clue.code.value == ANN_PROFILE_ID
        assert clue.code.origin == "cluedin:gravatar"
        assert clue.origin_provider_id == GRAVATAR_PROVIDER_ID
        assert clue.data.display_name == "Ann Cluedin"

    def test_preview_image_downloaded_at_fixed_size(self) -> None:
        handler = _Handler()
        provider = _provider(handler)
        result = provider.execute_search(_query())
        assert result is not None
        clue = provider.build_clues(_query(), result)[0]
        assert clue.preview_image is not None
        assert clue.preview_image.data == PNG_BYTES
        assert clue.preview_image.content_type == "image/png"
        assert clue.preview_image.source_url.endswith("?s=200")
        assert str(handler.requests[-1].url) == clue.preview_image.source_url

    def test_preview_download_failure_keeps_clue(self) -> None:
        provider = _provider(_Handler(avatar_status=500))
        result = provider.execute_search(_query())
        assert result is not None
        clue = provider.build_clues(_query(), result)[0]
        assert clue.preview_image is None
        assert clue.data.name == "Ann C"

    def test_preview_download_disabled(self) -> None:
        handler = _Handler()
        provider = _provider(handler, download_preview_images=False)
        result = provider.execute_search(_query())
        assert result is not None
        assert provider.build_clues(_query(), result)[0].preview_image is None
        assert len(handler.requests) == 1

    def test_unknown_tags_reach_diagnostics(self) -> None:
        sink = InMemoryDiagnosticsSink()
        provider = _provider(_Handler(), diagnostics=sink)
        result = provider.execute_search(_query())
        assert result is not None
        profile = result.profile.model_copy(
            update={"accounts": [ProfileAccount(shortname="myspace", username="ann")]}
        )
        metadata = provider.get_primary_entity_metadata(
            result.model_copy(update={"profile": profile})
        )
        assert len(sink.messages) == 1
        assert "myspace" in sink.messages[0]
        assert metadata.name == "Ann C"
