"""Tests for character loading from JSON, files and URLs."""

import json

import httpx
import pytest

from eliza_cli.logic.character.loader import json_to_character, load_character_from_url, load_character_try_path
from eliza_cli.logic.utils.errors import CharacterLoadError
from eliza_cli.logic.utils.identifiers import string_to_uuid

TRUMP = {"name": "Trump", "bio": ["A character"], "plugins": ["@elizaos/plugin-openai"], "style": {"all": []}}


class TestJsonToCharacter:
    """Tests for json_to_character."""

    def test_assigns_deterministic_id(self):
        first = json_to_character(dict(TRUMP))
        second = json_to_character(dict(TRUMP))

        assert first.id == string_to_uuid("Trump")
        assert first.id == second.id

    def test_keeps_explicit_id(self):
        assert json_to_character({"name": "Trump", "id": "fixed"}).id == "fixed"

    def test_preserves_unknown_keys(self):
        character = json_to_character(dict(TRUMP))

        assert character.model_dump()["style"] == {"all": []}

    def test_merges_environment_secrets(self, monkeypatch):
        monkeypatch.setenv("CHARACTER.SUPPORT_BOT.API_KEY", "from-env")
        monkeypatch.setenv("CHARACTER.SUPPORT_BOT.REGION", "from-env")

        character = json_to_character({"name": "Support Bot", "settings": {"secrets": {"REGION": "eu"}}})

        assert character.secrets == {"API_KEY": "from-env", "REGION": "eu"}

    @pytest.mark.parametrize("data", [{}, {"name": ""}, {"name": "X", "plugins": "not-a-list"}, ["name"]])
    def test_invalid_data_raises(self, data):
        with pytest.raises(CharacterLoadError):
            json_to_character(data)


class TestLoadCharacterTryPath:
    """Tests for load_character_try_path."""

    @pytest.fixture
    def workdir(self, tmp_path):
        characters = tmp_path / "characters"
        characters.mkdir()
        (characters / "trump.json").write_text(json.dumps(TRUMP), encoding="utf-8")
        return tmp_path

    @pytest.mark.asyncio
    async def test_exact_path(self, workdir):
        character = await load_character_try_path(str(workdir / "characters" / "trump.json"))

        assert character.name == "Trump"

    @pytest.mark.asyncio
    async def test_relative_to_working_directory(self, workdir):
        character = await load_character_try_path("characters/trump.json", cwd=workdir)

        assert character.name == "Trump"

    @pytest.mark.asyncio
    async def test_characters_directory_without_suffix(self, workdir):
        character = await load_character_try_path("trump", cwd=workdir)

        assert character.plugin_names == ["@elizaos/plugin-openai"]

    @pytest.mark.asyncio
    async def test_missing_file_lists_tried_paths(self, workdir):
        with pytest.raises(CharacterLoadError) as exc_info:
            await load_character_try_path("nobody", cwd=workdir)

        assert "nobody" in str(exc_info.value)
        assert "tried" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_invalid_json_file(self, workdir):
        (workdir / "broken.json").write_text("{", encoding="utf-8")

        with pytest.raises(CharacterLoadError):
            await load_character_try_path("broken.json", cwd=workdir)

    @pytest.mark.asyncio
    async def test_non_utf8_file_raises_character_load_error(self, workdir):
        (workdir / "garbled.json").write_bytes(b'{"name": "\xff"}')

        with pytest.raises(CharacterLoadError) as exc_info:
            await load_character_try_path("garbled.json", cwd=workdir)

        assert "not valid UTF-8" in str(exc_info.value)


class TestLoadCharacterFromUrl:
    """Tests for URL loading through httpx."""

    @pytest.mark.asyncio
    async def test_fetches_character(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/characters/trump.json"
            return httpx.Response(200, json=TRUMP)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            character = await load_character_try_path("https://example.com/characters/trump.json", client=client)

        assert character.name == "Trump"

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(404))

        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(CharacterLoadError):
                await load_character_from_url("https://example.com/missing.json", client=client)

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))

        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(CharacterLoadError):
                await load_character_from_url("https://example.com/page", client=client)
