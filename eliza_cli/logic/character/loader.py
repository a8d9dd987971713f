"""
Character loading from files and URLs.

``load_character_try_path`` accepts an http(s) URL or a filesystem path. Paths
are tried as given, relative to the working directory, and under
``characters/``, each with and without a ``.json`` suffix.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import aiofiles
import httpx
from pydantic import ValidationError

from eliza_cli.logic.utils.errors import CharacterLoadError
from eliza_cli.logic.utils.identifiers import string_to_uuid
from eliza_cli.schemas.character import Character

logger = logging.getLogger(__name__)

CHARACTER_FETCH_TIMEOUT = 30.0
_SECRET_ENV_PREFIX = "CHARACTER."


def _secret_env_key(name: str) -> str:
    return name.upper().replace(" ", "_")


def _env_secrets_for(character_name: str) -> Dict[str, str]:
    """Secrets from ``CHARACTER.<NAME>.<KEY>`` environment variables."""
    prefix = f"{_SECRET_ENV_PREFIX}{_secret_env_key(character_name)}."
    return {key[len(prefix) :]: value for key, value in os.environ.items() if key.startswith(prefix) and value}


def json_to_character(data: Dict[str, Any]) -> Character:
    """Validate character JSON, assign its id, and merge environment secrets.

    Raises:
        CharacterLoadError: If the data is not a valid character.
    """
    if not isinstance(data, dict):
        raise CharacterLoadError("<json>", "character must be a JSON object")
    try:
        character = Character.model_validate(data)
    except ValidationError as e:
        raise CharacterLoadError(str(data.get("name", "<json>")), f"invalid character: {e}") from e

    if not character.id:
        character.id = string_to_uuid(character.name)

    env_secrets = _env_secrets_for(character.name)
    if env_secrets:
        settings = dict(character.settings)
        settings["secrets"] = {**env_secrets, **character.secrets}
        character.settings = settings
    return character


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


async def load_character_from_url(url: str, client: Optional[httpx.AsyncClient] = None) -> Character:
    """Fetch and parse a character from a URL."""
    owns_client = client is None
    http = client or httpx.AsyncClient(timeout=CHARACTER_FETCH_TIMEOUT, follow_redirects=True)
    try:
        response = await http.get(url)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as e:
        raise CharacterLoadError(url, str(e)) from e
    except ValueError as e:
        raise CharacterLoadError(url, f"invalid JSON: {e}") from e
    finally:
        if owns_client:
            await http.aclose()
    return json_to_character(data)


async def load_character_from_file(path: Path) -> Character:
    """Read and parse a character JSON file."""
    try:
        async with aiofiles.open(path, mode="r", encoding="utf-8") as f:
            content = await f.read()
        data = json.loads(content)
    except OSError as e:
        raise CharacterLoadError(str(path), str(e)) from e
    except UnicodeDecodeError as e:
        raise CharacterLoadError(str(path), f"not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise CharacterLoadError(str(path), f"invalid JSON: {e}") from e
    return json_to_character(data)


def _candidate_paths(source: str, cwd: Path) -> List[Path]:
    raw = Path(source).expanduser()
    bases = [raw] if raw.is_absolute() else [raw, cwd / raw, cwd / "characters" / raw, cwd / "characters" / raw.name]
    candidates: List[Path] = []
    for base in bases:
        variants = [base] if not base.name or base.suffix == ".json" else [base, base.with_name(base.name + ".json")]
        for path in variants:
            if path not in candidates:
                candidates.append(path)
    return candidates


async def load_character_try_path(
    source: str,
    cwd: Optional[Path] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Character:
    """Load a character from a URL or the first matching path.

    Raises:
        CharacterLoadError: If the URL fails or no candidate path exists.
    """
    if _is_url(source):
        return await load_character_from_url(source, client=client)

    base_dir = cwd or Path.cwd()
    candidates = _candidate_paths(source, base_dir)
    for path in candidates:
        if path.is_file():
            character = await load_character_from_file(path)
            logger.info(f"Loaded character {character.name} from {path}")
            return character

    tried = ", ".join(str(path) for path in candidates)
    raise CharacterLoadError(source, f"file not found (tried: {tried})")
