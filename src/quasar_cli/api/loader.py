"""Locate and parse API descriptor JSON files.

The base framework is searched first; extension directories follow in the
order they are declared in the project config.
"""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from quasar_cli.api.base import API_ADAPTER, ApiDescriptor
from quasar_cli.config import DescribeConfig

API_LIST_FILE = "api-list.json"

_NAMES_ADAPTER = TypeAdapter(list[str])


class ApiError(Exception):
    """Base class for descriptor retrieval failures."""


class ApiNotFoundError(ApiError):
    """No descriptor exists for the requested name."""


class ApiLoadError(ApiError):
    """A descriptor or the API list exists but could not be read."""


def get_api(name: str, config: DescribeConfig) -> tuple[ApiDescriptor, str | None]:
    """Find the descriptor for `name`.

    Returns (api, supplier) where supplier is None for the base framework,
    or the id of the extension that provided it.
    """
    if not name or Path(name).name != name:
        raise ApiNotFoundError(f'No API found for requested "{name}"')

    sources: list[tuple[Path, str | None]] = [(config.api_dir, None)]
    sources.extend((path, ext_id) for ext_id, path in config.extensions.items())

    for root, supplier in sources:
        file_path = root / f"{name}.json"
        if file_path.is_file():
            return parse_api(file_path), supplier

    raise ApiNotFoundError(f'No API found for requested "{name}"')


def parse_api(file_path: Path) -> ApiDescriptor:
    """Parse one descriptor file into its component/directive/plugin model."""
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ApiLoadError(f"Could not read {file_path}") from e

    try:
        return API_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ApiLoadError(f"Invalid API definition in {file_path}") from e


def get_api_list(config: DescribeConfig) -> list[str]:
    """Load the names of every API the framework describes, in file order."""
    file_path = config.api_dir / API_LIST_FILE
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ApiLoadError(f"Could not read the API list from {file_path}") from e

    try:
        return _NAMES_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise ApiLoadError(f"Malformed API list in {file_path}") from e
