"""Loading and preparing candidate profile lists.

Profile files are JSON or YAML documents holding a list of profile records,
either at the top level or under a ``profiles`` key. Records may use the
mobile app's camelCase keys or snake_case ones.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional

import yaml
from pydantic import ValidationError

from mentormatch.domain.models import Profile

from .exceptions import ProfileLoadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _read_records(path: Path) -> Any:
    """Parse a JSON or YAML file, picking the parser from the suffix."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                return yaml.safe_load(f)
            return json.load(f)
    except FileNotFoundError:
        raise ProfileLoadError(f"Profile file not found: {path}", path=path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ProfileLoadError(f"Failed to parse profile file {path}: {e}", path=path)
    except OSError as e:
        raise ProfileLoadError(f"Failed to read profile file {path}: {e}", path=path)


def load_profiles(path: Path) -> List[Profile]:
    """Load and validate profiles from a JSON or YAML file.

    Args:
        path: Profile file path

    Returns:
        Profiles in file order

    Raises:
        ProfileLoadError: If the file is unreadable or any record is invalid
    """
    path = Path(path)
    data = _read_records(path)

    if isinstance(data, dict) and "profiles" in data:
        data = data["profiles"]
    if data is None:
        data = []
    if not isinstance(data, list):
        raise ProfileLoadError(
            f"Profile file must contain a list of profiles, got {type(data).__name__}",
            path=path,
        )

    profiles = []
    errors = []
    for index, record in enumerate(data):
        try:
            profiles.append(Profile.model_validate(record))
        except ValidationError as e:
            for error in e.errors():
                field_path = ".".join(str(loc) for loc in error["loc"]) or "record"
                errors.append(f"record {index}: {field_path}: {error['msg']}")

    if errors:
        raise ProfileLoadError(f"Invalid profile records in {path}", path=path, errors=errors)

    logger.info(
        f"Loaded {len(profiles)} profiles",
        extra={"event": "profiles.loaded", "profile_count": len(profiles), "path": str(path)},
    )
    return profiles


def dedupe_profiles(profiles: Iterable[Profile]) -> List[Profile]:
    """Drop repeated emails, keeping the first occurrence."""
    seen = set()
    unique = []
    for profile in profiles:
        if profile.email in seen:
            continue
        seen.add(profile.email)
        unique.append(profile)
    return unique


def exclude_viewer(profiles: Iterable[Profile], viewer: Optional[Profile]) -> List[Profile]:
    """Remove the viewer's own profile from a candidate list."""
    if viewer is None:
        return list(profiles)
    return [profile for profile in profiles if profile.email != viewer.email]


def find_profile(profiles: Iterable[Profile], email: str) -> Optional[Profile]:
    """Find a profile by email (case-insensitive), or None."""
    wanted = email.strip().lower()
    for profile in profiles:
        if profile.email.lower() == wanted:
            return profile
    return None
