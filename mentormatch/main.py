"""Command-line entry point: print the display order of a profile list."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from mentormatch.config.environment import EnvironmentConfig, load_environment_config
from mentormatch.config.exceptions import ConfigurationError
from mentormatch.config.loader import load_config
from mentormatch.config.models import AppConfig
from mentormatch.logging import get_logger
from mentormatch.logging.config import configure_logging
from mentormatch.logging.context import log_context
from mentormatch.matching.engine import ProfileOrderer
from mentormatch.matching.models import ScoredCandidate
from mentormatch.profiles import (
    ProfileLoadError,
    dedupe_profiles,
    exclude_viewer,
    filter_profiles,
    find_profile,
    load_profiles,
)

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNKNOWN_VIEWER = 2


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and resolve the effective log level.

    Config file priority: --config flag > MENTORMATCH_CONFIG > default locations.
    Log level priority: CLI > environment > config file.

    Args:
        config_path: Path from the --config flag, if any
        log_level_override: Log level from CLI (takes precedence)

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with env_config.log_level resolved

    Raises:
        ConfigurationError: If configuration is invalid
    """
    env_config = load_environment_config()
    app_config = load_config(config_path or env_config.config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def format_table(ranked: Sequence[ScoredCandidate]) -> str:
    """Render ranked candidates as numbered text lines."""
    if not ranked:
        return "No profiles found"

    lines = []
    for position, candidate in enumerate(ranked, 1):
        profile = candidate.profile
        line = (
            f"{position:>3}. {profile.display_name} <{profile.email}> "
            f"expertise={profile.expertise!r} interest={profile.interest!r} "
            f"score={candidate.match_score}"
        )
        if candidate.is_good_match:
            line += " [Good Match]"
        lines.append(line)
    return "\n".join(lines)


def format_json(ranked: Sequence[ScoredCandidate]) -> str:
    """Render ranked candidates as a JSON array of profile records."""
    payload = []
    for position, candidate in enumerate(ranked, 1):
        record = candidate.profile.model_dump(by_alias=True, exclude_none=True)
        record["position"] = position
        record["matchScore"] = candidate.match_score
        record["isGoodMatch"] = candidate.is_good_match
        payload.append(record)
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Mentor Match - order candidate profiles for a viewer"
    )
    parser.add_argument(
        "--profiles",
        type=Path,
        required=True,
        help="JSON or YAML file with the candidate profiles",
    )
    parser.add_argument(
        "--viewer",
        default=None,
        help="Email of the viewing user; must appear in the profile file (default: anonymous)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: mentormatch.yaml if present)",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Only show profiles matching this text",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the ordering CLI.

    Returns:
        Exit code (0 success, 1 configuration/profile error, 2 unknown viewer).
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(
        level=env_config.log_level,
        format_type=app_config.logging.format,
        environment=env_config.environment,
    )

    try:
        profiles = load_profiles(args.profiles)
    except ProfileLoadError as e:
        logger.error(
            f"Could not load profiles: {e}",
            extra={"event": "profiles.load_failed", "path": str(args.profiles)},
        )
        print(f"Profile Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    viewer = None
    if args.viewer:
        viewer = find_profile(profiles, args.viewer)
        if viewer is None:
            logger.error(
                "Viewer not found in profile file",
                extra={"event": "viewer.not_found", "path": str(args.profiles)},
            )
            print(f"Viewer not found: {args.viewer}", file=sys.stderr)
            return EXIT_UNKNOWN_VIEWER

    candidates = dedupe_profiles(exclude_viewer(profiles, viewer))

    orderer = ProfileOrderer(app_config.ranking)
    with log_context(has_viewer=viewer is not None):
        ranked = orderer.rank(candidates, viewer, orderer.seed_material_for(viewer))

    # Search narrows the ordered list so filtering never reshuffles it
    if args.search:
        visible = {id(p) for p in filter_profiles([c.profile for c in ranked], args.search)}
        ranked = [c for c in ranked if id(c.profile) in visible]

    logger.info(
        f"Ordered {len(ranked)} profiles",
        extra={
            "event": "ordering.printed",
            "candidate_count": len(candidates),
            "shown_count": len(ranked),
            "output_format": args.output_format,
        },
    )

    if args.output_format == "json":
        print(format_json(ranked))
    else:
        print(format_table(ranked))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
