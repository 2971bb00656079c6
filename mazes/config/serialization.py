"""JSON serialization and deserialization for maze configs."""

import json
from dataclasses import asdict

from dacite import from_dict, Config as DaciteConfig

from mazes.config.maze import MazeConfig


def config_to_json(config: MazeConfig) -> str:
    """Serialize a MazeConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> MazeConfig:
    """Deserialize a JSON string to a MazeConfig.

    Uses dacite with strict=True to reject unknown keys and cast=[tuple]
    to convert JSON arrays back to (row, col) tuples. Missing keys take
    their dataclass defaults.
    """
    data = json.loads(json_str)
    return from_dict(
        data_class=MazeConfig,
        data=data,
        config=DaciteConfig(
            cast=[tuple],
            check_types=True,
            strict=True,
        ),
    )
