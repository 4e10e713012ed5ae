"""Configuration models and loaders."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

DEFAULT_PALETTE: Tuple[Color, ...] = (
    (255, 59, 48),  # red
    (0, 122, 255),  # blue
    (52, 199, 89),  # green
    (255, 204, 0),  # yellow
    (255, 149, 0),  # orange
    (175, 82, 222),  # purple
    (255, 45, 85),  # pink
    (50, 173, 230),  # cyan
    (0, 199, 190),  # mint
)


@dataclass(frozen=True)
class WindowConfig:
    size: Tuple[int, int] = (1280, 720)
    fullscreen: bool = False
    title: str = "Limbrix"
    target_fps: int = 60
    background_color: Tuple[int, int, int] = (12, 14, 22)


@dataclass(frozen=True)
class FlakeConfig:
    size: float = 20.0
    initial_speed: float = 30.0
    spawn_interval: float = 1.5
    cull_margin: float = 100.0
    palette: Tuple[Color, ...] = field(default=DEFAULT_PALETTE)


@dataclass(frozen=True)
class PhysicsConfig:
    gravity: float = 50.0
    terminal_velocity: float = 100.0


@dataclass(frozen=True)
class CollisionConfig:
    zone_half_width: float = 40.0


@dataclass(frozen=True)
class AppConfig:
    window: WindowConfig = field(default_factory=WindowConfig)
    flakes: FlakeConfig = field(default_factory=FlakeConfig)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    collision: CollisionConfig = field(default_factory=CollisionConfig)


@dataclass(frozen=True)
class PoseFeedConfig:
    enabled: bool = False
    port: str = "/dev/ttyUSB0"
    baud_rate: int = 115200
    timeout: float = 0.05


def _load_json(path: Path) -> Dict[str, Any]:
    return json.loads(path.read_text())


def load_app_config(path: Path) -> AppConfig:
    payload = _load_json(path)

    window = WindowConfig(
        size=tuple(payload["window"]["size"]),
        fullscreen=payload["window"]["fullscreen"],
        title=payload["window"]["title"],
        target_fps=payload["window"]["target_fps"],
        background_color=tuple(payload["window"]["background_color"]),
    )

    flakes = FlakeConfig(
        size=payload["flakes"]["size"],
        initial_speed=payload["flakes"]["initial_speed"],
        spawn_interval=payload["flakes"]["spawn_interval"],
        cull_margin=payload["flakes"]["cull_margin"],
        palette=tuple(tuple(color) for color in payload["flakes"]["palette"]),
    )

    physics = PhysicsConfig(
        gravity=payload["physics"]["gravity"],
        terminal_velocity=payload["physics"]["terminal_velocity"],
    )

    collision = CollisionConfig(
        zone_half_width=payload["collision"]["zone_half_width"],
    )

    return AppConfig(window=window, flakes=flakes, physics=physics, collision=collision)


def load_pose_feed_config(path: Path) -> PoseFeedConfig:
    payload = _load_json(path)
    return PoseFeedConfig(
        enabled=payload["enabled"],
        port=payload["port"],
        baud_rate=payload["baud_rate"],
        timeout=payload["timeout"],
    )


def load_config_dir(config_dir: Path) -> Tuple[AppConfig, PoseFeedConfig]:
    """Load app_config.json and pose_feed_config.json, using defaults for a missing file."""
    app_path = config_dir / "app_config.json"
    pose_feed_path = config_dir / "pose_feed_config.json"

    if app_path.is_file():
        app_config = load_app_config(app_path)
    else:
        logger.warning("No app config at %s, using defaults", app_path)
        app_config = AppConfig()

    if pose_feed_path.is_file():
        pose_feed_config = load_pose_feed_config(pose_feed_path)
    else:
        logger.warning("No pose feed config at %s, using defaults", pose_feed_path)
        pose_feed_config = PoseFeedConfig()

    return app_config, pose_feed_config
