"""Top-level application orchestration."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import pygame

from core.config import AppConfig, PoseFeedConfig
from input.pose_feed import SerialPoseFeed
from input.touch import MousePoseInput
from physics.flake import FieldBounds
from physics.flake_system import FlakeSystem
from rendering.renderer import Renderer
from utils.clock import FrameClock

logger = logging.getLogger(__name__)


@dataclass
class LimbrixApp:
    app_config: AppConfig
    pose_feed_config: PoseFeedConfig

    def __post_init__(self) -> None:
        pygame.init()
        pygame.display.set_caption(self.app_config.window.title)

        flags = pygame.FULLSCREEN if self.app_config.window.fullscreen else 0
        self.screen = pygame.display.set_mode(self.app_config.window.size, flags)

        self.clock = FrameClock(target_fps=self.app_config.window.target_fps)
        self.flakes = FlakeSystem(config=self.app_config, clock=FrameClock.seconds)
        self.pose_feed = SerialPoseFeed(self.pose_feed_config, self.flakes.pose_buffer)
        self.mouse = MousePoseInput(self.flakes.pose_buffer, self.screen.get_size())
        self.renderer = Renderer(config=self.app_config.window, screen=self.screen)

    def run(self) -> None:
        self.pose_feed.start()
        logger.info("Starting game loop at %d fps", self.app_config.window.target_fps)

        try:
            self._loop()
        finally:
            self.pose_feed.stop()
            pygame.quit()

    def _loop(self) -> None:
        running = True
        while running:
            dt = self.clock.tick()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    self.flakes.reset()
                if not self.pose_feed.running:
                    self.mouse.handle_event(event)

            width, height = self.screen.get_size()
            snapshot = self.flakes.tick(dt, FieldBounds(width=width, height=height))
            self.renderer.draw(snapshot)

            pygame.display.flip()
