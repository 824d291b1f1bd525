"""
Configuration settings for the wall drawing backend.
"""

from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict

from walldraw.models import DrawParams, Point3D
from walldraw.core.picking import Camera, Viewport


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WALLDRAW_",
        env_file=".env",
        case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"

    # Viewport and camera
    viewport_width: float = 1280
    viewport_height: float = 720
    camera_x: float = 5.0
    camera_y: float = 5.0
    camera_z: float = 5.0
    camera_fov: float = 75.0
    ground_height: float = 0.0

    # Drafting constraints
    grid_step: float = 0.01
    angle_increment: float = 45.0
    min_length: float = 0.01
    wall_thickness: float = 0.3
    wall_height: float = 2.75
    endpoint_tolerance: float = 0.001

    def draw_params(self) -> DrawParams:
        return DrawParams(
            grid_step=self.grid_step,
            angle_increment=self.angle_increment,
            min_length=self.min_length,
            wall_thickness=self.wall_thickness,
            wall_height=self.wall_height,
            endpoint_tolerance=self.endpoint_tolerance,
        )

    def camera(self) -> Camera:
        return Camera(
            position=Point3D(x=self.camera_x, y=self.camera_y, z=self.camera_z),
            fov=self.camera_fov,
        )

    def viewport(self) -> Viewport:
        return Viewport(width=self.viewport_width, height=self.viewport_height)


# Global settings instance
settings = Settings()
