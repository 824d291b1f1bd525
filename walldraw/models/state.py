"""Draw session states.

The session is always in exactly one of these:
- Idle: draw mode off
- Armed: draw mode on, waiting for a start point
- Pending: draw mode on, start point set, preview follows the pointer
"""

from __future__ import annotations
from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

from .geometry import Point2D


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["idle"] = "idle"


class Armed(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["armed"] = "armed"


class Pending(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["pending"] = "pending"
    start: Point2D


DrawState = Annotated[Union[Idle, Armed, Pending], Field(discriminator="mode")]
