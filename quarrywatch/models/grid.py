"""Grid models — derived per render pass, never persisted."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class CellStatus(str, Enum):
    """Display status of a single hole on the map."""

    PENDING = "pending"
    DONE = "done"
    ACTIVE = "active"


class GridCell(BaseModel):
    """A hole mapped onto the 2-D excavation lattice."""

    model_config = ConfigDict(frozen=True)

    index: int
    x: int
    y: int
    status: CellStatus
