"""
schemas.py — Pydantic request/response models for the API.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

from alignkit.dsl.schema import PositionChange, Scene

Selector = Union[str, List[str]]


# =============================================================================
# REQUEST MODELS
# =============================================================================

class AlignRequest(BaseModel):
    """Align a group of scene elements to one another."""
    scene: Scene
    selectors: Selector = Field(..., description="'#id', '.class', a name, or a list of those")

    class Config:
        json_schema_extra = {
            "example": {
                "scene": {
                    "elements": [
                        {"id": "a", "classes": ["card"], "bbox": {"x": 10, "y": 40, "width": 100, "height": 50}},
                        {"id": "b", "classes": ["card"], "bbox": {"x": 140, "y": 10, "width": 80, "height": 30}},
                    ]
                },
                "selectors": ".card",
            }
        }


class CanvasAlignRequest(AlignRequest):
    """Align a group of scene elements to a canvas element."""
    canvas: Selector = Field(..., description="Selector of the canvas element")
    include_border: Optional[bool] = Field(
        None, description="Keep borders inside the aligned edge; defaults to the server setting"
    )


class DistributeRequest(AlignRequest):
    """Line scene elements up with a fixed gap."""
    spacing: Any = Field(..., description="Gap between neighbours; checked by parse_spacing")


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class ChangeSchema(BaseModel):
    """Before/after position of one element."""
    node: Optional[str] = None
    prevX: int
    prevY: int
    nextX: int
    nextY: int

    @classmethod
    def from_record(cls, record: PositionChange) -> "ChangeSchema":
        return cls(**record.to_dict(node_key=lambda element: element.id))


class AlignResponse(BaseModel):
    """Records of one operation plus the updated scene."""
    changes: List[ChangeSchema] = Field(default_factory=list)
    scene: Scene
