# regression_viz/models.py
"""
Data model for the regression plotting pipeline.

AxisSpec is a closed tagged union: PlaneAxes for 2D plots (x -> y) and
SpaceAxes for 3D plots ((x, y) -> z). The dispatcher matches on the variant
instead of probing for an optional field.
"""

from typing import Annotated, Any, Callable, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from regression_viz.constants import SERIES_ROLES
from regression_viz.errors import PlotInputError


Observation = Mapping[str, float]
PredictionFunction = Callable[[Mapping[str, float]], float]

AxisName = Annotated[str, Field(min_length=1)]


# ============================================
# Axis Specification
# ============================================

class PlaneAxes(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["2d"] = "2d"
    x: AxisName = Field(description="Independent axis")
    y: AxisName = Field(description="Dependent axis predicted from x")

    @property
    def inputs(self) -> List[str]:
        return [self.x]

    @property
    def target(self) -> str:
        return self.y


class SpaceAxes(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["3d"] = "3d"
    x: AxisName = Field(description="First independent axis")
    y: AxisName = Field(description="Second independent axis")
    z: AxisName = Field(description="Dependent axis predicted from x and y")

    @property
    def inputs(self) -> List[str]:
        return [self.x, self.y]

    @property
    def target(self) -> str:
        return self.z


AxisSpec = Annotated[Union[PlaneAxes, SpaceAxes], Field(discriminator="kind")]

_axis_spec_adapter = TypeAdapter(AxisSpec)


def parse_axes(axes: Any) -> Union[PlaneAxes, SpaceAxes]:
    """
    Normalize caller-supplied axes into the tagged AxisSpec variant.

    Accepts a PlaneAxes/SpaceAxes instance or a mapping with keys 'x', 'y'
    and optionally 'z'. A missing or None 'z' selects the 2D variant.
    A 'kind' key, if given, must agree with whether 'z' is present.
    """
    if isinstance(axes, (PlaneAxes, SpaceAxes)):
        return axes
    if not isinstance(axes, Mapping):
        raise PlotInputError(f"Axes must be a mapping or AxisSpec, got {type(axes).__name__}")

    payload = {key: axes.get(key) for key in ("x", "y", "z") if axes.get(key) is not None}
    payload["kind"] = "3d" if "z" in payload else "2d"

    kind = axes.get("kind")
    if kind is not None and kind != payload["kind"]:
        state = "present" if "z" in payload else "absent"
        raise PlotInputError(f"Axes kind '{kind}' conflicts with 'z' axis being {state}", axis="z")

    try:
        return _axis_spec_adapter.validate_python(payload)
    except ValidationError as e:
        first = e.errors()[0]
        loc = [part for part in first.get("loc", ()) if part in ("x", "y", "z")]
        axis = loc[-1] if loc else None
        label = f"'{axis}' axis" if axis else "axes"
        raise PlotInputError(f"Invalid {label}: {first.get('msg')}", axis=axis) from e


# ============================================
# Domain
# ============================================

class Domain(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def _check_order(self) -> "Domain":
        if self.min > self.max:
            raise ValueError(f"Domain min {self.min} exceeds max {self.max}")
        return self

    @property
    def is_degenerate(self) -> bool:
        return self.min == self.max


# ============================================
# Scene
# ============================================

class Series(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    role: Literal["training", "test", "prediction"]
    mode: Literal["markers", "lines"]
    color: str
    x: List[float]
    y: List[float]
    z: Optional[List[float]] = None


class AxisTitles(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: str
    y: str
    z: Optional[str] = None


class Scene(BaseModel):
    """Renderer-ready description of one regression plot."""

    model_config = ConfigDict(frozen=True)

    title: str
    dimensions: Literal[2, 3]
    series: List[Series]
    axis_titles: AxisTitles

    @model_validator(mode="after")
    def _check_roles(self) -> "Scene":
        roles = [series.role for series in self.series]
        if roles != list(SERIES_ROLES):
            raise ValueError(f"Scene series roles must be {list(SERIES_ROLES)}, got {roles}")
        return self

    def get_series(self, role: str) -> Series:
        for series in self.series:
            if series.role == role:
                return series
        raise KeyError(role)

    @property
    def training(self) -> Series:
        return self.get_series("training")

    @property
    def test(self) -> Series:
        return self.get_series("test")

    @property
    def prediction(self) -> Series:
        return self.get_series("prediction")
