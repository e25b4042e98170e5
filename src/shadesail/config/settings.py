"""Configuration settings for Shadesail."""

from pathlib import Path

from pydantic import BaseModel, Field


class CaptureConfig(BaseModel):
    """Configuration for freehand polygon capture and simplification."""

    tolerance: float = Field(
        default=5.0,
        ge=0.0,
        le=50.0,
        description="Simplification tolerance in canvas units",
    )
    max_points: int = Field(
        default=12,
        ge=3,
        le=64,
        description="Maximum vertex count of a simplified polygon",
    )
    tolerance_growth: float = Field(
        default=2.0,
        gt=1.0,
        le=10.0,
        description="Factor applied to the tolerance when re-simplifying an over-complex path",
    )
    max_resimplify_passes: int = Field(
        default=4,
        ge=1,
        le=16,
        description="How many times the tolerance may grow before giving up on the point cap",
    )
    min_area: float = Field(
        default=1000.0,
        ge=0.0,
        description="Minimum enclosed area for a valid sail polygon",
    )
    close_tolerance: float | None = Field(
        default=None,
        ge=0.0,
        description="Distance under which a closing point duplicates the start (None = tolerance)",
    )

    def get_close_tolerance(self) -> float:
        """Get the distance used to detect a duplicated closing point."""
        if self.close_tolerance is None:
            return self.tolerance
        return self.close_tolerance


class StyleConfig(BaseModel):
    """Default visual style handed to the rendering surface."""

    fill: str = Field(default="#2D4A40", description="Fill color")
    stroke: str = Field(default="#2D4A40", description="Stroke color")
    opacity: float = Field(default=0.8, ge=0.0, le=1.0, description="Fill opacity")
    stroke_width: float = Field(default=2.0, ge=0.0, description="Stroke width in canvas units")


class SailConfig(BaseModel):
    """Configuration for sail creation.

    The sag ratio has no upper bound. Values much above 0.1 produce
    visibly over-concave sails, and nothing here prevents that.
    """

    sag_ratio: float = Field(
        default=0.08,
        ge=0.0,
        description="Inward bow depth of curved edges as a fraction of edge length",
    )
    max_sails: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of simultaneous sails",
    )
    default_curved: bool = Field(
        default=True,
        description="Whether edges of a new sail start out curved",
    )
    style: StyleConfig = Field(default_factory=StyleConfig)


class PerspectiveConfig(BaseModel):
    """Configuration for the four-corner perspective estimator."""

    min_scale: float = Field(
        default=0.1,
        gt=0.0,
        le=1.0,
        description="Floor applied to estimated scale factors",
    )
    skew_degrees: float = Field(
        default=45.0,
        ge=0.0,
        le=90.0,
        description="Degrees per unit of dimensionless skew ratio",
    )
    depth_scale_per_unit: float = Field(
        default=0.01,
        ge=0.0,
        le=0.1,
        description="Uniform scale change per unit of simulated Z depth",
    )


class AxisAdjustment(BaseModel):
    """Direct positioning slider values applied on top of the anchor estimate."""

    x_offset: float = Field(default=0.0, ge=-200.0, le=200.0, description="X-axis translation")
    y_offset: float = Field(default=0.0, ge=-200.0, le=200.0, description="Y-axis translation")
    z_depth: float = Field(
        default=0.0,
        ge=-50.0,
        le=50.0,
        description="Simulated depth, applied as a uniform scale",
    )
    tilt: float = Field(default=0.0, ge=-45.0, le=45.0, description="Extra horizontal skew in degrees")
    perspective: float = Field(
        default=0.0,
        ge=-30.0,
        le=30.0,
        description="Extra vertical skew in degrees",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ShadeSailSettings(BaseModel):
    """Main application settings."""

    capture: CaptureConfig = Field(default_factory=CaptureConfig)
    sail: SailConfig = Field(default_factory=SailConfig)
    perspective: PerspectiveConfig = Field(default_factory=PerspectiveConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShadeSailSettings:
    """Get default application settings."""
    return ShadeSailSettings()
