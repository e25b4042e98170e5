"""Exception hierarchy for Shadesail."""


class ShadeSailError(Exception):
    """Base exception for all Shadesail errors."""

    pass


class GeometryError(ShadeSailError):
    """Errors in geometric calculations or shape validation."""

    pass


class InsufficientGeometryError(GeometryError):
    """Not enough geometry to build a sail.

    Raised when fewer than 3 points survive simplification or when the
    enclosed area falls below the validity threshold. Recoverable: the
    caller keeps its draw session and may add more points.
    """

    def __init__(self, reason: str, point_count: int, area: float | None = None) -> None:
        self.reason = reason
        self.point_count = point_count
        self.area = area
        super().__init__(f"Insufficient geometry: {reason}")


class InvalidPolygonError(GeometryError):
    """Polygon violates a structural invariant."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid polygon: {reason}")


class EdgeProfileError(GeometryError):
    """Edge curve profile does not match the polygon it decorates."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Edge profile has {actual} flags but the polygon has {expected} edges"
        )


class PerspectiveError(GeometryError):
    """Perspective estimation cannot be performed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Perspective estimation failed: {reason}")


class WorkspaceError(ShadeSailError):
    """Errors related to the sail workspace."""

    pass


class CapacityExceededError(WorkspaceError):
    """Maximum number of simultaneous sails reached."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Sail limit reached: at most {limit} sails may exist at once")


class SailNotFoundError(WorkspaceError):
    """Requested sail is not in the workspace."""

    def __init__(self, sail_id: str) -> None:
        self.sail_id = sail_id
        super().__init__(f"Sail '{sail_id}' not found in workspace")


class UnknownShapeError(WorkspaceError):
    """Requested preset shape does not exist."""

    def __init__(self, shape: str) -> None:
        self.shape = shape
        super().__init__(f"Unknown preset shape '{shape}'")


class UnknownPresetError(WorkspaceError):
    """Requested perspective preset does not exist."""

    def __init__(self, preset: str) -> None:
        self.preset = preset
        super().__init__(f"Unknown perspective preset '{preset}'")


class CaptureError(ShadeSailError):
    """Errors related to interactive polygon capture."""

    pass


class CaptureInactiveError(CaptureError):
    """Capture operation attempted while no draw session is active."""

    def __init__(self) -> None:
        super().__init__("No active draw session")


class InputError(ShadeSailError):
    """Errors reading user-supplied input files."""

    pass


class PointsFileError(InputError):
    """Error loading a point sequence file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load points from '{path}': {reason}")
