"""Custom exceptions for map generation."""


class MapGenError(Exception):
    """Base exception for map generation errors."""

    pass


class AttributeSizeError(MapGenError):
    """Raised when a value buffer doesn't match the map's area."""

    def __init__(self, name: str, expected: int, actual: int):
        super().__init__(
            f"Attribute '{name}' needs {expected} values, got {actual}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class DuplicateAttributeError(MapGenError):
    """Raised when creating an attribute whose name is already taken."""

    def __init__(self, name: str):
        super().__init__(f"Attribute '{name}' already exists")
        self.name = name


class NoiseError(MapGenError):
    """Raised when noise parameters are invalid."""

    pass


class InterpolationError(MapGenError):
    """Raised when interpolation control points are invalid."""

    pass


class GeneratorError(MapGenError):
    """Raised when a generator can't be built from its data."""

    pass


class GenerationStepError(MapGenError):
    """Raised when a generation step can't be built from its data."""

    pass


class UnknownAttributeError(GenerationStepError):
    """Raised when a step references an attribute that doesn't exist."""

    def __init__(self, name: str):
        super().__init__(f"Unknown attribute '{name}'")
        self.name = name
