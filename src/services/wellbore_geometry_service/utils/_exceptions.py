class MissingGeometryCollectionException(TypeError):
    """Raised when a caller passes None where a section or component collection is required."""


def require_collection(value: object, name: str) -> None:
    if value is None:
        raise MissingGeometryCollectionException(
            f"'{name}' collection is required, got None"
        )
