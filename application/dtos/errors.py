from domain.exceptions import ServiceError


class AppError:
    """Represents different categories of application errors."""

    def __init__(self, category: str, message: str) -> None:
        self.category = category  # 'general', 'config', 'database', 'validation', 'service'
        self.message = message

    @classmethod
    def from_service_error(cls, error: ServiceError) -> "AppError":
        return cls(error.category.value.lower(), error.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppError):
            return NotImplemented
        return (self.category, self.message) == (other.category, other.message)

    def __hash__(self) -> int:
        return hash((self.category, self.message))

    def __repr__(self) -> str:
        return f"AppError(category={self.category!r}, message={self.message!r})"

    def __str__(self) -> str:
        return self.message
