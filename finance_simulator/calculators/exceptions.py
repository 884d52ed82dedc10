class InvalidParameterError(ValueError):
    """Raised when a calculator receives inputs outside its contract."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


def require(condition: bool, field: str, message: str) -> None:
    if not condition:
        raise InvalidParameterError(field, message)
