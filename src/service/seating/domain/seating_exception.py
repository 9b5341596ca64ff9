from src.platform.exception.exceptions import DomainError


class UnknownSeatFormatError(DomainError):
    def __init__(self, seat_format: object) -> None:
        super().__init__(f'Unknown seat format: {seat_format!r}', 400)
        self.seat_format = seat_format


class InvalidDimensionError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)
