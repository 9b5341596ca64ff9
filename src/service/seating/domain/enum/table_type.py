from enum import StrEnum


class TableType(StrEnum):
    ROUND = 'round'
    SQUARE = 'square'
    RECTANGULAR = 'rectangular'
