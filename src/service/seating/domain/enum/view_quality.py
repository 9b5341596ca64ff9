from enum import StrEnum


class ViewQuality(StrEnum):
    EXCELLENT = 'excellent'
    GOOD = 'good'
    FAIR = 'fair'
    LIMITED = 'limited'
