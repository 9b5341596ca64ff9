from typing import Mapping, Optional

from src.platform.config.core_setting import settings


DEFAULT_CATEGORY_COLORS: Mapping[str, str] = {
    'vip': '#FFD700',
    'premium': '#8B5CF6',
    'standard': '#3B82F6',
    'economy': '#10B981',
    'general': '#6B7280',
}


class CategoryPalette:
    """Fallback colors for records that name a price category but carry no color."""

    def __init__(
        self,
        colors: Mapping[str, str] = DEFAULT_CATEGORY_COLORS,
        default_color: Optional[str] = None,
    ) -> None:
        self._colors = {name.lower(): color for name, color in colors.items()}
        self._default_color = default_color or settings.DEFAULT_CATEGORY_COLOR

    def color_for(self, category: Optional[str]) -> str:
        if not category:
            return self._default_color
        return self._colors.get(category.lower(), self._default_color)


category_palette = CategoryPalette()
