"""Models module - exports data models"""

from incredifont.models.banner import Banner, BannerBuilder, new_banner

__all__ = [
    "Banner",
    "BannerBuilder",
    "new_banner",
]
