"""Files expected in the media bucket, with their display text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Asset:
    filename: str
    alt: str
    folder: str | None = None

    @property
    def path(self) -> str:
        """Object path inside the bucket, e.g. ``products/shoe.jpg``."""
        return f"{self.folder}/{self.filename}" if self.folder else self.filename


ASSETS: tuple[Asset, ...] = (
    Asset("logo.png", "Company Logo", "logos"),
    Asset("athletic-running-pro.jpg", "Athletic Running Pro Shoes", "products"),
    Asset("athletic-training-flex.jpg", "Athletic Training Flex Shoes", "products"),
    Asset("featured-bestseller.jpg", "Featured Bestseller Shoes", "products"),
    Asset("hero-lifestyle.png", "Hero Lifestyle Image", "hero"),
    Asset("hero-running-shoes.png", "Hero Running Shoes", "hero"),
    Asset("mens-dress-oxford.jpg", "Men's Dress Oxford Shoes", "products"),
    Asset("mens-sneaker-urban.jpg", "Men's Urban Sneakers", "products"),
    Asset("womens-flat-comfort.jpg", "Women's Comfort Flats", "products"),
    Asset("womens-heel-elegant.jpg", "Women's Elegant Heels", "products"),
    Asset("71mzbK3ZWbL._AC_SY695_.jpg", "Product Image", "products"),
)


def mime_type_for(filename: str) -> str:
    # Only PNG is distinguished; everything else is served as JPEG.
    extension = filename.rsplit(".", 1)[-1].lower()
    return "image/png" if extension == "png" else "image/jpeg"
