"""
TireData record written to tire_data.json.

Field names are snake_case in Python; to_dict() renders the camelCase layout
of the JSON document.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from tzlocal import get_localzone_name


@dataclass(frozen=True)
class SizeSpecs:
    url: str = ""
    full_url: str = ""

    def to_dict(self) -> dict:
        return {"url": self.url, "fullUrl": self.full_url}


@dataclass(frozen=True)
class RimDiameter:
    value: str
    specs: SizeSpecs = field(default_factory=SizeSpecs)

    def to_dict(self) -> dict:
        return {"value": self.value, "specs": self.specs.to_dict()}


@dataclass(frozen=True)
class TireSize:
    size: str
    width: str
    aspect_ratio: str
    construction: str
    diameter: str
    product_id: str = ""
    specs: SizeSpecs = field(default_factory=SizeSpecs)

    def to_dict(self) -> dict:
        return {
            "size": self.size,
            "width": self.width,
            "aspectRatio": self.aspect_ratio,
            "construction": self.construction,
            "diameter": self.diameter,
            "productId": self.product_id,
            "specs": self.specs.to_dict(),
        }


@dataclass(frozen=True)
class ProductInfo:
    name: str
    base_product_id: str
    price_range: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "baseProductId": self.base_product_id,
            "priceRange": self.price_range,
        }


def iso_utc(moment: datetime) -> str:
    """2024-05-01T12:00:00.123Z"""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def local_timezone_name() -> str:
    return get_localzone_name() or "UTC"


@dataclass(frozen=True)
class TireData:
    product_info: ProductInfo
    rim_diameters: dict[str, RimDiameter]
    tire_sizes: dict[str, TireSize]
    scraped_url: str
    scraped_at: datetime
    timezone: str

    @property
    def scraped_timestamp(self) -> int:
        return int(self.scraped_at.timestamp())

    @property
    def counts(self) -> dict:
        return {
            "rimDiameters": len(self.rim_diameters),
            "tireSizes": len(self.tire_sizes),
        }

    def to_dict(self) -> dict:
        return {
            "productInfo": self.product_info.to_dict(),
            "availableSizes": {
                "rimDiameters": {k: v.to_dict() for k, v in self.rim_diameters.items()},
                "tireSizes": {k: v.to_dict() for k, v in self.tire_sizes.items()},
            },
            "metadata": {
                "scrapedUrl": self.scraped_url,
                "scrapedAt": iso_utc(self.scraped_at),
                "scrapedTimestamp": self.scraped_timestamp,
                "timezone": self.timezone,
                "counts": self.counts,
            },
        }


def build_tire_data(
    product_info: ProductInfo,
    rim_diameters: dict[str, RimDiameter],
    tire_sizes: dict[str, TireSize],
    scraped_url: str,
    scraped_at: datetime = None,
    tz_name: str = None,
) -> TireData:
    """Assemble the record for one run. The maps are copied so later edits to the inputs don't leak in."""
    return TireData(
        product_info=product_info,
        rim_diameters=dict(rim_diameters),
        tire_sizes=dict(tire_sizes),
        scraped_url=scraped_url,
        scraped_at=scraped_at or datetime.now(timezone.utc),
        timezone=tz_name or local_timezone_name(),
    )
