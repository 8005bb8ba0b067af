"""
Parsing helpers for the raw attribute bundles returned by the in-page queries.

Everything here is pure Python: the page-side JavaScript only collects text
and attributes, the shaping into records happens in this module.
"""

import re
from typing import Optional

from shared.constants import NAME_NOT_FOUND, PRICE_NOT_FOUND

from .tire_data import RimDiameter, SizeSpecs, TireSize

# e.g. "235/65R18" → width 235, aspect ratio 65, rim diameter 18
SIZE_CODE_RE = re.compile(r"(\d+)/(\d+)R(\d+)", re.ASCII)

_WHITESPACE_RE = re.compile(r"\s+")
_EACH_RE = re.compile(r"\s*(?<![A-Za-z])ea$")

_PID_MARKER = "pid="


def normalize_price(raw: Optional[str]) -> str:
    """
    Clean up price text scraped from the page.

    Whitespace runs collapse to one space and a trailing "ea" unit marker
    becomes "each": "$129.99   ea" → "$129.99 each".
    """
    text = _WHITESPACE_RE.sub(" ", raw or "").strip()
    if not text:
        return PRICE_NOT_FOUND
    return _EACH_RE.sub(" each", text)


def clean_name(raw: Optional[str]) -> str:
    return (raw or "").strip() or NAME_NOT_FOUND


def extract_product_id(value: Optional[str]) -> str:
    """Return what follows "pid=" in a variant URL, or "" when there is none."""
    if not value or _PID_MARKER not in value:
        return ""
    return value.split(_PID_MARKER)[1]


def parse_size_code(code: str) -> Optional[dict]:
    """Split "235/65R18" into its parts. Returns None for any other shape."""
    m = SIZE_CODE_RE.fullmatch(code or "")
    if not m:
        return None
    return {
        "width": m.group(1),
        "aspect_ratio": m.group(2),
        "construction": "R",
        "diameter": m.group(3),
    }


def _specs(bundle: dict) -> SizeSpecs:
    return SizeSpecs(
        url=bundle.get("dataUrl") or "",
        full_url=bundle.get("valueAttr") or "",
    )


def build_rim_diameters(bundles: list[dict]) -> dict[str, RimDiameter]:
    """Key each rim-diameter input by its value; later duplicates win."""
    diameters: dict[str, RimDiameter] = {}
    for bundle in bundles:
        key = bundle.get("value") or ""
        diameters[key] = RimDiameter(
            value=bundle.get("dataValue") or "",
            specs=_specs(bundle),
        )
    return diameters


def build_tire_sizes(bundles: list[dict]) -> dict[str, TireSize]:
    """Key each tire-size input by its element id, skipping ids that are not size codes."""
    sizes: dict[str, TireSize] = {}
    for bundle in bundles:
        code = bundle.get("id") or ""
        parts = parse_size_code(code)
        if parts is None:
            continue
        sizes[code] = TireSize(
            size=code,
            product_id=extract_product_id(bundle.get("valueAttr")),
            specs=_specs(bundle),
            **parts,
        )
    return sizes
