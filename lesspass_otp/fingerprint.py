"""
Fingerprint — a displayable (color, icon) rendering of a keyed hash.

It lets users check they typed the right master password without showing
it. Icons are font-awesome class names.
"""
from typing import Tuple

COLORS = (
    "#000000", "#074750", "#009191", "#FF6CB6", "#FFB5DA", "#490092", "#006CDB",
    "#B66DFF", "#6DB5FE", "#B5DAFE", "#920000", "#924900", "#DB6D00", "#24FE23",
)

ICONS = (
    "fa-hashtag", "fa-heart", "fa-hotel", "fa-university", "fa-plug",
    "fa-ambulance", "fa-bus", "fa-car", "fa-plane", "fa-rocket", "fa-ship",
    "fa-subway", "fa-truck", "fa-jpy", "fa-eur", "fa-btc", "fa-usd", "fa-gbp",
    "fa-archive", "fa-area-chart", "fa-bed", "fa-beer", "fa-bell",
    "fa-binoculars", "fa-birthday-cake", "fa-bomb", "fa-briefcase", "fa-bug",
    "fa-camera", "fa-cart-plus", "fa-certificate", "fa-coffee", "fa-cloud",
    "fa-coffee", "fa-comment", "fa-cube", "fa-cutlery", "fa-database",
    "fa-diamond", "fa-exclamation-circle", "fa-eye", "fa-flag", "fa-flask",
    "fa-futbol-o", "fa-gamepad", "fa-graduation-cap",
)

ColorIcon = Tuple[str, str]
Fingerprint = Tuple[ColorIcon, ColorIcon, ColorIcon]


def to_hex_string(digest: bytes) -> str:
    """Uppercase hex rendering, one byte at a time.

    Bytes below 0x10 are rendered with a single digit (no zero padding),
    which is what existing fingerprints were computed with.
    """
    return "".join(format(byte, "X") for byte in digest)


def get_color(chunk: str) -> str:
    return COLORS[int(chunk, 16) % len(COLORS)]


def get_icon(chunk: str) -> str:
    return ICONS[int(chunk, 16) % len(ICONS)]


def get_fingerprint(fingerprint: str) -> Fingerprint:
    """Map the first 18 hex characters to three (color, icon) pairs.

    Raises:
        ValueError: If ``fingerprint`` is shorter than 18 characters or not hex.
    """
    if len(fingerprint) < 18:
        raise ValueError(
            f"fingerprint too short: {len(fingerprint)} characters (minimum 18)"
        )
    chunks = (fingerprint[0:6], fingerprint[6:12], fingerprint[12:18])
    return tuple((get_color(chunk), get_icon(chunk)) for chunk in chunks)
