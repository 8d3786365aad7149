import base64
import binascii
import json
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Preset:
    station_id: str
    theme_id: str


def encode_preset(preset: Preset) -> str:
    """URL-safe base64 of the compact JSON form, padding stripped."""
    payload = json.dumps({"s": preset.station_id, "t": preset.theme_id}, separators=(",", ":"))
    encoded = base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def decode_preset(encoded: str) -> Optional[Preset]:
    if not encoded:
        return None
    try:
        padded = encoded + "=" * (-len(encoded) % 4)
        data = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError):
        return None

    if not isinstance(data, dict) or not data.get("s") or not data.get("t"):
        return None
    return Preset(station_id=str(data["s"]), theme_id=str(data["t"]))


def preset_url(base_url: str, preset: Preset) -> str:
    return f"{base_url.rstrip('/')}/radio?preset={encode_preset(preset)}"
