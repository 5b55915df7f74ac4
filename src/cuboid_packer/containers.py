# src/cuboid_packer/containers.py
from __future__ import annotations

# Internal usable dims of ISO shipping containers (millimetres).
# width = length of the container, height = vertical, depth = door width.
BIN_PRESETS_MM: dict[str, dict[str, float]] = {
    "20":   {"width": 5900,  "height": 2395, "depth": 2352},
    "20HC": {"width": 5891,  "height": 2700, "depth": 2330},
    "40":   {"width": 12032, "height": 2395, "depth": 2352},
    "40HC": {"width": 12032, "height": 2700, "depth": 2350},
    "48HC": {"width": 14470, "height": 2698, "depth": 2352},
    "53HC": {"width": 15951, "height": 2769, "depth": 2489},
}


def get_bin_dims(preset: str) -> dict[str, float]:
    key = preset.strip().upper()
    if key not in BIN_PRESETS_MM:
        raise ValueError(f"Unknown bin_preset '{preset}'. Valid: {sorted(BIN_PRESETS_MM.keys())}")
    return dict(BIN_PRESETS_MM[key])
