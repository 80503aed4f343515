"""Theme colors and color utilities for the UI."""


class LightColors:
    """Light theme palette."""

    BACKGROUND_TOP = "#fff3e0"
    BACKGROUND_BOTTOM = "#ffe0b2"

    PRIMARY = "#8d4f3a"
    PRIMARY_LIGHT = "#c17b63"
    ON_PRIMARY = "#ffffff"

    SECONDARY_CONTAINER = "#f7ddd3"
    ON_SECONDARY_CONTAINER = "#2c150d"

    TEXT_PRIMARY = "#2c150d"
    TEXT_MUTED = "#77574c"

    PROGRESS_TRACK = "#ead6cf"
    PROGRESS_FILL = "#8d4f3a"

    TOAST_BG = "rgba(44, 21, 13, 0.88)"
    TOAST_TEXT = "#ffffff"


class DarkColors:
    """Dark theme palette."""

    BACKGROUND_TOP = "#2a1f1b"
    BACKGROUND_BOTTOM = "#140d0a"

    PRIMARY = "#ffb59d"
    PRIMARY_LIGHT = "#ffdbcf"
    ON_PRIMARY = "#561f0f"

    SECONDARY_CONTAINER = "#5d4037"
    ON_SECONDARY_CONTAINER = "#ffdbcf"

    TEXT_PRIMARY = "#f1dfd9"
    TEXT_MUTED = "#d8c2bb"

    PROGRESS_TRACK = "#53433e"
    PROGRESS_FILL = "#ffb59d"

    TOAST_BG = "rgba(241, 223, 217, 0.92)"
    TOAST_TEXT = "#2c150d"


def palette_for(dark_mode: bool) -> type:
    """Return the palette class for the requested theme."""
    return DarkColors if dark_mode else LightColors


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a
