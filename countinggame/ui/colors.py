"""Palette and stylesheet helpers for the counting screen."""

from countinggame.core.game import ButtonRole


class GameColors:
    """Gold text on the sparkle background, green and blue action buttons."""

    GOLD = "#FFD700"

    AFFIRMATIVE = "#2ecc71"
    SECONDARY = "#3498db"
    ON_ACCENT = "#ffffff"

    NEUTRAL_BG = "#f0f0f0"
    NEUTRAL_BORDER = "#adadad"
    NEUTRAL_TEXT = "#1a1a1a"

    CANVAS_BG = "#0b1d3a"


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
    except (TypeError, ValueError):
        return a


def button_style(role: ButtonRole) -> str:
    """Qt stylesheet for a QPushButton with the given role."""
    if role is ButtonRole.NEUTRAL:
        background, text, border = GameColors.NEUTRAL_BG, GameColors.NEUTRAL_TEXT, GameColors.NEUTRAL_BORDER
    elif role is ButtonRole.AFFIRMATIVE:
        background, text, border = GameColors.AFFIRMATIVE, GameColors.ON_ACCENT, GameColors.AFFIRMATIVE
    else:
        background, text, border = GameColors.SECONDARY, GameColors.ON_ACCENT, GameColors.SECONDARY
    hover = blend_hex(background, "#000000", 0.08)
    pressed = blend_hex(background, "#000000", 0.2)
    return f"""
        QPushButton {{
            background: {background};
            color: {text};
            border: 1px solid {border};
            border-radius: 4px;
            font-size: 16px;
        }}
        QPushButton:hover {{ background: {hover}; }}
        QPushButton:pressed {{ background: {pressed}; }}
    """


def label_style(size_px: int) -> str:
    return f"color: {GameColors.GOLD}; font-size: {size_px}px; font-weight: bold; background: transparent;"
