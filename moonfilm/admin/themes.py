"""
Color theme presets offered in the admin theme panel.
"""
from moonfilm.schemas import Theme

THEMES: list[Theme] = [
    Theme(id="default", name="Classic Gold", primary="#d4a017", accent="#1f2937"),
    Theme(id="ocean", name="Ocean Blue", primary="#0ea5e9", accent="#0f172a"),
    Theme(id="forest", name="Forest Green", primary="#16a34a", accent="#14532d"),
    Theme(id="sunset", name="Sunset Orange", primary="#f97316", accent="#7c2d12"),
    Theme(id="rose", name="Rose Pink", primary="#e11d48", accent="#4c0519"),
    Theme(id="midnight", name="Midnight Purple", primary="#7c3aed", accent="#1e1b4b"),
]


def get_theme(theme_id: str) -> Theme | None:
    return next((t for t in THEMES if t.id == theme_id), None)
