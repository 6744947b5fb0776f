"""Country Extraction — two independent string heuristics, one per tour feed.

Invariants:
    - Never raises; missing input yields 'N/A'
    - PGA events feed: country is the first dotted segment of shortName
    - LPGA events feed: country is the flag file name embedded in the logo URL

Design Decisions:
    - The heuristics are kept separate and are not reconciled with each other.
      They disagree on edge cases (e.g. a shortName without a dot returns the
      whole name; a logo under /countries/ but not /countries/500/ returns 'N/A')
"""

_COUNTRIES_MARKER = "/countries/"
_COUNTRIES_500_MARKER = "/countries/500/"


def country_from_short_name(short_name: str | None) -> str:
    """'USA.Smith' -> 'USA'. Missing or empty leading segment -> 'N/A'."""
    if not short_name:
        return "N/A"
    return short_name.split(".")[0] or "N/A"


def country_from_logo_url(logo: str | None) -> str:
    """'.../countries/500/eng.png' -> 'ENG'. No /countries/ segment -> 'N/A'."""
    if not logo or _COUNTRIES_MARKER not in logo:
        return "N/A"
    parts = logo.split(_COUNTRIES_500_MARKER)
    if len(parts) < 2:
        return "N/A"
    return parts[1].replace(".png", "", 1).upper()
