import unicodedata
from datetime import datetime, timezone


def collation_key(text) -> tuple:
    """Sort key comparing strings case- and accent-insensitively.

    Accented letters sort next to their base letter ("Élodie" with "Elodie");
    the case-folded original breaks ties so the order stays deterministic.
    """
    text = str(text)
    folded = text.casefold()
    decomposed = unicodedata.normalize('NFKD', folded)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, folded)


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    stamp = datetime.now(timezone.utc).isoformat(timespec='milliseconds')
    return stamp.replace('+00:00', 'Z')
