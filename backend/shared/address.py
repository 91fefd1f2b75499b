import re

from typing        import Iterable, List, Optional
from shared.config import OVERRIDE_ALWAYS, OVERRIDE_MATCH
from shared.models import AddressSuggestion, Location, ParsedHint

_NUMERIC_TOKEN = re.compile(r"[0-9]+[A-Za-z0-9\-/]*")

OVERRIDE_POLICIES = (OVERRIDE_ALWAYS, OVERRIDE_MATCH)


def is_numeric_token(token: str) -> bool:
    return _NUMERIC_TOKEN.fullmatch(token) is not None


def extract_street_and_number(raw: str) -> ParsedHint:
    """
    Split user-typed text into a street name and an optional house number.

    Only the text before the first comma is considered, e.g.
    "Okinawa 1518, Ze" -> street "Okinawa", number "1518".

    With two or more numeric tokens the last one is the house number
    ("Ruta 8 1518" -> "Ruta 8" / "1518"). A single numeric token is a house
    number only when it closes the text and is not its first token, so
    "9 de Julio" keeps its leading number as part of the street.
    """
    head    = (raw or "").split(",", 1)[0].strip()
    tokens  = head.split()
    numeric = [i for i, token in enumerate(tokens) if is_numeric_token(token)]

    if len(numeric) >= 2:
        last = numeric[-1]
        return ParsedHint(street=" ".join(tokens[:last]), number=tokens[last])

    if len(numeric) == 1:
        index = numeric[0]
        if index > 0 and index == len(tokens) - 1:
            return ParsedHint(street=" ".join(tokens[:index]), number=tokens[index])

    return ParsedHint(street=head, number=None)


def streets_loosely_match(user_street: str, official_street: str) -> bool:
    user     = user_street.strip().lower()
    official = official_street.strip().lower()

    if not user or not official:
        return False

    return user in official or official in user


def format_argentinian_address(
    record: Location,
    hint: Optional[ParsedHint] = None,
    override: str = OVERRIDE_ALWAYS) -> str:
    """
    Render a candidate as "street number, locality, municipality, state".

    The postal code and country are never part of the result. When nothing
    usable remains the record's display_name is returned unchanged.
    """
    if override not in OVERRIDE_POLICIES:
        raise ValueError(f"Unknown override policy: {override!r}")

    addr = record.address
    if addr is None or addr.is_empty():
        return record.display_name

    street = (addr.road or "").strip()
    number = (addr.house_number or "").strip()

    if hint is not None:
        hint_street = hint.street.strip()
        hint_number = (hint.number or "").strip()

        if override == OVERRIDE_ALWAYS:
            if hint_number:
                number = hint_number
            if hint_street:
                street = hint_street

        elif not street:
            street = hint_street
            number = hint_number

        elif hint_number and streets_loosely_match(hint_street, street):
            number = hint_number

    parts = []
    if street:
        parts.append(f"{street} {number}" if number else street)

    locality     = addr.locality()
    municipality = addr.municipality_name()
    state        = (addr.state or "").strip()

    if locality:
        parts.append(locality)
    if municipality:
        parts.append(municipality)
    if state:
        parts.append(state)

    formatted = ", ".join(parts).strip()
    return formatted or record.display_name


def _has_road(record: Location) -> bool:
    return bool(record.address and (record.address.road or "").strip())


def dedupe_suggestions(suggestions: Iterable[AddressSuggestion]) -> List[AddressSuggestion]:
    seen    = set()
    deduped = []

    for suggestion in suggestions:
        if suggestion.display_name in seen:
            continue
        seen.add(suggestion.display_name)
        deduped.append(suggestion)

    return deduped


def build_suggestions(
    records: Iterable[Location],
    hint: Optional[ParsedHint] = None,
    *,
    require_road: bool = False,
    override: str = OVERRIDE_ALWAYS) -> List[AddressSuggestion]:

    candidates = [r for r in records if _has_road(r)] if require_road else list(records)

    formatted = [
        AddressSuggestion(
            display_name = format_argentinian_address(record, hint, override),
            latitude     = record.latitude,
            longitude    = record.longitude,
            address      = record.address,
        )
        for record in candidates
    ]

    number = (hint.number or "").strip() if hint else ""
    if number:
        # fall back to everything rather than show nothing
        matching  = [s for s in formatted if number in s.display_name]
        formatted = matching or formatted

    return dedupe_suggestions(formatted)


def format_suggestions(
    records: Iterable[Location],
    hint: Optional[ParsedHint] = None,
    *,
    require_road: bool = False,
    override: str = OVERRIDE_ALWAYS) -> List[str]:

    suggestions = build_suggestions(records, hint, require_road=require_road, override=override)
    return [s.display_name for s in suggestions]
