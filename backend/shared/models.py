from typing import Optional, List, Any, Dict
from pydantic import BaseModel, ConfigDict


ADDRESS_FIELDS = (
    "house_number",
    "road",
    "neighbourhood",
    "suburb",
    "city",
    "town",
    "village",
    "municipality",
    "city_district",
    "state",
    "postcode",
    "country",
    "country_code",
)


def _first_non_empty(*values: Optional[str]) -> str:
    for value in values:
        if value and value.strip():
            return value.strip()
    return ""


class Address(BaseModel):
    house_number   : Optional[str] = None
    road           : Optional[str] = None
    neighbourhood  : Optional[str] = None
    suburb         : Optional[str] = None
    city           : Optional[str] = None
    town           : Optional[str] = None
    village        : Optional[str] = None
    municipality   : Optional[str] = None
    city_district  : Optional[str] = None
    state          : Optional[str] = None
    postcode       : Optional[str] = None
    country        : Optional[str] = None
    country_code   : Optional[str] = None

    def is_empty(self) -> bool:
        return not any(
            (getattr(self, name) or "").strip() for name in ADDRESS_FIELDS
        )

    def locality(self) -> str:
        return _first_non_empty(self.town, self.suburb, self.village)

    def municipality_name(self) -> str:
        return _first_non_empty(self.municipality, self.city_district, self.city)


class Location(BaseModel):
    latitude       : float
    longitude      : float
    address        : Optional[Address] = None
    display_name   : str = ""

    @classmethod
    def from_nominatim(cls, item: Dict[str, Any]) -> "Location":
        raw_address = item.get("address")

        return cls(
            latitude     = float(item["lat"]),
            longitude    = float(item["lon"]),
            address      = Address.model_validate(raw_address) if isinstance(raw_address, dict) else None,
            display_name = item.get("display_name") or "",
        )


class ParsedHint(BaseModel):
    model_config = ConfigDict(frozen=True)

    street         : str = ""
    number         : Optional[str] = None


class AddressSuggestion(BaseModel):
    display_name   : str
    latitude       : float
    longitude      : float
    address        : Optional[Address] = None


class FormatRequest(BaseModel):
    query          : str = ""
    results        : List[Dict[str, Any]]
