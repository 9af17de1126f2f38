from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


MAX_NAME_LENGTH = 127
MAX_TAG_LENGTH = 9


class PlaceKind(Enum):
    """Category of storage a boat occupies.

    The value of each member is its canonical label, used both in the data
    file and in the inventory listing.
    """
    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailor"
    STORAGE = "storage"
    UNKNOWN = "no_place"


# Monthly charge per foot of boat length
PLACE_RATES = {
    PlaceKind.SLIP: 12.50,
    PlaceKind.LAND: 14.00,
    PlaceKind.TRAILER: 25.00,
    PlaceKind.STORAGE: 11.20,
    PlaceKind.UNKNOWN: 0.0,
}


def place_kind_from_label(label: str) -> PlaceKind:
    """Return the place kind matching ``label`` case-insensitively.

    Labels that match no storage category resolve to
    :attr:`PlaceKind.UNKNOWN`; ``"no_place"`` itself is not a recognised
    label, it is only what Unknown renders as.

    Parameters
    ----------
    label : str
        Place label as read from a record, e.g. ``"SLIP"`` or ``"trailor"``.
    """
    lowered = label.lower()
    for kind in (PlaceKind.SLIP, PlaceKind.LAND, PlaceKind.TRAILER, PlaceKind.STORAGE):
        if kind.value == lowered:
            return kind
    return PlaceKind.UNKNOWN


@dataclass(frozen=True)
class SlipNumber:
    kind: ClassVar[PlaceKind] = PlaceKind.SLIP
    number: int  # 1-85

    def __str__(self) -> str:
        return str(self.number)

    def label(self) -> str:
        return f"{self.kind.value:>7}   # {self.number:2d}"


@dataclass(frozen=True)
class BayLetter:
    kind: ClassVar[PlaceKind] = PlaceKind.LAND
    letter: str  # A-Z

    def __str__(self) -> str:
        return self.letter

    def label(self) -> str:
        return f"{self.kind.value:>7}      {self.letter}"


@dataclass(frozen=True)
class TrailerTag:
    kind: ClassVar[PlaceKind] = PlaceKind.TRAILER
    tag: str

    def __post_init__(self) -> None:
        if len(self.tag) > MAX_TAG_LENGTH:
            object.__setattr__(self, "tag", self.tag[:MAX_TAG_LENGTH])

    def __str__(self) -> str:
        return self.tag

    def label(self) -> str:
        return f"{self.kind.value:>7} {self.tag:>6}"


@dataclass(frozen=True)
class StorageNumber:
    kind: ClassVar[PlaceKind] = PlaceKind.STORAGE
    number: int  # 1-50

    def __str__(self) -> str:
        return str(self.number)

    def label(self) -> str:
        return f"{self.kind.value:>7}   # {self.number:2d}"


Location = SlipNumber | BayLetter | TrailerTag | StorageNumber


BOAT_INFO_KEYS = [
    "name",
    "length",
    "location",
    "amount_owed",
]


class Boat:
    def __init__(
        self,
        name: str,
        length: float = 0.0,
        location: Location | None = None,
        amount_owed: float = 0.0,
    ) -> None:
        """One entry of the marina inventory.

        Parameters
        ----------
        name : str
            Boat name, the case-insensitive business key. Truncated to
            ``MAX_NAME_LENGTH`` characters.
        length : float
            Length in feet, used for billing.
        location : Location | None
            Where the boat is kept. ``None`` means the place is unknown.
        amount_owed : float
            Outstanding balance in dollars.
        """
        self.name = name[:MAX_NAME_LENGTH]
        self.length = length
        self.location = location
        self.amount_owed = amount_owed

    def __str__(self) -> str:
        """Return the fixed-width inventory line for this boat."""
        if self.location is None:
            place = f"{PlaceKind.UNKNOWN.value:>7}       "
        else:
            place = self.location.label()
        return f"{self.name:<20} {self.length:3.0f}' {place}   Owes ${self.amount_owed:7.2f}"

    def __repr__(self) -> str:
        return (
            f"Boat(name={self.name!r}, length={self.length!r}, "
            f"location={self.location!r}, amount_owed={self.amount_owed!r})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Boat):
            return NotImplemented
        return all(self.get_parameter(key) == other.get_parameter(key) for key in BOAT_INFO_KEYS)

    __hash__ = None

    @property
    def place_kind(self) -> PlaceKind:
        """Place kind derived from the location variant."""
        return PlaceKind.UNKNOWN if self.location is None else self.location.kind

    @property
    def monthly_rate(self) -> float:
        return PLACE_RATES[self.place_kind]

    def monthly_charge(self) -> float:
        """Return one month of charges: length times the per-kind rate."""
        return self.length * self.monthly_rate

    def matches(self, name: str) -> bool:
        """Return True if ``name`` equals this boat's name, ignoring case."""
        return self.name.lower() == name.lower()

    def sort_key(self) -> str:
        return self.name.lower()

    def set_parameter(self, param: str, value) -> None:
        setattr(self, param, value)

    def get_parameter(self, param: str):
        return getattr(self, param)
