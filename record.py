import misc
from boat import (
    Boat,
    BayLetter,
    PlaceKind,
    SlipNumber,
    StorageNumber,
    TrailerTag,
    place_kind_from_label,
)
from errors import ParseError


FIELD_SEPARATOR = ","

RECORD_CONTENT = [
    ("name", "str"),
    ("length", "float"),
    ("place", "str"),
    ("location", "str"),
    ("amount_owed", "float"),
]


class RecordCodec:
    def __init__(self) -> None:
        """Convert boats to and from lines of the data file.

        A record is one line of five comma-separated fields laid out as in
        ``RECORD_CONTENT``::

            name,length,place,location,amount_owed

        There is no quoting, so a boat name cannot contain a comma.
        """
        self.separator: str = FIELD_SEPARATOR

    def split(self, line: str) -> list[str]:
        """Split a raw line into its fields, checking the field count.

        Trailing carriage returns and newlines are dropped first.

        Raises
        ------
        ParseError
            If the line does not hold exactly ``len(RECORD_CONTENT)`` fields.
        """
        fields = line.rstrip("\r\n").split(self.separator)
        if len(fields) != len(RECORD_CONTENT):
            raise ParseError(line, f"expected {len(RECORD_CONTENT)} fields, got {len(fields)}")
        return fields

    def decode(self, line: str) -> Boat:
        """Parse one record line into a :class:`Boat`.

        The place label is matched case-insensitively; an unrecognised label
        yields a boat with an unknown place rather than an error. The
        location field is then read according to the place kind: an integer
        for slips and storage, the first character for land bays and at
        most nine characters for trailer tags.

        Parameters
        ----------
        line : str
            A line of the data file or a line typed at the add prompt.

        Returns
        -------
        Boat
            The decoded boat.

        Raises
        ------
        ParseError
            If the line does not have the 5-field shape, a numeric field is
            not a number, the name is empty or the location is missing for
            a known place kind.
        """
        parsed_data = {}
        for (key, type), value in zip(RECORD_CONTENT, self.split(line)):
            match type:
                case "float":
                    try:
                        parsed_data[key] = float(value)
                    except ValueError:
                        raise ParseError(line, f"{key} is not a number") from None
                case _:
                    parsed_data[key] = value

        if parsed_data["name"] == "":
            raise ParseError(line, "name is empty")

        kind = place_kind_from_label(parsed_data["place"])
        location = parsed_data["location"]
        if location == "" and kind is not PlaceKind.UNKNOWN:
            raise ParseError(line, f"missing location for {kind.value}")

        match kind:
            case PlaceKind.SLIP:
                parsed_data["location"] = SlipNumber(misc.leading_int(location))
            case PlaceKind.LAND:
                parsed_data["location"] = BayLetter(location[0])
            case PlaceKind.TRAILER:
                parsed_data["location"] = TrailerTag(location)
            case PlaceKind.STORAGE:
                parsed_data["location"] = StorageNumber(misc.leading_int(location))
            case _:
                parsed_data["location"] = None

        del parsed_data["place"]
        return Boat(**parsed_data)

    def encode(self, boat: Boat) -> str:
        """Render a boat as one record line, without the trailing newline.

        The length is written with no decimals and the balance with two.
        An unknown place is written as ``no_place`` with an empty location.
        """
        fields = []
        for key, type in RECORD_CONTENT:
            match key, type:
                case "place", _:
                    fields.append(boat.place_kind.value)
                case "location", _:
                    fields.append("" if boat.location is None else str(boat.location))
                case "length", "float":
                    fields.append(f"{boat.get_parameter(key):.0f}")
                case _, "float":
                    fields.append(f"{boat.get_parameter(key):.2f}")
                case _:
                    fields.append(boat.get_parameter(key))
        return self.separator.join(fields)
