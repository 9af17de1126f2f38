from typing import Iterator
from boat import Boat
from record import RecordCodec
from misc import log
from errors import CapacityExceeded, FileOpenError, NotFound, OverpaymentRejected, ParseError


MAX_BOATS = 120


class BoatsRegistry:
    def __init__(self, capacity: int = MAX_BOATS) -> None:
        """Registry of the boats kept at the marina, sorted by name.

        The registry stores Boat objects in a list kept ordered by name
        (case-insensitive) after loading and after every addition. It
        provides methods to load and save the data file, add, remove and
        look up boats, take payments and accrue the monthly charges.

        Parameters
        ----------
        capacity : int, optional
            Maximum number of boats the registry accepts.
        """
        self.boats: list[Boat] = []
        self.capacity: int = capacity
        self.codec: RecordCodec = RecordCodec()

    def __str__(self) -> str:
        """Return a multiline string with the inventory line of every boat."""
        return "\n".join(self.inventory())

    def __repr__(self) -> str:
        return f"BoatsRegistry(boats={len(self.boats)}, capacity={self.capacity})"

    def __len__(self) -> int:
        return len(self.boats)

    def __iter__(self) -> Iterator[Boat]:
        return iter(self.boats)

    def __getitem__(self, index: int) -> Boat:
        return self.boats[index]

    def is_full(self) -> bool:
        return len(self.boats) >= self.capacity

    def sort(self) -> None:
        """Order the boats by name, ignoring case.

        The sort is stable so boats sharing a name keep their relative order.
        """
        self.boats.sort(key=Boat.sort_key)

    def load(self, path: str) -> None:
        """Read boats from the data file at ``path``.

        Every line is decoded with the record codec. Lines that do not have
        the record shape are logged and skipped. Reading stops once the
        registry is full. The boats are sorted afterwards.

        Raises
        ------
        FileOpenError
            If the file cannot be opened.
        """
        try:
            data_file = open(path, "r", encoding="utf-8")
        except OSError as e:
            raise FileOpenError(path, e) from e

        skipped = 0
        with data_file:
            for line_number, line in enumerate(data_file, start=1):
                if self.is_full():
                    log(f"Registry full, stopped reading {path} at line {line_number}.")
                    break
                try:
                    self.boats.append(self.codec.decode(line))
                except ParseError as e:
                    skipped += 1
                    log(f"Skipped line {line_number} of {path}: {e}")
        self.sort()
        log(f"Loaded {len(self.boats)} boats from {path} ({skipped} lines skipped).")

    def save(self, path: str) -> None:
        """Write every boat to ``path``, one record per line, in current order.

        Raises
        ------
        FileOpenError
            If the file cannot be opened for writing.
        """
        try:
            data_file = open(path, "w", encoding="utf-8")
        except OSError as e:
            raise FileOpenError(path, e) from e

        with data_file:
            for boat in self.boats:
                data_file.write(self.codec.encode(boat) + "\n")
        log(f"Saved {len(self.boats)} boats to {path}.")

    def inventory(self) -> Iterator[str]:
        """Yield the fixed-width summary line of each boat in current order."""
        for boat in self.boats:
            yield str(boat)

    def find_boat(self, name: str) -> int | None:
        """Return the index of the first boat named ``name``, ignoring case.

        Parameters
        ----------
        name : str
            Boat name to look up.

        Returns
        -------
        int | None
            Position of the first match in sorted order, or None.
        """
        for i, boat in enumerate(self.boats):
            if boat.matches(name):
                return i
        return None

    def has_boat(self, name: str) -> bool:
        """Return True if a boat named ``name`` is registered."""
        return self.find_boat(name) is not None

    def get_boat(self, name: str) -> Boat:
        """Return the first boat named ``name``.

        Raises NotFound if no boat has that name.
        """
        index = self.find_boat(name)
        if index is None:
            raise NotFound(name)
        return self.boats[index]

    def add_boat(self, raw_line: str) -> Boat:
        """Decode a record line and register the resulting boat.

        Duplicate names are accepted; lookups resolve to the first match in
        sorted order.

        Raises
        ------
        CapacityExceeded
            If the registry already holds ``capacity`` boats.
        ParseError
            If ``raw_line`` is not a valid record. The registry is unchanged.
        """
        if self.is_full():
            raise CapacityExceeded(self.capacity)
        new_boat = self.codec.decode(raw_line)
        self.boats.append(new_boat)
        self.sort()
        log(f"Added boat {new_boat.name!r}.")
        return new_boat

    def remove_boat(self, name: str) -> Boat:
        """Remove and return the first boat named ``name``.

        Raises NotFound if the name is not present.
        """
        index = self.find_boat(name)
        if index is None:
            raise NotFound(name)
        removed = self.boats.pop(index)
        log(f"Removed boat {removed.name!r}.")
        return removed

    def make_payment(self, name: str, amount: float) -> Boat:
        """Deduct a payment from the balance of the boat named ``name``.

        A payment equal to the balance clears it. The amount is not checked
        for sign.

        Raises
        ------
        NotFound
            If no boat has that name.
        OverpaymentRejected
            If ``amount`` is greater than the balance, which is left unchanged.
        """
        boat = self.get_boat(name)
        if amount > boat.amount_owed:
            raise OverpaymentRejected(boat.name, amount, boat.amount_owed)
        boat.amount_owed -= amount
        log(f"Payment of ${amount:.2f} for {boat.name!r}, now owes ${boat.amount_owed:.2f}.")
        return boat

    def accrue_monthly_charges(self) -> None:
        """Add one month of charges to the balance of every boat."""
        for boat in self.boats:
            boat.amount_owed += boat.monthly_charge()
        log(f"Accrued monthly charges for {len(self.boats)} boats.")

    def clear(self) -> None:
        """Drop every boat from the registry."""
        self.boats.clear()
