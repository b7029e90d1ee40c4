"""DNS name model used for blocklist zones, domain candidates and query names."""

import re
from dataclasses import dataclass

import dns.exception
import dns.name


# Letters, digits, hyphen and underscore; no leading or trailing hyphen
LABEL_PATTERN = re.compile(r"^[A-Za-z0-9_](?:[A-Za-z0-9_-]*[A-Za-z0-9_])?$")


class InvalidNameError(ValueError):
    """Raised when text does not parse into a valid DNS name."""


class NameTooLongError(InvalidNameError):
    """Raised when concatenated labels exceed the 255-octet DNS name limit."""


@dataclass(frozen=True, eq=False)
class Domain:
    """Validated, immutable DNS name.

    The wrapped ``dns.name.Name`` is always absolute; ``fully_qualified``
    only records whether the text form carried a trailing dot so that
    ``str()`` gives the input back unchanged.

    Equality and hashing are case-insensitive and ignore the trailing dot:
    ``Domain.from_text("Example.COM") == Domain.from_text("example.com.")``.

    Attributes:
        name: Absolute dnspython name (labels end with the root label).
        fully_qualified: True if the text form ends with a dot.

    Examples:
        >>> str(Domain.from_text("zen.Example.org"))
        'zen.Example.org'
        >>> Domain.from_text("zen.example.org").labels
        ('zen', 'example', 'org')
    """

    name: dns.name.Name
    fully_qualified: bool = False

    def __post_init__(self) -> None:
        """Check the name is absolute with at least one valid label.

        Runs for every construction, so names built from raw labels (query
        names) obey the same rules as parsed text.

        Raises:
            InvalidNameError: If the name is relative, is the bare root, or
                has a label outside the permitted alphabet.
        """
        if not self.name.is_absolute():
            raise InvalidNameError(f"DNS name must be absolute: {self.name}")
        if len(self.name.labels) < 2:
            raise InvalidNameError("DNS name must contain at least one label")

        for label in self.relative_labels:
            label_text = label.decode("latin-1")
            if not LABEL_PATTERN.match(label_text):
                raise InvalidNameError(
                    f"Invalid DNS label {label_text!r} in {self.name}"
                )

    @classmethod
    def from_text(cls, text: str) -> "Domain":
        """Parse dot-separated ASCII label notation.

        Args:
            text: Name such as "dbl.example.org" or "dbl.example.org.".

        Returns:
            Domain: Parsed name.

        Raises:
            InvalidNameError: If the text is empty or only the root ("." or
                "@"), is not ASCII, contains an empty label, a label outside
                the permitted alphabet, a label over 63 octets, or the name
                exceeds 255 octets.
        """
        if not isinstance(text, str):
            raise InvalidNameError(f"DNS name must be a string, got {type(text).__name__}")
        if not text.isascii():
            raise InvalidNameError(f"DNS name must be ASCII: {text!r}")

        try:
            name = dns.name.from_text(text, origin=dns.name.root)
        except dns.name.NameTooLong as e:
            raise NameTooLongError(f"DNS name exceeds 255 octets: {text!r}") from e
        except dns.exception.DNSException as e:
            raise InvalidNameError(f"Invalid DNS name {text!r}: {e}") from e

        return cls(name=name, fully_qualified=text.endswith("."))

    @classmethod
    def from_json(cls, value: object) -> "Domain":
        """Build a Domain from its serialized (string) form.

        Raises:
            InvalidNameError: If value is not a string or not a valid name.
        """
        return cls.from_text(value)  # type: ignore[arg-type]

    def to_json(self) -> str:
        """Serialize as the text form."""
        return str(self)

    @property
    def labels(self) -> tuple[str, ...]:
        """Labels in presentation order, without the root label."""
        return tuple(label.decode("ascii") for label in self.relative_labels)

    @property
    def relative_labels(self) -> tuple[bytes, ...]:
        """Raw label octets in presentation order, without the root label."""
        return self.name.labels[:-1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name.to_text(omit_final_dot=not self.fully_qualified)

    def __repr__(self) -> str:
        return f"Domain({str(self)!r})"


# A DNSBL zone apex, e.g. "zen.example.org"
BlockList = Domain
