"""Immutable query string parameters.

Implements ``Mapping[str, str]`` over a URL query string.

Names and values are percent-decoded only: ``+`` stays a literal plus,
the way a URL's query items read, not a form-encoded space.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import unquote


def _split_query(query_string: str) -> list[tuple[str, str, str]]:
    """Split into ``(key, value, raw_piece)`` triples, skipping empty pieces."""
    triples: list[tuple[str, str, str]] = []
    for piece in query_string.split("&"):
        if not piece:
            continue
        key, _, value = piece.partition("=")
        triples.append((unquote(key), unquote(value), piece))
    return triples


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.
        _pairs: Decoded ``(key, value)`` pairs in query order.
        _pieces: ``(key, raw piece)`` pairs, the piece exactly as written.
        _raw: Raw query string.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    ``items_list`` returns every ``(key, value)`` pair in query order.
    """

    _data: dict[str, list[str]]
    _pairs: tuple[tuple[str, str], ...]
    _pieces: tuple[tuple[str, str], ...]
    _raw: str

    __slots__ = ("_data", "_pairs", "_pieces", "_raw")

    def __init__(self, query_string: str = "") -> None:
        object.__setattr__(self, "_raw", query_string)
        triples = _split_query(query_string)
        object.__setattr__(self, "_pairs", tuple((key, value) for key, value, _ in triples))
        object.__setattr__(self, "_pieces", tuple((key, piece) for key, _, piece in triples))
        data: dict[str, list[str]] = {}
        for key, value, _ in triples:
            data.setdefault(key, []).append(value)
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    @property
    def raw(self) -> str:
        """The query string exactly as it appeared in the URL."""
        return self._raw

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def items_list(self) -> list[tuple[str, str]]:
        """Return all ``(key, value)`` pairs, repeated keys included."""
        return list(self._pairs)

    def raw_pieces(self) -> list[tuple[str, str]]:
        """Return ``(key, piece)`` pairs, where *piece* is the undecoded ``key=value`` text."""
        return list(self._pieces)
