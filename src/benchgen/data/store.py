"""
Auxiliary Data Store

Loads shift vectors, rotation matrices and shuffle permutations for a
(version, function id, dimension) key from a data directory laid out as

    <root>/cec<version>/M_<fid>_D<dim>.txt
    <root>/cec<version>/shift_data_<fid>.txt
    <root>/cec<version>/shuffle_data_<fid>_D<dim>.txt

Reads are best effort: tokens are consumed lazily up to the expected count
and a short file yields a partially filled buffer flagged as truncated.
A missing file is always reported as DataUnavailable.
"""

import itertools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Tuple, Union

import numpy as np

from ..errors import DataTruncated, DataUnavailable
from .layout import DataKind, VersionLayout, get_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """
    An owned, read-only buffer of auxiliary data.

    Attributes:
        kind: What was loaded
        path: Source file
        values: Values actually read (read-only numpy array)
        expected: Number of values the layout asked for
        truncated: True if the file ended before `expected` values
    """
    kind: DataKind
    path: Path
    values: np.ndarray
    expected: int
    truncated: bool

    def __len__(self) -> int:
        return len(self.values)

    def require(self, n: int) -> np.ndarray:
        """Return the first n values or raise DataTruncated."""
        if len(self.values) < n:
            raise DataTruncated(self.path, n, len(self.values))
        return self.values[:n]


def _tokens(lines) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _parse(tokens, kind: DataKind, path: Path) -> np.ndarray:
    try:
        if kind is DataKind.SHUFFLE:
            # shuffle files are written as floats in some suites
            return np.array([int(float(t)) for t in tokens], dtype=np.int64)
        return np.array([float(t) for t in tokens], dtype=np.float64)
    except ValueError as e:
        raise DataUnavailable(path, f"malformed numeric data: {e}") from e


def read_tokens(path: Path, count: int, kind: DataKind = DataKind.SHIFT) -> np.ndarray:
    """Read at most `count` whitespace separated numbers from a file."""
    try:
        with open(path, "r") as f:
            tokens = list(itertools.islice(_tokens(f), count))
    except OSError as e:
        raise DataUnavailable(path, e.strerror or str(e)) from e
    return _parse(tokens, kind, path)


def read_rows(path: Path, n_rows: int, row_len: int) -> np.ndarray:
    """Read the first `row_len` numbers of each of the first `n_rows` lines."""
    tokens = []
    try:
        with open(path, "r") as f:
            rows = (line.split() for line in f if line.strip())
            for row in itertools.islice(rows, n_rows):
                tokens.extend(row[:row_len])
    except OSError as e:
        raise DataUnavailable(path, e.strerror or str(e)) from e
    return _parse(tokens, DataKind.SHIFT, path)


def _count_lines(path: Path, limit: int = 2) -> int:
    try:
        with open(path, "r") as f:
            return sum(1 for _ in itertools.islice((l for l in f if l.strip()), limit))
    except OSError as e:
        raise DataUnavailable(path, e.strerror or str(e)) from e


class AuxiliaryDataStore:
    """
    Loader and owner of auxiliary transformation data.

    Loaded buffers are cached per (kind, version, function id, dimension)
    and are immutable, so one store can back many problems.
    """

    def __init__(self, root: Union[str, Path], cache: bool = True):
        self.root = Path(root)
        self.cache = cache
        self._cache: Dict[Tuple[DataKind, int, int, int], LoadResult] = {}

    def __repr__(self) -> str:
        return f"AuxiliaryDataStore(root={str(self.root)!r})"

    def layout(self, version: int) -> VersionLayout:
        return get_layout(version)

    def path(self, kind: DataKind, version: int, function_id: int, dimension: int) -> Path:
        return self.layout(version).path(self.root, kind, function_id, dimension)

    def load(
        self,
        kind: Union[DataKind, str],
        version: int,
        function_id: int,
        dimension: int
    ) -> LoadResult:
        """
        Load one auxiliary buffer.

        Args:
            kind: DataKind or its name ("shift", "rotation", "shuffle")
            version: Benchmark version, e.g. 2022
            function_id: Function id within the version
            dimension: Problem dimension

        Returns:
            LoadResult with the values read

        Raises:
            UnsupportedVersion: No layout for the version
            DataUnavailable: File missing or unreadable
        """
        kind = _as_kind(kind)
        key = (kind, int(version), int(function_id), int(dimension))
        if self.cache and key in self._cache:
            return self._cache[key]

        layout = self.layout(version)
        expected = layout.expected_size(kind, function_id, dimension)
        path = layout.path(self.root, kind, function_id, dimension)
        if not path.is_file():
            raise DataUnavailable(path)

        if kind is DataKind.SHIFT and layout.is_scaled(function_id) and expected > dimension \
                and _count_lines(path) > 1:
            values = read_rows(path, expected // dimension, dimension)
        else:
            values = read_tokens(path, expected, kind)

        if kind is DataKind.SHUFFLE:
            values = values - 1

        values.setflags(write=False)
        truncated = len(values) < expected
        if truncated:
            logger.debug("%s: read %d of %d values", path, len(values), expected)
        else:
            logger.debug("%s: read %d values", path, len(values))

        result = LoadResult(kind, path, values, expected, truncated)
        if self.cache:
            self._cache[key] = result
        return result

    def clear(self):
        self._cache.clear()


_KIND_NAMES = {
    "shift": DataKind.SHIFT,
    "rotation": DataKind.ROTATION,
    "shuffle": DataKind.SHUFFLE,
}


def _as_kind(kind: Union[DataKind, str]) -> DataKind:
    if isinstance(kind, DataKind):
        return kind
    try:
        return _KIND_NAMES[kind.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown data kind: {kind!r}") from None
