# Copyright      2023   Xiaomi Corp.       (author: Wei Kang)
#
# See ../../../LICENSE for clarification regarding multiple authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from typing import Optional, Tuple

import numpy as np

from .datatypes import NormalizedText, Symbol, Text

# Rank of a substring that runs past the end of the text. It is smaller
# than any symbol code and any rank.
PLACEHOLDER = -1


def initial_rank_table(codes: np.ndarray) -> np.ndarray:
    """Return the rank table for radius 1.

    The raw symbol codes are used as ranks; they need not be contiguous
    since the first doubling step renumbers them.

    Args:
      codes:
        A 1-D non-negative integer array of shape ``(n,)``.
    Returns:
      Return a np.int64 array of shape ``(2 * n,)``. The first ``n`` entries
      are ``codes``, the remaining ones are ``PLACEHOLDER``.
    """
    assert codes.ndim == 1, codes.ndim
    length = codes.size
    table = np.full(2 * length, PLACEHOLDER, dtype=np.int64)
    table[:length] = codes
    return table


def doubling_step(
    table: np.ndarray, radius: int, length: int
) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the rank table for radius ``2 * radius`` from the one for
    ``radius``.

    The substring of length ``2 * radius`` starting at ``i`` is described by
    the pair ``(table[i], table[i + radius])``. All pairs are sorted together
    with their index ``i``, which breaks ties, and consecutive equal pairs
    get equal ranks.

    Args:
      table:
        The rank table for ``radius``, of shape ``(2 * length,)``.
      radius:
        The current radius, ``0 < radius <= length``.
      length:
        Length of the text.
    Returns:
      Return a tuple ``(order, new_table)``. ``order`` contains the
      positions ``0 .. length - 1`` sorted by ``(table[i], table[i + radius],
      i)``. ``new_table`` is the rank table for radius ``2 * radius``.
    """
    assert table.ndim == 1, table.ndim
    assert table.size == 2 * length, (table.size, length)
    assert 0 < radius <= length, (radius, length)

    index = np.arange(length, dtype=np.int64)
    begin = table[:length]
    end = table[radius : radius + length]

    # np.lexsort uses the last key as the primary one.
    order = np.lexsort((index, end, begin))

    sorted_begin = begin[order]
    sorted_end = end[order]

    # changed[k] is True if the pair at k differs from the pair at k - 1.
    # The index never counts as a difference.
    changed = np.zeros(length, dtype=np.int64)
    changed[1:] = (sorted_begin[1:] != sorted_begin[:-1]) | (
        sorted_end[1:] != sorted_end[:-1]
    )
    ranks = np.cumsum(changed)

    new_table = np.full(2 * length, PLACEHOLDER, dtype=np.int64)
    new_table[order] = ranks

    logging.debug(
        f"Radius {2 * radius}: {ranks[-1] + 1} distinct ranks "
        f"for {length} positions."
    )
    return order, new_table


def kmr(codes: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Build the suffix array and the rank array with the KMR algorithm.

    The radius doubles starting from 1 until it is not less than the text
    length, or until all ranks are already distinct, in which case further
    steps cannot change the result.

    Args:
      codes:
        A 1-D non-negative integer array of shape ``(n,)``, ``n > 0``. It
        should end with a unique sentinel that is smaller than any other
        code.
    Returns:
      Return a tuple ``(suffix_array, rank_array)``, both of type np.int32
      and of shape ``(n,)``, with ``rank_array[suffix_array[k]] == k``.
    """
    length = codes.size
    assert length > 0, length

    if length == 1:
        return np.zeros(1, dtype=np.int32), np.zeros(1, dtype=np.int32)

    table = initial_rank_table(codes)
    radius = 1
    while radius < length:
        order, table = doubling_step(table, radius, length)
        radius *= 2
        if table[order[-1]] == length - 1:
            break

    suffix_array = order.astype(np.int32)
    rank_array = table[:length].astype(np.int32)
    return suffix_array, rank_array


class SuffixArray:
    """
    Suffix array of a text built with the Karp-Miller-Rosenberg
    radius-doubling algorithm in O(n log^2 n).

    The text is normalized at construction, i.e., the sentinel is appended
    unless the text already contains it. Both arrays are computed together
    on the first request and cached; the returned arrays are read-only.

    Caution:
      The sentinel has to be smaller than every other symbol of the text and
      has to occur exactly once. Otherwise the result is still a permutation
      but it does not follow the expected order. Pass ``validate=True`` to
      check it at construction.

    **Usage examples**:

        .. literalinclude:: code/suffix-array.py
    """

    def __init__(
        self,
        text: Text,
        sentinel: Optional[Symbol] = None,
        validate: bool = False,
    ):
        """
        Args:
          text:
            A ``str``, ``bytes``, ``bytearray`` or a 1-D non-negative integer
            np.ndarray.
          sentinel:
            A single character, a single byte or an integer code. Defaults
            to ``$``.
          validate:
            True to check that the sentinel is unique and smaller than the
            other symbols. Raise ``SentinelError`` if it is not.
        """
        self._text = NormalizedText.from_input(text, sentinel)
        if validate:
            self._text.check_sentinel()

        self._suffix_array: Optional[np.ndarray] = None
        self._rank_array: Optional[np.ndarray] = None

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return (
            f"SuffixArray(text={self.text!r}, "
            f"sentinel={self.sentinel!r})"
        )

    @property
    def text(self) -> Text:
        """The normalized text."""
        return self._text.text

    @property
    def sentinel(self) -> Symbol:
        return self._text.sentinel_symbol

    @property
    def normalized_text(self) -> NormalizedText:
        return self._text

    def _build(self) -> None:
        logging.debug(f"Building suffix array for {len(self)} symbols.")
        suffix_array, rank_array = kmr(self._text.codes)
        suffix_array.flags.writeable = False
        rank_array.flags.writeable = False
        self._suffix_array = suffix_array
        self._rank_array = rank_array

    def get_suffix_array(self) -> np.ndarray:
        """Return the suffix array.

        Returns:
          Return a read-only np.int32 array of shape ``(n,)``, where ``n`` is
          the length of the normalized text. It is a permutation of
          ``0 .. n - 1`` listing the start positions of the suffixes in
          lexicographic order.
        """
        if self._suffix_array is None:
            self._build()
        return self._suffix_array

    def get_rank_array(self) -> np.ndarray:
        """Return the rank array, i.e., the inverse of the suffix array.

        Returns:
          Return a read-only np.int32 array of shape ``(n,)``.
          ``ans[i]`` is the position of the suffix starting at ``i`` in the
          suffix array.
        """
        if self._rank_array is None:
            self._build()
        return self._rank_array

    # The rank array for a radius not less than n is the KMR array.
    get_kmr_array = get_rank_array


def build(
    text: Text, sentinel: Optional[Symbol] = None, validate: bool = False
) -> SuffixArray:
    """Construct a SuffixArray. See :class:`SuffixArray` for the arguments.

    Nothing is computed until the suffix array or the rank array is
    requested.
    """
    return SuffixArray(text, sentinel=sentinel, validate=validate)


def create_suffix_array(
    text: Text, sentinel: Optional[Symbol] = None
) -> np.ndarray:
    """Create a suffix array from a text.

    hint:
      Please refer to https://en.wikipedia.org/wiki/Suffix_array
      for what suffix array is. The sentinel (``$`` by default) is appended
      unless the text already contains it, and it is expected to be smaller
      than any other symbol.

    Args:
      text:
        A ``str``, ``bytes``, ``bytearray`` or a 1-D non-negative integer
        np.ndarray of shape ``(seq_len - 1,)``.
      sentinel:
        The sentinel symbol.
    Returns:
      Returns a suffix array of type ``np.int32``, of shape ``(seq_len,)``.
      This will consist of some permutation of the elements
      ``0 .. seq_len - 1``.
    """
    return SuffixArray(text, sentinel).get_suffix_array()


def create_rank_array(
    text: Text, sentinel: Optional[Symbol] = None
) -> np.ndarray:
    """Create the rank array (inverse suffix array) from a text.

    See :func:`create_suffix_array` for the arguments.
    """
    return SuffixArray(text, sentinel).get_rank_array()


def naive_suffix_array(
    text: Text, sentinel: Optional[Symbol] = None
) -> np.ndarray:
    """Create a suffix array by sorting all suffixes directly.

    It takes O(n^2 log n) time and is meant for checking the results of
    :class:`SuffixArray` on short texts.
    """
    codes = NormalizedText.from_input(text, sentinel).codes.tolist()
    order = sorted(range(len(codes)), key=lambda i: codes[i:])
    return np.array(order, dtype=np.int32)
