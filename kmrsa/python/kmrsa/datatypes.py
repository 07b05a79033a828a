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

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

DEFAULT_SENTINEL = "$"

Text = Union[str, bytes, bytearray, np.ndarray]
Symbol = Union[str, bytes, int]


class SentinelError(ValueError):
    """Raised when the sentinel is not the unique, smallest symbol of a text."""


def _text_to_codes(text: Text) -> np.ndarray:
    if isinstance(text, str):
        return np.fromiter(
            (ord(c) for c in text), dtype=np.int64, count=len(text)
        )
    if isinstance(text, (bytes, bytearray)):
        return np.frombuffer(bytes(text), dtype=np.uint8).astype(np.int64)
    if isinstance(text, np.ndarray):
        if text.ndim != 1:
            raise ValueError(f"Expected a 1-D array, given ndim={text.ndim}")
        if text.size == 0:
            return np.zeros(0, dtype=np.int64)
        if not np.issubdtype(text.dtype, np.integer):
            raise TypeError(f"Expected an integer array, given {text.dtype}")
        codes = text.astype(np.int64)
        if codes.min() < 0:
            raise ValueError("Symbol codes must be non-negative")
        return codes
    raise TypeError(f"Unsupported text type: {type(text)}")


def _sentinel_to_code(sentinel: Optional[Symbol]) -> int:
    if sentinel is None:
        sentinel = DEFAULT_SENTINEL
    if isinstance(sentinel, str):
        if len(sentinel) != 1:
            raise ValueError(
                f"Sentinel must be a single character, given {sentinel!r}"
            )
        return ord(sentinel)
    if isinstance(sentinel, (bytes, bytearray)):
        if len(sentinel) != 1:
            raise ValueError(
                f"Sentinel must be a single byte, given {sentinel!r}"
            )
        return sentinel[0]
    if isinstance(sentinel, (int, np.integer)) and not isinstance(
        sentinel, bool
    ):
        if sentinel < 0:
            raise ValueError(f"Sentinel must be non-negative, given {sentinel}")
        return int(sentinel)
    raise TypeError(f"Unsupported sentinel type: {type(sentinel)}")


@dataclass(frozen=True, eq=False)
class NormalizedText:
    """
    A text that is guaranteed to contain its sentinel symbol.

    Symbols are kept as their integer codes: the Unicode codepoint for a
    ``str``, the byte value for ``bytes``, and the value itself for an
    integer np.ndarray.
    """

    # 1-D np.int64 array with the codes of the normalized text.
    codes: np.ndarray

    # Code of the sentinel symbol.
    sentinel: int

    # One of "str", "bytes" or "array", i.e., the kind of the input text.
    kind: str

    # True if the sentinel was appended during normalization.
    appended: bool

    # Only used when kind is "array". The dtype of the input array.
    dtype: Optional[np.dtype] = None

    def __len__(self) -> int:
        return self.codes.size

    @property
    def text(self) -> Text:
        """Return the normalized text in the same kind as the input."""
        if self.kind == "str":
            return "".join(chr(c) for c in self.codes.tolist())
        elif self.kind == "bytes":
            return self.codes.astype(np.uint8).tobytes()
        else:
            assert self.kind == "array", self.kind
            return self.codes.astype(self.dtype)

    @property
    def sentinel_symbol(self) -> Symbol:
        if self.kind == "str":
            return chr(self.sentinel)
        elif self.kind == "bytes":
            return bytes([self.sentinel])
        return self.sentinel

    @staticmethod
    def from_input(
        text: Text, sentinel: Optional[Symbol] = None
    ) -> "NormalizedText":
        """Construct an instance of NormalizedText from an input text.

        The sentinel is appended only if it does not occur anywhere in
        ``text``. If ``text`` already contains it, even somewhere other than
        at the end, ``text`` is used unmodified.

        Caution:
          The caller has to choose a sentinel that compares below every
          other symbol of ``text``; this is not checked here, see
          :meth:`check_sentinel`.

        Args:
          text:
            A ``str``, ``bytes``, ``bytearray`` or a 1-D non-negative integer
            np.ndarray.
          sentinel:
            A single character, a single byte or an integer code. Defaults
            to ``$``.
        """
        codes = _text_to_codes(text)
        code = _sentinel_to_code(sentinel)

        if isinstance(text, str):
            kind, dtype = "str", None
        elif isinstance(text, (bytes, bytearray)):
            kind, dtype = "bytes", None
            if code > 255:
                raise ValueError(
                    f"Sentinel {code} does not fit into a byte for a bytes text"
                )
        else:
            kind, dtype = "array", text.dtype
            if text.size == 0 and not np.issubdtype(dtype, np.integer):
                dtype = np.dtype(np.int64)
            if code > np.iinfo(dtype).max:
                raise ValueError(
                    f"Sentinel {code} does not fit into dtype {dtype}"
                )

        appended = not bool(np.any(codes == code))
        if appended:
            codes = np.append(codes, np.int64(code))

        codes.flags.writeable = False
        return NormalizedText(
            codes=codes,
            sentinel=code,
            kind=kind,
            appended=appended,
            dtype=dtype,
        )

    def check_sentinel(self) -> None:
        """Check that the sentinel occurs exactly once and that it is
        strictly less than every other symbol.

        Raises:
          SentinelError if the check fails.
        """
        is_sentinel = self.codes == self.sentinel
        num_sentinels = int(np.count_nonzero(is_sentinel))
        if num_sentinels != 1:
            raise SentinelError(
                f"Sentinel {self.sentinel_symbol!r} occurs {num_sentinels} "
                "times, expected exactly once"
            )
        others = self.codes[~is_sentinel]
        if others.size and others.min() <= self.sentinel:
            raise SentinelError(
                f"Sentinel {self.sentinel_symbol!r} is not smaller than "
                f"every other symbol (min other code: {others.min()})"
            )
