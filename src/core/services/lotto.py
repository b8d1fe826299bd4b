"""Lotto draw from raw quantum bytes.

The remap is `(v % 49) + 1`. Deduplication keeps first-seen order over the
fetched sequence, so the same bytes always give the same draw.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import DataType, LottoResult, RequestParameters

LOTTO_MODULUS = 49
LOTTO_PICK = 6
# Fetch more than LOTTO_PICK values so duplicates after the remap rarely
# leave the draw short.
LOTTO_FETCH_LENGTH = 10

LOTTO_REQUEST = RequestParameters(data_type=DataType.UINT8, length=LOTTO_FETCH_LENGTH)


def remap_to_lotto_range(values: Iterable[int]) -> list[int]:
    return [(value % LOTTO_MODULUS) + 1 for value in values]


def draw_lotto_numbers(raw: Iterable[int]) -> LottoResult:
    """Remap, dedupe (first-seen), take `LOTTO_PICK` and sort ascending.

    With fewer than `LOTTO_PICK` distinct remapped values the result is
    simply shorter; no re-fetch happens here.
    """

    source = list(raw)
    unique = list(dict.fromkeys(remap_to_lotto_range(source)))
    numbers = sorted(unique[:LOTTO_PICK])
    return LottoResult(numbers=numbers, source=source)
