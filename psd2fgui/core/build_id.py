from __future__ import annotations

"""Build identifier generation.

A build id is an opaque base-36 string. Its first eight characters are the
package id; the rest prefixes every item id of the package. Passing the same
build id to repeated conversions of a document keeps its resource ids stable.
"""

import random
from typing import Optional, Tuple

from psd2fgui.core.utils import to_base36

__all__ = ["PACKAGE_ID_LENGTH", "gen_build_id", "split_build_id"]

PACKAGE_ID_LENGTH = 8


def gen_build_id(rng: Optional[random.Random] = None) -> str:
    """Return a new random build id.

    The id is one magic character, a 4-character and a 3-character
    zero-padded random segment, then a variable-length counter segment.
    """
    rng = rng or random.Random()
    magic = to_base36(rng.randrange(36))
    s1 = to_base36(rng.randrange(36 ** 4)).rjust(4, "0")
    s2 = to_base36(rng.randrange(36 ** 3)).rjust(3, "0")
    count = 0
    for i in range(4):
        count += (26 ** i) * (rng.randrange(26) + 10)
    count += rng.randrange(1000000) + rng.randrange(222640)
    return magic + s1 + s2 + to_base36(count)


def split_build_id(build_id: str) -> Tuple[str, str]:
    """Return ``(package_id, item_id_base)`` for *build_id*."""
    return build_id[:PACKAGE_ID_LENGTH], build_id[PACKAGE_ID_LENGTH:]
