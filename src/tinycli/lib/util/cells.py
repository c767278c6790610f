# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Terminal cell-width helpers for aligned help columns.

``len()`` counts code points, but terminals lay text out in cells: CJK
ideographs and natively wide emoji (``East_Asian_Width=W``) take two cells
each.  Command names are padded by cell width so the usage column lines up
regardless of what characters a host picks for its command names.
"""

from collections.abc import Iterable

from rich.cells import cell_len


def cell_padding(text: str, width: int) -> str:
    """Return the spaces that fill *text* out to *width* terminal cells."""
    return " " * max(width - cell_len(text), 0)


def max_cells(texts: Iterable[str]) -> int:
    """Return the widest cell length among *texts* (0 when empty)."""
    return max((cell_len(t) for t in texts), default=0)
