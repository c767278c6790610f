# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Framework internals.

- ``core``: data model, dispatcher, settings, version helpers
- ``_util``: domain-agnostic helpers (ANSI colors, layered merge)
- ``util``: cell-width padding, debug logging
"""
