#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""babylog - edit and reconcile a baby care event timeline against a command endpoint."""

from provide.foundation.utils.versioning import get_version

__version__ = get_version("babylog", caller_file=__file__)

__all__ = [
    "__version__",
]

# 🔼⚙️🔚
