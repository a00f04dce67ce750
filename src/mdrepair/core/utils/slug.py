"""Filename stems derived from report titles"""

import re


_UNSAFE_RE = re.compile(r'[^a-z0-9]', re.IGNORECASE)


def filename_stem(title: str) -> str:
    """Replace every character outside [a-z0-9] with '_' and lower-case the result."""
    return _UNSAFE_RE.sub('_', title).lower()
