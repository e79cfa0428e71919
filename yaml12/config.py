"""Process-wide defaults.

Environment variables:
- YAML12_MAX_DEPTH : Maximum nesting depth accepted by the composer,
                     decoder and encoder (default: 256)
"""

import os

DEFAULT_MAX_DEPTH = 256


def get_max_depth(max_depth=None):
    """Return the nesting limit to use for one conversion.

    An explicit ``max_depth`` wins over the environment, which wins over
    DEFAULT_MAX_DEPTH.
    """
    if max_depth is None:
        value = os.environ.get('YAML12_MAX_DEPTH')
        if not value:
            return DEFAULT_MAX_DEPTH
        try:
            max_depth = int(value)
        except ValueError:
            raise ValueError(
                "YAML12_MAX_DEPTH must be an integer, got %r" % value) from None
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise TypeError("max_depth must be an int, got %s"
                        % type(max_depth).__name__)
    if max_depth < 1:
        raise ValueError("max_depth must be positive, got %d" % max_depth)
    return max_depth
