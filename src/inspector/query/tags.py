# src/inspector/query/tags.py
"""
Maps abstract tag names ("button", "text", ...) onto the Android widget
classes the query backend matches on.
"""
from types import MappingProxyType
from typing import Any, List, Mapping, Tuple

from ..errors import InvalidRoleError

WIDGET_PREFIX = "android.widget."


def _widgets(*names: str) -> Tuple[str, ...]:
    return tuple(f"{WIDGET_PREFIX}{name}" for name in names)


# Must match the names in the server's AndroidElementClassMap.
# 'secure' is not a valid tag on Android: a password field is just an EditText.
ROLE_CLASS_MAP: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "button": _widgets("Button", "ImageButton"),
    "text": _widgets("TextView"),
    "list": _widgets("ListView"),
    "window": _widgets("FrameLayout"),
    "frame": _widgets("FrameLayout"),
    "grid": _widgets("GridView"),
    "relative": _widgets("RelativeLayout"),
    "linear": _widgets("LinearLayout"),
    "textfield": _widgets("EditText"),
})


def resolve(role: Any) -> Tuple[str, ...]:
    """
    Returns the Android classes matching a tag name.

    Args:
        role: The tag name, matched case-insensitively after stripping whitespace.

    Returns:
        Tuple[str, ...]: Fully qualified class names, in match order.

    Raises:
        InvalidRoleError: If the tag name is not in the vocabulary.
    """
    key = str(role).strip().lower()
    try:
        return ROLE_CLASS_MAP[key]
    except KeyError:
        raise InvalidRoleError(role) from None


tag_name_to_android = resolve


def supported_roles() -> List[str]:
    """Returns the tag vocabulary in declaration order."""
    return list(ROLE_CLASS_MAP.keys())
