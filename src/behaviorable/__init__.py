"""
behaviorable: composition through attachable behaviors

An object mixing in Behaviorable delegates the attributes and methods it does
not define itself to the Behavior instances attached to it, in attachment
order.
"""

__version__ = "0.1.0"

from .behavior import Behavior
from .behaviorable import Behaviorable
from .config import Config, get_config, init_config
from .errors import (
    BehaviorError,
    ConfigError,
    MemberAccessDeniedError,
    MemberLookupError,
    MemberNotFoundError,
    MethodMissingError,
)
from .visibility import Visibility, visibility_of

__all__ = [
    "Behavior", "Behaviorable",
    "Config", "get_config", "init_config",
    "BehaviorError", "ConfigError", "MemberAccessDeniedError",
    "MemberLookupError", "MemberNotFoundError", "MethodMissingError",
    "Visibility", "visibility_of",
]
