"""
Behavior base class

A behavior is a delegate object whose public attributes and methods become
reachable through the Behaviorable that owns it. The behavior only keeps a
weak back-reference to its owner; the owner holds the strong one.
"""

import weakref
from typing import Any, Optional

from .visibility import Visibility


class Behavior:
    """Delegate attached to a Behaviorable owner"""

    __member_visibility__ = {
        'attach': Visibility.PROTECTED,
        'detach': Visibility.PROTECTED,
        'owner': Visibility.PROTECTED,
        'attached': Visibility.PROTECTED,
    }

    _owner_ref: Optional[weakref.ReferenceType] = None

    @property
    def owner(self) -> Optional[Any]:
        """The owner this behavior is attached to, or None"""
        if self._owner_ref is None:
            return None
        return self._owner_ref()

    @property
    def attached(self) -> bool:
        return self.owner is not None

    def attach(self, owner: Any):
        """Called by the owner when this behavior is attached to it"""
        self._owner_ref = weakref.ref(owner)

    def detach(self):
        """Called when this behavior is removed from its owner"""
        self._owner_ref = None

    def __repr__(self):
        owner = self.owner
        state = f'owner={type(owner).__name__}' if owner is not None else 'detached'
        return f'<{type(self).__name__} {state}>'
