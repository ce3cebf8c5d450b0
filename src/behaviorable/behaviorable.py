"""
Behaviorable mixin

Lets an object delegate attribute reads, writes, deletions and method calls
it cannot satisfy itself to an ordered set of attached behaviors. This is
composition in place of inheritance: a class mixes in Behaviorable once and
then gains members at runtime by attaching Behavior instances.

    class Document(Behaviorable):
        def __init__(self, title):
            self.title = title

    doc = Document('notes')
    doc.attach_behavior('timestamps', TimestampBehavior())
    doc.touch()              # TimestampBehavior.touch
    doc.updated_at           # TimestampBehavior.updated_at

Resolution order is the attachment order of the behaviors; the first one that
can satisfy an access wins. Only public members of a behavior take part.
"""

import copy
import inspect
import logging
import weakref
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from .behavior import Behavior
from .config import get_config
from .errors import (
    MemberAccessDeniedError,
    MemberNotFoundError,
    MethodMissingError,
)
from .visibility import is_dunder, is_public, visibility_of

logger = logging.getLogger(__name__)

# Instance attribute holding the name -> behavior mapping
BEHAVIORS_ATTR = '_behaviors'

_MISSING = object()


def _has_settable(obj: Any, name: str) -> bool:
    '''Check whether `obj` already has a data member `name` that can be assigned'''
    if name in getattr(obj, '__dict__', {}):
        return True

    try:
        static = inspect.getattr_static(obj, name)
    except AttributeError:
        return False

    if isinstance(static, property):
        return static.fset is not None

    # Other data descriptors
    if hasattr(type(static), '__set__'):
        return True

    # Methods, classmethods and the like are not data
    return not (callable(static) or hasattr(type(static), '__get__'))


def _resolves_dynamically(obj: Any) -> bool:
    return hasattr(type(obj), '__getattr__')


def _has_deleter(cls: type, name: str) -> bool:
    '''Check whether `cls` defines `name` as a descriptor that supports deletion'''
    try:
        static = inspect.getattr_static(cls, name)
    except AttributeError:
        return False

    if isinstance(static, property):
        return static.fdel is not None

    return hasattr(type(static), '__delete__')


class Behaviorable:
    """Mixin delegating unresolved members to attached behaviors"""

    # -- behavior lifecycle -------------------------------------------------

    def _behavior_map(self) -> Dict[str, Behavior]:
        return self.__dict__.setdefault(BEHAVIORS_ATTR, {})

    @property
    def behaviors(self) -> Mapping[str, Behavior]:
        """Read-only view of the attached behaviors in resolution order"""
        return MappingProxyType(self._behavior_map())

    def get_behavior(self, name: str) -> Optional[Behavior]:
        return self._behavior_map().get(name)

    def attach_behavior(self, name: str, behavior: Behavior) -> Behavior:
        """Attach `behavior` under `name`

        Replacing an existing name keeps its position in the resolution order.
        """
        if not isinstance(name, str) or not name:
            raise TypeError(f'Behavior name must be a non-empty string, got {name!r}')

        if not isinstance(behavior, Behavior):
            raise TypeError(f'Expected a Behavior instance, got {type(behavior).__name__}')

        try:
            weakref.ref(self)
        except TypeError:
            raise TypeError(
                f'{type(self).__name__} does not support weak references;'
                f' add "__weakref__" to its __slots__ to attach behaviors'
            ) from None

        config = get_config()
        behaviors = self._behavior_map()

        previous_owner = behavior.owner
        if (config.reattach_moves_behavior
                and previous_owner is not None
                and previous_owner is not self
                and isinstance(previous_owner, Behaviorable)):
            previous_owner._forget_behavior(behavior)

        replaced = behaviors.get(name)
        behaviors[name] = behavior
        behavior.attach(self)

        if replaced is not None and replaced is not behavior:
            logger.debug('%s: behavior %r replaced by %r', type(self).__name__, name, behavior)
            if config.detach_clears_owner:
                self._release(replaced)
        else:
            logger.debug('%s: attached behavior %r (%s)', type(self).__name__, name, type(behavior).__name__)

        return behavior

    def attach_behaviors(self, behaviors: Mapping[str, Behavior]):
        for name, behavior in behaviors.items():
            self.attach_behavior(name, behavior)

    def detach_behavior(self, name: str) -> Optional[Behavior]:
        """Detach the behavior registered under `name`; no-op when absent"""
        behavior = self._behavior_map().pop(name, None)
        if behavior is None:
            return None

        logger.debug('%s: detached behavior %r', type(self).__name__, name)
        if get_config().detach_clears_owner:
            self._release(behavior)

        return behavior

    def detach_behaviors(self) -> Dict[str, Behavior]:
        """Detach every behavior, returning what was attached"""
        detached = {}
        for name in list(self._behavior_map()):
            detached[name] = self.detach_behavior(name)

        return detached

    def _release(self, behavior: Behavior):
        # Same instance may still be registered under another name
        if behavior.owner is self and not any(b is behavior for b in self._behavior_map().values()):
            behavior.detach()

    def _forget_behavior(self, behavior: Behavior):
        behaviors = self._behavior_map()
        for name in [n for n, b in behaviors.items() if b is behavior]:
            del behaviors[name]
            logger.debug('%s: behavior %r moved to another owner', type(self).__name__, name)

    def _iter_candidates(self, name: str) -> Iterator[Behavior]:
        '''Behaviors, in order, that may expose `name` publicly'''
        if is_dunder(name):
            return

        for behavior in list(self._behavior_map().values()):
            if is_public(behavior, name):
                yield behavior

    # -- resolution ---------------------------------------------------------

    def _has_native(self, name: str) -> bool:
        if name in self.__dict__:
            return True
        return any(name in klass.__dict__ for klass in type(self).__mro__)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup failed
        if name == BEHAVIORS_ATTR:
            return self._behavior_map()

        for behavior in self._iter_candidates(name):
            try:
                return getattr(behavior, name)
            except Exception as e:
                logger.debug('%s.%s: %s failed (%r), trying next behavior',
                             type(self).__name__, name, type(behavior).__name__, e)
                continue

        raise MemberNotFoundError(type(self).__name__, name)

    def __setattr__(self, name: str, value: Any):
        if (name == BEHAVIORS_ATTR
                or is_dunder(name)
                or (get_config().native_set_priority and self._has_native(name))):
            object.__setattr__(self, name, value)
            return

        for behavior in self._iter_candidates(name):
            if not (_has_settable(behavior, name) or _resolves_dynamically(behavior)):
                continue

            try:
                setattr(behavior, name, value)
            except AttributeError:
                continue

            logger.debug('%s.%s assigned on %s', type(self).__name__, name, type(behavior).__name__)
            return

        object.__setattr__(self, name, value)

    def __delattr__(self, name: str):
        self._unset(name, inspect.currentframe().f_back)

    def _unset(self, name: str, caller_frame):
        '''Delete `name` natively and from every behavior holding it'''
        done = False
        restricted = None
        # Called from one of the owner's own methods
        internal = caller_frame.f_locals.get('self') is self

        if name in self.__dict__:
            visibility = visibility_of(type(self), name)
            if internal or visibility.is_public:
                del self.__dict__[name]
                done = True
            else:
                restricted = visibility

        elif _has_deleter(type(self), name):
            # Property deleters, __slots__ members
            visibility = visibility_of(type(self), name)
            if internal or visibility.is_public:
                object.__delattr__(self, name)
                done = True
            else:
                restricted = visibility

        for behavior in self._iter_candidates(name):
            try:
                if not hasattr(behavior, name):
                    continue
            except Exception:
                continue

            try:
                delattr(behavior, name)
            except AttributeError:
                # Class-level members cannot be removed from an instance
                continue

            logger.debug('%s.%s removed from %s', type(self).__name__, name, type(behavior).__name__)
            done = True

        if not done and restricted is not None:
            raise MemberAccessDeniedError(
                type(self).__name__, name, str(restricted),
                caller_frame.f_code.co_filename, caller_frame.f_lineno,
            )

    def _resolve_callable(self, name: str) -> Any:
        try:
            native = object.__getattribute__(self, name)
        except AttributeError:
            pass
        else:
            if callable(native):
                return native

        for behavior in self._iter_candidates(name):
            try:
                member = getattr(behavior, name)
            except Exception as e:
                logger.debug('%s.%s(): %s failed (%r), trying next behavior',
                             type(self).__name__, name, type(behavior).__name__, e)
                continue

            if callable(member):
                return member

        return _MISSING

    # -- explicit API -------------------------------------------------------

    def get_member(self, name: str) -> Any:
        return getattr(self, name)

    def set_member(self, name: str, value: Any):
        setattr(self, name, value)

    def unset_member(self, name: str):
        self._unset(name, inspect.currentframe().f_back)

    def invoke(self, name: str, *args, **kwargs) -> Any:
        """Call method `name` on the owner or on the first behavior providing it

        Raises:
            MethodMissingError: no callable `name` anywhere
        """
        method = self._resolve_callable(name)
        if method is _MISSING:
            logger.debug('%s: no method %r in class and behaviors', type(self).__name__, name)
            raise MethodMissingError(type(self).__name__, name)

        return method(*args, **kwargs)

    def has_member(self, name: str) -> bool:
        """True exactly when reading `name` would succeed"""
        try:
            self.get_member(name)
        except Exception:
            return False
        return True

    def can_get_member(self, name: str) -> bool:
        return self.has_member(name)

    def can_set_member(self, name: str) -> bool:
        '''True if `name` names an existing settable member of the owner or a behavior'''
        if _has_settable(self, name):
            return True

        return any(
            _has_settable(behavior, name) or _resolves_dynamically(behavior)
            for behavior in self._iter_candidates(name)
        )

    def has_method(self, name: str) -> bool:
        return self._resolve_callable(name) is not _MISSING

    # -- copying ------------------------------------------------------------

    def _state_without_behaviors(self) -> Dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if k != BEHAVIORS_ATTR}

    def __copy__(self):
        cls = type(self)
        clone = cls.__new__(cls)
        clone.__dict__.update(self._state_without_behaviors())
        clone.__dict__[BEHAVIORS_ATTR] = {}
        return clone

    def __deepcopy__(self, memo):
        cls = type(self)
        clone = cls.__new__(cls)
        memo[id(self)] = clone
        for key, value in self._state_without_behaviors().items():
            clone.__dict__[key] = copy.deepcopy(value, memo)
        clone.__dict__[BEHAVIORS_ATTR] = {}
        return clone

    def __getstate__(self):
        return self._state_without_behaviors()

    def __setstate__(self, state):
        self.__dict__.update(state)
        self.__dict__[BEHAVIORS_ATTR] = {}

    def __dir__(self):
        names = set(super().__dir__())
        for behavior in self._behavior_map().values():
            names.update(
                n for n in dir(behavior)
                if not is_dunder(n) and is_public(behavior, n)
            )
        return sorted(names)
