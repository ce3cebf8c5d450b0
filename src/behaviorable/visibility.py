'''
Member visibility model

Python has no access modifiers, so visibility is derived from naming
conventions unless a class declares it explicitly:

    class Account(Behaviorable):
        __member_visibility__ = {'balance': Visibility.PROTECTED}
'''

from enum import IntEnum
from typing import Dict


class Visibility(IntEnum):
    PUBLIC = 0
    PROTECTED = 1
    PRIVATE = 2

    def __str__(self):
        return self.name.lower()

    def __repr__(self):
        return self.name

    @property
    def is_public(self) -> bool:
        return self is Visibility.PUBLIC


VISIBILITY_ATTR = '__member_visibility__'


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith('__') and name.endswith('__')


def declared_visibility(cls: type) -> Dict[str, Visibility]:
    '''Merge explicit visibility tables along the MRO, subclasses winning'''
    table: Dict[str, Visibility] = {}
    for klass in reversed(cls.__mro__):
        table.update(klass.__dict__.get(VISIBILITY_ATTR, {}))

    return table


def visibility_of(cls: type, name: str) -> Visibility:
    '''Get the visibility of member `name` on instances of `cls`'''
    declared = declared_visibility(cls)
    if name in declared:
        value = declared[name]
        try:
            if isinstance(value, str):
                return Visibility[value.upper()]
            return Visibility(value)
        except (KeyError, ValueError):
            raise ValueError(
                f'Invalid visibility {value!r} for {cls.__name__}.{name};'
                f' expected one of {", ".join(str(v) for v in Visibility)}'
            ) from None

    if is_dunder(name):
        return Visibility.PUBLIC

    if name.startswith('__'):
        return Visibility.PRIVATE

    if name.startswith('_'):
        return Visibility.PROTECTED

    return Visibility.PUBLIC


def is_public(obj, name: str) -> bool:
    return visibility_of(type(obj), name).is_public
