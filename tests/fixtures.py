'''Owner and behavior classes shared by the tests'''

from behaviorable import Behavior, Behaviorable, Visibility


class Owner(Behaviorable):
    '''Owner with one protected and one public attribute'''

    def __init__(self):
        self._protected_property = ':)'
        self.public_property = 'public :)'

    def native_method(self, value):
        return f'native {value}'

    def drop_protected(self):
        del self._protected_property


class PropertyOwner(Behaviorable):
    '''Owner whose public members are properties'''

    def __init__(self):
        self._value = 1

    @property
    def value(self):
        return self._value

    @value.deleter
    def value(self):
        del self._value

    @property
    def fragile(self):
        raise RuntimeError('fragile property')

    @property
    def _hidden(self):
        return self._value

    @_hidden.deleter
    def _hidden(self):
        del self._value


class MisdeclaredOwner(Behaviorable):
    __member_visibility__ = {'secret': 'hiden'}

    def __init__(self):
        self.secret = 's'


class SecretOwner(Behaviorable):
    __member_visibility__ = {'secret': Visibility.PRIVATE}

    def __init__(self):
        self.secret = 'hidden'


class SampleBehavior(Behavior):
    def __init__(self):
        self.property_of_the_behavior = ':)'
        self._internal = 'internal'

    def method_of_behavior(self):
        return 'method_of_behavior called :)'


class ShadowBehavior(Behavior):
    def __init__(self, value = 'shadow'):
        self.property_of_the_behavior = value
        self.public_property = 'from behavior'


class CounterBehavior(Behavior):
    def __init__(self, count = 0):
        self.count = count

    def increment(self, step = 1, *, times = 1):
        self.count += step * times
        return self.count

    @property
    def double(self):
        return self.count * 2

    def owner_name(self):
        return type(self.owner).__name__


class DynamicBehavior(Behavior):
    '''Behavior resolving any public name from a backing dict'''

    def __init__(self, **values):
        self.values = dict(values)

    def __getattr__(self, name):
        values = self.__dict__.get('values', {})
        if name in values:
            return values[name]
        raise AttributeError(name)

    def __setattr__(self, name, value):
        if name in ('values', '_owner_ref'):
            object.__setattr__(self, name, value)
        else:
            self.values[name] = value

    def __delattr__(self, name):
        if name in self.values:
            del self.values[name]
        else:
            object.__delattr__(self, name)


class FailingBehavior(Behavior):
    @property
    def broken(self):
        raise RuntimeError('broken property')

    @property
    def missing(self):
        raise AttributeError('missing')


class NestedBehavior(Behavior, Behaviorable):
    '''Behavior that has behaviors of its own'''
