"""
Exceptions raised while resolving members through behaviors

Lookup failures derive from AttributeError so that hasattr() and
getattr() with a default keep their usual meaning on behaviorable objects.
"""

from typing import Optional


class BehaviorError(Exception):
    """Base class for all behaviorable errors"""


class ConfigError(BehaviorError):
    """Configuration file could not be read or parsed"""


class MemberLookupError(BehaviorError, AttributeError):
    """Neither the owner nor its behaviors provide a member"""

    def __init__(self, type_name: str, member: str, message: Optional[str] = None):
        self.type_name = type_name
        self.member = member
        super().__init__(message or self.format_message(type_name, member))

    @staticmethod
    def format_message(type_name: str, member: str) -> str:
        return f'Undefined member {type_name}.{member} in class and its behaviors.'


class MemberNotFoundError(MemberLookupError):
    """Attribute read failed on the owner and on every behavior"""

    @staticmethod
    def format_message(type_name: str, member: str) -> str:
        return f'Undefined attribute {type_name}.{member} in class and its behaviors.'


class MethodMissingError(MemberLookupError):
    """No callable of that name on the owner or on any behavior"""

    @staticmethod
    def format_message(type_name: str, member: str) -> str:
        return f'Undefined method {type_name}.{member}() in class and its behaviors.'


class MemberAccessDeniedError(BehaviorError, AttributeError):
    """Deleting a restricted native attribute that no behavior could remove"""

    def __init__(self, type_name: str, member: str, visibility: str,
                 filename: str, lineno: int):
        self.type_name = type_name
        self.member = member
        self.visibility = visibility
        self.filename = filename
        self.lineno = lineno
        super().__init__(
            f'Cannot delete {visibility} attribute {type_name}.{member}'
            f' in {filename} on line {lineno}.'
        )
