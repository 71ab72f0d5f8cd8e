#---------------------------------------------------------------------------------------------------
__all__ = (
    'Class',
    'Error',
    'Instance',
    'InvalidAllocatorResult',
    'LinearizationConflict',
    'PropertyValidationError',
    'SuperMethodNotFound',
    'linearize',
    'new_class',
    'new_singleton',
)

from .errors import (
    Error,
    InvalidAllocatorResult,
    LinearizationConflict,
    PropertyValidationError,
    SuperMethodNotFound,
)
from .factory import Class, new_class, new_singleton
from .mro import linearize
from .proxy import Instance
