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

from .model import (
    Class,
    Error,
    Instance,
    InvalidAllocatorResult,
    LinearizationConflict,
    PropertyValidationError,
    SuperMethodNotFound,
    linearize,
    new_class,
    new_singleton,
)
