#---------------------------------------------------------------------------------------------------
__all__ = (
    'Error',
    'InvalidAllocatorResult',
    'LinearizationConflict',
    'PropertyValidationError',
    'SuperMethodNotFound',
)

#---------------------------------------------------------------------------------------------------
# Every error raised by the object model derives from Error and from the builtin category it
# belongs to.
class Error(Exception): ...

#---------------------------------------------------------------------------------------------------
class LinearizationConflict(Error, TypeError):
    def __init__(self, name, candidates):
        self.name = name
        self.candidates = tuple(candidates)

        heads = ', '.join(repr(c) for c in self.candidates)
        super().__init__(
            f'Cannot create a consistent method resolution order (MRO) for class {name!r} with '
            f'bases blocked at: {heads}.')

#---------------------------------------------------------------------------------------------------
class InvalidAllocatorResult(Error, TypeError):
    def __init__(self, cls, result):
        self.cls = cls
        self.result = result
        super().__init__(
            f'__new__ of {cls!r} must return None, a mapping of field names or an instance of the class, not '
            f'{type(result).__name__!r}.')

#---------------------------------------------------------------------------------------------------
class SuperMethodNotFound(Error, AttributeError):
    def __init__(self, method, cls):
        self.method = method
        self.cls = cls
        super().__init__(f"__super__(): method {method!r} not found in ancestors of {cls!r}.")

#---------------------------------------------------------------------------------------------------
# Raised by user supplied property setters by convention. Never raised by the object model itself.
class PropertyValidationError(Error, ValueError): ...
