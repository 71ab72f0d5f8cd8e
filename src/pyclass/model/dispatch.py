#---------------------------------------------------------------------------------------------------
__all__ = ()

from . import members, meta
from .errors import SuperMethodNotFound

#---------------------------------------------------------------------------------------------------
# Invoke the next implementation of a method following the handle's super context in the MRO of
# the instance's class. The context is the class which declared the method currently executing (or
# the instance's own class for a handle returned by construction). The found implementation is
# called with a fresh handle whose context is the declaring ancestor, so that a super call made from
# within it resumes the scan after that ancestor. The caller's handle is never modified.
def call(handle, name, *pargs, **kargs):
    cls = members.state_get(handle).cls
    data = meta.data_get(cls)

    ctx = members.context_get(handle)
    if ctx is None:
        ctx = cls

    start = data.mro.index(ctx) + 1
    for owner, odata in data.ancestry(start):
        m = odata.table.get(name)
        if m is not None and m.is_method:
            return m.value(members.bind(handle, owner), *pargs, **kargs)

    raise SuperMethodNotFound(name, ctx)
