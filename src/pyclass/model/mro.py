#---------------------------------------------------------------------------------------------------
__all__ = (
    'linearize',
    'merge',
)

from .errors import LinearizationConflict

#---------------------------------------------------------------------------------------------------
# C3 merge of a list of sequences. The first head (scanning the sequences in the given order) which
# does not appear in the tail of any other sequence is moved to the result. When sequences remain,
# but every head is blocked by some tail, the precedence constraints are contradictory.
# https://www.python.org/download/releases/2.3/mro/
def merge(name, seqs):
    seqs = [list(s) for s in seqs if s]
    result = []
    while seqs:
        for seq in seqs:
            cand = seq[0]
            if not any(cand in s[1:] for s in seqs):
                break
        else:
            raise LinearizationConflict(name, dict.fromkeys(s[0] for s in seqs))

        result.append(cand)

        # Remove the candidate from all heads and drop the exhausted sequences.
        seqs = [s[1:] if s[0] is cand else s for s in seqs]
        seqs = [s for s in seqs if s]

    return result

#---------------------------------------------------------------------------------------------------
# Compute the linearization for a new class given it's direct bases. Each base is expected to have
# already been linearized and to expose it's own MRO via the __mro__ attribute (with the base itself
# as the first entry). A class without bases is linearized to a sequence of only itself.
def linearize(cls, bases):
    bases = tuple(bases)
    return (cls, *merge(getattr(cls, '__name__', cls), [b.__mro__ for b in bases] + [bases]))
