#---------------------------------------------------------------------------------------------------
__all__ = ()
