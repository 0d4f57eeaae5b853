from .patch import PatchError, PatchErrorKind

__all__ = ["PatchError", "PatchErrorKind"]
