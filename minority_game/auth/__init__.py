from .utils import PassCodes

__all__ = ["PassCodes"]
