from .functional import identity, pipe, purry
from .convert_utils import ConvertUtils

__all__ = ["identity", "pipe", "purry", "ConvertUtils"]
