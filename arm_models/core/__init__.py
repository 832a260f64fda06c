from .base import ArmModel, DefaultList, ListResult, tagged_union
from .enums import OpenEnum

__all__ = ["ArmModel", "DefaultList", "ListResult", "OpenEnum", "tagged_union"]
