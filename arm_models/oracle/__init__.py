from . import enums
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .operations import OracleDatabaseClient

__all__ = ["OracleDatabaseClient", "enums", *_models_all]
