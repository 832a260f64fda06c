from . import enums
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all
from .operations import CosmosDBManagementClient

__all__ = ["CosmosDBManagementClient", "enums", *_models_all]
