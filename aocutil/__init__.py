from . import cli
from . import exceptions
from . import get
from . import models
from . import transforms
from . import utils
from .exceptions import AocutilError
from .exceptions import ParseError
from .exceptions import RemoteStatusError
from .get import get_data
from .models import default_input
from .models import Input
from .version import __version__

__all__ = [
    "AocutilError",
    "Input",
    "ParseError",
    "RemoteStatusError",
    "__version__",
    "cli",
    "default_input",
    "exceptions",
    "get",
    "get_data",
    "models",
    "transforms",
    "utils",
]
