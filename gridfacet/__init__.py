# module to lay out panels of facet in grid

import logging

from .errors import *
from .size import *
from .theme import *
from .labeller import *
from .spec import *
from .layout import *
from .locate import *
from .panel import *
from .sizing import *
from .grobs import *
from .coord import *
from .table import *
from .strip import *
from .axis import *
from .panels import *
from .render import *
from .facet import *

from ._log import get_logger, configure_logging

# no output unless application configures logging
_logger=logging.getLogger('gridfacet')
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__version__='0.1.0'
