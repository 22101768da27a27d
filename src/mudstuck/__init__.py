"""
Mudstuck text adventure engine

Entity descriptions are templates that query live world state, so a door
can read as open or closed depending on how the world currently looks.
"""

__version__ = "0.1.0"


from ._error import *
from ._value import *
from ._world import *
from . import ast
from ._scanner import *
from ._parse import *
from ._builtin import *
from ._eval import *
from ._command import *
from ._player import *
from ._example import *
