"""AST nodes produced by the template parser."""

from ._base import *
from ._function import *
from ._ident import *
from ._literal import *
from ._template import *
