from .artifacts import Port, Module, GeometryResult, MergeStats
from .operators import Operator, OperatorResult
from .errors import *
from .enums import *
from .provenance import *
