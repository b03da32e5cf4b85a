from .errors import EitherError, NotPresent, NullArgument, require
from .option import Option, Some, NONE, from_nullable
from .either import Either, Left, Right
from .eithers import merge, left_flatten, right_flatten, flatten_left, flatten_right, flatten
from .logger import ConsoleLogger, traced
