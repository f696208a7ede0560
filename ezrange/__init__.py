from ezrange.exceptions import RangeException, InvalidArgument, UnsupportedType, UnsupportedOperation, EmptyRange
from ezrange.steps import DEFAULT_STEP, DEFAULT_STEPS, defaultStep, kindOf
from ezrange.environment import RangeEnvironment
from ezrange.range import EZIRange, EZRange, EZMutableRange
