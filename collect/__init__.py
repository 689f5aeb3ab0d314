r"""
'    _________        .__  .__                 __
'    \_   ___ \  ____ |  | |  |   ____   _____/  |_
'    /    \  \/ /  _ \|  | |  | _/ __ \_/ ___\   __\
'    \     \___(  <_> )  |_|  |_\  ___/\  \___|  |
'     \______  /\____/|____/____/\___  >\___  >__|
'            \/                      \/     \/
"""

# expose the main class
from .collection import Collect

# expose the factory functions
from .factories import (
    from_iterable,
    from_pairs,
    from_generator,
    from_range,
    repeat,
    empty,
    collect,
    C
)

# expose the source variants
from .sources import ContainerSource, GeneratorSource, ProducerSource, as_source

# expose errors and configuration
from .errors import (
    CollectError,
    InvalidInput,
    InvalidKey,
    InvalidRange,
    NonNumericValue,
    ContractViolation
)
from .config import CollectConfig, configure, get_config, reset_config

# define what `import *` does
__all__ = [
    "Collect",
    "from_iterable",
    "from_pairs",
    "from_generator",
    "from_range",
    "repeat",
    "empty",
    "collect",
    "C",
    "ContainerSource",
    "GeneratorSource",
    "ProducerSource",
    "as_source",
    "CollectError",
    "InvalidInput",
    "InvalidKey",
    "InvalidRange",
    "NonNumericValue",
    "ContractViolation",
    "CollectConfig",
    "configure",
    "get_config",
    "reset_config"
]
