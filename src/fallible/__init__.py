import contextlib

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from .config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV
    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

import logging

from .config import LOGGER_NAME
from .convertible import ConvertibleError, ErrorConvertible
from .exceptions import (
    ErrorTypeMismatchError,
    FallibleError,
    NotASemigroupError,
    UnwrapFailedError,
)
from .interop import from_returns, to_returns
from .result import (
    Failure,
    Result,
    Success,
    catching,
    failure,
    from_optional,
    from_throwing,
    success,
)
from .semigroup import Semigroup, combine, register_semigroup

# Stay silent unless the application configures logging.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__: list[str] = [
    "ConvertibleError",
    "ErrorConvertible",
    "ErrorTypeMismatchError",
    "Failure",
    "FallibleError",
    "NotASemigroupError",
    "Result",
    "Semigroup",
    "Success",
    "UnwrapFailedError",
    "catching",
    "combine",
    "failure",
    "from_optional",
    "from_returns",
    "from_throwing",
    "register_semigroup",
    "success",
    "to_returns",
]
