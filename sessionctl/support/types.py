"""
Common types for type checking
"""

import types
import typing as ty

ExecInfo = ty.Union[
    tuple[
        ty.Type[BaseException], BaseException, ty.Optional[types.TracebackType]
    ],
    tuple[None, None, None],
]

# Values that may be kept in the configuration store
StoreValue = ty.Union[str, bool, None]
