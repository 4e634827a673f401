from enum import Enum
from typing import Dict, Optional, Union
from .errors import InvalidArgumentError

class Method(Enum):
    BINARY = 1
    MERGE = 2

# Accepted spellings for each ranking strategy
METHOD_MAP = {
    "binary": Method.BINARY, "bsearch": Method.BINARY,
    "merge": Method.MERGE, "scan": Method.MERGE,
}

def get_method(method: Union[str, Method]) -> Method:
    """
    Resolve a method name or Method into a Method

    Raises:
        InvalidArgumentError: If the name is unknown
    """
    if isinstance(method, Method):
        return method
    if not isinstance(method, str) or method.lower() not in METHOD_MAP:
        raise InvalidArgumentError(f"Unknown method: {method}")
    return METHOD_MAP[method.lower()]

def check_arg(s: Dict) -> None:
    """
    Check validity of strategy settings.

    Args:
        s: Dictionary containing strategy settings

    Raises:
        InvalidArgumentError: If any setting is invalid
    """
    if not isinstance(s['method'], Method):
        raise InvalidArgumentError("s['method'] should be a Method")

    for key in ('workers', 'chunks'):
        if isinstance(s[key], bool) or not isinstance(s[key], int) or s[key] < 1:
            raise InvalidArgumentError(f"s['{key}'] should be a positive integer")

    if not isinstance(s['check'], bool):
        raise InvalidArgumentError("s['check'] should be a scalar logical")

    if s['method'] == Method.BINARY and s['chunks'] != 1:
        raise InvalidArgumentError("s['chunks'] only applies to the merge method; use s['workers']")

def sarg(s: Optional[Union[str, Method, Dict]] = None) -> Dict:
    """
    Process the ranking strategy arguments.

    Args:
        s: Strategy specification:
           - None: use defaults (merge scan, one block, full checks)
           - str or Method: ranking method
           - dict: full specification with any of the keys
             'method', 'workers', 'chunks', 'check'

    Returns:
        Dictionary containing processed settings
    """
    # Coerce inputs
    if s is None:
        s = {}
    elif isinstance(s, (str, Method)):
        s = {'method': s}
    elif isinstance(s, dict):
        s = dict(s)
    else:
        raise InvalidArgumentError("s should be a dict, str, Method, or None")

    unknown = set(s) - {'method', 'workers', 'chunks', 'check'}
    if unknown:
        raise InvalidArgumentError(f"unknown setting(s): {sorted(unknown)}")

    s['method'] = get_method(s.get('method', Method.MERGE))
    s.setdefault('workers', 1)
    s.setdefault('chunks', 1)
    s.setdefault('check', True)

    check_arg(s)
    return s
