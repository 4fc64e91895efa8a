"""
Record identifiers.

Three styles coexist and each collection keeps the one its stored ids already use:
- timestamp_id: users
- prefixed_id("course"): generated courses and their UserCourse entries
- uuid_like: learning paths, skill assessments, code snippets, shared code

None of them check for collisions.
"""

import random
import string
import time

_BASE36 = string.digits + string.ascii_lowercase
_UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"


def _now_ms() -> int:
    return int(time.time() * 1000)


def timestamp_id() -> str:
    return str(_now_ms())


def prefixed_id(prefix: str) -> str:
    suffix = "".join(random.choice(_BASE36) for _ in range(9))
    return f"{prefix}_{_now_ms()}_{suffix}"


def uuid_like() -> str:
    """UUID-shaped random hex string; `y` is one of 8, 9, a, b."""
    out = []
    for c in _UUID_TEMPLATE:
        if c == "x":
            out.append(format(random.getrandbits(4), "x"))
        elif c == "y":
            out.append(format(random.getrandbits(2) | 0x8, "x"))
        else:
            out.append(c)
    return "".join(out)
