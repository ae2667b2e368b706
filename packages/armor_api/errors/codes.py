"""Error code constants.

Codes are unsigned integers carried in the ``Code`` field of serialized error
entries. ``KV_ERROR_CODE`` is reserved for the key-value convention and must
never be reused as an application code. The remaining codes are the defaults
``exception_to_entry`` assigns by exception type; applications define their
own codes alongside these.
"""

# Key-value protocol
KV_ERROR_CODE = 0xFFFFFFFF
KV_SEPARATOR = ":"

# Bad input
INVALID_ARGUMENT = 1001

# Lookup failures
NOT_FOUND = 2000

# Authorization
PERMISSION_DENIED = 4000

# Upstream dependencies
DEPENDENCY_TIMEOUT = 5001
DEPENDENCY_UNAVAILABLE = 5002

# Anything else
UNEXPECTED_EXCEPTION = 9001
