"""Lua scripts executed atomically by Redis."""

from __future__ import annotations

# Delete the key only if it still holds the caller's token.
# KEYS[1] - lock key, ARGV[1] - token
# returns: 1 if deleted, otherwise 0
DEL_IF_EQUAL = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
end
return 0
"""

# Reset the key's expiry only if it still holds the caller's token.
# KEYS[1] - lock key, ARGV[1] - token, ARGV[2] - new ttl in milliseconds
# returns: 1 if extended, otherwise 0
PEXPIRE_IF_EQUAL = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('PEXPIRE', KEYS[1], ARGV[2])
end
return 0
"""
