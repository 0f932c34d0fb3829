"""
External system integrations (TMDb).

Vendor clients live under this namespace so they stay decoupled from whatever
application layer consumes them.
"""
