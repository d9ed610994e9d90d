"""gconf-cleaner - find and remove orphaned configuration entries.

Walks a hierarchical configuration store, lists every entry that is not
covered by a schema, and lets an administrator review and unset them.
"""

__version__ = "0.3.0"
__app_name__ = "gconf-cleaner"
