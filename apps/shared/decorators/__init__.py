"""
Shared decorators.

- handle_db_errors: translates database errors raised in DAL methods
"""

from apps.shared.decorators.database import handle_db_errors

__all__ = [
    'handle_db_errors',
]
