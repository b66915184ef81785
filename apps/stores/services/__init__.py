"""
Stores app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    StoresServiceError,
    StoreNotFoundError,
)

from .store_management import (
    create_store,
    get_store,
    get_store_by_scan_code,
    generate_qr_data_url,
)

from .favorites import (
    list_favorites,
    add_favorite,
    remove_favorite,
    is_favorite,
)

from .announcements import (
    list_active_announcements,
    list_announcements_for_user,
)


__all__ = [
    # Exceptions
    'StoresServiceError',
    'StoreNotFoundError',

    # Store management
    'create_store',
    'get_store',
    'get_store_by_scan_code',
    'generate_qr_data_url',

    # Favorites
    'list_favorites',
    'add_favorite',
    'remove_favorite',
    'is_favorite',

    # Announcements
    'list_active_announcements',
    'list_announcements_for_user',
]
