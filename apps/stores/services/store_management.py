"""
Store management service.

Creates stores with a unique scan code and resolves scanned codes back to
their store. The scan code is the payload printed in the store's QR code.
"""

import base64
import logging
from io import BytesIO
from typing import Optional
from uuid import UUID

import qrcode
from django.db import transaction, IntegrityError

from apps.stores.models import Store, generate_scan_code

from .exceptions import StoreNotFoundError

logger = logging.getLogger(__name__)


def create_store(
    *,
    name: str,
    address: str = '',
    experience_per_visit: int = 50,
    loyalty_per_visit: int = 50,
    coins_per_visit: int = 10,
    gems_per_visit: int = 0,
    max_retries: int = 5
) -> Store:
    """
    Create a store with a freshly generated scan code.

    Args:
        name: Store name
        address: Optional street address
        experience_per_visit: Experience granted per check-in
        loyalty_per_visit: Loyalty granted per check-in
        coins_per_visit: Coins granted per check-in
        gems_per_visit: Gems granted per check-in
        max_retries: Maximum attempts to generate a unique scan code

    Returns:
        Created Store instance

    Raises:
        RuntimeError: If cannot generate unique scan code after retries
    """
    for attempt in range(max_retries):
        try:
            with transaction.atomic():
                store = Store.objects.create(
                    name=name,
                    address=address,
                    scan_code=generate_scan_code(),
                    experience_per_visit=experience_per_visit,
                    loyalty_per_visit=loyalty_per_visit,
                    coins_per_visit=coins_per_visit,
                    gems_per_visit=gems_per_visit,
                )
                logger.info("Created store %s (%s)", store.id, store.name)
                return store

        except IntegrityError:
            # Scan code collision
            if attempt == max_retries - 1:
                raise RuntimeError(
                    f"Failed to generate unique scan code after {max_retries} attempts"
                )
            continue


def get_store(*, store_id: UUID) -> Store:
    """
    Raises:
        StoreNotFoundError: If store doesn't exist
    """
    try:
        return Store.objects.get(id=store_id)
    except Store.DoesNotExist:
        raise StoreNotFoundError(f"Store with ID {store_id} not found")


def get_store_by_scan_code(*, scan_code: str) -> Optional[Store]:
    """
    Resolve a scanned code to its store.

    Returns:
        The matching Store, or None for a blank or unknown code
    """
    scan_code = (scan_code or '').strip()
    if not scan_code:
        return None
    return Store.objects.filter(scan_code=scan_code).first()


def generate_qr_data_url(*, store: Store) -> str:
    """
    Render the store's scan code as a PNG QR code.

    Returns:
        ``data:image/png;base64,...`` URL ready for an ``<img>`` tag
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(store.scan_code)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = BytesIO()
    img.save(buffer, format='PNG')
    encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
    return f"data:image/png;base64,{encoded}"
