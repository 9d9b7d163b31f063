"""
Asset tag generation for assets imported without an explicit tag.
"""
import hashlib
import re
from typing import Optional

# Prefissi fissi per le categorie più comuni
CATEGORY_PREFIXES = {
    'laptop': 'LT',
    'desktop': 'DT',
    'monitor': 'MON',
    'mobile': 'MOB',
    'phone': 'PH',
    'tablet': 'TAB',
    'server': 'SRV',
    'printer': 'PRN',
    'network': 'NET',
}

DEFAULT_PREFIX = 'AST'


def category_prefix(category: Optional[str]) -> str:
    """Prefisso del tag: fisso per le categorie note, altrimenti le prime tre lettere"""
    if not category or not category.strip():
        return DEFAULT_PREFIX
    normalized = category.strip().lower()
    if normalized in CATEGORY_PREFIXES:
        return CATEGORY_PREFIXES[normalized]
    letters = re.sub(r'[^A-Za-z]', '', category)
    return letters[:3].upper() or DEFAULT_PREFIX


def generate_asset_tag(category: Optional[str], serial_number: str) -> str:
    """
    Genera un tag inventariale deterministico.

    Formato: <PREFISSO>-<6 caratteri esadecimali dello SHA-1 del seriale>.
    Lo stesso seriale produce sempre lo stesso tag.

    Args:
        category: Categoria dell'asset (opzionale)
        serial_number: Numero di serie

    Returns:
        Tag, es. "LT-3F2A9C"
    """
    digest = hashlib.sha1(serial_number.encode('utf-8')).hexdigest()[:6].upper()
    return f"{category_prefix(category)}-{digest}"
