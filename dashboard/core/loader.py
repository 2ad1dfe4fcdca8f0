"""
Entity list loader - fetch a page's collections concurrently
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List

from .exceptions import APIError, SessionExpired

logger = logging.getLogger(__name__)


def fetch_list(client, path: str) -> List[Dict]:
    """GET a collection endpoint, tolerating a non-list body"""
    data = client.get(path)
    if isinstance(data, dict) and isinstance(data.get('results'), list):
        return data['results']
    if not isinstance(data, list):
        logger.warning(f"Expected a list from {path}, got {type(data).__name__}")
        return []
    return data


def load_collections(client, paths: Dict[str, str]) -> Dict[str, List[Dict]]:
    """Load every collection in `paths` ({name: endpoint}) at once.

    Each collection is committed as soon as its response lands; a failed
    fetch is logged and leaves that collection empty. A rejected session
    is re-raised once every fetch has settled.
    """
    results = {name: [] for name in paths}
    if not paths:
        return results

    expired = None
    with ThreadPoolExecutor(max_workers=len(paths)) as executor:
        futures = {executor.submit(fetch_list, client, path): name
                   for name, path in paths.items()}
        for future in as_completed(futures):
            name = futures[future]
            try:
                results[name] = future.result()
            except SessionExpired as e:
                expired = e
            except APIError as e:
                logger.error(f"Failed to load {name}: {e}")

    if expired is not None:
        raise expired
    return results
