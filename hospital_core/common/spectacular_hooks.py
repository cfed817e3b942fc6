# hospital_core/common/spectacular_hooks.py
from __future__ import annotations


def preprocess_exclude_legacy_api(endpoints):
    """
    ROOT_URLCONF mounts the same routes twice:
      /api/v1/  (primary)
      /api/     (unversioned alias used by the dashboards)

    Left alone, drf-spectacular documents both and produces duplicate paths
    and operationId collisions (list2, create2...). Keep /api/v1/* only.
    """
    filtered = []
    for path, path_regex, method, callback in endpoints:
        if path.startswith("/api/") and not path.startswith("/api/v1/"):
            continue
        filtered.append((path, path_regex, method, callback))
    return filtered
