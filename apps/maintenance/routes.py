"""
Route manifest and path matching for per-page status.

Patterns are plain paths. A segment written as ``[param]`` or ``*`` marks a
dynamic route: the pattern then stands for every concrete path below the
fixed prefix in front of that segment.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


# (pattern, title) for every public route the admin can switch.
PAGE_MANIFEST = (
    ('/', 'Home (Landing Page)'),
    ('/dev-notes', 'Dev Notes (List)'),
    ('/dev-notes/[slug]', 'Dev Notes (Detail)'),
    ('/creators', 'Our Team (List)'),
    ('/creators/[slug]', 'Our Team (Detail)'),
    ('/coming-soon', 'Coming Soon'),
)


def normalize_path(path: str) -> str:
    path = (path or '').strip() or '/'
    if not path.startswith('/'):
        path = '/' + path
    if len(path) > 1:
        path = path.rstrip('/') or '/'
    return path


def _is_dynamic_segment(segment: str) -> bool:
    return segment == '*' or (segment.startswith('[') and segment.endswith(']'))


@dataclass(frozen=True)
class RoutePattern:
    path: str
    status: str

    @property
    def is_dynamic(self) -> bool:
        return any(_is_dynamic_segment(s) for s in normalize_path(self.path).split('/'))

    @property
    def prefix(self) -> str:
        """Fixed part of the pattern in front of the first dynamic segment."""
        fixed = []
        for segment in normalize_path(self.path).split('/'):
            if _is_dynamic_segment(segment):
                break
            fixed.append(segment)
        return '/'.join(fixed) or '/'

    def matches(self, path: str) -> bool:
        path = normalize_path(path)
        if not self.is_dynamic:
            return path == normalize_path(self.path)
        base = self.prefix.rstrip('/') + '/'
        return path.startswith(base) and len(path) > len(base)


def resolve_status(patterns: Iterable[RoutePattern], path: str) -> Optional[str]:
    """Return the status of the pattern governing ``path``, or None.

    Exact patterns win over dynamic ones; among dynamic patterns the longest
    prefix wins.
    """
    patterns = list(patterns)
    path = normalize_path(path)

    for pattern in patterns:
        if not pattern.is_dynamic and pattern.matches(path):
            return pattern.status

    dynamic = [p for p in patterns if p.is_dynamic and p.matches(path)]
    if not dynamic:
        return None
    dynamic.sort(key=lambda p: len(p.prefix), reverse=True)
    return dynamic[0].status
