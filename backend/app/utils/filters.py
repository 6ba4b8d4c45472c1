"""In-memory narrowing of an already fetched project list (search box + category + status selects)."""

from typing import Any, Iterable, List, Optional


def _field(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def filter_projects(
    projects: Iterable[Any],
    text: Optional[str] = None,
    category_id: Any = None,
    status: Optional[str] = None,
) -> List[Any]:
    """Keep projects matching every given predicate. Empty predicates match everything."""
    needle = (text or "").strip().lower()
    result = []
    for project in projects:
        if needle and needle not in str(_field(project, "title") or "").lower():
            continue
        if category_id not in (None, "") and str(_field(project, "category_id")) != str(category_id):
            continue
        if status and _field(project, "status") != status:
            continue
        result.append(project)
    return result
