from types import SimpleNamespace

from app.utils.filters import filter_projects

PROJECTS = [
    {"title": "Lake House", "category_id": 1, "status": "completed"},
    {"title": "Hill house", "category_id": 1, "status": "ongoing"},
    {"title": "Office Tower", "category_id": 2, "status": "ongoing"},
    {"title": "Pavilion", "category_id": None, "status": "upcoming"},
]


def test_empty_predicates_match_everything():
    assert filter_projects(PROJECTS) == PROJECTS
    assert filter_projects(PROJECTS, text="", category_id="", status="") == PROJECTS
    assert filter_projects(PROJECTS, text="   ") == PROJECTS


def test_text_is_case_insensitive_substring():
    assert [p["title"] for p in filter_projects(PROJECTS, text="HOUSE")] == ["Lake House", "Hill house"]


def test_predicates_are_combined_with_and():
    result = filter_projects(PROJECTS, text="house", category_id=1, status="ongoing")
    assert [p["title"] for p in result] == ["Hill house"]
    assert filter_projects(PROJECTS, text="tower", category_id=1) == []


def test_category_id_compares_as_string():
    assert [p["title"] for p in filter_projects(PROJECTS, category_id="2")] == ["Office Tower"]


def test_works_on_objects():
    rows = [SimpleNamespace(**p) for p in PROJECTS]
    result = filter_projects(rows, status="upcoming")
    assert [row.title for row in result] == ["Pavilion"]
