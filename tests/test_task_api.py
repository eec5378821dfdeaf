# tests/test_task_api.py

from __future__ import annotations

import copy

import pytest

from kask.errors import DateFormatError, LineBreakError, TaskNotFoundError, TimeFormatError
from kask.tasks.task_api import complete_task, create_task, delete_task, edit_task
from kask.tasks.task_models import DEFAULT_TIME, Task
from kask.tasks.task_store import TaskStore


def test_create_assigns_max_plus_one(sample_tasks: list[Task]) -> None:
    task = create_task(sample_tasks, name="  New  ", date="06/30/24")
    assert task.id == 5
    assert task.name == "New"
    assert task.time == DEFAULT_TIME
    assert task.description == ""
    assert task.done is False
    assert task.tags == []
    # the list itself is untouched; persisting is the caller's job
    assert len(sample_tasks) == 4


def test_create_on_empty_list_starts_at_one() -> None:
    assert create_task([], name="first", date="01/01/24").id == 1


def test_create_with_gap_uses_max_id() -> None:
    tasks = [Task(id=9, name="a", date="01/01/24"), Task(id=3, name="b", date="01/01/24")]
    assert create_task(tasks, name="c", date="01/01/24").id == 10


def test_create_with_all_fields() -> None:
    task = create_task(
        [],
        name="Dentist",
        date="03/04/24",
        time="02:15pm",
        description=" checkup ",
        tags=["health", " appt "],
    )
    assert task.time == "02:15pm"
    assert task.description == "checkup"
    assert task.tags == ["health", "appt"]


def test_create_rejects_bad_date() -> None:
    with pytest.raises(DateFormatError):
        create_task([], name="x", date="2024-01-01")


def test_create_rejects_bad_time() -> None:
    with pytest.raises(TimeFormatError):
        create_task([], name="x", date="01/01/24", time="7pm")


def test_edit_only_supplied_fields(sample_tasks: list[Task]) -> None:
    before = copy.deepcopy(sample_tasks[1])
    edited = edit_task(sample_tasks, 2, done=True)

    assert edited is sample_tasks[1]
    assert edited.done is True
    assert (edited.name, edited.date, edited.time, edited.description, edited.tags) == (
        before.name,
        before.date,
        before.time,
        before.description,
        before.tags,
    )


def test_edit_trims_strings(sample_tasks: list[Task]) -> None:
    edit_task(sample_tasks, 1, name="  Go running ", description=" 5k ", tags=["sport"])
    assert sample_tasks[0].name == "Go running"
    assert sample_tasks[0].description == "5k"
    assert sample_tasks[0].tags == ["sport"]


def test_edit_missing_id_leaves_list_unchanged() -> None:
    tasks = [
        Task(id=1, name="a", date="01/01/24"),
        Task(id=2, name="b", date="01/02/24"),
        Task(id=3, name="c", date="01/03/24"),
    ]
    snapshot = copy.deepcopy(tasks)
    with pytest.raises(TaskNotFoundError) as exc:
        edit_task(tasks, 99, name="zzz", done=True)
    assert exc.value.task_id == 99
    assert tasks == snapshot


def test_edit_bad_date_changes_nothing(sample_tasks: list[Task]) -> None:
    snapshot = copy.deepcopy(sample_tasks)
    with pytest.raises(DateFormatError):
        edit_task(sample_tasks, 1, name="renamed", date="tomorrow")
    assert sample_tasks == snapshot


def test_complete_marks_done(sample_tasks: list[Task]) -> None:
    assert complete_task(sample_tasks, 2) is True
    assert sample_tasks[1].done is True


def test_complete_missing_id_is_noop(sample_tasks: list[Task]) -> None:
    snapshot = copy.deepcopy(sample_tasks)
    assert complete_task(sample_tasks, 42) is False
    assert sample_tasks == snapshot


def test_delete_removes_matching(sample_tasks: list[Task]) -> None:
    remaining = delete_task(sample_tasks, 2)
    assert [t.id for t in remaining] == [1, 3, 4]


def test_delete_missing_id_is_noop(sample_tasks: list[Task]) -> None:
    assert delete_task(sample_tasks, 42) == sample_tasks


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "Shop\nnow"},
        {"description": "eggs\nmilk"},
        {"description": "eggs\r\nmilk"},
        {"tags": ["ok", "two\nlines"]},
    ],
)
def test_create_rejects_line_breaks(fields: dict) -> None:
    kwargs = {"name": "Shop", "date": "01/01/24", **fields}
    with pytest.raises(LineBreakError):
        create_task([], **kwargs)


def test_edit_rejects_line_breaks_and_changes_nothing(sample_tasks: list[Task]) -> None:
    snapshot = copy.deepcopy(sample_tasks)
    with pytest.raises(LineBreakError):
        edit_task(sample_tasks, 1, name="renamed", description="eggs\nmilk")
    assert sample_tasks == snapshot


def test_created_task_survives_store_round_trip(tmp_path) -> None:
    store = TaskStore(tmp_path / "todo.csv")
    task = create_task(
        store.load(),
        name="Shop\n",
        date="01/01/24",
        time="9:00am",
        description='eggs, milk, "fresh" bread',
        tags=["errand"],
    )
    store.append(task)
    assert store.load() == [task]
    assert task.name == "Shop"
