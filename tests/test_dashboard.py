from datetime import datetime
from uuid import uuid4

import httpx
import pytest

from taskflow.backend.schemas.task import TaskRead
from taskflow.client.api import ApiError, TaskflowClient
from taskflow.client.dashboard import Dashboard, ModalMode, TaskDraft, ViewState

OWNER = uuid4()
CREATED = datetime(2025, 1, 1)


def make_task(title, **fields):
    fields.setdefault("created_at", CREATED)
    fields.setdefault("updated_at", CREATED)
    return TaskRead(id=uuid4(), owner=OWNER, title=title, **fields)


class FakeApi:
    def __init__(self, tasks=None):
        self.tasks = list(tasks or [])
        self.fail = False
        self.calls = []

    def _maybe_fail(self, status=500, message="Server error"):
        if self.fail:
            raise ApiError(status, message)

    def list_tasks(self):
        self.calls.append("list")
        self._maybe_fail()
        return list(self.tasks)

    def create_task(self, payload):
        self.calls.append(("create", payload))
        self._maybe_fail(422, "Task title is required")
        return make_task(payload.title, priority=payload.priority.value,
                         due_date=payload.due_date, completed=payload.completed)

    def update_task(self, task_id, changes):
        self.calls.append(("update", task_id, changes))
        self._maybe_fail()
        current = next(t for t in self.tasks if t.id == task_id)
        updated = current.model_copy(update=changes.model_dump(exclude_unset=True))
        self.tasks = [updated if t.id == task_id else t for t in self.tasks]
        return updated

    def delete_task(self, task_id):
        self.calls.append(("delete", task_id))
        self._maybe_fail()
        self.tasks = [t for t in self.tasks if t.id != task_id]


@pytest.fixture
def tasks():
    return [
        make_task("Buy groceries", priority="Low"),
        make_task("Groceries budget", description="monthly", priority="High", completed=True),
        make_task("Pay rent", priority="High", due_date=datetime(2025, 1, 5)),
        make_task("Call mom", description="about GROCERIES list"),
    ]


@pytest.fixture
def dashboard(tasks):
    board = Dashboard(FakeApi(tasks))
    board.refresh()
    return board


def test_view_states(tasks):
    board = Dashboard(FakeApi(tasks))
    board.loading = True
    assert board.view_state is ViewState.LOADING

    board.loading = False
    board.refresh()
    assert board.view_state is ViewState.READY

    board.set_query("nothing matches this")
    assert board.view_state is ViewState.EMPTY


def test_fetch_failure_is_its_own_state():
    api = FakeApi([make_task("kept")])
    board = Dashboard(api)
    board.refresh()

    api.fail = True
    board.refresh()

    assert board.view_state is ViewState.FAILED
    assert [t.title for t in board.tasks] == ["kept"]
    assert board.notices[-1].message == "Failed to load tasks"
    assert not board.loading


def test_empty_list_is_empty_not_failed():
    board = Dashboard(FakeApi([]))
    board.refresh()
    assert board.view_state is ViewState.EMPTY


def test_visible_tasks_sorted_like_the_server(dashboard):
    assert [t.title for t in dashboard.visible_tasks] == [
        "Pay rent",
        "Groceries budget",
        "Call mom",
        "Buy groceries",
    ]


def test_search_and_pending_filter(dashboard):
    dashboard.set_query("groceries")
    dashboard.set_filter("pending")

    assert [t.title for t in dashboard.visible_tasks] == ["Call mom", "Buy groceries"]

    dashboard.set_filter("completed")
    assert [t.title for t in dashboard.visible_tasks] == ["Groceries budget"]


def test_filters_never_reach_the_api(dashboard):
    dashboard.set_query("rent")
    dashboard.set_filter("completed")
    _ = dashboard.visible_tasks
    assert dashboard.api.calls == ["list"]


def test_submit_requires_title_without_calling_api(dashboard):
    dashboard.open_create_modal()
    dashboard.draft.title = "   "

    assert dashboard.submit_modal() is False
    assert dashboard.show_modal
    assert dashboard.notices[-1].message == "Title is required"
    assert dashboard.api.calls == ["list"]


def test_create_prepends_and_closes_modal(dashboard):
    dashboard.open_create_modal()
    dashboard.draft.title = "New one"

    assert dashboard.submit_modal() is True
    assert dashboard.tasks[0].title == "New one"
    assert not dashboard.show_modal
    assert dashboard.notices[-1].message == "Task created"


def test_edit_modal_updates_in_place(dashboard, tasks):
    target = tasks[0]
    dashboard.open_edit_modal(target)
    assert dashboard.modal_mode is ModalMode.EDIT
    assert dashboard.draft == TaskDraft.from_task(target)

    dashboard.draft.title = "Buy groceries today"
    assert dashboard.submit_modal() is True
    titles = [t.title for t in dashboard.tasks]
    assert "Buy groceries today" in titles and "Buy groceries" not in titles


def test_failed_mutation_keeps_previous_state(dashboard, tasks):
    before = list(dashboard.tasks)
    dashboard.api.fail = True

    dashboard.open_edit_modal(tasks[0])
    dashboard.draft.title = "changed"
    assert dashboard.submit_modal() is False
    assert dashboard.show_modal

    assert dashboard.toggle_complete(tasks[0]) is False
    dashboard.confirm_delete(tasks[0])
    assert dashboard.handle_delete() is False
    assert dashboard.show_delete_confirm

    assert dashboard.tasks == before
    assert [n.level for n in dashboard.notices[-3:]] == ["error"] * 3


def test_toggle_complete_sends_only_completed(dashboard, tasks):
    assert dashboard.toggle_complete(tasks[0]) is True

    _, task_id, changes = dashboard.api.calls[-1]
    assert task_id == tasks[0].id
    assert changes.model_dump(exclude_unset=True) == {"completed": True}
    assert next(t for t in dashboard.tasks if t.id == task_id).completed is True
    assert dashboard.notices[-1].message == "Marked completed"


def test_delete_after_confirmation(dashboard, tasks):
    dashboard.confirm_delete(tasks[2])
    assert dashboard.handle_delete() is True

    assert tasks[2].id not in {t.id for t in dashboard.tasks}
    assert not dashboard.show_delete_confirm


def test_draft_from_task_with_unknown_priority_falls_back_to_medium():
    draft = TaskDraft.from_task(make_task("legacy", priority="Urgent"))
    assert draft.priority.value == "Medium"


def test_unchanged_edit_keeps_missing_description_empty():
    task = make_task("no description")
    assert task.description is None

    changes = TaskDraft.from_task(task).to_update()
    assert changes.description is None
    assert TaskDraft().to_create().description is None


def test_unreadable_response_is_a_failed_load():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>proxy</html>"))
    api = TaskflowClient("http://testserver", transport=transport)

    board = Dashboard(api)
    board.refresh()

    assert board.view_state is ViewState.FAILED
    assert board.notices[-1].message == "Failed to load tasks"
