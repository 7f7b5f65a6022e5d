"""Tests for the Google Tasks MCP server."""

import json

import pytest
from mcp.types import ListResourcesRequest

from gtasks_mcp import (
    BatchDeleteTasksInput,
    ClearTasksInput,
    ConfigError,
    # Input models
    CreateTaskInput,
    DeleteTaskInput,
    ListTaskListsInput,
    ListTasksInput,
    MoveTaskInput,
    NotFoundError,
    ReorganizeTasksInput,
    # Enums
    ResponseFormat,
    SearchTasksInput,
    # Internal models
    TaskListModel,
    TaskModel,
    TaskStatus,
    UpdateTaskInput,
    # Parser helpers
    _parse_task,
    _parse_tasks,
    gtasks_clear,
    gtasks_create,
    gtasks_delete,
    gtasks_list,
    gtasks_list_task_lists,
    gtasks_move_task,
    # Tool functions
    gtasks_search,
    gtasks_update,
    mcp,
    read_task_resource,
    set_client,
)
from gtasks_mcp import (
    _format_task_concise as format_task_concise,
)
from gtasks_mcp import (
    _format_task_markdown as format_task_markdown,
)
from gtasks_mcp import (
    _format_tasks_concise as format_tasks_concise,
)
from gtasks_mcp import (
    _format_tasks_markdown as format_tasks_markdown,
)
from gtasks_mcp.config import Settings
from gtasks_mcp.operations.listing import list_task_resources
from gtasks_mcp.utils.formatters import _format_task_detail, _format_task_lists
from gtasks_mcp.utils.parsers import _task_body


def _text(result) -> str:
    return result.content[0].text


# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def sample_task():
    """A single task resource as returned by the API."""
    return {
        "kind": "tasks#task",
        "id": "abc123",
        "etag": '"LTEyMzQ1"',
        "title": "Buy milk",
        "updated": "2025-01-10T09:00:00.000Z",
        "selfLink": "https://www.googleapis.com/tasks/v1/lists/inbox/tasks/abc123",
        "position": "00000000000000000001",
        "notes": "Oat, not dairy",
        "status": "needsAction",
        "due": "2025-01-31T00:00:00.000Z",
        "links": [{"type": "email", "description": "Receipt", "link": "https://mail.example.com/1"}],
    }


@pytest.fixture
def sample_task_models():
    """Task models annotated with their list, as produced by enumeration."""
    return [
        TaskModel(
            id="abc",
            title="Buy milk",
            status="needsAction",
            due="2025-01-31T00:00:00.000Z",
            task_list_id="groceries",
            task_list_title="Groceries",
        ),
        TaskModel(id="def", title="Oat milk", status="completed"),
    ]


# ============================================================================
# Model Tests
# ============================================================================


class TestInputModels:
    """Tests for Pydantic input models."""

    def test_create_task_input_defaults(self):
        """Test CreateTaskInput with only the title."""
        input_model = CreateTaskInput(title="Buy milk")
        assert input_model.task_list_id == "@default"
        assert input_model.notes is None
        assert input_model.due is None
        assert input_model.status is None

    def test_create_task_input_strips_whitespace(self):
        """Test that whitespace is stripped from string fields."""
        input_model = CreateTaskInput(title="  Buy milk  ", task_list_id=" inbox ")
        assert input_model.title == "Buy milk"
        assert input_model.task_list_id == "inbox"

    def test_create_task_input_empty_title_fails(self):
        """Test that an empty title raises a validation error."""
        with pytest.raises(ValueError, match="Task title is required"):
            CreateTaskInput(title="")
        with pytest.raises(ValueError):
            CreateTaskInput(title="   ")

    def test_update_task_input_status_enum(self):
        """Test UpdateTaskInput accepts the API status strings."""
        input_model = UpdateTaskInput(task_id="abc", status="completed")
        assert input_model.status == TaskStatus.COMPLETED
        with pytest.raises(ValueError):
            UpdateTaskInput(task_id="abc", status="done")

    def test_move_task_input_requires_all_ids(self):
        """Test MoveTaskInput rejects a missing task list ID."""
        with pytest.raises(ValueError):
            MoveTaskInput(source_task_list_id="a", task_id="t1")
        with pytest.raises(ValueError):
            MoveTaskInput(source_task_list_id="a", target_task_list_id="", task_id="t1")

    def test_reorganize_input_rejects_empty_mappings(self):
        """Test ReorganizeTasksInput requires at least one prefix mapping."""
        with pytest.raises(ValueError, match="Prefix mappings are required"):
            ReorganizeTasksInput(prefix_mappings={})
        assert ReorganizeTasksInput(prefix_mappings={"ADMIN": "Admin"}).dry_run is False

    def test_batch_input_rejects_empty_array(self):
        """Test batch inputs reject an empty element array."""
        with pytest.raises(ValueError, match="tasks array is required"):
            BatchDeleteTasksInput(tasks=[])

    def test_batch_input_allows_incomplete_elements(self):
        """Incomplete elements are accepted here and reported per element later."""
        input_model = BatchDeleteTasksInput(tasks=[{"task_list_id": "inbox"}])
        assert input_model.tasks[0].task_id is None


class TestEnums:
    """Tests for enum definitions."""

    def test_response_format_values(self):
        """Test ResponseFormat enum values."""
        assert ResponseFormat.CONCISE.value == "concise"
        assert ResponseFormat.MARKDOWN.value == "markdown"
        assert ResponseFormat.JSON.value == "json"

    def test_task_status_values(self):
        """Test TaskStatus enum values match the API."""
        assert TaskStatus.NEEDS_ACTION.value == "needsAction"
        assert TaskStatus.COMPLETED.value == "completed"


class TestParsers:
    """Tests for API payload parsing."""

    def test_parse_task_keeps_api_fields(self, sample_task):
        """Test that bookkeeping fields survive parsing."""
        task = _parse_task(sample_task)
        assert task.id == "abc123"
        assert task.self_link.endswith("/abc123")
        assert task.position == "00000000000000000001"
        assert task.links[0]["link"] == "https://mail.example.com/1"
        assert task.task_list_id is None

    def test_parse_task_round_trips_alias(self, sample_task):
        """Test that the selfLink alias is used when dumping."""
        dumped = _parse_task(sample_task).model_dump(by_alias=True, exclude_none=True)
        assert dumped["selfLink"] == sample_task["selfLink"]

    def test_parse_task_allows_unknown_fields(self):
        """Test that fields the model does not know are kept."""
        task = _parse_task({"id": "x", "webViewLink": "https://tasks.google.com/x"})
        assert task.model_extra["webViewLink"] == "https://tasks.google.com/x"

    def test_parse_tasks_without_items(self):
        """An empty list comes back without an items key."""
        assert _parse_tasks({"kind": "tasks#tasks"}) == []
        assert len(_parse_tasks({"items": [{"id": "a"}, {"id": "b"}]})) == 2

    def test_task_body_defaults(self):
        """Test insert bodies default notes and status and omit an absent due."""
        assert _task_body("Buy milk") == {"title": "Buy milk", "notes": "", "status": "needsAction"}

    def test_task_body_with_due(self):
        body = _task_body("Pay rent", "Monthly", "2025-02-01T00:00:00Z", "completed")
        assert body == {
            "title": "Pay rent",
            "notes": "Monthly",
            "status": "completed",
            "due": "2025-02-01T00:00:00Z",
        }
        assert "parent" not in body


# ============================================================================
# Formatter Tests
# ============================================================================


class TestFormatTaskConcise:
    """Tests for concise formatting."""

    def test_format_task_concise_with_metadata(self, sample_task_models):
        """Test concise formatting shows list and due date."""
        result = format_task_concise(sample_task_models[0])
        assert result == "Buy milk (list:Groceries, due:2025-01-31) id:abc"

    def test_format_task_concise_completed(self, sample_task_models):
        """Test concise formatting marks completed tasks."""
        assert format_task_concise(sample_task_models[1]) == "Oat milk (done) id:def"

    def test_format_task_concise_untitled(self):
        assert format_task_concise(TaskModel(id="x")) == "Untitled id:x"

    def test_format_tasks_concise_empty(self):
        """Test concise formatting of an empty list."""
        assert format_tasks_concise([]) == "0 tasks"

    def test_format_tasks_concise_with_title(self, sample_task_models):
        """Test concise formatting with a header title."""
        result = format_tasks_concise(sample_task_models, "Search 'milk'")
        assert result.splitlines()[0] == "2 task(s) | Search 'milk'"
        assert len(result.splitlines()) == 3


class TestFormatTaskMarkdown:
    """Tests for markdown formatting."""

    def test_format_basic_task(self, sample_task_models):
        """Test markdown formatting of an open task."""
        result = format_task_markdown(sample_task_models[0])
        assert "### [ ] Buy milk" in result
        assert "**ID**: abc" in result
        assert "**List**: Groceries [groceries]" in result
        assert "**Due**: 2025-01-31T00:00:00.000Z" in result

    def test_format_completed_task(self, sample_task_models):
        """Test that completed tasks are ticked."""
        result = format_task_markdown(sample_task_models[1])
        assert "### [x] Oat milk" in result
        assert "**Due**: Not set" in result
        assert "**List**" not in result

    def test_format_task_with_notes_and_parent(self):
        result = format_task_markdown(TaskModel(id="c", title="Child", notes="Details", parent="p"))
        assert "**Parent**: p" in result
        assert "**Notes:** Details" in result

    def test_format_empty_list(self):
        """Test formatting an empty list."""
        assert format_tasks_markdown([]) == "# Tasks\n\nNo tasks found."

    def test_format_multiple_tasks(self, sample_task_models):
        """Test formatting several tasks with a custom title."""
        result = format_tasks_markdown(sample_task_models, "All Tasks")
        assert result.startswith("# All Tasks")
        assert "*2 task(s)*" in result


class TestFormatTaskDetail:
    """Tests for the task resource text."""

    def test_format_task_detail(self, sample_task):
        """Test every detail line is present."""
        result = _format_task_detail(_parse_task(sample_task))
        assert "Title: Buy milk" in result
        assert "Status: needsAction" in result
        assert "Due: 2025-01-31T00:00:00.000Z" in result
        assert "Notes: Oat, not dairy" in result
        assert "Parent: None" in result
        assert "Links: https://mail.example.com/1" in result
        assert "Kind: tasks#task" in result

    def test_format_task_detail_placeholders(self):
        """Test placeholders for missing fields."""
        result = _format_task_detail(TaskModel(id="x"))
        assert "Title: No title" in result
        assert "Due: Not set" in result
        assert "Notes: No notes" in result
        assert "Hidden: Unknown" in result
        assert "Links: None" in result

    def test_format_task_lists(self):
        result = _format_task_lists([TaskListModel(id="inbox", title="Inbox", updated="2025-01-01T00:00:00Z")])
        assert result == "Found 1 task lists:\nList: Inbox - ID: inbox - Updated: 2025-01-01T00:00:00Z"


# ============================================================================
# Config Tests
# ============================================================================


class TestSettings:
    """Tests for environment-driven settings."""

    def test_from_env_defaults(self, monkeypatch):
        """Test defaults when no variables are set."""
        for name in ("GTASKS_ACCESS_TOKEN", "GTASKS_API_BASE_URL", "GTASKS_TIMEOUT", "GTASKS_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()
        assert settings.api_base_url == "https://tasks.googleapis.com/tasks/v1"
        assert settings.timeout == 30.0
        assert settings.log_level == "WARNING"
        assert settings.access_token is None

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("GTASKS_ACCESS_TOKEN", "tok")
        monkeypatch.setenv("GTASKS_TIMEOUT", "5")
        monkeypatch.setenv("GTASKS_LOG_LEVEL", "debug")
        settings = Settings.from_env()
        assert settings.access_token == "tok"
        assert settings.timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_token_from_environment_wins(self, tmp_path):
        """Test the explicit token is used before the credentials file."""
        path = tmp_path / "creds.json"
        path.write_text(json.dumps({"access_token": "from-file"}))
        assert Settings(access_token="from-env", credentials_path=path).resolve_access_token() == "from-env"

    def test_token_from_credentials_file(self, tmp_path):
        path = tmp_path / "creds.json"
        path.write_text(json.dumps({"access_token": "from-file", "refresh_token": "r"}))
        assert Settings(credentials_path=path).resolve_access_token() == "from-file"

    def test_missing_credentials(self, tmp_path):
        """Test a missing credentials file is a configuration error."""
        with pytest.raises(ConfigError, match="Credentials not found"):
            Settings(credentials_path=tmp_path / "missing.json").resolve_access_token()

    def test_credentials_without_token(self, tmp_path):
        path = tmp_path / "creds.json"
        path.write_text(json.dumps({"refresh_token": "r"}))
        with pytest.raises(ConfigError, match="has no access token"):
            Settings(credentials_path=path).resolve_access_token()

    def test_unreadable_credentials(self, tmp_path):
        path = tmp_path / "creds.json"
        path.write_text("not json")
        with pytest.raises(ConfigError, match="Could not read credentials file"):
            Settings(credentials_path=path).resolve_access_token()


# ============================================================================
# Tool Tests
# ============================================================================


class TestGTasksSearch:
    """Tests for the gtasks_search tool."""

    @pytest.mark.asyncio
    async def test_search_matches_title_ignoring_case(self, populated_client):
        """Test searching by title."""
        result = await gtasks_search(SearchTasksInput(query="MILK"))
        assert result.isError is False
        assert "Buy milk" in _text(result)
        assert "Pay rent" not in _text(result)
        assert "# Search 'MILK'" in _text(result)

    @pytest.mark.asyncio
    async def test_search_matches_notes(self, populated_client):
        """Test searching by notes."""
        result = await gtasks_search(SearchTasksInput(query="monthly", response_format=ResponseFormat.JSON))
        data = json.loads(_text(result))
        assert data["count"] == 1
        assert data["tasks"][0]["title"] == "Pay rent"

    @pytest.mark.asyncio
    async def test_search_no_matches(self, populated_client):
        result = await gtasks_search(SearchTasksInput(query="zebra", response_format=ResponseFormat.CONCISE))
        assert _text(result) == "0 tasks"


class TestGTasksList:
    """Tests for the gtasks_list tool."""

    @pytest.mark.asyncio
    async def test_list_annotates_each_task_with_its_list(self, populated_client):
        """Test tasks from every list are returned with their list."""
        result = await gtasks_list(ListTasksInput(response_format=ResponseFormat.JSON))
        data = json.loads(_text(result))
        assert data["count"] == 4
        assert [t["id"] for t in data["tasks"]] == ["t1", "t2", "t3", "a1"]
        assert data["tasks"][0]["task_list_id"] == "inbox"
        assert data["tasks"][3]["task_list_title"] == "Admin Tasks"

    @pytest.mark.asyncio
    async def test_list_concise(self, populated_client):
        """Test listing tasks in concise format."""
        result = await gtasks_list(ListTasksInput(response_format=ResponseFormat.CONCISE))
        assert _text(result).startswith("4 task(s) | All Tasks")
        assert "list:Inbox" in _text(result)

    @pytest.mark.asyncio
    async def test_list_skips_failing_list(self, populated_client):
        """A list whose tasks cannot be fetched is skipped, not fatal."""
        populated_client.fail("list_tasks", "inbox")
        result = await gtasks_list(ListTasksInput(response_format=ResponseFormat.JSON))
        assert result.isError is False
        assert json.loads(_text(result))["count"] == 1

    @pytest.mark.asyncio
    async def test_list_fails_when_lists_unavailable(self, populated_client):
        """Test the error envelope when the task lists cannot be fetched."""
        populated_client.fail("list_task_lists")
        result = await gtasks_list(ListTasksInput())
        assert result.isError is True
        assert _text(result) == "Error listing tasks: 500 Backend Error"

    @pytest.mark.asyncio
    async def test_list_without_credentials(self, monkeypatch, tmp_path):
        """Test that missing credentials surface as an error result."""
        set_client(None)
        monkeypatch.delenv("GTASKS_ACCESS_TOKEN", raising=False)
        monkeypatch.setenv("GTASKS_CREDENTIALS_PATH", str(tmp_path / "missing.json"))
        try:
            result = await gtasks_list(ListTasksInput())
        finally:
            set_client(None)
        assert result.isError is True
        assert "Credentials not found" in _text(result)


class TestGTasksCreate:
    """Tests for the gtasks_create tool."""

    @pytest.mark.asyncio
    async def test_create_task(self, populated_client):
        """Test creating a task with defaults."""
        result = await gtasks_create(CreateTaskInput(task_list_id="inbox", title="Call bank"))
        assert _text(result) == "Task created: Call bank (ID: new-1)"
        assert populated_client.inserted[0]["body"] == {"title": "Call bank", "notes": "", "status": "needsAction"}
        assert populated_client.inserted[0]["parent"] is None

    @pytest.mark.asyncio
    async def test_create_task_with_all_fields(self, populated_client):
        """Test creating a task with notes, due date and status."""
        await gtasks_create(
            CreateTaskInput(
                task_list_id="inbox",
                title="Pay rent",
                notes="Monthly",
                due="2025-02-01T00:00:00Z",
                status=TaskStatus.COMPLETED,
            )
        )
        assert populated_client.inserted[0]["body"]["due"] == "2025-02-01T00:00:00Z"
        assert populated_client.inserted[0]["body"]["status"] == "completed"

    @pytest.mark.asyncio
    async def test_create_task_remote_error(self, populated_client):
        """Test the error envelope when the list does not exist."""
        result = await gtasks_create(CreateTaskInput(title="Orphan"))
        assert result.isError is True
        assert _text(result) == "Error creating task: 404 Task list not found."


class TestGTasksUpdate:
    """Tests for the gtasks_update tool."""

    @pytest.mark.asyncio
    async def test_update_sends_only_supplied_fields(self, populated_client):
        """Test that a status change leaves the other fields alone."""
        result = await gtasks_update(
            UpdateTaskInput(task_list_id="inbox", task_id="t2", status=TaskStatus.COMPLETED)
        )
        assert _text(result) == "Task updated: Buy milk"
        assert populated_client.patched[0]["body"] == {"status": "completed", "id": "t2"}
        assert populated_client.find("inbox", "t2")["status"] == "completed"

    @pytest.mark.asyncio
    async def test_update_missing_task(self, populated_client):
        result = await gtasks_update(UpdateTaskInput(task_list_id="inbox", task_id="nope", title="X"))
        assert result.isError is True
        assert _text(result).startswith("Error updating task: 404")


class TestGTasksDeleteAndClear:
    """Tests for the gtasks_delete and gtasks_clear tools."""

    @pytest.mark.asyncio
    async def test_delete_task(self, populated_client):
        result = await gtasks_delete(DeleteTaskInput(task_list_id="inbox", task_id="t2"))
        assert _text(result) == "Task t2 deleted"
        assert populated_client.find("inbox", "t2") is None

    @pytest.mark.asyncio
    async def test_delete_task_error(self, populated_client):
        populated_client.fail("delete_task", "inbox", "t2", message="403 Forbidden", status_code=403)
        result = await gtasks_delete(DeleteTaskInput(task_list_id="inbox", task_id="t2"))
        assert result.isError is True
        assert _text(result) == "Error deleting task: 403 Forbidden"

    @pytest.mark.asyncio
    async def test_clear_completed_tasks(self, populated_client):
        """Test that only completed tasks are cleared."""
        result = await gtasks_clear(ClearTasksInput(task_list_id="inbox"))
        assert _text(result) == "Tasks from tasklist inbox cleared"
        assert [t["id"] for t in populated_client.tasks["inbox"]] == ["t1", "t2"]


class TestGTasksListTaskLists:
    """Tests for the gtasks_list_task_lists tool."""

    @pytest.mark.asyncio
    async def test_list_task_lists_markdown(self, populated_client):
        result = await gtasks_list_task_lists(ListTaskListsInput())
        text = _text(result)
        assert text.startswith("Found 2 task lists:")
        assert "List: Inbox - ID: inbox - Updated: 2025-01-01T00:00:00Z" in text

    @pytest.mark.asyncio
    async def test_list_task_lists_json(self, populated_client):
        result = await gtasks_list_task_lists(ListTaskListsInput(response_format=ResponseFormat.JSON))
        data = json.loads(_text(result))
        assert [t["title"] for t in data["task_lists"]] == ["Inbox", "Admin Tasks"]


class TestGTasksMoveTask:
    """Tests for the gtasks_move_task tool."""

    @pytest.mark.asyncio
    async def test_move_task(self, populated_client):
        """Test a full move reports the new ID."""
        result = await gtasks_move_task(
            MoveTaskInput(source_task_list_id="inbox", target_task_list_id="admin", task_id="t2")
        )
        assert result.isError is False
        assert _text(result) == 'Task "Buy milk" moved from list "inbox" to list "admin" (new ID: new-1)'
        assert populated_client.find("inbox", "t2") is None
        assert populated_client.find("admin", "new-1")["title"] == "Buy milk"

    @pytest.mark.asyncio
    async def test_move_task_partial_success(self, populated_client):
        """A failed delete still reports the copy, without an error flag."""
        populated_client.fail("delete_task", "inbox", "t2")
        result = await gtasks_move_task(
            MoveTaskInput(source_task_list_id="inbox", target_task_list_id="admin", task_id="t2")
        )
        assert result.isError is False
        assert "(new ID: new-1) but could not be deleted from source list" in _text(result)
        assert populated_client.find("inbox", "t2") is not None
        assert populated_client.find("admin", "new-1") is not None

    @pytest.mark.asyncio
    async def test_move_missing_task(self, populated_client):
        """Test the error envelope when the source task does not exist."""
        result = await gtasks_move_task(
            MoveTaskInput(source_task_list_id="inbox", target_task_list_id="admin", task_id="nope")
        )
        assert result.isError is True
        assert _text(result) == "Error moving task: Could not get source task: 404 Task not found."
        assert populated_client.calls_to("insert_task") == []


# ============================================================================
# Resource Tests
# ============================================================================


class TestTaskResources:
    """Tests for task resources."""

    @pytest.mark.asyncio
    async def test_read_task_resource(self, populated_client):
        """Test a task is found in whichever list holds it."""
        text = await read_task_resource("a1")
        assert "Title: [ADMIN] File taxes" in text
        assert "Status: needsAction" in text

    @pytest.mark.asyncio
    async def test_read_missing_task_resource(self, populated_client):
        with pytest.raises(NotFoundError, match="Task not found: nope"):
            await read_task_resource("nope")

    @pytest.mark.asyncio
    async def test_list_resources(self, populated_client):
        """Test every task is listed as a plain-text resource."""
        resources = await mcp.list_resources()
        assert [r.name for r in resources] == [
            "[ADMIN] Renew passport",
            "Buy milk",
            "Pay rent",
            "[ADMIN] File taxes",
        ]
        assert all(r.mimeType == "text/plain" for r in resources)
        assert str(resources[0].uri).endswith("t1")

    @pytest.mark.asyncio
    async def test_list_task_resources_pages(self, fake_client):
        """Test resource listing pages ten tasks at a time."""
        fake_client.add_list("big", "Big")
        for i in range(12):
            fake_client.add_task("big", f"b{i}", f"Task {i}")

        tasks, cursor = await list_task_resources(fake_client)
        assert len(tasks) == 10
        assert cursor == "10"

        tasks, cursor = await list_task_resources(fake_client, cursor)
        assert [t.id for t in tasks] == ["b10", "b11"]
        assert cursor is None

    @pytest.mark.asyncio
    async def test_resources_list_request_follows_cursor(self, fake_client):
        """Test resources/list hands out a cursor and serves the next page for it."""
        fake_client.add_list("big", "Big")
        for i in range(12):
            fake_client.add_task("big", f"b{i}", f"Task {i}")
        handler = mcp._mcp_server.request_handlers[ListResourcesRequest]

        first = await handler(ListResourcesRequest.model_validate({"method": "resources/list"}))
        assert len(first.root.resources) == 10
        assert first.root.nextCursor == "10"

        second = await handler(
            ListResourcesRequest.model_validate({"method": "resources/list", "params": {"cursor": "10"}})
        )
        assert [r.name for r in second.root.resources] == ["Task 10", "Task 11"]
        assert second.root.nextCursor is None
