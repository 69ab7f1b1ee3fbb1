from core.events.domain_events import domain_events
from core.events.signal import Signal


def test_domain_event_signal_connect_emit_disconnect():
    seen: list[str] = []

    def _handler(workspace_id: str) -> None:
        seen.append(workspace_id)

    domain_events.time_entries_changed.connect(_handler)
    domain_events.time_entries_changed.emit("w-1")
    domain_events.time_entries_changed.disconnect(_handler)
    domain_events.time_entries_changed.emit("w-2")

    assert seen == ["w-1"]


def test_signal_emit_prunes_dead_weak_callbacks():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    class _DeadProxyCallback:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self, _payload: str) -> None:
            self.calls += 1
            raise ReferenceError("weakly-referenced object no longer exists")

    dead = _DeadProxyCallback()

    def _ok(payload: str) -> None:
        seen.append(payload)

    signal.connect(dead)
    signal.connect(_ok)

    signal.emit("p-1")
    signal.emit("p-2")

    assert dead.calls == 1
    assert seen == ["p-1", "p-2"]


def test_signal_emit_keeps_other_errors_visible():
    signal: Signal[str] = Signal()

    def _boom(_payload: str) -> None:
        raise RuntimeError("boom")

    signal.connect(_boom)

    try:
        signal.emit("x")
        assert False, "Expected RuntimeError to propagate"
    except RuntimeError as exc:
        assert str(exc) == "boom"


def test_services_emit_after_commit(services, workspace_id):
    projects: list[str] = []
    members: list[str] = []
    domain_events.projects_changed.connect(projects.append)
    domain_events.members_changed.connect(members.append)

    project = services["project_service"].create_project(workspace_id, "Website")
    user = services["member_service"].invite_member(workspace_id, "eve@example.com")

    assert projects == [project.id]
    assert members == [user.id]


def test_reset_disconnects_everything():
    seen: list[str] = []
    domain_events.clients_changed.connect(seen.append)
    domain_events.reset()
    domain_events.clients_changed.emit("c-1")
    assert seen == []
