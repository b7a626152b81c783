from _pytest.monkeypatch import MonkeyPatch
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from budget_tracker import __version__
from budget_tracker.exceptions import StorageError
from budget_tracker.main import app
from budget_tracker.models import Position, SubBudget
from budget_tracker.services import storage

API = "/api"


def _create_project(client: TestClient, name: str = "Garden", total_budget: object = 1000) -> int:
    response = client.post(f"{API}/projects", json={"name": name, "total_budget": total_budget})
    assert response.status_code == 200
    return response.json()["id"]


def _create_subbudget(client: TestClient, project_id: int, **body: object) -> int:
    payload = {"name": "Plants", "budget": 500}
    payload.update(body)
    response = client.post(f"{API}/projects/{project_id}/subbudgets", json=payload)
    assert response.status_code == 200
    return response.json()["id"]


def _create_position(client: TestClient, subbudget_id: int, **body: object) -> int:
    payload = {"name": "Item", "planned": 100}
    payload.update(body)
    response = client.post(f"{API}/subbudgets/{subbudget_id}/positions", json=payload)
    assert response.status_code == 200
    return response.json()["id"]


def test_health_check(client: TestClient) -> None:
    response = client.get(f"{API}/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "app": "Budget Tracker"}


def test_app_reports_package_version() -> None:
    assert app.version == __version__


def test_project_crud(client: TestClient) -> None:
    assert client.get(f"{API}/projects").json() == []

    project_id = _create_project(client, "Garden", 1000)
    assert client.get(f"{API}/projects").json() == [
        {"id": project_id, "name": "Garden", "total_budget": 1000.0}
    ]

    response = client.put(
        f"{API}/projects/{project_id}", json={"name": "Backyard", "total_budget": 1500}
    )
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert client.get(f"{API}/projects").json()[0]["name"] == "Backyard"

    response = client.delete(f"{API}/projects/{project_id}")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert client.get(f"{API}/projects").json() == []


def test_create_project_coerces_numeric_strings(client: TestClient) -> None:
    project_id = _create_project(client, "Strings", "1250.50")
    [project] = client.get(f"{API}/projects").json()
    assert project["id"] == project_id
    assert project["total_budget"] == 1250.5


def test_create_project_missing_budget_is_zero(client: TestClient) -> None:
    response = client.post(f"{API}/projects", json={"name": "No budget"})
    assert response.status_code == 200
    assert client.get(f"{API}/projects").json()[0]["total_budget"] == 0.0


def test_create_project_rejects_malformed_input(client: TestClient) -> None:
    response = client.post(f"{API}/projects", json={"name": "Bad", "total_budget": "abc"})
    assert response.status_code == 400
    assert "total_budget" in response.json()["detail"]

    response = client.post(f"{API}/projects", json={"total_budget": 10})
    assert response.status_code == 400
    assert "name" in response.json()["detail"]

    response = client.post(f"{API}/projects", json={"name": "Negative", "total_budget": -5})
    assert response.status_code == 400
    assert "negative" in response.json()["detail"]

    assert client.get(f"{API}/projects").json() == []


def test_update_missing_project_returns_404(client: TestClient) -> None:
    response = client.put(f"{API}/projects/999", json={"name": "x", "total_budget": 1})
    assert response.status_code == 404
    assert "999" in response.json()["detail"]


def test_delete_missing_ids_succeed(client: TestClient) -> None:
    for path in ("projects/41", "subbudgets/42", "positions/43"):
        response = client.delete(f"{API}/{path}")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


def test_non_integer_path_id_returns_400(client: TestClient) -> None:
    response = client.get(f"{API}/projects/abc/subbudgets")
    assert response.status_code == 400


def test_out_of_range_path_ids_return_400(client: TestClient) -> None:
    too_big = 2**63
    requests = [
        ("DELETE", f"projects/{too_big}"),
        ("DELETE", "projects/99999999999999999999"),
        ("GET", f"projects/{too_big}/summary"),
        ("GET", f"projects/{too_big}/subbudgets"),
        ("DELETE", f"subbudgets/{too_big}"),
        ("GET", f"subbudgets/{too_big}/positions"),
        ("DELETE", f"positions/{too_big}"),
        ("DELETE", "projects/0"),
        ("GET", "subbudgets/-1/positions"),
    ]
    for method, path in requests:
        response = client.request(method, f"{API}/{path}")
        assert response.status_code == 400, (method, path)
        assert "detail" in response.json()

    response = client.put(f"{API}/positions/{too_big}", json={"name": "x", "planned": 1})
    assert response.status_code == 400


def test_largest_storable_id_is_accepted(client: TestClient) -> None:
    largest = 2**63 - 1
    assert client.delete(f"{API}/projects/{largest}").json() == {"status": "ok"}
    assert client.get(f"{API}/projects/{largest}/summary").status_code == 404


def test_storage_failure_returns_500(client: TestClient, monkeypatch: MonkeyPatch) -> None:
    def failing_commit(db: Session) -> None:
        db.rollback()
        raise StorageError("Storage operation failed: disk I/O error")

    monkeypatch.setattr(storage, "commit", failing_commit)

    response = client.post(f"{API}/projects", json={"name": "Garden", "total_budget": 10})
    assert response.status_code == 500
    assert response.json() == {"detail": "Storage operation failed: disk I/O error"}

    monkeypatch.undo()
    assert client.get(f"{API}/projects").json() == []


def test_subbudget_listing_includes_used_and_warning(client: TestClient) -> None:
    project_id = _create_project(client, total_budget=1000)
    subbudget_id = _create_subbudget(client, project_id, budget=500, threshold=0.8)
    _create_position(client, subbudget_id, planned=450, done=False)

    [row] = client.get(f"{API}/projects/{project_id}/subbudgets").json()
    assert row["id"] == subbudget_id
    assert row["project_id"] == project_id
    assert row["used"] == 450.0
    assert row["warning"] is True
    assert row["percent"] == 90.0

    summary = client.get(f"{API}/projects/{project_id}/summary").json()
    assert summary["used"] == 450.0
    assert summary["remaining"] == 550.0
    assert summary["percent"] == 45.0
    assert summary["subbudgets"][0]["warning"] is True


def test_subbudget_threshold_defaults_and_full_update(client: TestClient) -> None:
    project_id = _create_project(client)
    subbudget_id = _create_subbudget(client, project_id, budget=200)

    [row] = client.get(f"{API}/projects/{project_id}/subbudgets").json()
    assert row["threshold"] == 0.9
    assert row["warning"] is False

    response = client.put(
        f"{API}/subbudgets/{subbudget_id}",
        json={"name": "Tools", "budget": 0, "threshold": 0.5},
    )
    assert response.status_code == 200

    _create_position(client, subbudget_id, planned=1000)
    [row] = client.get(f"{API}/projects/{project_id}/subbudgets").json()
    assert row["name"] == "Tools"
    assert row["used"] == 1000.0
    # A zero budget never warns
    assert row["warning"] is False
    assert row["percent"] == 0.0


def test_create_subbudget_under_missing_project(
    client: TestClient, session_factory: sessionmaker
) -> None:
    response = client.post(f"{API}/projects/404/subbudgets", json={"name": "Ghost", "budget": 1})
    assert response.status_code == 404

    with session_factory() as session:
        assert session.query(SubBudget).count() == 0


def test_list_children_of_missing_parent_returns_404(client: TestClient) -> None:
    assert client.get(f"{API}/projects/5/subbudgets").status_code == 404
    assert client.get(f"{API}/subbudgets/5/positions").status_code == 404
    assert client.get(f"{API}/projects/5/summary").status_code == 404


def test_position_round_trip(client: TestClient) -> None:
    project_id = _create_project(client)
    subbudget_id = _create_subbudget(client, project_id)
    position_id = _create_position(
        client, subbudget_id, name="X", planned=100, actual=40, done=False
    )

    [row] = client.get(f"{API}/subbudgets/{subbudget_id}/positions").json()
    assert row == {
        "id": position_id,
        "subbudget_id": subbudget_id,
        "name": "X",
        "planned": 100.0,
        "actual": 40.0,
        "done": False,
        "used_amount": 100.0,
    }

    response = client.put(
        f"{API}/positions/{position_id}",
        json={"name": "X", "planned": 100, "actual": 40, "done": True},
    )
    assert response.status_code == 200

    [row] = client.get(f"{API}/subbudgets/{subbudget_id}/positions").json()
    assert row["done"] is True
    assert row["used_amount"] == 40.0

    [subbudget] = client.get(f"{API}/projects/{project_id}/subbudgets").json()
    assert subbudget["used"] == 40.0


def test_position_accepts_integer_done_flag(client: TestClient) -> None:
    project_id = _create_project(client)
    subbudget_id = _create_subbudget(client, project_id)
    _create_position(client, subbudget_id, planned=10, actual=7, done=1)

    [row] = client.get(f"{API}/subbudgets/{subbudget_id}/positions").json()
    assert row["done"] is True
    assert row["used_amount"] == 7.0


def test_position_defaults(client: TestClient) -> None:
    project_id = _create_project(client)
    subbudget_id = _create_subbudget(client, project_id)
    _create_position(client, subbudget_id, planned=10)

    [row] = client.get(f"{API}/subbudgets/{subbudget_id}/positions").json()
    assert row["actual"] == 0.0
    assert row["done"] is False


def test_update_missing_position_and_subbudget(client: TestClient) -> None:
    response = client.put(f"{API}/positions/9", json={"name": "x", "planned": 1})
    assert response.status_code == 404
    response = client.put(f"{API}/subbudgets/9", json={"name": "x", "budget": 1})
    assert response.status_code == 404


def test_create_position_under_missing_subbudget(
    client: TestClient, session_factory: sessionmaker
) -> None:
    response = client.post(f"{API}/subbudgets/8/positions", json={"name": "x", "planned": 1})
    assert response.status_code == 404

    with session_factory() as session:
        assert session.query(Position).count() == 0


def test_delete_project_removes_whole_tree(client: TestClient) -> None:
    project_id = _create_project(client)
    subbudget_ids = [_create_subbudget(client, project_id, name=f"SB{i}") for i in range(3)]
    for subbudget_id in subbudget_ids:
        _create_position(client, subbudget_id)
        _create_position(client, subbudget_id)

    assert client.delete(f"{API}/projects/{project_id}").status_code == 200

    assert client.get(f"{API}/projects/{project_id}/subbudgets").status_code == 404
    for subbudget_id in subbudget_ids:
        assert client.get(f"{API}/subbudgets/{subbudget_id}/positions").status_code == 404


def test_delete_subbudget_and_position(client: TestClient) -> None:
    project_id = _create_project(client)
    subbudget_id = _create_subbudget(client, project_id)
    position_id = _create_position(client, subbudget_id, planned=30)
    _create_position(client, subbudget_id, planned=20)

    assert client.delete(f"{API}/positions/{position_id}").status_code == 200
    [subbudget] = client.get(f"{API}/projects/{project_id}/subbudgets").json()
    assert subbudget["used"] == 20.0

    assert client.delete(f"{API}/subbudgets/{subbudget_id}").status_code == 200
    assert client.get(f"{API}/projects/{project_id}/subbudgets").json() == []
    assert client.get(f"{API}/subbudgets/{subbudget_id}/positions").status_code == 404
