"""HTTP level tests for the /api/employees endpoints."""

from employee_api.app.models.employee import Employee


def as_payload(employee):
    return {"firstName": employee.first_name, "lastName": employee.last_name, "email": employee.email}


class TestCreateEmployee:
    """Tests for POST /api/employees."""

    def test_create_returns_saved_employee(self, client, repository, john):
        response = client.post("/api/employees", json=as_payload(john))

        assert response.status_code == 201
        data = response.json()
        assert data["firstName"] == "john"
        assert data["lastName"] == "doe"
        assert data["email"] == "johndoe@gmail.com"
        assert isinstance(data["id"], int)

        stored = repository.find_by_id(data["id"])
        assert stored == Employee(id=data["id"], first_name="john", last_name="doe", email="johndoe@gmail.com")

    def test_create_ignores_client_supplied_id(self, client, repository, john):
        body = as_payload(john)
        body["id"] = 999

        response = client.post("/api/employees", json=body)

        assert response.status_code == 201
        assert response.json()["id"] != 999
        assert repository.find_by_id(999) is None

    def test_create_does_not_enforce_unique_email(self, client, repository, john):
        first = client.post("/api/employees", json=as_payload(john))
        second = client.post("/api/employees", json=as_payload(john))

        assert first.status_code == second.status_code == 201
        assert first.json()["id"] != second.json()["id"]
        assert repository.count() == 2

    def test_create_missing_field_is_rejected(self, client, repository):
        response = client.post("/api/employees", json={"firstName": "john", "lastName": "doe"})

        assert response.status_code == 422
        assert repository.count() == 0

    def test_create_then_get_returns_same_fields(self, client, john):
        created = client.post("/api/employees", json=as_payload(john)).json()

        response = client.get(f"/api/employees/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created


class TestListEmployees:
    """Tests for GET /api/employees."""

    def test_list_returns_all_employees(self, client, repository):
        repository.save_all(
            [
                Employee(first_name="john", last_name="doe", email="johndoe@gmail.com"),
                Employee(first_name="mary", last_name="hope", email="maryhope@gmail.com"),
                Employee(first_name="mary", last_name="hope", email="maryhope@gmail.com"),
            ]
        )

        response = client.get("/api/employees")

        assert response.status_code == 200
        assert len(response.json()) == 3

    def test_list_empty(self, client):
        response = client.get("/api/employees")

        assert response.status_code == 200
        assert response.json() == []


class TestGetEmployee:
    """Tests for GET /api/employees/{id}."""

    def test_get_existing_employee(self, client, repository, john):
        repository.save(john)

        response = client.get(f"/api/employees/{john.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["firstName"] == john.first_name
        assert data["lastName"] == john.last_name
        assert data["email"] == john.email

    def test_get_unknown_id_returns_404(self, client, repository, john):
        repository.save(john)

        response = client.get(f"/api/employees/{john.id + 1}")

        assert response.status_code == 404
        assert "detail" in response.json()

    def test_get_non_integer_id_is_rejected(self, client):
        response = client.get("/api/employees/abc")

        assert response.status_code == 422


class TestUpdateEmployee:
    """Tests for PUT /api/employees/{id}."""

    def test_update_returns_updated_employee(self, client, repository, john, steve):
        repository.save(john)

        response = client.put(f"/api/employees/{john.id}", json=as_payload(steve))

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == john.id
        assert data["firstName"] == "steve"
        assert data["lastName"] == "jobs"
        assert data["email"] == "stevejobs@gmail.com"
        assert repository.find_by_id(john.id).first_name == "steve"

    def test_update_unknown_id_returns_404_without_mutation(self, client, repository, john, steve):
        repository.save(john)

        response = client.put(f"/api/employees/{john.id + 1}", json=as_payload(steve))

        assert response.status_code == 404
        assert repository.find_all() == [john]

    def test_update_accepts_snake_case_fields(self, client, repository, john):
        repository.save(john)

        response = client.put(
            f"/api/employees/{john.id}",
            json={"first_name": "jane", "last_name": "roe", "email": "janeroe@gmail.com"},
        )

        assert response.status_code == 200
        assert response.json()["firstName"] == "jane"

    def test_update_missing_field_is_rejected_without_mutation(self, client, repository, john):
        repository.save(john)

        response = client.put(f"/api/employees/{john.id}", json={"firstName": "x"})

        assert response.status_code == 422
        assert repository.find_by_id(john.id) == john


class TestDeleteEmployee:
    """Tests for DELETE /api/employees/{id}."""

    def test_delete_returns_message(self, client, repository, steve):
        repository.save(steve)

        response = client.delete(f"/api/employees/{steve.id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Employee deleted successfully!"}
        assert client.get(f"/api/employees/{steve.id}").status_code == 404

    def test_delete_unknown_id_returns_404(self, client, repository, steve):
        repository.save(steve)

        response = client.delete(f"/api/employees/{steve.id + 1}")

        assert response.status_code == 404
        assert repository.count() == 1


class TestOutOfRangeIds:
    """Ids too large for a SQLite INTEGER are unknown ids."""

    HUGE_ID = "99999999999999999999"

    def test_get_returns_404(self, client, repository, john):
        repository.save(john)

        response = client.get(f"/api/employees/{self.HUGE_ID}")

        assert response.status_code == 404

    def test_update_returns_404_without_mutation(self, client, repository, john, steve):
        repository.save(john)

        response = client.put(f"/api/employees/{self.HUGE_ID}", json=as_payload(steve))

        assert response.status_code == 404
        assert repository.find_all() == [john]

    def test_delete_returns_404(self, client, repository, john):
        repository.save(john)

        response = client.delete(f"/api/employees/{self.HUGE_ID}")

        assert response.status_code == 404
        assert repository.count() == 1


class TestLifecycle:
    """A full create → get → update → get → delete → get round trip."""

    def test_round_trip_leaves_no_residual_state(self, client, repository, john, steve):
        created = client.post("/api/employees", json=as_payload(john))
        assert created.status_code == 201
        employee_id = created.json()["id"]

        fetched = client.get(f"/api/employees/{employee_id}")
        assert fetched.status_code == 200
        assert fetched.json()["firstName"] == "john"

        updated = client.put(f"/api/employees/{employee_id}", json=as_payload(steve))
        assert updated.status_code == 200

        fetched = client.get(f"/api/employees/{employee_id}")
        assert fetched.json() == {
            "id": employee_id,
            "firstName": "steve",
            "lastName": "jobs",
            "email": "stevejobs@gmail.com",
        }

        assert client.delete(f"/api/employees/{employee_id}").status_code == 200
        assert client.get(f"/api/employees/{employee_id}").status_code == 404
        assert repository.count() == 0


class TestStorageFailures:
    """Storage errors are not translated into 4xx responses."""

    def test_storage_error_surfaces_as_500(self, app, tmp_path):
        from fastapi.testclient import TestClient

        from employee_api.app.api.dependencies import get_employee_repository
        from employee_api.app.repositories.employee_repository import EmployeeRepository

        broken = EmployeeRepository(str(tmp_path / "no_tables.db"))
        app.dependency_overrides[get_employee_repository] = lambda: broken
        try:
            with TestClient(app, raise_server_exceptions=False) as test_client:
                response = test_client.get("/api/employees")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
