import unittest
from types import SimpleNamespace as Obj
from unittest.mock import Mock
from fastapi import HTTPException
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from main import app
from core.database import get_db
from employee.router import get_employee_service
from employee.service import EmployeeService


class EmployeeRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        self.service = Mock(spec=EmployeeService)
        app.dependency_overrides[get_db] = _fake_db
        app.dependency_overrides[get_employee_service] = lambda: self.service

        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_employee_service, None)

    # --- LIST ---

    def test_list_employees(self):
        self.service.get_all.return_value = [
            Obj(employee_id="EM001", account_id="AC001", account=Obj(account_id="AC001", username="johanna")),
        ]
        resp = self.client.get("/api/employees")
        self.assertEqual(resp.status_code, 200, resp.text)
        data = resp.json()
        self.assertEqual(data[0]["employee_id"], "EM001")
        self.assertEqual(data[0]["account"]["username"], "johanna")

    def test_list_employees_empty(self):
        self.service.get_all.return_value = []
        resp = self.client.get("/api/employees")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    # --- GET /{id} ---

    def test_get_employee_200(self):
        self.service.get_by_id.return_value = Obj(employee_id="EM001", account_id="AC001", account=None)
        resp = self.client.get("/api/employees/EM001")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["account_id"], "AC001")

    def test_get_employee_404(self):
        self.service.get_by_id.return_value = None
        resp = self.client.get("/api/employees/EM999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee not found")

    # --- CREATE ---

    def test_register_employee_201(self):
        self.service.register.return_value = True
        resp = self.client.post("/api/employees", json={"username": "jonas", "password": "pw"})
        self.assertEqual(resp.status_code, 201, resp.text)
        payload = self.service.register.call_args.args[0]
        self.assertEqual(payload.username, "jonas")

    def test_register_employee_409_username_taken(self):
        self.service.register.return_value = False
        resp = self.client.post("/api/employees", json={"username": "jonas", "password": "pw"})
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()["detail"], "username already exists")

    def test_register_employee_409_integrity_error(self):
        self.service.register.side_effect = IntegrityError("stmt", "params", Exception("dup"))
        resp = self.client.post("/api/employees", json={"username": "jonas", "password": "pw"})
        self.assertEqual(resp.status_code, 409, resp.text)

    def test_register_employee_422_unknown_field(self):
        resp = self.client.post("/api/employees", json={"username": "jonas", "password": "pw", "is_admin": True})
        self.assertEqual(resp.status_code, 422)

    # --- PUT /{id} ---

    def test_update_employee_200(self):
        self.service.update.return_value = True
        resp = self.client.put("/api/employees/EM001", json={"username": "jonas", "full_name": "Jonas B"})
        self.assertEqual(resp.status_code, 200, resp.text)
        employee_id, edit = self.service.update.call_args.args
        self.assertEqual(employee_id, "EM001")
        self.assertEqual(edit.full_name, "Jonas B")

    def test_update_employee_404(self):
        self.service.update.return_value = False
        resp = self.client.put("/api/employees/EM999", json={"username": "nope"})
        self.assertEqual(resp.status_code, 404)

    def test_update_employee_409_username_taken(self):
        self.service.update.side_effect = HTTPException(status_code=409, detail="username already exists")
        resp = self.client.put("/api/employees/EM001", json={"username": "taken"})
        self.assertEqual(resp.status_code, 409)

    # --- DELETE /{id} ---

    def test_delete_employee_200(self):
        self.service.delete.return_value = True
        resp = self.client.delete("/api/employees/EM001")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), {"message": "employee deleted"})

    def test_delete_employee_404(self):
        self.service.delete.return_value = False
        resp = self.client.delete("/api/employees/EM999")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "employee not found")


if __name__ == "__main__":
    unittest.main()
