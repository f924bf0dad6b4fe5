"""HTTP tests for signup, login and the access control gate."""

import unittest
from unittest.mock import patch

import jwt
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from musica_api.core.security import decode_access_token, dummy_password_hash
from musica_api.models import User
from musica_api.models.user import Role
from musica_api.repositories.users import UserRepository
from tests.support import ApiTestCase


class TestSignup(ApiTestCase):
    def test_fresh_username_returns_201_without_password(self) -> None:
        resp = self.signup("ana", password="pw-ana", role="Admin")
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["username"], "ana")
        self.assertEqual(body["role"], "Admin")
        self.assertIsInstance(body["id"], int)
        self.assertNotIn("password", body)
        self.assertNotIn("password_hash", body)

    def test_password_is_stored_hashed(self) -> None:
        self.signup("ana", password="pw-ana")
        with self.SessionLocal() as db:
            user = db.query(User).filter(User.username == "ana").one()
        self.assertNotEqual(user.password_hash, "pw-ana")

    def test_duplicate_username_returns_400_and_creates_nothing(self) -> None:
        self.assertEqual(self.signup("ana").status_code, 201)
        resp = self.signup("ana", password="other")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Username already exists"})
        with self.SessionLocal() as db:
            self.assertEqual(db.query(User).filter(User.username == "ana").count(), 1)

    def test_duplicate_that_slips_past_existence_check_returns_400(self) -> None:
        self.assertEqual(self.signup("ana").status_code, 201)
        with patch.object(UserRepository, "find_by_username", return_value=None):
            resp = self.signup("ana")
        self.assertEqual(resp.status_code, 400)
        with self.SessionLocal() as db:
            self.assertEqual(db.query(User).count(), 1)

    def test_role_defaults_to_standard(self) -> None:
        resp = self.client.post("/signup", json={"username": "bo", "password": "pw"})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["role"], "Standard")

    def test_unknown_role_is_rejected(self) -> None:
        resp = self.signup("bo", role="superuser")
        self.assertEqual(resp.status_code, 422)

    def test_duplicate_username_is_not_hashed(self) -> None:
        self.signup("ana")
        with patch("musica_api.repositories.users.hash_password") as hasher:
            resp = self.signup("ana")
        self.assertEqual(resp.status_code, 400)
        hasher.assert_not_called()

    def test_store_failure_returns_generic_500(self) -> None:
        boom = OperationalError("INSERT INTO users", {}, Exception("disk on fire"))
        with patch.object(Session, "commit", side_effect=boom):
            resp = self.signup("ana")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Internal Server Error"})
        self.assertNotIn("disk on fire", resp.text)
        with self.SessionLocal() as db:
            self.assertEqual(db.query(User).count(), 0)


class TestLogin(ApiTestCase):
    def test_correct_credentials_return_token_with_signup_identity(self) -> None:
        created = self.signup("ana", password="pw-ana", role="Admin").json()
        resp = self.client.post("/login", json={"username": "ana", "password": "pw-ana"})
        self.assertEqual(resp.status_code, 200)
        claims = decode_access_token(resp.json()["token"], self.settings)
        self.assertEqual(claims.user_id, created["id"])
        self.assertEqual(claims.username, "ana")
        self.assertIs(claims.role, Role.ADMIN)

    def test_wrong_password_and_unknown_user_are_indistinguishable(self) -> None:
        self.signup("ana", password="pw-ana")
        wrong = self.client.post("/login", json={"username": "ana", "password": "nope"})
        missing = self.client.post("/login", json={"username": "ghost", "password": "nope"})
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(missing.status_code, 401)
        self.assertEqual(wrong.json(), missing.json())

    def test_out_of_range_credentials_still_return_401(self) -> None:
        self.signup("ana", password="pw-ana")
        attempts = [
            {"username": "ana", "password": ""},
            {"username": "ana", "password": "x" * 129},
            {"username": "", "password": "pw-ana"},
        ]
        for body in attempts:
            with self.subTest(body=body):
                resp = self.client.post("/login", json=body)
                self.assertEqual(resp.status_code, 401)
                self.assertEqual(resp.json(), {"error": "Invalid username or password"})

    def test_unknown_user_still_runs_a_password_check(self) -> None:
        with patch("musica_api.api.auth.verify_password", return_value=False) as verify:
            resp = self.client.post("/login", json={"username": "ghost", "password": "nope"})
        self.assertEqual(resp.status_code, 401)
        verify.assert_called_once_with("nope", dummy_password_hash())

    def test_store_failure_returns_generic_500(self) -> None:
        boom = OperationalError("SELECT FROM users", {}, Exception("disk on fire"))
        with patch.object(Session, "query", side_effect=boom):
            resp = self.client.post("/login", json={"username": "ana", "password": "pw"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Internal Server Error"})
        self.assertNotIn("disk on fire", resp.text)


class TestAccessGate(ApiTestCase):
    ADMIN_ROUTES = [
        ("post", "/musica", {"titulo": "t", "artista": "a"}),
        ("post", "/playlist", {"nome": "n", "descricao": "d", "criador": "c"}),
        ("post", "/playlist/1/musica", {"musica_id": 1}),
        ("put", "/playlist/1/musica/1", {"titulo": "t", "artista": "a"}),
        ("delete", "/playlist/1/musica/1", None),
    ]
    READ_ROUTES = ["/musicas", "/playlists", "/playlist/1/musicas"]

    def _call(self, method: str, path: str, body: dict | None, headers: dict | None = None):
        kwargs: dict = {"headers": headers or {}}
        if body is not None:
            kwargs["json"] = body
        return self.client.request(method.upper(), path, **kwargs)

    def test_missing_header_returns_401(self) -> None:
        routes = self.ADMIN_ROUTES + [("get", p, None) for p in self.READ_ROUTES]
        for method, path, body in routes:
            with self.subTest(route=f"{method} {path}"):
                resp = self._call(method, path, body)
                self.assertEqual(resp.status_code, 401)
                self.assertEqual(resp.json(), {"error": "Unauthorized: Token not provided"})

    def test_garbled_token_returns_401(self) -> None:
        routes = self.ADMIN_ROUTES + [("get", p, None) for p in self.READ_ROUTES]
        for method, path, body in routes:
            with self.subTest(route=f"{method} {path}"):
                resp = self._call(method, path, body, {"Authorization": "not.a.token"})
                self.assertEqual(resp.status_code, 401)
                self.assertEqual(resp.json(), {"error": "Unauthorized: Invalid token"})

    def test_token_signed_with_other_secret_returns_401(self) -> None:
        forged = jwt.encode(
            {"user_id": 1, "username": "x", "role": "Admin"}, "other-secret", algorithm="HS256"
        )
        resp = self.client.get("/musicas", headers={"Authorization": forged})
        self.assertEqual(resp.status_code, 401)

    def test_standard_token_on_admin_route_returns_403(self) -> None:
        headers = self.standard_headers()
        for method, path, body in self.ADMIN_ROUTES:
            with self.subTest(route=f"{method} {path}"):
                resp = self._call(method, path, body, headers)
                self.assertEqual(resp.status_code, 403)
                self.assertEqual(resp.json(), {"error": "Forbidden: Insufficient permissions"})

    def test_standard_token_can_read(self) -> None:
        headers = self.standard_headers()
        for path in self.READ_ROUTES:
            with self.subTest(path=path):
                self.assertEqual(self.client.get(path, headers=headers).status_code, 200)

    def test_bearer_prefix_is_accepted(self) -> None:
        token = self.standard_headers()["Authorization"]
        resp = self.client.get("/musicas", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(resp.status_code, 200)


if __name__ == "__main__":
    unittest.main()
