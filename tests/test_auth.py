# =============================================================================
# tests/test_auth.py - Login and Admin Account Tests
# =============================================================================

import pytest

from core.services.user_service import UserService
from lib.security import hash_password, verify_password


@pytest.fixture
def admin(store):
    """A stored admin account with password 'segredo123'."""
    return store.seed("usuarios", usuario="admin", senha=hash_password("segredo123"))


class TestPasswordHashing:
    """lib.security"""

    def test_hash_is_salted_and_verifies(self):
        first = hash_password("abc")
        second = hash_password("abc")

        assert first != second
        assert verify_password("abc", first)
        assert not verify_password("abd", first)

    def test_bcryptjs_prefix_verifies(self):
        # bcryptjs writes $2a$ hashes
        stored = "$2a" + hash_password("abc")[3:]

        assert verify_password("abc", stored)

    @pytest.mark.parametrize("stored", [None, "", "not-a-hash"])
    def test_missing_or_malformed_hash_never_matches(self, stored):
        assert not verify_password("abc", stored)


class TestLogin:
    """POST /login"""

    def test_success_echoes_identity(self, api, admin):
        response = api.post("/login", json={"usuario": "admin", "senha": "segredo123"})

        assert response.status_code == 200
        assert response.json() == {
            "message": "Login realizado com sucesso",
            "usuario": {"id": admin["id"], "usuario": "admin"},
        }

    def test_wrong_password_and_unknown_user_look_the_same(self, api, admin):
        wrong_password = api.post("/login", json={"usuario": "admin", "senha": "nope"})
        unknown_user = api.post("/login", json={"usuario": "ghost", "senha": "nope"})

        assert wrong_password.status_code == 401
        assert unknown_user.status_code == 401
        assert wrong_password.json() == unknown_user.json()
        assert wrong_password.json()["error"] == "Usuário ou senha inválidos"

    def test_missing_fields_is_400(self, api):
        response = api.post("/login", json={"usuario": "admin"})

        assert response.status_code == 400
        assert response.json()["error"] == "Usuário e senha são obrigatórios"


class TestCreateAdmin:
    """POST /usuarios/criar-admin"""

    def test_create_stores_hash_not_plaintext(self, api, store):
        response = api.post("/usuarios/criar-admin", json={"usuario": "dona", "senha": "s3nha"})

        assert response.status_code == 201
        stored = store.tables["usuarios"][0]
        assert stored["senha"] != "s3nha"
        assert verify_password("s3nha", stored["senha"])
        assert stored["criado_em"]

    def test_duplicate_username_is_409(self, api, admin):
        response = api.post("/usuarios/criar-admin", json={"usuario": "admin", "senha": "x"})

        assert response.status_code == 409
        assert response.json()["error"] == "Usuário já existe"

    def test_created_admin_can_log_in(self, api, store):
        api.post("/usuarios/criar-admin", json={"usuario": "dona", "senha": "s3nha"})

        assert api.post("/login", json={"usuario": "dona", "senha": "s3nha"}).status_code == 200


class TestChangePassword:
    """PUT /usuarios/alterar-senha"""

    def test_change_then_login_with_new_password(self, api, admin):
        response = api.put("/usuarios/alterar-senha", json={
            "usuario": "admin", "senha_atual": "segredo123", "senha_nova": "nova456",
        })

        assert response.status_code == 200
        assert api.post("/login", json={"usuario": "admin", "senha": "nova456"}).status_code == 200
        assert api.post("/login", json={"usuario": "admin", "senha": "segredo123"}).status_code == 401

    def test_wrong_current_password_is_401(self, api, admin):
        response = api.put("/usuarios/alterar-senha", json={
            "usuario": "admin", "senha_atual": "errada", "senha_nova": "nova456",
        })

        assert response.status_code == 401
        assert response.json()["error"] == "Senha atual incorreta"

    def test_unknown_user_is_404(self, api, store):
        response = api.put("/usuarios/alterar-senha", json={
            "usuario": "ghost", "senha_atual": "a", "senha_nova": "b",
        })

        assert response.status_code == 404

    def test_missing_fields_is_400(self, api, admin):
        response = api.put("/usuarios/alterar-senha", json={"usuario": "admin"})

        assert response.status_code == 400


class TestSetAdminPassword:
    """UserService.set_admin_password (used by scripts/create_admin.py)"""

    def test_creates_when_missing(self, store):
        user, created = UserService.set_admin_password("admin", "primeira")

        assert created is True
        assert verify_password("primeira", store.tables["usuarios"][0]["senha"])

    def test_resets_when_present(self, store, admin):
        user, created = UserService.set_admin_password("admin", "outra")

        assert created is False
        assert user["id"] == admin["id"]
        assert verify_password("outra", store.tables["usuarios"][0]["senha"])
