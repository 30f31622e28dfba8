# /api/users 라우터 테스트 (TestClient + 인메모리 저장소)

ADA = {"firstName": "Ada", "lastName": "Lovelace", "email": "ada@x.io", "phone": "1234567890"}


def test_create_user(user_client):
    resp = user_client.post("/api/users", json=ADA)
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"]
    assert body["fullName"] == "Ada Lovelace"
    assert body["createdAt"] == body["updatedAt"]


def test_create_duplicate_email_conflict(user_client):
    assert user_client.post("/api/users", json=ADA).status_code == 201
    resp = user_client.post("/api/users", json=ADA)
    assert resp.status_code == 409
    body = resp.json()
    assert body["status"] == 409
    assert body["error"] == "Conflict"
    assert "ada@x.io" in body["message"]
    assert body["path"] == "/api/users"


def test_create_user_without_phone(user_client):
    resp = user_client.post("/api/users", json={k: v for k, v in ADA.items() if k != "phone"})
    assert resp.status_code == 201
    assert resp.json()["phone"] is None


def test_create_user_validation_errors(user_client):
    resp = user_client.post("/api/users", json={"firstName": " ", "email": "not-an-email", "phone": "12345"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Validation Failed"
    assert "message" not in body
    assert body["errors"] == {
        "firstName": "First name is required",
        "lastName": "Last name is required",
        "email": "Email must be valid",
        "phone": "Phone must be 10 digits",
    }


def test_create_user_blank_email_is_required(user_client):
    resp = user_client.post("/api/users", json={**ADA, "email": "  "})
    assert resp.status_code == 400
    assert resp.json()["errors"] == {"email": "Email is required"}

    resp = user_client.post("/api/users", json={k: v for k, v in ADA.items() if k != "email"})
    assert resp.status_code == 400
    assert resp.json()["errors"] == {"email": "Email is required"}


def test_trailing_slash_routes(user_client):
    resp = user_client.post("/api/users/", json=ADA, follow_redirects=False)
    assert resp.status_code == 201
    listed = user_client.get("/api/users/", follow_redirects=False)
    assert listed.status_code == 200
    assert [u["id"] for u in listed.json()] == [resp.json()["id"]]


def test_get_by_id_and_email(user_client):
    created = user_client.post("/api/users", json=ADA).json()
    assert user_client.get(f"/api/users/{created['id']}").json() == created
    assert user_client.get("/api/users/email/ada@x.io").json()["id"] == created["id"]
    resp = user_client.get("/api/users/email/nobody@x.io")
    assert resp.status_code == 404
    assert resp.json()["error"] == "Not Found"


def test_list_users(user_client):
    assert user_client.get("/api/users").json() == []
    user_client.post("/api/users", json=ADA)
    assert [u["email"] for u in user_client.get("/api/users").json()] == ["ada@x.io"]


def test_update_user(user_client):
    created = user_client.post("/api/users", json=ADA).json()
    other = user_client.post("/api/users", json={**ADA, "email": "grace@x.io"}).json()

    same_email = user_client.put(f"/api/users/{created['id']}", json={**ADA, "address": "London"})
    assert same_email.status_code == 200
    assert same_email.json()["address"] == "London"
    assert same_email.json()["createdAt"] == created["createdAt"]

    taken = user_client.put(f"/api/users/{created['id']}", json={**ADA, "email": other["email"]})
    assert taken.status_code == 409

    missing = user_client.put("/api/users/000000000000000000000000", json=ADA)
    assert missing.status_code == 404

    invalid = user_client.put(f"/api/users/{created['id']}", json={**ADA, "phone": "abc"})
    assert invalid.status_code == 400


def test_delete_user_then_not_found(user_client):
    created = user_client.post("/api/users", json=ADA).json()
    resp = user_client.delete(f"/api/users/{created['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    path = f"/api/users/{created['id']}"
    resp = user_client.get(path)
    assert resp.status_code == 404
    assert resp.json()["path"] == path
    assert user_client.delete(path).status_code == 404


def test_health(user_client):
    assert user_client.get("/health").json()["app"] == "user-service"
