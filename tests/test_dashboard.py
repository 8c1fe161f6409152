import pytest

from rsabench.rsa.errors import PrimeGenerationExhausted
from rsabench.rsa.keygen import KeyGenResult
import rsabench.web_dashboard.app as dashboard
from rsabench.web_dashboard.app import app


@pytest.fixture()
def client():
    """Flask test client bound to the lab dashboard."""
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["status"] == "ok"
    assert "POST /run_batch" in payload["routes"]


def test_generate_key(client):
    response = client.get("/generate_key?bits=64&seed=5")
    assert response.status_code == 200
    key = response.get_json()["key"]
    assert key["modulus_bits"] == 64
    assert int(key["n"]).bit_length() == 64
    assert key["public_key_pem"].startswith("-----BEGIN PUBLIC KEY-----")
    assert "d" not in key


def test_generate_key_is_reproducible(client):
    a = client.get("/generate_key?bits=48&seed=9").get_json()["key"]
    b = client.get("/generate_key?bits=48&seed=9").get_json()["key"]
    assert a == b


@pytest.mark.parametrize("query", ["bits=8", "bits=999999", "bits=abc", "bits=64&seed=x"])
def test_generate_key_bad_params(client, query):
    response = client.get(f"/generate_key?{query}")
    assert response.status_code == 400
    assert response.get_json()["status"] == "error"


def test_run_batch_json(client):
    response = client.post("/run_batch", json={"bits": 64, "count": 20, "workers": 4, "seed": 3})
    assert response.status_code == 200
    report = response.get_json()["report"]
    assert report["message_count"] == 20
    assert report["workers"] == 4
    assert report["all_correct"] is True
    assert report["sequential"]["correct_count"] == report["parallel"]["correct_count"] == 20


def test_run_batch_form(client):
    response = client.post("/run_batch", data={"bits": "32", "count": "5", "workers": "2"})
    assert response.status_code == 200
    assert response.get_json()["report"]["all_correct"] is True


@pytest.mark.parametrize("body", [
    {"bits": 64, "workers": 0},
    {"bits": 64, "count": -1},
    {"bits": 64, "executor": "gpu"},
    {"bits": 4},
    {"bits": 64, "executor": ["thread"]},
    {"bits": 64, "count": [5]},
    [1, 2],
    "abc",
])
def test_run_batch_bad_params(client, body):
    response = client.post("/run_batch", json=body)
    assert response.status_code == 400


@pytest.fixture()
def failing_keygen(monkeypatch):
    def fake(**kwargs):
        return KeyGenResult(None, PrimeGenerationExhausted("no 32-bit prime found after 0 attempts"))
    monkeypatch.setattr(dashboard, "try_generate_key_pair", fake)


def test_generate_key_reports_keygen_failure(client, failing_keygen):
    response = client.get("/generate_key?bits=64")
    assert response.status_code == 500
    payload = response.get_json()
    assert payload["status"] == "error"
    assert "no 32-bit prime" in payload["message"]


def test_run_batch_reports_keygen_failure(client, failing_keygen):
    response = client.post("/run_batch", json={"bits": 64, "count": 3})
    assert response.status_code == 500
    assert response.get_json()["status"] == "error"
