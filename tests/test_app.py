import time

import pytest

from engine import AnimationController
from main import create_app
from ui import FrameRenderer


@pytest.fixture
def controller():
    return AnimationController(renderer=FrameRenderer(), values=[5, 3, 8, 1], sleep=lambda s: None)


@pytest.fixture
def client(controller):
    app = create_app(controller=controller, run_in_thread=False)
    app.config["TESTING"] = True
    return app.test_client()


def test_index_page(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "Sorting Algorithm Visualizer" in body
    for label in ("Bubble Sort", "Selection Sort", "Insertion Sort", "Merge Sort", "Quick Sort", "Heap Sort"):
        assert label in body
    assert 'data-value="8"' in body


def test_state(client):
    data = client.get("/api/state").get_json()
    assert data["values"] == [5, 3, 8, 1]
    assert data["running"] is False
    assert data["speed"] == 5
    assert data["svg"].startswith("<svg")
    assert data["stats"]["comparisons"] == 0


def test_algorithms(client):
    data = client.get("/api/algorithms").get_json()
    assert [a["key"] for a in data["algorithms"]] == ["bubble", "selection", "insertion", "merge", "quick", "heap"]

    one = client.get("/api/algorithms/merge").get_json()
    assert one["stable"] is True
    assert "code-line" in one["pseudocode"]
    assert client.get("/api/algorithms/bogo").status_code == 404


def test_run_then_reset(client):
    res = client.post("/api/run", json={"algorithm": "bubble"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["values"] == [1, 3, 5, 8]
    assert data["stats"]["comparisons"] == 6
    assert data["stats"]["swaps"] == 4
    assert data["controls_enabled"] is True
    assert data["markers"] == {str(i): ["sorted"] for i in range(4)}

    data = client.post("/api/reset").get_json()
    assert data["values"] == [5, 3, 8, 1]
    assert data["stats"]["comparisons"] == 0


def test_run_unknown_algorithm(client):
    res = client.post("/api/run", json={"algorithm": "bogo"})
    assert res.status_code == 400
    assert "Unknown algorithm" in res.get_json()["error"]


def test_generate_with_size(client):
    data = client.post("/api/generate", json={"size": 500}).get_json()
    assert len(data["values"]) == 100
    assert data["size"] == 100

    data = client.post("/api/generate", json={"size": "lots"}).get_json()
    assert len(data["values"]) == 100


def test_config(client):
    assert client.post("/api/config/speed", json={"speed": 0}).get_json() == {"speed": 1, "delay_ms": 500}
    assert client.post("/api/config/speed", json={"speed": "fast"}).get_json()["speed"] == 1
    data = client.post("/api/config/size", json={"size": 7}).get_json()
    assert data["size"] == 7
    assert len(data["values"]) == 7


def test_load(client):
    data = client.post("/api/load", json={"values": [4, 0, 2]}).get_json()
    assert data["values"] == [4, 0, 2]
    assert data["size"] == 3
    assert client.post("/api/load", json={"values": [1, -2]}).status_code == 400
    assert client.post("/api/load", json={"values": "1,2"}).status_code == 400


def test_compare(client):
    res = client.post("/api/compare", json={"left": "bubble", "right": "merge"})
    data = res.get_json()
    assert data["comparison"]["left"]["comparisons"] == 6
    assert data["comparison"]["right"]["algo_label"] == "Merge Sort"
    assert "Bubble Sort vs Merge Sort" in data["html"]
    assert client.post("/api/compare", json={"left": "bubble", "right": "bogo"}).status_code == 400


def test_busy_while_running(gate):
    controller = AnimationController(renderer=FrameRenderer(), values=[3, 2, 1], sleep=gate)
    client = create_app(controller=controller).test_client()

    res = client.post("/api/run", json={"algorithm": "heap"})
    assert res.status_code == 202
    assert res.get_json()["running"] is True

    assert client.post("/api/run", json={"algorithm": "quick"}).status_code == 409
    assert client.post("/api/generate").status_code == 409
    assert client.post("/api/reset").status_code == 409
    assert client.post("/api/load", json={"values": [1]}).status_code == 409
    # reads still work while a run is active
    assert client.get("/api/state").get_json()["running"] is True
    assert client.post("/api/compare", json={"left": "bubble", "right": "heap"}).status_code == 200

    gate.open()
    deadline = time.monotonic() + 5
    while controller.is_running and time.monotonic() < deadline:
        time.sleep(0.01)

    data = client.get("/api/state").get_json()
    assert data["running"] is False
    assert data["values"] == [1, 2, 3]
