from fastapi.testclient import TestClient

from keysum_cli.server.main import app

DOGS = "Dogs run fast. Dogs bark loudly. Cats sleep all day."

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_summarize_returns_sentences_and_spans():
    response = client.post("/summarize", json={"text": DOGS, "top_words": 2})
    assert response.status_code == 200
    body = response.json()
    assert body["bulleted_summary"] == "• Dogs run fast.\n• Cats sleep all day."
    assert body["key_sentences"] == ["Dogs run fast.", "Cats sleep all day."]
    assert body["top_words"] == ["dogs", "all"]
    assert body["spans"] == [[0, 14], [33, 52]]


def test_summarize_empty_text():
    response = client.post("/summarize", json={"text": None, "top_words": 3})
    assert response.status_code == 200
    assert response.json() == {"bulleted_summary": "", "key_sentences": [], "top_words": [], "spans": []}


def test_summarize_rejects_negative_top_words():
    response = client.post("/summarize", json={"text": DOGS, "top_words": -1})
    assert response.status_code == 422


def test_locate():
    response = client.post("/locate", json={"text": "ab ab", "sentence": "ab"})
    assert response.status_code == 200
    assert response.json() == {"spans": [[0, 2], [3, 5]]}
