"""Quote API — POST/GET /api/v1/quotes and the corpus listing.

Invariants:
    - Matches come first and are labelled "match"; backfill is labelled "random"
    - Empty corpus → 404 NO_QUOTES_FOUND with the user-facing message
    - Topic of any length → 200; non-string topic → 400 VALIDATION_ERROR
"""

from inspire_me.core.errors import NO_QUOTES_MESSAGE


async def test_post_topic_with_many_matches(client):
    res = await client.post("/api/v1/quotes", json={"topic": "life"})
    assert res.status_code == 200
    body = res.json()
    assert body["topic"] == "life"
    assert body["matched_count"] == 4
    assert [q["id"] for q in body["quotes"]] == ["3", "5", "12"]
    assert {q["source"] for q in body["quotes"]} == {"match"}


async def test_get_topic_with_partial_match_is_backfilled(client):
    res = await client.get("/api/v1/quotes", params={"topic": "Socrates"})
    assert res.status_code == 200
    quotes = res.json()["quotes"]
    assert len(quotes) == 3
    assert [q["id"] for q in quotes[:2]] == ["10", "12"]
    assert quotes[2]["source"] == "random"
    assert quotes[2]["id"] not in {"10", "12"}


async def test_post_without_topic_returns_random_quotes(client):
    res = await client.post("/api/v1/quotes", json={})
    assert res.status_code == 200
    body = res.json()
    assert body["topic"] == ""
    assert body["matched_count"] == 0
    assert len({q["id"] for q in body["quotes"]}) == 3
    assert {q["source"] for q in body["quotes"]} == {"random"}


async def test_quote_payload_shape(client):
    res = await client.post("/api/v1/quotes", json={"topic": "halfway"})
    first = res.json()["quotes"][0]
    assert first == {
        "id": "7",
        "text": "Believe you can and you're halfway there.",
        "author": "Theodore Roosevelt",
        "tags": ["belief", "motivation"],
        "source": "match",
    }


async def test_long_topic_is_accepted_by_post(client):
    res = await client.post("/api/v1/quotes", json={"topic": "x" * 5000})
    assert res.status_code == 200
    body = res.json()
    assert body["matched_count"] == 0
    assert len(body["quotes"]) == 3


async def test_long_topic_is_accepted_by_get(client):
    res = await client.get("/api/v1/quotes", params={"topic": "life" + "x" * 300})
    assert res.status_code == 200
    assert len(res.json()["quotes"]) == 3


async def test_non_string_topic_is_rejected(client):
    res = await client.post("/api/v1/quotes", json={"topic": ["life"]})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "body.topic"


async def test_empty_corpus_returns_404(client, override_corpus):
    override_corpus([])
    res = await client.post("/api/v1/quotes", json={"topic": "anything"})
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "NO_QUOTES_FOUND"
    assert error["message"] == NO_QUOTES_MESSAGE
    assert error["context"]["topic"] == "anything"


async def test_small_corpus_returns_all_quotes(client, override_corpus):
    override_corpus([
        {"id": "1", "text": "Carpe diem", "author": "Horace", "tags": ["life"]},
        {"id": "2", "text": "Hard graft", "author": "Anon", "tags": ["work"]},
    ])
    res = await client.get("/api/v1/quotes", params={"topic": "life"})
    assert [q["id"] for q in res.json()["quotes"]] == ["1", "2"]


async def test_corpus_listing(client):
    res = await client.get("/api/v1/quotes/corpus")
    assert res.status_code == 200
    body = res.json()
    assert body["count"] == 20
    assert body["quotes"][0]["id"] == "1"
    assert body["quotes"][0]["source"] is None
