"""Test the /books endpoints end to end."""


def test_list_books_returns_seed(client):
    resp = client.get("/books")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == 2
    assert data[0] == {
        "id": 1,
        "title": "The Great Gatsby",
        "author_id": 1,
        "category_id": 1,
        "published_year": 1925,
    }


def test_get_book_by_id(client):
    resp = client.get("/books/1")
    assert resp.status_code == 200
    assert resp.json()["id"] == 1


def test_get_missing_book_returns_empty_object(client):
    resp = client.get("/books/999")
    assert resp.status_code == 200
    assert resp.json() == {}


def test_get_book_with_odd_ids(client):
    assert client.get("/books/abc").json() == {}
    assert client.get("/books/0").json() == {}
    assert client.get("/books/-1").json() == {}
    assert client.get("/books/1.99").json()["id"] == 1


def test_create_book_assigns_next_id(client):
    resp = client.post(
        "/books",
        json={"title": "1984", "author_id": 1, "category_id": 1, "published_year": 1949},
    )
    assert resp.status_code == 201
    assert resp.json() == {"id": 3, "title": "1984", "author_id": 1, "category_id": 1, "published_year": 1949}
    assert len(client.get("/books").json()) == 3


def test_create_book_accepts_incomplete_data(client):
    resp = client.post("/books", json={"title": "Incomplete"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 3, "title": "Incomplete"}


def test_create_book_without_body(client):
    resp = client.post("/books")
    assert resp.status_code == 201
    assert resp.json() == {"id": 3}


def test_create_book_stores_unparsable_numbers_as_null(client):
    resp = client.post("/books", json={"title": "T", "author_id": "x", "published_year": "2001 edition"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["author_id"] is None
    assert body["published_year"] == 2001


def test_multiple_creates_get_consecutive_ids(client):
    first = client.post("/books", json={"title": "Book A"}).json()
    second = client.post("/books", json={"title": "Book B"}).json()
    assert (first["id"], second["id"]) == (3, 4)


def test_put_updates_existing_book(client):
    resp = client.put("/books/1", json={"title": "Updated Title", "published_year": 2024})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Updated Title"
    assert resp.json()["published_year"] == 2024


def test_put_partial_update_keeps_other_fields(client):
    resp = client.put("/books/1", json={"title": "X"})
    assert resp.status_code == 200
    assert resp.json()["published_year"] == 1925
    assert resp.json()["author_id"] == 1


def test_put_skips_falsy_values(client):
    resp = client.put("/books/1", json={"published_year": 0, "title": ""})
    assert resp.status_code == 200
    assert resp.json()["published_year"] == 1925
    assert resp.json()["title"] == "The Great Gatsby"


def test_put_creates_book_under_given_id(client):
    resp = client.put(
        "/books/999",
        json={"title": "New via PUT", "author_id": 1, "category_id": 1, "published_year": 2023},
    )
    assert resp.status_code == 200
    assert resp.json()["id"] == 999
    assert resp.json()["title"] == "New via PUT"
    # The counter only moves on POST.
    assert client.post("/books", json={"title": "Next"}).json()["id"] == 3


def test_put_with_unparsable_id_creates_null_id_record(client):
    resp = client.put("/books/abc", json={"title": "Orphan"})
    assert resp.status_code == 200
    assert resp.json() == {"id": None, "title": "Orphan"}
    assert len(client.get("/books").json()) == 3


def test_delete_book(client):
    resp = client.delete("/books/1")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get("/books/1").json() == {}


def test_delete_missing_book_still_204(client):
    assert client.delete("/books/999").status_code == 204
    assert client.delete("/books/999").status_code == 204
    assert len(client.get("/books").json()) == 2


def test_updating_one_book_does_not_touch_others(client):
    before = client.get("/books/2").json()
    client.put("/books/1", json={"title": "Updated"})
    assert client.get("/books/2").json() == before


def test_creating_book_does_not_affect_other_collections(client):
    authors_before = client.get("/authors").json()
    categories_before = client.get("/categories").json()
    client.post("/books", json={"title": "New Book", "author_id": 1, "category_id": 1, "published_year": 2023})
    assert client.get("/authors").json() == authors_before
    assert client.get("/categories").json() == categories_before


def test_book_may_reference_missing_author(client):
    resp = client.post("/books", json={"title": "Ghost", "author_id": 404, "category_id": 404})
    assert resp.status_code == 201
    assert resp.json()["author_id"] == 404


def test_create_book_with_form_body_reads_no_fields(client):
    resp = client.post(
        "/books",
        content=b"title=x",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 201
    assert resp.json() == {"id": 3}


def test_create_book_with_json_array_reads_no_fields(client):
    resp = client.post("/books", json=[1, 2])
    assert resp.status_code == 201
    assert resp.json() == {"id": 3}


def test_create_book_with_charset_json_body(client):
    resp = client.post(
        "/books",
        content=b'{"title": "Dune", "published_year": "1965"}',
        headers={"Content-Type": "application/json; charset=utf-8"},
    )
    assert resp.status_code == 201
    assert resp.json() == {"id": 3, "title": "Dune", "published_year": 1965}


def test_put_book_with_array_body_changes_nothing(client):
    resp = client.put("/books/1", json=["title", "X"])
    assert resp.status_code == 200
    assert resp.json()["title"] == "The Great Gatsby"


def test_malformed_json_body_is_bad_request(client):
    resp = client.post("/books", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert len(client.get("/books").json()) == 2


def test_trailing_slash_paths_are_served(client):
    resp = client.get("/books/", follow_redirects=False)
    assert resp.status_code == 200
    assert len(resp.json()) == 2

    resp = client.get("/books/1/", follow_redirects=False)
    assert resp.status_code == 200
    assert resp.json()["id"] == 1

    resp = client.post("/books/", json={"title": "Slashed"}, follow_redirects=False)
    assert resp.status_code == 201
    assert resp.json()["id"] == 3
