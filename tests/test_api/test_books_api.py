# tests/test_api/test_books_api.py

from core.sa.models import Author

def book_payload(**overrides):
    payload = {
        "title": "The Hobbit",
        "isbn": "9780547928227",
        "language": "English",
        "first_name": "Jane",
        "last_name": "Doe",
        "page_count": 300,
        "description": "There and back again",
        "date_published": "1937-09-21",
        "genres": ["Fantasy", "Adventure"]
    }
    payload.update(overrides)
    return payload

def test_root_welcome(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()

def test_unknown_endpoint(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"message": "Endpoint not found"}

def test_create_and_get_book(client):
    response = client.post("/api/books", json=book_payload())

    assert response.status_code == 201
    book = response.json()
    assert book["author"]["first_name"] == "Jane"
    assert sorted(book["genres"]) == ["Adventure", "Fantasy"]

    fetched = client.get(f"/api/books/id/{book['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["date_published"] == "1937-09-21"

def test_two_books_by_jane_doe_share_an_author(client, db_session):
    first = client.post("/api/books", json=book_payload(title="One", isbn="111")).json()
    second = client.post("/api/books", json=book_payload(title="Two", isbn="222")).json()

    assert first["author"]["id"] == second["author"]["id"]
    assert db_session.query(Author).count() == 1
    assert len(client.get("/api/books").json()) == 2

def test_update_replaces_genres(client):
    book = client.post("/api/books", json=book_payload(genres=["A", "B"])).json()

    response = client.put(f"/api/books/{book['id']}", json=book_payload(genres=["C"]))

    assert response.status_code == 200
    assert response.json()["genres"] == ["C"]

def test_duplicate_isbn_is_conflict(client):
    client.post("/api/books", json=book_payload())
    response = client.post("/api/books", json=book_payload(title="Again"))

    assert response.status_code == 409
    assert "already exists" in response.json()["message"]

def test_missing_required_field_is_400(client):
    payload = book_payload()
    del payload["isbn"]
    response = client.post("/api/books", json=payload)

    assert response.status_code == 400
    assert "isbn" in response.json()["message"]

def test_search_and_title_lookup(client):
    client.post("/api/books", json=book_payload())

    assert len(client.get("/api/books/keyword/hob").json()) == 1
    assert len(client.get("/api/books/keyword/adventure").json()) == 1
    assert client.get("/api/books/title/The Hobbit").status_code == 200
    assert client.get("/api/books/title/Unknown").status_code == 404

def test_delete_book(client):
    book = client.post("/api/books", json=book_payload()).json()

    assert client.delete(f"/api/books/{book['id']}").status_code == 200
    assert client.get(f"/api/books/id/{book['id']}").status_code == 404
    assert client.delete(f"/api/books/{book['id']}").status_code == 404

def test_author_delete_blocked_while_books_exist(client):
    book = client.post("/api/books", json=book_payload()).json()
    author_id = book["author"]["id"]

    response = client.delete(f"/api/authors/{author_id}")
    assert response.status_code == 400
    assert response.json() == {"message": "Cannot delete author; related records exist."}

    client.delete(f"/api/books/{book['id']}")
    assert client.delete(f"/api/authors/{author_id}").status_code == 200

def test_genre_delete_blocked_while_linked(client):
    book = client.post("/api/books", json=book_payload(genres=["Fantasy"])).json()
    genre = client.get("/api/genres/name/Fantasy").json()

    response = client.delete(f"/api/genres/{genre['id']}")
    assert response.status_code == 400
    assert "related records exist" in response.json()["message"]
    assert client.get(f"/api/genres/id/{genre['id']}").status_code == 200
    assert book["genres"] == ["Fantasy"]

def test_author_crud(client):
    created = client.post("/api/authors", json={"first_name": "Ann", "last_name": "Leckie"})
    assert created.status_code == 201
    author_id = created.json()["id"]

    assert client.post("/api/authors", json={"first_name": "Ann", "last_name": "Leckie"}).status_code == 409
    assert client.post("/api/authors", json={"first_name": "", "last_name": "Leckie"}).status_code == 400
    assert client.get("/api/authors/name/Leckie").json()[0]["id"] == author_id

    updated = client.put(f"/api/authors/{author_id}", json={"first_name": "Anne", "last_name": "Leckie"})
    assert updated.json()["first_name"] == "Anne"
    assert client.put("/api/authors/999", json={"first_name": "A", "last_name": "B"}).status_code == 404

def test_genre_crud(client):
    created = client.post("/api/genres", json={"name": "Poetry"}).json()

    assert client.post("/api/genres", json={"name": "Poetry"}).status_code == 409
    assert client.put(f"/api/genres/{created['id']}", json={"name": "Verse"}).json()["name"] == "Verse"
    assert client.delete(f"/api/genres/{created['id']}").status_code == 200
    assert client.get("/api/genres").json() == []
