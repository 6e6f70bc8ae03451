# tests/test_api/test_shelves_api.py

PNG_DATA_URI = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

def test_bookshelf_lifecycle(client, sample_user, sample_book):
    created = client.post("/api/bookshelf", json={"username": "reader", "name": "Summer", "view": "public"})
    assert created.status_code == 201
    shelf = created.json()
    assert shelf["username"] == "reader"

    assert client.post("/api/bookshelf", json={"username": "reader", "name": "Summer", "view": "public"}).status_code == 409
    assert client.post("/api/bookshelf", json={"username": "ghost", "name": "Other", "view": "public"}).status_code == 404
    assert client.post("/api/bookshelf", json={"username": "reader", "name": "Other", "view": "friends"}).status_code == 400

    assert [s["name"] for s in client.get("/api/bookshelf/username/reader").json()] == ["Summer"]
    assert [s["name"] for s in client.get("/api/bookshelf/view/public").json()] == ["Summer"]
    assert client.get("/api/bookshelf/name/Summer").json()["id"] == shelf["id"]

    entry = client.post("/api/bookshelfBooks", json={"book_id": sample_book.id, "bookshelf_id": shelf["id"]})
    assert entry.status_code == 201
    assert len(client.get(f"/api/bookshelfBooks/bookshelf/{shelf['id']}").json()) == 1

    renamed = client.put(f"/api/bookshelf/{shelf['id']}", json={"name": "Winter", "view": "private"})
    assert renamed.json()["view"] == "private"

    assert client.delete(f"/api/bookshelf/{shelf['id']}").status_code == 200
    assert client.get("/api/bookshelfBooks").json() == []

def test_book_genre_links(client, sample_book, sample_genre):
    other = client.post("/api/genres", json={"name": "Horror"}).json()

    assert client.post("/api/bookGenres", json={"book_id": sample_book.id, "genre_id": sample_genre.id}).status_code == 409
    assert client.post("/api/bookGenres", json={"book_id": sample_book.id, "genre_id": 0}).status_code == 400

    moved = client.put(
        f"/api/bookGenres/{sample_book.id}/{sample_genre.id}",
        json={"book_id": sample_book.id, "genre_id": other["id"]}
    )
    assert moved.status_code == 200
    assert client.get(f"/api/books/id/{sample_book.id}").json()["genres"] == ["Horror"]

    assert client.delete(f"/api/bookGenres/{sample_book.id}/{other['id']}").status_code == 200
    assert client.get(f"/api/bookGenres/book/{sample_book.id}").json() == []

def test_images(client, sample_book):
    created = client.post("/api/images", json={"image_front": PNG_DATA_URI})
    assert created.status_code == 201
    image = created.json()
    assert image["image_front"] == PNG_DATA_URI
    assert image["image_side"] is None

    bad = client.post("/api/images", json={"image_front": "not base64!"})
    assert bad.status_code == 400
    assert bad.json() == {"message": "Invalid Base64 image format"}

    assert client.get(f"/api/images/id/{image['id']}").status_code == 200
    assert client.delete(f"/api/images/{image['id']}").status_code == 200
    assert client.get("/api/images").json() == []
