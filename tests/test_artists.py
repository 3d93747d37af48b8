def test_create_artist_with_manager(client, make_staff):
    manager = make_staff(name="Morgan", role="Manager")

    response = client.post(
        "/api/artists",
        json={
            "name": "The Echoes",
            "genre": "Indie",
            "contactInfo": "echoes@example.com",
            "socialMediaLink": "https://social.example.com/echoes",
            "managerId": manager["staffId"],
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["socialMediaLink"] == "https://social.example.com/echoes"
    assert body["manager"] == {"managerId": manager["staffId"], "name": "Morgan", "role": "Manager"}


def test_create_artist_without_manager(make_artist):
    assert make_artist()["manager"] is None


def test_create_artist_unknown_manager(client):
    response = client.post(
        "/api/artists",
        json={"name": "Solo", "genre": "Jazz", "contactInfo": "solo@example.com", "managerId": 999},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Specified manager not found"


def test_list_artists_ordered_by_name(client, make_artist):
    make_artist(name="Zephyr")
    make_artist(name="Aurora")

    assert [a["name"] for a in client.get("/api/artists").json()] == ["Aurora", "Zephyr"]


def test_delete_artist(client, make_artist, make_concert):
    free = make_artist()
    booked = make_artist()
    make_concert(artistId=booked["artistId"])

    assert client.delete(f"/api/artists/{free['artistId']}").status_code == 200
    assert client.delete(f"/api/artists/{free['artistId']}").status_code == 404
    assert client.delete(f"/api/artists/{booked['artistId']}").status_code == 409
