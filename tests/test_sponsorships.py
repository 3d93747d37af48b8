def sponsor_payload(concert_id, **overrides):
    payload = {"name": "Acme Corp", "contactInfo": "partners@acme.example.com", "contributionAmt": 2500, "concertId": concert_id}
    payload.update(overrides)
    return payload


def test_create_sponsorship(client, make_concert):
    concert = make_concert(name="Sponsored Night")

    response = client.post("/api/sponsorships", json=sponsor_payload(concert["id"]))

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Acme Corp"
    assert body["contributionAmt"] == 2500
    assert body["concert"] == {"id": concert["id"], "name": "Sponsored Night", "date": concert["date"]}
    assert "sponsorId" in body


def test_sponsorship_validation(client, make_concert):
    concert = make_concert()

    assert client.post("/api/sponsorships", json=sponsor_payload(concert["id"], contributionAmt=0)).status_code == 400
    assert client.post("/api/sponsorships", json=sponsor_payload(9999)).status_code == 404


def test_list_sponsorships(client, make_concert):
    first = make_concert()
    second = make_concert()
    client.post("/api/sponsorships", json=sponsor_payload(first["id"], name="One"))
    client.post("/api/sponsorships", json=sponsor_payload(second["id"], name="Two"))

    assert [s["name"] for s in client.get("/api/sponsorships").json()] == ["One", "Two"]
    assert [s["name"] for s in client.get(f"/api/sponsorships/concert/{second['id']}").json()] == ["Two"]


def test_delete_sponsorship(client, make_concert):
    sponsorship = client.post("/api/sponsorships", json=sponsor_payload(make_concert()["id"])).json()

    assert client.delete(f"/api/sponsorships/{sponsorship['sponsorId']}").status_code == 200
    assert client.delete(f"/api/sponsorships/{sponsorship['sponsorId']}").status_code == 404


def test_concert_delete_removes_sponsorships(client, make_concert):
    concert = make_concert()
    client.post("/api/sponsorships", json=sponsor_payload(concert["id"]))

    client.delete(f"/api/concerts/{concert['id']}")

    assert client.get("/api/sponsorships").json() == []
