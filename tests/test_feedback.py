import pytest

from conftest import days_from_today


@pytest.fixture
def concert(make_concert):
    return make_concert(name="Rated Show")


@pytest.fixture
def attendee(make_attendee):
    return make_attendee(name="Robin")


@pytest.mark.parametrize("rating", [0, 6])
def test_rating_out_of_range_rejected(client, concert, attendee, rating):
    response = client.post(
        "/api/feedback", json={"concertId": concert["id"], "attendeeId": attendee["id"], "rating": rating}
    )

    assert response.status_code == 400


@pytest.mark.parametrize("rating", [1, 5])
def test_rating_bounds_accepted(client, concert, attendee, rating):
    response = client.post(
        "/api/feedback",
        json={"concertId": concert["id"], "attendeeId": attendee["id"], "rating": rating, "comments": "Loud"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["rating"] == rating
    assert body["comments"] == "Loud"
    assert body["concertName"] == "Rated Show"
    assert body["attendeeName"] == "Robin"
    assert body["createdDate"]


def test_feedback_on_completed_concert(client, make_concert, attendee):
    completed = make_concert(status="Completed", date=days_from_today(-7))

    response = client.post(
        "/api/feedback", json={"concertId": completed["id"], "attendeeId": attendee["id"], "rating": 4}
    )

    assert response.status_code == 201


def test_feedback_missing_references(client, concert, attendee):
    assert client.post(
        "/api/feedback", json={"concertId": 9999, "attendeeId": attendee["id"], "rating": 3}
    ).status_code == 404
    assert client.post(
        "/api/feedback", json={"concertId": concert["id"], "attendeeId": 9999, "rating": 3}
    ).status_code == 404


def test_concert_feedback_newest_first_and_ratings(client, concert, attendee):
    for rating in (4, 5):
        client.post("/api/feedback", json={"concertId": concert["id"], "attendeeId": attendee["id"], "rating": rating})

    listed = client.get(f"/api/feedback/concert/{concert['id']}").json()

    assert [f["rating"] for f in listed] == [5, 4]
    assert client.get(f"/api/concerts/{concert['id']}").json()["ratings"] == {"average": 4.5, "totalFeedbacks": 2}


def test_delete_feedback(client, concert, attendee):
    feedback = client.post(
        "/api/feedback", json={"concertId": concert["id"], "attendeeId": attendee["id"], "rating": 3}
    ).json()

    assert client.delete(f"/api/feedback/{feedback['id']}").status_code == 200
    assert client.get(f"/api/feedback/concert/{concert['id']}").json() == []
    assert client.delete(f"/api/feedback/{feedback['id']}").status_code == 404
