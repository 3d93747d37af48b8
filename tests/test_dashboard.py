from conftest import days_from_today


def test_dashboard_unknown_attendee(client):
    assert client.get("/api/concerts/attendee/9999/dashboard").status_code == 404


def test_empty_dashboard(client, make_attendee):
    attendee = make_attendee(name="Quiet")

    body = client.get(f"/api/concerts/attendee/{attendee['id']}/dashboard").json()

    assert body == {
        "attendee": {
            "name": "Quiet",
            "loyaltyPoints": 0,
            "totalTickets": 0,
            "totalSpent": 0,
            "totalReviews": 0,
            "favoriteGenre": None,
        },
        "upcomingConcerts": [],
        "pastConcerts": [],
    }


def test_dashboard_splits_upcoming_and_past(client, make_concert, make_artist, make_venue, make_attendee, buy_ticket):
    attendee = make_attendee(name="Jordan")
    rock = make_artist(genre="Rock")
    venue = make_venue(name="Pier", location="Bay")
    upcoming = make_concert(name="Next Week", date=days_from_today(7), artistId=rock["artistId"], price=40)
    past = make_concert(
        name="Last Month", date=days_from_today(-30), artistId=rock["artistId"], venueId=venue["venueId"], price=25
    )
    buy_ticket(upcoming["id"], attendee["id"])
    buy_ticket(past["id"], attendee["id"])
    client.post(
        "/api/feedback",
        json={"concertId": past["id"], "attendeeId": attendee["id"], "rating": 5, "comments": "Great set"},
    )

    body = client.get(f"/api/concerts/attendee/{attendee['id']}/dashboard").json()

    assert body["attendee"]["totalTickets"] == 2
    assert body["attendee"]["totalSpent"] == 65
    assert body["attendee"]["totalReviews"] == 1
    assert body["attendee"]["favoriteGenre"] == "Rock"

    assert [c["concert"]["name"] for c in body["upcomingConcerts"]] == ["Next Week"]
    assert "feedback" not in body["upcomingConcerts"][0]

    [past_entry] = body["pastConcerts"]
    assert past_entry["concert"]["name"] == "Last Month"
    assert past_entry["venue"] == {"name": "Pier", "location": "Bay"}
    assert past_entry["artist"]["genre"] == "Rock"
    assert past_entry["ticketStatus"] == "ACTIVE"
    assert past_entry["price"] == 25
    assert past_entry["feedback"] == {"rating": 5, "comment": "Great set"}


def test_concert_today_counts_as_upcoming(client, make_concert, make_attendee, buy_ticket):
    attendee = make_attendee()
    buy_ticket(make_concert(date=days_from_today(0))["id"], attendee["id"])

    body = client.get(f"/api/concerts/attendee/{attendee['id']}/dashboard").json()

    assert len(body["upcomingConcerts"]) == 1
    assert body["pastConcerts"] == []


def test_past_concert_without_feedback(client, make_concert, make_attendee, buy_ticket):
    attendee = make_attendee()
    buy_ticket(make_concert(date=days_from_today(-2))["id"], attendee["id"])

    body = client.get(f"/api/concerts/attendee/{attendee['id']}/dashboard").json()

    assert body["pastConcerts"][0]["feedback"] is None


def test_favorite_genre_ties_break_alphabetically(client, make_concert, make_artist, make_attendee, buy_ticket):
    attendee = make_attendee()
    for genre in ("Rock", "Jazz"):
        concert = make_concert(artistId=make_artist(genre=genre)["artistId"])
        buy_ticket(concert["id"], attendee["id"])

    body = client.get(f"/api/concerts/attendee/{attendee['id']}/dashboard").json()

    assert body["attendee"]["favoriteGenre"] == "Jazz"
