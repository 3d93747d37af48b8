from conftest import days_from_today


def test_buy_ticket(make_concert, make_venue, make_attendee, buy_ticket):
    venue = make_venue(name="Blue Hall", location="Harbor")
    concert = make_concert(name="Nova Live", price=45, time="21:00", venueId=venue["venueId"])
    attendee = make_attendee()

    response = buy_ticket(concert["id"], attendee["id"])

    assert response.status_code == 201
    ticket = response.json()
    assert ticket["price"] == 45
    assert ticket["status"] == "ACTIVE"
    assert ticket["purchaseDate"]
    assert ticket["concert"] == {
        "id": concert["id"],
        "name": "Nova Live",
        "date": concert["date"],
        "time": "21:00",
        "venue": {"name": "Blue Hall", "location": "Harbor"},
    }


def test_ticket_price_override(make_concert, make_attendee, buy_ticket):
    concert = make_concert(price=45)

    response = buy_ticket(concert["id"], make_attendee()["id"], price=30)

    assert response.json()["price"] == 30


def test_sold_out_at_limit(client, make_concert, make_attendee, buy_ticket):
    concert = make_concert(ticketSalesLimit=2)
    attendee = make_attendee()

    assert buy_ticket(concert["id"], attendee["id"]).status_code == 201
    # one seat left
    assert buy_ticket(concert["id"], attendee["id"]).status_code == 201

    rejected = buy_ticket(concert["id"], attendee["id"])
    assert rejected.status_code == 400
    assert rejected.json()["detail"] == "Concert is sold out"
    assert buy_ticket(concert["id"], attendee["id"]).status_code == 400

    details = client.get(f"/api/concerts/{concert['id']}").json()
    assert details["ticketsSold"] == 2
    assert details["remainingCapacity"] == 0


def test_deleting_a_ticket_frees_a_seat(client, make_concert, make_attendee, buy_ticket):
    concert = make_concert(ticketSalesLimit=1)
    attendee = make_attendee()
    ticket = buy_ticket(concert["id"], attendee["id"]).json()
    assert buy_ticket(concert["id"], attendee["id"]).status_code == 400

    assert client.delete(f"/api/tickets/{ticket['id']}").status_code == 200

    assert buy_ticket(concert["id"], attendee["id"]).status_code == 201


def test_only_scheduled_concerts_sell_tickets(make_concert, make_attendee, buy_ticket):
    canceled = make_concert(status="Canceled")

    response = buy_ticket(canceled["id"], make_attendee()["id"])

    assert response.status_code == 400


def test_missing_concert_or_attendee(make_concert, make_attendee, buy_ticket):
    concert = make_concert()
    attendee = make_attendee()

    missing_concert = buy_ticket(9999, attendee["id"])
    missing_attendee = buy_ticket(concert["id"], 9999)

    assert missing_concert.status_code == 404
    assert missing_concert.json()["detail"] == "Concert not found"
    assert missing_attendee.status_code == 404
    assert missing_attendee.json()["detail"] == "Attendee not found"


def test_tickets_by_attendee_newest_concert_first(client, make_concert, make_attendee, buy_ticket):
    attendee = make_attendee()
    soon = make_concert(name="Soon", date=days_from_today(3))
    later = make_concert(name="Later", date=days_from_today(90))
    buy_ticket(soon["id"], attendee["id"])
    buy_ticket(later["id"], attendee["id"])
    buy_ticket(soon["id"], make_attendee()["id"])

    tickets = client.get(f"/api/tickets/attendee/{attendee['id']}").json()

    assert [t["concert"]["name"] for t in tickets] == ["Later", "Soon"]


def test_ticket_for_concert_and_attendee(client, make_concert, make_attendee, buy_ticket):
    concert = make_concert()
    attendee = make_attendee()
    ticket = buy_ticket(concert["id"], attendee["id"]).json()

    response = client.get(f"/api/tickets/concert/{concert['id']}/attendee/{attendee['id']}")

    assert response.status_code == 200
    assert response.json()["id"] == ticket["id"]
    assert client.get(f"/api/tickets/concert/{concert['id']}/attendee/9999").status_code == 404


def test_delete_unknown_ticket(client):
    assert client.delete("/api/tickets/9999").status_code == 404
