"""
Booking API Routes Tests

Tests booking submission, validation at the boundary, and listing bookings
for the logged-in caller.
"""
from helpers import fetch_rows, login, signup


def _stored_bookings():
    return fetch_rows("SELECT email, hall, aadhar_number, booking_ref FROM bookings ORDER BY id")


# ============================================================================
# SUBMISSION TESTS
# ============================================================================
class TestSubmitBooking:
    """Test /submit-form"""

    def test_submit_success(self, client, booking_payload):
        response = client.post("/submit-form", json=booking_payload)

        assert response.status_code == 200
        assert response.json() == {"message": "Booking registered successfully!", "ok": True}
        assert _stored_bookings() == [("a@x.com", "HALL-A", "123456789012", "BID-001")]

    def test_submit_does_not_require_login(self, client, booking_payload):
        assert client.get("/is-logged-in").json() == {"loggedIn": False}

        response = client.post("/submit-form", json=booking_payload)

        assert response.status_code == 200

    def test_duplicate_submissions_are_kept(self, client, booking_payload):
        client.post("/submit-form", json=booking_payload)
        client.post("/submit-form", json=booking_payload)

        assert len(_stored_bookings()) == 2

    def test_optional_fields_may_be_omitted(self, client):
        response = client.post("/submit-form", json={
            "fullName": "Bob",
            "email": "b@x.com",
            "eventDate": "2026-11-02",
            "event": "Seminar",
            "hall": "HALL-C",
        })

        assert response.status_code == 200

    def test_missing_required_field_rejected(self, client, booking_payload):
        del booking_payload["hall"]

        response = client.post("/submit-form", json=booking_payload)

        assert response.status_code == 422
        data = response.json()
        assert data["ok"] is False
        assert data["message"] == "Invalid request body."
        assert any("hall" in error["loc"] for error in data["errors"])
        assert _stored_bookings() == []

    def test_bad_age_rejected(self, client, booking_payload):
        booking_payload["age"] = "old"

        response = client.post("/submit-form", json=booking_payload)

        assert response.status_code == 422
        assert _stored_bookings() == []

    def test_bad_date_rejected(self, client, booking_payload):
        booking_payload["eventDate"] = "next tuesday"

        response = client.post("/submit-form", json=booking_payload)

        assert response.status_code == 422

    def test_bad_aadhar_rejected(self, client, booking_payload):
        booking_payload["aadharNumber"] = "12345"

        response = client.post("/submit-form", json=booking_payload)

        assert response.status_code == 422

    def test_unknown_field_rejected(self, client, booking_payload):
        booking_payload["isAdmin"] = True

        response = client.post("/submit-form", json=booking_payload)

        assert response.status_code == 422
        assert _stored_bookings() == []


# ============================================================================
# LISTING TESTS
# ============================================================================
class TestListBookings:
    """Test /bookings"""

    def test_own_bookings_returned(self, client, booking_payload):
        client.post("/submit-form", json=booking_payload)
        client.post("/submit-form", json={**booking_payload, "hall": "HALL-B", "BID": "BID-002"})
        signup(client)
        login(client)

        response = client.post("/bookings", json={"email": "a@x.com"})

        assert response.status_code == 200
        data = response.json()
        assert [b["hall"] for b in data] == ["HALL-A", "HALL-B"]
        first = data[0]
        assert first["fullName"] == "Alice Example"
        assert first["aadharNumber"] == "123456789012"
        assert first["eventDate"] == "2026-12-20"
        assert first["BID"] == "BID-001"
        assert first["age"] == 31
        assert "id" in first and "createdAt" in first

    def test_other_users_bookings_not_returned(self, client, booking_payload):
        client.post("/submit-form", json=booking_payload)
        client.post("/submit-form", json={**booking_payload, "email": "b@x.com"})
        signup(client)
        login(client)

        data = client.post("/bookings", json={"email": "a@x.com"}).json()

        assert {b["email"] for b in data} == {"a@x.com"}

    def test_no_bookings_is_404(self, client):
        signup(client)
        login(client)

        response = client.post("/bookings", json={"email": "a@x.com"})

        assert response.status_code == 404
        assert response.json() == {"message": "No bookings found"}

    def test_anonymous_is_unauthorized(self, client, booking_payload):
        client.post("/submit-form", json=booking_payload)

        response = client.post("/bookings", json={"email": "a@x.com"})

        assert response.status_code == 403
        assert response.json() == {"message": "Unauthorized access"}

    def test_other_registered_email_is_unauthorized(self, client, booking_payload):
        client.post("/submit-form", json={**booking_payload, "email": "b@x.com"})
        signup(client, email="a@x.com")
        signup(client, email="b@x.com", username="bob", password="pw2")
        login(client, email="a@x.com")

        response = client.post("/bookings", json={"email": "b@x.com"})

        assert response.status_code == 403

    def test_other_client_cannot_ride_on_login(self, client, other_client, booking_payload):
        """A login on one client grants nothing to a different client"""
        client.post("/submit-form", json=booking_payload)
        signup(client)
        login(client)

        response = other_client.post("/bookings", json={"email": "a@x.com"})

        assert response.status_code == 403

    def test_unauthorized_after_logout(self, client, booking_payload):
        client.post("/submit-form", json=booking_payload)
        signup(client)
        login(client)
        assert client.post("/bookings", json={"email": "a@x.com"}).status_code == 200

        client.post("/logout")

        assert client.post("/bookings", json={"email": "a@x.com"}).status_code == 403

    def test_email_lookup_ignores_case(self, client, booking_payload):
        client.post("/submit-form", json={**booking_payload, "email": "A@X.com"})
        signup(client)
        login(client)

        response = client.post("/bookings", json={"email": "a@X.COM"})

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_missing_email_rejected(self, client):
        response = client.post("/bookings", json={})

        assert response.status_code == 422


# ============================================================================
# END-TO-END SCENARIO
# ============================================================================
def test_signup_login_list_logout_scenario(client, booking_payload):
    assert signup(client, "a@x.com", "alice", "pw1").status_code == 200
    assert signup(client, "a@x.com", "alice2", "pw2").status_code == 400

    login_response = login(client, "a@x.com", "pw1")
    assert login_response.status_code == 200
    assert login_response.json()["success"] is True

    assert client.post("/bookings", json={"email": "a@x.com"}).status_code == 404

    client.post("/submit-form", json=booking_payload)
    assert client.post("/bookings", json={"email": "a@x.com"}).status_code == 200

    assert client.post("/logout").status_code == 200
    assert client.get("/is-logged-in").json() == {"loggedIn": False}
