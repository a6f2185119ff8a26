"""Tests for the roster endpoints, the info page and app-level plumbing."""


class TestUsers:
    def test_lists_every_user(self, client, api_roster):
        resp = client.get("/users")
        assert resp.status_code == 200
        payload = resp.json()
        assert payload["status"] == "success"
        assert payload["data"] == [
            {"id": api_roster["ada"], "name": "Ada", "team_id": api_roster["platform"]},
            {"id": api_roster["grace"], "name": "Grace", "team_id": api_roster["platform"]},
            {"id": api_roster["linus"], "name": "Linus", "team_id": api_roster["design"]},
        ]

    def test_empty_store_is_rejected(self, client):
        resp = client.get("/users")
        assert resp.status_code == 400
        assert resp.json() == {"status": "failed", "message": "response is empty"}


class TestTeams:
    def test_team_name(self, client, api_roster):
        resp = client.get(f"/teamname/{api_roster['design']}")
        assert resp.status_code == 200
        assert resp.json()["data"] == {"id": api_roster["design"], "name": "Design"}

    def test_unknown_team_name(self, client, api_roster):
        resp = client.get("/teamname/999999")
        assert resp.status_code == 400
        assert resp.json()["message"] == "response is empty"

    def test_members(self, client, api_roster):
        resp = client.get(f"/teams/members/{api_roster['platform']}")
        assert resp.status_code == 200
        assert [user["name"] for user in resp.json()["data"]] == ["Ada", "Grace"]

    def test_members_of_empty_team(self, client, api_roster):
        resp = client.get("/teams/members/999999")
        assert resp.status_code == 400

    def test_non_integer_path_parameter(self, client, api_roster):
        resp = client.get("/teams/members/platform")
        assert resp.status_code == 400
        payload = resp.json()
        assert payload["status"] == "failed"
        assert "team_id" in payload["message"]


class TestPlumbing:
    def test_info_page(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "/standups/next/{team_id}" in resp.text

    def test_cors_headers(self, client, api_roster):
        resp = client.get("/users", headers={"Origin": "https://dashboard.example.com"})
        assert resp.headers.get("access-control-allow-origin") in {"*", "https://dashboard.example.com"}
