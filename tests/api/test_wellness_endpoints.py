"""
API tests for the wellness endpoints.

Authorization rules: players read and write their own entries; staff need
``edit_player_data`` to submit for others, ``view_all_players`` to read,
and ``access_medical_data`` to review.
"""

import pytest

API = "/api/v1/wellness"

RATINGS = {"sleep_quality": 4, "fatigue_level": 2, "muscle_soreness": 2, "stress_level": 3, "mood": 4}
BEST = {"sleep_quality": 5, "fatigue_level": 1, "muscle_soreness": 1, "stress_level": 1, "mood": 5}


def _entry_url(player_id: int, date: str = "2026-10-12") -> str:
    return f"{API}/players/{player_id}/entries/{date}"


class TestReadinessCalculator:

    def test_empty_submission(self, client, make_user, headers):
        response = client.post(f"{API}/readiness", json={}, headers=headers(make_user("player")))
        assert response.status_code == 200
        assert response.json() == {"score": 3.0, "status": "amber"}

    def test_best_ratings(self, client, make_user, headers):
        response = client.post(f"{API}/readiness", json=BEST, headers=headers(make_user("player")))
        assert response.json() == {"score": 5.0, "status": "green"}

    def test_out_of_range_rating(self, client, make_user, headers):
        response = client.post(f"{API}/readiness", json={"mood": 6}, headers=headers(make_user("player")))
        assert response.status_code == 422


class TestSubmitEntry:

    def test_player_submits_own_entry(self, client, make_user, headers):
        player = make_user("player")
        response = client.put(_entry_url(player.id), json=RATINGS, headers=headers(player))
        assert response.status_code == 201
        body = response.json()
        assert body["readiness_score"] == 3.8
        assert body["readiness_status"] == "amber"
        assert body["entry_method"] == "player_input"
        assert body["date"] == "2026-10-12"

    def test_resubmission_updates(self, client, make_user, headers):
        player = make_user("player")
        first = client.put(_entry_url(player.id), json=RATINGS, headers=headers(player)).json()
        response = client.put(_entry_url(player.id), json=BEST, headers=headers(player))
        assert response.status_code == 200
        assert response.json()["id"] == first["id"]
        assert response.json()["readiness_score"] == 5.0

    def test_player_cannot_submit_for_teammate(self, client, make_user, headers):
        player = make_user("player")
        teammate = make_user("player")
        response = client.put(_entry_url(teammate.id), json=RATINGS, headers=headers(player))
        assert response.status_code == 403

    @pytest.mark.parametrize("role", ["head_coach", "assistant_coach", "strength_coach", "admin"])
    def test_staff_with_edit_permission_submit(self, client, make_user, headers, role):
        player = make_user("player")
        response = client.put(_entry_url(player.id), json=RATINGS, headers=headers(make_user(role)))
        assert response.status_code == 201
        assert response.json()["entry_method"] == "staff_manual"

    @pytest.mark.parametrize("role", ["physiotherapist", "analyst", "team_manager"])
    def test_staff_without_edit_permission_forbidden(self, client, make_user, headers, role):
        player = make_user("player")
        response = client.put(_entry_url(player.id), json=RATINGS, headers=headers(make_user(role)))
        assert response.status_code == 403

    def test_invalid_rating(self, client, make_user, headers):
        player = make_user("player")
        response = client.put(_entry_url(player.id), json={"sleep_quality": 0}, headers=headers(player))
        assert response.status_code == 422

    def test_unknown_soreness_area(self, client, make_user, headers):
        player = make_user("player")
        response = client.put(_entry_url(player.id), json={"soreness_areas": ["elbows"]}, headers=headers(player))
        assert response.status_code == 422

    def test_unknown_player(self, client, make_user, headers):
        response = client.put(_entry_url(9999), json=RATINGS, headers=headers(make_user("head_coach")))
        assert response.status_code == 404


class TestReadEntries:

    def test_player_reads_own(self, client, make_user, headers):
        player = make_user("player")
        client.put(_entry_url(player.id), json=RATINGS, headers=headers(player))

        response = client.get(_entry_url(player.id), headers=headers(player))
        assert response.status_code == 200
        assert response.json()["readiness_score"] == 3.8

        listing = client.get(f"{API}/players/{player.id}/entries",
                             params={"days": 7, "as_of": "2026-10-14"}, headers=headers(player))
        assert listing.status_code == 200
        assert len(listing.json()) == 1

    def test_player_cannot_read_teammate(self, client, make_user, headers):
        player = make_user("player")
        teammate = make_user("player")
        assert client.get(_entry_url(teammate.id), headers=headers(player)).status_code == 403
        assert client.get(f"{API}/players/{teammate.id}/entries", headers=headers(player)).status_code == 403

    def test_physio_reads_player(self, client, make_user, headers):
        player = make_user("player")
        client.put(_entry_url(player.id), json=RATINGS, headers=headers(player))
        response = client.get(_entry_url(player.id), headers=headers(make_user("physiotherapist")))
        assert response.status_code == 200

    def test_missing_entry(self, client, make_user, headers):
        player = make_user("player")
        assert client.get(_entry_url(player.id), headers=headers(player)).status_code == 404


class TestReview:

    def _submit(self, client, player, headers) -> dict:
        return client.put(_entry_url(player.id), json=RATINGS, headers=headers(player)).json()

    def test_physio_reviews(self, client, make_user, headers):
        player = make_user("player")
        entry = self._submit(client, player, headers)
        physio = make_user("physiotherapist")

        response = client.patch(f"{API}/entries/{entry['id']}/review",
                                json={"staff_review": "reviewed", "staff_notes": "All clear"},
                                headers=headers(physio))
        assert response.status_code == 200
        body = response.json()
        assert body["staff_review"] == "reviewed"
        assert body["reviewed_by"] == physio.id
        assert body["readiness_score"] == entry["readiness_score"]

    @pytest.mark.parametrize("role", ["player", "analyst", "strength_coach"])
    def test_review_requires_medical_access(self, client, make_user, headers, role):
        player = make_user("player")
        entry = self._submit(client, player, headers)
        response = client.patch(f"{API}/entries/{entry['id']}/review",
                                json={"staff_review": "reviewed"}, headers=headers(make_user(role)))
        assert response.status_code == 403

    def test_invalid_review_state(self, client, make_user, headers):
        player = make_user("player")
        entry = self._submit(client, player, headers)
        response = client.patch(f"{API}/entries/{entry['id']}/review",
                                json={"staff_review": "ignored"}, headers=headers(make_user("medical_staff")))
        assert response.status_code == 422


class TestTrends:

    def test_insufficient_history(self, client, make_user, headers):
        player = make_user("player")
        client.put(_entry_url(player.id), json=RATINGS, headers=headers(player))

        response = client.get(f"{API}/players/{player.id}/trends",
                              params={"period": "7day", "as_of": "2026-10-12"}, headers=headers(player))
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "insufficient_history"
        assert body["entries_count"] == 1
        assert body["trend"] is None

    def test_trend(self, client, make_user, headers):
        player = make_user("player")
        client.put(_entry_url(player.id, "2026-10-08"), json=RATINGS, headers=headers(player))
        client.put(_entry_url(player.id, "2026-10-12"), json=BEST, headers=headers(player))

        response = client.get(f"{API}/players/{player.id}/trends",
                              params={"period": "7day", "as_of": "2026-10-12"},
                              headers=headers(make_user("head_coach")))
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        readiness = body["trend"]["trends"]["readiness_score"]
        assert readiness == {"current": 5.0, "change": 1.2, "direction": "up"}
        assert body["trend"]["alerts"] == []

    def test_default_period(self, client, make_user, headers):
        player = make_user("player")
        response = client.get(f"{API}/players/{player.id}/trends", headers=headers(player))
        assert response.status_code == 200
        assert response.json()["period"] == "14day"

    def test_invalid_period(self, client, make_user, headers):
        player = make_user("player")
        response = client.get(f"{API}/players/{player.id}/trends", params={"period": "10day"},
                              headers=headers(player))
        assert response.status_code == 422

    def test_teammate_forbidden(self, client, make_user, headers):
        player = make_user("player")
        teammate = make_user("player")
        response = client.get(f"{API}/players/{teammate.id}/trends", headers=headers(player))
        assert response.status_code == 403


class TestSquadReadiness:

    def test_overview(self, client, make_user, headers):
        fit = make_user("player")
        tired = make_user("player")
        client.put(_entry_url(fit.id), json=BEST, headers=headers(fit))
        client.put(_entry_url(tired.id), json={"sleep_quality": 1, "fatigue_level": 5}, headers=headers(tired))

        response = client.get(f"{API}/squad/readiness", params={"date": "2026-10-12"},
                              headers=headers(make_user("head_coach")))
        assert response.status_code == 200
        body = response.json()
        assert body["total_players"] == 2
        assert body["readiness_breakdown"] == {"green": 1, "amber": 0, "red": 1}
        assert body["average_readiness_score"] == 3.6
        assert body["top_concerns"][0]["player_id"] == tired.id
        assert body["top_concerns"][0]["primary_concern"] == "High fatigue + poor sleep"

    def test_players_forbidden(self, client, make_user, headers):
        response = client.get(f"{API}/squad/readiness", headers=headers(make_user("player")))
        assert response.status_code == 403


class TestImport:

    def test_coach_imports(self, client, make_user, headers):
        player = make_user("player")
        content = f"player_id,date,sleep_quality,mood\n{player.id},2026-10-01,5,5\n{player.id},2026-10-02,9,5\n"
        response = client.post(f"{API}/import", files={"file": ("wellness.csv", content, "text/csv")},
                               headers=headers(make_user("strength_coach")))
        assert response.status_code == 200
        body = response.json()
        assert body["created"] == 1
        assert [e["row"] for e in body["errors"]] == [2]

    def test_player_cannot_import(self, client, make_user, headers):
        response = client.post(f"{API}/import", files={"file": ("wellness.csv", "player_id,date\n", "text/csv")},
                               headers=headers(make_user("player")))
        assert response.status_code == 403

    def test_non_utf8_file(self, client, make_user, headers):
        response = client.post(f"{API}/import", files={"file": ("wellness.csv", b"\xff\xfe\x00bad", "text/csv")},
                               headers=headers(make_user("head_coach")))
        assert response.status_code == 400
